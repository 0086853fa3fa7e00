"""Dataclass configuration schemas for the free-fly camera.

Each subsystem has its own configuration dataclass. The top-level
``FlyCamConfig`` composes them into a single tree that can be
serialized to / deserialized from YAML.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class CameraConfig:
    """Initial camera placement and projection.

    Attributes:
        position: Initial eye position in world units.
        world_up: Vertical reference axis. Must be a unit vector.
        target: Point the camera initially looks at. Only used to
            derive the starting yaw and pitch; must differ from
            *position*.
        aspect: Viewport width / height.
        fovy_deg: Initial vertical field of view in degrees.
        znear: Near clipping plane distance.
        zfar: Far clipping plane distance.
    """

    position: tuple[float, ...] = (0.0, 1.0, 2.0)
    world_up: tuple[float, ...] = (0.0, 1.0, 0.0)
    target: tuple[float, ...] = (0.0, 0.0, 0.0)
    aspect: float = 16.0 / 9.0
    fovy_deg: float = 45.0
    znear: float = 0.1
    zfar: float = 100.0


@dataclass
class ControllerConfig:
    """Input-to-motion tuning constants.

    Attributes:
        move_speed: World units moved per frame while a movement key
            is held.
        mouse_sensitivity: Radians of yaw / pitch per unit of raw
            mouse motion.
        zoom_sensitivity: Radians of field of view per wheel line.
    """

    move_speed: float = 0.05
    mouse_sensitivity: float = 0.002
    zoom_sensitivity: float = 0.02


@dataclass
class DisplayConfig:
    """Window and frame-rate settings.

    Attributes:
        width: Window width in pixels.
        height: Window height in pixels.
        target_fps: Fixed frame rate; camera speed is per frame.
        grab_mouse: Hide and grab the cursor for relative mouse motion.
        opengl: Request an OpenGL surface for an external renderer.
        caption: Window title prefix.
    """

    width: int = 1280
    height: int = 720
    target_fps: int = 60
    grab_mouse: bool = True
    opengl: bool = False
    caption: str = "flycam"


@dataclass
class FlyCamConfig:
    """Top-level configuration composing all subsystem configs.

    Attributes:
        camera: Initial camera placement and projection.
        controller: Input-to-motion tuning constants.
        display: Window and frame-rate settings.
    """

    camera: CameraConfig = field(default_factory=CameraConfig)
    controller: ControllerConfig = field(default_factory=ControllerConfig)
    display: DisplayConfig = field(default_factory=DisplayConfig)
