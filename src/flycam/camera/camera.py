"""Free-fly camera model.

Orientation is stored only as ``yaw`` / ``pitch`` (radians); the look
direction is always derived from them by :meth:`Camera.get_front`.
Yaw rotates in the X-Z plane starting at +X, pitch tilts toward +Y.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

import numpy as np

from flycam.math_utils.transforms import (
    CLIP_SPACE_CORRECTION,
    look_at,
    normalize,
    perspective,
)

if TYPE_CHECKING:
    from flycam.config.schema import CameraConfig

_MIN_DIRECTION_LENGTH = 1e-12


class DegenerateDirectionError(ValueError):
    """Raised when a look direction has zero length."""


class Camera:
    """Eye position, yaw/pitch orientation and perspective frustum.

    Args:
        position: Eye position in world space.
        world_up: Vertical reference axis. Used as given, so pass a
            unit vector.
        target: Point to look at initially. Only used to derive the
            starting yaw and pitch.
        aspect: Viewport width / height.
        fovy: Vertical field of view in radians.
        znear: Near clipping plane distance.
        zfar: Far clipping plane distance.

    Raises:
        DegenerateDirectionError: If *target* equals *position*.
    """

    def __init__(
        self,
        position: np.ndarray,
        world_up: np.ndarray,
        target: np.ndarray,
        aspect: float,
        fovy: float,
        znear: float,
        zfar: float,
    ) -> None:
        self.position = np.array(position, dtype=np.float64)
        self.world_up = np.array(world_up, dtype=np.float64)
        self.yaw: float = 0.0
        self.pitch: float = 0.0
        self.aspect = aspect
        self.fovy = fovy
        self.znear = znear
        self.zfar = zfar
        self.point_at(target)

    @classmethod
    def from_config(cls, config: CameraConfig) -> Camera:
        """Build a camera from the ``camera`` config section."""
        return cls(
            position=np.array(config.position),
            world_up=np.array(config.world_up),
            target=np.array(config.target),
            aspect=config.aspect,
            fovy=math.radians(config.fovy_deg),
            znear=config.znear,
            zfar=config.zfar,
        )

    def point_at(self, target: np.ndarray) -> None:
        """Turn the camera so that it faces *target*.

        Args:
            target: World-space point to look at.

        Raises:
            DegenerateDirectionError: If *target* coincides with the
                camera position.
        """
        offset = np.asarray(target, dtype=np.float64) - self.position
        if np.linalg.norm(offset) < _MIN_DIRECTION_LENGTH:
            raise DegenerateDirectionError(
                f"Cannot point camera at {tuple(offset + self.position)}: "
                f"target coincides with position {tuple(self.position)}"
            )
        direction = normalize(offset)
        self.yaw = math.atan2(direction[2], direction[0])
        self.pitch = math.asin(float(np.clip(direction[1], -1.0, 1.0)))

    def get_front(self) -> np.ndarray:
        """Unit look direction derived from yaw and pitch."""
        cos_pitch = math.cos(self.pitch)
        return np.array([
            math.cos(self.yaw) * cos_pitch,
            math.sin(self.pitch),
            math.sin(self.yaw) * cos_pitch,
        ])

    def get_view_matrix(self) -> np.ndarray:
        """World-to-eye transform looking one unit ahead along the front."""
        return look_at(
            self.position,
            self.position + self.get_front(),
            self.world_up,
        )

    def get_projection_matrix(self) -> np.ndarray:
        """OpenGL-convention perspective matrix (depth in ``[-1, 1]``)."""
        return perspective(self.fovy, self.aspect, self.znear, self.zfar)

    def get_view_projection_matrix(self) -> np.ndarray:
        """Combined view-projection matrix with depth mapped to ``[0, 1]``.

        Recomputed on every call from the current camera state.

        Returns:
            A 4x4 float32 matrix for the column-vector convention.
        """
        return (
            CLIP_SPACE_CORRECTION
            @ self.get_projection_matrix()
            @ self.get_view_matrix()
        )

    def __repr__(self) -> str:
        x, y, z = self.position
        return (
            f"Camera(position=({x:.3f}, {y:.3f}, {z:.3f}), "
            f"yaw={math.degrees(self.yaw):.1f}deg, "
            f"pitch={math.degrees(self.pitch):.1f}deg, "
            f"fovy={math.degrees(self.fovy):.1f}deg)"
        )
