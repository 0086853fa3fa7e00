"""4x4 matrix and vector utilities for the free-fly camera.

Matrices follow the column-vector convention (``m @ v``) and are
returned as row-major ``numpy.float32`` arrays. Upload them with
``transpose=True`` (or upload ``m.T``) for GLSL ``mat4`` uniforms.
"""

from __future__ import annotations

import math

import numpy as np

TWO_PI = 2.0 * math.pi

# Remaps OpenGL clip-space depth [-1, 1] to the [0, 1] range used by
# Vulkan / Metal / D3D / WebGPU: z' = 0.5 * z + 0.5 * w.
CLIP_SPACE_CORRECTION: np.ndarray = np.array([
    [1.0, 0.0, 0.0, 0.0],
    [0.0, 1.0, 0.0, 0.0],
    [0.0, 0.0, 0.5, 0.5],
    [0.0, 0.0, 0.0, 1.0],
], dtype=np.float32)
CLIP_SPACE_CORRECTION.setflags(write=False)


def normalize(v: np.ndarray) -> np.ndarray:
    """Return *v* scaled to unit length.

    A zero vector has no direction; callers that may pass one should
    check the length first.

    Args:
        v: Vector of any dimension.

    Returns:
        A float64 unit vector.
    """
    v = np.asarray(v, dtype=np.float64)
    return v / np.linalg.norm(v)


def clamp(value: float, lo: float, hi: float) -> float:
    """Clamp *value* into ``[lo, hi]``."""
    return max(lo, min(hi, value))


def wrap_angle(angle_rad: float) -> float:
    """Wrap an angle into ``[0, 2*pi)``.

    Negative angles wrap to the positive range, and the result is
    never equal to ``2*pi`` even when rounding of a tiny negative input
    would produce it.

    Args:
        angle_rad: Angle in radians, any sign or magnitude.

    Returns:
        The equivalent angle in ``[0, 2*pi)``.
    """
    wrapped = ((angle_rad % TWO_PI) + TWO_PI) % TWO_PI
    if wrapped >= TWO_PI:
        return 0.0
    return wrapped


def perspective(
    fov_y_rad: float,
    aspect: float,
    z_near: float,
    z_far: float,
) -> np.ndarray:
    """Build an OpenGL (right-handed, depth ``[-1, 1]``) projection.

    Args:
        fov_y_rad: Vertical field of view in radians.
        aspect: Width / height aspect ratio.
        z_near: Near clipping plane distance.
        z_far: Far clipping plane distance.

    Returns:
        A 4x4 float32 perspective matrix.
    """
    f = 1.0 / math.tan(0.5 * fov_y_rad)
    nf = 1.0 / (z_near - z_far)
    return np.array([
        [f / aspect, 0.0, 0.0, 0.0],
        [0.0, f, 0.0, 0.0],
        [0.0, 0.0, (z_far + z_near) * nf,
         2 * z_far * z_near * nf],
        [0.0, 0.0, -1.0, 0.0],
    ], dtype=np.float32)


def look_at(
    eye: np.ndarray,
    target: np.ndarray,
    up: np.ndarray,
) -> np.ndarray:
    """Build a view matrix looking from *eye* toward *target*.

    Args:
        eye: Camera position as a 3-element array.
        target: Look-at target position as a 3-element array.
        up: World up direction as a 3-element array.

    Returns:
        A 4x4 float32 view matrix.
    """
    eye = np.asarray(eye, dtype=np.float64)
    target = np.asarray(target, dtype=np.float64)
    up = np.asarray(up, dtype=np.float64)

    f = normalize(target - eye)
    s = normalize(np.cross(f, normalize(up)))
    u = np.cross(s, f)

    m = np.eye(4, dtype=np.float32)
    m[0, 0:3] = s
    m[1, 0:3] = u
    m[2, 0:3] = -f
    m[0, 3] = -np.dot(s, eye)
    m[1, 3] = -np.dot(u, eye)
    m[2, 3] = np.dot(f, eye)
    return m
