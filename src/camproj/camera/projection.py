"""Projection matrix construction."""

from __future__ import annotations
from typing import NamedTuple, Tuple
import math
import numpy as np


class FrustumBounds(NamedTuple):
    """Side planes of a frustum at the near clip distance."""
    left: float
    right: float
    bottom: float
    top: float


def compute_frustum_bounds(
    vertical_fov_degrees: float,
    aspect_ratio: float,
    near_clip: float
) -> FrustumBounds:
    """
    Compute symmetric frustum side planes on the near plane.
    
    top = near * tan(fov / 2), right = top * aspect.
    
    Args:
        vertical_fov_degrees: Full vertical field of view in degrees
        aspect_ratio: Width / height
        near_clip: Near plane distance
    
    Returns:
        FrustumBounds(left, right, bottom, top)
    """
    top = near_clip * math.tan(math.radians(vertical_fov_degrees) / 2.0)
    right = top * aspect_ratio
    return FrustumBounds(left=-right, right=right, bottom=-top, top=top)


def build_frustum_matrix(
    left: float,
    right: float,
    bottom: float,
    top: float,
    znear: float,
    zfar: float
) -> np.ndarray:
    """
    Build OpenGL-style perspective projection matrix from frustum planes.
    
    The camera looks down -Z. A point at distance znear in front of the
    camera lands on NDC z = -1, a point at zfar on NDC z = +1, and
    clip.w = -z_cam.
    
    Args:
        left, right, bottom, top: Side planes at the near distance
        znear, zfar: Near and far clipping distances
    
    Returns:
        4x4 projection matrix (row-major, float64)
    """
    n, f = float(znear), float(zfar)
    r, l, t, b = float(right), float(left), float(top), float(bottom)
    
    P = np.zeros((4, 4), dtype=np.float64)
    
    P[0, 0] = (2.0 * n) / (r - l)
    P[0, 2] = (r + l) / (r - l)
    P[1, 1] = (2.0 * n) / (t - b)
    P[1, 2] = (t + b) / (t - b)
    
    # Depth encoding
    P[2, 2] = -(f + n) / (f - n)
    P[2, 3] = (-2.0 * f * n) / (f - n)
    
    # Perspective division: clip.w = -z_cam
    P[3, 2] = -1.0
    
    return P


def build_perspective_matrix(
    vertical_fov_degrees: float,
    aspect_ratio: float,
    znear: float,
    zfar: float
) -> np.ndarray:
    """
    Build a symmetric perspective projection from field of view and aspect.
    
    Returns:
        4x4 projection matrix (row-major, float64)
    """
    bounds = compute_frustum_bounds(vertical_fov_degrees, aspect_ratio, znear)
    return build_frustum_matrix(
        bounds.left, bounds.right, bounds.bottom, bounds.top, znear, zfar
    )


def compute_orthographic_components(
    width: float,
    height: float,
    znear: float,
    zfar: float
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Translation and scale that normalize an orthographic view box.
    
    The box spans [-w/2, w/2] x [-h/2, h/2] horizontally and the distances
    [znear, zfar] in front of the camera, i.e. z_cam in [-zfar, -znear].
    
    Returns:
        translation: (3,) shift applied first, moving the depth centre to z = 0
        scale: (3,) unsigned scale (2/w, 2/h, 2/(f-n)); Z is negated when
            the matrix is assembled
    """
    n, f = float(znear), float(zfar)
    # Shift by (f + n) / 2, not (f - n) / 2: only the former puts the box
    # centre at z = 0 and the near/far planes on the clip-cube faces.
    translation = np.array([0.0, 0.0, (f + n) / 2.0])
    scale = np.array([2.0 / float(width), 2.0 / float(height), 2.0 / (f - n)])
    return translation, scale


def build_orthographic_matrix(
    width: float,
    height: float,
    znear: float,
    zfar: float
) -> np.ndarray:
    """
    Build an orthographic projection as Scale * Translation.
    
    The translation recentres the depth range in camera units, then the
    scale normalizes the box to the clip cube [-1, 1]^3. The Z scale is
    negated so that the near plane maps to -1 and the far plane to +1.
    
    Returns:
        4x4 projection matrix (row-major, float64)
    """
    translation, scale = compute_orthographic_components(width, height, znear, zfar)
    
    T = np.eye(4, dtype=np.float64)
    T[:3, 3] = translation
    
    S = np.diag([scale[0], scale[1], -scale[2], 1.0])
    
    return S @ T
