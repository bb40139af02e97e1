"""2D projection utilities."""

from __future__ import annotations
from typing import Optional, Tuple
import numpy as np


def project_points_to_ndc(
    xyz: np.ndarray,
    proj_matrix: np.ndarray,
    view_matrix: Optional[np.ndarray] = None
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Project 3D points to normalized device coordinates.
    
    Args:
        xyz: (N, 3) positions (camera space, or world space if view_matrix is given)
        proj_matrix: (4, 4) row-major projection matrix
        view_matrix: Optional (4, 4) world-to-camera transform
    
    Returns:
        ndc: (N, 3) NDC positions (NaN where the divide is invalid)
        valid: (N,) boolean mask, True where w > 0 and the result is finite
    """
    xyz = np.asarray(xyz, dtype=np.float64).reshape(-1, 3)
    N = xyz.shape[0]
    
    xyz_homogeneous = np.concatenate([xyz, np.ones((N, 1))], axis=1)
    
    full = np.asarray(proj_matrix, dtype=np.float64)
    if view_matrix is not None:
        full = full @ np.asarray(view_matrix, dtype=np.float64)
    
    clip = xyz_homogeneous @ full.T
    w = clip[:, 3]
    
    valid = np.isfinite(clip).all(axis=1) & (w > 0)
    
    ndc = np.full((N, 3), np.nan)
    ndc[valid] = clip[valid, :3] / w[valid, None]
    
    return ndc, valid


def project_points_to_screen(
    xyz: np.ndarray,
    proj_matrix: np.ndarray,
    width: int,
    height: int,
    view_matrix: Optional[np.ndarray] = None
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Project 3D points to 2D screen coordinates.
    
    Args:
        xyz: (N, 3) positions
        proj_matrix: (4, 4) row-major projection matrix
        width: Viewport width in pixels
        height: Viewport height in pixels
        view_matrix: Optional (4, 4) world-to-camera transform
    
    Returns:
        means2D: (N, 2) screen coordinates (u, v), origin top-left
        valid: (N,) boolean mask for valid projections
    
    Notes:
        - Points behind the camera (w <= 0) are invalid
        - Invalid points set to (-1e6, -1e6)
    """
    ndc, valid = project_points_to_ndc(xyz, proj_matrix, view_matrix)
    
    u = (ndc[:, 0] * 0.5 + 0.5) * float(width)
    v = (-ndc[:, 1] * 0.5 + 0.5) * float(height)
    
    means2D = np.stack([u, v], axis=1)
    means2D[~valid] = np.array([-1e6, -1e6])
    
    return means2D, valid
