"""Camera matrix utilities."""

from __future__ import annotations
import numpy as np


def ensure_4x4_matrix(m) -> np.ndarray:
    """
    Convert input to 4x4 numpy array.
    
    Args:
        m: Input matrix (4x4 array or flat row-major list of 16 floats)
    
    Returns:
        4x4 float64 numpy array
    
    Raises:
        ValueError: If input cannot be reshaped to 4x4
    """
    M = np.asarray(m, dtype=np.float64)
    
    if M.shape == (16,):
        M = M.reshape(4, 4)
    
    if M.shape != (4, 4):
        raise ValueError(
            f"Expected 4x4 matrix or flat length-16 array, got shape {M.shape}"
        )
    
    return M


def invert_transform(m: np.ndarray) -> np.ndarray:
    """
    Compute inverse of 4x4 transformation matrix.
    
    Args:
        m: 4x4 transformation matrix
    
    Returns:
        Inverted 4x4 matrix (float64)
    """
    return np.linalg.inv(ensure_4x4_matrix(m))


def transform_points(m: np.ndarray, xyz: np.ndarray) -> np.ndarray:
    """Apply a 4x4 affine transform to (N, 3) points."""
    xyz = np.asarray(xyz, dtype=np.float64).reshape(-1, 3)
    M = ensure_4x4_matrix(m)
    return xyz @ M[:3, :3].T + M[:3, 3]


def to_rasterizer_layout(m: np.ndarray) -> np.ndarray:
    """
    Transpose a row-major matrix into the column-major float32 layout
    expected by GPU rasterizers.
    """
    return ensure_4x4_matrix(m).T.astype(np.float32).copy()
