"""Host camera object with projection and placement slots."""

from __future__ import annotations
import numpy as np

from ..camera.utils import ensure_4x4_matrix, invert_transform


class Camera:
    """
    Camera as seen by the host renderer.
    
    Holds two independent slots: the camera-to-clip projection matrix
    and the camera's local-to-parent placement. Both are row-major 4x4.
    The projection starts as identity, which shows nothing useful until a
    projection is applied.
    """

    def __init__(self):
        self._projection = np.eye(4, dtype=np.float64)
        self._local_to_parent = np.eye(4, dtype=np.float64)

    @property
    def projection_matrix(self) -> np.ndarray:
        return self._projection.copy()

    def set_projection_matrix(self, m) -> None:
        self._projection = ensure_4x4_matrix(m).copy()

    @property
    def local_to_parent(self) -> np.ndarray:
        return self._local_to_parent.copy()

    def set_local_to_parent(self, m) -> None:
        self._local_to_parent = ensure_4x4_matrix(m).copy()

    @property
    def position(self) -> np.ndarray:
        return self._local_to_parent[:3, 3].copy()

    @property
    def view_matrix(self) -> np.ndarray:
        """Parent-to-camera transform (inverse of the placement)."""
        return invert_transform(self._local_to_parent)
