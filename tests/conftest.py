import numpy as np
import pytest

from camproj.camera.params import ProjectionParameters


@pytest.fixture
def default_params():
    return ProjectionParameters()


def to_ndc(matrix, point):
    """Apply a 4x4 matrix to a 3D point and do the homogeneous divide."""
    clip = np.asarray(matrix) @ np.append(np.asarray(point, dtype=np.float64), 1.0)
    return clip[:3] / clip[3]
