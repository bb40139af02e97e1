import math

import pytest

from camproj.camera.params import ProjectionParameters
from camproj.utils.validation import (
    DegenerateFieldOfViewError,
    InvalidGeometryError,
    validate_projection_parameters,
)


def test_defaults_are_valid():
    assert ProjectionParameters().validate() == ProjectionParameters()


@pytest.mark.parametrize("changes", [
    {"near_clip": 5.0, "far_clip": 5.0},
    {"near_clip": 10.0, "far_clip": 5.0},
    {"near_clip": 0.0},
    {"near_clip": -1.0},
    {"far_clip": math.inf},
    {"aspect_ratio": 0.0},
    {"aspect_ratio": -1.5},
    {"ortho_width": 0.0},
    {"ortho_height": -450.0},
    {"ortho_width": math.nan},
])
def test_invalid_geometry_is_rejected(changes):
    params = ProjectionParameters().with_changes(**changes)
    with pytest.raises(InvalidGeometryError):
        validate_projection_parameters(params)


@pytest.mark.parametrize("fov", [0.0, -10.0, 180.0, 270.0, math.nan])
def test_degenerate_field_of_view_is_rejected(fov):
    params = ProjectionParameters().with_changes(vertical_fov_degrees=fov)
    with pytest.raises(DegenerateFieldOfViewError):
        params.validate()


def test_errors_are_value_errors():
    assert issubclass(InvalidGeometryError, ValueError)
    assert issubclass(DegenerateFieldOfViewError, ValueError)


def test_equal_clip_planes_message_names_both_values():
    params = ProjectionParameters(near_clip=5.0, far_clip=5.0)
    with pytest.raises(InvalidGeometryError, match="near=5.0 far=5.0"):
        params.validate()


def test_with_changes_rejects_unknown_fields():
    with pytest.raises(KeyError, match="fov"):
        ProjectionParameters().with_changes(fov=45)


def test_with_changes_coerces_to_float():
    params = ProjectionParameters().with_changes(ortho_width=1000)
    assert isinstance(params.ortho_width, float)
    assert params.ortho_width == 1000.0
