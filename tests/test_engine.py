import math

import numpy as np
import pytest

from camproj.camera import engine
from camproj.camera.engine import compute_projection, viewport_aspect_ratio
from camproj.camera.modes import (
    IsometricView,
    OrthographicView,
    PerspectiveView,
    ProjectionMode,
    select_view,
)
from camproj.camera.params import ProjectionParameters
from camproj.camera.placement import (
    ISOMETRIC_DISTANCE,
    build_isometric_placement,
    make_euler_rotation,
)
from camproj.camera.projection import build_orthographic_matrix, build_perspective_matrix
from camproj.camera.utils import invert_transform
from conftest import to_ndc


def test_defaults():
    p = ProjectionParameters()
    assert p.vertical_fov_degrees == 60.0
    assert p.aspect_ratio == pytest.approx(1.777)
    assert p.near_clip == 1.0
    assert p.far_clip == 2000.0
    assert p.ortho_width == 800.0
    assert p.ortho_height == pytest.approx(450.196)


def test_select_view_dispatches_per_mode(default_params):
    assert isinstance(select_view(ProjectionMode.PERSPECTIVE, default_params), PerspectiveView)
    assert isinstance(select_view(ProjectionMode.ORTHOGRAPHIC, default_params), OrthographicView)
    iso = select_view(ProjectionMode.ISOMETRIC, default_params)
    assert isinstance(iso, IsometricView)
    assert iso.as_orthographic() == select_view(ProjectionMode.ORTHOGRAPHIC, default_params)


def test_select_view_accepts_mode_names(default_params):
    assert select_view("Perspective", default_params) == select_view(ProjectionMode.PERSPECTIVE, default_params)
    assert isinstance(select_view("isometric", default_params), IsometricView)


def test_select_view_rejects_unknown_mode(default_params):
    with pytest.raises(ValueError, match="Unknown projection mode"):
        select_view("fisheye", default_params)


@pytest.mark.parametrize("mode", list(ProjectionMode))
def test_engine_accepts_mode_values(mode, default_params):
    by_name = compute_projection(mode.value, default_params)
    by_member = compute_projection(mode, default_params)
    np.testing.assert_array_equal(by_name.projection, by_member.projection)
    assert viewport_aspect_ratio(mode.value, default_params) == viewport_aspect_ratio(mode, default_params)


def test_unhandled_view_type_is_not_treated_as_orthographic(monkeypatch, default_params):
    class ObliqueView:
        pass

    monkeypatch.setattr(engine, "select_view", lambda mode, params: ObliqueView())
    with pytest.raises(ValueError, match="ObliqueView"):
        compute_projection(ProjectionMode.ORTHOGRAPHIC, default_params)
    with pytest.raises(ValueError, match="ObliqueView"):
        viewport_aspect_ratio(ProjectionMode.ORTHOGRAPHIC, default_params)


@pytest.mark.parametrize("text,expected", [
    ("Perspective", ProjectionMode.PERSPECTIVE),
    ("orthographic", ProjectionMode.ORTHOGRAPHIC),
    (" ISOMETRIC ", ProjectionMode.ISOMETRIC),
    (ProjectionMode.ISOMETRIC, ProjectionMode.ISOMETRIC),
])
def test_mode_parse(text, expected):
    assert ProjectionMode.parse(text) is expected


def test_mode_parse_unknown():
    with pytest.raises(ValueError, match="Unknown projection mode"):
        ProjectionMode.parse("fisheye")


def test_perspective_branch(default_params):
    projection, placement = compute_projection(ProjectionMode.PERSPECTIVE, default_params)
    expected = build_perspective_matrix(60.0, 1.777, 1.0, 2000.0)
    np.testing.assert_array_equal(projection, expected)
    assert placement is None


def test_orthographic_branch(default_params):
    projection, placement = compute_projection(ProjectionMode.ORTHOGRAPHIC, default_params)
    np.testing.assert_array_equal(projection, build_orthographic_matrix(800.0, 450.196, 1.0, 2000.0))
    assert placement is None


def test_isometric_shares_orthographic_matrix(default_params):
    ortho, _ = compute_projection(ProjectionMode.ORTHOGRAPHIC, default_params)
    iso, placement = compute_projection(ProjectionMode.ISOMETRIC, default_params)
    np.testing.assert_array_equal(iso, ortho)
    np.testing.assert_array_equal(placement, build_isometric_placement())


def test_isometric_ignores_field_of_view(default_params):
    a, _ = compute_projection(ProjectionMode.ISOMETRIC, default_params)
    b, _ = compute_projection(ProjectionMode.ISOMETRIC, default_params.with_changes(vertical_fov_degrees=10))
    np.testing.assert_array_equal(a, b)


@pytest.mark.parametrize("mode", list(ProjectionMode))
def test_recompute_is_bit_identical(mode, default_params):
    first = compute_projection(mode, default_params)
    second = compute_projection(mode, default_params)
    assert first.projection.tobytes() == second.projection.tobytes()
    if first.placement is None:
        assert second.placement is None
    else:
        assert first.placement.tobytes() == second.placement.tobytes()


def test_switching_modes_leaves_no_residue(default_params):
    before, _ = compute_projection(ProjectionMode.PERSPECTIVE, default_params)
    compute_projection(ProjectionMode.ISOMETRIC, default_params)
    compute_projection(ProjectionMode.ORTHOGRAPHIC, default_params)
    after, _ = compute_projection(ProjectionMode.PERSPECTIVE, default_params)
    assert before.tobytes() == after.tobytes()


def test_viewport_aspect_ratio_tracks_edits(default_params):
    assert viewport_aspect_ratio(ProjectionMode.PERSPECTIVE, default_params) == pytest.approx(1.777)
    for mode in (ProjectionMode.ORTHOGRAPHIC, ProjectionMode.ISOMETRIC):
        assert viewport_aspect_ratio(mode, default_params) == pytest.approx(800.0 / 450.196)

    edited = default_params.with_changes(aspect_ratio=2.5, ortho_width=300, ortho_height=100)
    assert viewport_aspect_ratio(ProjectionMode.PERSPECTIVE, edited) == pytest.approx(2.5)
    assert viewport_aspect_ratio(ProjectionMode.ORTHOGRAPHIC, edited) == pytest.approx(3.0)
    assert viewport_aspect_ratio(ProjectionMode.ISOMETRIC, edited) == pytest.approx(3.0)


def test_euler_rotation_is_orthonormal():
    R = make_euler_rotation(-35.264, 45.0, 12.0)
    np.testing.assert_allclose(R[:3, :3].T @ R[:3, :3], np.eye(3), atol=1e-12)
    assert np.linalg.det(R[:3, :3]) == pytest.approx(1.0)


def test_isometric_camera_sits_on_the_diagonal():
    placement = build_isometric_placement()
    expected = ISOMETRIC_DISTANCE / math.sqrt(3.0)
    np.testing.assert_allclose(placement[:3, 3], (expected, expected, expected), atol=0.01)
    assert np.linalg.norm(placement[:3, 3]) == pytest.approx(ISOMETRIC_DISTANCE)


def test_isometric_camera_looks_at_origin(default_params):
    projection, placement = compute_projection(ProjectionMode.ISOMETRIC, default_params)
    view = invert_transform(placement)

    origin_cam = view @ np.array([0.0, 0.0, 0.0, 1.0])
    np.testing.assert_allclose(origin_cam[:3], (0.0, 0.0, -ISOMETRIC_DISTANCE), atol=1e-9)

    ndc = to_ndc(projection, origin_cam[:3])
    np.testing.assert_allclose(ndc[:2], (0.0, 0.0), atol=1e-12)
    assert -1.0 < ndc[2] < 1.0


def test_isometric_foreshortens_all_axes_equally():
    view = invert_transform(build_isometric_placement())
    # Screen-plane images of the world unit axes
    axes = [view[:2, i] for i in range(3)]

    lengths = [np.linalg.norm(a) for a in axes]
    np.testing.assert_allclose(lengths, [math.sqrt(2.0 / 3.0)] * 3, rtol=1e-4)

    def area(u, v):
        return abs(u[0] * v[1] - u[1] * v[0])

    areas = [area(axes[0], axes[1]), area(axes[1], axes[2]), area(axes[0], axes[2])]
    np.testing.assert_allclose(areas, [areas[0]] * 3, rtol=1e-4)
    assert areas[0] == pytest.approx(1.0 / math.sqrt(3.0), rel=1e-4)


def test_isometric_vertical_axis_stays_upright():
    view = invert_transform(build_isometric_placement())
    up = view[:2, 1]
    assert up[0] == pytest.approx(0.0, abs=1e-12)
    assert up[1] > 0.0
