import matplotlib
matplotlib.use("Agg")

import matplotlib.pyplot as plt
import numpy as np
import pytest

from camproj.camera.engine import compute_projection
from camproj.camera.modes import ProjectionMode
from camproj.camera.params import ProjectionParameters
from camproj.preview import (
    box_segments,
    default_preview_placement,
    make_demo_scene,
    project_segments,
    render_preview,
    save_preview_figures,
)


def test_box_segments_cover_all_edges():
    segs = box_segments((0.0, 0.0, 0.0), (2.0, 4.0, 6.0))
    assert segs.shape == (12, 2, 3)
    lengths = sorted(np.round(np.linalg.norm(segs[:, 1] - segs[:, 0], axis=1), 9))
    assert lengths == [2.0] * 4 + [4.0] * 4 + [6.0] * 4


def test_demo_scene_layout():
    scene = make_demo_scene(seed=0)
    # Ground slab plus a 26 x 26 grid of columns
    assert scene.shape == ((1 + 26 * 26) * 12, 2, 3)
    assert scene[..., 1].min() == pytest.approx(-1.0)
    assert scene[..., 1].max() < 60.0
    np.testing.assert_array_equal(scene, make_demo_scene(seed=0))


@pytest.mark.parametrize("mode", list(ProjectionMode))
def test_projected_segments_stay_inside_clip_square(mode):
    params = ProjectionParameters()
    projection, placement = compute_projection(mode, params)
    visible = project_segments(make_demo_scene(seed=1), projection, placement if placement is not None else default_preview_placement())

    assert len(visible) > 0
    assert np.abs(visible).max() <= 1.0


def test_render_preview_draws_into_axes():
    fig, ax = plt.subplots()
    out = render_preview(ProjectionMode.ISOMETRIC, ProjectionParameters(), ax=ax)
    assert out is ax
    assert len(ax.collections) == 1
    assert ax.get_title().startswith("Isometric")
    plt.close(fig)


def test_save_preview_figures(tmp_path):
    paths = save_preview_figures(ProjectionParameters(), str(tmp_path), seed=3, dpi=40)
    assert len(paths) == 3
    for path in paths:
        assert (tmp_path / path.split("/")[-1]).stat().st_size > 0
