"""
Wireframe preview of the demo scene under each projection mode.

The scene is the classic projection demo: a grey ground slab with a grid
of randomly sized columns. It is kept as plain line segments; there is no
scene graph.
"""

from __future__ import annotations
import os
from typing import List, Optional, Sequence
import numpy as np
import matplotlib.pyplot as plt
from matplotlib.collections import LineCollection

from .camera.engine import compute_projection, viewport_aspect_ratio
from .camera.modes import ProjectionMode
from .camera.params import ProjectionParameters
from .camera.utils import invert_transform
from .host.orbit import build_orbit_placement
from .utils.projection_2d import project_points_to_ndc
from .utils.debug import debug_print

GROUND_SIZE = (510.0, 1.0, 510.0)
COLUMN_FOOTPRINT = 15.0
COLUMN_SPACING = 20
COLUMN_EXTENT = 250
COLUMN_MIN_HEIGHT = 5.0
COLUMN_HEIGHT_RANGE = 55.0

PREVIEW_DISTANCE = 600.0
PREVIEW_YAW = 30.0
PREVIEW_PITCH = 25.0

# Corner index pairs of an axis-aligned box
_BOX_EDGES = np.array([
    [0, 1], [1, 3], [3, 2], [2, 0],
    [4, 5], [5, 7], [7, 6], [6, 4],
    [0, 4], [1, 5], [2, 6], [3, 7],
])


def box_segments(center: Sequence[float], size: Sequence[float]) -> np.ndarray:
    """(12, 2, 3) edge segments of an axis-aligned box."""
    center = np.asarray(center, dtype=np.float64)
    half = np.asarray(size, dtype=np.float64) / 2.0
    signs = np.array([[x, y, z] for x in (-1, 1) for y in (-1, 1) for z in (-1, 1)], dtype=np.float64)
    corners = center + signs * half
    return corners[_BOX_EDGES]


def make_demo_scene(seed: Optional[int] = None) -> np.ndarray:
    """
    Ground slab plus a grid of columns.
    
    Args:
        seed: Seed for the column heights (None for a random scene)
    
    Returns:
        (M, 2, 3) line segments in world space
    """
    rng = np.random.default_rng(seed)
    segments = [box_segments((0.0, -0.5, 0.0), GROUND_SIZE)]
    
    for i in range(-COLUMN_EXTENT, COLUMN_EXTENT + 1, COLUMN_SPACING):
        for j in range(-COLUMN_EXTENT, COLUMN_EXTENT + 1, COLUMN_SPACING):
            height = rng.random() * COLUMN_HEIGHT_RANGE + COLUMN_MIN_HEIGHT
            segments.append(box_segments(
                (float(i), height / 2.0, float(j)),
                (COLUMN_FOOTPRINT, height, COLUMN_FOOTPRINT),
            ))
    
    return np.concatenate(segments, axis=0)


def default_preview_placement() -> np.ndarray:
    """Orbit placement used for non-isometric previews."""
    return build_orbit_placement(np.zeros(3), PREVIEW_DISTANCE, PREVIEW_YAW, PREVIEW_PITCH)


def project_segments(
    segments: np.ndarray,
    projection: np.ndarray,
    placement: np.ndarray
) -> np.ndarray:
    """
    Project world-space segments to NDC x/y.
    
    Segments with an endpoint outside the clip volume are dropped.
    
    Returns:
        (K, 2, 2) visible segments in NDC
    """
    segments = np.asarray(segments, dtype=np.float64)
    ndc, valid = project_points_to_ndc(
        segments.reshape(-1, 3), projection, invert_transform(placement)
    )
    
    inside = valid & np.all(np.abs(np.nan_to_num(ndc, nan=np.inf)) <= 1.0, axis=1)
    keep = inside.reshape(-1, 2).all(axis=1)
    
    return ndc.reshape(-1, 2, 3)[keep, :, :2]


def render_preview(
    mode: ProjectionMode,
    params: ProjectionParameters,
    segments: Optional[np.ndarray] = None,
    placement: Optional[np.ndarray] = None,
    ax=None
):
    """
    Draw the projected wireframe for one mode.
    
    Args:
        mode: Projection mode
        params: Parameter record
        segments: (M, 2, 3) world-space segments (default: demo scene, seed 0)
        placement: Camera placement; ignored in isometric mode, which
            installs its own fixed placement
        ax: Matplotlib axes (a new figure is created if None)
    
    Returns:
        The axes drawn into
    """
    if segments is None:
        segments = make_demo_scene(seed=0)
    
    projection, override = compute_projection(mode, params)
    if override is not None:
        placement = override
    elif placement is None:
        placement = default_preview_placement()
    
    visible = project_segments(segments, projection, placement)
    aspect = viewport_aspect_ratio(mode, params)
    
    if ax is None:
        _, ax = plt.subplots(figsize=(8, 8 / aspect))
    
    ax.add_collection(LineCollection(visible, colors='#37474F', linewidths=0.4))
    ax.set_xlim(-1.0, 1.0)
    ax.set_ylim(-1.0, 1.0)
    ax.set_aspect(1.0 / aspect)
    ax.set_title(f"{mode.value} ({len(visible)} segments)")
    ax.set_xticks([])
    ax.set_yticks([])
    
    debug_print(f"[Preview] {mode.value}: {len(visible)}/{len(segments)} segments visible")
    return ax


def save_preview_figures(
    params: ProjectionParameters,
    out_dir: str,
    seed: Optional[int] = 0,
    dpi: int = 120
) -> List[str]:
    """Render every mode of the demo scene to PNG files in out_dir."""
    os.makedirs(out_dir, exist_ok=True)
    segments = make_demo_scene(seed=seed)
    
    paths = []
    for mode in ProjectionMode:
        aspect = viewport_aspect_ratio(mode, params)
        fig, ax = plt.subplots(figsize=(8, 8 / aspect))
        render_preview(mode, params, segments=segments, ax=ax)
        path = os.path.join(out_dir, f"preview_{mode.value.lower()}.png")
        fig.savefig(path, dpi=dpi, bbox_inches='tight')
        plt.close(fig)
        paths.append(path)
    
    return paths
