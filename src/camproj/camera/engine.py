"""Mode-dependent projection derivation."""

from __future__ import annotations
from typing import NamedTuple, Optional, Union
import numpy as np

from .modes import (
    ProjectionMode,
    PerspectiveView,
    OrthographicView,
    IsometricView,
    select_view,
)
from .params import ProjectionParameters
from .projection import build_perspective_matrix, build_orthographic_matrix
from .placement import build_isometric_placement


class ProjectionResult(NamedTuple):
    """
    Output of one projection derivation.
    
    Attributes:
        projection: (4, 4) row-major camera-to-clip matrix
        placement: (4, 4) camera local-to-parent override, or None when the
            placement is left to the orbit controller
    """
    projection: np.ndarray
    placement: Optional[np.ndarray]


def _orthographic(view: OrthographicView) -> np.ndarray:
    return build_orthographic_matrix(view.width, view.height, view.near_clip, view.far_clip)


def compute_projection(
    mode: Union[ProjectionMode, str],
    params: ProjectionParameters
) -> ProjectionResult:
    """
    Derive the projection matrix (and isometric placement) for a mode.
    
    The derivation trusts its inputs: parameters are expected to have been
    validated where they were edited. Nothing is cached, so equal inputs
    always give identical outputs.
    
    Args:
        mode: Active projection mode
        params: Full parameter record
    
    Returns:
        ProjectionResult(projection, placement)
    """
    view = select_view(mode, params)
    
    if isinstance(view, PerspectiveView):
        projection = build_perspective_matrix(
            view.vertical_fov_degrees, view.aspect_ratio, view.near_clip, view.far_clip
        )
        return ProjectionResult(projection, None)
    
    if isinstance(view, IsometricView):
        projection = _orthographic(view.as_orthographic())
        return ProjectionResult(projection, build_isometric_placement())
    
    if isinstance(view, OrthographicView):
        return ProjectionResult(_orthographic(view), None)
    
    raise ValueError(f"No projection derivation for {type(view).__name__}")


def viewport_aspect_ratio(mode: Union[ProjectionMode, str], params: ProjectionParameters) -> float:
    """
    Aspect ratio the rendering viewport must use for the active projection.
    
    Returns:
        aspect_ratio in perspective mode, ortho_width / ortho_height otherwise
    """
    view = select_view(mode, params)
    if isinstance(view, PerspectiveView):
        return float(view.aspect_ratio)
    if isinstance(view, (OrthographicView, IsometricView)):
        return float(view.width) / float(view.height)
    raise ValueError(f"No viewport aspect for {type(view).__name__}")
