"""Camera projection system."""

from .utils import (
    ensure_4x4_matrix,
    invert_transform,
    transform_points,
    to_rasterizer_layout,
)
from .params import ProjectionParameters
from .modes import (
    ProjectionMode,
    DEFAULT_MODE,
    PerspectiveView,
    OrthographicView,
    IsometricView,
    select_view,
)
from .projection import (
    FrustumBounds,
    compute_frustum_bounds,
    build_frustum_matrix,
    build_perspective_matrix,
    compute_orthographic_components,
    build_orthographic_matrix,
)
from .placement import (
    make_translation,
    make_euler_rotation,
    build_isometric_placement,
)
from .engine import ProjectionResult, compute_projection, viewport_aspect_ratio
from .config import (
    mode_from_config,
    parameters_from_config,
    make_projection_from_yaml,
)

__all__ = [
    "ensure_4x4_matrix",
    "invert_transform",
    "transform_points",
    "to_rasterizer_layout",
    "ProjectionParameters",
    "ProjectionMode",
    "DEFAULT_MODE",
    "PerspectiveView",
    "OrthographicView",
    "IsometricView",
    "select_view",
    "FrustumBounds",
    "compute_frustum_bounds",
    "build_frustum_matrix",
    "build_perspective_matrix",
    "compute_orthographic_components",
    "build_orthographic_matrix",
    "make_translation",
    "make_euler_rotation",
    "build_isometric_placement",
    "ProjectionResult",
    "compute_projection",
    "viewport_aspect_ratio",
    "mode_from_config",
    "parameters_from_config",
    "make_projection_from_yaml",
]
