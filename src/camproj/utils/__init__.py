"""Common utilities for projection."""

from .projection_2d import (
    project_points_to_ndc,
    project_points_to_screen,
)
from .validation import (
    InvalidGeometryError,
    DegenerateFieldOfViewError,
    validate_field_of_view,
    validate_clip_range,
    validate_projection_parameters,
)
from .debug import (
    is_debug_enabled,
    debug_print,
    debug_matrix_info,
    format_matrix,
)

__all__ = [
    # Projection
    "project_points_to_ndc",
    "project_points_to_screen",
    
    # Validation
    "InvalidGeometryError",
    "DegenerateFieldOfViewError",
    "validate_field_of_view",
    "validate_clip_range",
    "validate_projection_parameters",
    
    # Debug
    "is_debug_enabled",
    "debug_print",
    "debug_matrix_info",
    "format_matrix",
]
