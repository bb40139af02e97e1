"""
camproj - Camera projection for interactive viewers

Derives the camera-to-clip projection matrix for perspective,
orthographic and isometric viewing from a small set of tunable
parameters, and keeps the host viewport at the matching aspect ratio.

Components:
    - Camera: Parameters, modes and matrix derivation
    - Host: Camera slots, render surface, orbit controls, controller
    - Utils: Validation, point projection, debugging

Example:
    >>> from camproj import Camera, RenderSurface, ProjectionController
    >>> 
    >>> camera = Camera()
    >>> surface = RenderSurface(1280, 720)
    >>> controller = ProjectionController(camera, surface)
    >>> 
    >>> controller.set_mode("Isometric")
    >>> controller.set_parameter("ortho_width", 1000)
    >>> surface.viewport
"""

__version__ = "1.0.0"

# Camera
from .camera import (
    ProjectionMode,
    ProjectionParameters,
    ProjectionResult,
    compute_projection,
    viewport_aspect_ratio,
    build_perspective_matrix,
    build_orthographic_matrix,
    build_isometric_placement,
    make_projection_from_yaml,
)

# Host
from .host import (
    Camera,
    RenderSurface,
    Viewport,
    OrbitControls,
    ProjectionController,
)

# Utils
from .utils import (
    InvalidGeometryError,
    DegenerateFieldOfViewError,
    validate_projection_parameters,
    project_points_to_ndc,
    project_points_to_screen,
    debug_print,
    is_debug_enabled,
)

__all__ = [
    "__version__",
    
    # Camera
    "ProjectionMode",
    "ProjectionParameters",
    "ProjectionResult",
    "compute_projection",
    "viewport_aspect_ratio",
    "build_perspective_matrix",
    "build_orthographic_matrix",
    "build_isometric_placement",
    "make_projection_from_yaml",
    
    # Host
    "Camera",
    "RenderSurface",
    "Viewport",
    "OrbitControls",
    "ProjectionController",
    
    # Utils
    "InvalidGeometryError",
    "DegenerateFieldOfViewError",
    "validate_projection_parameters",
    "project_points_to_ndc",
    "project_points_to_screen",
    "debug_print",
    "is_debug_enabled",
]
