"""Host renderer collaborators: camera, surface, orbit controls."""

from .camera import Camera
from .surface import Viewport, RenderSurface, fit_viewport
from .orbit import OrbitControls, build_orbit_placement
from .controller import ProjectionController

__all__ = [
    "Camera",
    "Viewport",
    "RenderSurface",
    "fit_viewport",
    "OrbitControls",
    "build_orbit_placement",
    "ProjectionController",
]
