"""Host-side projection controller."""

from __future__ import annotations
from typing import Optional, Union

from ..camera.engine import ProjectionResult, compute_projection, viewport_aspect_ratio
from ..camera.modes import DEFAULT_MODE, ProjectionMode
from ..camera.params import ProjectionParameters
from ..utils.debug import debug_print, debug_matrix_info
from .camera import Camera
from .orbit import OrbitControls
from .surface import RenderSurface, Viewport


class ProjectionController:
    """
    Owns the projection mode and parameters for one camera.
    
    Construction and every accepted edit trigger the same sequence: derive the projection,
    write it (and the isometric placement, if any) into the camera, then
    resize the surface to the projection's aspect ratio. Edits are
    validated before they are stored; a rejected edit raises and leaves
    the controller unchanged.
    
    While in isometric mode the orbit controller is not updated, so it
    cannot overwrite the fixed isometric placement.
    """

    def __init__(
        self,
        camera: Camera,
        surface: RenderSurface,
        orbit: Optional[OrbitControls] = None,
        params: Optional[ProjectionParameters] = None,
        mode: Union[ProjectionMode, str] = DEFAULT_MODE
    ):
        self.camera = camera
        self.surface = surface
        self.orbit = orbit
        self._params = (params or ProjectionParameters()).validate()
        self._mode = ProjectionMode.parse(mode)
        self.apply_projection()

    @property
    def mode(self) -> ProjectionMode:
        return self._mode

    @property
    def parameters(self) -> ProjectionParameters:
        return self._params

    @property
    def orbit_enabled(self) -> bool:
        return self.orbit is not None and self._mode is not ProjectionMode.ISOMETRIC

    def set_mode(self, mode: Union[ProjectionMode, str]) -> ProjectionResult:
        """Switch projection mode and recompute."""
        self._mode = ProjectionMode.parse(mode)
        debug_print(f"[Projection] Mode -> {self._mode.value}")
        return self.apply_projection()

    def set_parameter(self, name: str, value: float) -> ProjectionResult:
        """Change one parameter; see update_parameters."""
        return self.update_parameters(**{name: value})

    def update_parameters(self, **changes: float) -> ProjectionResult:
        """
        Change several parameters at once and recompute.
        
        The candidate record is validated as a whole, so related fields
        (e.g. near and far clip) can be moved together.
        
        Raises:
            KeyError: Unknown parameter name
            InvalidGeometryError, DegenerateFieldOfViewError: Invalid values
        """
        try:
            candidate = self._params.with_changes(**changes).validate()
        except ValueError as e:
            debug_print(f"[Projection] Rejected edit {changes}: {e}")
            raise
        self._params = candidate
        return self.apply_projection()

    def apply_projection(self) -> ProjectionResult:
        """Derive the projection and push it into the camera and surface."""
        result = compute_projection(self._mode, self._params)
        self.camera.set_projection_matrix(result.projection)
        if result.placement is not None:
            self.camera.set_local_to_parent(result.placement)
        debug_matrix_info(f"Projection:{self._mode.value}", result.projection)
        self.resize()
        return result

    def viewport_aspect_ratio(self) -> float:
        return viewport_aspect_ratio(self._mode, self._params)

    def resize(self, width: Optional[int] = None, height: Optional[int] = None) -> Viewport:
        """Resize the surface, keeping the viewport at the projection's aspect."""
        width = self.surface.width if width is None else width
        height = self.surface.height if height is None else height
        return self.surface.resize(width, height, self.viewport_aspect_ratio())

    def update(self, dt: float) -> None:
        """Per-frame hook: drive the orbit controller unless isometric."""
        if self.orbit_enabled:
            self.orbit.update(dt)
