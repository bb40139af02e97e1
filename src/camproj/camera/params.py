"""Projection parameter record."""

from __future__ import annotations
from dataclasses import dataclass, fields, replace
from typing import Any, Dict

from ..utils.validation import validate_projection_parameters


DEFAULT_VERTICAL_FOV = 60.0
DEFAULT_ASPECT_RATIO = 1.777
DEFAULT_NEAR_CLIP = 1.0
DEFAULT_FAR_CLIP = 2000.0
DEFAULT_ORTHO_WIDTH = 800.0
DEFAULT_ORTHO_HEIGHT = 450.196


@dataclass(frozen=True)
class ProjectionParameters:
    """
    Every tunable projection parameter, populated for all modes at once.
    
    Switching modes never discards values entered for another mode; the
    active mode only decides which fields the derivation reads.
    
    Attributes:
        vertical_fov_degrees: Full vertical field of view (perspective)
        aspect_ratio: Frustum width / height (perspective)
        near_clip: Distance to the near clip plane (shared)
        far_clip: Distance to the far clip plane (shared)
        ortho_width: View volume width in world units (orthographic/isometric)
        ortho_height: View volume height in world units (orthographic/isometric)
    """
    vertical_fov_degrees: float = DEFAULT_VERTICAL_FOV
    aspect_ratio: float = DEFAULT_ASPECT_RATIO
    near_clip: float = DEFAULT_NEAR_CLIP
    far_clip: float = DEFAULT_FAR_CLIP
    ortho_width: float = DEFAULT_ORTHO_WIDTH
    ortho_height: float = DEFAULT_ORTHO_HEIGHT

    @classmethod
    def field_names(cls) -> tuple:
        return tuple(f.name for f in fields(cls))

    def validate(self) -> "ProjectionParameters":
        """Raise if any field is out of range; return self otherwise."""
        validate_projection_parameters(self)
        return self

    def with_changes(self, **changes: float) -> "ProjectionParameters":
        """
        Return a copy with the given fields replaced.
        
        Values are coerced to float. The copy is not validated here;
        callers decide when to validate.
        
        Raises:
            KeyError: If a name is not a parameter field
        """
        known = self.field_names()
        unknown = [name for name in changes if name not in known]
        if unknown:
            raise KeyError(f"Unknown projection parameter(s): {', '.join(unknown)}")
        return replace(self, **{k: float(v) for k, v in changes.items()})

    def as_dict(self) -> Dict[str, Any]:
        return {name: getattr(self, name) for name in self.field_names()}
