"""Parameter validation at the mutation boundary."""

from __future__ import annotations
import math
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from camproj.camera.params import ProjectionParameters


class InvalidGeometryError(ValueError):
    """Non-positive view volume dimensions or an inverted clip range."""


class DegenerateFieldOfViewError(ValueError):
    """Vertical field of view outside the open interval (0, 180)."""


def _require_positive(name: str, value: float):
    if not math.isfinite(value) or value <= 0.0:
        raise InvalidGeometryError(f"{name} must be a finite positive number, got {value!r}")


def validate_field_of_view(fov_degrees: float):
    """
    Validate a vertical field of view in degrees.

    Raises:
        DegenerateFieldOfViewError: If the angle is not finite or not in (0, 180)
    """
    if not math.isfinite(fov_degrees) or not 0.0 < fov_degrees < 180.0:
        raise DegenerateFieldOfViewError(
            f"vertical_fov_degrees must lie in (0, 180), got {fov_degrees!r}"
        )


def validate_clip_range(near_clip: float, far_clip: float):
    """
    Validate near/far clip distances.

    Raises:
        InvalidGeometryError: Unless 0 < near_clip < far_clip
    """
    _require_positive("near_clip", near_clip)
    if not math.isfinite(far_clip):
        raise InvalidGeometryError(f"far_clip must be finite, got {far_clip!r}")
    if near_clip >= far_clip:
        raise InvalidGeometryError(
            f"near_clip must be smaller than far_clip, got near={near_clip!r} far={far_clip!r}"
        )


def validate_projection_parameters(params: "ProjectionParameters"):
    """
    Validate a full parameter record.

    Every field is checked regardless of the active mode, since switching
    modes must never expose a degenerate configuration.

    Args:
        params: Candidate parameter record

    Raises:
        DegenerateFieldOfViewError: Bad vertical field of view
        InvalidGeometryError: Bad aspect ratio, ortho dimensions or clip range
    """
    validate_field_of_view(params.vertical_fov_degrees)
    _require_positive("aspect_ratio", params.aspect_ratio)
    validate_clip_range(params.near_clip, params.far_clip)
    _require_positive("ortho_width", params.ortho_width)
    _require_positive("ortho_height", params.ortho_height)
