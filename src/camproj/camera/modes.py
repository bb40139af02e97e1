"""Projection modes and their per-mode views of the parameter record."""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Union

from .params import ProjectionParameters


class ProjectionMode(str, Enum):
    """The three mutually exclusive projection modes."""
    PERSPECTIVE = "Perspective"
    ORTHOGRAPHIC = "Orthographic"
    ISOMETRIC = "Isometric"

    @classmethod
    def parse(cls, value: Union[str, "ProjectionMode"]) -> "ProjectionMode":
        """
        Accept an enum member, its value or its name, case-insensitively.
        
        Raises:
            ValueError: If the value names no mode
        """
        if isinstance(value, cls):
            return value
        text = str(value).strip().lower()
        for mode in cls:
            if text in (mode.value.lower(), mode.name.lower()):
                return mode
        choices = ", ".join(m.value for m in cls)
        raise ValueError(f"Unknown projection mode {value!r} (expected one of: {choices})")


DEFAULT_MODE = ProjectionMode.PERSPECTIVE


@dataclass(frozen=True)
class PerspectiveView:
    vertical_fov_degrees: float
    aspect_ratio: float
    near_clip: float
    far_clip: float


@dataclass(frozen=True)
class OrthographicView:
    width: float
    height: float
    near_clip: float
    far_clip: float


@dataclass(frozen=True)
class IsometricView:
    width: float
    height: float
    near_clip: float
    far_clip: float

    def as_orthographic(self) -> OrthographicView:
        return OrthographicView(self.width, self.height, self.near_clip, self.far_clip)


ProjectionView = Union[PerspectiveView, OrthographicView, IsometricView]


def select_view(mode: Union[ProjectionMode, str], params: ProjectionParameters) -> ProjectionView:
    """
    Pick the fields the active mode reads out of the full parameter record.
    
    Args:
        mode: Active projection mode (member, value or name)
        params: Full parameter record
    
    Returns:
        A PerspectiveView, OrthographicView or IsometricView
    
    Raises:
        ValueError: If mode names no projection mode
    """
    mode = ProjectionMode.parse(mode)
    if mode is ProjectionMode.PERSPECTIVE:
        return PerspectiveView(
            params.vertical_fov_degrees,
            params.aspect_ratio,
            params.near_clip,
            params.far_clip,
        )
    if mode is ProjectionMode.ORTHOGRAPHIC:
        return OrthographicView(
            params.ortho_width,
            params.ortho_height,
            params.near_clip,
            params.far_clip,
        )
    if mode is ProjectionMode.ISOMETRIC:
        return IsometricView(
            params.ortho_width,
            params.ortho_height,
            params.near_clip,
            params.far_clip,
        )
    raise ValueError(f"Unsupported projection mode: {mode!r}")
