"""Render surface with aspect-preserving viewport."""

from __future__ import annotations
from typing import NamedTuple


class Viewport(NamedTuple):
    """Drawable region in window pixels, origin at the lower-left corner."""
    x: int
    y: int
    width: int
    height: int


def fit_viewport(width: int, height: int, aspect: float) -> Viewport:
    """
    Largest centred viewport of the given aspect that fits the window.
    
    Windows wider than the aspect get vertical bars (pillarbox), taller
    windows get horizontal bars (letterbox).
    
    Raises:
        ValueError: If the window size or aspect is not positive
    """
    if width <= 0 or height <= 0:
        raise ValueError(f"Window size must be positive, got {width}x{height}")
    if not aspect > 0:
        raise ValueError(f"Aspect ratio must be positive, got {aspect!r}")
    
    if width / height > aspect:
        vh = height
        vw = min(width, int(round(height * aspect)))
    else:
        vw = width
        vh = min(height, int(round(width / aspect)))
    
    return Viewport((width - vw) // 2, (height - vh) // 2, vw, vh)


class RenderSurface:
    """Window-backed drawable area."""

    def __init__(self, width: int, height: int):
        width, height = int(width), int(height)
        if width <= 0 or height <= 0:
            raise ValueError(f"Window size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.aspect = width / height
        self.viewport = fit_viewport(width, height, self.aspect)

    def resize(self, width: int, height: int, aspect: float) -> Viewport:
        """Resize the window and letterbox the viewport to `aspect`."""
        viewport = fit_viewport(int(width), int(height), float(aspect))
        self.width, self.height = int(width), int(height)
        self.aspect = float(aspect)
        self.viewport = viewport
        return viewport
