"""Projection configuration parser."""

from __future__ import annotations
from typing import Any, Dict, Optional, Tuple
import numpy as np
from omegaconf import DictConfig, OmegaConf

from .modes import DEFAULT_MODE, ProjectionMode
from .params import ProjectionParameters
from .engine import compute_projection, viewport_aspect_ratio
from .utils import to_rasterizer_layout

# Config key -> ProjectionParameters field
CONFIG_KEYS = {
    "vertical_fov": "vertical_fov_degrees",
    "aspect_ratio": "aspect_ratio",
    "near_clip": "near_clip",
    "far_clip": "far_clip",
    "ortho_width": "ortho_width",
    "ortho_height": "ortho_height",
}


def _as_dict(cfg) -> Dict[str, Any]:
    if cfg is None:
        return {}
    if isinstance(cfg, DictConfig):
        return OmegaConf.to_container(cfg, resolve=True)
    return dict(cfg)


def mode_from_config(projection_cfg) -> ProjectionMode:
    """Read the 'mode' key, defaulting to perspective."""
    cfg = _as_dict(projection_cfg)
    return ProjectionMode.parse(cfg.get("mode", DEFAULT_MODE))


def parameters_from_config(projection_cfg) -> ProjectionParameters:
    """
    Build a validated parameter record from a configuration mapping.
    
    Missing keys keep their default values. Unknown keys other than 'mode'
    are rejected so that typos do not silently fall back to defaults.
    
    Raises:
        KeyError: On unknown keys
        InvalidGeometryError, DegenerateFieldOfViewError: On invalid values
    """
    cfg = _as_dict(projection_cfg)
    
    unknown = sorted(k for k in cfg if k not in CONFIG_KEYS and k != "mode")
    if unknown:
        raise KeyError(f"Unknown projection config key(s): {', '.join(unknown)}")
    
    changes = {CONFIG_KEYS[k]: float(v) for k, v in cfg.items() if k in CONFIG_KEYS}
    return ProjectionParameters().with_changes(**changes).validate()


def make_projection_from_yaml(
    projection_cfg
) -> Tuple[ProjectionMode, ProjectionParameters, np.ndarray, Optional[np.ndarray], float, np.ndarray]:
    """
    Build projection matrices from a configuration dictionary.
    
    This is the entry point for driving the projection from a YAML file,
    typically the 'projection' section loaded with OmegaConf.
    
    Args:
        projection_cfg: Mapping (dict or DictConfig) with keys:
            Optional:
                - mode: 'Perspective', 'Orthographic' or 'Isometric'
                - vertical_fov: Vertical field of view in degrees (default: 60)
                - aspect_ratio: Frustum width / height (default: 1.777)
                - near_clip, far_clip: Clip distances (default: 1, 2000)
                - ortho_width, ortho_height: Ortho box size (default: 800, 450.196)
    
    Returns:
        Tuple of:
            - mode (ProjectionMode)
            - params (ProjectionParameters)
            - proj_matrix (4x4 float64): Row-major camera-to-clip transform
            - placement (4x4 float64 or None): Isometric camera placement
            - aspect (float): Viewport aspect ratio
            - proj_matrix_transposed (4x4 float32): Rasterizer layout
    
    Example:
        >>> mode, params, proj, placement, aspect, proj_t = make_projection_from_yaml(
        ...     {"mode": "Orthographic", "ortho_width": 800, "ortho_height": 450}
        ... )
    """
    mode = mode_from_config(projection_cfg)
    params = parameters_from_config(projection_cfg)
    
    projection, placement = compute_projection(mode, params)
    aspect = viewport_aspect_ratio(mode, params)
    
    return (
        mode,
        params,
        projection,
        placement,
        aspect,
        to_rasterizer_layout(projection),
    )
