"""
Main Entry Point for the Camera Projection Engine

Loads projection settings from YAML, applies command-line overrides,
drives the projection controller once and reports the resulting
matrices, camera placement and viewport.

Usage:
    python run.py --config configs/projection_config.yaml
    python run.py --mode Isometric --ortho-width 1000
    python run.py projection.near_clip=0.1 window.width=1920
"""

import argparse
import sys
from pathlib import Path
from omegaconf import OmegaConf

# Add project paths
PROJECT_ROOT = Path(__file__).parent
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from camproj.camera.config import mode_from_config, parameters_from_config
from camproj.camera.utils import to_rasterizer_layout
from camproj.host import Camera, RenderSurface, OrbitControls, ProjectionController
from camproj.utils.debug import format_matrix


# ============================================================================
# Configuration & Setup
# ============================================================================

def parse_args(argv=None):
    """Parse command line arguments"""
    parser = argparse.ArgumentParser(
        description="Perspective / orthographic / isometric projection engine",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run.py --config configs/projection_config.yaml
  python run.py --mode Orthographic --near 0.5 --far 500
  python run.py projection.vertical_fov=45 window.height=1080
        """
    )

    parser.add_argument(
        "--config", "-c",
        type=str,
        default=str(PROJECT_ROOT / "configs" / "projection_config.yaml"),
        help="Path to YAML configuration file"
    )

    parser.add_argument(
        "--mode", "-m",
        type=str,
        default=None,
        help="Override projection mode (Perspective/Orthographic/Isometric)"
    )

    parser.add_argument("--fov", type=float, default=None, help="Override vertical FOV (degrees)")
    parser.add_argument("--aspect", type=float, default=None, help="Override perspective aspect ratio")
    parser.add_argument("--near", type=float, default=None, help="Override near clip distance")
    parser.add_argument("--far", type=float, default=None, help="Override far clip distance")
    parser.add_argument("--ortho-width", type=float, default=None, help="Override orthographic width")
    parser.add_argument("--ortho-height", type=float, default=None, help="Override orthographic height")

    parser.add_argument(
        "overrides",
        nargs="*",
        help="Extra dotlist overrides, e.g. projection.far_clip=500"
    )

    return parser.parse_args(argv)


def load_config(config_path: str) -> OmegaConf:
    """
    Load and validate YAML configuration

    Args:
        config_path: Path to YAML config file

    Returns:
        OmegaConf configuration object
    """
    if not Path(config_path).exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    config = OmegaConf.load(config_path)

    if "projection" not in config:
        raise ValueError("Missing required config section: projection")

    print(f"[Config] Loaded configuration from: {config_path}")

    return config


def apply_cli_overrides(config: OmegaConf, args) -> OmegaConf:
    """
    Apply command-line argument overrides to config

    Args:
        config: Base configuration
        args: Parsed command-line arguments

    Returns:
        Modified configuration
    """
    flag_keys = {
        "mode": "mode",
        "fov": "vertical_fov",
        "aspect": "aspect_ratio",
        "near": "near_clip",
        "far": "far_clip",
        "ortho_width": "ortho_width",
        "ortho_height": "ortho_height",
    }

    for attr, key in flag_keys.items():
        value = getattr(args, attr)
        if value is not None:
            config.projection[key] = value
            print(f"[Config] Override {key}: {value}")

    if args.overrides:
        config = OmegaConf.merge(config, OmegaConf.from_dotlist(args.overrides))
        print(f"[Config] Dotlist overrides: {' '.join(args.overrides)}")

    return config


def setup_controller(config: OmegaConf) -> ProjectionController:
    """
    Build camera, surface, orbit controls and the projection controller.

    Args:
        config: Projection configuration

    Returns:
        ProjectionController with the configured mode and parameters
    """
    window = config.get("window", {})
    orbit_cfg = config.get("orbit", {})

    camera = Camera()
    surface = RenderSurface(int(window.get("width", 1280)), int(window.get("height", 720)))
    orbit = OrbitControls(
        camera,
        distance=float(orbit_cfg.get("distance", 600.0)),
        zoom_speed=float(orbit_cfg.get("zoom_speed", 10.0)),
    )
    orbit.update(0.0)

    controller = ProjectionController(
        camera,
        surface,
        orbit=orbit,
        params=parameters_from_config(config.projection),
        mode=mode_from_config(config.projection),
    )

    return controller


# ============================================================================
# Reporting
# ============================================================================

def report(controller: ProjectionController):
    """Print the state produced by one recomputation."""
    params = controller.parameters
    camera = controller.camera
    viewport = controller.surface.viewport

    print(f"\n{'='*60}")
    print(f"Projection: {controller.mode.value}")
    print(f"{'='*60}")
    for name, value in params.as_dict().items():
        print(f"  - {name}: {value:g}")

    print(f"\n[Projection Matrix] (row-major)")
    print(format_matrix(camera.projection_matrix))

    print(f"\n[Rasterizer Layout] (column-major, float32)")
    print(format_matrix(to_rasterizer_layout(camera.projection_matrix)))

    pos = camera.position
    print(f"\n[Camera]")
    print(f"  - Position: [{pos[0]:.3f}, {pos[1]:.3f}, {pos[2]:.3f}]")
    print(f"  - Orbit controls: {'enabled' if controller.orbit_enabled else 'suppressed'}")

    print(f"\n[Viewport]")
    print(f"  - Aspect: {controller.viewport_aspect_ratio():.4f}")
    print(f"  - Window: {controller.surface.width}x{controller.surface.height}")
    print(f"  - Region: x={viewport.x} y={viewport.y} w={viewport.width} h={viewport.height}")
    print(f"{'='*60}\n")


# ============================================================================
# Main
# ============================================================================

def main(argv=None):
    """Main entry point"""
    args = parse_args(argv)

    try:
        config = load_config(args.config)
        config = apply_cli_overrides(config, args)
        controller = setup_controller(config)
    except (FileNotFoundError, KeyError, ValueError) as e:
        print(f"\n[Error] Invalid projection setup: {e}")
        sys.exit(1)

    report(controller)
    return controller


if __name__ == "__main__":
    main()
