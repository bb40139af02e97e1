"""
Render the demo scene under every projection mode.

Usage:
    python plot_projection.py [--config configs/projection_config.yaml] [--out output/plots]
"""

import argparse
import sys
from pathlib import Path
import matplotlib
matplotlib.use('Agg')  # Non-interactive backend
from omegaconf import OmegaConf

PROJECT_ROOT = Path(__file__).parent
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from camproj.camera.config import parameters_from_config
from camproj.preview import save_preview_figures


if __name__ == '__main__':
    parser = argparse.ArgumentParser(description='Plot projection previews')
    parser.add_argument('--config', default=str(PROJECT_ROOT / 'configs' / 'projection_config.yaml'),
                        help='Projection YAML config')
    parser.add_argument('--out', default='output/plots', help='Output directory for plots')
    parser.add_argument('--seed', type=int, default=0, help='Seed for column heights')
    args = parser.parse_args()

    config = OmegaConf.load(args.config)
    params = parameters_from_config(config.get('projection', {}))

    for path in save_preview_figures(params, args.out, seed=args.seed):
        print(f"[Plot] Saved {path}")
