"""Debug utilities."""

from __future__ import annotations
import os

import numpy as np

DEBUG_ENV_VAR = "CAMPROJ_DEBUG"


def is_debug_enabled() -> bool:
    """Check if debug mode is enabled via environment variable."""
    return os.environ.get(DEBUG_ENV_VAR, "0").lower() not in ("0", "", "false")


def debug_print(*args, **kwargs):
    """Print debug message if debug mode is enabled."""
    if is_debug_enabled():
        print(*args, **kwargs)


def format_matrix(m: np.ndarray, precision: int = 4) -> str:
    """Format a matrix one row per line for log output."""
    rows = np.asarray(m, dtype=np.float64)
    return "\n".join(
        "  [" + ", ".join(f"{v: .{precision}f}" for v in row) + "]"
        for row in rows
    )


def debug_matrix_info(name: str, m: np.ndarray):
    """Print a labelled matrix if debug mode is enabled."""
    if is_debug_enabled():
        print(f"[{name}]")
        print(format_matrix(m))
