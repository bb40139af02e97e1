"""Rigid camera placement transforms."""

from __future__ import annotations
import math
import numpy as np


ISOMETRIC_PITCH_DEGREES = -35.264
ISOMETRIC_YAW_DEGREES = 45.0
ISOMETRIC_ROLL_DEGREES = 0.0
ISOMETRIC_DISTANCE = 550.0


def make_translation(x: float, y: float, z: float) -> np.ndarray:
    """4x4 translation matrix."""
    T = np.eye(4, dtype=np.float64)
    T[:3, 3] = (x, y, z)
    return T


def make_euler_rotation(
    pitch_degrees: float,
    yaw_degrees: float,
    roll_degrees: float = 0.0
) -> np.ndarray:
    """
    Build a 4x4 rotation from Euler angles.
    
    Rotations are intrinsic yaw (about Y), then pitch (about X), then roll
    (about Z): R = Ry(yaw) @ Rx(pitch) @ Rz(roll). For a camera looking down
    -Z this is the usual turn-then-tilt order, so pitch is measured from the
    horizontal plane regardless of yaw.
    
    Args:
        pitch_degrees: Rotation about X (negative tilts the view downwards)
        yaw_degrees: Rotation about Y
        roll_degrees: Rotation about Z
    
    Returns:
        4x4 rotation matrix (row-major, float64)
    """
    px, py, pz = (math.radians(a) for a in (pitch_degrees, yaw_degrees, roll_degrees))
    
    cx, sx = math.cos(px), math.sin(px)
    cy, sy = math.cos(py), math.sin(py)
    cz, sz = math.cos(pz), math.sin(pz)
    
    Rx = np.array([
        [1.0, 0.0, 0.0],
        [0.0, cx, -sx],
        [0.0, sx, cx],
    ])
    Ry = np.array([
        [cy, 0.0, sy],
        [0.0, 1.0, 0.0],
        [-sy, 0.0, cy],
    ])
    Rz = np.array([
        [cz, -sz, 0.0],
        [sz, cz, 0.0],
        [0.0, 0.0, 1.0],
    ])
    
    R = np.eye(4, dtype=np.float64)
    R[:3, :3] = Ry @ Rx @ Rz
    return R


def build_isometric_placement(
    pitch_degrees: float = ISOMETRIC_PITCH_DEGREES,
    yaw_degrees: float = ISOMETRIC_YAW_DEGREES,
    roll_degrees: float = ISOMETRIC_ROLL_DEGREES,
    distance: float = ISOMETRIC_DISTANCE
) -> np.ndarray:
    """
    Build the fixed isometric camera-to-parent transform.
    
    placement = Rotation @ Translation(0, 0, distance): the camera is pushed
    back along its own +Z axis, so it sits at `distance` from the parent
    origin and looks straight at it. With the default angles the camera
    position is distance * (1, 1, 1) / sqrt(3), which foreshortens the
    three world axes equally.
    
    Returns:
        4x4 local-to-parent matrix (row-major, float64)
    """
    R = make_euler_rotation(pitch_degrees, yaw_degrees, roll_degrees)
    T = make_translation(0.0, 0.0, distance)
    return R @ T
