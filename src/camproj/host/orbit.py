"""Orbit-style camera controller."""

from __future__ import annotations
import math
from typing import Sequence
import numpy as np

from .camera import Camera

MIN_PITCH_DEGREES = -89.0
MAX_PITCH_DEGREES = 89.0


def build_orbit_placement(
    target: np.ndarray,
    distance: float,
    yaw_degrees: float,
    pitch_degrees: float
) -> np.ndarray:
    """
    Camera-to-parent matrix for a camera orbiting `target` (Y-up).
    
    The camera looks at the target down its local -Z axis. Columns of the
    rotation part are [right, up, back].
    """
    target = np.asarray(target, dtype=np.float64)
    yaw = math.radians(yaw_degrees)
    pitch = math.radians(pitch_degrees)
    
    back = np.array([
        math.cos(pitch) * math.sin(yaw),
        math.sin(pitch),
        math.cos(pitch) * math.cos(yaw),
    ])
    eye = target + distance * back
    
    right = np.cross([0.0, 1.0, 0.0], back)
    right = right / np.linalg.norm(right)
    up = np.cross(back, right)
    
    M = np.eye(4, dtype=np.float64)
    M[:3, 0] = right
    M[:3, 1] = up
    M[:3, 2] = back
    M[:3, 3] = eye
    return M


class OrbitControls:
    """
    Keeps the camera on a sphere around a target point.
    
    Input handling lives in the host; it calls rotate() and zoom(), and the
    frame loop calls update() which writes the camera placement.
    """

    def __init__(
        self,
        camera: Camera,
        distance: float = 600.0,
        zoom_speed: float = 10.0,
        yaw_degrees: float = 0.0,
        pitch_degrees: float = 0.0,
        target: Sequence[float] = (0.0, 0.0, 0.0),
        min_distance: float = 1.0
    ):
        self.camera = camera
        self.zoom_speed = float(zoom_speed)
        self.min_distance = float(min_distance)
        self.target = np.asarray(target, dtype=np.float64)
        self.yaw_degrees = float(yaw_degrees)
        self.pitch_degrees = 0.0
        self.distance = self.min_distance
        self.set_pitch(pitch_degrees)
        self.set_distance(distance)

    def set_distance(self, distance: float) -> None:
        self.distance = max(self.min_distance, float(distance))

    def set_pitch(self, pitch_degrees: float) -> None:
        self.pitch_degrees = min(MAX_PITCH_DEGREES, max(MIN_PITCH_DEGREES, float(pitch_degrees)))

    def rotate(self, delta_yaw_degrees: float, delta_pitch_degrees: float) -> None:
        self.yaw_degrees = (self.yaw_degrees + float(delta_yaw_degrees)) % 360.0
        self.set_pitch(self.pitch_degrees + float(delta_pitch_degrees))

    def zoom(self, delta: float) -> None:
        """Move towards (positive delta) or away from the target."""
        self.set_distance(self.distance - float(delta) * self.zoom_speed)

    def placement(self) -> np.ndarray:
        return build_orbit_placement(
            self.target, self.distance, self.yaw_degrees, self.pitch_degrees
        )

    def update(self, dt: float) -> None:
        """Write the current orbit placement into the camera."""
        self.camera.set_local_to_parent(self.placement())
