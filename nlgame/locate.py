"""Direction, rotation and height helpers for actors in the world."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

from nlgame.enums import MovementDirection, TargetHeight

__all__ = [
    "Rotator",
    "direction_by_movement_data",
    "direction_by_vector",
    "direction_by_angle",
    "to_simple_direction",
    "look_at_rotation",
    "target_height_by_point",
]


@dataclass(frozen=True)
class Rotator:
    """A rotation in degrees."""

    pitch: float = 0.0
    yaw: float = 0.0
    roll: float = 0.0


_INPUT_DIRECTIONS: dict[tuple[float, float], MovementDirection] = {
    (-1, 1): MovementDirection.FL,
    (1, 1): MovementDirection.FR,
    (-1, 0): MovementDirection.L,
    (1, 0): MovementDirection.R,
    (-1, -1): MovementDirection.BL,
    (1, -1): MovementDirection.BR,
    (0, -1): MovementDirection.B,
}


def direction_by_movement_data(x: float, y: float) -> MovementDirection:
    """Map a raw movement input to a direction; exact matches only, else forward."""
    return _INPUT_DIRECTIONS.get((x, y), MovementDirection.F)


def direction_by_vector(x: float, y: float) -> MovementDirection:
    """Map a 2D vector to a direction; exact matches only, else forward."""
    return _INPUT_DIRECTIONS.get((x, y), MovementDirection.F)


def direction_by_angle(angle: float) -> MovementDirection:
    """Band an angle in degrees into a direction.

    Angles within 22.5 of zero are forward, negative angles band into
    left-hand directions down to -157.5, and every other angle is backward.
    """
    if -22.5 <= angle <= 22.5:
        return MovementDirection.F
    if -67.5 <= angle <= -22.5:
        return MovementDirection.FL
    if -112.5 <= angle <= -67.5:
        return MovementDirection.L
    if -157.5 <= angle <= -112.5:
        return MovementDirection.BL
    return MovementDirection.B


def to_simple_direction(direction: MovementDirection) -> MovementDirection:
    """Fold diagonal sideways directions into plain left or right."""
    if direction in (MovementDirection.BL, MovementDirection.FL):
        return MovementDirection.L
    if direction in (MovementDirection.BR, MovementDirection.FR):
        return MovementDirection.R
    return direction


def look_at_rotation(start: Sequence[float], target: Sequence[float]) -> Rotator:
    """Rotation that points from ``start`` towards ``target``."""
    sx, sy, sz = start
    tx, ty, tz = target
    dx, dy, dz = tx - sx, ty - sy, tz - sz
    yaw = math.degrees(math.atan2(dy, dx))
    pitch = math.degrees(math.atan2(dz, math.hypot(dx, dy)))
    return Rotator(pitch=pitch, yaw=yaw, roll=0.0)


def target_height_by_point(
    actor_height: float, point: Sequence[float], target_location: Sequence[float]
) -> TargetHeight:
    """Classify where ``point`` lies on an actor of ``actor_height`` at ``target_location``."""
    height = target_location[2] - point[2]
    if height <= actor_height / 3:
        return TargetHeight.High
    if height <= actor_height / 3 * 2:
        return TargetHeight.Middle
    return TargetHeight.Low