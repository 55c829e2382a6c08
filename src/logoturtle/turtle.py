"""Turtle pose and its transitions."""

import math
import numbers
from dataclasses import dataclass, replace

from .errors import InvalidPenColor, InvalidPenSize


@dataclass(frozen=True)
class Point:
    x: float = 0.0
    y: float = 0.0


@dataclass(frozen=True)
class Pose:
    """Turtle state: position, heading in degrees and pen."""

    x: float = 0.0
    y: float = 0.0
    angle: float = 0.0
    pen_size: float = 1.0
    pen_color: str = "black"

    @property
    def position(self) -> Point:
        return Point(self.x, self.y)


def to_radians(angle: float) -> float:
    return angle * 2.0 * math.pi / 360.0


def normalize_angle(angle: float) -> float:
    """Fold any angle into [0, 360)."""
    # Python's float modulo takes the sign of the divisor, but tiny
    # negative angles still round up to 360.0
    angle = angle % 360.0
    if angle >= 360.0:
        return 0.0
    return angle


def move_forward(pose: Pose, distance: float) -> Pose:
    """Push the turtle along its heading."""
    rad = to_radians(pose.angle)
    return replace(
        pose,
        x=pose.x + distance * math.cos(rad),
        y=pose.y + distance * math.sin(rad),
    )


def turn(pose: Pose, angle: float) -> Pose:
    """Turn left by angle degrees; negative angles turn right."""
    return replace(pose, angle=normalize_angle(pose.angle + angle))


def set_pen_size(pose: Pose, size: float) -> Pose:
    if isinstance(size, bool) or not isinstance(size, numbers.Real) or not size > 0:
        raise InvalidPenSize(size)
    return replace(pose, pen_size=size)


def set_pen_color(pose: Pose, color: str) -> Pose:
    if not isinstance(color, str) or not color.strip():
        raise InvalidPenColor(color)
    return replace(pose, pen_color=color)
