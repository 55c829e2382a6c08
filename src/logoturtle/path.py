"""Turn a trace of poses into drawable line segments."""

from dataclasses import dataclass
from typing import Sequence

from .turtle import Point, Pose


@dataclass(frozen=True)
class Segment:
    start: Point
    end: Point
    pen_size: float = 1.0
    pen_color: str = "black"


def segments(trace: Sequence[Pose]) -> list[Segment]:
    """Pair consecutive poses; the pen of the first pose of each pair applies."""
    return [
        Segment(a.position, b.position, a.pen_size, a.pen_color)
        for a, b in zip(trace, trace[1:])
    ]


def bounds(trace: Sequence[Pose]) -> tuple[float, float, float, float] | None:
    """Bounding box (min_x, min_y, max_x, max_y) of the visited positions."""
    if not trace:
        return None
    xs = [p.x for p in trace]
    ys = [p.y for p in trace]
    return min(xs), min(ys), max(xs), max(ys)
