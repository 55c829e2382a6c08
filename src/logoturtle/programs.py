"""Sample programs."""

import math
from dataclasses import dataclass

from .program import (
    Forward,
    Program,
    Repeat,
    SetPenColor,
    SetPenSize,
    TurnLeft,
    TurnRight,
)


@dataclass(frozen=True)
class Sample:
    name: str
    description: str
    program: Program


SAMPLES = {
    "simple": Sample(
        name="simple",
        description="Two sides of a square",
        program=(Forward(50.0), TurnLeft(90.0), Forward(50.0)),
    ),
    "complex": Sample(
        name="complex",
        description="A line followed by a repeated nested block",
        program=(
            Forward(100.0),
            TurnLeft(90.0),
            Repeat(5, (Forward(50.0), TurnLeft(90.0))),
        ),
    ),
    "square": Sample(
        name="square",
        description="Square with 80px sides",
        program=(Repeat(4, (Forward(80.0), TurnLeft(90.0))),),
    ),
    "triangle": Sample(
        name="triangle",
        description="3-4-5 right triangle",
        program=(
            Forward(40.0),
            TurnLeft(90.0),
            Forward(30.0),
            # exterior angle at the 30/50 corner
            TurnLeft(180.0 - math.degrees(math.atan2(40.0, 30.0))),
            Forward(50.0),
        ),
    ),
    "star": Sample(
        name="star",
        description="Five pointed star",
        program=(
            SetPenColor("darkorange"),
            SetPenSize(2.0),
            Repeat(5, (Forward(150.0), TurnRight(144.0))),
        ),
    ),
    "spiral": Sample(
        name="spiral",
        description="Square spiral built from nested repeats",
        program=(
            Repeat(
                6,
                (
                    Repeat(4, (Forward(30.0), TurnLeft(90.0))),
                    Forward(10.0),
                    TurnLeft(15.0),
                ),
            ),
        ),
    ),
    "flower": Sample(
        name="flower",
        description="Twelve rotated hexagons with a thick pen",
        program=(
            SetPenSize(3.0),
            SetPenColor("purple"),
            Repeat(12, (Repeat(6, (Forward(40.0), TurnLeft(60.0))), TurnRight(30.0))),
        ),
    ),
}


def get_sample(name: str) -> Sample:
    if name not in SAMPLES:
        raise ValueError(f"Unknown sample: {name}. Available: {list(SAMPLES.keys())}")
    return SAMPLES[name]
