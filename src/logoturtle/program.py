"""Instruction set of the turtle language."""

from dataclasses import dataclass, field
from typing import Sequence, Union


@dataclass(frozen=True)
class Forward:
    distance: float  # negative moves backwards


@dataclass(frozen=True)
class TurnLeft:
    angle: float


@dataclass(frozen=True)
class TurnRight:
    angle: float


@dataclass(frozen=True)
class SetPenSize:
    size: float


@dataclass(frozen=True)
class SetPenColor:
    color: str


@dataclass(frozen=True)
class Repeat:
    """Run body count times; contributes no pose of its own."""

    count: int
    body: tuple = field(default_factory=tuple)

    def __post_init__(self):
        object.__setattr__(self, "body", tuple(self.body))


Instruction = Union[Forward, TurnLeft, TurnRight, SetPenSize, SetPenColor, Repeat]
Program = Sequence[Instruction]

ATOMIC = (Forward, TurnLeft, TurnRight, SetPenSize, SetPenColor)
