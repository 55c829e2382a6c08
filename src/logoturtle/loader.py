"""Load programs from JSON step lists.

A program file is a JSON list of steps, each tagged by ``op``::

    [
        {"op": "forward", "distance": 100},
        {"op": "left", "angle": 90},
        {"op": "repeat", "count": 5, "body": [
            {"op": "forward", "distance": 50},
            {"op": "right", "angle": 72}
        ]}
    ]

Only the shape is checked here. Negative counts and bad pen sizes are left
to the evaluator, which raises the matching ``TurtleError``.
"""

import json
from pathlib import Path
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, Field, TypeAdapter, ValidationError

from .errors import ProgramFormatError, UnknownInstruction
from .program import (
    Forward,
    Instruction,
    Program,
    Repeat,
    SetPenColor,
    SetPenSize,
    TurnLeft,
    TurnRight,
)


class ForwardStep(BaseModel):
    op: Literal["forward"]
    distance: float

    def to_instruction(self) -> Instruction:
        return Forward(self.distance)


class LeftStep(BaseModel):
    op: Literal["left"]
    angle: float

    def to_instruction(self) -> Instruction:
        return TurnLeft(self.angle)


class RightStep(BaseModel):
    op: Literal["right"]
    angle: float

    def to_instruction(self) -> Instruction:
        return TurnRight(self.angle)


class PenSizeStep(BaseModel):
    op: Literal["pen_size"]
    size: float

    def to_instruction(self) -> Instruction:
        return SetPenSize(self.size)


class PenColorStep(BaseModel):
    op: Literal["pen_color"]
    color: str

    def to_instruction(self) -> Instruction:
        return SetPenColor(self.color)


class RepeatStep(BaseModel):
    op: Literal["repeat"]
    count: int
    body: list["Step"] = []

    def to_instruction(self) -> Instruction:
        return Repeat(self.count, _to_program(self.body))


Step = Annotated[
    Union[ForwardStep, LeftStep, RightStep, PenSizeStep, PenColorStep, RepeatStep],
    Field(discriminator="op"),
]

RepeatStep.model_rebuild()

_steps = TypeAdapter(list[Step])


def _to_program(steps: list) -> tuple[Instruction, ...]:
    root = []
    # (remaining steps, collected body, parent body, repeat count)
    stack = [(iter(steps), root, None, None)]
    while stack:
        it, body, parent, count = stack[-1]
        step = next(it, None)
        if step is None:
            stack.pop()
            if parent is not None:
                parent.append(Repeat(count, tuple(body)))
        elif isinstance(step, RepeatStep):
            stack.append((iter(step.body), [], body, step.count))
        else:
            body.append(step.to_instruction())
    return tuple(root)


def load_program(data: Any) -> tuple[Instruction, ...]:
    """Validate a JSON value into a program.

    Nesting depth is bounded by pydantic's validator recursion guard.
    """
    try:
        steps = _steps.validate_python(data)
    except ValidationError as e:
        raise ProgramFormatError(f"Invalid program: {e}") from e
    return _to_program(steps)


def load_program_file(path: str | Path) -> tuple[Instruction, ...]:
    try:
        data = json.loads(Path(path).read_text())
    except json.JSONDecodeError as e:
        raise ProgramFormatError(f"{path}: not valid JSON ({e})") from e
    return load_program(data)


def dump_program(program: Program) -> list[dict]:
    """Convert a program back to its JSON step list."""
    root = []
    stack = [(program, root)]
    while stack:
        body, out = stack.pop()
        for ins in body:
            if isinstance(ins, Forward):
                out.append({"op": "forward", "distance": ins.distance})
            elif isinstance(ins, TurnLeft):
                out.append({"op": "left", "angle": ins.angle})
            elif isinstance(ins, TurnRight):
                out.append({"op": "right", "angle": ins.angle})
            elif isinstance(ins, SetPenSize):
                out.append({"op": "pen_size", "size": ins.size})
            elif isinstance(ins, SetPenColor):
                out.append({"op": "pen_color", "color": ins.color})
            elif isinstance(ins, Repeat):
                steps = []
                out.append({"op": "repeat", "count": ins.count, "body": steps})
                stack.append((ins.body, steps))
            else:
                raise UnknownInstruction(ins)
    return root


def save_program_file(program: Program, path: str | Path):
    """Write a program as JSON; the json encoder caps nesting near the recursion limit."""
    with open(path, "w") as f:
        json.dump(dump_program(program), f, indent=4)
