"""Program evaluation: fold a program over a starting pose."""

from dataclasses import dataclass
from typing import Iterator

from .errors import InvalidRepeatCount, MissingInitialPose, TurtleError, UnknownInstruction
from .program import (
    ATOMIC,
    Forward,
    Instruction,
    Program,
    Repeat,
    SetPenColor,
    SetPenSize,
    TurnLeft,
    TurnRight,
)
from .turtle import Pose, move_forward, set_pen_color, set_pen_size, turn


@dataclass
class _Frame:
    body: tuple
    remaining: int
    index: int = 0


def apply(pose: Pose, instruction: Instruction) -> Pose:
    """Apply one atomic instruction."""
    if isinstance(instruction, Forward):
        return move_forward(pose, instruction.distance)
    if isinstance(instruction, TurnLeft):
        return turn(pose, instruction.angle)
    if isinstance(instruction, TurnRight):
        return turn(pose, -instruction.angle)
    if isinstance(instruction, SetPenSize):
        return set_pen_size(pose, instruction.size)
    if isinstance(instruction, SetPenColor):
        return set_pen_color(pose, instruction.color)
    raise UnknownInstruction(instruction)


def _check_count(instruction: Repeat) -> int:
    count = instruction.count
    if isinstance(count, bool) or not isinstance(count, int) or count < 0:
        raise InvalidRepeatCount(count)
    return count


def _is_noop(body: tuple) -> bool:
    """True when running body can never add a pose or raise."""
    try:
        return count_steps(body) == 0
    except TurtleError:
        # walk it so the error surfaces where it is reached
        return False


def _walk(pose: Pose, program: Program) -> Iterator[Pose]:
    yield pose
    # Explicit stack so nesting depth is not bound by the recursion limit
    stack = [_Frame(tuple(program), 1)]
    while stack:
        frame = stack[-1]
        if frame.index == len(frame.body):
            frame.remaining -= 1
            if frame.remaining > 0:
                frame.index = 0
            else:
                stack.pop()
            continue

        instruction = frame.body[frame.index]
        frame.index += 1

        if isinstance(instruction, Repeat):
            count = _check_count(instruction)
            if count and not _is_noop(instruction.body):
                stack.append(_Frame(instruction.body, count))
            continue

        pose = apply(pose, instruction)
        yield pose


def iter_poses(initial_pose: Pose | None, program: Program) -> Iterator[Pose]:
    """Lazily yield the starting pose followed by one pose per atomic step."""
    if initial_pose is None:
        raise MissingInitialPose()
    return _walk(initial_pose, program)


def run(initial_pose: Pose | None, program: Program) -> list[Pose]:
    """Run a program and return every pose the turtle went through.

    The first pose is the starting pose, and each Forward, turn or pen
    instruction adds exactly one more. Repeat blocks add nothing by
    themselves. Any invalid instruction aborts the whole run.
    """
    return list(iter_poses(initial_pose, program))


def count_steps(program: Program) -> int:
    """Number of atomic instructions a program expands to."""
    total = 0
    stack = [(tuple(program), 1)]
    while stack:
        body, times = stack.pop()
        for instruction in body:
            if isinstance(instruction, Repeat):
                count = _check_count(instruction)
                if count:
                    stack.append((instruction.body, times * count))
            elif isinstance(instruction, ATOMIC):
                total += times
            else:
                raise UnknownInstruction(instruction)
    return total
