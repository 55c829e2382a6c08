import math
from fractions import Fraction

import pytest

from logoturtle.errors import InvalidPenColor, InvalidPenSize
from logoturtle.turtle import (
    Point,
    Pose,
    move_forward,
    normalize_angle,
    set_pen_color,
    set_pen_size,
    to_radians,
    turn,
)


def test_to_radians():
    assert to_radians(180.0) == pytest.approx(math.pi)
    assert to_radians(90.0) == pytest.approx(math.pi / 2)


@pytest.mark.parametrize(
    "angle,expected",
    [(0.0, 0.0), (360.0, 0.0), (370.0, 10.0), (-10.0, 350.0), (-720.0, 0.0), (-1e-20, 0.0)],
)
def test_normalize_angle(angle, expected):
    assert normalize_angle(angle) == pytest.approx(expected)


@pytest.mark.parametrize("start", [0.0, 45.5, 359.9])
@pytest.mark.parametrize("delta", [-1e-20, -0.1, -90.0, -361.0, 0.0, 90.0, 359.999, 1e9, -1e9])
def test_turn_stays_in_range(start, delta):
    assert 0.0 <= turn(Pose(angle=start), delta).angle < 360.0


def test_turn_zero_is_identity():
    p = Pose(x=3.5, y=-2.0, angle=123.4, pen_size=2.0, pen_color="red")
    assert turn(p, 0.0) == p


def test_turn_leaves_position_and_pen():
    p = Pose(x=1.0, y=2.0, angle=10.0, pen_size=4.0)
    q = turn(p, -20.0)
    assert q.angle == pytest.approx(350.0)
    assert (q.x, q.y, q.pen_size, q.pen_color) == (1.0, 2.0, 4.0, "black")


def test_move_forward_along_heading():
    p = move_forward(Pose(x=250.0, y=250.0, angle=0.0), 50.0)
    assert (p.x, p.y) == pytest.approx((300.0, 250.0))

    p = move_forward(Pose(angle=90.0), 10.0)
    assert (p.x, p.y) == pytest.approx((0.0, 10.0), abs=1e-9)


def test_move_forward_negative_goes_backwards():
    p = move_forward(Pose(angle=0.0), -5.0)
    assert (p.x, p.y) == pytest.approx((-5.0, 0.0))


@pytest.mark.parametrize("distance", [0.0, 1.0, -37.5, 1234.5])
@pytest.mark.parametrize("angle", [0.0, 33.0, 271.0])
def test_move_forward_back_returns_home(distance, angle):
    p = Pose(x=12.0, y=-7.0, angle=angle)
    q = move_forward(move_forward(p, distance), -distance)
    assert q.x == pytest.approx(p.x, abs=1e-9)
    assert q.y == pytest.approx(p.y, abs=1e-9)
    assert q.angle == p.angle


def test_transitions_do_not_mutate():
    p = Pose()
    move_forward(p, 10.0)
    turn(p, 45.0)
    set_pen_size(p, 3.0)
    assert p == Pose()


def test_pose_position():
    assert Pose(x=1.0, y=2.0).position == Point(1.0, 2.0)


def test_set_pen_size():
    assert set_pen_size(Pose(), 2.5).pen_size == 2.5


@pytest.mark.parametrize("size", [0, 0.0, -1.0, float("nan")])
def test_set_pen_size_rejects_non_positive(size):
    with pytest.raises(InvalidPenSize):
        set_pen_size(Pose(), size)


def test_set_pen_color():
    assert set_pen_color(Pose(), "red").pen_color == "red"
    with pytest.raises(InvalidPenColor):
        set_pen_color(Pose(), "  ")


def test_set_pen_size_rejects_bool():
    with pytest.raises(InvalidPenSize):
        set_pen_size(Pose(), True)


def test_set_pen_size_accepts_any_real():
    assert set_pen_size(Pose(), Fraction(3, 2)).pen_size == Fraction(3, 2)
