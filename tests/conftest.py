"""Shared fixtures for keyframe animator tests."""

import pytest

from keyframe_animator import (
    Animation,
    Keyframe,
    NumberAnimationHelper,
    Point,
    PointAnimationHelper,
)


class AnimationTarget:
    """Object whose attributes are driven by animation callbacks."""

    def __init__(self, position: Point = Point(0, 0), number: float = 0.0):
        self.position = position
        self.number = number
        self.applied = []

    def set_position(self, position: Point) -> None:
        self.position = position
        self.applied.append(position)

    def set_number(self, number: float) -> None:
        self.number = number


def _run_ticks(animator, count: int, delta_time: float) -> None:
    for _ in range(count):
        animator.animate(delta_time)


@pytest.fixture
def run_ticks():
    """Callable driving animate() count times with a fixed delta."""
    return _run_ticks


@pytest.fixture
def target():
    return AnimationTarget()


@pytest.fixture
def point_keyframes():
    return [
        Keyframe(0, Point(0, 0)),
        Keyframe(0.5, Point(3, 3)),
        Keyframe(1, Point(10, 10)),
    ]


@pytest.fixture
def number_keyframes():
    return [
        Keyframe(0, 0.0),
        Keyframe(0.5, 3.0),
        Keyframe(1, 10.0),
    ]


@pytest.fixture
def point_animation(target, point_keyframes):
    return Animation(point_keyframes, target.set_position, PointAnimationHelper())


@pytest.fixture
def number_animation(target, number_keyframes):
    return Animation(number_keyframes, target.set_number, NumberAnimationHelper())
