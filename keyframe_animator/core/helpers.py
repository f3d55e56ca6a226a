"""
Animatable attribute helpers.

A helper knows how to blend two keyframe values of one type. The fraction it
receives is the eased local progress between two adjacent keyframes and is
not clamped: values below 0 or above 1 extrapolate the trend of the pair.
"""

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Protocol, TypeVar, runtime_checkable

import numpy as np

T = TypeVar("T")


@runtime_checkable
class AnimatableAttributeHelper(Protocol[T]):
    """
    Protocol for per-type interpolation.

    Usage:
        helper = PointAnimationHelper()
        helper.lerp(Point(0, 0), Point(10, 10), 0.5)  # Point(5.0, 5.0)
    """

    def lerp(self, start: T, end: T, fraction: float) -> T:
        """
        Blend two values.

        Args:
            start: Value of the earlier keyframe
            end: Value of the later keyframe
            fraction: Eased progress between them, may lie outside [0, 1]

        Returns:
            Interpolated (or extrapolated) value
        """
        ...


@dataclass(frozen=True)
class Point:
    """2D point."""
    x: float
    y: float

    def to_dict(self) -> Dict[str, float]:
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: Mapping[str, float]) -> "Point":
        return cls(x=data["x"], y=data["y"])


class NumberAnimationHelper:
    """Linear blend of scalars."""

    def lerp(self, start: float, end: float, fraction: float) -> float:
        return start + (end - start) * fraction


class PointAnimationHelper:
    """Component-wise linear blend of points."""

    def lerp(self, start: Point, end: Point, fraction: float) -> Point:
        return Point(
            x=start.x + (end.x - start.x) * fraction,
            y=start.y + (end.y - start.y) * fraction,
        )


class ArrayAnimationHelper:
    """
    Element-wise blend of vectors, colors or any array-like values.

    Inputs are converted with ``np.asarray`` and must broadcast together.
    """

    def __init__(self, dtype=np.float64):
        self.dtype = dtype

    def lerp(self, start, end, fraction: float) -> np.ndarray:
        a = np.asarray(start, dtype=self.dtype)
        b = np.asarray(end, dtype=self.dtype)
        return a + (b - a) * fraction


class MappingAnimationHelper:
    """
    Blend dict values key by key, each key with its own helper.

    Keys without a helper, or missing from the end value, hold the start value.
    """

    def __init__(self, helpers: Mapping[str, AnimatableAttributeHelper]):
        self.helpers = dict(helpers)

    def lerp(self, start: Mapping[str, Any], end: Mapping[str, Any],
             fraction: float) -> Dict[str, Any]:
        result = {}
        for key, value in start.items():
            helper = self.helpers.get(key)
            if helper is None or key not in end:
                result[key] = value
            else:
                result[key] = helper.lerp(value, end[key], fraction)
        return result


class StepAnimationHelper:
    """Discrete values: hold the start value until the pair completes."""

    def lerp(self, start: T, end: T, fraction: float) -> T:
        return end if fraction >= 1.0 else start


__all__ = [
    "AnimatableAttributeHelper",
    "Point",
    "NumberAnimationHelper",
    "PointAnimationHelper",
    "ArrayAnimationHelper",
    "MappingAnimationHelper",
    "StepAnimationHelper",
]
