"""
Keyframe data structure and the shared keyframe interpolation routine.

Every playable type (Animation, AnimationGroup, AnimationGroupLegacy) turns
progress into a value through ``interpolate_keyframes``.
"""

from dataclasses import dataclass
from typing import Any, Dict, Generic, List, Optional, Sequence, Tuple, TypeVar

from .easing import EasingFunction, linear
from .exceptions import KeyframeError
from .helpers import AnimatableAttributeHelper

T = TypeVar("T")


@dataclass
class Keyframe(Generic[T]):
    """
    One known point on an attribute's timeline.

    Attributes:
        percentage: Normalized position on the timeline (0 = start, 1 = end)
        value: Attribute value at that position
    """
    percentage: float
    value: T

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dict. Value is stored as is."""
        return {"percentage": self.percentage, "value": self.value}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Keyframe":
        """Create from dict."""
        try:
            percentage = float(data["percentage"])
            value = data["value"]
        except (KeyError, TypeError, ValueError) as e:
            raise KeyframeError(f"Invalid keyframe data: {e}", data=data) from e
        return cls(percentage=percentage, value=value)


def sort_keyframes(keyframes: Sequence[Keyframe[T]]) -> List[Keyframe[T]]:
    """Return a new list ordered by percentage (ties keep input order)."""
    return sorted(keyframes, key=lambda k: k.percentage)


def find_bracketing_keyframes(
    keyframes: Sequence[Keyframe[T]],
    progress: float
) -> Tuple[Keyframe[T], Keyframe[T]]:
    """
    Find the pair of keyframes to interpolate between.

    Progress at or before the first keyframe uses the first pair, at or after
    the last keyframe the last pair; callers then extrapolate from that pair.

    Args:
        keyframes: At least two keyframes, sorted by percentage
        progress: Normalized timeline position

    Returns:
        (start, end) keyframes
    """
    if progress <= keyframes[0].percentage:
        return keyframes[0], keyframes[1]
    if progress >= keyframes[-1].percentage:
        return keyframes[-2], keyframes[-1]

    for i in range(len(keyframes) - 1):
        if keyframes[i].percentage <= progress <= keyframes[i + 1].percentage:
            return keyframes[i], keyframes[i + 1]

    return keyframes[-2], keyframes[-1]


def local_fraction(start: Keyframe, end: Keyframe, progress: float) -> float:
    """Progress between two keyframes; a zero-width pair counts as complete."""
    span = end.percentage - start.percentage
    if span == 0:
        return 1.0
    return (progress - start.percentage) / span


def interpolate_keyframes(
    keyframes: Sequence[Keyframe[T]],
    progress: float,
    helper: AnimatableAttributeHelper[T],
    easing: EasingFunction = linear,
) -> Optional[T]:
    """
    Value of a keyframe track at a timeline position.

    Args:
        keyframes: Keyframes sorted by percentage
        progress: Normalized timeline position
        helper: Blends two values of the track's type
        easing: Applied to the local fraction before blending

    Returns:
        Interpolated value, the only value for a single keyframe, or None
        for an empty track
    """
    if not keyframes:
        return None
    if len(keyframes) == 1:
        return keyframes[0].value

    start, end = find_bracketing_keyframes(keyframes, progress)
    fraction = easing(local_fraction(start, end, progress))
    return helper.lerp(start.value, end.value, fraction)


__all__ = [
    "Keyframe",
    "sort_keyframes",
    "find_bracketing_keyframes",
    "local_fraction",
    "interpolate_keyframes",
]
