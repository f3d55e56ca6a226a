"""
Legacy animation group.

Older API kept for existing callers: one duration and one playback state
drive every sequence in lockstep. There is no pause (cancel freezes, the
next start restarts from zero), no reverse and no per-sequence offset.
Values come from the same ``interpolate_keyframes`` routine as Animation.
"""

from dataclasses import dataclass, field
from typing import Callable, Generic, List, Optional, Sequence, TypeVar, Union

from ..core.easing import EasingFunction, get_easing
from ..core.helpers import AnimatableAttributeHelper
from ..core.keyframe import Keyframe, interpolate_keyframes, sort_keyframes
from ..core.logging_config import get_logger
from .protocol import PlaybackState

logger = get_logger(__name__)

T = TypeVar("T")


@dataclass
class AnimationSequenceLegacy(Generic[T]):
    """Keyframes, callback and helper for one attribute. Duration lives on the group."""
    keyframes: List[Keyframe[T]]
    apply_animation_value: Callable[[T], None]
    animatable_attribute_helper: AnimatableAttributeHelper[T]
    easing_function: Optional[Union[str, EasingFunction]] = field(default=None)


class AnimationGroupLegacy:
    """
    Lockstep player for legacy sequences.

    Usage:
        group = AnimationGroupLegacy([sequence], duration=2.0)
        group.start_animation()
        group.animate(0.1)
        group.cancel_animation()
    """

    def __init__(
        self,
        sequences: Sequence[AnimationSequenceLegacy] = (),
        duration: float = 1.0,
        state: PlaybackState = PlaybackState.IDLE,
    ):
        self.sequences: List[AnimationSequenceLegacy] = []
        self._tracks = []  # (sorted keyframes, easing) per sequence
        for sequence in sequences:
            self.add_sequence(sequence)

        self.duration = duration
        self.state = state
        self.elapsed_time = 0.0

    def add_sequence(self, sequence: AnimationSequenceLegacy) -> None:
        self.sequences.append(sequence)
        self._tracks.append(
            (sort_keyframes(sequence.keyframes), get_easing(sequence.easing_function))
        )

    def set_duration(self, duration: float) -> None:
        self.duration = duration

    def start_animation(self) -> None:
        """Always restarts from zero."""
        self.elapsed_time = 0.0
        self.state = PlaybackState.PLAYING

    def cancel_animation(self) -> None:
        """Halt playback; every sequence keeps its last applied value."""
        if self.state == PlaybackState.PLAYING:
            logger.debug(f"Legacy group cancelled at {self.elapsed_time:.3f}s")
        self.state = PlaybackState.STOPPED

    def animate(self, delta_time: float) -> None:
        if self.state != PlaybackState.PLAYING:
            return

        if self.duration <= 0:
            self.elapsed_time = 0.0
            progress = 1.0
        else:
            self.elapsed_time = min(max(self.elapsed_time + delta_time, 0.0), self.duration)
            progress = self.elapsed_time / self.duration

        for sequence, (keyframes, easing) in zip(self.sequences, self._tracks):
            if not keyframes:
                continue
            value = interpolate_keyframes(
                keyframes, progress, sequence.animatable_attribute_helper, easing
            )
            sequence.apply_animation_value(value)


__all__ = [
    "AnimationSequenceLegacy",
    "AnimationGroupLegacy",
]
