"""
Animation group - several keyframe tracks started together, each with its
own duration.
"""

from dataclasses import dataclass, field
from typing import Callable, Generic, List, Optional, Sequence, TypeVar, Union

from ..core.easing import EasingFunction
from ..core.helpers import AnimatableAttributeHelper
from ..core.keyframe import Keyframe
from .animation import Animation
from .composite import CompositeAnimation
from .protocol import PlaybackState

T = TypeVar("T")


@dataclass
class AnimationSequence(Generic[T]):
    """
    A keyframe track bundled with its callback, helper and duration.

    Attributes:
        keyframes: Track keyframes
        apply_animation_value: Receives every computed value
        animatable_attribute_helper: Blends two values of the track's type
        duration: Seconds for this track at normal group speed
        easing_function: Easing name or callable (None = linear)
    """
    keyframes: List[Keyframe[T]]
    apply_animation_value: Callable[[T], None]
    animatable_attribute_helper: AnimatableAttributeHelper[T]
    duration: float = 1.0
    easing_function: Optional[Union[str, EasingFunction]] = field(default=None)

    def to_animation(self) -> Animation[T]:
        return Animation(
            self.keyframes,
            self.apply_animation_value,
            self.animatable_attribute_helper,
            easing_function=self.easing_function,
            duration=self.duration,
        )


class AnimationGroup:
    """
    Plays sequences side by side from time zero.

    The group's duration defaults to the longest sequence; setting it
    rescales the whole group the same way a composite does.
    """

    def __init__(
        self,
        sequences: Sequence[AnimationSequence] = (),
        duration: Optional[float] = None,
        loop: bool = False,
    ):
        self._composite = CompositeAnimation(duration=duration, loop=loop)
        for sequence in sequences:
            self.add_sequence(sequence)

    def add_sequence(self, sequence: AnimationSequence) -> Animation:
        """Append a sequence; returns the animation built for it."""
        animation = sequence.to_animation()
        self._composite.add_animation(f"sequence_{len(self._composite)}", animation)
        return animation

    @property
    def duration(self) -> float:
        return self._composite.duration

    @duration.setter
    def duration(self, duration: float) -> None:
        self.set_duration(duration)

    def set_duration(self, duration: Optional[float]) -> None:
        self._composite.set_duration(duration)

    @property
    def state(self) -> PlaybackState:
        return self._composite.state

    @property
    def elapsed_time(self) -> float:
        return self._composite.elapsed_time

    @property
    def is_playing(self) -> bool:
        return self._composite.is_playing

    def start_animation(self) -> None:
        self._composite.start_animation()

    def pause_animation(self) -> None:
        self._composite.pause_animation()

    def stop_animation(self) -> None:
        self._composite.stop_animation()

    def cancel_animation(self) -> None:
        self._composite.stop_animation()

    def animate(self, delta_time: float) -> None:
        self._composite.animate(delta_time)


__all__ = [
    "AnimationSequence",
    "AnimationGroup",
]
