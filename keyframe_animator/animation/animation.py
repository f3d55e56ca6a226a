"""
Single keyframe animation for one attribute.
"""

from typing import Callable, Generic, Optional, Sequence, TypeVar, Union

from ..core.easing import EasingFunction, get_easing
from ..core.helpers import AnimatableAttributeHelper
from ..core.keyframe import Keyframe, interpolate_keyframes, sort_keyframes
from ..core.logging_config import get_logger
from .protocol import PlaybackState

logger = get_logger(__name__)

T = TypeVar("T")


class Animation(Generic[T]):
    """
    Plays a keyframe track and pushes every value through a callback.

    The animation owns no clock: the host calls ``animate(delta_time)`` once
    per tick. Values are only produced while PLAYING.

    Usage:
        animation = Animation(
            [Keyframe(0, Point(0, 0)), Keyframe(1, Point(10, 10))],
            sprite.set_position,
            PointAnimationHelper(),
            easing_function="ease_in_out_cubic",
            duration=2.0,
        )
        animation.start_animation()
        animation.animate(0.016)
    """

    def __init__(
        self,
        keyframes: Sequence[Keyframe[T]],
        apply_animation_value: Callable[[T], None],
        animatable_attribute_helper: AnimatableAttributeHelper[T],
        easing_function: Optional[Union[str, EasingFunction]] = None,
        duration: float = 1.0,
        loop: bool = False,
        reverse: bool = False,
        on_end: Optional[Callable[[], None]] = None,
    ):
        self.keyframes = sort_keyframes(keyframes)
        self.apply_animation_value = apply_animation_value
        self.animatable_attribute_helper = animatable_attribute_helper
        self.easing_function = get_easing(easing_function)
        self.loop = loop
        self.on_end = on_end

        self._duration = duration
        self._reverse = reverse
        self._elapsed_time = 0.0
        self._state = PlaybackState.IDLE
        self._finished = False

        if not self.keyframes:
            logger.debug("Animation created without keyframes; animate() will do nothing")

    @classmethod
    def from_config(
        cls,
        keyframes: Sequence[Keyframe[T]],
        apply_animation_value: Callable[[T], None],
        animatable_attribute_helper: AnimatableAttributeHelper[T],
        config,
        on_end: Optional[Callable[[], None]] = None,
    ) -> "Animation[T]":
        """Create from an AnimationConfig."""
        return cls(
            keyframes,
            apply_animation_value,
            animatable_attribute_helper,
            easing_function=config.easing,
            duration=config.duration,
            loop=config.loop,
            reverse=config.reverse,
            on_end=on_end,
        )

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def duration(self) -> float:
        return self._duration

    @duration.setter
    def duration(self, duration: float) -> None:
        self.set_duration(duration)

    @property
    def state(self) -> PlaybackState:
        return self._state

    @property
    def elapsed_time(self) -> float:
        return self._elapsed_time

    @property
    def reverse(self) -> bool:
        return self._reverse

    @property
    def is_playing(self) -> bool:
        return self._state == PlaybackState.PLAYING

    @property
    def is_finished(self) -> bool:
        """True once a non-looping playthrough reached its terminal value."""
        return self._finished

    @property
    def progress(self) -> float:
        """Normalized timeline position; degenerate durations sit at the terminal end."""
        if self._duration <= 0:
            return 0.0 if self._reverse else 1.0
        return self._elapsed_time / self._duration

    # ------------------------------------------------------------------
    # Control
    # ------------------------------------------------------------------

    def start_animation(self) -> None:
        """Play from the start (the end when reversed), or resume when paused."""
        if self._state != PlaybackState.PAUSED:
            self._elapsed_time = self._start_position()
            self._finished = False
        self._state = PlaybackState.PLAYING
        logger.debug(f"Animation started at {self._elapsed_time:.3f}s")

    def pause_animation(self) -> None:
        if self._state == PlaybackState.PLAYING:
            self._state = PlaybackState.PAUSED

    def stop_animation(self) -> None:
        if self._state != PlaybackState.IDLE:
            self._state = PlaybackState.STOPPED

    def cancel_animation(self) -> None:
        """Alias of stop_animation."""
        self.stop_animation()

    def toggle_reverse(self, reverse: bool) -> None:
        """Set the playback direction; elapsed time is left where it is."""
        self._reverse = reverse

    def set_duration(self, duration: float) -> None:
        """
        Change the playthrough length.

        Progress is recomputed from elapsed time every tick, so a running
        animation changes speed on its next ``animate`` call.
        """
        self._duration = duration

    def seek(self, elapsed_time: float) -> None:
        """Jump to a time (clamped to the duration) and apply its value now."""
        self._elapsed_time = self._clamp(elapsed_time)
        self._apply_current_value()

    # ------------------------------------------------------------------
    # Tick
    # ------------------------------------------------------------------

    def animate(self, delta_time: float) -> None:
        """
        Advance by delta_time seconds and apply the value at the new time.

        Does nothing unless PLAYING.
        """
        if self._state != PlaybackState.PLAYING or not self.keyframes:
            return

        step = -delta_time if self._reverse else delta_time
        unclamped = self._elapsed_time + step
        self._elapsed_time = self._clamp(unclamped)
        self._apply_current_value()

        if self._at_terminal():
            if self.loop:
                self._elapsed_time = self._wrap(unclamped)
            elif not self._finished:
                self._finished = True
                logger.debug("Animation reached its end")
                if self.on_end is not None:
                    self.on_end()

    def value_at(self, progress: float) -> Optional[T]:
        """Value of the track at a normalized position, without applying it."""
        return interpolate_keyframes(
            self.keyframes, progress,
            self.animatable_attribute_helper, self.easing_function,
        )

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _apply_current_value(self) -> None:
        if not self.keyframes:
            return
        self.apply_animation_value(self.value_at(self.progress))

    def _clamp(self, elapsed_time: float) -> float:
        return min(max(elapsed_time, 0.0), max(self._duration, 0.0))

    def _start_position(self) -> float:
        return max(self._duration, 0.0) if self._reverse else 0.0

    def _wrap(self, unclamped: float) -> float:
        """Position in the next cycle, carrying time past the boundary."""
        if self._duration <= 0:
            return self._start_position()
        if self._reverse:
            overflow = (-unclamped) % self._duration
            return self._duration - overflow
        return (unclamped - self._duration) % self._duration

    def _at_terminal(self) -> bool:
        if self._duration <= 0:
            return True
        if self._reverse:
            return self._elapsed_time <= 0.0
        return self._elapsed_time >= self._duration


__all__ = ["Animation"]
