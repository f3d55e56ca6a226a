"""
Composite animation - many independently timed animators under one control.

Each child is registered under a unique name together with a start-time
offset. A composite is itself an Animator, so composites nest.
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterator, List, Mapping, Optional, Union

from ..core.logging_config import get_logger, log_performance
from .protocol import Animator, PlaybackState

logger = get_logger(__name__)


@dataclass
class CompositeEntry:
    """
    A named child of a composite.

    Attributes:
        animator: Any Animator, including another composite
        start_time: Offset on the children's timeline before the child moves
    """
    animator: Animator
    start_time: float = 0.0


EntryLike = Union[CompositeEntry, Mapping[str, Any]]


def _coerce_entry(entry: EntryLike) -> CompositeEntry:
    if isinstance(entry, CompositeEntry):
        return entry
    return CompositeEntry(
        animator=entry["animator"],
        start_time=entry.get("start_time", entry.get("startTime", 0.0)),
    )


class CompositeAnimation:
    """
    Fans one ``animate`` call out to named child animators.

    Children run on the composite's timeline. With the default duration
    (the latest child end, ``natural_duration``) deltas pass through
    unchanged. Setting a different duration plays the whole timeline faster
    or slower without touching the children's own durations.

    Usage:
        composite = CompositeAnimation()
        composite.add_animation("position", position_animation)
        composite.add_animation("fade", fade_animation, start_time=0.5)
        composite.duration = 3.0
        composite.start_animation()
        composite.animate(0.016)
    """

    def __init__(
        self,
        animations: Optional[Mapping[str, EntryLike]] = None,
        duration: Optional[float] = None,
        loop: bool = False,
        on_end: Optional[Callable[[], None]] = None,
    ):
        self._animations: Dict[str, CompositeEntry] = {}
        for name, entry in (animations or {}).items():
            self._animations[name] = _coerce_entry(entry)

        self.loop = loop
        self.on_end = on_end

        self._duration = duration
        self._elapsed_time = 0.0
        self._timeline_time = 0.0  # Position on the children's timeline
        self._state = PlaybackState.IDLE
        self._finished = False

    # ------------------------------------------------------------------
    # Children
    # ------------------------------------------------------------------

    def add_animation(self, name: str, animator: Animator, start_time: float = 0.0) -> None:
        """
        Register a child, replacing any child already under that name.

        A child added while the composite plays is started right away.

        start_time is measured on the children's timeline. When the
        composite's duration differs from natural_duration, the offset
        scales with it: the child begins at
        ``start_time * duration / natural_duration`` on the composite's clock.
        """
        if name in self._animations:
            logger.debug(f"Replacing composite child '{name}'")
        self._animations[name] = CompositeEntry(animator=animator, start_time=start_time)
        if self._state == PlaybackState.PLAYING:
            animator.start_animation()

    def remove_animation(self, name: str) -> Optional[Animator]:
        """Unregister a child. Unknown names are ignored and return None."""
        entry = self._animations.pop(name, None)
        return entry.animator if entry is not None else None

    def get_animation(self, name: str) -> Optional[Animator]:
        entry = self._animations.get(name)
        return entry.animator if entry is not None else None

    @property
    def names(self) -> List[str]:
        return list(self._animations)

    def __len__(self) -> int:
        return len(self._animations)

    def __contains__(self, name: str) -> bool:
        return name in self._animations

    def __iter__(self) -> Iterator[str]:
        return iter(self._animations)

    # ------------------------------------------------------------------
    # Timing
    # ------------------------------------------------------------------

    @property
    def natural_duration(self) -> float:
        """Time until the last child ends at normal speed."""
        if not self._animations:
            return 0.0
        return max(e.start_time + e.animator.duration for e in self._animations.values())

    @property
    def duration(self) -> float:
        if self._duration is None:
            return self.natural_duration
        return self._duration

    @duration.setter
    def duration(self, duration: float) -> None:
        self.set_duration(duration)

    def set_duration(self, duration: Optional[float]) -> None:
        """Set the composite's length; None follows natural_duration again."""
        self._duration = duration

    @property
    def time_scale(self) -> float:
        """Children's timeline seconds per composite second."""
        duration = self.duration
        natural = self.natural_duration
        if duration <= 0 or natural <= 0:
            return 1.0
        return natural / duration

    @property
    def elapsed_time(self) -> float:
        return self._elapsed_time

    @property
    def state(self) -> PlaybackState:
        return self._state

    @property
    def is_playing(self) -> bool:
        return self._state == PlaybackState.PLAYING

    @property
    def is_finished(self) -> bool:
        return self._finished

    # ------------------------------------------------------------------
    # Control
    # ------------------------------------------------------------------

    def start_animation(self) -> None:
        """Start every child and the composite; resumes when paused."""
        if self._state != PlaybackState.PAUSED:
            self._elapsed_time = 0.0
            self._timeline_time = 0.0
            self._finished = False
        for entry in self._animations.values():
            entry.animator.start_animation()
        self._state = PlaybackState.PLAYING
        logger.debug(f"Composite started with {len(self._animations)} children")

    def pause_animation(self) -> None:
        """Freeze every child at its current value."""
        for entry in self._animations.values():
            entry.animator.pause_animation()
        if self._state == PlaybackState.PLAYING:
            self._state = PlaybackState.PAUSED

    def stop_animation(self) -> None:
        for entry in self._animations.values():
            entry.animator.stop_animation()
        if self._state != PlaybackState.IDLE:
            self._state = PlaybackState.STOPPED

    def cancel_animation(self) -> None:
        """Alias of stop_animation."""
        self.stop_animation()

    # ------------------------------------------------------------------
    # Tick
    # ------------------------------------------------------------------

    @log_performance
    def animate(self, delta_time: float) -> None:
        """
        Advance the composite and hand each started child its share of time.

        Children are updated in insertion order. A child whose start time is
        crossed during this tick receives only the part past its offset. A
        looping composite carries time past its end into the next cycle.
        """
        if self._state != PlaybackState.PLAYING:
            return

        duration = self.duration
        natural = self.natural_duration
        previous_timeline = self._timeline_time
        overflow = 0.0

        if duration <= 0:
            self._elapsed_time = 0.0
            self._timeline_time = natural
            reached_end = True
        else:
            previous = self._elapsed_time
            overflow = max(previous + delta_time - duration, 0.0)
            self._elapsed_time = min(max(previous + delta_time, 0.0), duration)
            reached_end = self._elapsed_time >= duration
            if reached_end:
                self._timeline_time = natural
            else:
                advanced = self._elapsed_time - previous
                self._timeline_time = previous_timeline + advanced * self.time_scale

        for entry in self._animations.values():
            child_delta = self._timeline_time - max(previous_timeline, entry.start_time)
            if child_delta > 0:
                entry.animator.animate(child_delta)

        if reached_end:
            self._handle_end(overflow)

    def _handle_end(self, overflow: float) -> None:
        if self.loop:
            self._elapsed_time = 0.0
            self._timeline_time = 0.0
            for entry in self._animations.values():
                entry.animator.start_animation()
            carried = overflow % self.duration if self.duration > 0 else 0.0
            if carried > 0:
                self.animate(carried)
        elif not self._finished:
            self._finished = True
            logger.debug("Composite reached its end")
            if self.on_end is not None:
                self.on_end()


__all__ = [
    "CompositeEntry",
    "CompositeAnimation",
]
