"""
Animator Protocol - the capability shared by every playable unit.

Single animations, composites and groups all satisfy it structurally, so a
composite can hold any of them, including other composites.
"""

from enum import Enum
from typing import Protocol, runtime_checkable


class PlaybackState(Enum):
    """Playback state of an animator."""
    IDLE = "idle"           # Constructed, never started
    PLAYING = "playing"
    PAUSED = "paused"       # Next start resumes
    STOPPED = "stopped"     # Next start restarts


@runtime_checkable
class Animator(Protocol):
    """
    Protocol for anything a host loop (or a composite) can drive.

    Usage:
        animator.start_animation()
        while running:
            animator.animate(delta_time)
    """

    @property
    def duration(self) -> float:
        """Length of one playthrough in seconds."""
        ...

    @property
    def state(self) -> PlaybackState:
        """Current playback state."""
        ...

    def start_animation(self) -> None:
        """Play from the start, or resume when paused."""
        ...

    def pause_animation(self) -> None:
        """Freeze at the current value; the next start resumes."""
        ...

    def stop_animation(self) -> None:
        """Freeze at the current value; the next start restarts."""
        ...

    def set_duration(self, duration: float) -> None:
        """Change the length of one playthrough."""
        ...

    def animate(self, delta_time: float) -> None:
        """
        Advance by delta_time seconds and apply the resulting values.

        Args:
            delta_time: Seconds since the previous tick
        """
        ...


__all__ = [
    "PlaybackState",
    "Animator",
]
