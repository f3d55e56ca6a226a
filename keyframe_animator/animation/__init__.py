"""
Playable units - single animations, composites and groups.
"""

from .protocol import (
    PlaybackState,
    Animator,
)

from .animation import Animation

from .composite import (
    CompositeEntry,
    CompositeAnimation,
)

from .group import (
    AnimationSequence,
    AnimationGroup,
)

from .legacy import (
    AnimationSequenceLegacy,
    AnimationGroupLegacy,
)

__all__ = [
    # Protocol
    "PlaybackState",
    "Animator",
    # Single
    "Animation",
    # Composite
    "CompositeEntry",
    "CompositeAnimation",
    # Group
    "AnimationSequence",
    "AnimationGroup",
    # Legacy
    "AnimationSequenceLegacy",
    "AnimationGroupLegacy",
]
