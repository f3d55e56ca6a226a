"""
Keyframe Animator.

Keyframe-based value animation driven by the caller's tick loop. Tracks of
keyframes are interpolated with pluggable easings and per-type helpers, and
every value is pushed to the target through a callback.

Usage:
    from keyframe_animator import (
        Animation, CompositeAnimation, Keyframe, Point,
        PointAnimationHelper, NumberAnimationHelper,
    )

    position = Animation(
        [Keyframe(0, Point(0, 0)), Keyframe(0.5, Point(3, 3)), Keyframe(1, Point(10, 10))],
        sprite.set_position,
        PointAnimationHelper(),
    )
    opacity = Animation(
        [Keyframe(0, 0.0), Keyframe(1, 1.0)],
        sprite.set_opacity,
        NumberAnimationHelper(),
        easing_function="ease_out_cubic",
    )

    scene = CompositeAnimation()
    scene.add_animation("position", position)
    scene.add_animation("opacity", opacity, start_time=0.5)
    scene.start_animation()

    # Host loop
    scene.animate(delta_time)
"""

from .core import (
    # Exceptions
    AnimatorException,
    KeyframeError,
    EasingError,
    ConfigurationError,
    # Logging
    get_logger,
    configure_logging,
    LogContext,
    # Easing
    EasingFunction,
    linear,
    ease_in_quad,
    ease_out_quad,
    ease_in_out_quad,
    ease_in_cubic,
    ease_out_cubic,
    ease_in_out_cubic,
    cubic_bezier,
    get_easing,
    list_easings,
    EASING_PRESETS,
    SIMPLE_EASINGS,
    # Helpers
    AnimatableAttributeHelper,
    Point,
    NumberAnimationHelper,
    PointAnimationHelper,
    ArrayAnimationHelper,
    MappingAnimationHelper,
    StepAnimationHelper,
    # Keyframes
    Keyframe,
    interpolate_keyframes,
)

from .animation import (
    PlaybackState,
    Animator,
    Animation,
    CompositeEntry,
    CompositeAnimation,
    AnimationSequence,
    AnimationGroup,
    AnimationSequenceLegacy,
    AnimationGroupLegacy,
)

from .config import AnimationConfig

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Core - Exceptions
    "AnimatorException",
    "KeyframeError",
    "EasingError",
    "ConfigurationError",
    # Core - Logging
    "get_logger",
    "configure_logging",
    "LogContext",
    # Core - Easing
    "EasingFunction",
    "linear",
    "ease_in_quad",
    "ease_out_quad",
    "ease_in_out_quad",
    "ease_in_cubic",
    "ease_out_cubic",
    "ease_in_out_cubic",
    "cubic_bezier",
    "get_easing",
    "list_easings",
    "EASING_PRESETS",
    "SIMPLE_EASINGS",
    # Core - Helpers
    "AnimatableAttributeHelper",
    "Point",
    "NumberAnimationHelper",
    "PointAnimationHelper",
    "ArrayAnimationHelper",
    "MappingAnimationHelper",
    "StepAnimationHelper",
    # Core - Keyframes
    "Keyframe",
    "interpolate_keyframes",
    # Animation
    "PlaybackState",
    "Animator",
    "Animation",
    "CompositeEntry",
    "CompositeAnimation",
    "AnimationSequence",
    "AnimationGroup",
    "AnimationSequenceLegacy",
    "AnimationGroupLegacy",
    # Config
    "AnimationConfig",
]
