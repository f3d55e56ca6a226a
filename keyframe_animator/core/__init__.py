"""
Core animation primitives - keyframes, easing and attribute helpers.
"""

from .exceptions import (
    AnimatorException,
    KeyframeError,
    EasingError,
    ConfigurationError,
)

from .logging_config import (
    get_logger,
    configure_logging,
    LogContext,
    log_performance,
)

from .easing import (
    EasingFunction,
    linear,
    ease_in_quad,
    ease_out_quad,
    ease_in_out_quad,
    ease_in_cubic,
    ease_out_cubic,
    ease_in_out_cubic,
    ease_in_sine,
    ease_out_sine,
    ease_in_out_sine,
    ease_in_expo,
    ease_out_expo,
    ease_in_out_expo,
    ease_out_back,
    SIMPLE_EASINGS,
    bezier_easing,
    cubic_bezier,
    EASING_PRESETS,
    get_easing,
    list_easings,
)

from .helpers import (
    AnimatableAttributeHelper,
    Point,
    NumberAnimationHelper,
    PointAnimationHelper,
    ArrayAnimationHelper,
    MappingAnimationHelper,
    StepAnimationHelper,
)

from .keyframe import (
    Keyframe,
    sort_keyframes,
    find_bracketing_keyframes,
    local_fraction,
    interpolate_keyframes,
)

__all__ = [
    # Exceptions
    "AnimatorException",
    "KeyframeError",
    "EasingError",
    "ConfigurationError",
    # Logging
    "get_logger",
    "configure_logging",
    "LogContext",
    "log_performance",
    # Easing
    "EasingFunction",
    "linear",
    "ease_in_quad",
    "ease_out_quad",
    "ease_in_out_quad",
    "ease_in_cubic",
    "ease_out_cubic",
    "ease_in_out_cubic",
    "ease_in_sine",
    "ease_out_sine",
    "ease_in_out_sine",
    "ease_in_expo",
    "ease_out_expo",
    "ease_in_out_expo",
    "ease_out_back",
    "SIMPLE_EASINGS",
    "bezier_easing",
    "cubic_bezier",
    "EASING_PRESETS",
    "get_easing",
    "list_easings",
    # Helpers
    "AnimatableAttributeHelper",
    "Point",
    "NumberAnimationHelper",
    "PointAnimationHelper",
    "ArrayAnimationHelper",
    "MappingAnimationHelper",
    "StepAnimationHelper",
    # Keyframes
    "Keyframe",
    "sort_keyframes",
    "find_bracketing_keyframes",
    "local_fraction",
    "interpolate_keyframes",
]
