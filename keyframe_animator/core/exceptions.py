"""
Exception hierarchy for the keyframe animator.

Exceptions are raised while building animations (resolving easings, parsing
keyframes, loading configuration). The per-tick ``animate`` path never raises.
"""

from typing import Any, Dict, Optional


class AnimatorException(Exception):
    """Base exception carrying an optional details mapping."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if not self.details:
            return self.message
        extra = ", ".join(f"{k}={v!r}" for k, v in self.details.items())
        return f"{self.message} ({extra})"


class KeyframeError(AnimatorException):
    """Malformed keyframe data."""

    def __init__(self, message: str, index=None, **kwargs):
        details = kwargs.copy()
        if index is not None:
            details["index"] = index
        super().__init__(message, details)


class EasingError(AnimatorException):
    """Unknown or unusable easing function."""

    def __init__(self, message: str, easing=None, **kwargs):
        details = kwargs.copy()
        if easing is not None:
            details["easing"] = easing
        super().__init__(message, details)


class ConfigurationError(AnimatorException):
    """Invalid animation configuration."""

    def __init__(self, message: str, field_name=None, **kwargs):
        details = kwargs.copy()
        if field_name is not None:
            details["field"] = field_name
        super().__init__(message, details)


__all__ = [
    "AnimatorException",
    "KeyframeError",
    "EasingError",
    "ConfigurationError",
]
