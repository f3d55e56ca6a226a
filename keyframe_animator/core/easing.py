"""
Easing functions.

An easing maps normalized progress to eased progress. Both ends are usually
0 and 1 but some curves overshoot (back, anticipate). Every easing here is a
pure ``Callable[[float], float]`` so any animation can pick one independently.
"""

import functools
import math
from typing import Callable, Dict, List, Optional, Tuple, Union

from .exceptions import EasingError

EasingFunction = Callable[[float], float]


# ============================================================================
# SIMPLE EASING FUNCTIONS
# ============================================================================

def linear(t: float) -> float:
    """No easing."""
    return t


def ease_in_quad(t: float) -> float:
    return t * t


def ease_out_quad(t: float) -> float:
    return 1 - (1 - t) * (1 - t)


def ease_in_out_quad(t: float) -> float:
    return 2 * t * t if t < 0.5 else 1 - pow(-2 * t + 2, 2) / 2


def ease_in_cubic(t: float) -> float:
    return t * t * t


def ease_out_cubic(t: float) -> float:
    return 1 - pow(1 - t, 3)


def ease_in_out_cubic(t: float) -> float:
    return 4 * t * t * t if t < 0.5 else 1 - pow(-2 * t + 2, 3) / 2


def ease_in_sine(t: float) -> float:
    return 1 - math.cos(t * math.pi / 2)


def ease_out_sine(t: float) -> float:
    return math.sin(t * math.pi / 2)


def ease_in_out_sine(t: float) -> float:
    return -(math.cos(math.pi * t) - 1) / 2


def ease_in_expo(t: float) -> float:
    return 0.0 if t == 0 else pow(2, 10 * t - 10)


def ease_out_expo(t: float) -> float:
    return 1.0 if t == 1 else 1 - pow(2, -10 * t)


def ease_in_out_expo(t: float) -> float:
    if t == 0:
        return 0.0
    if t == 1:
        return 1.0
    if t < 0.5:
        return pow(2, 20 * t - 10) / 2
    return (2 - pow(2, -20 * t + 10)) / 2


def ease_out_back(t: float) -> float:
    """Overshoots past 1 before settling."""
    c1 = 1.70158
    c3 = c1 + 1
    return 1 + c3 * pow(t - 1, 3) + c1 * pow(t - 1, 2)


SIMPLE_EASINGS: Dict[str, EasingFunction] = {
    "linear": linear,
    "ease_in_quad": ease_in_quad,
    "ease_out_quad": ease_out_quad,
    "ease_in_out_quad": ease_in_out_quad,
    "ease_in_cubic": ease_in_cubic,
    "ease_out_cubic": ease_out_cubic,
    "ease_in_out_cubic": ease_in_out_cubic,
    "ease_in_sine": ease_in_sine,
    "ease_out_sine": ease_out_sine,
    "ease_in_out_sine": ease_in_out_sine,
    "ease_in_expo": ease_in_expo,
    "ease_out_expo": ease_out_expo,
    "ease_in_out_expo": ease_in_out_expo,
    "ease_out_back": ease_out_back,
}


# ============================================================================
# CUBIC BEZIER EASING (CSS style)
# ============================================================================

def _bezier_coordinate(s: float, p1: float, p2: float) -> float:
    # Endpoints fixed at 0 and 1
    ms = 1 - s
    return 3 * ms * ms * s * p1 + 3 * ms * s * s * p2 + s * s * s


def bezier_easing(x1: float, y1: float, x2: float, y2: float, t: float) -> float:
    """
    Evaluate a CSS cubic bezier easing at t.

    Control points: (0,0), (x1,y1), (x2,y2), (1,1). Outside [0, 1] the
    curve continues along its endpoint tangents, as CSS cubic-bezier does.
    """
    if t <= 0:
        if x1 > 0:
            return t * y1 / x1
        if x2 > 0:
            return t * y2 / x2
        return 0.0
    if t >= 1:
        if x2 < 1:
            return 1.0 + (t - 1) * (1 - y2) / (1 - x2)
        if x1 < 1:
            return 1.0 + (t - 1) * (1 - y1) / (1 - x1)
        return 1.0

    # x(s) is monotonic for x1, x2 in [0, 1]; bisect for the curve parameter
    low, high = 0.0, 1.0
    for _ in range(30):
        mid = (low + high) / 2
        if _bezier_coordinate(mid, x1, x2) < t:
            low = mid
        else:
            high = mid

    return _bezier_coordinate((low + high) / 2, y1, y2)


def cubic_bezier(x1: float, y1: float, x2: float, y2: float) -> EasingFunction:
    """Build an easing function from bezier control points."""
    if not (0.0 <= x1 <= 1.0 and 0.0 <= x2 <= 1.0):
        raise EasingError(
            "Bezier x control points must lie in [0, 1]",
            control_points=(x1, y1, x2, y2),
        )
    return functools.partial(bezier_easing, x1, y1, x2, y2)


# Format: (x1, y1, x2, y2) control points
EASING_PRESETS: Dict[str, Tuple[float, float, float, float]] = {
    "ease": (0.25, 0.1, 0.25, 1.0),
    "easeIn": (0.42, 0.0, 1.0, 1.0),
    "easeOut": (0.0, 0.0, 0.58, 1.0),
    "easeInOut": (0.42, 0.0, 0.58, 1.0),
    "easeInQuad": (0.11, 0.0, 0.5, 0.0),
    "easeOutQuad": (0.5, 1.0, 0.89, 1.0),
    "easeInOutQuad": (0.45, 0.0, 0.55, 1.0),
    "easeInCubic": (0.32, 0.0, 0.67, 0.0),
    "easeOutCubic": (0.33, 1.0, 0.68, 1.0),
    "easeInOutCubic": (0.65, 0.0, 0.35, 1.0),
    "easeInBack": (0.36, 0.0, 0.66, -0.56),
    "easeOutBack": (0.34, 1.56, 0.64, 1.0),
    "easeInOutBack": (0.68, -0.6, 0.32, 1.6),
    "anticipate": (0.38, -0.4, 0.88, 1.0),
    "overshoot": (0.25, 0.0, 0.0, 1.4),
}


# ============================================================================
# LOOKUP
# ============================================================================

def get_easing(easing: Optional[Union[str, EasingFunction]] = None) -> EasingFunction:
    """
    Resolve an easing specification to a callable.

    Args:
        easing: None (linear), a callable, a simple easing name
            (e.g. "ease_in_cubic") or a bezier preset name (e.g. "easeOut")

    Returns:
        Easing function

    Raises:
        EasingError: if the name is unknown or the value is not callable
    """
    if easing is None:
        return linear
    if isinstance(easing, str):
        if easing in SIMPLE_EASINGS:
            return SIMPLE_EASINGS[easing]
        if easing in EASING_PRESETS:
            return cubic_bezier(*EASING_PRESETS[easing])
        raise EasingError(f"Unknown easing '{easing}'", easing=easing)
    if callable(easing):
        return easing
    raise EasingError("Easing must be a name or a callable", easing=easing)


def list_easings() -> List[str]:
    """Get every easing name accepted by get_easing."""
    return sorted(set(SIMPLE_EASINGS) | set(EASING_PRESETS))


__all__ = [
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
]
