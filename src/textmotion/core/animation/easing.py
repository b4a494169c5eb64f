"""Easing curves mapping linear progress in [0, 1] onto a perceptual curve.

Every curve clamps its input and pins the endpoints, so f(0) == 0.0 and
f(1) == 1.0 exactly.
"""

from enum import Enum
from typing import Callable

BOUNCE_N1 = 7.5625
BOUNCE_D1 = 2.75
OVERSHOOT = 1.70158


class Easing(str, Enum):
    LINEAR = "linear"
    SMOOTH = "smooth"
    BOUNCE = "bounce"
    OVERSHOOT = "overshoot"


def linear(t: float) -> float:
    if t <= 0.0:
        return 0.0
    if t >= 1.0:
        return 1.0
    return t


def smooth(t: float) -> float:
    """Ease-in-out cubic: slow start and end, fast middle."""
    if t <= 0.0:
        return 0.0
    if t >= 1.0:
        return 1.0
    if t < 0.5:
        return 4.0 * t * t * t
    return 1.0 - (-2.0 * t + 2.0) ** 3 / 2.0


def bounce(t: float) -> float:
    """Ease-out bounce: four decaying parabolic hops settling at 1."""
    if t <= 0.0:
        return 0.0
    if t >= 1.0:
        return 1.0
    if t < 1.0 / BOUNCE_D1:
        return BOUNCE_N1 * t * t
    elif t < 2.0 / BOUNCE_D1:
        t -= 1.5 / BOUNCE_D1
        return BOUNCE_N1 * t * t + 0.75
    elif t < 2.5 / BOUNCE_D1:
        t -= 2.25 / BOUNCE_D1
        return BOUNCE_N1 * t * t + 0.9375
    else:
        t -= 2.625 / BOUNCE_D1
        return BOUNCE_N1 * t * t + 0.984375


def overshoot(t: float) -> float:
    """Ease-out back: passes 1 near the end, then settles back onto it."""
    if t <= 0.0:
        return 0.0
    if t >= 1.0:
        return 1.0
    u = t - 1.0
    return u * u * ((OVERSHOOT + 1.0) * u + OVERSHOOT) + 1.0


EASING_FUNCTIONS: dict[Easing, Callable[[float], float]] = {
    Easing.LINEAR: linear,
    Easing.SMOOTH: smooth,
    Easing.BOUNCE: bounce,
    Easing.OVERSHOOT: overshoot,
}


def get_easing(easing: Easing) -> Callable[[float], float]:
    """Look up the curve for an easing tag, defaulting to smooth."""
    return EASING_FUNCTIONS.get(easing, smooth)


def apply(easing: Easing, t: float) -> float:
    return get_easing(easing)(t)
