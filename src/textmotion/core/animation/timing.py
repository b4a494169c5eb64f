"""Timing regimes: elapsed seconds to normalized progress.

There is no running clock here. Each function is a pure mapping from an
elapsed time, so evaluating an earlier time rewinds and a later one
fast-forwards.
"""

import math
from enum import Enum
from typing import NamedTuple


class TimingRegime(str, Enum):
    ONE_SHOT = "one_shot"
    LOOP_RESTART = "loop_restart"  # sawtooth
    LOOP_REVERSE = "loop_reverse"  # triangle / ping-pong


class TimingResult(NamedTuple):
    progress: float
    active: bool


def one_shot(elapsed: float, delay: float, duration: float) -> TimingResult:
    """Progress of a single run starting at `delay` and lasting `duration`.

    Non-positive duration counts as already complete. Progress is exactly
    1.0 once `delay + duration` is reached.
    """
    active = elapsed >= delay
    if duration <= 0.0 or elapsed >= delay + duration:
        return TimingResult(1.0, active)
    if not active:
        return TimingResult(0.0, False)
    progress = (elapsed - delay) / duration
    return TimingResult(min(max(progress, 0.0), 1.0), True)


def _phase(elapsed: float, period: float) -> float:
    if period <= 0.0 or elapsed <= 0.0:
        return 0.0
    cycles = elapsed / period
    return cycles - math.floor(cycles)


def loop_restart(elapsed: float, duration: float) -> float:
    """Sawtooth: 0 -> 1 over each period, then jump back to 0."""
    return _phase(elapsed, duration)


def loop_reverse(elapsed: float, duration: float) -> float:
    """Triangle: 0 -> 1 over the first half-period, 1 -> 0 over the second."""
    phase = _phase(elapsed, duration)
    return 1.0 - abs(1.0 - 2.0 * phase)


def progress_for(regime: TimingRegime, elapsed: float, delay: float,
                 duration: float) -> float:
    """Progress under any regime.

    Only one-shot runs wait for `delay`; loops run from t=0.
    """
    if regime is TimingRegime.ONE_SHOT:
        return one_shot(elapsed, delay, duration).progress
    if regime is TimingRegime.LOOP_RESTART:
        return loop_restart(elapsed, duration)
    return loop_reverse(elapsed, duration)
