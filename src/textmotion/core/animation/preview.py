"""Thumbnail previews for the preset picker.

Previews read the same preset table as live playback but run on fixed
per-preset durations, independent of any layer's configured duration.
Entrance and exit presets restart at the end of every preview cycle.
"""

from .evaluator import evaluate
from .models import AnimationCategory, AnimationPreset, AnimationSpec, CanvasSize, Transform
from .timing import loop_restart

PREVIEW_CANVAS = CanvasSize(100.0, 100.0)
DEFAULT_PREVIEW_DURATION = 1.0

# Seconds per preview cycle. Loop presets use a full oscillation period.
PREVIEW_DURATIONS: dict[AnimationPreset, float] = {
    AnimationPreset.BOUNCE_IN: 0.6,
    AnimationPreset.POP_IN: 0.6,
    AnimationPreset.PULSE: 1.6,
    AnimationPreset.BOUNCE: 1.2,
    AnimationPreset.FLOAT: 2.0,
    AnimationPreset.WIGGLE: 0.8,
    AnimationPreset.ROTATE: 2.0,
    AnimationPreset.GLOW: 1.6,
    AnimationPreset.SHAKE: 1.0,
    AnimationPreset.HEARTBEAT: 1.2,
    AnimationPreset.COLOR_CYCLE: 2.0,
    AnimationPreset.SWING: 1.2,
    AnimationPreset.FLASH: 1.2,
}


def preview_duration(preset: AnimationPreset) -> float:
    return PREVIEW_DURATIONS.get(preset, DEFAULT_PREVIEW_DURATION)


def preview_spec(preset: AnimationPreset) -> AnimationSpec:
    """The AnimationSpec a picker thumbnail plays for `preset`."""
    return AnimationSpec(preset=preset, duration=preview_duration(preset), loop=True)


def evaluate_preview(preset: AnimationPreset, elapsed_seconds: float,
                     canvas_size: CanvasSize = PREVIEW_CANVAS) -> Transform:
    """Transform of a picker thumbnail `elapsed_seconds` after it appeared.

    Path presets have no path to follow in the picker and stay static.
    """
    spec = preview_spec(preset)
    elapsed = elapsed_seconds
    if preset.category in (AnimationCategory.ENTRANCE, AnimationCategory.EXIT):
        elapsed = loop_restart(elapsed_seconds, spec.duration) * spec.duration
    return evaluate(spec, None, elapsed, canvas_size)
