"""Animation evaluator: (animation, path, elapsed time, canvas) -> Transform.

A pure function of its arguments. Nothing is cached or retained between
calls, so any time can be evaluated in any order, from any thread.
"""

import logging
from typing import Optional

from .easing import Easing, apply as apply_easing
from .models import AnimationPath, AnimationSpec, CanvasSize, Transform
from .paths import centroid, interpolate
from .presets import AnimatedProperty, PresetRecipe, PresetTrack, get_recipe
from .timing import TimingRegime, loop_restart, one_shot, progress_for

logger = logging.getLogger("TextMotionMCP.core.evaluator")


def _lerp(start: float, end: float, t: float) -> float:
    # Weighted form reproduces start at t=0 and end at t=1 exactly.
    return start * (1.0 - t) + end * t


def track_value(track: PresetTrack, spec: AnimationSpec, elapsed: float) -> float:
    """Value of a single preset track at `elapsed` seconds."""
    duration = spec.duration * track.time_scale
    progress = progress_for(track.regime, elapsed, spec.delay, duration)
    return _lerp(track.start, track.end, apply_easing(track.easing, progress))


def _clamped(values: dict) -> dict:
    for key in ("opacity", "glow_opacity", "reveal"):
        values[key] = min(max(values[key], 0.0), 1.0)
    for key in ("blur_radius", "glow_radius", "scale_x", "scale_y"):
        values[key] = max(values[key], 0.0)
    return values


def evaluate_recipe(recipe: PresetRecipe, spec: AnimationSpec, elapsed: float) -> Transform:
    """Apply every track of a preset recipe; untouched fields stay identity."""
    values = Transform.identity().model_dump()
    for track in recipe.tracks:
        value = track_value(track, spec, elapsed)
        if track.property is AnimatedProperty.SCALE:
            values["scale_x"] = value
            values["scale_y"] = value
        else:
            values[track.property.value] = value
    if recipe.pivot is not None:
        values["pivot_x"], values["pivot_y"] = recipe.pivot
    return Transform(**_clamped(values))


def path_progress(spec: AnimationSpec, elapsed: float) -> float:
    """Linear progress along a motion path.

    Looping restarts from t=0 and ignores delay; a single run waits for it.
    """
    if spec.loop:
        return loop_restart(elapsed, spec.duration)
    return one_shot(elapsed, spec.delay, spec.duration).progress


def evaluate_path(spec: AnimationSpec, path: Optional[AnimationPath], elapsed: float,
                  canvas_size: CanvasSize) -> Transform:
    """Translation that moves a layer along `path`, centred on the path's centroid."""
    if path is None:
        return Transform.identity()
    width, height = canvas_size
    point = interpolate(path, apply_easing(Easing.LINEAR, path_progress(spec, elapsed)))
    center = centroid(path.points)
    return Transform(
        translate_x=(point.x - center.x) * width,
        translate_y=(point.y - center.y) * height,
    )


def evaluate(spec: Optional[AnimationSpec], path: Optional[AnimationPath],
             elapsed_seconds: float, canvas_size: CanvasSize) -> Transform:
    """Compute the Transform for one layer at `elapsed_seconds`.

    Path presets (motion_path, curve_path) are driven by `path`; every other
    preset by its row in the preset table. A missing animation, or a preset
    without a table row, yields the identity transform.
    """
    if spec is None:
        return Transform.identity()
    if spec.preset.is_path:
        return evaluate_path(spec, path, elapsed_seconds, canvas_size)

    recipe = get_recipe(spec.preset)
    if recipe is None:
        logger.debug(f"No recipe for preset '{spec.preset}', using identity")
        return Transform.identity()
    return evaluate_recipe(recipe, spec, elapsed_seconds)


def evaluate_layer(layer, elapsed_seconds: float, canvas_size: CanvasSize) -> Transform:
    """Evaluate a TextLayer-like record (anything with .animation and .path)."""
    return evaluate(layer.animation, layer.path, elapsed_seconds, canvas_size)


def timing_regime(spec: AnimationSpec) -> TimingRegime:
    """The regime a spec runs under, as the editor timeline displays it."""
    if spec.preset.is_path:
        return TimingRegime.LOOP_RESTART if spec.loop else TimingRegime.ONE_SHOT
    recipe = get_recipe(spec.preset)
    return recipe.regime if recipe else TimingRegime.ONE_SHOT
