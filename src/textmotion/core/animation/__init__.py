"""Animation package: public API re-exports."""

from .models import (
    AnimationCategory,
    AnimationPreset,
    PathType,
    CurveType,
    PathPoint,
    AnimationPath,
    AnimationSpec,
    CanvasSize,
    Transform,
)
from .easing import Easing, get_easing
from .timing import TimingRegime, TimingResult, one_shot, loop_restart, loop_reverse
from .paths import centroid, interpolate, CANVAS_CENTER
from .presets import (
    AnimatedProperty,
    PresetTrack,
    PresetRecipe,
    PRESET_TABLE,
    get_recipe,
    list_presets,
)
from .evaluator import evaluate, evaluate_layer, timing_regime
from .preview import preview_spec, evaluate_preview, PREVIEW_DURATIONS

__all__ = [
    "AnimationCategory",
    "AnimationPreset",
    "PathType",
    "CurveType",
    "PathPoint",
    "AnimationPath",
    "AnimationSpec",
    "CanvasSize",
    "Transform",
    "Easing",
    "get_easing",
    "TimingRegime",
    "TimingResult",
    "one_shot",
    "loop_restart",
    "loop_reverse",
    "centroid",
    "interpolate",
    "CANVAS_CENTER",
    "AnimatedProperty",
    "PresetTrack",
    "PresetRecipe",
    "PRESET_TABLE",
    "get_recipe",
    "list_presets",
    "evaluate",
    "evaluate_layer",
    "timing_regime",
    "preview_spec",
    "evaluate_preview",
    "PREVIEW_DURATIONS",
]
