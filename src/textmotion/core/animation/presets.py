"""Canonical preset table: one recipe per animation preset.

Live playback, the thumbnail picker and the frame baker all read this one
table. Values follow the live-playback renderer.
"""

from enum import Enum
from typing import Optional
from pydantic import BaseModel

from .easing import Easing
from .models import AnimationCategory, AnimationPreset
from .timing import TimingRegime


class AnimatedProperty(str, Enum):
    OPACITY = "opacity"
    TRANSLATE_X = "translate_x"
    TRANSLATE_Y = "translate_y"
    SCALE = "scale"  # drives scale_x and scale_y together
    ROTATION = "rotation"
    ROTATION_X = "rotation_x"
    ROTATION_Y = "rotation_y"
    BLUR = "blur_radius"
    GLOW_RADIUS = "glow_radius"
    GLOW_OPACITY = "glow_opacity"
    HUE_ROTATION = "hue_rotation"
    REVEAL = "reveal"


class PresetTrack(BaseModel):
    """One animated property: from -> to under an easing and timing regime.

    time_scale multiplies the AnimationSpec duration: the loop period for loop
    regimes, the run length for one-shot tracks.
    """
    property: AnimatedProperty
    start: float
    end: float
    easing: Easing = Easing.SMOOTH
    regime: TimingRegime = TimingRegime.ONE_SHOT
    time_scale: float = 1.0

    model_config = {"frozen": True}


class PresetRecipe(BaseModel):
    """A named preset: its tracks plus an optional transform origin."""
    preset: AnimationPreset
    tracks: tuple[PresetTrack, ...] = ()
    pivot: Optional[tuple[float, float]] = None

    model_config = {"frozen": True}

    @property
    def category(self) -> AnimationCategory:
        return self.preset.category

    @property
    def regime(self) -> TimingRegime:
        """Regime of the first track; path recipes report one-shot."""
        if not self.tracks:
            return TimingRegime.ONE_SHOT
        return self.tracks[0].regime

    def to_dict(self) -> dict:
        return {
            "preset": self.preset.value,
            "display_name": self.preset.display_name,
            "category": self.category.value,
            "regime": self.regime.value,
            "pivot": list(self.pivot) if self.pivot else None,
            "tracks": [t.model_dump(mode="json") for t in self.tracks],
        }


P = AnimatedProperty
REVERSE = TimingRegime.LOOP_REVERSE
RESTART = TimingRegime.LOOP_RESTART


def _once(prop: AnimatedProperty, start: float, end: float,
          easing: Easing = Easing.SMOOTH, time_scale: float = 1.0) -> PresetTrack:
    return PresetTrack(property=prop, start=start, end=end, easing=easing,
                       time_scale=time_scale)


def _loop(prop: AnimatedProperty, start: float, end: float,
          regime: TimingRegime = REVERSE, easing: Easing = Easing.SMOOTH,
          time_scale: float = 1.0) -> PresetTrack:
    return PresetTrack(property=prop, start=start, end=end, easing=easing,
                       regime=regime, time_scale=time_scale)


def _recipe(preset: AnimationPreset, *tracks: PresetTrack,
            pivot: Optional[tuple[float, float]] = None) -> PresetRecipe:
    return PresetRecipe(preset=preset, tracks=tracks, pivot=pivot)


_A = AnimationPreset

PRESET_TABLE: dict[AnimationPreset, PresetRecipe] = {
    r.preset: r for r in [
        # Entrance
        _recipe(_A.FADE_IN, _once(P.OPACITY, 0.0, 1.0)),
        _recipe(_A.FADE_SLIDE_UP, _once(P.OPACITY, 0.0, 1.0), _once(P.TRANSLATE_Y, 50.0, 0.0)),
        _recipe(_A.FADE_SLIDE_DOWN, _once(P.OPACITY, 0.0, 1.0), _once(P.TRANSLATE_Y, -50.0, 0.0)),
        _recipe(_A.FADE_SLIDE_LEFT, _once(P.OPACITY, 0.0, 1.0), _once(P.TRANSLATE_X, 50.0, 0.0)),
        _recipe(_A.FADE_SLIDE_RIGHT, _once(P.OPACITY, 0.0, 1.0), _once(P.TRANSLATE_X, -50.0, 0.0)),
        _recipe(_A.ZOOM_IN, _once(P.SCALE, 0.0, 1.0), _once(P.OPACITY, 0.0, 1.0)),
        _recipe(_A.BOUNCE_IN,
                _once(P.SCALE, 0.3, 1.0, Easing.BOUNCE),
                _once(P.OPACITY, 0.0, 1.0, time_scale=0.3)),
        _recipe(_A.POP_IN, _once(P.SCALE, 0.0, 1.0, Easing.OVERSHOOT)),
        _recipe(_A.TYPEWRITER, _once(P.REVEAL, 0.0, 1.0)),
        _recipe(_A.BLUR_IN, _once(P.BLUR, 20.0, 0.0), _once(P.OPACITY, 0.0, 1.0)),
        _recipe(_A.FLIP_IN_X, _once(P.ROTATION_X, 90.0, 0.0), _once(P.OPACITY, 0.0, 1.0)),
        _recipe(_A.FLIP_IN_Y, _once(P.ROTATION_Y, 90.0, 0.0), _once(P.OPACITY, 0.0, 1.0)),

        # Exit
        _recipe(_A.FADE_OUT, _once(P.OPACITY, 1.0, 0.0)),
        _recipe(_A.SLIDE_OUT_UP, _once(P.OPACITY, 1.0, 0.0), _once(P.TRANSLATE_Y, 0.0, -100.0)),
        _recipe(_A.SLIDE_OUT_DOWN, _once(P.OPACITY, 1.0, 0.0), _once(P.TRANSLATE_Y, 0.0, 100.0)),
        _recipe(_A.ZOOM_OUT, _once(P.SCALE, 1.0, 0.0), _once(P.OPACITY, 1.0, 0.0)),
        _recipe(_A.BLUR_OUT, _once(P.BLUR, 0.0, 20.0), _once(P.OPACITY, 1.0, 0.0)),
        _recipe(_A.SHRINK_OUT, _once(P.SCALE, 1.0, 0.0), _once(P.OPACITY, 1.0, 0.0)),

        # Loop
        _recipe(_A.PULSE, _loop(P.SCALE, 1.0, 1.15)),
        _recipe(_A.BOUNCE, _loop(P.TRANSLATE_Y, 0.0, -15.0)),
        _recipe(_A.FLOAT, _loop(P.TRANSLATE_Y, 0.0, -10.0)),
        _recipe(_A.WIGGLE, _loop(P.ROTATION, -5.0, 5.0)),
        _recipe(_A.ROTATE, _loop(P.ROTATION, 0.0, 360.0, RESTART, Easing.LINEAR)),
        _recipe(_A.GLOW, _loop(P.GLOW_RADIUS, 0.0, 12.0), _loop(P.GLOW_OPACITY, 0.0, 0.8)),
        _recipe(_A.SHAKE, _loop(P.TRANSLATE_X, -8.0, 8.0, time_scale=0.2)),
        _recipe(_A.HEARTBEAT, _loop(P.SCALE, 1.0, 1.3, time_scale=0.5)),
        # Hue is computed only; recolouring is left to the renderer.
        _recipe(_A.COLOR_CYCLE, _loop(P.HUE_ROTATION, 0.0, 360.0, RESTART, Easing.LINEAR)),
        _recipe(_A.SWING, _loop(P.ROTATION, -15.0, 15.0), pivot=(0.5, 0.0)),
        _recipe(_A.FLASH, _loop(P.OPACITY, 1.0, 0.0, time_scale=0.5)),

        # Path presets are evaluated by the path interpolator.
        _recipe(_A.MOTION_PATH),
        _recipe(_A.CURVE_PATH),
    ]
}


def get_recipe(preset: AnimationPreset) -> Optional[PresetRecipe]:
    """Get the recipe for a preset, or None if the table has no row for it."""
    return PRESET_TABLE.get(preset)


def list_presets(category: Optional[AnimationCategory] = None) -> list[dict]:
    """Summaries of every preset, optionally filtered by category."""
    return [
        {
            "name": p.value,
            "display_name": p.display_name,
            "category": p.category.value,
        }
        for p in AnimationPreset
        if category is None or p.category is category
    ]
