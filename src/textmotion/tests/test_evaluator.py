"""Tests for the animation evaluator: presets and motion paths to Transforms."""

from concurrent.futures import ThreadPoolExecutor

import pytest

from textmotion.core.animation import (
    AnimatedProperty,
    AnimationCategory,
    AnimationPath,
    AnimationPreset,
    AnimationSpec,
    CanvasSize,
    PathType,
    TimingRegime,
    Transform,
    evaluate,
    evaluate_layer,
    get_recipe,
    timing_regime,
)
from textmotion.core.layer import TextLayer

CANVAS = CanvasSize(1080.0, 1920.0)

ONE_SHOT_PRESETS = [
    p for p in AnimationPreset
    if p.category in (AnimationCategory.ENTRANCE, AnimationCategory.EXIT)
]


def expected_fields(preset, which):
    """Transform fields a recipe sets at its start or end values."""
    fields = {}
    for track in get_recipe(preset).tracks:
        value = track.start if which == "start" else track.end
        if track.property is AnimatedProperty.SCALE:
            fields["scale_x"] = fields["scale_y"] = value
        else:
            fields[track.property.value] = value
    return fields


def spec(preset, **kwargs):
    return AnimationSpec(preset=preset, **kwargs)


# ── One-shot presets ───────────────────────────────────────────────────

class TestOneShotPresets:
    @pytest.mark.parametrize("preset", ONE_SHOT_PRESETS)
    def test_from_values_at_delay(self, preset):
        s = spec(preset, delay=0.3, duration=0.8)
        t = evaluate(s, None, s.delay, CANVAS)
        for field, value in expected_fields(preset, "start").items():
            assert getattr(t, field) == value, field

    @pytest.mark.parametrize("preset", ONE_SHOT_PRESETS)
    def test_to_values_at_end(self, preset):
        s = spec(preset, delay=0.3, duration=0.8)
        t = evaluate(s, None, s.delay + s.duration, CANVAS)
        for field, value in expected_fields(preset, "end").items():
            assert getattr(t, field) == value, field

    @pytest.mark.parametrize("preset", ONE_SHOT_PRESETS)
    def test_holds_after_end(self, preset):
        s = spec(preset, duration=0.5)
        assert evaluate(s, None, 0.5, CANVAS) == evaluate(s, None, 60.0, CANVAS)

    def test_from_values_before_delay(self):
        t = evaluate(spec(AnimationPreset.FADE_IN, delay=1.0), None, 0.0, CANVAS)
        assert t.opacity == 0.0

    def test_fade_in_monotonic(self):
        s = spec(AnimationPreset.FADE_IN, duration=1.0)
        values = [evaluate(s, None, i / 50, CANVAS).opacity for i in range(51)]
        assert all(b >= a for a, b in zip(values, values[1:]))
        assert values[0] == 0.0
        assert values[-1] == 1.0

    def test_fade_in_midpoint(self):
        s = spec(AnimationPreset.FADE_IN, duration=1.0)
        assert evaluate(s, None, 0.5, CANVAS).opacity == pytest.approx(0.5)

    def test_untouched_fields_stay_identity(self):
        t = evaluate(spec(AnimationPreset.FADE_SLIDE_UP), None, 0.4, CANVAS)
        assert t.scale_x == 1.0
        assert t.rotation == 0.0
        assert t.translate_x == 0.0
        assert 0.0 < t.translate_y < 50.0

    def test_zero_duration_is_complete(self):
        t = evaluate(spec(AnimationPreset.FADE_IN, duration=0.0), None, 0.0, CANVAS)
        assert t.opacity == 1.0

    def test_negative_duration_is_complete(self):
        t = evaluate(spec(AnimationPreset.ZOOM_OUT, duration=-1.0), None, 0.0, CANVAS)
        assert t.scale_x == 0.0
        assert t.opacity == 0.0

    def test_bounce_in_opacity_finishes_first(self):
        s = spec(AnimationPreset.BOUNCE_IN, duration=1.0)
        t = evaluate(s, None, 0.3, CANVAS)
        assert t.opacity == 1.0
        assert t.scale_x < 1.0

    def test_pop_in_overshoots(self):
        s = spec(AnimationPreset.POP_IN, duration=1.0)
        assert evaluate(s, None, 0.8, CANVAS).scale_x > 1.0

    def test_typewriter_reveal(self):
        s = spec(AnimationPreset.TYPEWRITER, duration=1.0)
        assert evaluate(s, None, 0.0, CANVAS).reveal == 0.0
        assert evaluate(s, None, 0.5, CANVAS).reveal == pytest.approx(0.5)
        assert evaluate(s, None, 1.0, CANVAS).reveal == 1.0

    def test_flip_in_fades(self):
        t = evaluate(spec(AnimationPreset.FLIP_IN_Y, duration=1.0), None, 0.0, CANVAS)
        assert t.rotation_y == 90.0
        assert t.opacity == 0.0


# ── Loop presets ───────────────────────────────────────────────────────

class TestLoopPresets:
    def test_pulse_cycle(self):
        s = spec(AnimationPreset.PULSE, duration=1.0)
        assert evaluate(s, None, 0.0, CANVAS).scale_x == 1.0
        assert evaluate(s, None, 0.5, CANVAS).scale_x == pytest.approx(1.15)
        assert evaluate(s, None, 1.0, CANVAS).scale_x == 1.0

    def test_pulse_scales_both_axes(self):
        t = evaluate(spec(AnimationPreset.PULSE, duration=1.0), None, 0.3, CANVAS)
        assert t.scale_x == t.scale_y

    def test_loop_flag_is_ignored(self):
        looping = spec(AnimationPreset.PULSE, duration=1.0, loop=True)
        once = spec(AnimationPreset.PULSE, duration=1.0, loop=False)
        for elapsed in (0.2, 1.5, 7.3):
            assert evaluate(looping, None, elapsed, CANVAS) == evaluate(once, None, elapsed, CANVAS)

    def test_delay_does_not_hold_loops(self):
        s = spec(AnimationPreset.PULSE, delay=1.0, duration=1.0)
        assert evaluate(s, None, 0.5, CANVAS).scale_x == pytest.approx(1.15)
        assert evaluate(s, None, 0.5, CANVAS) == evaluate(
            spec(AnimationPreset.PULSE, duration=1.0), None, 0.5, CANVAS)

    def test_rotate_is_linear_restart(self):
        s = spec(AnimationPreset.ROTATE, duration=2.0)
        assert evaluate(s, None, 0.5, CANVAS).rotation == pytest.approx(90.0)
        assert evaluate(s, None, 2.5, CANVAS).rotation == pytest.approx(90.0)

    def test_shake_period(self):
        s = spec(AnimationPreset.SHAKE, duration=1.0)
        assert evaluate(s, None, 0.0, CANVAS).translate_x == -8.0
        assert evaluate(s, None, 0.1, CANVAS).translate_x == pytest.approx(8.0)
        assert evaluate(s, None, 0.2, CANVAS).translate_x == pytest.approx(-8.0)

    def test_heartbeat_period(self):
        s = spec(AnimationPreset.HEARTBEAT, duration=1.0)
        assert evaluate(s, None, 0.25, CANVAS).scale_x == pytest.approx(1.3)

    def test_flash(self):
        s = spec(AnimationPreset.FLASH, duration=1.0)
        assert evaluate(s, None, 0.0, CANVAS).opacity == 1.0
        assert evaluate(s, None, 0.25, CANVAS).opacity == pytest.approx(0.0)

    def test_glow(self):
        t = evaluate(spec(AnimationPreset.GLOW, duration=1.0), None, 0.5, CANVAS)
        assert t.glow_radius == pytest.approx(12.0)
        assert t.glow_opacity == pytest.approx(0.8)

    def test_color_cycle_hue(self):
        s = spec(AnimationPreset.COLOR_CYCLE, duration=2.0)
        assert evaluate(s, None, 0.5, CANVAS).hue_rotation == pytest.approx(90.0)

    def test_swing_pivots_at_top(self):
        t = evaluate(spec(AnimationPreset.SWING, duration=1.0), None, 0.0, CANVAS)
        assert (t.pivot_x, t.pivot_y) == (0.5, 0.0)
        assert t.rotation == -15.0

    def test_wiggle_keeps_center_pivot(self):
        t = evaluate(spec(AnimationPreset.WIGGLE, duration=1.0), None, 0.0, CANVAS)
        assert (t.pivot_x, t.pivot_y) == (0.5, 0.5)

    def test_zero_period_rests(self):
        t = evaluate(spec(AnimationPreset.FLOAT, duration=0.0), None, 3.0, CANVAS)
        assert t.translate_y == 0.0


# ── Motion paths ───────────────────────────────────────────────────────

class TestMotionPath:
    PATH = AnimationPath.from_pairs([(0, 0), (1, 0), (1, 1)])
    SMALL = CanvasSize(100.0, 200.0)

    def test_translation_relative_to_centroid(self):
        s = spec(AnimationPreset.MOTION_PATH, duration=1.0)
        start = evaluate(s, self.PATH, 0.0, self.SMALL)
        assert start.translate_x == pytest.approx(-200 / 3)
        assert start.translate_y == pytest.approx(-200 / 3)
        end = evaluate(s, self.PATH, 1.0, self.SMALL)
        assert end.translate_x == pytest.approx(100 / 3)
        assert end.translate_y == pytest.approx(400 / 3)

    def test_only_translation_changes(self):
        s = spec(AnimationPreset.MOTION_PATH, duration=1.0)
        t = evaluate(s, self.PATH, 0.5, self.SMALL)
        assert t.opacity == 1.0
        assert t.scale_x == 1.0
        assert t.rotation == 0.0

    def test_one_shot_holds_at_end(self):
        s = spec(AnimationPreset.MOTION_PATH, duration=1.0)
        assert evaluate(s, self.PATH, 1.25, self.SMALL) == evaluate(s, self.PATH, 1.0, self.SMALL)

    def test_loop_restarts(self):
        s = spec(AnimationPreset.MOTION_PATH, duration=1.0, loop=True)
        t = evaluate(s, self.PATH, 1.25, self.SMALL)
        # a quarter of the way along: (0.5, 0)
        assert t.translate_x == pytest.approx((0.5 - 2 / 3) * 100)
        assert t.translate_y == pytest.approx((0.0 - 1 / 3) * 200)

    def test_looping_path_ignores_delay(self):
        s = spec(AnimationPreset.MOTION_PATH, delay=1.0, duration=2.0, loop=True)
        path = AnimationPath.from_pairs([(0, 0), (1, 0)])
        # halfway along, which is the centroid
        assert evaluate(s, path, 1.0, self.SMALL).translate_x == pytest.approx(0.0)

    def test_single_run_path_waits_for_delay(self):
        s = spec(AnimationPreset.MOTION_PATH, delay=1.0, duration=2.0)
        path = AnimationPath.from_pairs([(0, 0), (1, 0)])
        assert evaluate(s, path, 1.0, self.SMALL).translate_x == pytest.approx(-50.0)

    def test_curve_path_uses_same_evaluation(self):
        motion = spec(AnimationPreset.MOTION_PATH, duration=1.0)
        curve = spec(AnimationPreset.CURVE_PATH, duration=1.0)
        path = AnimationPath.from_pairs([(0, 0), (1, 0), (1, 1)], type=PathType.BEZIER)
        assert evaluate(motion, path, 0.4, CANVAS) == evaluate(curve, path, 0.4, CANVAS)

    def test_missing_path_is_identity(self):
        s = spec(AnimationPreset.MOTION_PATH)
        assert evaluate(s, None, 0.4, CANVAS) == Transform.identity()

    def test_empty_path_is_identity(self):
        s = spec(AnimationPreset.CURVE_PATH)
        assert evaluate(s, AnimationPath(), 0.4, CANVAS).is_identity

    def test_single_point_path_is_identity(self):
        s = spec(AnimationPreset.MOTION_PATH)
        path = AnimationPath.from_pairs([(0.2, 0.8)])
        assert evaluate(s, path, 0.4, CANVAS).is_identity

    def test_path_ignored_by_other_presets(self):
        s = spec(AnimationPreset.FADE_IN, duration=1.0)
        assert evaluate(s, self.PATH, 0.5, CANVAS) == evaluate(s, None, 0.5, CANVAS)


# ── Purity & misc ──────────────────────────────────────────────────────

class TestPurity:
    def test_no_animation_is_identity(self):
        assert evaluate(None, None, 3.0, CANVAS) == Transform.identity()

    def test_deterministic(self):
        s = spec(AnimationPreset.BOUNCE_IN, delay=0.2, duration=0.9)
        assert evaluate(s, None, 0.61, CANVAS) == evaluate(s, None, 0.61, CANVAS)

    def test_scrub_order_does_not_matter(self):
        s = spec(AnimationPreset.WIGGLE, duration=0.8)
        times = [i * 0.07 for i in range(40)]
        forward = [evaluate(s, None, t, CANVAS) for t in times]
        backward = [evaluate(s, None, t, CANVAS) for t in reversed(times)]
        assert forward == list(reversed(backward))

    def test_threads_match_serial(self):
        s = spec(AnimationPreset.HEARTBEAT, duration=1.1)
        times = [i / 30 for i in range(90)]
        serial = [evaluate(s, None, t, CANVAS) for t in times]
        with ThreadPoolExecutor(max_workers=4) as executor:
            parallel = list(executor.map(lambda t: evaluate(s, None, t, CANVAS), times))
        assert parallel == serial

    def test_output_ranges(self):
        for preset in AnimationPreset:
            s = spec(preset, duration=0.7)
            for i in range(30):
                t = evaluate(s, None, i * 0.05, CANVAS)
                assert 0.0 <= t.opacity <= 1.0
                assert t.scale_x >= 0.0 and t.scale_y >= 0.0
                assert t.blur_radius >= 0.0


class TestEvaluateLayer:
    def test_reads_layer_animation(self):
        layer = TextLayer(text="Hi", animation=spec(AnimationPreset.FADE_IN, duration=1.0))
        assert evaluate_layer(layer, 0.5, CANVAS).opacity == pytest.approx(0.5)

    def test_static_layer(self):
        assert evaluate_layer(TextLayer(text="Hi"), 0.5, CANVAS).is_identity


class TestTimingRegime:
    def test_preset_regimes(self):
        assert timing_regime(spec(AnimationPreset.FADE_IN)) is TimingRegime.ONE_SHOT
        assert timing_regime(spec(AnimationPreset.PULSE)) is TimingRegime.LOOP_REVERSE
        assert timing_regime(spec(AnimationPreset.ROTATE)) is TimingRegime.LOOP_RESTART

    def test_path_regime_follows_loop_flag(self):
        assert timing_regime(spec(AnimationPreset.MOTION_PATH)) is TimingRegime.ONE_SHOT
        assert timing_regime(spec(AnimationPreset.MOTION_PATH, loop=True)) is TimingRegime.LOOP_RESTART
