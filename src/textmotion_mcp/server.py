"""TextMotion MCP Server - MCP tools for evaluating and baking text animations."""

from mcp.server.fastmcp import FastMCP, Context
import json
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Dict, Any, Optional
import os

from pydantic import ValidationError

# SDK imports
from textmotion.core.animation import (
    AnimationCategory,
    AnimationPath,
    AnimationPreset,
    AnimationSpec,
    CanvasSize,
    CurveType,
    PathType,
    evaluate,
    evaluate_preview,
    get_recipe,
    list_presets as list_preset_summaries,
    preview_spec,
    timing_regime,
)
from textmotion.core.layer import TextLayer
from textmotion.export.baker import BakeSettings, animation_span, bake_layers
from textmotion.intake.path_drawing import TEMPLATES, build_path, template_path

# Configure logging
logging.basicConfig(level=logging.INFO,
                    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
logger = logging.getLogger("TextMotionMCP")

# Default configuration (9:16 portrait canvas)
DEFAULT_CANVAS_WIDTH = 1080
DEFAULT_CANVAS_HEIGHT = 1920
DEFAULT_FPS = 30
DEFAULT_WORKERS = 4
MAX_BAKED_FRAMES = 3600


def get_canvas(width: Optional[float] = None, height: Optional[float] = None) -> CanvasSize:
    """Canvas size from explicit arguments, else the environment, else defaults."""
    if width is None:
        width = float(os.getenv("TEXTMOTION_CANVAS_WIDTH", DEFAULT_CANVAS_WIDTH))
    if height is None:
        height = float(os.getenv("TEXTMOTION_CANVAS_HEIGHT", DEFAULT_CANVAS_HEIGHT))
    return CanvasSize(width, height)


def get_bake_settings(fps: Optional[int] = None, canvas: Optional[CanvasSize] = None) -> BakeSettings:
    canvas = canvas or get_canvas()
    return BakeSettings(
        fps=fps if fps is not None else int(os.getenv("TEXTMOTION_FPS", DEFAULT_FPS)),
        canvas_width=canvas.width,
        canvas_height=canvas.height,
        max_workers=int(os.getenv("TEXTMOTION_WORKERS", DEFAULT_WORKERS)),
    )


def _parse_preset(name: str) -> AnimationPreset:
    try:
        return AnimationPreset(name)
    except ValueError:
        available = ", ".join(p.value for p in AnimationPreset)
        raise ValueError(f"Unknown preset '{name}'. Available: {available}")


def _parse_path(path_type: Optional[str], points: Optional[list[list[float]]],
                curve_type: str) -> Optional[AnimationPath]:
    if not path_type and not points:
        return None
    try:
        ptype = PathType(path_type or PathType.LINEAR.value)
        ctype = CurveType(curve_type)
    except ValueError as e:
        raise ValueError(f"Invalid path: {str(e)}")
    try:
        pairs = [(float(p[0]), float(p[1])) for p in (points or [])]
    except (IndexError, TypeError):
        raise ValueError("Path points must be [x, y] pairs")
    return AnimationPath.from_pairs(pairs, type=ptype, curve_type=ctype)


def _build_spec(preset: str, delay: float, duration: float, loop: bool) -> AnimationSpec:
    return AnimationSpec(preset=_parse_preset(preset), delay=delay,
                         duration=duration, loop=loop)


# ── Server Setup ────────────────────────────────────────────────────────

@asynccontextmanager
async def server_lifespan(server: FastMCP) -> AsyncIterator[Dict[str, Any]]:
    try:
        canvas = get_canvas()
        logger.info("TextMotionMCP server starting up")
        logger.info(f"Default canvas {canvas.width:.0f}x{canvas.height:.0f}")
        yield {}
    finally:
        logger.info("TextMotionMCP server shut down")


mcp = FastMCP("TextMotionMCP", lifespan=server_lifespan)


# ═══════════════════════════════════════════════════════════════════════
# PRESET TOOLS
# ═══════════════════════════════════════════════════════════════════════

@mcp.tool()
def list_presets(ctx: Context, category: str = None) -> str:
    """List animation presets, grouped by category.

    Parameters:
    - category: Optional filter (entrance, exit, loop, path)
    """
    if category:
        try:
            cat = AnimationCategory(category)
        except ValueError:
            available = ", ".join(c.value for c in AnimationCategory)
            return f"Error: Unknown category '{category}'. Available: {available}"
        categories = [cat]
    else:
        categories = list(AnimationCategory)

    return json.dumps({
        c.display_name: list_preset_summaries(c) for c in categories
    }, indent=2)


@mcp.tool()
def describe_preset(ctx: Context, preset: str) -> str:
    """Show the animated properties, ranges, easing and timing of a preset.

    Parameters:
    - preset: Preset name (e.g. "fade_in", "pulse")
    """
    try:
        p = _parse_preset(preset)
    except ValueError as e:
        return f"Error: {str(e)}"

    recipe = get_recipe(p)
    if recipe is None:
        return f"Error: Preset '{preset}' has no recipe."
    data = recipe.to_dict()
    if p.is_path:
        data["note"] = "Path presets follow the layer's motion path (see build_motion_path)."
    return json.dumps(data, indent=2)


# ═══════════════════════════════════════════════════════════════════════
# EVALUATION TOOLS
# ═══════════════════════════════════════════════════════════════════════

@mcp.tool()
def evaluate_animation(ctx: Context, preset: str, elapsed: float,
                       delay: float = 0.0, duration: float = 0.8, loop: bool = False,
                       path_type: str = None, points: list[list[float]] = None,
                       curve_type: str = "quadratic",
                       canvas_width: float = None, canvas_height: float = None) -> str:
    """Compute the transform of an animated text layer at a point in time.

    Parameters:
    - preset: Preset name (see list_presets)
    - elapsed: Seconds since the layer appeared
    - delay: Seconds before the animation starts
    - duration: Animation duration (or loop period) in seconds
    - loop: Repeat path animations (loop presets always repeat)
    - path_type: For motion_path/curve_path: linear, bezier, circular, arc, wave, custom
    - points: Normalized [x, y] pairs (0-1) of the motion path
    - curve_type: quadratic or cubic (bezier paths)
    - canvas_width / canvas_height: Canvas size in pixels (defaults to 1080x1920)
    """
    try:
        spec = _build_spec(preset, delay, duration, loop)
        path = _parse_path(path_type, points, curve_type)
        canvas = get_canvas(canvas_width, canvas_height)
    except (ValueError, ValidationError) as e:
        logger.warning(f"Rejected arguments: {str(e)}")
        return f"Error: {str(e)}"

    transform = evaluate(spec, path, elapsed, canvas)
    return json.dumps({
        "preset": spec.preset.value,
        "elapsed": elapsed,
        "regime": timing_regime(spec).value,
        "canvas": list(canvas),
        "transform": transform.model_dump(),
    }, indent=2)


@mcp.tool()
def bake_animation(ctx: Context, preset: str, delay: float = 0.0, duration: float = 0.8,
                   loop: bool = False, path_type: str = None,
                   points: list[list[float]] = None, curve_type: str = "quadratic",
                   fps: int = None, length: float = None,
                   canvas_width: float = None, canvas_height: float = None) -> str:
    """Bake one transform per output frame, as a video exporter would.

    Parameters:
    - preset, delay, duration, loop, path_type, points, curve_type: as in evaluate_animation
    - fps: Output frame rate (default 30)
    - length: Seconds to bake (defaults to delay + duration)
    - canvas_width / canvas_height: Canvas size in pixels
    """
    try:
        spec = _build_spec(preset, delay, duration, loop)
        path = _parse_path(path_type, points, curve_type)
        settings = get_bake_settings(fps, get_canvas(canvas_width, canvas_height))
    except (ValueError, ValidationError) as e:
        logger.warning(f"Rejected arguments: {str(e)}")
        return f"Error: {str(e)}"

    span = length if length is not None else animation_span(spec)
    if span * settings.fps > MAX_BAKED_FRAMES:
        return f"Error: {span:.1f}s at {settings.fps} fps exceeds {MAX_BAKED_FRAMES} frames."

    layer = TextLayer(id="layer", animation=spec, path=path)
    try:
        samples = bake_layers([layer], settings, length=span)[layer.id]
    except ValueError as e:
        logger.error(f"Bake error: {str(e)}")
        return f"Error during bake: {str(e)}"

    return json.dumps({
        "preset": spec.preset.value,
        "fps": settings.fps,
        "length": span,
        "frame_count": len(samples),
        "frames": [s.to_dict() for s in samples],
    }, indent=2)


@mcp.tool()
def preview_preset(ctx: Context, preset: str, elapsed: float) -> str:
    """Transform of the preset-picker thumbnail for a preset.

    Thumbnails play on fixed preview durations, not the layer's duration.

    Parameters:
    - preset: Preset name
    - elapsed: Seconds since the thumbnail appeared
    """
    try:
        p = _parse_preset(preset)
    except ValueError as e:
        return f"Error: {str(e)}"

    return json.dumps({
        "preset": p.value,
        "preview_duration": preview_spec(p).duration,
        "transform": evaluate_preview(p, elapsed).model_dump(),
    }, indent=2)


# ═══════════════════════════════════════════════════════════════════════
# PATH TOOLS
# ═══════════════════════════════════════════════════════════════════════

@mcp.tool()
def build_motion_path(ctx: Context, samples: list[list[float]],
                      canvas_width: float = None, canvas_height: float = None,
                      path_type: str = "custom", curve_type: str = "quadratic") -> str:
    """Turn raw drawing samples (pixels) into a normalized motion path.

    Long strokes are decimated to about 10 points.

    Parameters:
    - samples: [x, y] pixel coordinates in drawing order
    - canvas_width / canvas_height: Size of the drawing canvas in pixels
    - path_type: linear, bezier, circular, arc, wave, custom
    - curve_type: quadratic or cubic
    """
    try:
        path = build_path(
            [(float(s[0]), float(s[1])) for s in samples],
            get_canvas(canvas_width, canvas_height),
            path_type=PathType(path_type),
            curve_type=CurveType(curve_type),
        )
    except (ValueError, IndexError, TypeError) as e:
        return f"Error: {str(e)}"

    return json.dumps(path.model_dump(mode="json"), indent=2)


@mcp.tool()
def get_path_template(ctx: Context, template: str,
                      canvas_width: float = None, canvas_height: float = None) -> str:
    """Get one of the built-in path shapes as a motion path.

    Parameters:
    - template: circle, wave, or arc
    - canvas_width / canvas_height: Canvas size in pixels
    """
    try:
        path = template_path(template, get_canvas(canvas_width, canvas_height))
    except ValueError as e:
        return f"Error: {str(e)}"
    return json.dumps(path.model_dump(mode="json"), indent=2)


# ═══════════════════════════════════════════════════════════════════════
# MCP PROMPT
# ═══════════════════════════════════════════════════════════════════════

@mcp.prompt()
def text_animation_workflow() -> str:
    """Recommended workflow for animating a text layer"""
    templates = ", ".join(TEMPLATES)
    return f"""You are helping the user animate text overlays. Follow this workflow:

1. **Pick a Preset**: Use list_presets() to browse entrance, exit, loop and path presets.
   Use describe_preset() to see exactly what a preset animates.

2. **Preview**: Use preview_preset() to sample the picker thumbnail at a few times.

3. **Motion Paths**: For motion_path or curve_path presets, build a path:
   - build_motion_path() from raw drawing samples
   - get_path_template() for a ready-made shape ({templates})

4. **Check Timing**: Use evaluate_animation() at the start (elapsed = delay),
   middle and end (elapsed = delay + duration) of the animation.

5. **Export**: Use bake_animation() to get one transform per video frame.

Tips:
- Loop presets (pulse, rotate, shake, ...) repeat forever; duration is their period
- Exit presets start from the fully visible state
- Transforms are pure functions of time: any time can be evaluated in any order
"""


# ── Main ────────────────────────────────────────────────────────────────

def main():
    """Run the MCP server"""
    mcp.run()


if __name__ == "__main__":
    main()
