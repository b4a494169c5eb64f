"""Freehand path intake: raw drawing samples to a normalized AnimationPath."""

import logging
import math
from typing import Sequence

from ..core.animation import AnimationPath, CanvasSize, CurveType, PathPoint, PathType

logger = logging.getLogger("TextMotionMCP.intake.path_drawing")

MAX_PATH_POINTS = 10
MIN_SAMPLES = 3

Sample = tuple[float, float]


def simplify_samples(samples: Sequence[Sample], max_points: int = MAX_PATH_POINTS) -> list[Sample]:
    """Keep every Nth sample plus the final one when there are too many.

    N is rounded up, so at most `max_points` samples survive before the
    final one is appended.
    """
    samples = list(samples)
    if len(samples) <= max_points:
        return samples
    step = math.ceil(len(samples) / max_points)
    last = len(samples) - 1
    return [s for i, s in enumerate(samples) if i % step == 0 or i == last]


def normalize_samples(samples: Sequence[Sample], canvas_size: CanvasSize) -> list[PathPoint]:
    """Pixel samples to canvas-relative points, clamped to [0, 1]."""
    width, height = canvas_size
    return [
        PathPoint(
            x=min(max(x / width, 0.0), 1.0),
            y=min(max(y / height, 0.0), 1.0),
        )
        for x, y in samples
    ]


def build_path(samples: Sequence[Sample], canvas_size: CanvasSize,
               path_type: PathType = PathType.CUSTOM,
               curve_type: CurveType = CurveType.QUADRATIC) -> AnimationPath:
    """Build an AnimationPath from raw samples drawn on a canvas.

    Raises:
        ValueError: fewer than 3 samples, or a canvas with no area.
    """
    width, height = canvas_size
    if width <= 0 or height <= 0:
        raise ValueError(f"Canvas must have a positive size, got {width}x{height}")
    if len(samples) < MIN_SAMPLES:
        raise ValueError(f"A path needs at least {MIN_SAMPLES} samples, got {len(samples)}")

    simplified = simplify_samples(samples)
    if len(simplified) < len(samples):
        logger.debug(f"Simplified path from {len(samples)} to {len(simplified)} samples")

    return AnimationPath(
        type=path_type,
        points=tuple(normalize_samples(simplified, canvas_size)),
        curve_type=curve_type,
    )


# ── Template shapes ────────────────────────────────────────────────────

def circle_samples(canvas_size: CanvasSize, count: int = 12) -> list[Sample]:
    """A closed circle around the canvas center, count+1 samples."""
    cx, cy = canvas_size[0] / 2.0, canvas_size[1] / 2.0
    radius = min(cx, cy) * 0.6
    return [
        (cx + radius * math.cos(2.0 * math.pi * i / count),
         cy + radius * math.sin(2.0 * math.pi * i / count))
        for i in range(count + 1)
    ]


def wave_samples(canvas_size: CanvasSize, count: int = 20) -> list[Sample]:
    """Two sine periods across the middle 80% of the width."""
    width, height = canvas_size
    amplitude = height * 0.15
    cy = height / 2.0
    samples = []
    for i in range(count + 1):
        t = i / count
        samples.append((width * 0.1 + width * 0.8 * t,
                        cy + amplitude * math.sin(t * 4.0 * math.pi)))
    return samples


def arc_samples(canvas_size: CanvasSize, count: int = 10) -> list[Sample]:
    """A quarter circle sweeping counter-clockwise from the right."""
    cx, cy = canvas_size[0] / 2.0, canvas_size[1] / 2.0
    radius = min(cx, cy) * 0.6
    return [
        (cx + radius * math.cos(math.pi / 2.0 * i / count),
         cy - radius * math.sin(math.pi / 2.0 * i / count))
        for i in range(count + 1)
    ]


TEMPLATES = {
    "circle": (circle_samples, PathType.CIRCULAR),
    "wave": (wave_samples, PathType.WAVE),
    "arc": (arc_samples, PathType.ARC),
}


def template_path(name: str, canvas_size: CanvasSize) -> AnimationPath:
    """Build one of the drawing tool's template shapes as a path.

    Raises:
        ValueError: unknown template name.
    """
    if name not in TEMPLATES:
        available = ", ".join(TEMPLATES)
        raise ValueError(f"Unknown template '{name}'. Available: {available}")
    generator, path_type = TEMPLATES[name]
    return build_path(generator(canvas_size), canvas_size, path_type=path_type)
