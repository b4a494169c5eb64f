"""Offline export: bake per-frame transforms for a timeline of text layers.

Frames are evaluated independently, in any order, across worker threads.
Results land in pre-sized slots so output order never depends on which
worker finishes first.
"""

import logging
import time
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass
from typing import Callable, Optional, Sequence

from pydantic import BaseModel

from ..core.animation import AnimationSpec, CanvasSize, Transform, evaluate
from ..core.layer import TextLayer

logger = logging.getLogger("TextMotionMCP.export.baker")

ProgressCallback = Callable[[int, int], None]


class BakeSettings(BaseModel):
    """Output settings for a baked timeline (9:16 portrait by default)."""
    fps: int = 30
    canvas_width: float = 1080.0
    canvas_height: float = 1920.0
    max_workers: int = 4

    @property
    def canvas(self) -> CanvasSize:
        return CanvasSize(self.canvas_width, self.canvas_height)


@dataclass(frozen=True)
class FrameSample:
    """The transform of one layer at one output frame."""
    index: int
    time: float
    transform: Transform

    def to_dict(self) -> dict:
        return {
            "index": self.index,
            "time": round(self.time, 6),
            "transform": self.transform.model_dump(),
        }


def animation_span(spec: Optional[AnimationSpec]) -> float:
    """Seconds until a spec completes its run, or its first cycle for loops."""
    if spec is None:
        return 0.0
    return max(spec.delay, 0.0) + max(spec.duration, 0.0)


def frame_times(length: float, fps: int) -> list[float]:
    """Sample times 0, 1/fps, ... up to and including `length`.

    Each time is computed from its frame index, never accumulated.

    Raises:
        ValueError: fps is not positive.
    """
    if fps <= 0:
        raise ValueError(f"fps must be positive, got {fps}")
    count = round(max(length, 0.0) * fps) + 1
    return [i / fps for i in range(count)]


def _timeline_length(layers: Sequence[TextLayer], length: Optional[float]) -> float:
    if length is not None:
        return length
    return max((animation_span(layer.animation) for layer in layers), default=0.0)


def bake_layer(layer: TextLayer, settings: BakeSettings,
               length: Optional[float] = None) -> list[FrameSample]:
    """Bake one layer on the calling thread."""
    canvas = settings.canvas
    times = frame_times(_timeline_length([layer], length), settings.fps)
    return [
        FrameSample(i, t, evaluate(layer.animation, layer.path, t, canvas))
        for i, t in enumerate(times)
    ]


def bake_layers(layers: Sequence[TextLayer], settings: BakeSettings,
                length: Optional[float] = None,
                progress_callback: Optional[ProgressCallback] = None,
                ) -> dict[str, list[FrameSample]]:
    """Bake every visible layer, spreading frames across a thread pool.

    Args:
        layers: Layers on the timeline; hidden layers are skipped
        settings: Frame rate, canvas size and worker count
        length: Timeline length in seconds (default: longest animation span)
        progress_callback: Called with (completed, total) after each frame

    Returns:
        Frame samples per layer id, in frame order

    Raises:
        ValueError: fps is not positive, or two visible layers share an id.
    """
    visible = [layer for layer in layers if layer.visible]
    ids = [layer.id for layer in visible]
    duplicates = sorted({i for i in ids if ids.count(i) > 1})
    if duplicates:
        raise ValueError(f"Duplicate layer ids: {', '.join(duplicates)}")
    canvas = settings.canvas
    times = frame_times(_timeline_length(visible, length), settings.fps)

    results: dict[str, list[Optional[FrameSample]]] = {
        layer.id: [None] * len(times) for layer in visible
    }
    total = len(visible) * len(times)
    completed = 0

    def bake_frame(layer: TextLayer, index: int) -> FrameSample:
        t = times[index]
        return FrameSample(index, t, evaluate(layer.animation, layer.path, t, canvas))

    started = time.time()
    logger.info(f"Baking {len(visible)} layers x {len(times)} frames "
                f"at {settings.fps} fps with {settings.max_workers} workers")

    with ThreadPoolExecutor(max_workers=max(settings.max_workers, 1)) as executor:
        futures = {
            executor.submit(bake_frame, layer, i): layer.id
            for layer in visible
            for i in range(len(times))
        }
        for future in as_completed(futures):
            sample = future.result()
            results[futures[future]][sample.index] = sample
            completed += 1
            if progress_callback:
                progress_callback(completed, total)

    logger.info(f"Baked {total} frames in {time.time() - started:.2f}s")
    return results
