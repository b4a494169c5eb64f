"""Motion-path interpolation: progress in [0, 1] to a point on an AnimationPath.

Each curve needs a minimum number of points and silently falls back to a
simpler curve when given fewer:

    cubic -> quadratic -> linear -> single point -> canvas center
    circular, arc, catmull-rom -> linear
"""

import math
from bisect import bisect_left
from typing import Callable, Sequence

from .models import AnimationPath, CurveType, PathPoint, PathType

CANVAS_CENTER = PathPoint(x=0.5, y=0.5)

Points = Sequence[PathPoint]


def _clamp01(t: float) -> float:
    return min(max(t, 0.0), 1.0)


def centroid(points: Points) -> PathPoint:
    """Arithmetic mean of the points; the canvas center when empty."""
    if not points:
        return CANVAS_CENTER
    n = len(points)
    return PathPoint(
        x=sum(p.x for p in points) / n,
        y=sum(p.y for p in points) / n,
    )


def linear_point(points: Points, progress: float) -> PathPoint:
    """Arc-length-uniform walk along the polyline through `points`."""
    if len(points) < 2:
        return points[0] if points else CANVAS_CENTER

    # cumulative[i] = distance travelled when reaching points[i]
    cumulative = [0.0]
    for prev, cur in zip(points, points[1:]):
        cumulative.append(cumulative[-1] + math.hypot(cur.x - prev.x, cur.y - prev.y))
    total = cumulative[-1]
    if total == 0.0:
        return points[0]

    target = _clamp01(progress) * total
    end = min(max(bisect_left(cumulative, target), 1), len(points) - 1)
    seg = end - 1

    seg_start, seg_end = cumulative[seg], cumulative[end]
    local = (target - seg_start) / (seg_end - seg_start) if seg_end > seg_start else 0.0

    p0, p1 = points[seg], points[end]
    return PathPoint(
        x=p0.x + (p1.x - p0.x) * local,
        y=p0.y + (p1.y - p0.y) * local,
    )


def quadratic_bezier_point(points: Points, progress: float) -> PathPoint:
    """Quadratic Bezier through first, middle and last point (needs 3)."""
    if len(points) < 3:
        return linear_point(points, progress)
    t = _clamp01(progress)
    p0, p1, p2 = points[0], points[len(points) // 2], points[-1]
    mt = 1.0 - t
    return PathPoint(
        x=mt * mt * p0.x + 2.0 * mt * t * p1.x + t * t * p2.x,
        y=mt * mt * p0.y + 2.0 * mt * t * p1.y + t * t * p2.y,
    )


def cubic_bezier_point(points: Points, progress: float) -> PathPoint:
    """Cubic Bezier with controls at the thirds of the point list (needs 4)."""
    if len(points) < 4:
        return quadratic_bezier_point(points, progress)
    t = _clamp01(progress)
    n = len(points)
    p0, p1, p2, p3 = points[0], points[n // 3], points[2 * n // 3], points[-1]
    mt = 1.0 - t
    a, b, c, d = mt * mt * mt, 3.0 * mt * mt * t, 3.0 * mt * t * t, t * t * t
    return PathPoint(
        x=a * p0.x + b * p1.x + c * p2.x + d * p3.x,
        y=a * p0.y + b * p1.y + c * p2.y + d * p3.y,
    )


def _circle(points: Points) -> tuple[PathPoint, float]:
    center = centroid(points)
    radius = sum(math.hypot(p.x - center.x, p.y - center.y) for p in points) / len(points)
    return center, radius


def circular_point(points: Points, progress: float) -> PathPoint:
    """One full revolution around the points' mean circle (needs 3)."""
    if len(points) < 3:
        return linear_point(points, progress)
    center, radius = _circle(points)
    angle = _clamp01(progress) * 2.0 * math.pi
    return PathPoint(
        x=center.x + radius * math.cos(angle),
        y=center.y + radius * math.sin(angle),
    )


def arc_point(points: Points, progress: float) -> PathPoint:
    """Sweep from the first point's angle to the last point's (needs 3).

    The sweep is a plain linear blend of the two atan2 angles; it does not
    pick the shorter way round.
    """
    if len(points) < 3:
        return linear_point(points, progress)
    center, radius = _circle(points)
    first, last = points[0], points[-1]
    start = math.atan2(first.y - center.y, first.x - center.x)
    end = math.atan2(last.y - center.y, last.x - center.x)
    angle = start + (end - start) * _clamp01(progress)
    return PathPoint(
        x=center.x + radius * math.cos(angle),
        y=center.y + radius * math.sin(angle),
    )


def catmull_rom_point(points: Points, progress: float) -> PathPoint:
    """Uniform Catmull-Rom spline through every point (needs 4).

    Neighbour indices are clamped at both ends, duplicating the boundary
    point instead of reading past the list.
    """
    if len(points) < 4:
        return linear_point(points, progress)
    t = _clamp01(progress)
    segments = len(points) - 1
    scaled = t * segments
    seg = min(max(int(scaled), 0), segments - 1)
    u = scaled - seg

    last = len(points) - 1
    p0 = points[max(seg - 1, 0)]
    p1 = points[seg]
    p2 = points[min(seg + 1, last)]
    p3 = points[min(seg + 2, last)]

    uu = u * u
    uuu = uu * u

    def blend(a: float, b: float, c: float, d: float) -> float:
        return 0.5 * (
            2.0 * b
            + (-a + c) * u
            + (2.0 * a - 5.0 * b + 4.0 * c - d) * uu
            + (-a + 3.0 * b - 3.0 * c + d) * uuu
        )

    return PathPoint(
        x=blend(p0.x, p1.x, p2.x, p3.x),
        y=blend(p0.y, p1.y, p2.y, p3.y),
    )


Interpolator = Callable[[Points, float], PathPoint]

_INTERPOLATORS: dict[tuple[PathType, CurveType], Interpolator] = {
    (PathType.LINEAR, CurveType.QUADRATIC): linear_point,
    (PathType.LINEAR, CurveType.CUBIC): linear_point,
    (PathType.BEZIER, CurveType.QUADRATIC): quadratic_bezier_point,
    (PathType.BEZIER, CurveType.CUBIC): cubic_bezier_point,
    (PathType.CIRCULAR, CurveType.QUADRATIC): circular_point,
    (PathType.CIRCULAR, CurveType.CUBIC): circular_point,
    (PathType.ARC, CurveType.QUADRATIC): arc_point,
    (PathType.ARC, CurveType.CUBIC): arc_point,
    # Waves are authored as dense samples; walking them is enough.
    (PathType.WAVE, CurveType.QUADRATIC): linear_point,
    (PathType.WAVE, CurveType.CUBIC): linear_point,
    (PathType.CUSTOM, CurveType.QUADRATIC): catmull_rom_point,
    (PathType.CUSTOM, CurveType.CUBIC): catmull_rom_point,
}


def get_interpolator(path_type: PathType, curve_type: CurveType) -> Interpolator:
    return _INTERPOLATORS.get((path_type, curve_type), linear_point)


def interpolate(path: AnimationPath, progress: float) -> PathPoint:
    """Point on `path` at `progress`, clamped to [0, 1]."""
    return get_interpolator(path.type, path.curve_type)(path.points, progress)
