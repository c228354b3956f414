# colour_ops/hue_map.py
from __future__ import annotations

"""
Hue remapping functions over the circular domain [0,360).

Builders:
  angle_reflect(angle)          reflect the colour wheel across one angle
  linear_piece_two(p1, p2)      two control points, two linear pieces round the circle
  linear_piece_any(points)      any number of control points, piecewise linear

Each builder returns a small immutable callable. Called with a float it returns
a float; called with a NumPy array it returns an array of the same shape, which
is what the row path of the engine uses.

Control points are (sample_deg, target_deg). Sample angles are reduced into
[0,360) before ordering; targets are kept as given and every output is reduced
mod 360.
"""

import math
from typing import Iterable, List, Sequence, Tuple

import numpy as np

from .constants import DEFAULT_CONTROL_POINT, HUE_PERIOD
from .core_types import ControlPoint, HueLike
from .errors import InvalidControlPointsError


def _wrap(x: np.ndarray) -> np.ndarray:
    """Reduce into [0,360); a tiny negative must not round up to 360."""
    out = np.mod(x, HUE_PERIOD)
    return np.where(out >= HUE_PERIOD, 0.0, out)


def _finish(out: np.ndarray) -> HueLike:
    """0-D results go back to plain floats."""
    return float(out) if np.ndim(out) == 0 else out


def _normalise_points(points: Iterable[Sequence[float]]) -> List[ControlPoint]:
    """Validate control points and reduce sample angles into [0,360)."""
    out: List[ControlPoint] = []
    for point in points:
        if len(point) != 2:
            raise InvalidControlPointsError(
                f"invalid control points: expected (sample, target), got {point!r}"
            )
        sample, target = float(point[0]), float(point[1])
        if not (math.isfinite(sample) and math.isfinite(target)):
            raise InvalidControlPointsError(
                f"invalid control points: non-finite point ({sample}, {target})"
            )
        sample %= HUE_PERIOD
        if sample >= HUE_PERIOD:
            sample = 0.0
        out.append((sample, target))
    return out


class HueReflect:
    """f(x) = (2A - x) mod 360: reflection across the line through angle A."""

    def __init__(self, angle: float):
        angle = float(angle)
        if not math.isfinite(angle):
            raise InvalidControlPointsError(
                f"invalid control points: non-finite reflection angle {angle}"
            )
        self.angle = angle

    def __call__(self, hue: HueLike) -> HueLike:
        x = np.asarray(hue, dtype=np.float64)
        return _finish(_wrap(2.0 * self.angle - x))

    def __repr__(self) -> str:
        return f"HueReflect(angle={self.angle:g})"


class TwoPointHue:
    """
    Two control points, two linear pieces.

    The low->high piece covers [a.x, b.x). The high->low piece wraps through
    0/360 and is split into x < a.x (anchored at a) and x >= b.x (anchored at b);
    both halves share one slope.
    """

    def __init__(self, p1: Sequence[float], p2: Sequence[float]):
        first, second = _normalise_points([p1, p2])
        low, high = (first, second) if first[0] < second[0] else (second, first)
        if low[0] == high[0]:
            raise InvalidControlPointsError(
                f"invalid control points: both points sample {low[0]:g}°"
            )
        self.low = low
        self.high = high

        self.slope_lowhigh = (high[1] - low[1]) / (high[0] - low[0])
        self.slope_highlow = (low[1] + HUE_PERIOD - high[1]) / (
            low[0] + HUE_PERIOD - high[0]
        )
        self.lowhigh_bias = low[1] - self.slope_lowhigh * low[0]
        self.highlow_bias_first = low[1] - self.slope_highlow * low[0]
        self.highlow_bias_second = high[1] - self.slope_highlow * high[0]

    def __call__(self, hue: HueLike) -> HueLike:
        x = np.mod(np.asarray(hue, dtype=np.float64), HUE_PERIOD)
        out = np.where(
            x < self.low[0],
            x * self.slope_highlow + self.highlow_bias_first,
            np.where(
                x < self.high[0],
                x * self.slope_lowhigh + self.lowhigh_bias,
                x * self.slope_highlow + self.highlow_bias_second,
            ),
        )
        return _finish(_wrap(out))

    def __repr__(self) -> str:
        return f"TwoPointHue(low={self.low}, high={self.high})"


class PiecewiseHue:
    """
    Piecewise-linear hue map through any number of control points.

    Points are sorted by sample angle, then the last point shifted by -360 is
    prepended and the first point shifted by +360 appended, so the map is
    continuous across the 0/360 seam. Each consecutive pair gives one
    (slope, bias) segment over the half-open interval [x_i, x_i+1).
    """

    def __init__(self, points: Iterable[Sequence[float]]):
        pts = _normalise_points(points)
        if not pts:
            pts = [DEFAULT_CONTROL_POINT]
        pts.sort(key=lambda p: p[0])
        for prev, point in zip(pts, pts[1:]):
            if prev[0] == point[0]:
                raise InvalidControlPointsError(
                    f"invalid control points: duplicate sample angle {point[0]:g}°"
                )

        first, last = pts[0], pts[-1]
        pts.insert(0, (last[0] - HUE_PERIOD, last[1] - HUE_PERIOD))
        pts.append((first[0] + HUE_PERIOD, first[1] + HUE_PERIOD))
        self.points: Tuple[ControlPoint, ...] = tuple(pts)

        segments: List[Tuple[float, float]] = []
        for prev, point in zip(pts, pts[1:]):
            slope = (point[1] - prev[1]) / (point[0] - prev[0])
            bias = prev[1] - slope * prev[0]
            segments.append((slope, bias))
        self.segments: Tuple[Tuple[float, float], ...] = tuple(segments)

        self._breakpoints = np.array([p[0] for p in pts], dtype=np.float64)
        self._slopes = np.array([s for s, _ in segments], dtype=np.float64)
        self._biases = np.array([b for _, b in segments], dtype=np.float64)

    def segment_index(self, hue: HueLike) -> np.ndarray:
        """Index of the segment containing each (circularly reduced) hue."""
        return self._locate(self._reduce(np.asarray(hue, dtype=np.float64)))

    def _reduce(self, x: np.ndarray) -> np.ndarray:
        # into [first, first+360): the leading wrap segment is never selected
        origin = self._breakpoints[1]
        return origin + np.mod(x - origin, HUE_PERIOD)

    def _locate(self, reduced: np.ndarray) -> np.ndarray:
        idx = np.searchsorted(self._breakpoints, reduced, side="right") - 1
        return np.clip(idx, 0, len(self.segments) - 1)

    def __call__(self, hue: HueLike) -> HueLike:
        reduced = self._reduce(np.asarray(hue, dtype=np.float64))
        idx = self._locate(reduced)
        out = reduced * self._slopes[idx] + self._biases[idx]
        return _finish(_wrap(out))

    def __repr__(self) -> str:
        return f"PiecewiseHue(points={list(self.points[1:-1])})"


# Builders


def angle_reflect(reflect_angle: float) -> HueReflect:
    """Reflect hues across reflect_angle."""
    return HueReflect(reflect_angle)


def linear_piece_two(p1: Sequence[float], p2: Sequence[float]) -> TwoPointHue:
    """Two-point piecewise map; raises InvalidControlPointsError on equal samples."""
    return TwoPointHue(p1, p2)


def linear_piece_any(points: Iterable[Sequence[float]]) -> PiecewiseHue:
    """N-point piecewise map; no points gives the identity via (180, 180)."""
    return PiecewiseHue(points)


__all__ = [
    "HueReflect",
    "TwoPointHue",
    "PiecewiseHue",
    "angle_reflect",
    "linear_piece_two",
    "linear_piece_any",
]
