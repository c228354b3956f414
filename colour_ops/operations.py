# colour_ops/operations.py
from __future__ import annotations

"""
Operation selection.

The selected transform is a small tagged value (one frozen dataclass per kind).
It is dispatched once into a concrete pixel operation, so control point errors
surface before any image is touched.

Menu selectors (as shown by the interactive prompt):
   1  Reflection        -1  ConjugateMax (swap the two larger channels)
   2  PHOS preset       -2  ConjugateMin (swap the two smaller channels)
   3  TwoPoint
   4  NPoint
"""

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple, Union

from .constants import PHOS_POINTS
from .core_types import ControlPoint
from .hue_map import (
    HueReflect,
    PiecewiseHue,
    TwoPointHue,
    angle_reflect,
    linear_piece_any,
    linear_piece_two,
)
from .pixel_ops import ConjugatePixelOp, HuePixelOp, compose_conjugate_op, compose_hue_op


@dataclass(frozen=True)
class Reflection:
    angle: float


@dataclass(frozen=True)
class TwoPoint:
    first: ControlPoint
    second: ControlPoint


@dataclass(frozen=True)
class NPoint:
    points: Tuple[ControlPoint, ...] = ()


@dataclass(frozen=True)
class ConjugateMax:
    """Greater conjugate: the minimum channel stays, the two larger swap."""


@dataclass(frozen=True)
class ConjugateMin:
    """Lesser conjugate: the maximum channel stays, the two smaller swap."""


Operation = Union[Reflection, TwoPoint, NPoint, ConjugateMax, ConjugateMin]
HueMap = Union[HueReflect, TwoPointHue, PiecewiseHue]
PixelOp = Union[HuePixelOp, ConjugatePixelOp]

PHOS = TwoPoint(PHOS_POINTS[0], PHOS_POINTS[1])


def build_hue_map(op: Operation) -> Optional[HueMap]:
    """Hue function for hue operations; None for channel conjugates."""
    if isinstance(op, Reflection):
        return angle_reflect(op.angle)
    if isinstance(op, TwoPoint):
        return linear_piece_two(op.first, op.second)
    if isinstance(op, NPoint):
        return linear_piece_any(op.points)
    if isinstance(op, (ConjugateMax, ConjugateMin)):
        return None
    raise TypeError(f"unknown operation {op!r}")


def build_pixel_op(op: Operation) -> PixelOp:
    """Dispatch an operation into its RGBA -> RGBA pixel operation."""
    # rgb_conjugate keeps the picked extreme in place: keeping the minimum
    # swaps the two larger channels
    if isinstance(op, ConjugateMax):
        return compose_conjugate_op(pick_max=False)
    if isinstance(op, ConjugateMin):
        return compose_conjugate_op(pick_max=True)
    hue_map = build_hue_map(op)
    if hue_map is None:
        raise TypeError(f"no pixel operation for {op!r}")
    return compose_hue_op(hue_map)


def operation_from_selector(
    selector: int,
    angle: Optional[float] = None,
    points: Sequence[ControlPoint] = (),
) -> Operation:
    """
    Turn a menu selector plus its parameters into an Operation.

    Raises ValueError for unknown selectors or missing parameters.
    """
    if selector == 1:
        if angle is None:
            raise ValueError("reflection needs an angle")
        return Reflection(float(angle))
    if selector == 2:
        return PHOS
    if selector == 3:
        if len(points) != 2:
            raise ValueError(f"two point shift needs exactly 2 points, got {len(points)}")
        first, second = points
        return TwoPoint(
            (float(first[0]), float(first[1])), (float(second[0]), float(second[1]))
        )
    if selector == 4:
        return NPoint(tuple((float(s), float(t)) for s, t in points))
    if selector == -1:
        return ConjugateMax()
    if selector == -2:
        return ConjugateMin()
    raise ValueError(f"unknown operation selector {selector}")


def describe_operation(op: Operation) -> str:
    """One-line human description for logs."""
    if isinstance(op, Reflection):
        return f"hue reflection about {op.angle:g}°"
    if op == PHOS:
        return "Phos' operation (120°→165°, 300°→285°)"
    if isinstance(op, TwoPoint):
        (s1, t1), (s2, t2) = op.first, op.second
        return f"two point shift ({s1:g}°→{t1:g}°, {s2:g}°→{t2:g}°)"
    if isinstance(op, NPoint):
        if not op.points:
            return "n point shift (identity)"
        pairs = ", ".join(f"{s:g}°→{t:g}°" for s, t in op.points)
        return f"n point shift ({pairs})"
    if isinstance(op, ConjugateMax):
        return "greater colour conjugate"
    if isinstance(op, ConjugateMin):
        return "lesser colour conjugate"
    raise TypeError(f"unknown operation {op!r}")


__all__ = [
    "Reflection",
    "TwoPoint",
    "NPoint",
    "ConjugateMax",
    "ConjugateMin",
    "Operation",
    "HueMap",
    "PixelOp",
    "PHOS",
    "build_hue_map",
    "build_pixel_op",
    "operation_from_selector",
    "describe_operation",
]
