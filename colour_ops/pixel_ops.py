# colour_ops/pixel_ops.py
from __future__ import annotations

"""
Pixel operations: lift a hue function or a channel conjugate into RGBA -> RGBA.

Every operation passes alpha through untouched. Besides the per-pixel call,
each operation has map_row(src_row, dst_row) which maps a whole (W,4) row with
NumPy and writes straight into dst_row.
"""

import numpy as np

from .colour_convert import hsv_to_rgb, hsv_to_rgb_array, rgb_to_hsv, rgb_to_hsv_array
from .conjugate import rgb_conjugate, rgb_conjugate_array
from .core_types import (
    Hsv,
    HueFunction,
    PixelLike,
    RGBATuple,
    U8Row,
    coerce_to_rgba_tuple,
)


class HuePixelOp:
    """RGB -> HSV, remap hue only, HSV -> RGB, reattach alpha."""

    def __init__(self, hue_fn: HueFunction):
        self.hue_fn = hue_fn

    def __call__(self, pixel: PixelLike) -> RGBATuple:
        r, g, b, a = coerce_to_rgba_tuple(pixel)
        hsv = rgb_to_hsv((r, g, b))
        new_hue = float(self.hue_fn(hsv.h))
        r2, g2, b2 = hsv_to_rgb(Hsv(new_hue, hsv.s, hsv.v))
        return (r2, g2, b2, a)

    def map_row(self, src_row: U8Row, dst_row: U8Row) -> None:
        h, s, v = rgb_to_hsv_array(src_row)
        new_h = np.asarray(self.hue_fn(h), dtype=np.float64)
        dst_row[..., :3] = hsv_to_rgb_array(new_h, s, v)
        dst_row[..., 3] = src_row[..., 3]

    def __repr__(self) -> str:
        return f"HuePixelOp({self.hue_fn!r})"


class ConjugatePixelOp:
    """Channel conjugate on RGB, alpha passthrough."""

    def __init__(self, pick_max: bool):
        self.pick_max = bool(pick_max)

    def __call__(self, pixel: PixelLike) -> RGBATuple:
        r, g, b, a = coerce_to_rgba_tuple(pixel)
        r2, g2, b2 = rgb_conjugate((r, g, b), self.pick_max)
        return (r2, g2, b2, a)

    def map_row(self, src_row: U8Row, dst_row: U8Row) -> None:
        dst_row[..., :3] = rgb_conjugate_array(src_row, self.pick_max)
        dst_row[..., 3] = src_row[..., 3]

    def __repr__(self) -> str:
        return f"ConjugatePixelOp(pick_max={self.pick_max})"


def compose_hue_op(hue_fn: HueFunction) -> HuePixelOp:
    """Wrap a hue function (float or array in, same out) as a pixel operation."""
    return HuePixelOp(hue_fn)


def compose_conjugate_op(pick_max: bool) -> ConjugatePixelOp:
    """Wrap rgb_conjugate(., pick_max) as a pixel operation."""
    return ConjugatePixelOp(pick_max)


__all__ = [
    "HuePixelOp",
    "ConjugatePixelOp",
    "compose_hue_op",
    "compose_conjugate_op",
]
