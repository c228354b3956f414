# colour_ops/colour_convert.py
from __future__ import annotations

"""
RGB <-> HSV conversions.

Exports:
  rgb_to_hsv(pixel)          scalar, one pixel -> Hsv
  hsv_to_rgb(hsv)            scalar, Hsv -> (r, g, b) uint8 values
  rgb_to_hsv_array(rgb)      vectorised, (...,3|4) uint8 -> (h, s, v) float64 arrays
  hsv_to_rgb_array(h, s, v)  vectorised, float arrays -> (...,3) uint8

Hue is in degrees [0,360), saturation and value in [0,100]. The array forms use
the same arithmetic as the scalar forms so both paths agree.

Channels are scaled back to 8 bits by truncation, so a round trip can drift by
one step per channel.
"""

from typing import Tuple

import numpy as np

from .constants import HUE_PERIOD
from .core_types import FloatArray, Hsv, PixelLike, RGBTuple


def _to_u8(channel: float) -> int:
    """[0,1] float -> 0..255 by truncation, clamped."""
    return int(min(max(channel * 255.0, 0.0), 255.0))


# Scalar


def rgb_to_hsv(pixel: PixelLike) -> Hsv:
    """
    Convert one RGB(A) pixel to HSV. Alpha, if present, is ignored.

    The channel holding the maximum selects the 60° formula (ties resolved
    r, g, b in that order). Fully desaturated pixels get hue 0 and black gets
    saturation 0.
    """
    r, g, b = int(pixel[0]), int(pixel[1]), int(pixel[2])
    big_m = max(r, g, b) / 255.0
    little_m = min(r, g, b) / 255.0
    c = big_m - little_m
    s = (c / big_m) * 100.0 if big_m > 0.0 else 0.0

    r_f, g_f, b_f = r / 255.0, g / 255.0, b / 255.0
    if big_m == little_m:
        h_prime = 0.0
    else:
        big_r = (big_m - r_f) / c
        big_g = (big_m - g_f) / c
        big_b = (big_m - b_f) / c
        if big_m == r_f:
            h_prime = big_b - big_g
        elif big_m == g_f:
            h_prime = 2.0 + big_r - big_b
        else:
            h_prime = 4.0 + big_g - big_r

    # red-max with blue > green lands in (-60, 0)
    h = (h_prime / 6.0 * 360.0) % HUE_PERIOD
    v = big_m * 100.0
    return Hsv(h, s, v)


def hsv_to_rgb(hsv: Hsv) -> RGBTuple:
    """Convert HSV back to an (r, g, b) tuple of 8-bit values."""
    hue = float(hsv.h) % HUE_PERIOD
    saturation = float(hsv.s) / 100.0
    value = float(hsv.v) / 100.0

    max_c = value
    c = saturation * value
    min_c = max_c - c
    h_prime = (hue - HUE_PERIOD) / 60.0 if hue >= 300.0 else hue / 60.0

    if h_prime < 1.0:
        if h_prime < 0.0:
            r, g, b = max_c, min_c, min_c - h_prime * c
        else:
            r, g, b = max_c, min_c + h_prime * c, min_c
    elif h_prime < 3.0:
        if h_prime < 2.0:
            r, g, b = min_c - (h_prime - 2.0) * c, max_c, min_c
        else:
            r, g, b = min_c, max_c, min_c + (h_prime - 2.0) * c
    else:
        if h_prime < 4.0:
            r, g, b = min_c, min_c - (h_prime - 4.0) * c, max_c
        else:
            r, g, b = min_c + (h_prime - 4.0) * c, min_c, max_c

    return (_to_u8(r), _to_u8(g), _to_u8(b))


# Vectorised


def rgb_to_hsv_array(rgb: np.ndarray) -> Tuple[FloatArray, FloatArray, FloatArray]:
    """
    Vectorised rgb_to_hsv.

    Args:
      rgb: uint8 array [...,3] or [...,4]; alpha is ignored
    Returns:
      (h, s, v) float64 arrays of shape rgb.shape[:-1]
    """
    rgb_f = np.asarray(rgb)[..., :3].astype(np.float64) / 255.0
    r_f = rgb_f[..., 0]
    g_f = rgb_f[..., 1]
    b_f = rgb_f[..., 2]
    big_m = rgb_f.max(axis=-1)
    little_m = rgb_f.min(axis=-1)
    c = big_m - little_m

    with np.errstate(divide="ignore", invalid="ignore"):
        s = np.where(big_m > 0.0, (c / big_m) * 100.0, 0.0)
        big_r = (big_m - r_f) / c
        big_g = (big_m - g_f) / c
        big_b = (big_m - b_f) / c
        h_prime = np.select(
            [big_m == little_m, big_m == r_f, big_m == g_f],
            [0.0, big_b - big_g, 2.0 + big_r - big_b],
            default=4.0 + big_g - big_r,
        )

    h = np.mod(h_prime / 6.0 * 360.0, HUE_PERIOD)
    v = big_m * 100.0
    return h, s, v


def hsv_to_rgb_array(h: np.ndarray, s: np.ndarray, v: np.ndarray) -> np.ndarray:
    """
    Vectorised hsv_to_rgb.

    Args:
      h, s, v: broadcastable float arrays (degrees, percent, percent)
    Returns:
      uint8 array [...,3]
    """
    hue = np.mod(np.asarray(h, dtype=np.float64), HUE_PERIOD)
    saturation = np.asarray(s, dtype=np.float64) / 100.0
    value = np.asarray(v, dtype=np.float64) / 100.0
    hue, saturation, value = np.broadcast_arrays(hue, saturation, value)

    max_c = value
    c = saturation * value
    min_c = max_c - c
    h_prime = np.where(hue >= 300.0, (hue - HUE_PERIOD) / 60.0, hue / 60.0)

    conditions = [
        h_prime < 0.0,
        h_prime < 1.0,
        h_prime < 2.0,
        h_prime < 3.0,
        h_prime < 4.0,
    ]
    r = np.select(
        conditions,
        [max_c, max_c, min_c - (h_prime - 2.0) * c, min_c, min_c],
        default=min_c + (h_prime - 4.0) * c,
    )
    g = np.select(
        conditions,
        [min_c, min_c + h_prime * c, max_c, max_c, min_c - (h_prime - 4.0) * c],
        default=min_c,
    )
    b = np.select(
        conditions,
        [min_c - h_prime * c, min_c, min_c, min_c + (h_prime - 2.0) * c, max_c],
        default=max_c,
    )

    out = np.stack([r, g, b], axis=-1) * 255.0
    return np.clip(out, 0.0, 255.0).astype(np.uint8)


__all__ = [
    "rgb_to_hsv",
    "hsv_to_rgb",
    "rgb_to_hsv_array",
    "hsv_to_rgb_array",
]
