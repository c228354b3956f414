# colour_ops/core_types.py
from __future__ import annotations

"""
Core type aliases, small value objects, and lightweight validators.
"""

from dataclasses import dataclass
from typing import Callable, Sequence, Tuple, Union

import numpy as np
from numpy.typing import NDArray

# Basic aliases

RGBTuple = Tuple[int, int, int]
RGBATuple = Tuple[int, int, int, int]
PixelLike = Union[Sequence[int], NDArray[np.uint8]]

U8Image = NDArray[np.uint8]  # (H, W, 4) RGBA
U8Row = NDArray[np.uint8]  # (W, 4) RGBA
FloatArray = NDArray[np.float64]

ControlPoint = Tuple[float, float]  # (sample_deg, target_deg)
HueLike = Union[float, FloatArray]
HueFunction = Callable[[HueLike], HueLike]

# Value objects


@dataclass(frozen=True)
class Hsv:
    """Hue in degrees [0,360), saturation and value in [0,100]."""

    h: float
    s: float
    v: float


@dataclass(frozen=True)
class RowTask:
    """One image row: read-only source view and the matching output view."""

    index: int
    src: U8Row
    dst: U8Row


# Small helpers


def coerce_to_rgba_tuple(value: PixelLike) -> RGBATuple:
    """
    Coerce a 3- or 4-length sequence or array row to an (r, g, b, a) tuple.
    A missing alpha channel is treated as fully opaque.
    """
    if len(value) < 3:  # type: ignore[arg-type]
        raise ValueError("sequence too small for RGB")
    alpha = int(value[3]) if len(value) > 3 else 255  # type: ignore[arg-type]
    return (int(value[0]), int(value[1]), int(value[2]), alpha)


def assert_u8_image_rgba(image: np.ndarray) -> U8Image:
    """Validate a uint8 (H,W,4) image and return it typed as U8Image."""
    if (
        not isinstance(image, np.ndarray)
        or image.dtype != np.uint8
        or image.ndim != 3
        or image.shape[-1] != 4
    ):
        raise TypeError("expected uint8 (H,W,4) RGBA image")
    return image  # type: ignore[return-value]


# Callable signatures

PixelOperation = Callable[[PixelLike], RGBATuple]

__all__ = [
    # aliases / types
    "RGBTuple",
    "RGBATuple",
    "PixelLike",
    "U8Image",
    "U8Row",
    "FloatArray",
    "ControlPoint",
    "HueLike",
    "HueFunction",
    # value objects
    "Hsv",
    "RowTask",
    # helpers
    "coerce_to_rgba_tuple",
    "assert_u8_image_rgba",
    # callable signatures
    "PixelOperation",
]
