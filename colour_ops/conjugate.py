# colour_ops/conjugate.py
from __future__ import annotations

"""
Channel conjugates: swap two of the three RGB channels.

rgb_conjugate(pixel, pick_max) keeps the channel holding the extreme value
(maximum if pick_max, else minimum; first channel wins ties) and swaps the
other two.
"""

import numpy as np

from .core_types import PixelLike, RGBTuple

# Output channel order per extreme-holding index.
_SWAPS = np.array(
    [
        [0, 2, 1],  # r fixed: swap g and b
        [2, 1, 0],  # g fixed: swap r and b
        [1, 0, 2],  # b fixed: swap r and g
    ],
    dtype=np.intp,
)


def rgb_conjugate(pixel: PixelLike, pick_max: bool) -> RGBTuple:
    """Swap the two channels not holding the max (pick_max) or min value."""
    channels = (int(pixel[0]), int(pixel[1]), int(pixel[2]))
    extreme = max(channels) if pick_max else min(channels)
    position = channels.index(extreme)
    r, g, b = channels
    if position == 0:
        return (r, b, g)
    if position == 1:
        return (b, g, r)
    return (g, r, b)


def rgb_conjugate_array(rgb: np.ndarray, pick_max: bool) -> np.ndarray:
    """
    Vectorised rgb_conjugate.

    Args:
      rgb: uint8 array [...,3] or [...,4]; alpha is ignored
    Returns:
      uint8 array [...,3]
    """
    rgb3 = np.asarray(rgb)[..., :3]
    # argmax/argmin return the first match, same tie rule as the scalar form
    position = np.argmax(rgb3, axis=-1) if pick_max else np.argmin(rgb3, axis=-1)
    return np.take_along_axis(rgb3, _SWAPS[position], axis=-1)


__all__ = ["rgb_conjugate", "rgb_conjugate_array"]
