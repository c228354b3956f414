# colour_ops/__init__.py
"""
colour_ops package.

Purpose:
  Hue-space and channel-swap recolouring of RGBA images, applied row by row
  on a fixed pool of worker threads. See recolour.py for the CLI.

Public API:
  process_image    : map every pixel of an RGBA buffer through an operation.
  build_pixel_op   : turn a selected Operation into an RGBA -> RGBA operation.
  hue_map          : angle_reflect, linear_piece_two, linear_piece_any.
  colour_convert   : rgb_to_hsv / hsv_to_rgb (scalar and array forms).
  conjugate        : rgb_conjugate channel swaps.
  worker_pool      : WorkerPool, run_pool.
  image_io         : load_image_rgba / save_image_rgba.

Quick start:
  from colour_ops import PHOS, build_pixel_op, process_image
  out = process_image(rgba, build_pixel_op(PHOS))
"""

__version__ = "0.1.0"

# Re-export namespaces for convenience.
from . import colour_convert
from . import conjugate
from . import constants
from . import core_types
from . import engine
from . import errors
from . import hue_map
from . import image_io
from . import operations
from . import pixel_ops
from . import utils
from . import worker_pool

from .colour_convert import hsv_to_rgb, rgb_to_hsv  # noqa: E402,F401
from .conjugate import rgb_conjugate  # noqa: E402,F401
from .engine import process_image  # noqa: E402,F401
from .errors import (  # noqa: E402,F401
    ColourOpsError,
    InvalidControlPointsError,
    WorkerPoolError,
)
from .hue_map import angle_reflect, linear_piece_any, linear_piece_two  # noqa: E402,F401
from .operations import (  # noqa: E402,F401
    PHOS,
    ConjugateMax,
    ConjugateMin,
    NPoint,
    Reflection,
    TwoPoint,
    build_pixel_op,
)
from .pixel_ops import compose_conjugate_op, compose_hue_op  # noqa: E402,F401
from .worker_pool import WorkerPool, run_pool  # noqa: E402,F401

__all__ = [
    "__version__",
    "colour_convert",
    "conjugate",
    "constants",
    "core_types",
    "engine",
    "errors",
    "hue_map",
    "image_io",
    "operations",
    "pixel_ops",
    "utils",
    "worker_pool",
    "hsv_to_rgb",
    "rgb_to_hsv",
    "rgb_conjugate",
    "process_image",
    "ColourOpsError",
    "InvalidControlPointsError",
    "WorkerPoolError",
    "angle_reflect",
    "linear_piece_any",
    "linear_piece_two",
    "PHOS",
    "ConjugateMax",
    "ConjugateMin",
    "NPoint",
    "Reflection",
    "TwoPoint",
    "build_pixel_op",
    "compose_conjugate_op",
    "compose_hue_op",
    "WorkerPool",
    "run_pool",
]
