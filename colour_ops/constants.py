# colour_ops/constants.py
"""
Shared constants and presets.

- Hue domain and default control point
- Preset control points (Phos)
- Interactive menu and CLI defaults
"""
from __future__ import annotations

from typing import Dict, List, Tuple

# =========================
# Hue domain
# =========================
HUE_PERIOD: float = 360.0

# Substituted when an N-point map is built from no points: identity at the antipode.
DEFAULT_CONTROL_POINT: Tuple[float, float] = (180.0, 180.0)

# =========================
# Presets
# =========================
# Phos' operation: 120° -> 165° and 300° -> 285°.
PHOS_POINTS: Tuple[Tuple[float, float], Tuple[float, float]] = (
    (120.0, 165.0),
    (300.0, 285.0),
)

# =========================
# Interactive input
# =========================
# Entering this (sample, target) pair ends N-point entry.
STOP_POINT: Tuple[float, float] = (-1.0, -1.0)

MENU_LINES: List[str] = [
    "1: Hue Reflection, reflect the colour wheel around an angle",
    "2: Phos' Operation, 120°→165° and 300°→285°",
    "3: Two Point Shift, same as above but for any two input points",
    "4: N Point Shift, same as above but for any input points",
    "-1: Greater Colour Conjugate, swap the larger two colour channels",
    "-2: Lesser Colour Conjugate, swap the smaller two colour channels",
]
VALID_SELECTORS: Tuple[int, ...] = (1, 2, 3, 4, -1, -2)

# CLI --op names -> menu selector
OP_NAMES: Dict[str, int] = {
    "reflect": 1,
    "phos": 2,
    "two": 3,
    "points": 4,
    "conj-max": -1,
    "conj-min": -2,
}

# =========================
# Files
# =========================
OUTPUT_SUFFIX = "_output"
IMAGE_EXTENSIONS = {".png", ".jpg", ".jpeg", ".webp"}
