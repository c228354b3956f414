# colour_ops/prompt.py
from __future__ import annotations

"""
Interactive parameter entry.

Every reader keeps asking until the line parses, so a typo never aborts a run.
read_line defaults to input(); tests pass their own.
"""

from typing import Callable, List, Optional, TypeVar

from .constants import MENU_LINES, STOP_POINT, VALID_SELECTORS
from .core_types import ControlPoint
from .operations import Operation, operation_from_selector

T = TypeVar("T")
ReadLine = Callable[[], str]
Say = Callable[[str], None]


def _default_read_line() -> str:
    return input()


def _say(message: str) -> None:
    print(message, flush=True)


def read_value(
    parse: Callable[[str], T],
    prompt: Optional[str] = None,
    read_line: ReadLine = _default_read_line,
    say: Say = _say,
) -> T:
    """Print prompt (if any) and re-read until parse() accepts the stripped line."""
    if prompt:
        say(prompt)
    while True:
        try:
            return parse(read_line().strip())
        except ValueError:
            continue


def read_float(
    prompt: Optional[str] = None,
    read_line: ReadLine = _default_read_line,
    say: Say = _say,
) -> float:
    return read_value(float, prompt, read_line, say)


def read_int(
    prompt: Optional[str] = None,
    read_line: ReadLine = _default_read_line,
    say: Say = _say,
) -> int:
    return read_value(int, prompt, read_line, say)


def read_selector(read_line: ReadLine = _default_read_line, say: Say = _say) -> int:
    """Show the menu until a valid selector is entered."""
    while True:
        say("Select Operation")
        for line in MENU_LINES:
            say(line)
        selector = read_int(None, read_line, say)
        if selector in VALID_SELECTORS:
            return selector


def read_points(
    count: Optional[int] = None,
    read_line: ReadLine = _default_read_line,
    say: Say = _say,
) -> List[ControlPoint]:
    """
    Read (sample, target) pairs.

    With count set, exactly that many pairs are read. Otherwise pairs are read
    until the stop point (-1, -1) is entered.
    """
    points: List[ControlPoint] = []
    if count is None:
        say("Input any number of points within the rectangle (0,0) to (360,360)")
        say(f"Input point ({STOP_POINT[0]:g},{STOP_POINT[1]:g}) to stop")
    while count is None or len(points) < count:
        n = len(points) + 1
        sample = read_float(f"sample {n}:" if count else "sample:", read_line, say)
        target = read_float(f"target {n}:" if count else "target:", read_line, say)
        if count is None and (sample, target) == STOP_POINT:
            break
        points.append((sample, target))
    return points


def prompt_operation(
    read_line: ReadLine = _default_read_line, say: Say = _say
) -> Operation:
    """Full interactive flow: menu, then whatever the chosen selector needs."""
    selector = read_selector(read_line, say)
    if selector == 1:
        angle = read_float("Input Reflection Angle:", read_line, say)
        return operation_from_selector(1, angle=angle)
    if selector == 3:
        return operation_from_selector(3, points=read_points(2, read_line, say))
    if selector == 4:
        return operation_from_selector(4, points=read_points(None, read_line, say))
    return operation_from_selector(selector)


__all__ = [
    "read_value",
    "read_float",
    "read_int",
    "read_selector",
    "read_points",
    "prompt_operation",
]
