# colour_ops/engine.py
from __future__ import annotations

"""
Whole-image mapping over the worker pool.

process_image(src, operation) allocates one output buffer, makes one RowTask
per row (read-only input row view + the matching output row view) and lets the
pool's workers write each output row in place. Rows are disjoint slices of the
output, so workers never need a lock. Row order is unspecified.
"""

import os
from typing import List, Optional

import numpy as np

from .core_types import PixelOperation, RowTask, U8Image, assert_u8_image_rgba
from .worker_pool import PoolHandle, WorkerPool


def default_workers(height: Optional[int] = None) -> int:
    """Hardware thread count, clamped to [1, height] when a height is given."""
    n = os.cpu_count() or 1
    if height is not None:
        n = min(n, max(1, int(height)))
    return max(1, n)


def build_row_tasks(src: U8Image, out: U8Image) -> List[RowTask]:
    """One task per row; input views are read-only, output views are disjoint."""
    if src.shape != out.shape:
        raise ValueError(f"shape mismatch: {src.shape} vs {out.shape}")
    readonly = src.view()
    readonly.flags.writeable = False
    return [RowTask(y, readonly[y], out[y]) for y in range(src.shape[0])]


def map_row_task(task: RowTask, operation: PixelOperation, per_pixel: bool) -> None:
    """Apply operation to one row, writing straight into task.dst."""
    map_row = getattr(operation, "map_row", None)
    if map_row is not None and not per_pixel:
        map_row(task.src, task.dst)
        return
    dst = task.dst
    for x, pixel in enumerate(task.src):
        dst[x] = operation(pixel)


def process_image(
    src: U8Image,
    operation: PixelOperation,
    workers: Optional[int] = None,
    per_pixel: bool = False,
) -> U8Image:
    """
    Map every pixel of an RGBA image through operation.

    Args:
      src: uint8 [H,W,4]; not modified
      operation: RGBA -> RGBA callable; ops with map_row use the NumPy row path
      workers: thread count; default is the hardware thread count (<= H)
      per_pixel: force the per-pixel path even when map_row is available
    Returns:
      new uint8 [H,W,4] buffer
    Raises:
      TypeError for non-RGBA input, WorkerPoolError if any row failed
    """
    src = assert_u8_image_rgba(src)
    out = np.empty_like(src)
    height, width = src.shape[0], src.shape[1]
    if height == 0 or width == 0:
        return out

    n_workers = default_workers(height) if workers is None else int(workers)
    tasks = build_row_tasks(src, out)

    def worker(task: RowTask) -> None:
        map_row_task(task, operation, per_pixel)

    def manager(handle: PoolHandle[RowTask, None]) -> None:
        for task in tasks:
            handle.submit(task)
        handle.close()
        handle.join()

    WorkerPool(n_workers, worker).run(manager)
    return out


__all__ = ["default_workers", "build_row_tasks", "map_row_task", "process_image"]
