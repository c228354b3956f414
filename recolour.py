#!/usr/bin/env python3
"""
recolour.py
Apply a hue remap or channel conjugate to RGBA images, row-parallel.

Usage:
  python recolour.py INPUT [--op reflect|phos|two|points|conj-max|conj-min]
                           [--angle A] [--point SAMPLE TARGET ...]
                           [--outdir DIR] [--workers N] [--per-pixel] [--debug]

Operations:
  reflect  : reflect the colour wheel around --angle
  phos     : Phos' operation, 120°→165° and 300°→285°
  two      : two point shift, exactly two --point pairs
  points   : n point shift, any number of --point pairs (none = identity)
  conj-max : greater colour conjugate, swap the larger two colour channels
  conj-min : lesser colour conjugate, swap the smaller two colour channels

  Without --op the operation and its parameters are asked for interactively.

Input:
  Any Pillow-readable image, or a folder of them. Alpha is preserved.

Output:
  PNG. Writes <stem>_output.png next to INPUT, or into --outdir.
"""

from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path
from typing import List, Optional

import numpy as np

from colour_ops.constants import IMAGE_EXTENSIONS, OP_NAMES, OUTPUT_SUFFIX
from colour_ops.core_types import ControlPoint
from colour_ops.engine import default_workers, process_image
from colour_ops.errors import ColourOpsError
from colour_ops.image_io import is_image_file, load_image_rgba, save_image_rgba
from colour_ops.operations import (
    Operation,
    PixelOp,
    build_pixel_op,
    describe_operation,
    operation_from_selector,
)
from colour_ops.prompt import prompt_operation
from colour_ops.utils import (
    # formatting
    format_seconds_compact,
    format_total_duration_compact,
    # pretty logging
    print_banner,
    log,
    debug_log,
    warn,
    error,
    print_config_line,
    key_value_pairs_to_string,
    enable_line_buffered_stdout,
)

# CLI args & small helpers


def build_arg_parser() -> argparse.ArgumentParser:
    """
    CLI arguments for recolouring.

    Namespace fields:
      src: Path to image or folder
      op: operation name or None (interactive)
      angle: reflection angle
      points: list of [sample, target] pairs
      outdir: optional Path for outputs
      workers: worker threads per image
      per_pixel: force the per-pixel path
      debug: bool for verbose details
    """
    parser = argparse.ArgumentParser(
        prog="recolour",
        description="Remap hues or swap colour channels of image(s).",
    )
    parser.add_argument("src", type=Path, help="Input image or folder")
    parser.add_argument(
        "--op",
        choices=sorted(OP_NAMES),
        default=None,
        help="Operation. Omit to choose interactively.",
    )
    parser.add_argument(
        "--angle", type=float, default=None, help="Reflection angle (reflect)"
    )
    parser.add_argument(
        "--point",
        dest="points",
        nargs=2,
        type=float,
        action="append",
        default=[],
        metavar=("SAMPLE", "TARGET"),
        help="Control point in degrees (two, points). Repeatable.",
    )
    parser.add_argument(
        "--outdir", type=Path, default=None, help="Output directory (optional)"
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=default_workers(),
        help="Worker threads per image",
    )
    parser.add_argument(
        "--per-pixel",
        action="store_true",
        help="Map pixel by pixel instead of whole rows with NumPy",
    )
    parser.add_argument("--debug", action="store_true", help="Verbose details")
    return parser


def operation_from_args(
    args: argparse.Namespace, parser: argparse.ArgumentParser
) -> Operation:
    """Resolve --op and its parameters, or prompt when --op is absent."""
    if args.op is None:
        return prompt_operation()
    points: List[ControlPoint] = [(float(s), float(t)) for s, t in args.points]
    try:
        return operation_from_selector(
            OP_NAMES[args.op], angle=args.angle, points=points
        )
    except ValueError as exc:
        parser.error(str(exc))
        raise  # parser.error exits


def output_path_for(src_path: Path, outdir: Optional[Path]) -> Path:
    name = f"{src_path.stem}{OUTPUT_SUFFIX}.png"
    return (outdir / name) if outdir else src_path.with_name(name)


def list_input_images(folder: Path) -> List[Path]:
    files = [
        p
        for p in folder.iterdir()
        if p.is_file()
        and p.suffix.lower() in IMAGE_EXTENSIONS
        and not p.stem.endswith(OUTPUT_SUFFIX)
        and is_image_file(p)
    ]
    files.sort(key=lambda p: p.name.lower())
    return files


# Per-file processing


def process_single_image(
    src_path: Path,
    out_path: Path,
    pixel_op: PixelOp,
    workers: int,
    per_pixel: bool,
    debug: bool,
) -> Path:
    """
    Process a single image path end-to-end:
      load -> map -> save -> report.
    """
    t_start = time.perf_counter()
    print_banner(src_path.name)

    rgba = load_image_rgba(src_path)
    height, width = rgba.shape[0], rgba.shape[1]
    t_loaded = time.perf_counter()
    log(f"Image loaded in {format_seconds_compact(t_loaded - t_start)}")

    if debug:
        debug_log(
            key_value_pairs_to_string(
                [
                    ("Loaded", f"{width}x{height}"),
                    ("Alpha=255", int(np.count_nonzero(rgba[..., 3] == 255))),
                    ("Alpha=0", int(np.count_nonzero(rgba[..., 3] == 0))),
                ]
            )
        )

    log("Processing...")
    mapped = process_image(
        rgba, pixel_op, workers=min(workers, max(1, height)), per_pixel=per_pixel
    )
    t_mapped = time.perf_counter()
    log(f"Done in {format_seconds_compact(t_mapped - t_loaded)}")

    if debug:
        map_secs = t_mapped - t_loaded
        if map_secs > 0:
            mpx = (height * width) / 1e6
            debug_log(
                f"throughput {mpx / map_secs:.2f} MPx/s  ({mpx:.2f} MPx in {format_seconds_compact(map_secs)})"
            )

    out_path.parent.mkdir(parents=True, exist_ok=True)
    written = save_image_rgba(out_path, mapped)
    t_saved = time.perf_counter()
    log(f"Saved in {format_seconds_compact(t_saved - t_mapped)}")

    log(f"Wrote {written.name} | size={width}x{height}")
    if debug:
        debug_log(
            f"Total {format_total_duration_compact(t_saved - t_start)}  "
            f"(load={format_seconds_compact(t_loaded - t_start)}, "
            f"map={format_seconds_compact(t_mapped - t_loaded)}, "
            f"save={format_seconds_compact(t_saved - t_mapped)})"
        )
    else:
        log(f"Total time {format_total_duration_compact(t_saved - t_start)}")
    return written


# Entry point


def main(argv: Optional[List[str]] = None) -> int:
    """
    CLI entry point.

    Handles a single file or a folder. Returns the process exit status.
    """
    enable_line_buffered_stdout()
    parser = build_arg_parser()
    args = parser.parse_args(argv)

    if args.workers < 1:
        parser.error("--workers must be >= 1")

    src: Path = args.src
    if not src.exists():
        error(f"not found: {src}")
        return 2

    try:
        operation = operation_from_args(args, parser)
        pixel_op = build_pixel_op(operation)
    except EOFError:
        error("input ended before an operation was chosen")
        return 1
    except ColourOpsError as exc:
        error(str(exc))
        return 1

    print_config_line(
        "run",
        [
            ("Operation", describe_operation(operation)),
            ("Workers", args.workers),
            ("Per-pixel", args.per_pixel),
        ],
        debug=False,
    )

    if src.is_dir():
        files = list_input_images(src)
        if not files:
            warn(f"no images found in {src}")
        if args.debug:
            debug_log(key_value_pairs_to_string([("Images", len(files))]))
    else:
        files = [src]

    status = 0
    for path in files:
        try:
            process_single_image(
                path,
                output_path_for(path, args.outdir),
                pixel_op,
                args.workers,
                args.per_pixel,
                args.debug,
            )
        except (ColourOpsError, OSError) as exc:
            error(f"{path.name}: {exc}")
            status = 1
    return status


if __name__ == "__main__":
    sys.exit(main())
