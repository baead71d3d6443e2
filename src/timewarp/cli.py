"""Command line entry point: align two sequences stored in CSV files."""

from __future__ import annotations

import argparse
import logging
from typing import List, Optional

from .config import DTW_DEFAULTS, load_config
from .dtw import dtw_ex
from .fastdtw import fastdtw_ex
from .io import load_sequence
from .windows import FullWindow


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="timewarp",
        description="Dynamic time warping distance between two sequences",
    )
    parser.add_argument("x", help="CSV file with the first sequence")
    parser.add_argument("y", help="CSV file with the second sequence")
    parser.add_argument("--column", help="CSV column to read (default: 'value' or first numeric)")
    parser.add_argument("--config", help="YAML config file with a 'dtw' section")
    parser.add_argument("--fast", action="store_true", default=None, help="use FastDTW instead of exact DTW")
    parser.add_argument("--resolution-factor", type=int, help="FastDTW downsampling factor")
    parser.add_argument("--search-radius", type=int, help="FastDTW search radius")
    parser.add_argument("--mode", choices=["euclidean", "manhattan"], help="local distance")
    parser.add_argument("--max-matrix-bytes", type=int, help="dense cost table budget in bytes")
    parser.add_argument("--show-path", action="store_true", help="print the full warp path")
    parser.add_argument("--plot", metavar="OUT", help="save an alignment plot to this file")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    settings = load_config(args.config)["dtw"] if args.config else dict(DTW_DEFAULTS)
    # command line flags win over the config file
    overrides = {
        "fast": args.fast,
        "resolution_factor": args.resolution_factor,
        "search_radius": args.search_radius,
        "distance_mode": args.mode,
        "max_matrix_bytes": args.max_matrix_bytes,
    }
    settings.update({k: v for k, v in overrides.items() if v is not None})

    x = load_sequence(args.x, args.column)
    y = load_sequence(args.y, args.column)

    if settings["fast"]:
        distance, path = fastdtw_ex(
            x,
            y,
            settings["resolution_factor"],
            settings["search_radius"],
            settings["distance_mode"],
            max_matrix_bytes=settings["max_matrix_bytes"],
        )
    else:
        distance, path = dtw_ex(
            x,
            y,
            FullWindow(len(y), len(x)),
            settings["distance_mode"],
            max_matrix_bytes=settings["max_matrix_bytes"],
        )

    print("=== Alignment ===")
    print(f"Method: {'fastdtw' if settings['fast'] else 'dtw'} ({settings['distance_mode']})")
    print(f"Lengths: x={len(x)} y={len(y)}")
    print(f"Distance: {distance:.6f}")
    print(f"Path length: {len(path)}")
    if args.show_path:
        print("Path: " + " ".join(f"{i},{j}" for i, j in path))

    if args.plot:
        import matplotlib

        matplotlib.use("Agg")
        from .viz import plot_alignment

        plot_alignment(x, y, path, out_path=args.plot)
    return 0
