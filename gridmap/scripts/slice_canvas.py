"""
CLI script to slice a canvas into grid-aligned areas.

Usage:
    gridmap-slice --width 1920 --height 1080 \\
        --slices slices.json \\
        --out areas.json

    python -m gridmap.scripts.slice_canvas --width 100 --height 100 \\
        --grids-w 2 --grids-h 2 --slices slices.json
"""
import argparse
import json
import logging
import sys
import traceback

from gridmap.config import settings
from gridmap.io import load_slices, write_json
from gridmap.layout import GridMap, ConfigError, PlacementError, format_slice_result

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_UNEXPECTED = 2
EXIT_NOT_FILLED = 3


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gridmap-slice",
        description="Place slices on a canvas grid, first free spot in row-major order",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "--width",
        type=int,
        required=True,
        help="Canvas width in pixels"
    )
    parser.add_argument(
        "--height",
        type=int,
        required=True,
        help="Canvas height in pixels"
    )
    parser.add_argument(
        "--grids-w",
        type=int,
        default=settings.GRIDS_W,
        help=f"Horizontal grid count (default: {settings.GRIDS_W})"
    )
    parser.add_argument(
        "--grids-h",
        type=int,
        default=settings.GRIDS_H,
        help=f"Vertical grid count (default: {settings.GRIDS_H})"
    )
    parser.add_argument(
        "--slices",
        required=True,
        help="Path to JSON list of [width, height] pairs in grid cells"
    )
    parser.add_argument(
        "--out",
        default=None,
        help="Output path for areas JSON (default: print to stdout)"
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help=f"Exit with code {EXIT_NOT_FILLED} if the grid is not fully occupied"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging"
    )

    return parser


def resolve_log_level(verbose: bool) -> str:
    """--verbose wins over GRIDMAP_LOG_LEVEL."""
    return "DEBUG" if verbose else settings.LOG_LEVEL


def main(argv=None) -> int:
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)

    level = resolve_log_level(args.verbose)
    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s: %(message)s",
    )
    # basicConfig is a no-op once the root logger has handlers
    logging.getLogger("gridmap").setLevel(level)

    try:
        grid = GridMap(args.width, args.height, args.grids_w, args.grids_h)
        logger.info(f"[CLI] {grid!r}")

        slices = load_slices(args.slices)
        logger.info(f"[CLI] Loaded {len(slices)} slices from {args.slices}")

        result = grid.slice(slices)

        areas = [area.to_dict() for area in result.areas]

        if args.out:
            write_json(args.out, areas)
            print(format_slice_result(result), file=sys.stderr)
            print(f"✓ Areas written to {args.out}", file=sys.stderr)
        else:
            print(json.dumps(areas, indent=2))

        if args.strict and result.notice is not None:
            print(f"✗ {result.notice.message}", file=sys.stderr)
            return EXIT_NOT_FILLED

        return EXIT_OK

    except ConfigError as e:
        print(f"✗ Invalid canvas: {e}", file=sys.stderr)
        return EXIT_FAILED

    except PlacementError as e:
        print(f"✗ Slicing failed: {e}", file=sys.stderr)
        return EXIT_FAILED

    except ValueError as e:
        # Bad JSON or slice file layout
        print(f"✗ Invalid input: {e}", file=sys.stderr)
        return EXIT_FAILED

    except FileNotFoundError as e:
        print(f"✗ File not found: {e}", file=sys.stderr)
        return EXIT_FAILED

    except Exception as e:
        print(f"✗ Unexpected error: {e}", file=sys.stderr)
        traceback.print_exc()
        return EXIT_UNEXPECTED


if __name__ == "__main__":
    sys.exit(main())
