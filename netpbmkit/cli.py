from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional, Tuple

from .job import ConversionJob, ConversionSettings
from .rendering.converters import load_image


def _parse_size(value: str) -> Tuple[int, int]:
    parts = value.lower().split("x")
    if len(parts) != 2 or not all(part.isdigit() for part in parts):
        raise argparse.ArgumentTypeError(f"Expected WIDTHxHEIGHT, got {value!r}")
    width, height = int(parts[0]), int(parts[1])
    if width <= 0 or height <= 0:
        raise argparse.ArgumentTypeError("Width and height must be greater than zero")
    return width, height


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="netpbmkit",
        description="Inspect and convert Netpbm (PBM/PGM/PPM) images.",
    )
    parser.add_argument("source", help="Image to read (.pbm/.pgm/.ppm/.pnm or any Pillow-readable raster)")
    parser.add_argument("destination", nargs="?", help="Output path; the extension selects the writer")
    parser.add_argument("--info", action="store_true", help="Print format, size and max value and exit")
    parser.add_argument("--invert", action="store_true", help="Invert pixel values")
    parser.add_argument("--flip", action="store_true", help="Mirror left to right")
    parser.add_argument("--flop", action="store_true", help="Mirror top to bottom")
    parser.add_argument("--rotate", type=int, default=0, metavar="N", help="Rotate N quarter turns clockwise")
    parser.add_argument("--resize", type=_parse_size, metavar="WxH", help="Nearest-neighbor resample")
    parser.add_argument("--grayscale", action="store_true", help="Convert color images to grayscale")
    parser.add_argument("--threshold", type=int, metavar="T", help="Convert to a bitmap, pixels >= T become 1")
    parser.add_argument("--max-value", type=int, metavar="N", help="Rescale gray/color samples to a new max value")
    encoding_group = parser.add_mutually_exclusive_group()
    encoding_group.add_argument("--ascii", action="store_true", help="Write the plain (P1/P2/P3) encoding")
    encoding_group.add_argument("--binary", action="store_true", help="Write the raw (P4/P5/P6) encoding")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log each conversion step")
    return parser.parse_args(argv)


def _resolve_binary(args: argparse.Namespace) -> Optional[bool]:
    if args.ascii:
        return False
    if args.binary:
        return True
    return None


def build_settings(args: argparse.Namespace) -> ConversionSettings:
    return ConversionSettings(
        invert=args.invert,
        flip_horizontal=args.flip,
        flip_vertical=args.flop,
        rotate=args.rotate,
        resize=args.resize,
        grayscale=args.grayscale,
        threshold=args.threshold,
        binary=_resolve_binary(args),
        max_value=args.max_value,
    )


def show_info(path: str) -> int:
    image = load_image(path)
    width, height = image.size
    print(f"{image.magic_number} {image.family.name} {width}x{height}", end="")
    if image.max_value is not None:
        print(f" max={image.max_value}", end="")
    print()
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        if args.info:
            return show_info(args.source)
        if not args.destination:
            print("Missing destination path. Use --help for usage.", file=sys.stderr)
            return 2
        ConversionJob(build_settings(args)).run(args.source, args.destination)
    except Exception as exc:
        print(str(exc), file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
