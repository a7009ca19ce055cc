#!/usr/bin/env python3
"""Build an ASCII-art resource file from a raster image."""

import argparse
import logging
import sys
from typing import List

import numpy as np
from PIL import Image, ImageOps

# dark -> light
DEFAULT_RAMP = "@%#*+=-:. "
DEFAULT_COLS = 32

# Terminal cells are roughly twice as tall as they are wide.
CELL_ASPECT = 0.5


def image_to_ascii_lines(
    img: Image.Image,
    cols: int = DEFAULT_COLS,
    ramp: str = DEFAULT_RAMP,
    invert: bool = False,
) -> List[str]:
    """Map image luminance onto ``ramp``, one character per cell."""
    if cols < 1:
        raise ValueError(f"cols must be at least 1: {cols}")
    if not ramp:
        raise ValueError("ramp must not be empty")

    logger = logging.getLogger(__name__)
    gray = img.convert("L")
    if invert:
        gray = ImageOps.invert(gray)

    W, H = gray.size
    rows = max(1, int((H / W) * cols * CELL_ASPECT))
    gray = gray.resize((cols, rows), resample=Image.Resampling.BILINEAR)
    logger.debug("Resized %dx%d image to %dx%d cells", W, H, cols, rows)

    lum = np.asarray(gray, dtype=np.float32) / 255.0
    idx = np.clip((lum * (len(ramp) - 1)).round().astype(int), 0, len(ramp) - 1)

    return ["".join(ramp[i] for i in row).rstrip() for row in idx]


def build_resource(
    image_path: str,
    cols: int = DEFAULT_COLS,
    ramp: str = DEFAULT_RAMP,
    invert: bool = False,
    newline: str = "lf",
) -> bytes:
    """Resource bytes for ``image_path``, newline-terminated lines."""
    if newline not in ("lf", "crlf"):
        raise ValueError(f"unknown newline: {newline}")

    with Image.open(image_path) as img:
        lines = image_to_ascii_lines(img, cols=cols, ramp=ramp, invert=invert)

    eol = "\r\n" if newline == "crlf" else "\n"
    return "".join(line + eol for line in lines).encode("ascii")


# =============================
# CLI
# =============================


def main(argv=None):
    """Entry point for ``diosay-resource``."""
    parser = argparse.ArgumentParser(
        description="Convert an image into an ASCII-art resource for diosay"
    )
    parser.add_argument("input", help="Input image path")
    parser.add_argument(
        "-o",
        "--output",
        default=None,
        help="Output file (default: stdout)",
    )
    parser.add_argument(
        "-c",
        "--cols",
        type=int,
        default=DEFAULT_COLS,
        help="Output columns (characters wide)",
    )
    parser.add_argument(
        "--invert",
        action="store_true",
        help="Invert image (useful for dark backgrounds)",
    )
    parser.add_argument(
        "--crlf",
        action="store_true",
        help="Terminate lines with CRLF instead of LF",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Set the logging level (default: WARNING)",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        stream=sys.stderr,
        level=getattr(logging, args.log_level),
        format="%(levelname)s: %(message)s",
    )

    try:
        data = build_resource(
            args.input,
            cols=args.cols,
            invert=args.invert,
            newline="crlf" if args.crlf else "lf",
        )
    except (OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    logging.getLogger(__name__).info("Built resource: %d bytes", len(data))

    if args.output:
        with open(args.output, "wb") as f:
            f.write(data)
    else:
        sys.stdout.buffer.write(data)
        sys.stdout.flush()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
