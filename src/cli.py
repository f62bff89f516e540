"""Command-line interface for png-metadata-reader.

Provides the ``png-metadata`` entry point that prints the metadata of
one or more PNG files as a readable summary or as JSON.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Sequence

from metadata_handler import (
    SUPPORTED_FORMATS,
    PNGMetadataError,
    extract_metadata,
    get_metadata_summary,
    is_supported_format,
)


# ── Output formatting ───────────────────────────────────────────────

def _json_default(value: Any) -> Any:
    """Serialise raw chunk bytes as hex strings."""
    if isinstance(value, bytes):
        return value.hex()
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def _format_json(metadata: dict[str, Any]) -> str:
    return json.dumps(metadata, indent=2, default=_json_default)


# ── Argument parser construction ────────────────────────────────────

def _build_parser() -> argparse.ArgumentParser:
    """Construct and return the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="png-metadata",
        description="Print chunk metadata (header, text, colour and EXIF) of PNG files.",
        epilog="Example: png-metadata photo.png --section IFD0,EXIF --json",
    )

    parser.add_argument(
        "images", type=Path, nargs="+",
        help=f"PNG image files (formats: {', '.join(sorted(SUPPORTED_FORMATS))})",
    )
    parser.add_argument(
        "-s", "--section", type=str, default=None,
        help="Comma separated EXIF sections to decode (IFD0, EXIF, GPS, INTEROP, THUMBNAIL, ANY_TAG)",
    )
    parser.add_argument(
        "--json", action="store_true",
        help="Print metadata as JSON instead of a summary",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Log each chunk as it is read",
    )

    return parser


# ── Command handlers ────────────────────────────────────────────────

def _handle_image(image: Path, args: argparse.Namespace) -> int:
    """Print metadata for a single image."""
    if not is_supported_format(image):
        print(
            f"Warning: '{image}' may not be a supported format "
            f"({', '.join(sorted(SUPPORTED_FORMATS))}).",
            file=sys.stderr,
        )

    try:
        if args.json:
            print(_format_json(extract_metadata(image, args.section)))
        else:
            print(get_metadata_summary(image, args.section))
        return 0

    except PNGMetadataError as e:
        print(f"Error: {image}: {e}", file=sys.stderr)
        return 1


# ── Entry point ─────────────────────────────────────────────────────

def main(argv: Sequence[str] | None = None) -> int:
    """Parse arguments and print metadata for every image given."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    status = 0
    for image in args.images:
        status |= _handle_image(image, args)
    return status


if __name__ == "__main__":
    sys.exit(main())
