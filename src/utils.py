"""Low-level utility helpers used across the metadata pipeline.

Kept deliberately small, only format detection lives here so that
higher-level modules can import without circular dependencies.
"""

from __future__ import annotations

import struct
from pathlib import Path

from PIL import Image

from constants import SUPPORTED_FORMATS
from errors import NotFoundError

# Pillow's own sniffers look at no more than this many leading bytes
_SNIFF_SIZE = 16


def is_supported_format(file_path: Path) -> bool:
    """
    Check if the file extension is supported.

    Args:
        file_path: Path to the image file.

    Returns:
        True if the format is supported, False otherwise.
    """
    return Path(file_path).suffix.lower() in SUPPORTED_FORMATS


def sniff_image_type(prefix: bytes) -> str | None:
    """
    Identify an image format from its leading bytes alone.

    Runs the ``accept`` check of every Pillow plugin against *prefix*
    without opening or parsing the image.

    Returns:
        Pillow format name (``"PNG"``, ``"JPEG"``...), or None.
    """
    Image.init()
    for format_id in Image.ID:
        _, accept = Image.OPEN[format_id]
        if accept is None:
            continue
        # Short prefixes trip some plugin checks, as in Image.open
        try:
            result = accept(prefix)
        except (IndexError, TypeError, struct.error):
            continue
        # Some plugins return a warning string instead of rejecting
        if result and not isinstance(result, str):
            return format_id
    return None


def get_image_type(file_path: Path | str | None) -> str | None:
    """
    Sniff the image type from the file's magic bytes.

    Only the first bytes are read; the chunk structure is left to the
    chunk walker.

    Args:
        file_path: Path to the image file.

    Returns:
        Pillow format name (``"PNG"``, ``"JPEG"``...), or None if the
        file is not a recognised image.

    Raises:
        NotFoundError: If the path is empty, the file does not exist or
            cannot be read.
    """
    if not file_path:
        raise NotFoundError("Path is required")
    file_path = Path(file_path)
    if not file_path.is_file():
        raise NotFoundError(f"File not found: {file_path}")

    try:
        with open(file_path, "rb") as f:
            prefix = f.read(_SNIFF_SIZE)
    except OSError as e:
        raise NotFoundError(f"Cannot read {file_path}: {e}") from e

    return sniff_image_type(prefix)


def is_png(file_path: Path | str | None) -> bool:
    """Check whether the file starts like a PNG image."""
    return get_image_type(file_path) == "PNG"
