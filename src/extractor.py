"""Read-only metadata extraction from PNG images.

Provides functions to pull the chunk metadata of a PNG file, either
strictly (raising on any problem) or softly (returning None), and a
human-readable summary, without modifying the source file.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, BinaryIO

from chunks import ChunkTag, TextEntry, collect_chunks, decode_header
from constants import EXIF_KEY
from errors import NotAPNGError, PNGMetadataError
from exif import decode_exif, merge_exif
from utils import get_image_type

logger = logging.getLogger(__name__)


def read_png_metadata(stream: BinaryIO, section: str | None = None) -> dict[str, Any]:
    """
    Extract metadata from an open PNG stream.

    Args:
        stream: Seekable binary stream positioned at the PNG signature.
        section: Optional EXIF section filter passed to the EXIF decoder.

    Returns:
        Dictionary keyed by chunk tag (plus ``"exif"`` for decoded EXIF
        tags), with keys in sorted order.
    """
    chunks = collect_chunks(stream)
    metadata: dict[str, Any] = {}

    raw_exif = chunks.pop(ChunkTag.EXIF, None)
    if raw_exif is not None:
        metadata[EXIF_KEY] = merge_exif(
            metadata.get(EXIF_KEY, {}),
            decode_exif(raw_exif, section),
        )

    for tag, value in chunks.items():
        metadata[tag.value] = value

    return dict(sorted(metadata.items()))


def extract_metadata(source_path: Path | str, section: str | None = None) -> dict[str, Any]:
    """
    Extract all chunk metadata from a PNG file.

    Args:
        source_path: Path to the source image file.
        section: Optional EXIF section filter passed to the EXIF decoder.

    Returns:
        Dictionary containing all extracted metadata, keys sorted.

    Raises:
        NotFoundError: If the path is empty or the file does not exist.
        NotAPNGError: If the file is not a PNG image.
        PNGMetadataError: For any malformed chunk stream or EXIF block.
    """
    image_type = get_image_type(source_path)
    if image_type != "PNG":
        raise NotAPNGError(f"File is not a PNG: {source_path} (detected {image_type})")

    logger.debug("Reading PNG metadata from %s", source_path)
    with open(source_path, "rb") as f:
        return read_png_metadata(f, section)


def try_extract_metadata(
    source_path: Path | str | None, section: str | None = None
) -> dict[str, Any] | None:
    """
    Like ``extract_metadata`` but returns None instead of raising.

    Args:
        source_path: Path to the source image file.
        section: Optional EXIF section filter passed to the EXIF decoder.

    Returns:
        The metadata dictionary, or None if extraction failed.
    """
    try:
        return extract_metadata(source_path, section)
    except PNGMetadataError as e:
        logger.warning(f"No metadata for {source_path}: {e}")
        return None


def get_metadata_summary(source_path: Path | str, section: str | None = None) -> str:
    """
    Get a human-readable summary of PNG metadata.

    Args:
        source_path: Path to the source image file.
        section: Optional EXIF section filter passed to the EXIF decoder.

    Returns:
        Formatted string with the metadata summary.
    """
    metadata = extract_metadata(source_path, section)

    if not metadata:
        return "No PNG metadata found."

    lines = ["PNG Metadata:"]
    lines.append("-" * 40)

    for key, value in metadata.items():
        if key == ChunkTag.IHDR.value:
            header = decode_header(value)
            lines.append(f"{key}: " + ", ".join(f"{k}={v}" for k, v in header.items()))
        elif key == ChunkTag.TEXT.value:
            for entry in value:
                lines.append(_format_text_entry(entry))
        elif key == EXIF_KEY and isinstance(value, dict):
            lines.append("EXIF:")
            for section_name, tags in value.items():
                lines.append(f"  [{section_name}]")
                for tag, tag_value in tags.items():
                    lines.append(f"    {tag}: {_shorten(tag_value)}")
        else:
            lines.append(f"{key}: {_shorten(value)}")

    return "\n".join(lines)


def _format_text_entry(entry: TextEntry) -> str:
    return f"{entry.keyword}: {_shorten(entry.text)}"


def _shorten(value: Any) -> str:
    if isinstance(value, bytes):
        return f"<binary data ({len(value)} bytes)>"
    if isinstance(value, str) and len(value) > 100:
        return value[:100] + "..."
    return str(value)
