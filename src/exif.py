"""EXIF decoding for the raw payload of a PNG ``eXIf`` chunk.

The payload is a bare TIFF structure (some writers keep the
``Exif\\0\\0`` prefix from JPEG APP1 segments). ``piexif`` does the
actual IFD parsing; this module names the tags, groups them by section
and applies the optional section filter.
"""

from __future__ import annotations

import logging
from typing import Any

import piexif

from constants import EXIF_PREFIX, EXIF_SECTIONS, TIFF_HEADERS
from errors import ExifDecodeError

logger = logging.getLogger(__name__)

# piexif IFD name -> section name in the decoded mapping
_SECTION_NAMES = {
    "0th": "IFD0",
    "Exif": "EXIF",
    "GPS": "GPS",
    "Interop": "INTEROP",
    "1st": "THUMBNAIL",
}

_ANY_TAG = "ANY_TAG"


def _parse_section_filter(section: str | None) -> set[str] | None:
    """Turn ``"IFD0, exif"`` into a set of piexif IFD names."""
    if not section:
        return None

    wanted: set[str] = set()
    for name in section.split(","):
        name = name.strip().upper()
        if not name:
            continue
        if name == _ANY_TAG:
            return set(_SECTION_NAMES)
        if name not in EXIF_SECTIONS:
            raise ExifDecodeError(f"Unknown EXIF section: {name!r}")
        wanted.add(EXIF_SECTIONS[name])
    return wanted or None


def _tag_value(ifd: str, tag: int, value: Any) -> tuple[str, Any]:
    info = piexif.TAGS.get(ifd, {}).get(tag)
    if info is None:
        return str(tag), value
    if info["type"] == piexif.TYPES.Ascii and isinstance(value, bytes):
        value = value.rstrip(b"\x00").decode("utf-8", errors="ignore")
    return info["name"], value


def decode_exif(raw: bytes, section: str | None = None) -> dict[str, dict[str, Any]]:
    """
    Decode an EXIF blob into named tags grouped by section.

    Args:
        raw: eXIf chunk payload.
        section: Optional comma separated section filter (``IFD0``,
            ``EXIF``, ``GPS``, ``INTEROP``, ``THUMBNAIL`` or ``ANY_TAG``).

    Returns:
        Mapping of section name to a mapping of tag name to value.

    Raises:
        ExifDecodeError: If the payload is not EXIF/TIFF data, cannot be
            parsed, or none of the requested sections hold any tags.
    """
    wanted = _parse_section_filter(section)

    if not raw.startswith(TIFF_HEADERS + (EXIF_PREFIX,)):
        raise ExifDecodeError("eXIf payload does not start with a TIFF header")

    try:
        exif_dict = piexif.load(raw)
    except Exception as e:
        raise ExifDecodeError(f"Cannot decode eXIf payload: {e}") from e

    decoded: dict[str, dict[str, Any]] = {}
    for ifd, section_name in _SECTION_NAMES.items():
        if wanted is not None and ifd not in wanted:
            continue
        tags = exif_dict.get(ifd) or {}
        if tags:
            decoded[section_name] = dict(_tag_value(ifd, tag, value) for tag, value in tags.items())

    if wanted is not None and not decoded:
        raise ExifDecodeError(f"None of the requested EXIF sections are present: {section}")

    logger.debug("Decoded EXIF sections: %s", ", ".join(decoded) or "none")
    return decoded


def merge_exif(existing: dict[str, Any], decoded: dict[str, Any]) -> dict[str, Any]:
    """Union of both mappings; entries from *decoded* win on conflict."""
    merged = dict(existing)
    merged.update(decoded)
    return merged
