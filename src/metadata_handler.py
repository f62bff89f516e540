"""Public façade for the metadata pipeline; re-exports every symbol.

Consumers should ``import metadata_handler`` rather than reaching into
the internal modules directly. This file gathers all public names so
that the API surface stays stable even as the implementation is
reorganised.

Internal modules:

- ``constants``  - configuration values
- ``errors``     - exception types
- ``utils``      - format and type detection helpers
- ``cursor``     - bounds-checked stream cursor
- ``chunks``     - signature check, chunk walker and payload extractors
- ``exif``       - EXIF decoding of eXIf payloads
- ``extractor``  - read metadata from PNG files
"""

from chunks import (
    ChunkHeader,
    ChunkRecord,
    ChunkTag,
    TextEntry,
    collect_chunks,
    decode_header,
    walk_chunks,
)
from constants import (
    EXIF_KEY,
    EXIF_SECTIONS,
    IHDR_FIELD_SIZES,
    PNG_SIGNATURE,
    SUPPORTED_FORMATS,
)
from errors import (
    ExifDecodeError,
    MalformedSignatureError,
    NotAPNGError,
    NotFoundError,
    PNGMetadataError,
    TruncatedHeaderError,
    TruncatedPayloadError,
)
from exif import decode_exif, merge_exif
from extractor import (
    extract_metadata,
    get_metadata_summary,
    read_png_metadata,
    try_extract_metadata,
)
from utils import get_image_type, is_png, is_supported_format, sniff_image_type

__all__ = [
    # Constants
    "SUPPORTED_FORMATS",
    "PNG_SIGNATURE",
    "IHDR_FIELD_SIZES",
    "EXIF_KEY",
    "EXIF_SECTIONS",
    # Errors
    "PNGMetadataError",
    "NotFoundError",
    "NotAPNGError",
    "MalformedSignatureError",
    "TruncatedHeaderError",
    "TruncatedPayloadError",
    "ExifDecodeError",
    # Utils
    "is_supported_format",
    "get_image_type",
    "sniff_image_type",
    "is_png",
    # Chunks
    "ChunkTag",
    "ChunkHeader",
    "ChunkRecord",
    "TextEntry",
    "walk_chunks",
    "collect_chunks",
    "decode_header",
    # EXIF
    "decode_exif",
    "merge_exif",
    # Extractor
    "read_png_metadata",
    "extract_metadata",
    "try_extract_metadata",
    "get_metadata_summary",
]
