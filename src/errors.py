"""Exception types raised while reading PNG metadata.

Every error is fatal to the extraction that raised it; there is no
partial-result mode. Callers that prefer an optional result use
``extractor.try_extract_metadata`` instead of catching these.
"""

from __future__ import annotations


class PNGMetadataError(Exception):
    """Base class for all metadata extraction failures."""


class NotFoundError(PNGMetadataError, FileNotFoundError):
    """The input path is empty, missing or unreadable."""


class NotAPNGError(PNGMetadataError, ValueError):
    """The type sniffer did not classify the input as PNG."""


class MalformedSignatureError(PNGMetadataError, ValueError):
    """The first 8 bytes are not the PNG magic sequence."""


class TruncatedHeaderError(PNGMetadataError, ValueError):
    """The stream ended in the middle of a chunk header."""


class TruncatedPayloadError(PNGMetadataError, ValueError):
    """A chunk declares more payload bytes than the stream holds."""


class ExifDecodeError(PNGMetadataError, ValueError):
    """The eXIf payload is not a decodable EXIF/TIFF structure."""


__all__ = [
    "PNGMetadataError",
    "NotFoundError",
    "NotAPNGError",
    "MalformedSignatureError",
    "TruncatedHeaderError",
    "TruncatedPayloadError",
    "ExifDecodeError",
]
