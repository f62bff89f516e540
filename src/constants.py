"""Shared constants for PNG chunk walking and EXIF decoding.

All modules reference these constants rather than hard-coding values,
so supporting a new chunk layout or EXIF section requires updating
only this file.
"""

# Supported image formats
SUPPORTED_FORMATS = {".png"}

# PNG signature
PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"

# Chunk framing: 4-byte length + 4-byte type, then payload, then 4-byte CRC
CHUNK_HEADER_SIZE = 8
CHUNK_CRC_SIZE = 4

# IHDR is read as six raw groups: width, height and four single bytes
IHDR_FIELD_SIZES = (4, 4, 1, 1, 1, 1)
IHDR_FIELD_NAMES = (
    "width",
    "height",
    "bit_depth",
    "color_type",
    "compression",
    "filter",
)

# Key holding decoded EXIF tags in the metadata mapping
EXIF_KEY = "exif"

# EXIF section filter names mapped to piexif IFD names
EXIF_SECTIONS = {
    "IFD0": "0th",
    "0TH": "0th",
    "EXIF": "Exif",
    "GPS": "GPS",
    "INTEROP": "Interop",
    "THUMBNAIL": "1st",
    "1ST": "1st",
}

# Valid starts of an eXIf payload (raw TIFF, or with the JPEG APP1 prefix)
TIFF_HEADERS = (b"II*\x00", b"MM\x00*")
EXIF_PREFIX = b"Exif\x00\x00"
