"""Test configuration and fixtures."""

from __future__ import annotations

import struct
import tempfile
import zlib
from pathlib import Path
from typing import Callable, Generator

import piexif
import pytest
from PIL import Image

PNG_MAGIC = b"\x89PNG\r\n\x1a\n"

# 1x1 RGB, 8-bit, no interlace
IHDR_PAYLOAD = struct.pack(">IIBBBBB", 1, 1, 8, 2, 0, 0, 0)
IDAT_PAYLOAD = zlib.compress(b"\x00\xff\x00\x00")


def chunk(chunk_type: bytes, data: bytes = b"", length: int | None = None) -> bytes:
    """Build one chunk with a correct CRC; *length* overrides the declared size."""
    declared = len(data) if length is None else length
    crc = zlib.crc32(chunk_type + data) & 0xFFFFFFFF
    return struct.pack(">I", declared) + chunk_type + data + struct.pack(">I", crc)


def build_png(*chunks: bytes, signature: bytes = PNG_MAGIC) -> bytes:
    return signature + b"".join(chunks)


def minimal_tiff(**tags: bytes) -> bytes:
    """Raw TIFF blob (no ``Exif\\0\\0`` prefix) holding IFD0 ASCII tags."""
    zeroth = {getattr(piexif.ImageIFD, name): value for name, value in tags.items()}
    return piexif.dump({"0th": zeroth})[6:]


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def write_png(temp_dir: Path) -> Callable[..., Path]:
    """Return a helper that writes PNG bytes built from chunks to disk."""

    def _write(*chunks: bytes, name: str = "image.png") -> Path:
        path = temp_dir / name
        path.write_bytes(build_png(*chunks))
        return path

    return _write


@pytest.fixture
def exif_blob() -> bytes:
    return minimal_tiff(Make=b"Canon", Model=b"EOS 5D")


@pytest.fixture
def sample_png(write_png: Callable[..., Path], exif_blob: bytes) -> Path:
    """PNG with a header, one text entry, an EXIF block and image data."""
    return write_png(
        chunk(b"IHDR", IHDR_PAYLOAD),
        chunk(b"tEXt", b"Title\x00Hi"),
        chunk(b"eXIf", exif_blob),
        chunk(b"IDAT", IDAT_PAYLOAD),
        chunk(b"IEND"),
        name="sample.png",
    )


@pytest.fixture
def plain_png(temp_dir: Path) -> Path:
    """PNG written by Pillow with no ancillary metadata."""
    img_path = temp_dir / "plain.png"
    img = Image.new("RGB", (100, 50), color="red")
    img.save(img_path, "PNG")
    return img_path


@pytest.fixture
def sample_jpg(temp_dir: Path) -> Path:
    """Create a sample JPG image for testing."""
    img_path = temp_dir / "sample.jpg"
    img = Image.new("RGB", (100, 100), color="blue")
    img.save(img_path, "JPEG")
    return img_path


@pytest.fixture
def sample_png_with_text(temp_dir: Path) -> Path:
    """PNG written by Pillow with several tEXt entries."""
    from PIL.PngImagePlugin import PngInfo

    img_path = temp_dir / "text_sample.png"
    img = Image.new("RGB", (100, 100), color="yellow")

    metadata = PngInfo()
    metadata.add_text("Author", "Test Author")
    metadata.add_text("Title", "Test Image")
    metadata.add_text("Description", "A test image for unit tests")

    img.save(img_path, "PNG", pnginfo=metadata)
    return img_path
