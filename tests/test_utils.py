"""Tests for utils module."""

from pathlib import Path

import pytest

from conftest import build_png, chunk
from errors import NotFoundError
from utils import get_image_type, is_png, is_supported_format, sniff_image_type


class TestIsSupportedFormat:
    """Tests for is_supported_format function."""

    def test_png_lowercase(self) -> None:
        assert is_supported_format(Path("image.png")) is True

    def test_png_uppercase(self) -> None:
        assert is_supported_format(Path("image.PNG")) is True

    def test_unsupported_jpg(self) -> None:
        assert is_supported_format(Path("image.jpg")) is False

    def test_unsupported_gif(self) -> None:
        assert is_supported_format(Path("image.gif")) is False

    def test_no_extension(self) -> None:
        assert is_supported_format(Path("image")) is False

    def test_with_str_path(self) -> None:
        assert is_supported_format("/some/path/image.png") is True


class TestGetImageType:
    """Tests for get_image_type function."""

    def test_detects_png(self, plain_png: Path) -> None:
        assert get_image_type(plain_png) == "PNG"

    def test_detects_jpeg(self, sample_jpg: Path) -> None:
        assert get_image_type(sample_jpg) == "JPEG"

    def test_ignores_extension(self, sample_jpg: Path, temp_dir: Path) -> None:
        renamed = temp_dir / "disguised.png"
        renamed.write_bytes(sample_jpg.read_bytes())

        assert get_image_type(renamed) == "JPEG"

    def test_unrecognised_returns_none(self, temp_dir: Path) -> None:
        path = temp_dir / "notes.png"
        path.write_text("hello")

        assert get_image_type(path) is None

    def test_only_magic_bytes_matter(self, temp_dir: Path) -> None:
        path = temp_dir / "broken.png"
        path.write_bytes(build_png(chunk(b"zzzz", b"abc", length=9999)))

        assert get_image_type(path) == "PNG"

    def test_signature_only_is_png(self, temp_dir: Path) -> None:
        path = temp_dir / "bare.png"
        path.write_bytes(build_png())

        assert get_image_type(path) == "PNG"

    def test_empty_file_returns_none(self, temp_dir: Path) -> None:
        path = temp_dir / "empty.png"
        path.write_bytes(b"")

        assert get_image_type(path) is None

    def test_missing_file_raises(self, temp_dir: Path) -> None:
        with pytest.raises(NotFoundError, match="File not found"):
            get_image_type(temp_dir / "missing.png")

    def test_directory_raises(self, temp_dir: Path) -> None:
        with pytest.raises(NotFoundError):
            get_image_type(temp_dir)

    def test_empty_path_raises(self) -> None:
        with pytest.raises(NotFoundError, match="Path is required"):
            get_image_type(None)

    def test_not_found_is_a_file_not_found_error(self, temp_dir: Path) -> None:
        with pytest.raises(FileNotFoundError):
            get_image_type(temp_dir / "missing.png")


class TestIsPng:
    """Tests for is_png function."""

    def test_png(self, sample_png: Path) -> None:
        assert is_png(sample_png) is True

    def test_jpeg(self, sample_jpg: Path) -> None:
        assert is_png(sample_jpg) is False


class TestSniffImageType:
    """Tests for sniff_image_type function."""

    def test_png_magic(self) -> None:
        assert sniff_image_type(b"\x89PNG\r\n\x1a\n" + b"\x00" * 8) == "PNG"

    def test_jpeg_magic(self) -> None:
        assert sniff_image_type(b"\xff\xd8\xff\xe0" + b"\x00" * 12) == "JPEG"

    def test_gif_magic(self) -> None:
        assert sniff_image_type(b"GIF89a" + b"\x00" * 10) == "GIF"

    def test_one_byte_off_is_not_png(self) -> None:
        assert sniff_image_type(b"\x89PNG\r\n\x1a\x0b" + b"\x00" * 8) != "PNG"

    def test_empty_prefix(self) -> None:
        assert sniff_image_type(b"") is None
