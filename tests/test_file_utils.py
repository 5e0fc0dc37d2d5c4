"""Tests for file utilities."""

from pathlib import Path

import pytest

from gifkit.exceptions import GifReadError
from gifkit.io.file_utils import FileUtils


class TestFileUtils:
    """Tests for FileUtils."""

    def test_get_file_extension(self) -> None:
        """Test getting file extension."""
        assert FileUtils.get_file_extension(Path("test.gif")) == "gif"
        assert FileUtils.get_file_extension(Path("test.GIF")) == "gif"
        assert FileUtils.get_file_extension(Path("test.file.png")) == "png"

    def test_is_gif_file(self) -> None:
        """Test GIF file detection."""
        assert FileUtils.is_gif_file(Path("anim.gif")) is True
        assert FileUtils.is_gif_file(Path("ANIM.Gif")) is True
        assert FileUtils.is_gif_file(Path("anim.png")) is False

    def test_read_bytes(self, tmp_path: Path) -> None:
        """Test reading a whole file."""
        test_file = tmp_path / "test.gif"
        test_file.write_bytes(b"GIF89a\x00\x01")

        assert FileUtils.read_bytes(test_file) == b"GIF89a\x00\x01"
        assert FileUtils.read_bytes(str(test_file)) == b"GIF89a\x00\x01"

    def test_read_bytes_missing(self, tmp_path: Path) -> None:
        """Test that a missing file raises GifReadError."""
        with pytest.raises(GifReadError) as exc_info:
            FileUtils.read_bytes(tmp_path / "nonexistent.gif")

        assert isinstance(exc_info.value.__cause__, OSError)

    def test_read_bytes_directory(self, tmp_path: Path) -> None:
        """Test that a directory cannot be read."""
        with pytest.raises(GifReadError):
            FileUtils.read_bytes(tmp_path)
