"""File I/O utilities."""

import logging
from pathlib import Path
from typing import Union

from gifkit.exceptions import GifReadError

logger = logging.getLogger(__name__)

GIF_EXTENSIONS = {"gif"}


class FileUtils:
    """Utility class for file operations."""

    @staticmethod
    def get_file_extension(path: Path) -> str:
        """Get the file extension (lowercase, without dot).

        Args:
            path: Path to the file

        Returns:
            File extension
        """
        return path.suffix.lower().lstrip(".")

    @staticmethod
    def is_gif_file(path: Path) -> bool:
        """Check if a path has a GIF extension."""
        return FileUtils.get_file_extension(path) in GIF_EXTENSIONS

    @staticmethod
    def read_bytes(path: Union[str, Path]) -> bytes:
        """Read the complete content of a file.

        Args:
            path: Path to the file

        Returns:
            File content

        Raises:
            GifReadError: If the file cannot be read.
        """
        resolved = Path(path).expanduser()
        try:
            data = resolved.read_bytes()
        except OSError as e:
            raise GifReadError(f"Failed to read {resolved}: {e}") from e
        logger.debug("Read %d byte(s) from %s", len(data), resolved)
        return data
