"""I/O modules for loading GIF files."""

from gifkit.io.file_utils import FileUtils

__all__ = ["FileUtils"]
