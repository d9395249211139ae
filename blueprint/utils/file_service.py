"""
File access layer.

Wraps existence checks, writes and path helpers so the generation pipeline
can be exercised against a fake in tests.
"""

import os
from pathlib import Path

from .logger_setup import get_logger

logger = get_logger(__name__)


class FileService:
    """Service for file operations."""

    def exists(self, file_path: str) -> bool:
        """Check whether anything exists at file_path."""
        return os.path.exists(file_path)

    def write_file(self, file_path: str, content: str) -> bool:
        """
        Write content to file_path, creating parent directories as needed.

        Args:
            file_path: Destination path
            content: Text to write

        Returns:
            True if the file was written, False on any I/O error
        """
        path = Path(file_path)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(path, 'w', encoding='utf-8') as f:
                f.write(content)
            return True
        except OSError as e:
            logger.error(f"Error writing file {file_path}: {e}")
            return False

    def get_base_name(self, dir_path: str) -> str:
        """Return the last segment of dir_path (used as default project name)."""
        return Path(os.path.abspath(dir_path)).name

    def resolve_path(self, dir_path: str, file_name: str) -> str:
        """Join a directory and a relative file name."""
        return os.path.join(dir_path, file_name)
