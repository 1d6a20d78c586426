"""
File domain entity.
"""

import os
from typing import Any

from fsedit.exceptions import FileRepositoryError, NotFoundError


class File:
    """
    Regular text file entity that encapsulates on-disk metadata.
    """

    def __init__(self, path: str):
        """
        Initialize the File entity.

        Args:
            path: Absolute path to the file

        Raises:
            FileRepositoryError: If path is invalid or not a regular file
            NotFoundError: If the file doesn't exist
        """
        if not path or not isinstance(path, str):
            raise FileRepositoryError("Path must be a non-empty string")

        if not os.path.exists(path):
            raise NotFoundError(f"File does not exist: {path}")

        if not os.path.isfile(path):
            raise FileRepositoryError(f"Path is not a file: {path}")

        self.path = os.path.abspath(path)
        self.name = self._find_file_name()
        self.size = self._find_file_size()
        self.file_type = self._find_file_type()
        self.modified = os.path.getmtime(self.path)

    def _find_file_name(self) -> str:
        """Extract the filename from the path."""
        return os.path.basename(self.path)

    def _find_file_size(self) -> int:
        """Get the file size in bytes."""
        try:
            return os.path.getsize(self.path)
        except OSError as e:
            raise FileRepositoryError(f"Cannot get file size: {e}")

    def _find_file_type(self) -> str:
        """Extract the file extension."""
        _, ext = os.path.splitext(self.path)
        return ext.lstrip(".") if ext else "no_extension"

    def get_details(self) -> dict[str, Any]:
        """
        Get comprehensive file details.

        Returns:
            Dictionary with file information
        """
        return {
            "path": self.path,
            "name": self.name,
            "size": self.size,
            "type": self.file_type,
            "modified": self.modified,
            "directory": os.path.dirname(self.path),
        }
