"""
Local file system adapter implementation for raw file I/O.
"""

import logging
import os
import shutil

from typing_extensions import override

from fsedit.entities.File import File
from fsedit.exceptions import AlreadyExistsError, FileRepositoryError, NotFoundError
from fsedit.ports.files.file_repository_port import FileRepositoryPort


class LocalFileSystemAdapter(FileRepositoryPort):
    """Local file system implementation of the file repository port."""

    def __init__(self, logger: logging.Logger | None = None):
        """
        Initialize the adapter with an optional logger.

        Args:
            logger: Logger instance to use for logging. If None, a default logger will be created.
        """
        self._logger: logging.Logger = logger or logging.getLogger(__name__)

    def _validate_file(self, path: str) -> None:
        """
        Validate that a path exists and is a regular file.

        Args:
            path: Path to validate

        Raises:
            NotFoundError: If nothing exists at the path
            FileRepositoryError: If the path is not a regular file
        """
        if not os.path.exists(path):
            raise NotFoundError(f"File does not exist: {path}")

        if not os.path.isfile(path):
            raise FileRepositoryError(f"Path is not a file: {path}")

    @override
    def exists(self, path: str) -> bool:
        return os.path.isfile(path)

    @override
    def read_bytes(self, path: str) -> bytes:
        """
        Read the full content of a file.

        Args:
            path: Absolute path to the file

        Returns:
            The raw bytes of the file

        Raises:
            NotFoundError: If the file does not exist
            FileRepositoryError: If reading fails
        """
        try:
            self._validate_file(path)
            with open(path, "rb") as f:
                data = f.read()
            self._logger.debug(f"Read {len(data)} bytes from {path}")
            return data

        except (NotFoundError, FileRepositoryError):
            raise
        except Exception as e:
            raise FileRepositoryError(f"Failed to read {path}: {str(e)}")

    @override
    def write_bytes(self, path: str, data: bytes) -> File:
        """
        Create or overwrite a file with the given bytes.

        Parent directories are created when missing.

        Args:
            path: Absolute path to the file
            data: Bytes to write

        Returns:
            A File entity representing the written file

        Raises:
            FileRepositoryError: If writing fails
        """
        try:
            if os.path.isdir(path):
                raise FileRepositoryError(f"Path is a directory: {path}")

            self._ensure_parent(path)

            with open(path, "wb") as f:
                f.write(data)
            self._logger.info(f"Wrote {len(data)} bytes to {path}")
            return File(path)

        except FileRepositoryError:
            raise
        except Exception as e:
            raise FileRepositoryError(f"Failed to write {path}: {str(e)}")

    @override
    def stat(self, path: str) -> File:
        self._validate_file(path)
        return File(path)

    def _ensure_parent(self, path: str) -> None:
        directory = os.path.dirname(path)
        if directory and not os.path.isdir(directory):
            os.makedirs(directory, exist_ok=True)

    @override
    def mkdir(self, path: str) -> bool:
        if os.path.isdir(path):
            return False
        if os.path.lexists(path):
            raise AlreadyExistsError(f"Path exists and is not a directory: {path}")

        try:
            os.makedirs(path)
        except OSError as e:
            raise FileRepositoryError(f"Failed to create directory {path}: {str(e)}")
        self._logger.info(f"Created directory {path}")
        return True

    @override
    def move(self, source: str, destination: str) -> str:
        """
        Move or rename a file or a directory.

        Missing parents of the destination are created.

        Args:
            source: Absolute path of the existing file or directory
            destination: Absolute path it is moved to; must not exist yet

        Returns:
            "file" or "directory", the kind of entry that was moved

        Raises:
            NotFoundError: If the source does not exist
            AlreadyExistsError: If the destination exists
            FileRepositoryError: If moving fails
        """
        if not os.path.lexists(source):
            raise NotFoundError(f"Source path does not exist: {source}")
        if os.path.lexists(destination):
            raise AlreadyExistsError(f"Destination path already exists: {destination}")

        kind = "directory" if os.path.isdir(source) else "file"
        try:
            self._ensure_parent(destination)
            shutil.move(source, destination)
        except OSError as e:
            raise FileRepositoryError(f"Failed to move {source} to {destination}: {str(e)}")
        self._logger.info(f"Moved {kind} {source} to {destination}")
        return kind

    @override
    def copy(self, source: str, destination: str, overwrite: bool = False) -> File:
        self._validate_file(source)
        if os.path.isdir(destination):
            raise AlreadyExistsError(f"Destination is a directory: {destination}")
        if os.path.lexists(destination) and not overwrite:
            raise AlreadyExistsError(f"Destination file already exists: {destination}")

        try:
            self._ensure_parent(destination)
            shutil.copy2(source, destination)
        except OSError as e:
            raise FileRepositoryError(f"Failed to copy {source} to {destination}: {str(e)}")
        self._logger.info(f"Copied {source} to {destination}")
        return File(destination)
