"""
File repository port interface defining the contract for raw file I/O.
"""

from abc import ABC, abstractmethod

from fsedit.entities.File import File


class FileRepositoryPort(ABC):
    """Port interface for byte-level file repository operations."""

    @abstractmethod
    def exists(self, path: str) -> bool:
        """
        Check whether a regular file exists at the given path.

        Args:
            path: Absolute path to the file

        Returns:
            True if a regular file exists, False otherwise
        """
        pass

    @abstractmethod
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
        pass

    @abstractmethod
    def write_bytes(self, path: str, data: bytes) -> File:
        """
        Create or overwrite a file with the given bytes.

        The file is truncated before writing; a failure part-way through
        can leave it incomplete.

        Args:
            path: Absolute path to the file
            data: Bytes to write

        Returns:
            A File entity representing the written file

        Raises:
            FileRepositoryError: If writing fails
        """
        pass

    @abstractmethod
    def stat(self, path: str) -> File:
        """
        Get metadata for an existing file.

        Args:
            path: Absolute path to the file

        Returns:
            A File entity

        Raises:
            NotFoundError: If the file does not exist
        """
        pass

    @abstractmethod
    def mkdir(self, path: str) -> bool:
        """
        Create a directory, including missing parents.

        Args:
            path: Absolute path of the directory

        Returns:
            True if the directory was created, False if it already existed

        Raises:
            AlreadyExistsError: If a non-directory exists at the path
            FileRepositoryError: If creation fails
        """
        pass

    @abstractmethod
    def move(self, source: str, destination: str) -> str:
        """
        Move or rename a file or a directory.

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
        pass

    @abstractmethod
    def copy(self, source: str, destination: str, overwrite: bool = False) -> File:
        """
        Copy a regular file, keeping its metadata.

        Args:
            source: Absolute path of the file to copy
            destination: Absolute path of the copy
            overwrite: Replace an existing destination file

        Returns:
            A File entity representing the copy

        Raises:
            NotFoundError: If the source file does not exist
            AlreadyExistsError: If the destination exists and overwrite is False,
                or is a directory
            FileRepositoryError: If copying fails
        """
        pass
