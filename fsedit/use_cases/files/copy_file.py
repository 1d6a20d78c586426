"""
Use case for copying files.
"""

import logging
from typing import Any, Optional

from fsedit.ports.files.file_repository_port import FileRepositoryPort
from fsedit.ports.files.sandbox_port import SandboxPort


class CopyFileUseCase:
    """Use case for copying a file inside the accessible roots."""

    def __init__(
        self,
        file_repository: FileRepositoryPort,
        sandbox: SandboxPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._file_repository = file_repository
        self._sandbox = sandbox
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, source: str, destination: str, overwrite: bool = False) -> dict[str, Any]:
        """
        Copy a file to a new location.

        Args:
            source: Path of the file to copy
            destination: Path of the copy
            overwrite: Replace the destination if it already exists

        Returns:
            Dictionary with the absolute "source" and the File details of the copy

        Raises:
            AccessDeniedError: If a path is outside the accessible roots
            NotFoundError: If the source file does not exist
            AlreadyExistsError: If the destination exists and overwrite is False
        """
        abs_source = self._sandbox.resolve(source)
        abs_destination = self._sandbox.resolve(destination)
        self._logger.info(f"Copying {abs_source} to {abs_destination} (overwrite={overwrite})")
        copied = self._file_repository.copy(abs_source, abs_destination, overwrite=overwrite)
        return {"source": abs_source, **copied.get_details()}
