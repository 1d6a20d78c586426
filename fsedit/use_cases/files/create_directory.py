"""
Use case for creating directories.
"""

import logging
from typing import Any, Optional

from fsedit.ports.files.file_repository_port import FileRepositoryPort
from fsedit.ports.files.sandbox_port import SandboxPort


class CreateDirectoryUseCase:
    """Use case for creating a directory or making sure it exists."""

    def __init__(
        self,
        file_repository: FileRepositoryPort,
        sandbox: SandboxPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._file_repository = file_repository
        self._sandbox = sandbox
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, path: str) -> dict[str, Any]:
        """
        Create a directory, including missing parents.

        Args:
            path: Path of the directory

        Returns:
            Dictionary with the absolute "path" and whether it was "created"

        Raises:
            AccessDeniedError: If the path is outside the accessible roots
            AlreadyExistsError: If a file already exists at the path
        """
        abs_path = self._sandbox.resolve(path)
        created = self._file_repository.mkdir(abs_path)
        if not created:
            self._logger.info(f"Directory already exists: {abs_path}")
        return {"path": abs_path, "created": created}
