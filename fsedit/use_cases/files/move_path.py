"""
Use case for moving or renaming files and directories.
"""

import logging
from typing import Any, Optional

from fsedit.exceptions import AccessDeniedError, EditValidationError
from fsedit.ports.files.file_repository_port import FileRepositoryPort
from fsedit.ports.files.sandbox_port import SandboxPort
from fsedit.utils.workspace import is_within


class MovePathUseCase:
    """Use case for moving a file or a directory inside the accessible roots."""

    def __init__(
        self,
        file_repository: FileRepositoryPort,
        sandbox: SandboxPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._file_repository = file_repository
        self._sandbox = sandbox
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, source: str, destination: str) -> dict[str, Any]:
        """
        Move or rename a file or a directory.

        Both paths must be inside the accessible roots, and the destination
        must not exist yet.

        Args:
            source: Path of the file or directory to move
            destination: New path

        Returns:
            Dictionary with the absolute "source", "destination" and the "kind" moved

        Raises:
            AccessDeniedError: If a path is outside the accessible roots or
                the source is an accessible root itself
            EditValidationError: If a directory would be moved into itself
            NotFoundError: If the source does not exist
            AlreadyExistsError: If the destination exists
        """
        abs_source = self._sandbox.resolve(source)
        abs_destination = self._sandbox.resolve(destination)

        if abs_source in self._sandbox.roots():
            raise AccessDeniedError(f"Access denied: cannot move accessible root '{source}'")
        if is_within(abs_source, abs_destination):
            raise EditValidationError(
                f"Cannot move '{source}' into itself ('{destination}')"
            )

        kind = self._file_repository.move(abs_source, abs_destination)
        return {"source": abs_source, "destination": abs_destination, "kind": kind}
