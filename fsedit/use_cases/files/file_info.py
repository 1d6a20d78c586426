"""
Use case for describing a file.
"""

import logging
from typing import Any, Optional

from fsedit.ports.files.file_repository_port import FileRepositoryPort
from fsedit.ports.files.sandbox_port import SandboxPort
from fsedit.use_cases.editing.content_hasher import compute_content_hash
from fsedit.use_cases.files.text_document import load_document


class FileInfoUseCase:
    """Use case for file metadata plus encoding, line count and content hash."""

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
        Describe a file.

        Args:
            path: Path of the file

        Returns:
            Dictionary with the File details, "encoding", "totalLines" and "contentHash"

        Raises:
            AccessDeniedError: If the path is outside the accessible roots
            NotFoundError: If the file does not exist
            EncodingError: If the content cannot be decoded
        """
        abs_path = self._sandbox.resolve(path)
        self._logger.info(f"Getting file info: {abs_path}")
        details = self._file_repository.stat(abs_path).get_details()
        document = load_document(self._file_repository, abs_path)
        details.update(
            {
                "encoding": document.encoding.value,
                "totalLines": document.total_lines,
                "contentHash": compute_content_hash(document.raw),
            }
        )
        return details
