"""
Use case for reading a range of lines from a file.
"""

import logging
from typing import Optional

from fsedit.entities.edit import ReadResult
from fsedit.exceptions import EditValidationError
from fsedit.ports.files.file_repository_port import FileRepositoryPort
from fsedit.ports.files.sandbox_port import SandboxPort
from fsedit.use_cases.editing.content_hasher import compute_content_hash
from fsedit.use_cases.files.text_document import load_document


class ReadFileUseCase:
    """Use case for reading numbered lines with encoding detection."""

    def __init__(
        self,
        file_repository: FileRepositoryPort,
        sandbox: SandboxPort,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            file_repository: Repository for raw file I/O
            sandbox: Access control deciding which paths may be read
            logger: Logger instance to use for logging
        """
        self._file_repository = file_repository
        self._sandbox = sandbox
        self._logger = logger or logging.getLogger(__name__)

    def execute(
        self,
        path: str,
        start_line: Optional[int] = None,
        end_line: Optional[int] = None,
    ) -> ReadResult:
        """
        Read lines start_line..end_line (1-based, inclusive) of a file.

        Missing bounds default to the first and last line; an end beyond the
        file is clamped. The hash always covers the whole file so it can be
        compared with the hash returned by an edit.

        Args:
            path: Path of the file to read
            start_line: First line to return
            end_line: Last line to return

        Returns:
            ReadResult with the lines, the detected encoding and the content hash

        Raises:
            AccessDeniedError: If the path is outside the accessible roots
            NotFoundError: If the file does not exist
            EditValidationError: If the range is invalid
            EncodingError: If the content cannot be decoded
        """
        errors: list[str] = []
        if start_line is not None and start_line < 1:
            errors.append(f"StartLine must be 1 or greater (got {start_line})")
        if end_line is not None and end_line < (start_line or 1):
            errors.append(f"EndLine ({end_line}) must not be before StartLine")
        if errors:
            raise EditValidationError("Invalid line range", errors)

        abs_path = self._sandbox.resolve(path)
        self._logger.info(f"Reading file: {abs_path}")
        document = load_document(self._file_repository, abs_path)

        total = document.total_lines
        first = start_line or 1
        last = min(end_line if end_line is not None else total, total)
        lines = document.lines[first - 1:last] if first <= last else []

        return ReadResult(
            path=abs_path,
            lines=lines,
            start_line=first,
            end_line=max(last, first - 1),
            total_lines=total,
            encoding=document.encoding,
            content_hash=compute_content_hash(document.raw),
        )
