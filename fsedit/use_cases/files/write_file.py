"""
Use case for creating or overwriting a file with explicit encoding options.
"""

import logging
from typing import Any, Optional

from fsedit.entities.edit import EditBatchResult, WriteOptions
from fsedit.entities.encoding import FileEncoding
from fsedit.exceptions import EncodingError, SchemaError
from fsedit.ports.files.file_repository_port import FileRepositoryPort
from fsedit.ports.files.sandbox_port import SandboxPort
from fsedit.use_cases.editing.batch_parser import parse_write_options
from fsedit.use_cases.editing.content_hasher import compute_content_hash
from fsedit.use_cases.editing.diff_generator import generate_diff, truncate_diff
from fsedit.use_cases.editing.encoding_detector import decode_bytes, detect_encoding, encode_text
from fsedit.use_cases.editing.encoding_policy import resolve_write_encoding
from fsedit.use_cases.editing.text_lines import split_text
from fsedit.use_cases.files.edit_file import result_from_error


class WriteFileUseCase:
    """Use case for writing whole-file content."""

    def __init__(
        self,
        file_repository: FileRepositoryPort,
        sandbox: SandboxPort,
        logger: Optional[logging.Logger] = None,
        max_diff_bytes: int = 0,
        default_encoding: FileEncoding = FileEncoding.UTF8_NO_BOM,
    ):
        self._file_repository = file_repository
        self._sandbox = sandbox
        self._logger = logger or logging.getLogger(__name__)
        self._max_diff_bytes = max_diff_bytes
        self._default_encoding = default_encoding.writable()

    def _previous_lines(self, existing: Optional[bytes]) -> list[str]:
        if existing is None:
            return []
        try:
            lines, _ = split_text(decode_bytes(existing, detect_encoding(existing)))
        except EncodingError:
            # undecodable previous content is replaced wholesale
            return []
        return lines

    def execute(
        self, path: str, content: str, options: Optional[WriteOptions] = None
    ) -> EditBatchResult:
        """
        Create a file or overwrite it completely.

        Args:
            path: Path of the file to write; parent directories are created
            content: Text to write, used verbatim
            options: Encoding options; defaults to the configured default encoding

        Returns:
            EditBatchResult with the encoding used and the content hash

        Raises:
            AccessDeniedError: If the path is outside the accessible roots
            EncodingError: If the content cannot be represented in the encoding
            FileRepositoryError: If writing fails
        """
        options = options or WriteOptions(self._default_encoding)
        abs_path = self._sandbox.resolve(path)

        existing = (
            self._file_repository.read_bytes(abs_path)
            if self._file_repository.exists(abs_path)
            else None
        )
        encoding = resolve_write_encoding(options, existing, content)
        data = encode_text(content, encoding)

        new_lines, _ = split_text(content)
        diff, _ = truncate_diff(
            generate_diff(self._previous_lines(existing), new_lines, abs_path),
            self._max_diff_bytes,
        )

        self._file_repository.write_bytes(abs_path, data)
        self._logger.info(f"Wrote {len(data)} bytes to {abs_path} ({encoding.value})")

        return EditBatchResult(
            success=True,
            message=f"Successfully wrote {len(data)} bytes to {abs_path}",
            diff=diff,
            preserved_encoding=encoding.value,
            content_hash=compute_content_hash(data),
        )

    def run(self, path: str, content: Any, options: Any = None) -> EditBatchResult:
        """Boundary entry point: parse wire options, execute, never raise."""
        try:
            if not isinstance(content, str):
                raise SchemaError("Content must be a string")
            write_options = parse_write_options(options, default_encoding=self._default_encoding)
            return self.execute(path, content, write_options)
        except Exception as e:
            return result_from_error(e, self._logger)
