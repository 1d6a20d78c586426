"""
Use case for the simple text substitution edit.
"""

import logging
from typing import Any, Optional

from fsedit.entities.edit import EditBatchResult, WriteOptions
from fsedit.exceptions import ConflictError, EditValidationError, SchemaError
from fsedit.ports.files.file_repository_port import FileRepositoryPort
from fsedit.ports.files.sandbox_port import SandboxPort
from fsedit.use_cases.editing.content_hasher import compute_content_hash
from fsedit.use_cases.editing.diff_generator import generate_diff, truncate_diff
from fsedit.use_cases.editing.encoding_detector import encode_text
from fsedit.use_cases.editing.encoding_policy import resolve_write_encoding
from fsedit.use_cases.editing.text_lines import LineLayout, join_lines, normalize_newlines, split_text
from fsedit.use_cases.files.edit_file import result_from_error
from fsedit.use_cases.files.text_document import load_document


class ReplaceTextUseCase:
    """
    Use case replacing the first occurrence of a text anywhere in a file.

    This is the reduced form of a line edit: no line number, the match may
    span several lines. It keeps its own validation and always preserves
    the file's encoding.
    """

    def __init__(
        self,
        file_repository: FileRepositoryPort,
        sandbox: SandboxPort,
        logger: Optional[logging.Logger] = None,
        max_diff_bytes: int = 0,
    ):
        self._file_repository = file_repository
        self._sandbox = sandbox
        self._logger = logger or logging.getLogger(__name__)
        self._max_diff_bytes = max_diff_bytes

    def execute(
        self, path: str, old_text: str, new_text: str, dry_run: bool = False
    ) -> EditBatchResult:
        """
        Replace the first occurrence of old_text with new_text.

        Newlines in both texts and in the file are compared as \\n.

        Args:
            path: Path of the file to edit
            old_text: Exact text to find (case-sensitive, non-empty)
            new_text: Replacement text
            dry_run: If True, compute the outcome without writing

        Returns:
            EditBatchResult with edit_count 1

        Raises:
            AccessDeniedError: If the path is outside the accessible roots
            NotFoundError: If the file does not exist
            EditValidationError: If old_text is empty
            ConflictError: If old_text does not occur in the file
            EncodingError: If the content cannot be decoded or encoded
            FileRepositoryError: If reading or writing fails
        """
        if not old_text:
            raise EditValidationError("OldText must not be empty")

        abs_path = self._sandbox.resolve(path)
        document = load_document(self._file_repository, abs_path)

        flat = join_lines(document.lines, LineLayout("\n", document.layout.trailing_newline))
        needle = normalize_newlines(old_text)
        found = flat.find(needle)
        if found < 0:
            raise ConflictError(f"Old text not found in file: {abs_path}")

        replaced = flat[:found] + normalize_newlines(new_text) + flat[found + len(needle):]
        new_lines, new_layout = split_text(replaced)
        new_content = join_lines(
            new_lines, LineLayout(document.layout.newline, new_layout.trailing_newline)
        )

        encoding = resolve_write_encoding(
            WriteOptions(preserve_original_encoding=True), document.raw, new_content
        )
        data = encode_text(new_content, encoding)
        diff, _ = truncate_diff(
            generate_diff(document.lines, new_lines, abs_path), self._max_diff_bytes
        )

        if dry_run:
            message = f"Dry run: old text would be replaced in {abs_path}"
        else:
            self._file_repository.write_bytes(abs_path, data)
            message = f"Successfully edited file {abs_path}"
        self._logger.info(message)

        return EditBatchResult(
            success=True,
            message=message,
            edit_count=1,
            diff=diff,
            preserved_encoding=encoding.value,
            content_hash=compute_content_hash(data),
            dry_run=dry_run,
        )

    def run(self, path: str, old_text: Any, new_text: Any, dry_run: bool = False) -> EditBatchResult:
        """Boundary entry point: check argument types, execute, never raise."""
        try:
            if not isinstance(old_text, str) or not isinstance(new_text, str):
                raise SchemaError("oldText and newText must be strings")
            return self.execute(path, old_text, new_text, dry_run=dry_run)
        except Exception as e:
            return result_from_error(e, self._logger, dry_run=dry_run)
