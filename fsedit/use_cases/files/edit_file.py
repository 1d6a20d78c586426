"""
Use case for applying a batch of line edits to a file.
"""

import logging
from enum import Enum
from typing import Any, Optional

from fsedit.entities.edit import EditBatchResult, EditInstruction, WriteOptions
from fsedit.exceptions import (
    BaseAppError,
    EditError,
    EditValidationError,
    FileRepositoryError,
)
from fsedit.ports.files.file_repository_port import FileRepositoryPort
from fsedit.ports.files.sandbox_port import SandboxPort
from fsedit.use_cases.editing.batch_parser import parse_edit_batch, parse_write_options
from fsedit.use_cases.editing.content_hasher import compute_content_hash
from fsedit.use_cases.editing.diff_generator import generate_diff, truncate_diff
from fsedit.use_cases.editing.edit_applier import apply_edits
from fsedit.use_cases.editing.edit_validator import validate_batch
from fsedit.use_cases.editing.encoding_detector import encode_text
from fsedit.use_cases.editing.encoding_policy import resolve_write_encoding
from fsedit.use_cases.editing.text_lines import join_lines
from fsedit.use_cases.files.text_document import load_document


class EditState(Enum):
    """Stages of an edit request."""

    READING = "reading"
    VALIDATING = "validating"
    APPLYING = "applying"
    DRY_RUN_DONE = "dry_run_done"
    WRITING = "writing"
    HASHING = "hashing"
    DONE = "done"
    FAILED = "failed"


def result_from_error(
    exc: Exception, logger: logging.Logger, dry_run: bool = False
) -> EditBatchResult:
    """
    Turn an exception raised by a file use case into a failed result.

    Request errors keep their full error list; I/O and unexpected errors
    are reported as a fatal failure of the request.
    """
    if isinstance(exc, EditError):
        logger.warning(f"{type(exc).__name__}: {exc}")
        return EditBatchResult.failure(str(exc), exc.errors, dry_run=dry_run)
    if isinstance(exc, BaseAppError):
        logger.error(f"{type(exc).__name__}: {exc}")
        return EditBatchResult.failure(f"I/O error: {exc}", dry_run=dry_run)
    logger.error(f"Unexpected error: {exc}")
    return EditBatchResult.failure(f"Unexpected error: {exc}", dry_run=dry_run)


class EditFileUseCase:
    """
    Use case for editing a file with a batch of line-numbered instructions.

    The whole batch is validated against the file before anything changes;
    any validation error or conflict leaves the file untouched. Writes are
    not isolated from concurrent writers and a failure after the file was
    truncated is not rolled back.
    """

    def __init__(
        self,
        file_repository: FileRepositoryPort,
        sandbox: SandboxPort,
        logger: Optional[logging.Logger] = None,
        max_diff_bytes: int = 0,
    ):
        """
        Initialize the use case.

        Args:
            file_repository: Repository for raw file I/O
            sandbox: Access control deciding which paths may be edited
            logger: Logger instance to use for logging
            max_diff_bytes: Cap on the reported diff size (0 = unlimited)
        """
        self._file_repository = file_repository
        self._sandbox = sandbox
        self._logger = logger or logging.getLogger(__name__)
        self._max_diff_bytes = max_diff_bytes

    def _enter(self, path: str, state: EditState) -> EditState:
        self._logger.debug(f"Edit {path}: {state.value}")
        return state

    def execute(
        self,
        path: str,
        edits: list[EditInstruction],
        dry_run: bool = False,
        options: Optional[WriteOptions] = None,
    ) -> EditBatchResult:
        """
        Apply a batch of edits to a file.

        Args:
            path: Path of the file to edit
            edits: Instructions referring to the current line numbering
            dry_run: If True, compute the outcome without writing
            options: Write options; by default the file's encoding is preserved

        Returns:
            EditBatchResult describing the applied (or simulated) change

        Raises:
            AccessDeniedError: If the path is outside the accessible roots
            NotFoundError: If the file does not exist
            EditValidationError: If any instruction is invalid
            ConflictError: If any old_text is missing from its line
            EncodingError: If the content cannot be decoded or encoded
            FileRepositoryError: If reading or writing fails
        """
        options = options or WriteOptions(preserve_original_encoding=True)
        state = self._enter(path, EditState.READING)
        try:
            abs_path = self._sandbox.resolve(path)
            document = load_document(self._file_repository, abs_path)

            state = self._enter(abs_path, EditState.VALIDATING)
            report = validate_batch(edits, document.total_lines)
            if not report.is_valid:
                raise EditValidationError(
                    f"Edit batch has {len(report.errors)} validation error(s)", report.errors
                )

            state = self._enter(abs_path, EditState.APPLYING)
            new_lines, applied = apply_edits(document.lines, report.instructions)
            diff, truncated = truncate_diff(
                generate_diff(document.lines, new_lines, abs_path), self._max_diff_bytes
            )
            new_text = join_lines(new_lines, document.layout)
            encoding = resolve_write_encoding(options, document.raw, new_text)
            data = encode_text(new_text, encoding)

            if dry_run:
                state = self._enter(abs_path, EditState.DRY_RUN_DONE)
                self._logger.info(f"Dry run: {applied} edit(s) would be applied to {abs_path}")
                return EditBatchResult(
                    success=True,
                    message=f"Dry run: {applied} edit(s) would be applied to {abs_path}"
                    + (" (diff truncated)" if truncated else ""),
                    edit_count=applied,
                    diff=diff,
                    preserved_encoding=encoding.value,
                    content_hash=compute_content_hash(data),
                    dry_run=True,
                )

            state = self._enter(abs_path, EditState.WRITING)
            self._file_repository.write_bytes(abs_path, data)

            state = self._enter(abs_path, EditState.HASHING)
            content_hash = compute_content_hash(data)

            state = self._enter(abs_path, EditState.DONE)
            self._logger.info(f"Applied {applied} edit(s) to {abs_path} ({encoding.value})")
            return EditBatchResult(
                success=True,
                message=f"Successfully applied {applied} edit(s) to {abs_path}"
                + (" (diff truncated)" if truncated else ""),
                edit_count=applied,
                diff=diff,
                preserved_encoding=encoding.value,
                content_hash=content_hash,
            )

        except (EditError, FileRepositoryError) as e:
            self._logger.info(f"Edit {path} failed while {state.value}: {e}")
            self._enter(path, EditState.FAILED)
            raise

    def run(
        self,
        path: str,
        edits: Any,
        dry_run: bool = False,
        options: Any = None,
    ) -> EditBatchResult:
        """
        Boundary entry point: parse wire input, execute, never raise.

        Args:
            path: Path of the file to edit
            edits: Edit batch as a JSON string, a list of dicts or of EditInstruction
            dry_run: If True, compute the outcome without writing
            options: Write options as a JSON string, a dict, WriteOptions or None

        Returns:
            EditBatchResult; failures carry every discovered error
        """
        try:
            if isinstance(edits, list) and all(isinstance(e, EditInstruction) for e in edits):
                batch = edits
            else:
                batch = parse_edit_batch(edits)
            write_options = parse_write_options(options, preserve_default=True)
            return self.execute(path, batch, dry_run=dry_run, options=write_options)
        except Exception as e:
            return result_from_error(e, self._logger, dry_run=dry_run)
