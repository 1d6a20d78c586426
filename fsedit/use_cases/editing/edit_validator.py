"""
Static validation of an edit batch before any mutation.
"""

from dataclasses import dataclass, field, replace
from typing import Optional

from fsedit.entities.edit import EditInstruction, EditType
from fsedit.use_cases.editing.text_lines import normalize_newlines


@dataclass
class ValidationReport:
    """
    Outcome of validating a batch.

    `instructions` holds the newline-normalized batch, in request order.
    """

    instructions: list[EditInstruction]
    errors: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors


def _normalized(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    return normalize_newlines(value)


def normalize_instruction(edit: EditInstruction) -> EditInstruction:
    """Return a copy whose text and old_text use \\n line breaks only."""
    return replace(edit, text=_normalized(edit.text), old_text=_normalized(edit.old_text))


def span(edit: EditInstruction) -> tuple[int, int]:
    """
    Original lines consumed by an instruction, as an inclusive range.

    Inserts consume no line, so their range ends before it starts.
    """
    if edit.type is EditType.INSERT:
        return edit.line_number, edit.line_number - 1
    if edit.type is EditType.REPLACE_SECTION and edit.end_line is not None:
        return edit.line_number, edit.end_line
    return edit.line_number, edit.line_number


def _instruction_errors(edit: EditInstruction, total_lines: int) -> list[str]:
    errors: list[str] = []

    if edit.line_number < 1:
        errors.append(f"LineNumber must be 1 or greater (got {edit.line_number})")

    if edit.type is EditType.INSERT:
        if edit.text is None:
            errors.append("Text is required for Insert operations")

    elif edit.type is EditType.DELETE:
        if edit.line_number > total_lines:
            errors.append(
                f"Cannot delete line {edit.line_number}: file has {total_lines} lines"
            )

    elif edit.type is EditType.REPLACE:
        if edit.text is None:
            errors.append("Text is required for Replace operations")
        if edit.old_text is not None and edit.old_text == "":
            errors.append("OldText must not be empty when provided")
        if edit.line_number > total_lines:
            errors.append(
                f"Cannot replace line {edit.line_number}: file has {total_lines} lines"
            )

    elif edit.type is EditType.REPLACE_SECTION:
        if edit.end_line is None:
            errors.append("EndLine is required for ReplaceSection operations")
        elif edit.end_line < edit.line_number:
            errors.append(
                f"EndLine ({edit.end_line}) must be greater than or equal to LineNumber"
            )
        if edit.line_number > total_lines:
            errors.append(
                f"Cannot replace section starting at line {edit.line_number}: "
                f"file has {total_lines} lines"
            )

    return errors


def validate_batch(batch: list[EditInstruction], total_lines: int) -> ValidationReport:
    """
    Check every instruction of a batch against the current line count.

    All instructions are checked; errors are reported in request order,
    each tagged with its position and line number.

    Args:
        batch: Instructions in request order
        total_lines: Number of lines in the file before editing

    Returns:
        A ValidationReport carrying the normalized batch and any errors
    """
    instructions = [normalize_instruction(edit) for edit in batch]
    report = ValidationReport(instructions=instructions)

    if not instructions:
        report.errors.append("Edit batch is empty")
        return report

    for index, edit in enumerate(instructions):
        for problem in _instruction_errors(edit, total_lines):
            report.errors.append(f"Edit #{index + 1} (line {edit.line_number}): {problem}")

    return report
