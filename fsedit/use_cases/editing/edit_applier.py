"""
Application of a validated edit batch to a sequence of lines.

Every instruction refers to the original line numbering. Instructions are
applied bottom-up, so when an instruction targeting line k runs, all
previous ones only touched lines at or after k and line k is still at
index k - 1.
"""

from typing import Optional

from fsedit.entities.edit import EditInstruction, EditType
from fsedit.exceptions import ConflictError
from fsedit.use_cases.editing.edit_validator import span


def application_order(batch: list[EditInstruction]) -> list[tuple[int, EditInstruction]]:
    """
    Sort a batch for application.

    Descending line number, then descending end line, then request order.
    Inserts end before the line they target, so they run after a deletion
    or replacement of that same line.

    Returns:
        (request index, instruction) pairs in application order
    """

    def key(pair: tuple[int, EditInstruction]) -> tuple[int, int, int]:
        index, edit = pair
        return -edit.line_number, -span(edit)[1], index

    return sorted(enumerate(batch), key=key)


def _split(text: Optional[str]) -> list[str]:
    return (text or "").split("\n")


def _section_lines(text: Optional[str]) -> list[str]:
    # an empty replacement removes the section
    if not text:
        return []
    return text.split("\n")


def apply_edits(
    lines: list[str], batch: list[EditInstruction]
) -> tuple[list[str], int]:
    """
    Apply a validated batch to a copy of the lines.

    Args:
        lines: Lines of the file before editing
        batch: Instructions that passed validate_batch

    Returns:
        The new lines and the number of instructions applied

    Raises:
        ConflictError: If any Replace old_text is missing from its target line,
            or a target line was already removed by an overlapping edit;
            all conflicts of the batch are reported together
    """
    result = list(lines)
    conflicts: list[tuple[int, str]] = []
    applied = 0

    for index, edit in application_order(batch):
        pos = edit.line_number - 1
        prefix = f"Edit #{index + 1} (line {edit.line_number}): "

        if edit.type is EditType.INSERT:
            pos = min(max(pos, 0), len(result))
            result[pos:pos] = _split(edit.text)
            applied += 1
            continue

        # earlier edits of the batch may have consumed the target line
        if pos >= len(result):
            conflicts.append(
                (index, prefix + f"Line {edit.line_number} was removed by another edit of the batch")
            )
            continue

        if edit.type is EditType.DELETE:
            del result[pos]

        elif edit.type is EditType.REPLACE:
            if edit.old_text is None:
                result[pos:pos + 1] = _split(edit.text)
            else:
                line = result[pos]
                found = line.find(edit.old_text)
                if found < 0:
                    conflicts.append(
                        (
                            index,
                            prefix + f"OldText {edit.old_text!r} not found in line {edit.line_number}",
                        )
                    )
                    continue
                replaced = line[:found] + (edit.text or "") + line[found + len(edit.old_text):]
                result[pos:pos + 1] = replaced.split("\n")

        elif edit.type is EditType.REPLACE_SECTION:
            end = min(edit.end_line or edit.line_number, len(result))
            result[pos:end] = _section_lines(edit.text)

        applied += 1

    if conflicts:
        conflicts.sort()
        raise ConflictError(
            f"{len(conflicts)} edit(s) conflict with the current file content",
            [message for _, message in conflicts],
        )

    return result, applied
