"""
Splitting decoded text into numbered lines and joining it back.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class LineLayout:
    """Newline convention of a text, restored when its lines are joined."""

    newline: str = "\n"
    trailing_newline: bool = False


def normalize_newlines(value: str) -> str:
    """Convert \\r\\n and bare \\r to \\n."""
    return value.replace("\r\n", "\n").replace("\r", "\n")


def _dominant_newline(text: str) -> str:
    crlf = text.count("\r\n")
    cr = text.count("\r") - crlf
    lf = text.count("\n") - crlf
    if crlf >= lf and crlf >= cr and crlf > 0:
        return "\r\n"
    if cr > lf:
        return "\r"
    return "\n"


def split_text(text: str) -> tuple[list[str], LineLayout]:
    """
    Split text into lines without their terminators.

    Only \\n, \\r\\n and \\r terminate lines. An empty text has no lines;
    a final terminator does not start an extra empty line.

    Returns:
        The lines and the layout needed to rebuild the text
    """
    if not text:
        return [], LineLayout()

    newline = _dominant_newline(text)
    normalized = normalize_newlines(text)
    trailing = normalized.endswith("\n")
    if trailing:
        normalized = normalized[:-1]
    return normalized.split("\n"), LineLayout(newline, trailing)


def join_lines(lines: list[str], layout: LineLayout) -> str:
    """
    Rebuild text from lines using the recorded newline convention.

    No lines give an empty text; a single empty line is written as one
    terminator so it still counts as a line.
    """
    if not lines:
        return ""
    text = layout.newline.join(lines)
    if layout.trailing_newline or lines == [""]:
        text += layout.newline
    return text
