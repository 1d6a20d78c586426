"""
Line-level unified diff between the content before and after an edit.
"""

import difflib


def generate_diff(before: list[str], after: list[str], path: str = "", context: int = 3) -> str:
    """
    Render a unified diff of two line sequences.

    Lines are compared without terminators. The output is deterministic and
    empty when both sequences are equal.

    Args:
        before: Lines before the change
        after: Lines after the change
        path: File path shown in the --- / +++ headers
        context: Number of unchanged lines around each hunk

    Returns:
        The diff text ("-" removed, "+" inserted, " " unchanged)
    """
    name = (path or "file").lstrip("/")
    diff_list = list(
        difflib.unified_diff(
            before,
            after,
            fromfile=f"a/{name}",
            tofile=f"b/{name}",
            lineterm="",
            n=context,
        )
    )
    return "\n".join(diff_list)


def truncate_diff(diff_text: str, max_bytes: int) -> tuple[str, bool]:
    """Cap a diff at max_bytes of UTF-8; returns the text and whether it was cut."""
    if max_bytes <= 0:
        return diff_text, False
    raw = diff_text.encode("utf-8")
    if len(raw) <= max_bytes:
        return diff_text, False
    return raw[:max_bytes].decode("utf-8", errors="ignore"), True
