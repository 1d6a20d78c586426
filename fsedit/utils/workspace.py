from __future__ import annotations

import os
from typing import Iterable

"""Path normalization helpers shared by the sandbox and the settings.

Relative paths are resolved against a base directory (the first accessible
root), never against a process-wide setting.
"""


def normalize_dir(path: str, base: str | None = None) -> str:
    s = os.path.expanduser(str(path or "").strip())
    if not os.path.isabs(s):
        s = os.path.join(base or os.getcwd(), s)
    return os.path.abspath(s)


def normalize_file(path: str, base: str | None = None) -> str:
    return normalize_dir(path, base)


def split_roots(value: str) -> list[str]:
    """Split an os.pathsep-separated list of directories, dropping blanks."""
    return [part.strip() for part in value.split(os.pathsep) if part.strip()]


def dedupe_roots(roots: Iterable[str]) -> list[str]:
    """Normalize roots and drop duplicates while keeping their order."""
    seen: set[str] = set()
    out: list[str] = []
    for root in roots:
        p = normalize_dir(root)
        key = os.path.normcase(p)
        if key in seen:
            continue
        seen.add(key)
        out.append(p)
    return out


def is_within(root: str, abs_path: str) -> bool:
    """Return True if abs_path is root itself or lies below it."""
    try:
        common = os.path.commonpath([os.path.normcase(root), os.path.normcase(abs_path)])
    except ValueError:
        # different drives on Windows
        return False
    return common == os.path.normcase(root)
