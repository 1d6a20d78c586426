"""
Sandbox adapter restricting access to an explicit set of root directories.
"""

import logging
import os
from typing import Iterable

from typing_extensions import override

from fsedit.exceptions import AccessDeniedError, ConfigurationError
from fsedit.ports.files.sandbox_port import SandboxPort
from fsedit.utils.workspace import dedupe_roots, is_within, normalize_file


class RootSandboxAdapter(SandboxPort):
    """Allow paths that resolve inside one of the configured roots."""

    def __init__(self, roots: Iterable[str], logger: logging.Logger | None = None):
        """
        Initialize the sandbox.

        Args:
            roots: Accessible root directories; the first one is the base for relative paths
            logger: Logger instance to use for logging

        Raises:
            ConfigurationError: If no root is given
        """
        self._roots: tuple[str, ...] = tuple(
            os.path.realpath(r) for r in dedupe_roots(roots)
        )
        if not self._roots:
            raise ConfigurationError("At least one accessible root directory is required")
        self._logger = logger or logging.getLogger(__name__)

    @override
    def resolve(self, requested_path: str) -> str:
        if not requested_path or not str(requested_path).strip():
            raise AccessDeniedError("Path must be a non-empty string")

        # symlinks are followed so a link inside a root cannot point outside it
        resolved = os.path.realpath(normalize_file(requested_path, self._roots[0]))
        for root in self._roots:
            if is_within(root, resolved):
                return resolved

        self._logger.warning(f"Access denied for path outside accessible roots: {requested_path}")
        raise AccessDeniedError(
            f"Access denied: '{requested_path}' is outside the accessible directories"
        )

    @override
    def roots(self) -> list[str]:
        return list(self._roots)
