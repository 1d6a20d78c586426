"""
Sandbox port interface deciding which paths may be touched.
"""

from abc import ABC, abstractmethod


class SandboxPort(ABC):
    """Port interface for path access control."""

    @abstractmethod
    def resolve(self, requested_path: str) -> str:
        """
        Resolve a requested path to an absolute path inside the accessible roots.

        Args:
            requested_path: Path as given by the caller (absolute or relative)

        Returns:
            The normalized absolute path

        Raises:
            AccessDeniedError: If the path escapes every accessible root
        """
        pass

    @abstractmethod
    def roots(self) -> list[str]:
        """
        Get the accessible root directories, in priority order.

        Returns:
            List of absolute directory paths
        """
        pass
