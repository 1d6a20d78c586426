"""
Port and types describing the tools exposed to an LLM dispatcher.
"""

from abc import ABC, abstractmethod
from typing import TypedDict


class ToolSpec(TypedDict):
    """Specification for a tool that can be called by an LLM."""

    name: str
    description: str
    parameters: dict[str, object]  # JSON Schema


class ToolsHandlerPort(ABC):
    """
    Port interface for handling tool invocations.

    A handler lists the tools it owns and dispatches invocations of those
    tools to the file use cases.
    """

    @abstractmethod
    def available_tools(self) -> list[ToolSpec]:
        """
        Get a list of available tools.

        Returns:
            List of tool specifications
        """
        pass

    @abstractmethod
    def dispatch(self, name: str, arguments: dict[str, object]) -> str:
        """
        Dispatch a tool invocation.

        Args:
            name: Name of the tool to invoke
            arguments: Arguments to pass to the tool

        Returns:
            JSON-encoded result of the invocation

        Raises:
            ValueError: If the tool name is unknown to this handler
        """
        pass
