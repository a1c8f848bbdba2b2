"""Abstract base class for tool availability checks."""

from abc import ABC, abstractmethod


class Shell(ABC):
    """Abstract interface for locating external tools on PATH."""

    @abstractmethod
    def get_installed_tool_path(self, tool_name: str) -> str | None:
        """Get the absolute path of an installed tool.

        Args:
            tool_name: Executable name (e.g. "gh")

        Returns:
            Path to the executable, or None if it is not on PATH
        """
        ...
