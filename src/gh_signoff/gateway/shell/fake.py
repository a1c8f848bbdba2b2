"""Fake implementation of tool availability checks for testing."""

from gh_signoff.gateway.shell.abc import Shell


class FakeShell(Shell):
    """In-memory fake reporting a fixed set of installed tools.

    By default git and gh are installed, which is what most tests need.
    """

    def __init__(self, *, installed_tools: dict[str, str] | None = None) -> None:
        """Create FakeShell.

        Args:
            installed_tools: Mapping of tool name -> executable path
        """
        if installed_tools is None:
            installed_tools = {"git": "/usr/bin/git", "gh": "/usr/bin/gh"}
        self._installed_tools = installed_tools

    def get_installed_tool_path(self, tool_name: str) -> str | None:
        return self._installed_tools.get(tool_name)
