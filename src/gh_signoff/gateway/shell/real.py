"""Production implementation of tool availability checks."""

import shutil

from gh_signoff.gateway.shell.abc import Shell


class RealShell(Shell):
    """Locates tools with shutil.which."""

    def get_installed_tool_path(self, tool_name: str) -> str | None:
        return shutil.which(tool_name)
