"""Checks for the external tools signoff shells out to."""

import logging

from gh_signoff.core.errors import ErrorKind, SignoffError
from gh_signoff.gateway.shell.abc import Shell

logger = logging.getLogger(__name__)

INSTALL_HINTS = {
    "git": "https://git-scm.com/downloads",
    "gh": "https://cli.github.com",
}


def require_tools(shell: Shell, *tool_names: str) -> None:
    """Fail before any operation if a required tool is missing from PATH.

    Raises:
        SignoffError: MISSING_DEPENDENCY naming the first missing tool
    """
    for name in tool_names:
        path = shell.get_installed_tool_path(name)
        if path is None:
            hint = INSTALL_HINTS.get(name)
            message = f"{name} is not installed"
            if hint is not None:
                message = f"{message} (see {hint})"
            raise SignoffError(ErrorKind.MISSING_DEPENDENCY, message)
        logger.debug("Found %s at %s", name, path)
