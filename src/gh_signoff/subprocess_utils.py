"""Subprocess helpers shared by the production gateways."""

import logging
import shlex
import subprocess
from pathlib import Path

logger = logging.getLogger(__name__)


def run_subprocess_with_context(
    cmd: list[str],
    *,
    operation_context: str,
    cwd: Path | None = None,
    input: str | None = None,
    check: bool = True,
) -> subprocess.CompletedProcess[str]:
    """Run a command, capturing text output, with error context on failure.

    Args:
        cmd: Command and arguments to execute
        operation_context: Short description of the operation (e.g. "create commit status"),
            used in the error message and debug log
        cwd: Working directory for command execution
        input: Text passed to the command's stdin
        check: If True, a non-zero exit raises RuntimeError

    Returns:
        CompletedProcess with stdout/stderr as text

    Raises:
        RuntimeError: If check is True and the command exits non-zero
        FileNotFoundError: If the executable is not installed
    """
    logger.debug("Running (%s): %s", operation_context, shlex.join(cmd))
    result = subprocess.run(
        cmd,
        cwd=cwd,
        input=input,
        capture_output=True,
        text=True,
        check=False,
    )
    logger.debug("Exit code %d for: %s", result.returncode, cmd[0])
    if result.stderr.strip():
        logger.debug("stderr: %s", result.stderr.strip())

    if check and result.returncode != 0:
        stderr = result.stderr.strip()
        message = f"Failed to {operation_context}"
        if stderr:
            message = f"{message}: {stderr}"
        raise RuntimeError(message)

    return result
