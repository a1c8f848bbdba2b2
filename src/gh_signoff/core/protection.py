"""Branch protection management for the signoff status check.

install and check operate on the required_status_checks contexts of a
branch; uninstall removes branch protection entirely. A branch that is not
given explicitly is resolved to the repository's default branch first.
"""

import logging
from pathlib import Path

from gh_signoff.core.errors import external_call_failed, precondition_failed
from gh_signoff.gateway.github.abc import GitHub
from gh_signoff.gateway.github.types import SIGNOFF_CONTEXT

logger = logging.getLogger(__name__)


def resolve_branch(github: GitHub, cwd: Path, branch: str | None) -> str:
    """Return branch, or the repository's default branch when branch is None.

    Raises:
        SignoffError: EXTERNAL_CALL if the default branch lookup fails,
            PRECONDITION if the resulting name is empty
    """
    if branch is None:
        try:
            branch = github.get_default_branch(cwd)
        except RuntimeError as e:
            logger.debug("Default branch lookup failed: %s", e)
            raise external_call_failed("failed to get default branch") from e
        logger.debug("Resolved default branch: %s", branch)

    branch = branch.strip()
    if not branch:
        raise precondition_failed("branch name is required")
    return branch


def install(github: GitHub, cwd: Path, branch: str | None) -> str:
    """Require the signoff status check on a branch.

    The protection rule is rewritten as a whole; required contexts that are
    already configured are carried over.

    Returns:
        The branch that now requires signoff
    """
    branch = resolve_branch(github, cwd, branch)

    existing = github.get_branch_protection(cwd, branch)
    contexts = sorted(existing.required_contexts) if existing is not None else []
    if SIGNOFF_CONTEXT not in contexts:
        contexts.append(SIGNOFF_CONTEXT)

    try:
        github.set_branch_protection(cwd, branch, contexts)
    except RuntimeError as e:
        logger.debug("Setting protection failed: %s", e)
        raise external_call_failed("failed to require signoff") from e
    return branch


def uninstall(github: GitHub, cwd: Path, branch: str | None) -> str:
    """Remove the branch protection rule entirely.

    Returns:
        The branch whose protection was removed
    """
    branch = resolve_branch(github, cwd, branch)
    try:
        github.delete_branch_protection(cwd, branch)
    except RuntimeError as e:
        raise external_call_failed(f"failed to remove branch protection: {e}") from e
    return branch


def check(github: GitHub, cwd: Path, branch: str | None) -> tuple[str, bool]:
    """Report whether a branch requires signoff.

    A branch without readable protection does not require signoff.

    Returns:
        Tuple of (resolved branch, requires signoff)
    """
    branch = resolve_branch(github, cwd, branch)
    protection = github.get_branch_protection(cwd, branch)
    if protection is None:
        return branch, False
    return branch, protection.requires_signoff
