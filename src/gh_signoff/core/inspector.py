"""Repository inspection: decides whether HEAD may be signed off.

A repository is clean when the working tree has no uncommitted entries and
every local commit has been pushed to the tracking branch. Without a tracking
branch divergence cannot be evaluated, so that case is an error rather than
"dirty".
"""

import logging
from pathlib import Path

from gh_signoff.core.errors import external_call_failed, precondition_failed
from gh_signoff.gateway.git.abc import Git

logger = logging.getLogger(__name__)

NOT_TRACKING_MESSAGE = "current branch is not tracking a remote branch"


def _has_uncommitted_changes(git: Git, cwd: Path) -> bool:
    try:
        return git.has_uncommitted_changes(cwd)
    except RuntimeError as e:
        logger.debug("git status failed: %s", e)
        raise external_call_failed("failed to read working tree status") from e


def _has_unpushed_commits(git: Git, cwd: Path, upstream: str) -> bool:
    try:
        ahead = git.count_unpushed_commits(cwd, upstream)
    except RuntimeError as e:
        logger.debug("git rev-list failed: %s", e)
        raise external_call_failed(f"failed to compare with {upstream}") from e
    logger.debug("%d commit(s) not pushed to %s", ahead, upstream)
    return ahead > 0


def is_clean(git: Git, cwd: Path) -> bool:
    """Check that there is nothing uncommitted or unpushed.

    Raises:
        SignoffError: PRECONDITION if the current branch has no tracking branch
    """
    if _has_uncommitted_changes(git, cwd):
        logger.debug("Working tree has uncommitted changes")
        return False

    upstream = git.get_upstream_branch(cwd)
    if upstream is None:
        raise precondition_failed(NOT_TRACKING_MESSAGE)

    return not _has_unpushed_commits(git, cwd, upstream)


def get_head_sha(git: Git, cwd: Path) -> str:
    sha = git.get_head_sha(cwd)
    if sha is None:
        raise external_call_failed("failed to get current commit")
    return sha


def get_user_name(git: Git, cwd: Path) -> str:
    """Get the identity a signoff is attributed to."""
    name = git.get_git_user_name(cwd)
    if name is None:
        raise precondition_failed("git user.name is not set")
    return name
