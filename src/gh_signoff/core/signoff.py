"""Creating the signoff commit status."""

import logging
from pathlib import Path

from gh_signoff.core.errors import external_call_failed, precondition_failed
from gh_signoff.core.inspector import get_head_sha, get_user_name, is_clean
from gh_signoff.gateway.git.abc import Git
from gh_signoff.gateway.github.abc import GitHub
from gh_signoff.gateway.github.types import SIGNOFF_CONTEXT, CommitStatus

logger = logging.getLogger(__name__)

DIRTY_MESSAGE = "repository has uncommitted or unpushed changes (use -f to sign off anyway)"


def build_signoff_status(sha: str, user: str) -> CommitStatus:
    return CommitStatus(
        commit_sha=sha,
        state="success",
        context=SIGNOFF_CONTEXT,
        description=f"{user} signed off",
    )


def publish_signoff(github: GitHub, cwd: Path, sha: str, user: str) -> CommitStatus:
    """Attach a successful signoff status to a commit.

    No retry: a failed call is reported immediately.

    Raises:
        SignoffError: EXTERNAL_CALL if the status could not be created
    """
    status = build_signoff_status(sha, user)
    try:
        github.create_commit_status(cwd, status)
    except RuntimeError as e:
        logger.debug("Status creation failed: %s", e)
        raise external_call_failed("failed to create status") from e
    return status


def create_signoff(git: Git, github: GitHub, cwd: Path, *, force: bool) -> CommitStatus:
    """Sign off on HEAD.

    Unless force is set, the repository must be clean; otherwise no remote call
    is made.

    Args:
        git: Git gateway for repository reads
        github: GitHub gateway for the status call
        cwd: Working directory inside the repository
        force: Skip the cleanliness check

    Returns:
        The status that was created

    Raises:
        SignoffError: If a precondition fails or a collaborator call fails
    """
    if force:
        logger.debug("Skipping cleanliness check")
    elif not is_clean(git, cwd):
        raise precondition_failed(DIRTY_MESSAGE)

    sha = get_head_sha(git, cwd)
    user = get_user_name(git, cwd)
    logger.debug("Signing off on %s as %s", sha, user)
    return publish_signoff(github, cwd, sha, user)
