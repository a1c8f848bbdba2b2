"""Production implementation of GitHub operations using the gh CLI."""

import json
import logging
from pathlib import Path
from urllib.parse import quote

from gh_signoff.gateway.github.abc import GitHub
from gh_signoff.gateway.github.types import (
    BranchProtection,
    CommitStatus,
    build_protection_payload,
    parse_branch_protection,
)
from gh_signoff.subprocess_utils import run_subprocess_with_context

logger = logging.getLogger(__name__)

# gh substitutes {owner} and {repo} from the git remote of the working directory
REPO_PATH = "repos/{owner}/{repo}"


def _protection_path(branch: str) -> str:
    # Slashes stay literal; "#", "?" and "%" would otherwise truncate the path
    return f"{REPO_PATH}/branches/{quote(branch, safe='/')}/protection"


class RealGitHub(GitHub):
    """Production implementation using gh api.

    All operations execute actual gh commands via subprocess.
    """

    def create_commit_status(self, cwd: Path, status: CommitStatus) -> None:
        """Create a commit status via POST /repos/{owner}/{repo}/statuses/{sha}."""
        run_subprocess_with_context(
            cmd=[
                "gh",
                "api",
                "--method",
                "POST",
                f"{REPO_PATH}/statuses/{status.commit_sha}",
                "-f",
                f"state={status.state}",
                "-f",
                f"context={status.context}",
                "-f",
                f"description={status.description}",
            ],
            operation_context=f"create commit status for {status.commit_sha}",
            cwd=cwd,
        )

    def get_default_branch(self, cwd: Path) -> str:
        """Get the default branch via GET /repos/{owner}/{repo}."""
        result = run_subprocess_with_context(
            cmd=["gh", "api", REPO_PATH],
            operation_context="get repository metadata",
            cwd=cwd,
        )
        try:
            data = json.loads(result.stdout)
        except json.JSONDecodeError as e:
            raise RuntimeError(f"Failed to parse repository metadata: {e}") from e
        branch = data.get("default_branch") if isinstance(data, dict) else None
        if not isinstance(branch, str):
            raise RuntimeError("Repository metadata has no default_branch")
        return branch

    def get_branch_protection(self, cwd: Path, branch: str) -> BranchProtection | None:
        """Get branch protection via GET .../branches/{branch}/protection.

        gh exits non-zero with a 404 when the branch is not protected.
        """
        result = run_subprocess_with_context(
            cmd=["gh", "api", _protection_path(branch)],
            operation_context=f"get branch protection for {branch}",
            cwd=cwd,
            check=False,
        )
        if result.returncode != 0:
            logger.debug("No readable protection for %s: %s", branch, result.stderr.strip())
            return None
        try:
            data = json.loads(result.stdout)
        except json.JSONDecodeError:
            logger.debug("Unparseable protection response for %s", branch)
            return None
        if not isinstance(data, dict):
            return None
        return parse_branch_protection(branch, data)

    def set_branch_protection(self, cwd: Path, branch: str, contexts: list[str]) -> None:
        """Replace branch protection via PUT .../branches/{branch}/protection."""
        payload = build_protection_payload(contexts)
        run_subprocess_with_context(
            cmd=["gh", "api", "--method", "PUT", _protection_path(branch), "--input", "-"],
            operation_context=f"set branch protection for {branch}",
            cwd=cwd,
            input=json.dumps(payload),
        )

    def delete_branch_protection(self, cwd: Path, branch: str) -> None:
        """Remove branch protection via DELETE .../branches/{branch}/protection."""
        run_subprocess_with_context(
            cmd=["gh", "api", "--method", "DELETE", _protection_path(branch)],
            operation_context=f"delete branch protection for {branch}",
            cwd=cwd,
        )
