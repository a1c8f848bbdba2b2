"""Production implementation of Git queries using subprocess."""

from pathlib import Path

from gh_signoff.gateway.git.abc import Git
from gh_signoff.subprocess_utils import run_subprocess_with_context


class RealGit(Git):
    """Real implementation of Git queries using subprocess."""

    def has_uncommitted_changes(self, cwd: Path) -> bool:
        """Check if the working tree has uncommitted changes."""
        result = run_subprocess_with_context(
            cmd=["git", "status", "--porcelain"],
            operation_context="get working tree status",
            cwd=cwd,
        )
        return bool(result.stdout.strip())

    def get_upstream_branch(self, cwd: Path) -> str | None:
        """Get the tracking branch of the current branch."""
        result = run_subprocess_with_context(
            cmd=["git", "rev-parse", "--abbrev-ref", "--symbolic-full-name", "@{upstream}"],
            operation_context="get upstream branch",
            cwd=cwd,
            check=False,
        )
        if result.returncode != 0:
            return None
        upstream = result.stdout.strip()
        return upstream if upstream else None

    def count_unpushed_commits(self, cwd: Path, upstream: str) -> int:
        """Count commits on HEAD that are not on the upstream branch."""
        result = run_subprocess_with_context(
            cmd=["git", "rev-list", "--count", f"{upstream}..HEAD"],
            operation_context=f"compare HEAD with {upstream}",
            cwd=cwd,
        )
        return int(result.stdout.strip())

    def get_head_sha(self, cwd: Path) -> str | None:
        """Get the full commit hash of HEAD."""
        result = run_subprocess_with_context(
            cmd=["git", "rev-parse", "HEAD"],
            operation_context="get HEAD commit",
            cwd=cwd,
            check=False,
        )
        if result.returncode != 0:
            return None
        return result.stdout.strip()

    def get_git_user_name(self, cwd: Path) -> str | None:
        """Get the configured git user.name."""
        result = run_subprocess_with_context(
            cmd=["git", "config", "user.name"],
            operation_context="get git user.name",
            cwd=cwd,
            check=False,
        )
        if result.returncode != 0:
            return None
        name = result.stdout.strip()
        return name if name else None
