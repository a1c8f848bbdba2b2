"""Abstract base class for the local Git queries used by signoff."""

from abc import ABC, abstractmethod
from pathlib import Path


class Git(ABC):
    """Abstract interface for Git repository queries.

    This interface contains ONLY query operations (no mutations).
    All implementations (real and fake) must implement this interface.
    """

    @abstractmethod
    def has_uncommitted_changes(self, cwd: Path) -> bool:
        """Check if the working tree has uncommitted changes.

        Args:
            cwd: Working directory to check

        Returns:
            True if there are any staged, modified, or untracked entries

        Raises:
            RuntimeError: If git status fails (e.g. not a repository)
        """
        ...

    @abstractmethod
    def get_upstream_branch(self, cwd: Path) -> str | None:
        """Get the tracking branch of the current branch.

        Args:
            cwd: Working directory

        Returns:
            Upstream ref name (e.g. "origin/main"), or None if the current
            branch does not track a remote branch
        """
        ...

    @abstractmethod
    def count_unpushed_commits(self, cwd: Path, upstream: str) -> int:
        """Count commits on HEAD that are not on the upstream branch.

        Args:
            cwd: Working directory
            upstream: Upstream ref returned by get_upstream_branch()

        Returns:
            Number of local commits missing from upstream

        Raises:
            RuntimeError: If git rev-list fails
        """
        ...

    @abstractmethod
    def get_head_sha(self, cwd: Path) -> str | None:
        """Get the full commit hash of HEAD.

        Returns:
            Commit SHA, or None when not in a repository or HEAD is unborn
        """
        ...

    @abstractmethod
    def get_git_user_name(self, cwd: Path) -> str | None:
        """Get the configured git user.name.

        Returns:
            The user name, or None if unset or empty
        """
        ...
