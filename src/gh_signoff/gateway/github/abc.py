"""Abstract base class for the GitHub API operations used by signoff."""

from abc import ABC, abstractmethod
from pathlib import Path

from gh_signoff.gateway.github.types import BranchProtection, CommitStatus


class GitHub(ABC):
    """Abstract interface for GitHub commit status and branch protection operations.

    All implementations (real and fake) must implement this interface.
    The repository is identified by the git remote of the working directory,
    as gh does for the {owner}/{repo} placeholders.
    """

    @abstractmethod
    def create_commit_status(self, cwd: Path, status: CommitStatus) -> None:
        """Create a commit status.

        Re-creating a status for the same commit and context replaces the
        previous one on GitHub.

        Args:
            cwd: Working directory inside the repository
            status: Status to create

        Raises:
            RuntimeError: If the gh api call fails
        """
        ...

    @abstractmethod
    def get_default_branch(self, cwd: Path) -> str:
        """Get the repository's default branch name.

        Raises:
            RuntimeError: If the gh api call fails or returns malformed data
        """
        ...

    @abstractmethod
    def get_branch_protection(self, cwd: Path, branch: str) -> BranchProtection | None:
        """Get the protection rule of a branch.

        Returns:
            BranchProtection, or None if the branch is not protected or the
            rule could not be read
        """
        ...

    @abstractmethod
    def set_branch_protection(self, cwd: Path, branch: str, contexts: list[str]) -> None:
        """Replace the protection rule of a branch.

        Args:
            cwd: Working directory inside the repository
            branch: Branch to protect
            contexts: Required status check contexts

        Raises:
            RuntimeError: If the gh api call fails
        """
        ...

    @abstractmethod
    def delete_branch_protection(self, cwd: Path, branch: str) -> None:
        """Remove the protection rule of a branch entirely.

        Raises:
            RuntimeError: If the gh api call fails
        """
        ...
