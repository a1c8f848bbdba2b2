"""Fake GitHub operations for testing."""

from pathlib import Path

from gh_signoff.gateway.github.abc import GitHub
from gh_signoff.gateway.github.types import BranchProtection, CommitStatus


class FakeGitHub(GitHub):
    """In-memory fake implementation of GitHub operations.

    This class has NO public setup methods. All state is provided via constructor
    using keyword arguments with sensible defaults. Failures are simulated by
    raising RuntimeError, matching the real implementation.
    """

    def __init__(
        self,
        *,
        default_branch: str = "main",
        protections: dict[str, BranchProtection] | None = None,
        create_status_fails: bool = False,
        default_branch_fails: bool = False,
        set_protection_fails: bool = False,
        delete_protection_fails: bool = False,
    ) -> None:
        """Create FakeGitHub with pre-configured state.

        Args:
            default_branch: Branch returned by get_default_branch()
            protections: Mapping of branch -> existing protection rule
            create_status_fails: Whether create_commit_status() raises
            default_branch_fails: Whether get_default_branch() raises
            set_protection_fails: Whether set_branch_protection() raises
            delete_protection_fails: Whether delete_branch_protection() raises
        """
        self._default_branch = default_branch
        self._protections = dict(protections) if protections is not None else {}
        self._create_status_fails = create_status_fails
        self._default_branch_fails = default_branch_fails
        self._set_protection_fails = set_protection_fails
        self._delete_protection_fails = delete_protection_fails

        self._created_statuses: list[CommitStatus] = []
        self._default_branch_calls: list[None] = []
        self._protection_reads: list[str] = []
        self._protection_writes: list[tuple[str, list[str]]] = []
        self._protection_deletes: list[str] = []

    def create_commit_status(self, cwd: Path, status: CommitStatus) -> None:
        if self._create_status_fails:
            raise RuntimeError(f"Failed to create commit status for {status.commit_sha}")
        self._created_statuses.append(status)

    def get_default_branch(self, cwd: Path) -> str:
        self._default_branch_calls.append(None)
        if self._default_branch_fails:
            raise RuntimeError("Failed to get repository metadata")
        return self._default_branch

    def get_branch_protection(self, cwd: Path, branch: str) -> BranchProtection | None:
        self._protection_reads.append(branch)
        return self._protections.get(branch)

    def set_branch_protection(self, cwd: Path, branch: str, contexts: list[str]) -> None:
        if self._set_protection_fails:
            raise RuntimeError(f"Failed to set branch protection for {branch}")
        self._protection_writes.append((branch, list(contexts)))
        self._protections[branch] = BranchProtection(
            branch=branch, required_contexts=frozenset(contexts)
        )

    def delete_branch_protection(self, cwd: Path, branch: str) -> None:
        if self._delete_protection_fails:
            raise RuntimeError(f"Failed to delete branch protection for {branch}")
        self._protection_deletes.append(branch)
        self._protections.pop(branch, None)

    @property
    def created_statuses(self) -> list[CommitStatus]:
        """Statuses passed to create_commit_status(), in call order."""
        return self._created_statuses

    @property
    def default_branch_calls(self) -> list[None]:
        """One entry per get_default_branch() call."""
        return self._default_branch_calls

    @property
    def protection_reads(self) -> list[str]:
        """Branches passed to get_branch_protection()."""
        return self._protection_reads

    @property
    def protection_writes(self) -> list[tuple[str, list[str]]]:
        """(branch, contexts) pairs passed to set_branch_protection()."""
        return self._protection_writes

    @property
    def protection_deletes(self) -> list[str]:
        """Branches passed to delete_branch_protection()."""
        return self._protection_deletes
