"""Fake implementation of Git queries for testing."""

from pathlib import Path

from gh_signoff.gateway.git.abc import Git


class FakeGit(Git):
    """In-memory fake implementation of Git queries.

    This fake accepts pre-configured state in its constructor.
    All operations are read-only queries, so no mutation tracking is needed.

    Constructor Injection:
    ---------------------
    - dirty_worktrees: Set of cwds that report uncommitted changes
    - upstream_branches: Mapping of cwd -> upstream ref
    - unpushed_commits: Mapping of cwd -> number of commits ahead of upstream
    - head_shas: Mapping of cwd -> HEAD commit SHA
    - user_names: Mapping of cwd -> configured user.name
    - status_failures: Set of cwds where git status fails (not a repository)
    """

    def __init__(
        self,
        *,
        dirty_worktrees: set[Path] | None = None,
        upstream_branches: dict[Path, str] | None = None,
        unpushed_commits: dict[Path, int] | None = None,
        head_shas: dict[Path, str] | None = None,
        user_names: dict[Path, str] | None = None,
        status_failures: set[Path] | None = None,
    ) -> None:
        self._dirty_worktrees = dirty_worktrees if dirty_worktrees is not None else set()
        self._upstream_branches = upstream_branches if upstream_branches is not None else {}
        self._unpushed_commits = unpushed_commits if unpushed_commits is not None else {}
        self._head_shas = head_shas if head_shas is not None else {}
        self._user_names = user_names if user_names is not None else {}
        self._status_failures = status_failures if status_failures is not None else set()

    def has_uncommitted_changes(self, cwd: Path) -> bool:
        if cwd in self._status_failures:
            raise RuntimeError("Failed to get working tree status: not a git repository")
        return cwd in self._dirty_worktrees

    def get_upstream_branch(self, cwd: Path) -> str | None:
        return self._upstream_branches.get(cwd)

    def count_unpushed_commits(self, cwd: Path, upstream: str) -> int:
        return self._unpushed_commits.get(cwd, 0)

    def get_head_sha(self, cwd: Path) -> str | None:
        return self._head_shas.get(cwd)

    def get_git_user_name(self, cwd: Path) -> str | None:
        return self._user_names.get(cwd)
