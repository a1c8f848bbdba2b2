"""Tests for the create command (and the default verb)."""

from pathlib import Path

from click.testing import CliRunner

from gh_signoff.cli.cli import cli
from gh_signoff.core.context import SignoffContext
from gh_signoff.gateway.git.fake import FakeGit
from gh_signoff.gateway.github.fake import FakeGitHub
from gh_signoff.gateway.shell.fake import FakeShell

REPO = Path("/test/repo")
SHA = "3f786850e387550fdab836ed7e6dc881de23001b"


def _clean_git(**overrides) -> FakeGit:
    state = {
        "upstream_branches": {REPO: "origin/main"},
        "head_shas": {REPO: SHA},
        "user_names": {REPO: "Jane Doe"},
    }
    state.update(overrides)
    return FakeGit(**state)


def _invoke(args: list[str], git: FakeGit, github: FakeGitHub, shell: FakeShell | None = None):
    ctx = SignoffContext.for_test(git=git, github=github, shell=shell, cwd=REPO)
    return CliRunner().invoke(cli, args, obj=ctx)


def test_clean_repository_creates_one_status() -> None:
    github = FakeGitHub()

    result = _invoke(["create"], _clean_git(), github)

    assert result.exit_code == 0, result.output
    assert len(github.created_statuses) == 1
    status = github.created_statuses[0]
    assert status.commit_sha == SHA
    assert status.state == "success"
    assert status.context == "signoff"
    assert status.description == "Jane Doe signed off"
    assert f"✓ Signed off on {SHA}" in result.output


def test_no_verb_defaults_to_create() -> None:
    github = FakeGitHub()

    result = _invoke([], _clean_git(), github)

    assert result.exit_code == 0, result.output
    assert len(github.created_statuses) == 1


def test_dirty_worktree_fails_without_remote_call() -> None:
    github = FakeGitHub()
    git = _clean_git(dirty_worktrees={REPO})

    result = _invoke(["create"], git, github)

    assert result.exit_code == 1
    assert "Error: repository has uncommitted or unpushed changes" in result.output
    assert github.created_statuses == []


def test_unpushed_commits_fail_without_remote_call() -> None:
    github = FakeGitHub()
    git = _clean_git(unpushed_commits={REPO: 2})

    result = _invoke(["create"], git, github)

    assert result.exit_code == 1
    assert "uncommitted or unpushed changes" in result.output
    assert github.created_statuses == []


def test_force_signs_off_dirty_worktree() -> None:
    github = FakeGitHub()
    git = _clean_git(dirty_worktrees={REPO}, unpushed_commits={REPO: 1})

    result = _invoke(["create", "-f"], git, github)

    assert result.exit_code == 0, result.output
    assert [s.commit_sha for s in github.created_statuses] == [SHA]


def test_leading_force_flag_runs_create() -> None:
    github = FakeGitHub()
    git = _clean_git(dirty_worktrees={REPO})

    result = _invoke(["-f"], git, github)

    assert result.exit_code == 0, result.output
    assert len(github.created_statuses) == 1


def test_force_skips_tracking_branch_requirement() -> None:
    github = FakeGitHub()
    git = _clean_git(upstream_branches={})

    result = _invoke(["create", "--force"], git, github)

    assert result.exit_code == 0, result.output
    assert len(github.created_statuses) == 1


def test_missing_tracking_branch_has_distinct_error() -> None:
    github = FakeGitHub()
    git = _clean_git(upstream_branches={})

    result = _invoke(["create"], git, github)

    assert result.exit_code == 1
    assert "Error: current branch is not tracking a remote branch" in result.output
    assert "uncommitted" not in result.output
    assert github.created_statuses == []


def test_dirty_worktree_reported_before_missing_tracking_branch() -> None:
    git = _clean_git(dirty_worktrees={REPO}, upstream_branches={})

    result = _invoke(["create"], git, FakeGitHub())

    assert result.exit_code == 1
    assert "uncommitted or unpushed changes" in result.output


def test_status_creation_failure() -> None:
    github = FakeGitHub(create_status_fails=True)

    result = _invoke(["create"], _clean_git(), github)

    assert result.exit_code == 1
    assert "Error: failed to create status" in result.output


def test_unset_user_name_fails_before_publishing() -> None:
    github = FakeGitHub()
    git = _clean_git(user_names={})

    result = _invoke(["create"], git, github)

    assert result.exit_code == 1
    assert "Error: git user.name is not set" in result.output
    assert github.created_statuses == []


def test_not_a_repository() -> None:
    git = FakeGit(status_failures={REPO})

    result = _invoke(["create"], git, FakeGitHub())

    assert result.exit_code == 1
    assert "Error: failed to read working tree status" in result.output


def test_missing_head_commit_with_force() -> None:
    git = FakeGit(user_names={REPO: "Jane Doe"})

    result = _invoke(["create", "-f"], git, FakeGitHub())

    assert result.exit_code == 1
    assert "Error: failed to get current commit" in result.output


def test_missing_gh_is_reported_before_any_operation() -> None:
    github = FakeGitHub()
    shell = FakeShell(installed_tools={"git": "/usr/bin/git"})

    result = _invoke(["create"], _clean_git(), github, shell)

    assert result.exit_code == 1
    assert "Error: gh is not installed" in result.output
    assert github.created_statuses == []


def test_missing_git_is_reported() -> None:
    shell = FakeShell(installed_tools={"gh": "/usr/bin/gh"})

    result = _invoke(["create"], _clean_git(), FakeGitHub(), shell)

    assert result.exit_code == 1
    assert "Error: git is not installed" in result.output
