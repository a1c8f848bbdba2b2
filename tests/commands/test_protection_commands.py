"""Tests for install, uninstall, and check commands."""

from pathlib import Path

from click.testing import CliRunner

from gh_signoff.cli.cli import cli
from gh_signoff.core.context import SignoffContext
from gh_signoff.gateway.github.fake import FakeGitHub
from gh_signoff.gateway.github.types import BranchProtection
from gh_signoff.gateway.shell.fake import FakeShell

REPO = Path("/test/repo")


def _invoke(args: list[str], github: FakeGitHub, shell: FakeShell | None = None):
    ctx = SignoffContext.for_test(github=github, shell=shell, cwd=REPO)
    return CliRunner().invoke(cli, args, obj=ctx)


def _protection(branch: str, *contexts: str) -> BranchProtection:
    return BranchProtection(branch=branch, required_contexts=frozenset(contexts))


# ============================================================================
# check
# ============================================================================


def test_check_reports_required_signoff() -> None:
    github = FakeGitHub(protections={"main": _protection("main", "signoff")})

    result = _invoke(["check"], github)

    assert result.exit_code == 0, result.output
    assert "✓ GitHub main branch requires signoff" in result.output


def test_check_with_other_contexts_only() -> None:
    github = FakeGitHub(protections={"main": _protection("main", "ci/build")})

    result = _invoke(["check"], github)

    assert result.exit_code == 0
    assert "✗ GitHub main branch does not require signoff" in result.output


def test_check_with_empty_contexts() -> None:
    github = FakeGitHub(protections={"main": _protection("main")})

    result = _invoke(["check"], github)

    assert result.exit_code == 0
    assert "does not require signoff" in result.output


def test_check_without_protection_is_not_an_error() -> None:
    result = _invoke(["check"], FakeGitHub())

    assert result.exit_code == 0
    assert "✗ GitHub main branch does not require signoff" in result.output


def test_check_explicit_branch_skips_default_branch_lookup() -> None:
    github = FakeGitHub(protections={"release": _protection("release", "signoff")})

    result = _invoke(["check", "release"], github)

    assert result.exit_code == 0
    assert "✓ GitHub release branch requires signoff" in result.output
    assert github.default_branch_calls == []


def test_check_default_branch_failure() -> None:
    result = _invoke(["check"], FakeGitHub(default_branch_fails=True))

    assert result.exit_code == 1
    assert "Error: failed to get default branch" in result.output


# ============================================================================
# install
# ============================================================================


def test_install_resolves_default_branch() -> None:
    github = FakeGitHub(default_branch="trunk")

    result = _invoke(["install"], github)

    assert result.exit_code == 0, result.output
    assert len(github.default_branch_calls) == 1
    assert github.protection_writes == [("trunk", ["signoff"])]
    assert "✓ GitHub trunk branch now requires signoff" in result.output


def test_install_explicit_branch_skips_default_branch_lookup() -> None:
    github = FakeGitHub(default_branch="trunk")

    result = _invoke(["install", "main"], github)

    assert result.exit_code == 0, result.output
    assert github.default_branch_calls == []
    assert github.protection_writes == [("main", ["signoff"])]


def test_install_keeps_existing_required_contexts() -> None:
    github = FakeGitHub(protections={"main": _protection("main", "ci/test", "ci/build")})

    result = _invoke(["install", "main"], github)

    assert result.exit_code == 0, result.output
    assert github.protection_writes == [("main", ["ci/build", "ci/test", "signoff"])]


def test_install_is_idempotent() -> None:
    github = FakeGitHub(protections={"main": _protection("main", "signoff")})

    result = _invoke(["install", "main"], github)

    assert result.exit_code == 0
    assert github.protection_writes == [("main", ["signoff"])]


def test_install_failure() -> None:
    github = FakeGitHub(set_protection_fails=True)

    result = _invoke(["install", "main"], github)

    assert result.exit_code == 1
    assert "Error: failed to require signoff" in result.output


def test_install_then_check() -> None:
    github = FakeGitHub()
    runner = CliRunner()
    ctx = SignoffContext.for_test(github=github, cwd=REPO)

    runner.invoke(cli, ["install"], obj=ctx)
    result = runner.invoke(cli, ["check"], obj=ctx)

    assert "✓ GitHub main branch requires signoff" in result.output


# ============================================================================
# uninstall
# ============================================================================


def test_uninstall_deletes_protection() -> None:
    github = FakeGitHub(protections={"main": _protection("main", "signoff", "ci/test")})

    result = _invoke(["uninstall"], github)

    assert result.exit_code == 0, result.output
    assert github.protection_deletes == ["main"]
    assert "✓ GitHub main branch no longer requires signoff" in result.output


def test_uninstall_calls_delete_without_existing_protection() -> None:
    github = FakeGitHub()

    result = _invoke(["uninstall", "feature"], github)

    assert result.exit_code == 0
    assert github.protection_deletes == ["feature"]
    assert github.protection_reads == []


def test_uninstall_surfaces_collaborator_failure() -> None:
    github = FakeGitHub(delete_protection_fails=True)

    result = _invoke(["uninstall", "main"], github)

    assert result.exit_code == 1
    assert "Error: failed to remove branch protection" in result.output
    assert "Failed to delete branch protection for main" in result.output


def test_empty_branch_argument_is_rejected() -> None:
    github = FakeGitHub()

    result = _invoke(["install", ""], github)

    assert result.exit_code == 1
    assert "Error: branch name is required" in result.output
    assert github.protection_writes == []


def test_protection_commands_require_gh() -> None:
    github = FakeGitHub()
    shell = FakeShell(installed_tools={"git": "/usr/bin/git"})

    result = _invoke(["install"], github, shell)

    assert result.exit_code == 1
    assert "Error: gh is not installed" in result.output
    assert github.default_branch_calls == []
