"""Commands that manage the signoff requirement on a branch."""

import click

from gh_signoff.core import protection
from gh_signoff.core.context import SignoffContext
from gh_signoff.core.dependencies import require_tools
from gh_signoff.output import failure_output, success_output

BRANCH_ARGUMENT = click.argument("branch", required=False)


@click.command("install")
@BRANCH_ARGUMENT
@click.pass_obj
def install_cmd(ctx: SignoffContext, branch: str | None) -> None:
    """Require signoff before merging into BRANCH.

    BRANCH defaults to the repository's default branch. This replaces the
    branch protection rule: signoff becomes a required status check (existing
    required checks are kept), and admin enforcement, required reviews, and
    push restrictions are turned off.
    """
    require_tools(ctx.shell, "git", "gh")
    resolved = protection.install(ctx.github, ctx.cwd, branch)
    success_output(f"GitHub {resolved} branch now requires signoff")


@click.command("uninstall")
@BRANCH_ARGUMENT
@click.pass_obj
def uninstall_cmd(ctx: SignoffContext, branch: str | None) -> None:
    """Remove branch protection from BRANCH.

    BRANCH defaults to the repository's default branch. The whole protection
    rule is deleted, not only the signoff check.
    """
    require_tools(ctx.shell, "git", "gh")
    resolved = protection.uninstall(ctx.github, ctx.cwd, branch)
    success_output(f"GitHub {resolved} branch no longer requires signoff")


@click.command("check")
@BRANCH_ARGUMENT
@click.pass_obj
def check_cmd(ctx: SignoffContext, branch: str | None) -> None:
    """Check whether BRANCH requires signoff.

    BRANCH defaults to the repository's default branch.
    """
    require_tools(ctx.shell, "git", "gh")
    resolved, required = protection.check(ctx.github, ctx.cwd, branch)
    if required:
        success_output(f"GitHub {resolved} branch requires signoff")
    else:
        failure_output(f"GitHub {resolved} branch does not require signoff")
