import click

from gh_signoff.core.context import SignoffContext
from gh_signoff.core.dependencies import require_tools
from gh_signoff.core.signoff import create_signoff
from gh_signoff.output import success_output


@click.command("create")
@click.option(
    "-f",
    "--force",
    is_flag=True,
    help="Sign off even with uncommitted or unpushed changes",
)
@click.pass_obj
def create_cmd(ctx: SignoffContext, force: bool) -> None:
    """Sign off on the current commit.

    Creates a successful "signoff" commit status on HEAD, attributed to your
    git user.name. The working tree must be clean and every commit pushed to
    the tracking branch, unless -f is given.

    Examples:

    \b
      gh signoff
      gh signoff create -f
    """
    require_tools(ctx.shell, "git", "gh")
    status = create_signoff(ctx.git, ctx.github, ctx.cwd, force=force)
    success_output(f"Signed off on {status.commit_sha}")
