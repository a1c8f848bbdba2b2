"""Informational commands: version, completion, help."""

import click

from gh_signoff.core.completion import SUPPORTED_SHELLS, ShellName, completion_script
from gh_signoff.core.context import SignoffContext
from gh_signoff.output import user_output


@click.command("version")
@click.pass_obj
def version_cmd(ctx: SignoffContext) -> None:
    """Show the gh-signoff version."""
    user_output(f"gh-signoff {ctx.config.version}")


@click.command("completion")
@click.argument("shell", type=click.Choice(SUPPORTED_SHELLS), default="bash", required=False)
def completion_cmd(shell: ShellName) -> None:
    """Print a completion script for SHELL (bash, zsh, or fish).

    Examples:

    \b
      # bash
      source <(gh-signoff completion)

    \b
      # zsh
      source <(gh-signoff completion zsh)

    \b
      # fish
      gh-signoff completion fish | source
    """
    click.echo(completion_script(shell), nl=False)


@click.command("help")
@click.pass_context
def help_cmd(ctx: click.Context) -> None:
    """Show usage."""
    parent = ctx.parent if ctx.parent is not None else ctx
    user_output(parent.get_help())
