import logging

import click

from gh_signoff.cli.commands.create import create_cmd
from gh_signoff.cli.commands.info import completion_cmd, help_cmd, version_cmd
from gh_signoff.cli.commands.protection import check_cmd, install_cmd, uninstall_cmd
from gh_signoff.cli.group import SignoffGroup
from gh_signoff.core.config import DEBUG_ENV_VAR
from gh_signoff.core.context import create_context

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags


@click.group(cls=SignoffGroup, context_settings=CONTEXT_SETTINGS)
@click.option("--debug", is_flag=True, help=f"Enable debug logging (or set {DEBUG_ENV_VAR}=1)")
@click.pass_context
def cli(ctx: click.Context, debug: bool) -> None:
    """Sign off on your work when tests pass locally.

    Without a command, signs off on the current commit (same as `create`).
    """
    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        ctx.obj = create_context(debug=debug)

    if debug or ctx.obj.config.debug:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s - %(levelname)s - %(message)s")
        # basicConfig is a no-op once the root logger has handlers
        logging.getLogger("gh_signoff").setLevel(logging.DEBUG)


cli.add_command(create_cmd)
cli.add_command(install_cmd)
cli.add_command(uninstall_cmd)
cli.add_command(check_cmd)
cli.add_command(version_cmd)
cli.add_command(completion_cmd)
cli.add_command(help_cmd)


def main() -> None:
    """CLI entry point used by the `gh-signoff` console script."""
    cli(prog_name="gh signoff")
