"""Click group that dispatches signoff verbs and owns the error boundary."""

import logging
import traceback
from pathlib import Path
from typing import Any

import click

from gh_signoff.core.errors import SignoffError
from gh_signoff.output import error_output

logger = logging.getLogger(__name__)

DEFAULT_COMMAND = "create"

# Group-level flags, accepted before or after the verb
GROUP_FLAGS = ("--debug",)


class SignoffGroup(click.Group):
    """Click group with a default verb and a single failure exit code.

    - No verb, or a leading option that is not a help flag, runs `create`
      (so `gh signoff -f` is `gh signoff create -f`).
    - `--debug` may appear anywhere and is moved in front of the verb.
    - Usage errors, including unknown verbs, exit with 1 instead of click's 2.
    - SignoffError prints "Error: <message>" and exits 1.
    - Any other exception is reported with its location and exits 1.
    """

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        group_flags = [arg for arg in args if arg in GROUP_FLAGS]
        rest = [arg for arg in args if arg not in GROUP_FLAGS]
        if not rest or (rest[0].startswith("-") and rest[0] not in ctx.help_option_names):
            rest = [DEFAULT_COMMAND, *rest]
        return super().parse_args(ctx, [*group_flags, *rest])

    def invoke(self, ctx: click.Context) -> Any:
        try:
            return super().invoke(ctx)
        except SignoffError as e:
            logger.debug("%s failure: %s", e.kind.value, e.message)
            error_output(e.message)
            ctx.exit(1)
        except click.UsageError as e:
            e.exit_code = 1
            raise
        except (click.ClickException, click.exceptions.Exit, click.Abort):
            raise
        except Exception as e:
            logger.debug("Unexpected error", exc_info=True)
            frame = traceback.extract_tb(e.__traceback__)[-1]
            location = f"{Path(frame.filename).name}:{frame.lineno}"
            error_output(f"unexpected error at {location}: {e}")
            ctx.exit(1)
