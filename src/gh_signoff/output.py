"""Output helpers: results go to stdout, errors to stderr."""

import click

CHECK_MARK = "✓"
CROSS_MARK = "✗"


def user_output(message: str = "") -> None:
    click.echo(message)


def success_output(message: str) -> None:
    user_output(click.style(CHECK_MARK, fg="green") + f" {message}")


def failure_output(message: str) -> None:
    user_output(click.style(CROSS_MARK, fg="red") + f" {message}")


def error_output(message: str) -> None:
    """Print an "Error: ..." line on stderr."""
    click.echo(click.style("Error: ", fg="red") + message, err=True)
