"""Output helper for operator-facing messages.

Progress and diagnostics go to stderr; stdout carries only the connection
summary.
"""

import click


def user_output(message: str = "", nl: bool = True, color: bool | None = None) -> None:
    """Write a message for the operator to stderr."""
    click.echo(message, nl=nl, err=True, color=color)
