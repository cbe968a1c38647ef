"""``envload get`` command."""

from __future__ import annotations

import click

from envload.cli import _load_variables, cli
from envload.parser import value_to_text


@cli.command()
@click.argument("key")
@click.option("--default", "default", default=None, help="Value to print when KEY is not defined.")
@click.pass_context
def get(ctx: click.Context, key: str, default: str | None) -> None:
    """Print a single value from the .env file."""
    variables = _load_variables(ctx)
    if key not in variables:
        if default is None:
            raise click.ClickException(f"Key '{key}' not found.")
        click.echo(default)
        return
    click.echo(value_to_text(variables[key]))
