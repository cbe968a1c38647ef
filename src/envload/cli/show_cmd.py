"""``envload show`` command."""

from __future__ import annotations

import json
import sys

import click
import yaml
from rich.table import Table
from rich.text import Text

from envload.cli import _env_path, _load_variables, _mask, cli, console
from envload.env_file import dumps
from envload.parser import Value, value_to_text


def _type_name(value: Value) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "bool"
    return "str"


@cli.command()
@click.option(
    "--format", "fmt",
    type=click.Choice(["table", "dotenv", "json", "yaml"]),
    default="table",
    help="Output format: table (default, masked), dotenv (NAME=value), json, yaml.",
)
@click.option("--reveal", is_flag=True, help="Show values in table output instead of masking them.")
@click.pass_context
def show(ctx: click.Context, fmt: str, reveal: bool) -> None:
    """Print the variables parsed from the .env file."""
    variables = _load_variables(ctx)

    if fmt == "json":
        click.echo(json.dumps(variables, indent=2))
    elif fmt == "yaml":
        yaml.safe_dump(variables, sys.stdout, default_flow_style=False, sort_keys=False)
    elif fmt == "dotenv":
        try:
            text = dumps(variables)
        except ValueError as e:
            raise click.ClickException(str(e))
        sys.stdout.write(text)
    else:
        table = Table(title=Text(f"Variables (file: {_env_path(ctx)})"))
        table.add_column("Key", style="white")
        table.add_column("Type", style="cyan")
        table.add_column("Value" if reveal else "Value (masked)", style="dim")
        if not variables:
            table.add_row("(empty)", "", "(empty)")
        for name, value in variables.items():
            text = value_to_text(value)
            if not reveal and isinstance(value, str):
                text = _mask(text)
            table.add_row(Text(name), _type_name(value), Text(text))
        console.print(table)
