"""``envload check`` command."""

from __future__ import annotations

import click
from rich.markup import escape

from envload.cli import _env_path, _load_variables, cli, console
from envload.errors import ValidationError
from envload.validator import Validator


@cli.command()
@click.option("--require", "-r", "required", multiple=True, help="Name that must be defined (repeatable).")
@click.option("--not-empty", is_flag=True, help="Required names must also have a non-empty value.")
@click.option("--integer", "integers", multiple=True, help="Name whose value must be an integer (repeatable).")
@click.option("--boolean", "booleans", multiple=True, help="Name whose value must be a boolean (repeatable).")
@click.pass_context
def check(
    ctx: click.Context,
    required: tuple[str, ...],
    not_empty: bool,
    integers: tuple[str, ...],
    booleans: tuple[str, ...],
) -> None:
    """Validate the .env file.

    Required names come from --require and from ``required`` in .envload.toml.
    """
    variables = _load_variables(ctx)
    names = list(dict.fromkeys([*ctx.obj["config"].required, *required]))
    env: dict[str, str] = {}
    try:
        validator = Validator(variables, names, env=env)
        validator.validate()
        if not_empty:
            validator.not_empty()
        if integers:
            Validator(variables, integers, env=env).is_integer()
        if booleans:
            Validator(variables, booleans, env=env).is_boolean()
    except ValidationError as e:
        raise click.ClickException(str(e))
    console.print(f"[green]{escape(str(_env_path(ctx)))}: {len(variables)} variable(s), all checks passed[/green]", soft_wrap=True)
