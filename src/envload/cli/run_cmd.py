"""``envload run`` command."""

from __future__ import annotations

import os
import subprocess

import click

from envload.cli import _load_variables, cli, console
from envload.environ import merge


@cli.command(context_settings={"ignore_unknown_options": True, "allow_interspersed_args": False})
@click.option(
    "--override/--no-override", default=None,
    help="Let the .env file replace variables already set (default: from .envload.toml, else no).",
)
@click.argument("command", nargs=-1, required=True, type=click.UNPROCESSED)
@click.pass_context
def run(ctx: click.Context, override: bool | None, command: tuple[str, ...]) -> None:
    """Run COMMAND with the .env file loaded into its environment.

    Example: envload run -- python manage.py runserver
    """
    variables = _load_variables(ctx)
    if override is None:
        override = ctx.obj["config"].override
    env = dict(os.environ)
    merge(variables, env, replace_existing=override)
    try:
        proc = subprocess.run(list(command), env=env)
    except FileNotFoundError:
        raise click.ClickException(f"Command not found: {command[0]}")
    if ctx.obj["verbose"]:
        console.print(f"[dim]{command[0]} exited with {proc.returncode}[/dim]")
    ctx.exit(proc.returncode)
