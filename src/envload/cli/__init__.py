# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""envload CLI -- inspect, validate and run commands with a .env file.

The CLI is split into per-command modules under this package.  The ``cli``
click group and shared helpers (``console``, ``_load_variables``, etc.) live
here so every command module can import them.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler

from envload import __version__
from envload.config import load_config
from envload.errors import EnvloadError
from envload.parser import Value
from envload.sdk import dotenv_values

console = Console(stderr=True)


# ---------------------------------------------------------------------------
# Shared helpers
# ---------------------------------------------------------------------------

def _mask(value: str) -> str:
    if len(value) <= 6:
        return "****"
    return value[:3] + "****" + value[-3:]


def _env_path(ctx: click.Context) -> Path:
    return ctx.obj["path"]


def _load_variables(ctx: click.Context) -> dict[str, Value]:
    """Parse the selected .env file, turning library errors into CLI errors."""
    try:
        return dotenv_values(_env_path(ctx))
    except EnvloadError as e:
        raise click.ClickException(str(e))


def _configure_logging(verbose: bool) -> None:
    if not verbose:
        return
    log = logging.getLogger("envload")
    if not any(isinstance(h, RichHandler) for h in log.handlers):
        log.addHandler(RichHandler(console=console, show_path=False))
    log.setLevel(logging.DEBUG)


# ---------------------------------------------------------------------------
# Top-level click group
# ---------------------------------------------------------------------------

@click.group()
@click.option(
    "--path", default=None,
    help="Path to the .env file (default: ENVLOAD_PATH, then .envload.toml, else .env).",
)
@click.option("--verbose", "-v", is_flag=True, help="Verbose output.")
@click.version_option(__version__)
@click.pass_context
def cli(ctx: click.Context, path: str | None, verbose: bool) -> None:
    """Load .env files: show, check, or run a command with them."""
    _configure_logging(verbose)
    cfg = load_config()
    ctx.ensure_object(dict)
    ctx.obj["config"] = cfg
    # Explicit option, then environment variable, then config file
    if path is not None:
        ctx.obj["path"] = Path(path)
    elif os.environ.get("ENVLOAD_PATH"):
        ctx.obj["path"] = Path(os.environ["ENVLOAD_PATH"])
    else:
        ctx.obj["path"] = cfg.resolve_path()
    ctx.obj["verbose"] = verbose


# ---------------------------------------------------------------------------
# Register all command modules (import triggers @cli.command registration)
# ---------------------------------------------------------------------------

from envload.cli import (  # noqa: E402, F401
    show_cmd,
    get_cmd,
    check_cmd,
    run_cmd,
)
