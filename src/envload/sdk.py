"""python-dotenv style helpers: load a .env file into the environment in one call."""

from __future__ import annotations

from pathlib import Path

from envload.env_file import parse_env_file
from envload.environ import EnvStore, ambient_lookup, default_env, merge
from envload.parser import Value


def dotenv_values(path: str | Path = ".env", env: EnvStore | None = None) -> dict[str, Value]:
    """Return the variables of a .env file without modifying the environment.

    Parameters
    ----------
    path : str or Path, default ".env"
        File to parse.
    env : mapping, optional
        Store consulted for ``$NAME`` references the file does not define.
        Defaults to ``os.environ``; it is only read.

    Returns
    -------
    dict[str, str | bool | None]
        Variables in file order.

    Examples
    --------
    >>> from envload import dotenv_values
    >>> dotenv_values(".env.example")  # doctest: +SKIP
    {'DEBUG': True, 'DATABASE_URL': 'postgres://localhost/app'}
    """
    store = env if env is not None else default_env()
    return parse_env_file(path, ambient_lookup(store))


def load_dotenv(
    path: str | Path = ".env",
    override: bool = False,
    env: EnvStore | None = None,
) -> bool:
    """Load a .env file into the environment (python-dotenv compatible API).

    Parameters
    ----------
    path : str or Path, default ".env"
        File to load.
    override : bool, default False
        If True, overwrite names already in the environment. If False, only
        set names that are not set yet (matches python-dotenv semantics).
    env : mutable mapping, optional
        Store to load into. Defaults to ``os.environ``.

    Returns
    -------
    bool
        True if at least one variable was set or removed, False otherwise.

    Raises
    ------
    envload.errors.InvalidPathError
        The file does not exist.
    envload.errors.UnreadableFileError
        The file cannot be read.
    envload.errors.ParseError
        A double-quoted value is never closed.
    """
    store = env if env is not None else default_env()
    variables = parse_env_file(path, ambient_lookup(store))
    return merge(variables, store, replace_existing=override) > 0
