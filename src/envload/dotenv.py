# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Load a .env file from a directory into an environment store."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path
from typing import TypeVar

from envload import environ
from envload.env_file import parse_env_file
from envload.environ import EnvStore, ambient_lookup, default_env, merge
from envload.errors import InvalidPathError
from envload.parser import Value
from envload.validator import Validator

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_FILE: str = ".env"


class Dotenv:
    """A .env file bound to an environment store and a merge policy.

    Use :meth:`create_immutable` to keep variables that are already set, or
    :meth:`create_mutable` to let the file replace them.
    """

    def __init__(
        self,
        path: str | Path,
        file: str = DEFAULT_FILE,
        immutable: bool = True,
        env: EnvStore | None = None,
    ) -> None:
        self._path = Path(path)
        self._file = file
        self._immutable = immutable
        self._env = env if env is not None else default_env()
        self._variables: dict[str, Value] = {}

    @classmethod
    def create_immutable(cls, path: str | Path, file: str = DEFAULT_FILE, env: EnvStore | None = None) -> Dotenv:
        return cls(path, file, immutable=True, env=env)

    @classmethod
    def create_mutable(cls, path: str | Path, file: str = DEFAULT_FILE, env: EnvStore | None = None) -> Dotenv:
        return cls(path, file, immutable=False, env=env)

    @property
    def file_path(self) -> Path:
        return self._path / self._file

    @property
    def immutable(self) -> bool:
        return self._immutable

    @property
    def variables(self) -> dict[str, Value]:
        """Variables from the last :meth:`load` (a copy)."""
        return dict(self._variables)

    def load(self) -> dict[str, Value]:
        """Parse the file and merge it into the env store.

        Raises :class:`~envload.errors.InvalidPathError` if the file is
        missing, :class:`~envload.errors.UnreadableFileError` if it cannot be
        read and :class:`~envload.errors.ParseError` on an unterminated quote.
        The env store is untouched when any of these is raised.
        """
        variables = parse_env_file(self.file_path, ambient_lookup(self._env))
        self._variables = variables
        written = merge(variables, self._env, replace_existing=not self._immutable)
        logger.debug(
            "Loaded %d variable(s) from %s, %d applied (%s)",
            len(variables), self.file_path, written,
            "immutable" if self._immutable else "mutable",
        )
        return self.variables

    def safe_load(self) -> dict[str, Value]:
        """Like :meth:`load`, but a missing file yields an empty mapping."""
        try:
            return self.load()
        except InvalidPathError:
            logger.debug("No .env file at %s", self.file_path)
            self._variables = {}
            return {}

    def required(self, names: Sequence[str] | str) -> Validator:
        """Return a :class:`Validator` for *names* over the loaded variables."""
        if isinstance(names, str):
            names = [names]
        return Validator(self._variables, names, env=self._env)

    @staticmethod
    def get(key: str, default: T | None = None, env: EnvStore | None = None) -> str | T | None:
        """Read *key* from *env* (default: the process environment)."""
        return environ.get(env if env is not None else default_env(), key, default)
