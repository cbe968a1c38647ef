"""Checks over the variables produced by a load.

Rules are chainable::

    dotenv = Dotenv.create_immutable(".")
    dotenv.load()
    dotenv.required(["DB_PORT"]).not_empty().is_integer().validate()
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence

from envload.environ import EnvStore, default_env
from envload.errors import MissingVariableError, ValidationError
from envload.parser import Value, value_to_text

_INTEGER_RE = re.compile(r"[+-]?\d+")
_BOOLEAN_WORDS = frozenset({"true", "false", "1", "0", "yes", "no", "on", "off"})


class Validator:
    """Validate a set of required names against loaded variables."""

    def __init__(
        self,
        variables: dict[str, Value],
        required: Sequence[str],
        env: EnvStore | None = None,
    ) -> None:
        self._variables = variables
        self._required = list(required)
        self._env = env if env is not None else default_env()

    @property
    def required(self) -> list[str]:
        return list(self._required)

    def _is_set(self, name: str) -> bool:
        return self._variables.get(name) is not None

    def _present(self) -> Iterable[tuple[str, Value]]:
        for name in self._required:
            if name in self._variables:
                yield name, self._variables[name]

    def _check(self, message: str, bad: list[str]) -> Validator:
        if bad:
            raise ValidationError(message, bad)
        return self

    def validate(self) -> None:
        """Raise :class:`MissingVariableError` naming every absent variable.

        A name whose value is ``None`` (``NAME=`` or ``NAME=null``) counts as absent.
        """
        missing = [name for name in self._required if not self._is_set(name)]
        if missing:
            raise MissingVariableError(missing)

    def not_empty(self) -> Validator:
        """Present variables must not be ``None``, ``""`` or ``False``."""
        bad = [name for name, value in self._present() if value is None or value == "" or value is False]
        return self._check("Environment variables must not be empty", bad)

    def is_integer(self) -> Validator:
        bad = [
            name for name, value in self._present()
            if not isinstance(value, str) or _INTEGER_RE.fullmatch(value.strip()) is None
        ]
        return self._check("Environment variables must be integers", bad)

    def is_boolean(self) -> Validator:
        bad = [
            name for name, value in self._present()
            if not isinstance(value, bool)
            and (value is None or value.strip().lower() not in _BOOLEAN_WORDS)
        ]
        return self._check("Environment variables must be booleans", bad)

    def allowed_values(self, choices: Iterable[str]) -> Validator:
        """Present variables must spell one of *choices* exactly."""
        allowed = set(choices)
        bad = [name for name, value in self._present() if value_to_text(value) not in allowed]
        return self._check("Environment variables have a value outside the allowed set", bad)

    def default_to(self, default: Value) -> None:
        """Give every absent or ``None`` required name *default*, in the variables and the env store."""
        for name in self._required:
            if self._is_set(name):
                continue
            self._variables[name] = default
            if default is not None:
                self._env[name] = value_to_text(default)
