# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Exceptions raised while loading and validating .env files."""

from __future__ import annotations

from collections.abc import Sequence


class EnvloadError(Exception):
    """Base class for every error raised by envload."""


class InvalidPathError(EnvloadError, FileNotFoundError):
    """The .env file does not exist."""

    def __init__(self, path: object) -> None:
        self.path = str(path)
        super().__init__(f"The .env file does not exist: {self.path}")


class UnreadableFileError(EnvloadError, PermissionError):
    """The .env file exists but cannot be read."""

    def __init__(self, path: object, reason: str | None = None) -> None:
        self.path = str(path)
        message = f"The .env file is not readable: {self.path}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class ParseError(EnvloadError, ValueError):
    """A double-quoted value is never closed before the input ends.

    ``line`` is the 1-based physical line holding the opening quote.
    """

    def __init__(self, name: str, line: int) -> None:
        self.name = name
        self.line = line
        super().__init__(f"Unterminated double-quoted value for {name!r} starting on line {line}")


DecodeError = ParseError


class ValidationError(EnvloadError, ValueError):
    """One or more variables failed a validation rule."""

    def __init__(self, message: str, names: Sequence[str]) -> None:
        self.names = list(names)
        super().__init__(f"{message}: {', '.join(self.names)}")


class MissingVariableError(ValidationError):
    """Required variables are absent after a load."""

    def __init__(self, names: Sequence[str]) -> None:
        super().__init__("Missing required environment variables", names)
