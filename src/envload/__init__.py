# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""envload -- load .env files into the environment with quoting, expansion and typed values."""

from envload.dotenv import Dotenv
from envload.errors import (
    DecodeError,
    EnvloadError,
    InvalidPathError,
    MissingVariableError,
    ParseError,
    UnreadableFileError,
    ValidationError,
)
from envload.parser import parse
from envload.sdk import dotenv_values, load_dotenv
from envload.validator import Validator

__all__ = [
    "__version__",
    "DecodeError",
    "Dotenv",
    "EnvloadError",
    "InvalidPathError",
    "MissingVariableError",
    "ParseError",
    "UnreadableFileError",
    "ValidationError",
    "Validator",
    "dotenv_values",
    "load_dotenv",
    "parse",
]
__version__ = "0.1.0"
