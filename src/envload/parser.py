# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Parse .env text into an ordered mapping of typed values.

Handles:
  - blank lines and full-line ``#`` comments
  - ``NAME=VALUE`` split at the first ``=`` (later ``=`` stay in the value)
  - single-quoted values (verbatim) and double-quoted values
    (``\\"``, ``\\n``, ``\\r`` escapes, may span several physical lines)
  - ``${NAME}`` and ``$NAME`` references to earlier lines or the ambient
    environment
  - ``true`` / ``false`` / ``null`` / empty coerced to ``True`` / ``False`` / ``None``

Lines with an invalid name or without ``=`` are skipped silently.  The parser
never touches ``os.environ``; the ambient environment is passed in as a lookup
callable.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Iterable, Iterator, Mapping
from typing import NamedTuple

from envload.errors import ParseError

logger = logging.getLogger(__name__)

Value = str | bool | None
AmbientLookup = Callable[[str], str | None]

_NAME_RE = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")

_DOUBLE_QUOTED_RE = re.compile(r'"(.*)"', re.DOTALL)
_SINGLE_QUOTED_RE = re.compile(r"'(.*)'", re.DOTALL)
_UNESCAPED_QUOTE_RE = re.compile(r'(?<!\\)"')

_REFERENCE_RE = re.compile(
    r"""
    \$
    (?:
        \{([A-Za-z_][A-Za-z0-9_]*)\}   # ${NAME}
      | ([A-Za-z_][A-Za-z0-9_]*)       # $NAME
    )
    """,
    re.VERBOSE,
)

# Applied in order: \" first so an escaped quote never becomes part of \n or \r.
_ESCAPES = (('\\"', '"'), ("\\n", "\n"), ("\\r", "\r"))


class Assignment(NamedTuple):
    """One ``NAME=VALUE`` line before its value is decoded."""

    name: str
    raw_value: str


def is_valid_name(name: str) -> bool:
    return _NAME_RE.fullmatch(name) is not None


def value_to_text(value: Value) -> str:
    """Return the text a resolved value stands for in the environment."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return value


# ---------------------------------------------------------------------------
# Tokenizer and splitter
# ---------------------------------------------------------------------------

def iter_lines(physical: Iterator[tuple[int, str]]) -> Iterator[tuple[int, str]]:
    """Yield ``(line_number, stripped_line)`` for lines that may hold an assignment.

    *physical* is shared with the value decoder: lines it pulls to finish a
    multi-line value are gone from *physical* before this generator resumes.
    """
    for number, line in physical:
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue
        yield number, stripped


def split_assignment(line: str) -> Assignment | None:
    """Split *line* at its first ``=``; return ``None`` for lines to skip."""
    name, sep, raw_value = line.partition("=")
    if not sep:
        return None
    name = name.strip()
    if not is_valid_name(name):
        return None
    return Assignment(name, raw_value.strip())


# ---------------------------------------------------------------------------
# Value decoder
# ---------------------------------------------------------------------------

def _is_open_double_quote(text: str) -> bool:
    return text.startswith('"') and _UNESCAPED_QUOTE_RE.search(text[1:]) is None


def _unescape(text: str) -> str:
    for escaped, char in _ESCAPES:
        text = text.replace(escaped, char)
    return text


def decode_value(raw: str, following: Iterator[str] | None = None, *, name: str = "", line: int = 0) -> str:
    """Resolve quoting and escapes of a raw value.

    A double-quoted value with no closing quote on its own line pulls lines
    from *following* (joined with ``\\n``) up to the first one holding an
    unescaped ``"``.  Running out of lines raises :class:`ParseError`.
    *name* and *line* only feed the error message.
    """
    if not raw:
        return ""
    if _is_open_double_quote(raw):
        parts = [raw]
        for extra in following or ():
            if _UNESCAPED_QUOTE_RE.search(extra):
                parts.append(extra.rstrip())
                break
            parts.append(extra)
        else:
            raise ParseError(name, line)
        raw = "\n".join(parts)

    m = _DOUBLE_QUOTED_RE.fullmatch(raw)
    if m is not None:
        return _unescape(m.group(1))
    m = _SINGLE_QUOTED_RE.fullmatch(raw)
    if m is not None:
        return m.group(1)
    return raw


# ---------------------------------------------------------------------------
# Expander and coercer
# ---------------------------------------------------------------------------

def expand_value(
    value: str,
    resolved: Mapping[str, Value],
    ambient: AmbientLookup | None = None,
) -> str:
    """Replace ``${NAME}`` and ``$NAME`` with earlier values, then ambient ones.

    Unknown names are left as written.  Substituted text is not scanned again.
    """
    if "$" not in value:
        return value

    def _substitute(m: re.Match[str]) -> str:
        ref = m.group(1) or m.group(2)
        if ref in resolved:
            return value_to_text(resolved[ref])
        found = ambient(ref) if ambient is not None else None
        if found is None:
            return m.group(0)
        return found

    return _REFERENCE_RE.sub(_substitute, value)


def coerce_value(text: str) -> Value:
    """Map ``true``/``false``/``null``/empty (any case) to bool or ``None``."""
    lowered = text.lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    if lowered in ("null", ""):
        return None
    return text


# ---------------------------------------------------------------------------
# Assembler
# ---------------------------------------------------------------------------

def parse_lines(lines: Iterable[str], ambient: AmbientLookup | None = None) -> dict[str, Value]:
    """Parse physical lines (without line endings) into an ordered dict.

    Each value is expanded against the entries before it, so references to
    names defined later in the file stay literal.
    """
    result: dict[str, Value] = {}
    physical = enumerate(lines, start=1)
    following = (text for _, text in physical)
    for number, line in iter_lines(physical):
        assignment = split_assignment(line)
        if assignment is None:
            logger.debug("Skipping line %d: not a NAME=VALUE assignment", number)
            continue
        decoded = decode_value(assignment.raw_value, following, name=assignment.name, line=number)
        expanded = expand_value(decoded, result, ambient)
        result[assignment.name] = coerce_value(expanded)
    return result


def parse(content: str, ambient: AmbientLookup | None = None) -> dict[str, Value]:
    """Parse .env *content*; *ambient* resolves names not defined in the file."""
    return parse_lines(content.splitlines(), ambient)
