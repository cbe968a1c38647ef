"""Read and write .env files.

Reading guards the path (missing and unreadable files raise distinct errors)
and hands the whole text to :func:`envload.parser.parse`.  Writing formats
values so that parsing the output gives the same values back.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from pathlib import Path

from envload.errors import InvalidPathError, UnreadableFileError
from envload.parser import AmbientLookup, Value, parse

logger = logging.getLogger(__name__)

_QUOTES = ('"', "'")
# A backslash the decoder would read as the start of an escape, or one that
# would escape the closing quote.
_AMBIGUOUS_BACKSLASH_RE = re.compile(r'\\(?=["nr]|\Z)')


def read_env_text(path: str | Path) -> str:
    """Return the text of *path*, raising on a missing or unreadable file."""
    p = Path(path)
    if not p.exists():
        raise InvalidPathError(p)
    if not p.is_file():
        raise UnreadableFileError(p, "not a regular file")
    try:
        return p.read_text(encoding="utf-8")
    except PermissionError as e:
        raise UnreadableFileError(p, e.strerror) from e
    except UnicodeDecodeError as e:
        raise UnreadableFileError(p, "not valid UTF-8") from e
    except OSError as e:
        raise UnreadableFileError(p, e.strerror) from e


def parse_env_file(path: str | Path, ambient: AmbientLookup | None = None) -> dict[str, Value]:
    """Read a .env file and return an ordered dict of typed values."""
    result = parse(read_env_text(path), ambient)
    logger.debug("Parsed %d variable(s) from %s", len(result), path)
    return result


def format_env_value(value: Value) -> str:
    """Format a value for .env so that parsing the line gives it back.

    Bare text when safe, single quotes (verbatim) for single-line values that
    need quoting, double quotes with ``\\"``/``\\n``/``\\r`` escapes otherwise.
    Strings spelling ``true``/``false``/``null`` cannot survive a round trip:
    the parser coerces them whatever the quoting.

    Raises ``ValueError`` for a multi-line value with a backslash before
    ``"``, ``n``, ``r`` or at its end, which the format cannot represent.
    """
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if not value:
        return '""'
    multiline = "\n" in value or "\r" in value
    if not multiline and value == value.strip() and value[0] not in _QUOTES:
        return value
    if not multiline:
        return f"'{value}'"
    if _AMBIGUOUS_BACKSLASH_RE.search(value):
        raise ValueError(f"Multi-line value cannot be written to a .env file: {value!r}")
    escaped = value.replace('"', '\\"').replace("\n", "\\n").replace("\r", "\\r")
    return f'"{escaped}"'


def dumps(mapping: Mapping[str, Value]) -> str:
    """Render *mapping* as ``NAME=value`` lines in mapping order."""
    return "".join(f"{name}={format_env_value(value)}\n" for name, value in mapping.items())


def write_env_file(path: str | Path, mapping: Mapping[str, Value]) -> None:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(dumps(mapping), encoding="utf-8")
