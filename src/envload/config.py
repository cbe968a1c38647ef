""".envload.toml configuration loading.

Searches upward from cwd for ``.envload.toml`` and merges with CLI flags.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

CONFIG_FILE_NAME: str = ".envload.toml"


@dataclass
class EnvloadConfig:
    """Resolved configuration for the current invocation."""

    path: str = ".env"
    override: bool = False
    required: list[str] = field(default_factory=list)
    config_path: Path | None = None

    def resolve_path(self) -> Path:
        """Return ``path``, relative to the config file's directory when not absolute."""
        p = Path(self.path)
        if p.is_absolute() or self.config_path is None:
            return p
        return self.config_path.parent / p


def find_config_file(start: Path | None = None) -> Path | None:
    """Walk upward from *start* (default cwd) looking for ``.envload.toml``."""
    cur = (start or Path.cwd()).resolve()
    while True:
        candidate = cur / CONFIG_FILE_NAME
        if candidate.is_file():
            return candidate
        if cur.parent == cur:
            return None
        cur = cur.parent


def load_config(path: Path | None = None) -> EnvloadConfig:
    """Load and return config.  Returns defaults if no file found."""
    if path is None:
        path = find_config_file()
    if path is None:
        return EnvloadConfig()

    raw: dict[str, Any] = tomllib.loads(path.read_text(encoding="utf-8"))
    section = raw.get("envload", {})

    required = section.get("required", [])
    if isinstance(required, str):
        required = [required]
    if not all(isinstance(name, str) for name in required):
        raise ValueError(f"{path}: envload.required must be a list of names")

    return EnvloadConfig(
        path=section.get("path", ".env"),
        override=bool(section.get("override", False)),
        required=list(required),
        config_path=path,
    )
