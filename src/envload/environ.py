# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Apply a parsed mapping to an environment store.

The store is any ``MutableMapping[str, str]``.  Production code passes
``os.environ``; tests pass a plain dict.  This is the only place envload
mutates environment state.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping, MutableMapping
from typing import TypeVar

from envload.parser import AmbientLookup, Value, value_to_text

logger = logging.getLogger(__name__)

T = TypeVar("T")

EnvStore = MutableMapping[str, str]


def default_env() -> EnvStore:
    """Return the process environment."""
    return os.environ


def ambient_lookup(env: Mapping[str, str]) -> AmbientLookup:
    """Return a parser lookup that reads names from *env*."""
    return env.get


def merge(mapping: Mapping[str, Value], env: EnvStore, replace_existing: bool) -> int:
    """Write *mapping* into *env*; return how many names were written or removed.

    With ``replace_existing=False`` names already in *env* are left alone.
    Booleans are written as ``"true"``/``"false"``.  A ``None`` value removes
    the name from *env* (when replacing is allowed) so it reads as unset.
    """
    changed = 0
    for name, value in mapping.items():
        if not replace_existing and name in env:
            logger.debug("Keeping existing %s", name)
            continue
        if value is None:
            if name in env:
                del env[name]
                changed += 1
            continue
        env[name] = value_to_text(value)
        changed += 1
    return changed


def get(env: Mapping[str, str], key: str, default: T | None = None) -> str | T | None:
    """Return ``env[key]`` if set, else *default*."""
    if key in env:
        return env[key]
    return default
