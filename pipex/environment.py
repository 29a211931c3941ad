"""Environment lookups and command resolution along PATH."""

from __future__ import annotations

import os
from collections.abc import Iterable, Mapping
from typing import Union

from .strings import split

Environment = Union[Mapping[str, str], Iterable[str]]


def get_env(name: str, env: Environment) -> str | None:
    """Return the value of ``name`` in ``env``, or ``None`` if it is absent.

    ``env`` is either a mapping or a sequence of ``NAME=value`` entries; in
    the latter case the first entry whose name matches exactly wins.
    """
    if isinstance(env, Mapping):
        return env.get(name)
    for entry in env:
        key, _, value = entry.partition("=")
        if key == name:
            return value
    return None


def find_executable(cmd: str, env: Environment) -> str:
    """Resolve the first word of ``cmd`` against the directories of PATH.

    Returns ``directory/word`` for the first directory holding an executable
    of that name, or ``cmd`` unchanged when there is none.
    """
    words = split(cmd, " ")
    search = get_env("PATH", env)
    if not words or search is None:
        return cmd
    for directory in split(search, ":"):
        candidate = f"{directory}/{words[0]}"
        if os.access(candidate, os.F_OK | os.X_OK):
            return candidate
    return cmd