"""Resolving a command name to an executable file through PATH."""

from __future__ import annotations

import os
import sys
from typing import Mapping, Optional

from pipexpy.strings import split


def _environment(env: Optional[Mapping[str, str]]) -> Mapping[str, str]:
    return os.environ if env is None else env


def _is_executable(path: str) -> bool:
    return os.access(path, os.X_OK)


def search_dirs(env: Optional[Mapping[str, str]] = None) -> list[str]:
    """Return the directories listed in PATH, empty entries dropped.

    Raises LookupError when the environment has no PATH variable.
    """
    environment = _environment(env)
    if "PATH" not in environment:
        raise LookupError("Cant find path in env!")
    return split(environment["PATH"], ":")


def command_name(full_cmd: str) -> Optional[str]:
    """Return the first space-separated word of a command line, or None if there is none."""
    words = split(full_cmd, " ")
    return words[0] if words else None


def find_command_path(
    full_cmd: Optional[str], env: Optional[Mapping[str, str]] = None
) -> Optional[str]:
    """Locate the executable for a command, or return None when there is none.

    The command itself is tried first; a name starting with '.' or '/' is
    never searched for. Otherwise each PATH directory is tried in order with
    the command's first word, and the first executable match is returned.
    """
    if not full_cmd or full_cmd[0] == " ":
        return None
    if _is_executable(full_cmd):
        return full_cmd
    if full_cmd[0] in "./":
        return None
    environment = _environment(env)
    if not environment:
        return None
    try:
        directories = search_dirs(environment)
    except LookupError as exc:
        print(exc, file=sys.stderr)
        return None
    name = command_name(full_cmd)
    if name is None:
        return None
    for directory in directories:
        candidate = f"{directory}/{name}"
        if _is_executable(candidate):
            return candidate
    return None