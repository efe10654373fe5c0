"""Splitting command lines and locating executables on PATH."""

from __future__ import annotations

import os
from collections.abc import Mapping, Sequence

from pipex.text import split


class CommandNotFound(Exception):
    """No executable for the command was found on PATH."""

    exit_status = 127

    def __init__(self, name: str) -> None:
        super().__init__(f"{name}: command not found")
        self.name = name


def split_cmd(whole_cmd: str) -> list[str]:
    """Split a command line on spaces into its words."""
    return split(whole_cmd, " ")


def find_path_value(env: Mapping[str, str] | None) -> str | None:
    """Return the PATH value from ``env``, or None when it has none."""
    if env is None:
        return None
    return env.get("PATH")


def find_command(name: str, env: Mapping[str, str] | None) -> str | None:
    """Return the first ``dir/name`` on PATH that may be executed, or None."""
    path_value = find_path_value(env)
    if path_value is None:
        return None
    for directory in split(path_value, ":"):
        candidate = f"{directory}/{name}"
        if os.access(candidate, os.X_OK):
            return candidate
    return None


def resolve_command(args: Sequence[str], env: Mapping[str, str] | None) -> str:
    """Return the executable path for ``args[0]``.

    Raises CommandNotFound when there is no command word or it is not on PATH.
    """
    name = args[0] if args else ""
    found = find_command(name, env) if args else None
    if found is None:
        raise CommandNotFound(name)
    return found