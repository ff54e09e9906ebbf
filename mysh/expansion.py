"""Variable and filename expansion of command lines."""

from __future__ import annotations

import glob
from collections.abc import Iterable

from .environment import Environment

_GLOB_CHARS = "*[?"


class UndefinedVariable(LookupError):
    """Raised when a $ reference names no environment entry."""


class NoMatch(FileNotFoundError):
    """Raised when a filename pattern matches nothing."""


def expand_dollar(env: Environment, line: str) -> str:
    """Replace the first ``$`` reference in ``line`` by the variable's value.

    Everything after the ``$`` (with further ``$`` removed) is taken as the
    name, and the first entry starting with that name supplies the value.
    """
    index = line.find("$")
    if index < 0:
        return line
    value = line[index:]
    name = value if value == "$" else value.replace("$", "")
    for entry in env.lines():
        if entry.startswith(name):
            return line[:index] + entry[len(name) + 1:]
    raise UndefinedVariable(f"{name}: Undefined variable.")


def has_glob(arg: str) -> bool:
    """Return True when ``arg`` holds a pattern character."""
    return any(char in arg for char in _GLOB_CHARS)


def expand_globs(args: Iterable[str]) -> list[str]:
    """Replace every pattern argument by the sorted paths it matches."""
    result: list[str] = []
    for arg in args:
        if not has_glob(arg):
            result.append(arg)
            continue
        matches = sorted(glob.glob(arg))
        if not matches:
            raise NoMatch(f'"{arg}": No such file or directory')
        result.extend(matches)
    return result