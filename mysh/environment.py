"""The shell's environment: an ordered list of NAME=value entries."""

from __future__ import annotations

import string
from collections.abc import Iterable, Mapping

from .strutils import compare_nocase_prefix


class InvalidVariableName(ValueError):
    """Raised when a name cannot be used as an environment variable."""


def validate_name(name: str) -> None:
    """Raise InvalidVariableName unless ``name`` is letters, digits and underscores, not led by a digit."""
    if not name or name[0] in string.digits:
        raise InvalidVariableName("setenv: Variable name must begin with a letter.")
    for index, char in enumerate(name):
        allowed = (
            char == "_"
            or char in string.ascii_letters
            or (index > 0 and char in string.digits)
        )
        if not allowed:
            raise InvalidVariableName(
                "setenv: Variable name must contain alphanumeric characters."
            )


class Environment:
    """Environment entries kept in order, as the shell passes them to programs."""

    def __init__(self, entries: Iterable[str] | Mapping[str, str] = ()) -> None:
        if isinstance(entries, Mapping):
            entries = (f"{key}={value}" for key, value in entries.items())
        self._entries = list(entries)

    @staticmethod
    def _matches(entry: str, name: str) -> bool:
        key = f"{name}="
        return compare_nocase_prefix(entry, key, len(key)) == 0

    def get(self, name: str) -> str | None:
        """Return the value of ``name`` (exact case), or None when it is not set."""
        key = f"{name}="
        for entry in self._entries:
            if entry.startswith(key):
                return entry[len(key):]
        return None

    def set(self, name: str, value: str | None = None) -> None:
        """Set ``name``, replacing the first entry that matches it regardless of case."""
        validate_name(name)
        entry = f"{name}={value or ''}"
        for position, existing in enumerate(self._entries):
            if self._matches(existing, name):
                self._entries[position] = entry
                return
        self._entries.append(entry)

    def unset(self, name: str) -> None:
        """Remove every entry matching ``name`` regardless of case; KeyError if none does."""
        if name not in self:
            raise KeyError(name)
        self._entries = [entry for entry in self._entries if not self._matches(entry, name)]

    def __contains__(self, name: object) -> bool:
        if not isinstance(name, str):
            return False
        return any(self._matches(entry, name) for entry in self._entries)

    def lines(self) -> list[str]:
        """Return the entries in order."""
        return list(self._entries)

    def copy(self) -> Environment:
        """Return an independent copy."""
        return Environment(self._entries)