"""The alias table: definition, removal, listing and expansion of aliases."""

from __future__ import annotations

from collections.abc import Iterable
from functools import cmp_to_key

from .strutils import compare_nocase


def is_quoted(command: str) -> bool:
    """Return True when ``command`` starts and ends with the same quote character."""
    if not command:
        return False
    return command[0] in "'\"" and command[-1] == command[0]


class AliasTable:
    """Aliases by shortcut, kept in case-insensitive order of their names."""

    def __init__(self) -> None:
        self._aliases: dict[str, str] = {}

    def _ordered(self) -> list[tuple[str, str]]:
        return sorted(
            self._aliases.items(),
            key=cmp_to_key(lambda a, b: compare_nocase(a[0], b[0])),
        )

    def define(self, shortcut: str, words: Iterable[str]) -> None:
        """Define ``shortcut`` as the words joined by spaces.

        A quoted definition loses its double quotes; any other is stored
        inside parentheses.  Redefining a shortcut replaces it.
        """
        words = list(words)
        if not words:
            raise ValueError("alias: missing command")
        command = " ".join(words)
        if is_quoted(command):
            command = command.replace('"', "")
        else:
            command = f"({command})"
        self._aliases[shortcut] = command

    def remove(self, names: Iterable[str]) -> None:
        """Remove each of ``names``; names that are not defined are ignored."""
        names = list(names)
        if not names:
            raise ValueError("unalias: Too few arguments.")
        for name in names:
            self._aliases.pop(name, None)

    def expand(self, command: str) -> str:
        """Replace a leading alias in ``command`` by its definition.

        The first alias (in name order) whose shortcut starts the command is
        used; parentheses are removed from the result.
        """
        for shortcut, target in self._ordered():
            if command.startswith(shortcut):
                expanded = target + command[len(shortcut):]
                return expanded.replace("(", "").replace(")", "")
        return command

    def listing(self) -> list[str]:
        """Return one line per alias: shortcut, tab, space, definition."""
        return [f"{shortcut}\t {command}" for shortcut, command in self._ordered()]

    def __contains__(self, shortcut: object) -> bool:
        return shortcut in self._aliases