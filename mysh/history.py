"""Command history: loading, saving, prefix search and listing."""

from __future__ import annotations

import os
from collections.abc import Iterator
from dataclasses import dataclass

from .strutils import compare_nocase_prefix, split_words

HISTORY_FILE = ".bash_history"


def default_history_path() -> str:
    """Return the history file in the home directory."""
    return os.environ.get("HOME", "") + "/" + HISTORY_FILE


@dataclass
class HistoryEntry:
    """One remembered command line and its number, counted from 1."""

    id: int
    text: str


class History:
    """Remembered command lines, oldest first.

    Search positions run from 0 (the oldest entry) to ``len(history)``,
    which stands for the line being typed and is not an entry.
    """

    def __init__(self, lines: list[str] | None = None) -> None:
        self._entries: list[HistoryEntry] = []
        for line in lines or ():
            self.append(line)

    @classmethod
    def load(cls, path: str | None = None) -> History:
        """Read a history file; a missing or empty file gives an empty history."""
        path = path if path is not None else default_history_path()
        try:
            with open(path, encoding="utf-8", errors="replace") as handle:
                content = handle.read()
        except OSError:
            return cls()
        return cls(split_words(content, "\n"))

    def save(self, path: str | None = None) -> None:
        """Write every entry, oldest first, one per line."""
        path = path if path is not None else default_history_path()
        with open(path, "w", encoding="utf-8") as handle:
            for entry in self._entries:
                handle.write(f"{entry.text}\n")

    def append(self, line: str) -> HistoryEntry:
        """Add ``line`` as the newest entry."""
        entry = HistoryEntry(id=len(self._entries) + 1, text=line)
        self._entries.append(entry)
        return entry

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[HistoryEntry]:
        return iter(list(self._entries))

    def __getitem__(self, position: int) -> HistoryEntry:
        return self._entries[position]

    @staticmethod
    def _matches(prefix: str | None, text: str) -> bool:
        if prefix is None or prefix == "":
            return True
        return compare_nocase_prefix(prefix, text, len(prefix)) == 0

    def search_older(self, prefix: str | None, position: int) -> int:
        """Return the position of the nearest older entry starting with ``prefix``.

        The comparison ignores ASCII case; a None or empty prefix takes the
        next older entry.  When nothing matches, ``position`` is returned.
        """
        for candidate in range(position - 1, -1, -1):
            if self._matches(prefix, self._entries[candidate].text):
                return candidate
        return position

    def search_newer(self, prefix: str | None, position: int) -> int:
        """Return the position of the nearest newer entry starting with ``prefix``.

        Moving past the newest entry reaches ``len(self)``, the typed line
        itself, which always matches.  From ``len(self)`` nothing changes.
        """
        if position >= len(self._entries):
            return position
        for candidate in range(position + 1, len(self._entries)):
            if self._matches(prefix, self._entries[candidate].text):
                return candidate
        return len(self._entries)

    def format_range(self, start: int = 0, end: int = 0) -> list[str]:
        """List entries as ``(id) text``, from number ``start`` up to and including ``end``.

        An ``end`` that is no entry's number lists through the newest entry.
        """
        lines: list[str] = []
        for entry in self._entries:
            if entry.id < start:
                continue
            lines.append(f"({entry.id}) {entry.text}")
            if entry.id == end:
                break
        return lines