"""Locating the program a command names and checking that it can run."""

from __future__ import annotations

import os
from collections.abc import Iterable

from .environment import Environment
from .strutils import split_words

ELF_MAGIC = b"\x7fELF"
_HEADER_SIZE = 64


class CommandError(Exception):
    """Raised when a command cannot be found or run."""


def is_direct_path(command: str) -> bool:
    """Return True when ``command`` names a path rather than a program to search for."""
    return "/" in command


def _read_header(path: str) -> bytes | None:
    try:
        with open(path, "rb") as handle:
            return handle.read(_HEADER_SIZE)
    except IsADirectoryError:
        return b""
    except OSError:
        return None


def has_valid_header(path: str) -> bool:
    """Return True when ``path`` opens and does not have a full header without the ELF magic."""
    header = _read_header(path)
    if header is None:
        return False
    return len(header) < _HEADER_SIZE or header.startswith(ELF_MAGIC)


def check_executable(path: str) -> None:
    """Raise CommandError unless ``path`` exists, is not a directory and may be executed."""
    if not os.path.exists(path):
        raise CommandError(f"{path}: Command not found.")
    if os.path.isdir(path) or not os.access(path, os.X_OK):
        raise CommandError(f"{path}: Permission denied.")


def path_directories(env: Environment) -> list[str]:
    """Return the directories listed in PATH, or an empty list when it is not set."""
    if "PATH" not in env:
        return []
    value = env.get("PATH")
    if value is None:
        return []
    return split_words(value, ":")


def _candidates(command: str, directories: Iterable[str]):
    if not command or command.startswith("/"):
        return
    for directory in directories:
        candidate = f"{directory}/{command}"
        if has_valid_header(candidate):
            yield candidate


def search_path(command: str, directories: Iterable[str]) -> str | None:
    """Return the first ``directory/command`` that opens with a valid header, or None."""
    return next(_candidates(command, directories), None)


def find_all(command: str, directories: Iterable[str]) -> list[str]:
    """Return every ``directory/command`` that opens with a valid header."""
    return list(_candidates(command, directories))


def resolve(command: str, env: Environment) -> str:
    """Return the path of the program ``command`` runs; raise CommandError if there is none."""
    if is_direct_path(command):
        header = _read_header(command)
        if header is None:
            check_executable(command)
            raise CommandError(f"{command}: Permission denied.")
        if not has_valid_header(command):
            raise CommandError(
                f"{command}: Exec format error. Binary file not executable."
            )
        check_executable(command)
        return command
    found = search_path(command, path_directories(env))
    if found is None:
        raise CommandError(f"{command}: Command not found.")
    return found