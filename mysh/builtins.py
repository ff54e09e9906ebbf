"""Commands the shell runs itself instead of starting a program."""

from __future__ import annotations

import os
import re
import signal
import sys
from collections.abc import Callable, Sequence
from typing import Protocol, TextIO

from .aliases import AliasTable
from .environment import Environment, InvalidVariableName
from .history import History
from .jobs import JobTable
from .lookup import find_all, path_directories, search_path
from .strutils import compare_nocase, split_words

SUCCESS = 0
FAIL = -1


class Shell(Protocol):
    """What a builtin needs from the shell that runs it."""

    env: Environment
    aliases: AliasTable
    jobs: JobTable
    input: TextIO

    def run(self, line: str) -> int:
        """Execute a full command line and return its status."""


Builtin = Callable[[Shell, Sequence[str]], int]

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_WHOLE_INT = re.compile(r"[+-]?\d+")


def _to_int(text: str) -> int:
    """Read a leading integer the way atoi does; 0 when there is none."""
    match = _INT_PREFIX.match(text)
    return int(match.group(1)) if match else 0


def _error(message: str) -> None:
    sys.stderr.write(message + "\n")


# cd


def resolve_cd_path(current: str, target: str) -> str:
    """Join the relative ``target`` onto ``current``, folding ``..`` components."""
    parts = split_words(current, "/")
    for part in split_words(target, "/"):
        if part == "..":
            if parts:
                parts.pop()
        else:
            parts.append(part)
    return "/" + "/".join(parts)


def builtin_cd(shell: Shell, args: Sequence[str]) -> int:
    """Change directory and update PWD and OLDPWD."""
    if len(args) > 2:
        return FAIL
    old_path = os.getcwd()
    if len(args) == 1:
        target = shell.env.get("HOME") or ""
        shown = target
    else:
        shown = args[1]
        if shown.startswith("/"):
            target = shown
        elif shown == "-":
            target = shell.env.get("OLDPWD") or ""
        else:
            target = resolve_cd_path(old_path, shown)
    try:
        os.chdir(target)
    except OSError:
        if target and os.path.exists(target):
            _error(f"{shown}: Not a directory.")
        else:
            _error(f"{shown}: No such file or directory.")
        return 1
    shell.env.set("PWD", target)
    shell.env.set("OLDPWD", old_path)
    return SUCCESS


# environment


def builtin_env(shell: Shell, args: Sequence[str]) -> int:
    """Print every environment entry."""
    for line in shell.env.lines():
        sys.stdout.write(line + "\n")
    return SUCCESS


def builtin_setenv(shell: Shell, args: Sequence[str]) -> int:
    """Set a variable; with no name, print the environment."""
    if len(args) == 1:
        return builtin_env(shell, args)
    if len(args) > 3:
        return FAIL
    value = args[2] if len(args) == 3 else None
    try:
        shell.env.set(args[1], value)
    except InvalidVariableName as error:
        _error(str(error))
        return FAIL
    return SUCCESS


def builtin_unsetenv(shell: Shell, args: Sequence[str]) -> int:
    """Remove one variable from the environment."""
    if len(args) != 2:
        return FAIL
    try:
        shell.env.unset(args[1])
    except KeyError:
        return FAIL
    return SUCCESS


# aliases


def builtin_alias(shell: Shell, args: Sequence[str]) -> int:
    """Define an alias; with no arguments, list them."""
    if len(args) == 1:
        for line in shell.aliases.listing():
            sys.stdout.write(line + "\n")
        return SUCCESS
    if len(args) == 2:
        return SUCCESS
    shell.aliases.define(args[1], args[2:])
    return SUCCESS


def builtin_unalias(shell: Shell, args: Sequence[str]) -> int:
    """Remove the named aliases."""
    if len(args) <= 1:
        sys.stdout.write("unalias: Too few arguments.\n")
        return 1
    shell.aliases.remove(args[1:])
    return SUCCESS


# history


def builtin_history(shell: Shell, args: Sequence[str]) -> int:
    """List the saved history, optionally from a start number up to an end number.

    Returns -1 when there is no history, 2 when the end number was reached.
    """
    history = History.load()
    if len(history) == 0:
        return FAIL
    start = _to_int(args[1]) if len(args) > 1 else 0
    end = _to_int(args[2]) if len(args) > 2 else 0
    for line in history.format_range(start, end):
        sys.stdout.write(line + "\n")
    if any(entry.id == end and entry.id >= start for entry in history):
        return 2
    return SUCCESS


# foreach


def _foreach_valid(args: Sequence[str]) -> bool:
    if len(args) < 3:
        _error("foreach: Too few arguments.")
        return False
    name = args[1]
    if not name or not ("a" <= name[0].lower() <= "z"):
        _error("foreach: Variable name must begin with a letter.")
        return False
    opens = args[2].startswith("(")
    closes = args[-1].endswith(")")
    if opens and not closes:
        _error("Too many ('s")
        return False
    if not opens and closes:
        _error("Too many )'s")
        return False
    if not opens and not args[-1].startswith(")"):
        _error("foreach: Words not parenthesized.")
        return False
    return True


def _substitute(variable: str, word: str, command: str) -> str:
    index = command.find("$")
    if index < 0:
        return command
    if not command[index + 1:].startswith(variable):
        return command
    value = word.replace("(", "").replace(")", "")
    return command[:index] + value


def builtin_foreach(shell: Shell, args: Sequence[str]) -> int:
    """Read commands up to ``end`` and run them once for each listed word."""
    if not _foreach_valid(args):
        return 1
    commands: list[str] = []
    for line in iter(shell.input.readline, ""):
        line = line.partition("\n")[0]
        if line == "end":
            break
        commands.append(line)
    variable = args[1]
    for word in args[2:]:
        for command in commands:
            shell.run(_substitute(variable, word, command))
    return SUCCESS


# repeat


def builtin_repeat(shell: Shell, args: Sequence[str]) -> int:
    """Run a command a given number of times."""
    if len(args) < 3:
        _error("repeat: Too few arguments.")
        return 1
    if not _WHOLE_INT.fullmatch(args[1]):
        _error("repeat: Badly formed number.")
        return 1
    count = _to_int(args[1])
    if count < 0:
        return SUCCESS
    command = "".join(f"{word} " for word in args[2:])
    for _ in range(count):
        shell.run(command)
    return SUCCESS


# which / where


def _is_builtin_name(name: str) -> bool:
    return name != "env" and name in _BUILTINS


def builtin_which(shell: Shell, args: Sequence[str]) -> int:
    """Print the first program each name runs, and whether it is a builtin."""
    if len(args) < 2:
        _error("which: Too few arguments.")
        return FAIL
    directories = path_directories(shell.env)
    for name in args[1:]:
        found = search_path(name, directories)
        if found is not None:
            sys.stdout.write(found + "\n")
        if _is_builtin_name(name):
            sys.stdout.write(f"{name}: shell built-in command.\n")
    return SUCCESS


def builtin_where(shell: Shell, args: Sequence[str]) -> int:
    """Print every program each name could run, and whether it is a builtin."""
    if len(args) < 2:
        _error("where: Too few arguments.")
        return FAIL
    directories = path_directories(shell.env)
    for name in args[1:]:
        for found in find_all(name, directories):
            sys.stdout.write(found + "\n")
        if _is_builtin_name(name):
            sys.stdout.write(f"{name} is a shell built-in\n")
    return SUCCESS


# jobs


def builtin_jobs(shell: Shell, args: Sequence[str]) -> int:
    """List the background jobs."""
    shell.jobs.update()
    for job in shell.jobs:
        state = "Suspended" if job.stopped else "Running"
        mark = "+" if job.number == 1 else "-"
        sys.stdout.write(
            f"[{job.number}] {mark} {state}                       {job.command}\n"
        )
    return SUCCESS


def _find_job(shell: Shell, args: Sequence[str], name: str):
    if len(args) < 2:
        _error(f"{name}: no current job")
        return None
    job = shell.jobs.find(_to_int(args[1]))
    if job is None:
        _error(f"{name}: {args[1]}: No such job")
    return job


def builtin_fg(shell: Shell, args: Sequence[str]) -> int:
    """Bring a job, named by pid or number, to the foreground."""
    job = _find_job(shell, args, "fg")
    if job is None:
        return FAIL
    return shell.jobs.foreground(job)


def builtin_bg(shell: Shell, args: Sequence[str]) -> int:
    """Let a stopped job, named by pid or number, continue."""
    job = _find_job(shell, args, "bg")
    if job is None:
        return FAIL
    try:
        os.kill(job.pid, signal.SIGCONT)
    except OSError:
        pass
    return SUCCESS


_BUILTINS: dict[str, Builtin] = {
    "cd": builtin_cd,
    "history": builtin_history,
    "env": builtin_env,
    "setenv": builtin_setenv,
    "unsetenv": builtin_unsetenv,
    "alias": builtin_alias,
    "unalias": builtin_unalias,
    "foreach": builtin_foreach,
    "repeat": builtin_repeat,
    "jobs": builtin_jobs,
    "fg": builtin_fg,
    "bg": builtin_bg,
    "which": builtin_which,
    "where": builtin_where,
}

BUILTIN_NAMES: tuple[str, ...] = tuple(_BUILTINS)


def lookup_builtin(name: str) -> Builtin | None:
    """Return the builtin called ``name``, ignoring ASCII case, or None."""
    for builtin_name, function in _BUILTINS.items():
        if compare_nocase(name, builtin_name) == 0:
            return function
    return None