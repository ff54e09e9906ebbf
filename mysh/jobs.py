"""Background jobs: the job table and moving jobs between foreground and background."""

from __future__ import annotations

import os
import signal
import sys
from collections.abc import Iterator
from dataclasses import dataclass
from typing import TextIO


@dataclass
class Job:
    """A child process started in the background."""

    pid: int
    command: str
    number: int
    status: int = 0

    @property
    def stopped(self) -> bool:
        """True when the last known status says the job is stopped."""
        return os.WIFSTOPPED(self.status)


def is_background(command: str) -> bool:
    """Return True when ``command`` ends with ``&``."""
    return command.endswith("&")


def trim_background(command: str) -> str:
    """Remove trailing ``&`` and spaces."""
    return command.rstrip("& ")


def _give_terminal(pgid: int) -> None:
    try:
        signal.signal(signal.SIGTTOU, signal.SIG_IGN)
    except ValueError:
        pass
    try:
        os.tcsetpgrp(0, pgid)
    except OSError:
        pass
    try:
        signal.signal(signal.SIGTTOU, signal.SIG_DFL)
    except ValueError:
        pass


def _continue_group(pid: int) -> None:
    try:
        os.kill(-pid, signal.SIGCONT)
    except OSError:
        pass


class JobTable:
    """The jobs of a shell, in the order they were started."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._jobs: list[Job] = []
        self._stream = stream

    @property
    def _out(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def next_number(self) -> int:
        """Return one more than the highest job number in use."""
        return max((job.number for job in self._jobs), default=0) + 1

    def add(self, pid: int, command: str) -> Job:
        """Record a new job and announce its number and pid."""
        job = Job(pid=pid, command=command, number=self.next_number())
        self._jobs.append(job)
        self._out.write(f"[{job.number}] {job.pid}\n")
        return job

    def remove(self, pid: int) -> None:
        """Forget the first job with ``pid``, if any."""
        for position, job in enumerate(self._jobs):
            if job.pid == pid:
                del self._jobs[position]
                return

    def find(self, key: int) -> Job | None:
        """Return the first job whose pid or job number is ``key``."""
        return next(
            (job for job in self._jobs if key in (job.pid, job.number)), None
        )

    def update(self) -> None:
        """Collect finished jobs without waiting and remember stopped ones' status."""
        for job in list(self._jobs):
            try:
                pid, status = os.waitpid(job.pid, os.WNOHANG | os.WUNTRACED)
            except ChildProcessError:
                continue
            if pid <= 0:
                continue
            if not os.WIFSTOPPED(status) and not os.WIFCONTINUED(status):
                self.remove(job.pid)
            job.status = status

    def __iter__(self) -> Iterator[Job]:
        return iter(list(self._jobs))

    def foreground(self, job: Job) -> int:
        """Continue ``job`` with the terminal and wait until it stops or ends."""
        _give_terminal(job.pid)
        _continue_group(job.pid)
        self._out.write(f"{job.command}\n")
        try:
            _, status = os.waitpid(job.pid, os.WUNTRACED)
        except ChildProcessError:
            status = 0
        if os.WIFSTOPPED(status):
            self._out.write("\nSuspended\n")
            job.status = status
        else:
            self.remove(job.pid)
        _give_terminal(os.getpid())
        return 0

    def background(self, job: Job) -> int:
        """Continue ``job`` in the background."""
        _continue_group(job.pid)
        job.status = 0
        self._out.write(f"[1] {job.pid}\n")
        return 0