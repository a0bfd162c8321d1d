"""A running process and its open file descriptors."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass

from toolbelt.open_file import OpenFile


@dataclass(frozen=True)
class Process:
    """A process identified by pid, with its parent pid and command line."""

    pid: int
    ppid: int
    command: str

    def list_fds(self) -> list[int] | None:
        """Return the process's fd numbers in order, or None if unavailable."""
        try:
            names = os.listdir(f"/proc/{self.pid}/fd")
        except OSError:
            return None
        if not all(name.isdigit() for name in names):
            return None
        return sorted(int(name) for name in names)

    def list_open_files(self) -> list[tuple[int, OpenFile]] | None:
        """Return ``(fd, OpenFile)`` pairs, or None if any fd can't be inspected."""
        fds = self.list_fds()
        if fds is None:
            return None
        open_files = []
        for fd in fds:
            open_file = OpenFile.from_fd(self.pid, fd)
            if open_file is None:
                return None
            open_files.append((fd, open_file))
        return open_files

    def print(self, target_name: str) -> None:
        """Print a header and one line per open file descriptor."""
        print(f'===== "{target_name}" (pid: {self.pid}, ppid: {self.ppid}) =====')
        open_files = self.list_open_files()
        if open_files is None:
            print(
                "Warning: could not inspect file descriptors for this process: "
                f"{self.pid} it might have exited as about to look at the fd table, "
                "or it might have exited before and be waiting for the parent "
                "to reap it. Or have you tried root?",
                file=sys.stderr,
            )
            return
        for fd, open_file in open_files:
            print(
                f"{fd:<4} {str(open_file.access_mode):<15} "
                f"cursor: {open_file.cursor} {open_file.colorized_name()}"
            )