"""Information about a process's open file descriptors, read from /proc."""

from __future__ import annotations

import enum
import re
import zlib
from dataclasses import dataclass

_O_WRONLY = 0o1
_O_RDWR = 0o2

_COLORS = (
    "\x1b[38;5;9m",
    "\x1b[38;5;10m",
    "\x1b[38;5;11m",
    "\x1b[38;5;12m",
    "\x1b[38;5;13m",
    "\x1b[38;5;14m",
)
_CLEAR_COLOR = "\x1b[0m"

_CURSOR_RE = re.compile(r"pos:\s*(\d+)")
_FLAGS_RE = re.compile(r"flags:\s*(\d+)")


class AccessMode(enum.Enum):
    """Whether an open file is readable, writable or both."""

    READ = "read"
    WRITE = "write"
    READ_WRITE = "read/write"

    def __str__(self) -> str:
        return self.value


def path_to_name(path: str) -> str:
    """Return a friendlier name for the target of an fd link."""
    if path.startswith("/dev/pts/"):
        return "<terminal>"
    if path.startswith("pipe:[") and path.endswith("]"):
        pipe_num = path[path.index("[") + 1 : path.index("]")]
        return f"<pipe #{pipe_num}>"
    return path


def parse_cursor(fdinfo: str) -> int | None:
    """Extract the file position from fdinfo text, or None if absent."""
    match = _CURSOR_RE.search(fdinfo)
    if match is None:
        return None
    return int(match.group(1))


def parse_access_mode(fdinfo: str) -> AccessMode | None:
    """Extract the access mode from the octal ``flags:`` field, or None."""
    match = _FLAGS_RE.search(fdinfo)
    if match is None:
        return None
    try:
        flags = int(match.group(1), 8)
    except ValueError:
        return None
    if flags & _O_WRONLY:
        return AccessMode.WRITE
    if flags & _O_RDWR:
        return AccessMode.READ_WRITE
    return AccessMode.READ


@dataclass(frozen=True)
class OpenFile:
    """An entry of the open file table as seen through one descriptor."""

    name: str
    cursor: int
    access_mode: AccessMode

    @classmethod
    def from_fd(cls, pid: int, fd: int) -> OpenFile | None:
        """Read the details of ``fd`` in process ``pid``, or None if unavailable."""
        try:
            target = os_readlink(f"/proc/{pid}/fd/{fd}")
            with open(f"/proc/{pid}/fdinfo/{fd}", encoding="utf-8") as handle:
                fdinfo = handle.read()
        except (OSError, UnicodeDecodeError):
            return None
        cursor = parse_cursor(fdinfo)
        access_mode = parse_access_mode(fdinfo)
        if cursor is None or access_mode is None:
            return None
        return cls(path_to_name(target), cursor, access_mode)

    def colorized_name(self) -> str:
        """Return the name, coloured consistently per pipe when it names a pipe."""
        if self.name.startswith("<pipe"):
            color = _COLORS[zlib.crc32(self.name.encode("utf-8")) % len(_COLORS)]
            return f"{color}{self.name}{_CLEAR_COLOR}"
        return self.name


def os_readlink(path: str) -> str:
    """Return the target of a symbolic link as text."""
    import os

    return os.readlink(path)