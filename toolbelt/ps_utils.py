"""Find processes by name or pid using ps and pgrep."""

from __future__ import annotations

import os
import re
import subprocess

from toolbelt.process import Process

_NUMBER_RE = re.compile(r"\+?[0-9]+")
_WHITESPACE_RE = re.compile(r"\s")


class PsError(Exception):
    """Running ps or pgrep failed, or they printed something unexpected."""


def _malformed(reason: str) -> PsError:
    return PsError(f"ps printed malformed output: {reason}")


def _parse_number(text: str) -> int:
    if not _NUMBER_RE.fullmatch(text):
        raise _malformed("Error parsing integer")
    return int(text)


def _run(args: list[str]) -> str:
    try:
        result = subprocess.run(args, capture_output=True, check=False)
    except OSError as err:
        raise PsError(f"Error executing ps: {err}") from err
    try:
        return result.stdout.decode("utf-8")
    except UnicodeDecodeError as err:
        raise _malformed("Output is not utf-8") from err


def _split_token(text: str, missing: str) -> tuple[str, str]:
    match = _WHITESPACE_RE.search(text)
    if match is None:
        raise _malformed(missing)
    return text[: match.start()], text[match.start() :].lstrip()


def parse_ps_line(line: str) -> Process:
    """Parse a line of ``ps -o "pid= ppid= command="`` output."""
    pid_text, remainder = _split_token(line.strip(), "Missing second column")
    ppid_text, command = _split_token(remainder, "Missing third column")
    return Process(_parse_number(pid_text), _parse_number(ppid_text), command)


def get_process(pid: int) -> Process | None:
    """Return the process with this pid, or None if there is none."""
    output = _run(["ps", "--pid", str(pid), "-o", "pid= ppid= command="]).strip()
    if not output:
        return None
    return parse_ps_line(output)


def get_child_processes(pid: int) -> list[Process]:
    """Return the processes whose parent is ``pid``."""
    output = _run(["ps", "--ppid", str(pid), "-o", "pid= ppid= command="])
    return [parse_ps_line(line) for line in output.splitlines()]


def get_pid_by_command_name(name: str) -> int | None:
    """Return the pid of the first of this user's processes named ``name``."""
    output = _run(["pgrep", "-xU", str(os.getuid()), name])
    lines = output.splitlines()
    if not lines:
        return None
    return _parse_number(lines[0])


def get_target(query: str) -> Process | None:
    """Find a process by command name, falling back to treating ``query`` as a pid."""
    pid = get_pid_by_command_name(query)
    if pid is not None:
        return get_process(pid)
    if _NUMBER_RE.fullmatch(query):
        return get_process(int(query))
    return None