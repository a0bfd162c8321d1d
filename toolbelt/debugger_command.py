"""Commands understood by the interactive debugger prompt."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Quit:
    """Leave the debugger."""


@dataclass(frozen=True)
class Cont:
    """Continue the stopped program."""


@dataclass(frozen=True)
class Back:
    """Print a backtrace."""


@dataclass(frozen=True)
class Break:
    """Set a breakpoint at a line, function or ``*address``."""

    arg: str


@dataclass(frozen=True)
class Info:
    """Show information, such as the list of breakpoints."""

    arg: str


@dataclass(frozen=True)
class Run:
    """Start the program with the given arguments."""

    args: tuple[str, ...] = ()


@dataclass(frozen=True)
class Disassemble:
    """Disassemble the program's text section."""


Command = Union[Quit, Cont, Back, Break, Info, Run, Disassemble]


def _argument(tokens: Sequence[str]) -> str:
    if len(tokens) < 2:
        raise ValueError(f"command {tokens[0]!r} requires an argument")
    return tokens[1]


def parse_command(tokens: Sequence[str]) -> Command | None:
    """Turn a tokenised input line into a command, or None if unrecognised."""
    if not tokens:
        raise ValueError("no command given")
    name = tokens[0]
    if name in ("q", "quit"):
        return Quit()
    if name in ("r", "run"):
        return Run(tuple(tokens[1:]))
    if name in ("c", "cont", "continue"):
        return Cont()
    if name in ("bt", "back", "backtrace"):
        return Back()
    if name in ("b", "break"):
        return Break(_argument(tokens))
    if name == "disassemble":
        return Disassemble()
    if name == "info":
        return Info(_argument(tokens))
    return None