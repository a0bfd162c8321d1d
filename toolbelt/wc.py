"""Count lines, words and bytes, in the manner of wc."""

from __future__ import annotations

import string
import sys
from collections.abc import Sequence
from dataclasses import dataclass
from typing import BinaryIO

_ASCII_WHITESPACE = frozenset(b" \t\n\x0c\r")
_ASCII_PUNCTUATION = frozenset(string.punctuation.encode("ascii"))
_CHUNK_SIZE = 64 * 1024


@dataclass(frozen=True)
class FileInfo:
    """Counts gathered from one input."""

    lines: int = 0
    words: int = 0
    characters: int = 0
    bytes: int = 0

    def __str__(self) -> str:
        return f"{self.lines} {self.words} {self.bytes}"


def _starts_word(byte: int) -> bool:
    return byte in _ASCII_PUNCTUATION or chr(byte).isalnum()


def count(stream: BinaryIO) -> FileInfo:
    """Read a binary stream to its end and return its counts."""
    lines = words = characters = total = 0
    prev_is_space = False
    for chunk in iter(lambda: stream.read(_CHUNK_SIZE), b""):
        total += len(chunk)
        lines += chunk.count(b"\n")
        for byte in chunk:
            if byte < 0x80:
                characters += 1
            if prev_is_space and _starts_word(byte):
                words += 1
            prev_is_space = byte in _ASCII_WHITESPACE
    if total:
        words += 1
    return FileInfo(lines=lines, words=words, characters=characters, bytes=total)


def main(argv: Sequence[str] | None = None) -> int:
    """Print counts for each named file, or for standard input."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print(f"  {count(sys.stdin.buffer)}")
        return 0
    for filename in args:
        try:
            with open(filename, "rb") as handle:
                stats = count(handle)
        except OSError as err:
            print(f"error reading file: {err}", file=sys.stderr)
            return 1
        print(f"  {stats} {filename}")
    return 0


if __name__ == "__main__":
    sys.exit(main())