"""Line-based diff of two files using a longest-common-subsequence table."""

from __future__ import annotations

import sys
from collections.abc import Iterator, Sequence
from pathlib import Path

from toolbelt.grid import Grid


def read_file_lines(filename: str | Path) -> list[str]:
    """Return the lines of a file without their line terminators."""
    with open(filename, encoding="utf-8", newline="") as handle:
        text = handle.read()
    if not text:
        return []
    lines = text.split("\n")
    if text.endswith("\n"):
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def lcs(seq1: Sequence[str], seq2: Sequence[str]) -> Grid:
    """Build the longest-common-subsequence length table for two sequences."""
    grid = Grid(len(seq1) + 1, len(seq2) + 1)
    for i, item1 in enumerate(seq1):
        for j, item2 in enumerate(seq2):
            if item1 == item2:
                grid.set(i + 1, j + 1, grid.get(i, j) + 1)
            else:
                grid.set(i + 1, j + 1, max(grid.get(i + 1, j), grid.get(i, j + 1)))
    return grid


def diff_lines(
    lcs_table: Grid, lines1: Sequence[str], lines2: Sequence[str]
) -> Iterator[str]:
    """Yield the diff output lines, starting with a blank line."""
    i, j = len(lines1), len(lines2)
    reversed_output: list[str] = []
    while i > 0 or j > 0:
        if i > 0 and j > 0 and lines1[i - 1] == lines2[j - 1]:
            reversed_output.append(f"  {lines1[i - 1]}")
            i, j = i - 1, j - 1
        elif j > 0 and (
            i == 0 or lcs_table.get(i, j - 1) >= lcs_table.get(i - 1, j)
        ):
            reversed_output.append(f"> {lines2[j - 1]}")
            j -= 1
        else:
            reversed_output.append(f"< {lines1[i - 1]}")
            i -= 1
    yield ""
    yield from reversed(reversed_output)


def main(argv: Sequence[str] | None = None) -> int:
    """Print the diff of the two files named in ``argv``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) < 2:
        print("Too few arguments.")
        return 1
    try:
        lines1 = read_file_lines(args[0])
        lines2 = read_file_lines(args[1])
    except OSError as err:
        print(f"read file error: {err}", file=sys.stderr)
        return 1
    table = lcs(lines1, lines2)
    for line in diff_lines(table, lines1, lines2):
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())