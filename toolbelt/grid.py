"""A fixed-size two-dimensional grid of non-negative integers."""

from __future__ import annotations


class Grid:
    """A rectangular grid whose cells all start at zero."""

    def __init__(self, num_rows: int, num_cols: int) -> None:
        self._num_rows = num_rows
        self._num_cols = num_cols
        self._elems = [0] * (num_rows * num_cols)

    def _in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self._num_rows and 0 <= col < self._num_cols

    def _index(self, row: int, col: int) -> int:
        return col * self._num_rows + row

    def size(self) -> tuple[int, int]:
        """Return ``(rows, columns)``."""
        return self._num_rows, self._num_cols

    def get(self, row: int, col: int) -> int | None:
        """Return the value at ``(row, col)``, or None when out of bounds."""
        if not self._in_bounds(row, col):
            return None
        return self._elems[self._index(row, col)]

    def set(self, row: int, col: int, val: int) -> None:
        """Store ``val`` at ``(row, col)``; raise IndexError when out of bounds."""
        if not 0 <= row < self._num_rows:
            raise IndexError("row out of bound")
        if not 0 <= col < self._num_cols:
            raise IndexError("col out of bound")
        self._elems[self._index(row, col)] = val

    def rows(self) -> list[list[int]]:
        """Return the contents as a list of rows."""
        return [
            [self._elems[self._index(row, col)] for col in range(self._num_cols)]
            for row in range(self._num_rows)
        ]

    def display(self) -> None:
        """Print the grid, one row per line."""
        for row in self.rows():
            print("".join(f"{value}, " for value in row))

    def clear(self) -> None:
        """Reset every cell to zero."""
        self._elems = [0] * len(self._elems)