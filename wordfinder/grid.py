from __future__ import annotations

from contextlib import contextmanager
from typing import Iterable, Iterator

MAX_SIZE = 64

# Placeholder for a consumed cell; compares unequal to every character.
VISITED = None


class ShapeError(ValueError):
    """Raised when grid rows are empty, ragged, or exceed MAX_SIZE."""


class Grid:
    """Rectangular character buffer searched by the strategies.

    Cells are only mutated through ``visit``, which always restores them.
    """

    __slots__ = ("_cells", "n_rows", "n_cols")

    def __init__(self, rows: Iterable[str]):
        rows = list(rows)
        if not rows or not rows[0]:
            raise ShapeError("Grid must have at least one row and one column")

        n_rows = len(rows)
        n_cols = len(rows[0])
        if n_rows > MAX_SIZE or n_cols > MAX_SIZE:
            raise ShapeError(f"Grid size cannot exceed {MAX_SIZE}x{MAX_SIZE} (got {n_rows}x{n_cols})")

        if any(len(row) != n_cols for row in rows):
            raise ShapeError("All rows must contain the same number of characters")

        self._cells: list[list[str | None]] = [list(row) for row in rows]
        self.n_rows = n_rows
        self.n_cols = n_cols

    def in_bounds(self, r: int, c: int) -> bool:
        return 0 <= r < self.n_rows and 0 <= c < self.n_cols

    def __getitem__(self, pos: tuple[int, int]) -> str | None:
        r, c = pos
        if not self.in_bounds(r, c):
            raise IndexError(f"Cell ({r}, {c}) outside {self.n_rows}x{self.n_cols} grid")
        return self._cells[r][c]

    @contextmanager
    def visit(self, r: int, c: int) -> Iterator[str | None]:
        """Mark cell (r, c) as consumed for the duration of the block.

        Yields the original character, which is put back on exit.
        """
        original = self[r, c]
        self._cells[r][c] = VISITED
        try:
            yield original
        finally:
            self._cells[r][c] = original

    def rows(self) -> list[str]:
        return ["".join(row) for row in self._cells]

    @property
    def shape(self) -> tuple[int, int]:
        return self.n_rows, self.n_cols

    def __repr__(self) -> str:
        return f"Grid({self.n_rows}x{self.n_cols})"
