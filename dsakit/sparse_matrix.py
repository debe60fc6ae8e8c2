"""Triplet representation of sparse matrices."""

from collections.abc import Iterable, Sequence
from typing import NamedTuple


class Entry(NamedTuple):
    """A non-zero matrix value and its position."""

    value: int
    row: int
    column: int


def to_triplets(matrix: Iterable[Iterable[int]]) -> list[Entry]:
    """Return the non-zero values of ``matrix`` in row-major order."""
    return [
        Entry(value, row, column)
        for row, values in enumerate(matrix)
        for column, value in enumerate(values)
        if value != 0
    ]


def format_triplets(entries: Iterable[Entry]) -> str:
    """Render entries as ``[value,row,column]`` groups."""
    parts = [f"[{e.value},{e.row},{e.column}]" for e in entries]
    if not parts:
        return "Empty List"
    return "  ".join(parts)


def format_matrix(matrix: Iterable[Sequence[int]]) -> str:
    """Render ``matrix`` with each value right-aligned in five columns."""
    return "\n".join("".join(f"{value:5d}" for value in row) for row in matrix)