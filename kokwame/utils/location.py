from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class Position:
    """A zero-based (row, column) point in a buffer."""

    row: int
    column: int = 0


@dataclass(frozen=True)
class Range:
    start: Position
    end: Position

    def contains_row(self, row: int) -> bool:
        # Row granular: the column of the query position is ignored.
        return self.start.row <= row <= self.end.row

    def contains(self, position: Position) -> bool:
        return self.contains_row(position.row)

    def as_tuple(self) -> tuple[int, int, int, int]:
        return (self.start.row, self.start.column, self.end.row, self.end.column)


def range_of(node) -> Range:
    start_row, start_col = node.start_point
    end_row, end_col = node.end_point
    return Range(Position(start_row, start_col), Position(end_row, end_col))
