from __future__ import annotations

from typing import Iterator

from flipmove.othello.position import Position

EMPTY = 0
BLACK = 1
WHITE = 2

PIECES = (EMPTY, BLACK, WHITE)


def opposite(piece: int) -> int:
    assert piece in PIECES

    if piece == BLACK:
        return WHITE
    if piece == WHITE:
        return BLACK
    return EMPTY


class Grid:
    """
    Indexed container holding the piece on each of the 64 squares.

    Squares are accessed by 1-based `Position`, storage is rows (y) of
    columns (x), both 0-based.
    """

    def __init__(self, rows: list[list[int]] | None = None) -> None:
        if rows is None:
            rows = [[EMPTY] * 8 for _ in range(8)]

        if len(rows) != 8 or any(len(row) != 8 for row in rows):
            raise ValueError("Grid must have 8 rows of 8 squares")

        for row in rows:
            for piece in row:
                if piece not in PIECES:
                    raise ValueError(f"Invalid piece {piece}")

        self.__rows = [list(row) for row in rows]

    def get(self, position: Position) -> int:
        if not position.is_valid():
            raise ValueError(f"Position {position} is not on the board")

        return self.__rows[position.y - 1][position.x - 1]

    def set(self, position: Position, piece: int) -> None:
        if not position.is_valid():
            raise ValueError(f"Position {position} is not on the board")

        if piece not in PIECES:
            raise ValueError(f"Invalid piece {piece}")

        self.__rows[position.y - 1][position.x - 1] = piece

    def positions(self) -> Iterator[Position]:
        # Row-major: y outer, x inner.
        for y in range(1, 9):
            for x in range(1, 9):
                yield Position(x, y)

    def count(self, piece: int) -> int:
        return sum(row.count(piece) for row in self.__rows)

    def as_rows(self) -> list[list[int]]:
        return [list(row) for row in self.__rows]

    def __repr__(self) -> str:  # pragma: nocover
        return f"Grid({self.__rows})"

    def __eq__(self, rhs: object) -> bool:
        if not isinstance(rhs, Grid):
            raise TypeError(f"Cannot compare Grid with {type(rhs)}")

        return self.__rows == rhs.__rows
