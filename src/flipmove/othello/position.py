from __future__ import annotations

from typing import NamedTuple, Sequence

DIRECTIONS = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)


class Position(NamedTuple):
    """
    Square on the board. Coordinates are 1-8 (not 0-7), x is the column and y
    is the row. Any position outside of the board means a pass.
    """

    x: int
    y: int

    def is_valid(self) -> bool:
        return 1 <= self.x <= 8 and 1 <= self.y <= 8

    def is_pass(self) -> bool:
        return not self.is_valid()

    def translate(self, direction: tuple[int, int]) -> Position:
        dx, dy = direction
        return Position(self.x + dx, self.y + dy)

    def to_field(self) -> str:
        if self.is_pass():
            return "--"
        return "abcdefgh"[self.x - 1] + "12345678"[self.y - 1]

    @classmethod
    def from_field(cls, field: str) -> Position:
        if len(field) != 2:
            raise ValueError(f'Invalid move length "{len(field)}"')

        field = field.lower()

        if field in ["--", "ps", "pa"]:
            return PASS

        if not ("a" <= field[0] <= "h" and "1" <= field[1] <= "8"):
            raise ValueError(f'Invalid field "{field}"')

        x = ord(field[0]) - ord("a") + 1
        y = ord(field[1]) - ord("1") + 1
        return Position(x, y)


PASS = Position(0, 0)


class Move(NamedTuple):
    # Where the disc is placed, an invalid position means a pass.
    where: Position

    # Color of the player making the move.
    color: int

    def is_pass(self) -> bool:
        return self.where.is_pass()

    def __str__(self) -> str:
        return self.where.to_field()


class IllegalMove(Exception):
    def __init__(
        self, move: Move, reason: str, legal_moves: Sequence[Move] = ()
    ) -> None:
        self.move = move
        self.reason = reason
        self.legal_moves = list(legal_moves)

        message = f"{move} illegal move: {reason}"
        if self.legal_moves:
            fields = " ".join(str(legal) for legal in self.legal_moves)
            message += f": {fields}"

        super().__init__(message)
