from __future__ import annotations

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator
from typing import Optional

from flipmove.othello.board import Board
from flipmove.othello.grid import BLACK, PIECES, WHITE
from flipmove.othello.position import Move


class BoardPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    # Indexed as pieces[y - 1][x - 1].
    pieces: list[list[int]] = Field(
        validation_alias=AliasChoices("pieces", "Pieces")
    )
    next: int = Field(validation_alias=AliasChoices("next", "Next"))

    @field_validator("pieces")
    @classmethod
    def validate_pieces(cls, v: list[list[int]]) -> list[list[int]]:
        if len(v) != 8 or any(len(row) != 8 for row in v):
            raise ValueError("Board must have 8 rows of 8 pieces")

        for row in v:
            for piece in row:
                if piece not in PIECES:
                    raise ValueError(f"Invalid piece {piece}")
        return v

    @field_validator("next")
    @classmethod
    def validate_next(cls, v: int) -> int:
        if v not in [BLACK, WHITE]:
            raise ValueError(f"Next must be {BLACK} or {WHITE}, got {v}")
        return v

    def to_board(self) -> Board:
        return Board.from_squares(self.pieces, self.next)

    @classmethod
    def from_board(cls, board: Board) -> BoardPayload:
        return cls(pieces=board.to_squares(), next=board.turn)


class GameRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    board: BoardPayload = Field(validation_alias=AliasChoices("board", "Board"))


class MoveResponse(BaseModel):
    move: Optional[list[int]]
    passed: bool
    legal_moves: list[list[int]]

    @classmethod
    def from_moves(cls, move: Optional[Move], legal_moves: list[Move]) -> MoveResponse:
        return cls(
            move=None if move is None else list(move.where),
            passed=move is None,
            legal_moves=[list(legal.where) for legal in legal_moves],
        )
