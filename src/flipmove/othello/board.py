from __future__ import annotations

from copy import deepcopy

from flipmove.othello.grid import BLACK, EMPTY, WHITE, Grid, opposite
from flipmove.othello.position import DIRECTIONS, PASS, IllegalMove, Move, Position


class Board:
    def __init__(self, grid: Grid, turn: int) -> None:
        assert turn in [BLACK, WHITE]

        self.grid = grid

        # Color of the player to move.
        self.turn = turn

    @classmethod
    def start(cls) -> Board:
        grid = Grid()
        grid.set(Position(4, 4), WHITE)
        grid.set(Position(5, 4), BLACK)
        grid.set(Position(4, 5), BLACK)
        grid.set(Position(5, 5), WHITE)
        return Board(grid, BLACK)

    @classmethod
    def empty(cls) -> Board:
        return Board(Grid(), BLACK)

    @classmethod
    def from_squares(cls, rows: list[list[int]], turn: int) -> Board:
        if turn not in [BLACK, WHITE]:
            raise ValueError(f"Invalid turn {turn}")

        return Board(Grid(rows), turn)

    def to_squares(self) -> list[list[int]]:
        return self.grid.as_rows()

    def __repr__(self) -> str:
        return f"Board({self.to_squares()}, {self.turn})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            raise TypeError(f"Cannot compare Board with {type(other)}")

        return (self.grid, self.turn) == (other.grid, other.turn)

    def copy(self) -> Board:
        return deepcopy(self)

    def get_square(self, position: Position) -> int:
        return self.grid.get(position)

    def find_captures(self, move: Move, direction: tuple[int, int]) -> list[Position]:
        """
        Walks from the move's square in one direction and returns the
        opponent discs that would be flipped. A run that reaches the edge of
        the board or an empty square captures nothing.
        """
        captures: list[Position] = []
        position = move.where

        while True:
            position = position.translate(direction)

            if not position.is_valid():
                return []

            square = self.grid.get(position)

            if square == move.color:
                return captures

            if square == EMPTY:
                return []

            captures.append(position)

    def try_move(self, move: Move) -> list[Position]:
        """
        Checks a non-pass move without executing it.
        Returns all discs that would be flipped.
        """
        assert not move.is_pass()

        square = self.grid.get(move.where)
        if square != EMPTY:
            raise IllegalMove(move, f"{move.where.to_field()} is occupied by {square}")

        captures: list[Position] = []
        for direction in DIRECTIONS:
            captures += self.find_captures(move, direction)

        if not captures:
            raise IllegalMove(move, "no pieces were captured")

        return captures

    def is_valid_move(self, move: Move) -> bool:
        if move.color != self.turn:
            return False

        if move.is_pass():
            return not self.has_moves()

        try:
            self.try_move(move)
        except IllegalMove:
            return False
        return True

    def get_moves(self) -> list[Move]:
        moves: list[Move] = []

        for position in self.grid.positions():
            if self.grid.get(position) != EMPTY:
                continue

            move = Move(position, self.turn)
            try:
                self.try_move(move)
            except IllegalMove:
                continue

            moves.append(move)

        return moves

    def has_moves(self) -> bool:
        return len(self.get_moves()) > 0

    def do_move(self, move: Move) -> Board:
        """
        Executes a move in place and returns the board.
        Raises IllegalMove without modifying the board if the move is not legal.
        """
        if move.color != self.turn:
            raise IllegalMove(move, f"it is not {move.color}'s turn")

        if move.is_pass():
            moves = self.get_moves()
            if moves:
                raise IllegalMove(move, "there are valid moves available", moves)
        else:
            captures = self.try_move(move)

            for position in captures + [move.where]:
                self.grid.set(position, move.color)

        self.turn = opposite(self.turn)
        return self

    def pass_move(self) -> Board:
        return self.do_move(Move(PASS, self.turn))

    def is_game_end(self) -> bool:
        if self.has_moves():
            return False

        passed = self.copy()
        passed.turn = opposite(passed.turn)
        return not passed.has_moves()

    def count(self, color: int) -> int:
        assert color in [WHITE, BLACK]
        return self.grid.count(color)

    def count_discs(self) -> int:
        return self.count(BLACK) + self.count(WHITE)

    def count_empties(self) -> int:
        return 64 - self.count_discs()

    def score_difference(self) -> int:
        return self.count(self.turn) - self.count(opposite(self.turn))

    def show(self) -> None:
        moves = {move.where for move in self.get_moves()}

        print("+-a-b-c-d-e-f-g-h-+")
        for position in self.grid.positions():
            if position.x == 1:
                print("{} ".format(position.y), end="")

            square = self.grid.get(position)

            if square == BLACK:
                print("○ ", end="")
            elif square == WHITE:
                print("● ", end="")
            elif position in moves:
                print("· ", end="")
            else:
                print("  ", end="")

            if position.x == 8:
                print("|")
        print("+-----------------+")
