from __future__ import annotations

from typing import Optional

from flipmove.othello.board import Board
from flipmove.othello.evaluator import evaluate
from flipmove.othello.grid import BLACK, WHITE
from flipmove.othello.position import PASS, Move, Position


class Game:
    def __init__(self) -> None:
        self.boards: list[Board] = []
        self.moves: list[Move] = []

    @classmethod
    def from_moves(cls, positions: list[Position]) -> Game:
        board = Board.start()
        game = Game()
        game.boards.append(board.copy())

        for position in positions:
            move = Move(position, board.turn)

            if not move.is_pass() and not board.has_moves():
                # Passed moves may be missing from moves list
                game._play(board, Move(PASS, board.turn))
                move = Move(position, board.turn)

            game._play(board, move)

        return game

    @classmethod
    def self_play(cls, board: Optional[Board] = None) -> Game:
        if board is None:
            board = Board.start()
        else:
            board = board.copy()

        game = Game()
        game.boards.append(board.copy())

        while not board.is_game_end():
            moves = board.get_moves()

            if moves:
                move = evaluate(board, moves)
            else:
                move = Move(PASS, board.turn)

            game._play(board, move)

        return game

    def _play(self, board: Board, move: Move) -> None:
        board.do_move(move)
        self.moves.append(move)
        self.boards.append(board.copy())

    def get_final_board(self) -> Board:
        return self.boards[-1]

    def get_winner(self) -> Optional[int]:
        board = self.get_final_board()
        black = board.count(BLACK)
        white = board.count(WHITE)

        if black > white:
            return BLACK
        if white > black:
            return WHITE
        return None

    def get_black_score(self) -> int:
        board = self.get_final_board()
        black = board.count(BLACK)
        white = board.count(WHITE)

        if white == black:
            return 0
        elif black > white:
            return 64 - 2 * white
        else:
            return -64 + 2 * black
