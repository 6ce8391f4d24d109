from __future__ import annotations

import logging

from flipmove.othello.board import Board
from flipmove.othello.position import PASS, Move

logger = logging.getLogger(__name__)

# Below this many discs on the board we minimize opponent mobility.
MOBILITY_MAX_DISCS = 30

# Below this many discs (and from MOBILITY_MAX_DISCS) we use square weights.
POSITIONAL_MAX_DISCS = 55

# Weights of one quadrant, indexed by folded 0-based column then row.
SQUARE_WEIGHTS = (
    (68, -12, 53, -8),
    (-12, -62, -33, -7),
    (53, -33, 26, 8),
    (-8, -7, 8, -18),
)


def evaluate(board: Board, moves: list[Move]) -> Move:
    """
    Picks one of the valid moves, looking at most one ply ahead.
    The caller should handle the case where there are no valid moves.
    """
    discs = board.count_discs()

    if discs < MOBILITY_MAX_DISCS:
        logger.debug(f"Selecting by mobility with {discs} discs")
        return mobility_move(board, moves)

    if discs < POSITIONAL_MAX_DISCS:
        logger.debug(f"Selecting by square weights with {discs} discs")
        return positional_move(board, moves)

    logger.debug(f"Selecting by captures with {discs} discs")
    return capture_move(board, moves)


def square_weight(move: Move) -> int:
    column = move.where.x - 1
    row = move.where.y - 1
    return SQUARE_WEIGHTS[min(column, 7 - column)][min(row, 7 - row)]


def mobility_move(board: Board, moves: list[Move]) -> Move:
    # Returns the move after which the opponent has the fewest valid moves.
    best_move = Move(PASS, board.turn)
    lowest = 100

    for move in moves:
        child = board.copy().do_move(move)
        mobility = len(child.get_moves())

        if mobility < lowest:
            best_move = move
            lowest = mobility

    return best_move


def positional_move(board: Board, moves: list[Move]) -> Move:
    best_move = Move(PASS, board.turn)
    highest = -100

    for move in moves:
        weight = square_weight(move)

        if weight > highest:
            best_move = move
            highest = weight

    return best_move


def capture_move(board: Board, moves: list[Move]) -> Move:
    # Returns the move that flips the most discs right away.
    best_move = Move(PASS, board.turn)
    highest = 0

    for move in moves:
        captures = board.try_move(move)

        if len(captures) > highest:
            best_move = move
            highest = len(captures)

    return best_move
