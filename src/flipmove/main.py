import logging
import typer
import uvicorn
from pathlib import Path
from typing import Optional

from flipmove.api import PASS_RESPONSE
from flipmove.api.models import GameRequest
from flipmove.config import ServerConfig, get_log_level
from flipmove.othello.board import Board
from flipmove.othello.evaluator import evaluate
from flipmove.othello.game import Game
from flipmove.othello.grid import BLACK, WHITE

app = typer.Typer(pretty_exceptions_enable=False)


@app.callback()
def setup() -> None:
    logging.basicConfig(
        level=get_log_level(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


@app.command()
def serve(
    host: Optional[str] = typer.Option(None, "--host"),
    port: Optional[int] = typer.Option(None, "--port", "-p"),
) -> None:
    config = ServerConfig()
    uvicorn.run(
        "flipmove.api.server:app",
        host=host or config.host,
        port=port or config.port,
        log_level=get_log_level().lower(),
    )


@app.command()
def move(
    file: Path,
    show: bool = typer.Option(False, "--show", "-s"),
) -> None:
    game = GameRequest.model_validate_json(file.read_text())
    board = game.board.to_board()

    if show:
        board.show()

    moves = board.get_moves()

    if not moves:
        print(PASS_RESPONSE)
        return

    best = evaluate(board, moves)
    print(f"[{best.where.x},{best.where.y}]")


@app.command()
def selfplay(show: bool = typer.Option(False, "--show", "-s")) -> None:
    game = Game.self_play(Board.start())

    if show:
        for board in game.boards:
            board.show()

    print(" ".join(str(move) for move in game.moves))

    final = game.get_final_board()
    print(f"Black {final.count(BLACK)} - {final.count(WHITE)} White")

    winner = game.get_winner()
    if winner is None:
        print("Draw")
    elif winner == BLACK:
        print(f"Black wins by {game.get_black_score()}")
    else:
        print(f"White wins by {-game.get_black_score()}")


if __name__ == "__main__":
    app()
