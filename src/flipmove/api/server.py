import logging
from fastapi import Depends, FastAPI, HTTPException, Query, Request, Response
from fastapi.responses import HTMLResponse, PlainTextResponse
from pydantic import ValidationError
from typing import Optional

from flipmove.api import FORM_HTML, PASS_RESPONSE
from flipmove.api.models import GameRequest, MoveResponse
from flipmove.othello.board import Board
from flipmove.othello.evaluator import evaluate

logger = logging.getLogger(__name__)

app = FastAPI(title="flipmove")


def parse_game(raw: bytes) -> Board:
    try:
        game = GameRequest.model_validate_json(raw)
    except ValidationError as e:
        raise HTTPException(
            status_code=400, detail=f"invalid json {raw.decode(errors='replace')}? {e}"
        )

    board = game.board.to_board()
    logger.info(f"got board: {board}")
    return board


async def read_body(request: Request) -> bytes:
    return await request.body()


@app.exception_handler(HTTPException)
async def plain_text_errors(request: Request, exc: HTTPException) -> Response:
    return PlainTextResponse(str(exc.detail), status_code=exc.status_code)


@app.api_route("/", methods=["GET", "POST"])
def get_move(
    raw: bytes = Depends(read_body),
    json_: Optional[str] = Query(None, alias="json"),
) -> Response:
    if not raw and json_:
        raw = json_.encode()

    if not raw:
        return HTMLResponse(FORM_HTML)

    board = parse_game(raw)
    moves = board.get_moves()

    if not moves:
        return PlainTextResponse(PASS_RESPONSE)

    move = evaluate(board, moves)
    return PlainTextResponse(f"[{move.where.x},{move.where.y}]")


@app.post("/api/move")
def get_move_json(raw: bytes = Depends(read_body)) -> MoveResponse:
    board = parse_game(raw)
    moves = board.get_moves()

    if not moves:
        return MoveResponse.from_moves(None, moves)

    return MoveResponse.from_moves(evaluate(board, moves), moves)
