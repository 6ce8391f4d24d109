import pytest

from flipmove.othello.grid import BLACK, EMPTY, WHITE, Grid, opposite
from flipmove.othello.position import PASS, Position


@pytest.mark.parametrize(
    ["piece", "expected"],
    [
        pytest.param(EMPTY, EMPTY, id="empty"),
        pytest.param(BLACK, WHITE, id="black"),
        pytest.param(WHITE, BLACK, id="white"),
    ],
)
def test_opposite(piece: int, expected: int) -> None:
    assert opposite(piece) == expected


def test_new_grid_is_empty() -> None:
    grid = Grid()
    assert grid.count(EMPTY) == 64
    assert grid.count(BLACK) == 0
    assert grid.count(WHITE) == 0


def test_get_set() -> None:
    grid = Grid()
    grid.set(Position(2, 7), BLACK)

    assert grid.get(Position(2, 7)) == BLACK
    assert grid.get(Position(7, 2)) == EMPTY

    # Rows are indexed by y, columns by x.
    assert grid.as_rows()[6][1] == BLACK


@pytest.mark.parametrize(
    ["position"],
    [
        pytest.param(PASS, id="pass"),
        pytest.param(Position(9, 1), id="x-too-big"),
        pytest.param(Position(1, 9), id="y-too-big"),
    ],
)
def test_off_board_access(position: Position) -> None:
    grid = Grid()

    with pytest.raises(ValueError):
        grid.get(position)

    with pytest.raises(ValueError):
        grid.set(position, BLACK)


def test_set_invalid_piece() -> None:
    with pytest.raises(ValueError):
        Grid().set(Position(1, 1), 3)


@pytest.mark.parametrize(
    ["rows"],
    [
        pytest.param([[EMPTY] * 8] * 7, id="too-few-rows"),
        pytest.param([[EMPTY] * 8] * 9, id="too-many-rows"),
        pytest.param([[EMPTY] * 7] * 8, id="short-row"),
        pytest.param([[3] * 8] * 8, id="invalid-piece"),
    ],
)
def test_init_error(rows: list[list[int]]) -> None:
    with pytest.raises(ValueError):
        Grid(rows)


def test_positions_row_major() -> None:
    positions = list(Grid().positions())

    assert len(positions) == 64
    assert positions[0] == Position(1, 1)
    assert positions[1] == Position(2, 1)
    assert positions[8] == Position(1, 2)
    assert positions[-1] == Position(8, 8)


def test_as_rows_is_a_copy() -> None:
    grid = Grid()
    rows = grid.as_rows()
    rows[0][0] = BLACK

    assert grid.get(Position(1, 1)) == EMPTY
