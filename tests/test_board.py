import pytest

from candycrisis.board import (
    GRID_ACROSS,
    GRID_DOWN,
    Board,
    Cell,
    FallingPiece,
    Rotation,
    is_blob,
)


def test_new_board_is_empty():
    board = Board()
    assert all(board.get(x, y) == Cell.EMPTY for x in range(GRID_ACROSS) for y in range(GRID_DOWN))


def test_set_and_get_round_trip():
    board = Board()
    board.set(3, 7, Cell.GRAY)
    assert board.get(3, 7) == Cell.GRAY
    assert board.get(3, 6) == Cell.EMPTY


@pytest.mark.parametrize("x,y", [(-1, 0), (GRID_ACROSS, 0), (0, -1), (0, GRID_DOWN)])
def test_out_of_range_raises(x, y):
    with pytest.raises(IndexError):
        Board().get(x, y)


def test_is_blob_range():
    assert is_blob(Cell.BLOB1) and is_blob(Cell.BLOB7)
    assert not is_blob(Cell.EMPTY) and not is_blob(Cell.GRAY)


@pytest.mark.parametrize(
    "rotation,offset",
    [(Rotation.RIGHT, (1, 0)), (Rotation.DOWN, (0, 1)), (Rotation.LEFT, (-1, 0)), (Rotation.UP, (0, -1))],
)
def test_second_blob_offset(rotation, offset):
    assert FallingPiece(rotation=rotation).second_blob_offset() == offset


def test_second_blob_above_top_is_allowed():
    piece = FallingPiece()
    assert piece.can_move(Board(), 0, 0)


def test_walls_block_movement():
    board = Board()
    assert not FallingPiece(x=0).can_go_left(board)
    assert not FallingPiece(x=GRID_ACROSS - 1).can_go_right(board)


def test_occupied_cell_blocks_movement():
    board = Board()
    board.set(1, 4, Cell.BLOB2)
    piece = FallingPiece(x=2, y=4)
    assert not piece.can_go_left(board)
    assert piece.can_go_right(board)


def test_fall_moves_half_cells():
    piece = FallingPiece(y=3)
    piece.fall()
    assert piece.halfway and piece.y == 3
    piece.fall()
    assert not piece.halfway and piece.y == 4


def test_falls_to_bottom_row():
    board = Board()
    piece = FallingPiece()
    while piece.can_fall(board):
        piece.fall()
    assert piece.y == GRID_DOWN - 1
    assert not piece.halfway


def test_can_rotate_rules():
    assert FallingPiece().can_rotate(False)
    assert not FallingPiece().can_rotate(True)
    assert not FallingPiece(grenade=True).can_rotate(False)


def test_free_rotation_cycles_clockwise():
    board = Board()
    piece = FallingPiece(y=5)
    seen = []
    for _ in range(4):
        assert piece.rotate(board) is False
        seen.append(piece.rotation)
    assert seen == [Rotation.RIGHT, Rotation.DOWN, Rotation.LEFT, Rotation.UP]
    assert piece.y == 5


def test_rotation_kicks_off_right_wall():
    board = Board()
    start_x = GRID_ACROSS - 1
    piece = FallingPiece(x=start_x, y=5)
    piece.rotate(board)
    assert piece.rotation == Rotation.RIGHT
    assert piece.x == start_x - 1
    assert piece.can_move(board, 0, 0)


def test_rotation_kicks_off_left_wall():
    board = Board()
    piece = FallingPiece(x=0, y=5, rotation=Rotation.DOWN)
    piece.rotate(board)
    assert piece.rotation == Rotation.LEFT
    assert piece.x == 1
    assert piece.can_move(board, 0, 0)


def _narrow_well():
    board = Board()
    for y in range(1, GRID_DOWN):
        board.set(1, y, Cell.GRAY)
        board.set(3, y, Cell.GRAY)
    board.set(2, 6, Cell.GRAY)
    return board


def test_rotation_in_narrow_well_bumps_up():
    board = _narrow_well()
    start_y = 5
    piece = FallingPiece(x=2, y=start_y)
    assert piece.rotate(board) is False
    assert piece.rotation == Rotation.DOWN
    assert piece.y == start_y - 1
    assert piece.spin == 1
    assert piece.can_move(board, 0, 0)


def test_rotation_locks_after_repeated_bumps():
    board = _narrow_well()
    piece = FallingPiece(x=2, y=5, spin=3)
    assert piece.rotate(board) is True
    assert piece.spin == 4


def test_halfway_bump_clears_halfway_instead_of_rising():
    board = _narrow_well()
    piece = FallingPiece(x=2, y=4, halfway=True)
    piece.rotate(board)
    assert piece.y == 4
    assert not piece.halfway