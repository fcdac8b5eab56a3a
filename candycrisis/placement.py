"""Placing pieces and grenades, settling the board and linking blobs."""

from __future__ import annotations

from dataclasses import dataclass, field

from .board import (
    BLOB_TYPES,
    CHAR11,
    CHAR12,
    CHAR13,
    CHAR14,
    CHAR24,
    CHAR31,
    CHAR32,
    CHAR33,
    CHAR34,
    DARK_CHAR,
    GRAY_BLINK1,
    GRID_ACROSS,
    GRID_DOWN,
    NO_CHARRING,
    Board,
    Cell,
    FallingPiece,
    Suction,
    is_blob,
)

GRAY_DEATH_DELAY = -6

# Charring around a grenade, indexed by column offset (-1..1) then row offset (-2..2).
_GRENADE_CHAR = (
    (DARK_CHAR | CHAR11, DARK_CHAR | CHAR12, DARK_CHAR | CHAR13, DARK_CHAR | CHAR14, NO_CHARRING),
    (NO_CHARRING, NO_CHARRING, NO_CHARRING, NO_CHARRING, DARK_CHAR | CHAR24),
    (DARK_CHAR | CHAR31, DARK_CHAR | CHAR32, DARK_CHAR | CHAR33, DARK_CHAR | CHAR34, NO_CHARRING),
)

Cells = list[tuple[int, int]]


@dataclass
class GrenadeResult:
    """What a grenade destroyed and what it scored."""

    amount: int
    multiplier: int = 0
    death: dict[tuple[int, int], int] = field(default_factory=dict)
    charred: Cells = field(default_factory=list)

    @property
    def points(self) -> int:
        return self.amount * self.multiplier


def resolve_suction(board: Board) -> Cells:
    """Link each blob to same-coloured neighbours; return the blob cells that changed.

    The hidden top row is left alone and never counts as a neighbour.
    """
    changed: Cells = []
    grid = board.grid
    for x in range(GRID_ACROSS):
        for y in range(1, GRID_DOWN):
            color = grid[x][y]
            if not is_blob(color):
                board.suction[x][y] = Suction.NONE
                continue
            suck = Suction.NONE
            if x > 0 and grid[x - 1][y] == color:
                suck |= Suction.LEFT
            if x < GRID_ACROSS - 1 and grid[x + 1][y] == color:
                suck |= Suction.RIGHT
            if y > 1 and grid[x][y - 1] == color:
                suck |= Suction.UP
            if y < GRID_DOWN - 1 and grid[x][y + 1] == color:
                suck |= Suction.DOWN
            actual = board.suction[x][y]
            if actual in (Suction.BLINK_BLOB, Suction.SOB_BLOB):
                actual = Suction.NONE
            if actual != suck:
                board.suction[x][y] = int(suck)
                changed.append((x, y))
    return changed


def settle_step(board: Board) -> bool:
    """Drop floating cells by one row and advance landing jiggles; True while busy."""
    busy = False
    grid, suction, charred = board.grid, board.suction, board.charred
    for x in range(GRID_ACROSS):
        for y in range(GRID_DOWN - 1, 0, -1):
            if Suction.JIGGLE1 <= suction[x][y] < Suction.IN_DOUBT:
                suction[x][y] += 1
                busy = True
            elif grid[x][y] == Cell.EMPTY and grid[x][y - 1] != Cell.EMPTY:
                grid[x][y] = grid[x][y - 1]
                grid[x][y - 1] = Cell.EMPTY
                charred[x][y] = charred[x][y - 1]
                charred[x][y - 1] = NO_CHARRING
                suction[x][y - 1] = Suction.NONE
                if is_blob(grid[x][y]):
                    if y >= GRID_DOWN - 1 or grid[x][y + 1] != Cell.EMPTY:
                        suction[x][y] = Suction.JIGGLE1
                else:
                    suction[x][y] = Suction.NONE
                busy = True
    return busy


def handle_magic(color: int) -> int:
    """Cycle a magic blob to the next colour."""
    color += 1
    return 1 if color > BLOB_TYPES else color


def fade_charred(board: Board) -> Cells:
    """Lighten every charred cell by one step; return the cells that faded."""
    faded: Cells = []
    for x in range(GRID_ACROSS):
        for y in range(GRID_DOWN):
            value = board.charred[x][y]
            if value & 0xF0:
                board.charred[x][y] = (value & 0x0F) | ((value & 0xF0) - 0x10)
                faded.append((x, y))
    return faded


def _mark_gray(board: Board, result: GrenadeResult, x: int, y: int) -> None:
    board.suction[x][y] = GRAY_BLINK1
    result.death[(x, y)] = GRAY_DEATH_DELAY


def _mark_blob(board: Board, result: GrenadeResult, x: int, y: int, gx: int, gy: int) -> None:
    board.suction[x][y] = Suction.IN_DEATH
    result.death[(x, y)] = -abs(x - gx + y - gy)
    result.multiplier += 1


def place_grenade(board: Board, x: int, y: int, level: int, max_level: int) -> GrenadeResult:
    """Explode a grenade landing at (x, y).

    Landing on a blob destroys every blob of that colour and the grays beside
    them; otherwise the 3x3 area around the grenade is destroyed.
    """
    grid = board.grid
    result = GrenadeResult(amount=(level if level <= max_level else 1) * 100)

    for dx, column in enumerate(_GRENADE_CHAR, start=-1):
        for dy, char_type in enumerate(column, start=-2):
            at_x, at_y = x + dx, y + dy
            if Board.in_bounds(at_x, at_y) and char_type != NO_CHARRING and is_blob(grid[at_x][at_y]):
                board.charred[at_x][at_y] = char_type
                result.charred.append((at_x, at_y))

    if y < GRID_DOWN - 1 and Board.in_bounds(x, y + 1) and is_blob(grid[x][y + 1]):
        color = grid[x][y + 1]
        for cx in range(GRID_ACROSS):
            for cy in range(GRID_DOWN):
                if grid[cx][cy] != color:
                    continue
                _mark_blob(board, result, cx, cy, x, y)
                for nx, ny in ((cx + 1, cy), (cx - 1, cy), (cx, cy + 1), (cx, cy - 1)):
                    if Board.in_bounds(nx, ny) and grid[nx][ny] == Cell.GRAY:
                        _mark_gray(board, result, nx, ny)
    else:
        for cx in range(x - 1, x + 2):
            for cy in range(y - 1, y + 2):
                if not Board.in_bounds(cx, cy):
                    continue
                if grid[cx][cy] == Cell.GRAY:
                    _mark_gray(board, result, cx, cy)
                elif is_blob(grid[cx][cy]):
                    _mark_blob(board, result, cx, cy, x, y)
    return result


def place_piece(board: Board, piece: FallingPiece) -> Cells:
    """Fix both blobs of a landed piece into the grid; return the cells filled.

    Hint glows are cleared first. Blobs that lie outside the grid are dropped.
    """
    if piece.grenade:
        raise ValueError("a grenade is placed with place_grenade")

    for column in board.glow:
        for y in range(GRID_DOWN):
            column[y] = False

    dx, dy = piece.second_blob_offset()
    placed: Cells = []
    for cx, cy, color in (
        (piece.x, piece.y, piece.color_a),
        (piece.x + dx, piece.y + dy, piece.color_b),
    ):
        if Board.in_bounds(cx, cy):
            board.grid[cx][cy] = int(color)
            board.suction[cx][cy] = Suction.NONE
            board.charred[cx][cy] = NO_CHARRING
            placed.append((cx, cy))

    piece.halfway = False
    return placed