"""The playing field and the movement rules of the falling piece."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

GRID_ACROSS = 6
GRID_DOWN = 13

GRAY_NO_BLINK = 0
GRAY_BLINK1 = 1
GRAY_BLINK2 = 2
GRAY_BLINK3 = 3

NO_CHARRING = 0
CHAR11 = 6
CHAR31 = 7
CHAR12 = 8
CHAR32 = 9
CHAR13 = 10
CHAR33 = 11
CHAR14 = 12
CHAR24 = 13
CHAR34 = 14
DARK_CHAR = 0xF0
LIGHTEST_CHAR = 0x00


class Cell(IntEnum):
    """What can occupy a square of the grid."""

    EMPTY = 0
    BLOB1 = 1
    BLOB2 = 2
    BLOB3 = 3
    BLOB4 = 4
    BLOB5 = 5
    BLOB6 = 6
    BLOB7 = 7
    BOMB_TOP = 8
    BOMB_BOTTOM = 9
    GRAY = 10
    LIGHT = 11
    SUN = 12


FIRST_BLOB = Cell.BLOB1
LAST_BLOB = Cell.BLOB7
BLOB_TYPES = LAST_BLOB - FIRST_BLOB + 1


def is_blob(value: int) -> bool:
    """True for one of the seven coloured blobs."""
    return FIRST_BLOB <= value <= LAST_BLOB


class Suction(IntEnum):
    """Drawing state of a blob: neighbour links and animation frames."""

    NONE = 0
    UP = 1
    RIGHT = 2
    UP_RIGHT = 3
    DOWN = 4
    UP_DOWN = 5
    RIGHT_DOWN = 6
    UP_RIGHT_DOWN = 7
    LEFT = 8
    LEFT_UP = 9
    LEFT_RIGHT = 10
    LEFT_UP_RIGHT = 11
    LEFT_DOWN = 12
    LEFT_UP_DOWN = 13
    LEFT_RIGHT_DOWN = 14
    LEFT_UP_RIGHT_DOWN = 15
    DYING = 16
    SQUISH = 17
    SQUASH = 18
    SQUISH1 = 19
    SQUISH2 = 20
    SQUISH3 = 21
    SQUISH4 = 22
    BLINK_BLOB = 23
    SOB_BLOB = 24
    SOB2_BLOB = 25
    FLASH_DARK_BLOB = 26
    FLASH_BRIGHT_BLOB = 27
    JIGGLE1 = 28
    JIGGLE2 = 29
    JIGGLE3 = 30
    JIGGLE4 = 31
    JIGGLE5 = 32
    JIGGLE6 = 33
    JIGGLE7 = 34
    JIGGLE8 = 35
    IN_DOUBT = 36
    IN_DEATH = 37


class Rotation(IntEnum):
    """Where the second blob sits relative to the first."""

    RIGHT = 0
    DOWN = 1
    LEFT = 2
    UP = 3


_SECOND_OFFSET = {
    Rotation.RIGHT: (1, 0),
    Rotation.DOWN: (0, 1),
    Rotation.LEFT: (-1, 0),
    Rotation.UP: (0, -1),
}


def _column() -> list[int]:
    return [0] * GRID_DOWN


def _plane() -> list[list[int]]:
    return [_column() for _ in range(GRID_ACROSS)]


@dataclass
class Board:
    """One player's grid, indexed by column then row, with per-cell state."""

    grid: list[list[int]] = field(default_factory=_plane)
    suction: list[list[int]] = field(default_factory=_plane)
    charred: list[list[int]] = field(default_factory=_plane)
    glow: list[list[bool]] = field(
        default_factory=lambda: [[False] * GRID_DOWN for _ in range(GRID_ACROSS)]
    )

    @staticmethod
    def in_bounds(x: int, y: int) -> bool:
        return 0 <= x < GRID_ACROSS and 0 <= y < GRID_DOWN

    def _check(self, x: int, y: int) -> None:
        if not self.in_bounds(x, y):
            raise IndexError(f"cell ({x}, {y}) is outside the grid")

    def get(self, x: int, y: int) -> int:
        """Return the content of a cell."""
        self._check(x, y)
        return self.grid[x][y]

    def set(self, x: int, y: int, value: int) -> None:
        """Store a value in a cell."""
        self._check(x, y)
        self.grid[x][y] = int(value)


@dataclass
class FallingPiece:
    """The pair of blobs under the player's control."""

    x: int = 2
    y: int = 0
    rotation: Rotation = Rotation.UP
    spin: int = 0
    halfway: bool = False
    grenade: bool = False
    magic: bool = False
    color_a: int = Cell.BLOB1
    color_b: int = Cell.BLOB1

    def second_blob_offset(self) -> tuple[int, int]:
        """Return the (dx, dy) of the second blob from the first."""
        return _SECOND_OFFSET[Rotation(self.rotation)]

    def can_move(self, board: Board, dx: int, dy: int) -> bool:
        """True when both blobs fit after moving by (dx, dy); rows above the top are free."""
        x = self.x + dx
        y = self.y + dy
        ox, oy = self.second_blob_offset()
        for cx, cy in ((x, y), (x + ox, y + oy)):
            if cx < 0 or cx >= GRID_ACROSS or cy >= GRID_DOWN:
                return False
            if cy >= 0 and board.get(cx, cy) != Cell.EMPTY:
                return False
        return True

    def _step_down(self) -> int:
        return 1 if self.halfway else 0

    def can_go_left(self, board: Board) -> bool:
        return self.can_move(board, -1, self._step_down())

    def go_left(self) -> None:
        self.x -= 1

    def can_go_right(self, board: Board) -> bool:
        return self.can_move(board, 1, self._step_down())

    def go_right(self) -> None:
        self.x += 1

    def can_fall(self, board: Board) -> bool:
        return self.can_move(board, 0, 1)

    def fall(self) -> None:
        """Drop by half a cell."""
        if self.halfway:
            self.y += 1
        self.halfway = not self.halfway

    def can_rotate(self, choosing_difficulty: bool) -> bool:
        return not choosing_difficulty and not self.grenade

    def _bump_up(self) -> bool:
        if self.halfway:
            self.halfway = False
        else:
            self.y -= 1
        self.spin += 1
        return self.spin >= 4

    def rotate(self, board: Board) -> bool:
        """Turn clockwise, kicking off walls; True when the piece must lock down."""
        locked = False
        self.rotation = Rotation((self.rotation + 1) % 4)
        if self.can_move(board, 0, self._step_down()):
            return locked

        if self.rotation == Rotation.DOWN:
            locked = self._bump_up() or locked

        if self.rotation == Rotation.LEFT:
            if self.can_go_right(board):
                self.go_right()
            else:
                self.rotation = Rotation.UP

        if self.rotation == Rotation.RIGHT:
            if self.can_go_left(board):
                self.go_left()
            else:
                self.rotation = Rotation.DOWN
                if not self.can_move(board, 0, self._step_down()):
                    locked = self._bump_up() or locked
        return locked