"""Score keeping and the rolling score counter."""

from __future__ import annotations

from dataclasses import dataclass, field

from .layout import Rect, center_rect_on_screen

NUMBER_HORIZ_SIZE = 16
NUMBER_VERT_SIZE = 32

CHARACTER_LIST = "ABCDEFGHIJKLMNOPQRSTUVWXYZ.0123456789!\"#$"
CHARACTER_SCORE = "!"
CHARACTER_STAGE = "#"

SCORE_WINDOW_ZRECT = Rect(0, 0, 32, 144)


def advance_displayed_score(displayed: int, target: int) -> int:
    """Move the shown score one step towards the real score, never past it."""
    if displayed >= target:
        return displayed
    gap = target - displayed
    if gap > 5000:
        displayed += 1525
    elif gap > 1000:
        displayed += 175
    else:
        displayed += 25
    return min(displayed, target)


def character_index(char: str) -> int | None:
    """Position of a glyph in the number font, or None when it has none."""
    index = CHARACTER_LIST.find(char)
    return None if index < 0 or len(char) != 1 else index


def score_window_rects() -> tuple[Rect, Rect]:
    """Screen rectangles of the two players' score windows."""
    return (
        center_rect_on_screen(SCORE_WINDOW_ZRECT, 0.16, 0.89),
        center_rect_on_screen(SCORE_WINDOW_ZRECT, 0.84, 0.89),
    )


@dataclass
class ScoreBoard:
    """Real and displayed scores of both players."""

    score: list[int] = field(default_factory=lambda: [0, 0])
    displayed_score: list[int] = field(default_factory=lambda: [0, 0])
    round_start_score: list[int] = field(default_factory=lambda: [0, 0])
    score_time: list[int] = field(default_factory=lambda: [0, 0])

    def reset(self) -> None:
        """Clear scores, displayed scores and counter clocks."""
        self.displayed_score = [0, 0]
        self.score = [0, 0]
        self.score_time = [0, 0]

    def update(self, player: int, now: int) -> bool:
        """Roll the displayed score if due; True when it changed."""
        if now < self.score_time[player]:
            return False
        self.score_time[player] = now + 1
        shown = self.displayed_score[player]
        if shown >= self.score[player]:
            return False
        self.displayed_score[player] = advance_displayed_score(shown, self.score[player])
        return True