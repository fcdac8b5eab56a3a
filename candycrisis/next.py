"""The preview window showing each player's next piece."""

from __future__ import annotations

from .board import Suction
from .layout import Rect, center_rect_on_screen
from .rng import PieceRandom

JIGGLE_FRAMES = 8
PULLING = 10
PULLING_FRAMES = 18

NEXT_WINDOW_ZRECT = Rect(0, 0, 72, 32)

_JIGGLE = (
    Suction.NONE,
    Suction.SQUISH,
    Suction.NONE,
    Suction.SQUASH,
    Suction.NONE,
    Suction.SQUISH,
    Suction.NONE,
    Suction.SQUASH,
)
_YANK = (20, 18, 15, 8, -6, -26, -46, -66)
_SLIDE = (None, 66, 48, 36, 29, 26, 24, 23)


def jiggle_frame(stage: int) -> Suction:
    """The blob frame shown at a stage of the idle jiggle."""
    if not 0 <= stage < JIGGLE_FRAMES:
        raise ValueError(f"jiggle stage out of range: {stage}")
    return _JIGGLE[stage]


def pull_offsets(stage: int) -> tuple[int, int | None]:
    """Vertical offsets of the outgoing and incoming pieces while pulling.

    The incoming offset is None on the first frame, when it is not drawn.
    """
    if not PULLING <= stage < PULLING_FRAMES:
        raise ValueError(f"pull stage out of range: {stage}")
    index = stage - PULLING
    return _YANK[index], _SLIDE[index]


def next_window_rects() -> tuple[Rect, Rect]:
    """Screen rectangles of the two players' preview windows."""
    return (
        center_rect_on_screen(NEXT_WINDOW_ZRECT, 0.46, 0.25),
        center_rect_on_screen(NEXT_WINDOW_ZRECT, 0.54, 0.25),
    )


class NextPreview:
    """Animation clocks of the preview: idle jiggles and the pull to the board."""

    def __init__(self, rng: PieceRandom | None = None) -> None:
        self.rng = rng if rng is not None else PieceRandom()
        self.stage = [[0, 0], [0, 0]]
        self.time = [[0, 0], [0, 0]]
        self.pulled = [(0, 0), (0, 0)]

    def refresh(self, player: int, now: int) -> None:
        """Restart both blobs' jiggles at random moments within the next second."""
        self.stage[player] = [0, 0]
        self.time[player] = [now + self.rng.random_before(60), now + self.rng.random_before(60)]

    def pull(self, player: int, now: int, color_a: int, color_b: int) -> None:
        """Start sliding the shown piece out towards the board."""
        self.pulled[player] = (color_a, color_b)
        self.stage[player][0] = PULLING
        self.time[player][0] = now

    def pulling(self, player: int) -> bool:
        return self.stage[player][0] >= PULLING

    def update(self, player: int, now: int) -> bool:
        """Advance whatever animation is due; True when the preview must be redrawn."""
        stages, times = self.stage[player], self.time[player]
        if stages[0] >= PULLING:
            if now <= times[0]:
                return False
            stages[0] += 1
            if stages[0] >= PULLING_FRAMES:
                self.refresh(player, now)
            else:
                times[0] += 1
            return True

        changed = False
        for blob in range(2):
            if now > times[blob]:
                stages[blob] += 1
                if stages[blob] >= JIGGLE_FRAMES:
                    stages[blob] = 0
                    times[blob] += 40 + self.rng.random_before(80)
                else:
                    times[blob] += 2
                changed = True
        return changed