import pytest

from candycrisis.board import Suction
from candycrisis.next import (
    JIGGLE_FRAMES,
    PULLING,
    PULLING_FRAMES,
    NextPreview,
    jiggle_frame,
    next_window_rects,
    pull_offsets,
)
from candycrisis.rng import PieceRandom


def test_jiggle_frames():
    assert jiggle_frame(0) == Suction.NONE
    assert jiggle_frame(1) == Suction.SQUISH
    assert jiggle_frame(3) == Suction.SQUASH
    with pytest.raises(ValueError):
        jiggle_frame(JIGGLE_FRAMES)
    with pytest.raises(ValueError):
        jiggle_frame(-1)


def test_pull_offsets():
    assert pull_offsets(PULLING) == (20, None)
    assert pull_offsets(PULLING_FRAMES - 1) == (-66, 23)
    with pytest.raises(ValueError):
        pull_offsets(PULLING - 1)
    with pytest.raises(ValueError):
        pull_offsets(PULLING_FRAMES)


def test_pull_offsets_move_monotonically():
    yanks = [pull_offsets(s)[0] for s in range(PULLING, PULLING_FRAMES)]
    slides = [pull_offsets(s)[1] for s in range(PULLING + 1, PULLING_FRAMES)]
    assert yanks == sorted(yanks, reverse=True)
    assert slides == sorted(slides, reverse=True)


def test_next_window_rects():
    left, right = next_window_rects()
    for rect in (left, right):
        assert (rect.width, rect.height) == (32, 72)
        assert rect.left % 4 == 0
    assert left.top == right.top
    assert left.left < right.left


def test_refresh_sets_times_within_a_second():
    preview = NextPreview(PieceRandom(7))
    preview.refresh(0, 1000)
    assert preview.stage[0] == [0, 0]
    assert all(1000 <= t < 1060 for t in preview.time[0])


def test_pull_runs_to_completion_then_refreshes():
    preview = NextPreview(PieceRandom(7))
    preview.pull(1, 500, 3, 4)
    assert preview.pulled[1] == (3, 4)
    assert preview.pulling(1)
    assert preview.update(1, 500) is False
    now = 501
    stages = []
    while preview.pulling(1):
        assert preview.update(1, now) is True
        stages.append(preview.stage[1][0])
        now += 1
    assert stages[:-1] == list(range(PULLING + 1, PULLING_FRAMES))
    assert preview.stage[1] == [0, 0]


def test_jiggle_cycle_wraps_after_all_frames():
    preview = NextPreview(PieceRandom(2))
    preview.refresh(0, 0)
    preview.time[0] = [0, 10**6]
    now = 1
    for expected in range(1, JIGGLE_FRAMES):
        assert preview.update(0, now)
        assert preview.stage[0][0] == expected
        assert preview.time[0][0] == now + 1
        now += 2
    before = preview.time[0][0]
    assert preview.update(0, now)
    assert preview.stage[0][0] == 0
    assert 40 <= preview.time[0][0] - before < 120
    assert preview.stage[0][1] == 0


def test_update_not_due_changes_nothing():
    preview = NextPreview(PieceRandom(2))
    preview.refresh(0, 100)
    times = list(preview.time[0])
    assert preview.update(0, 100) is False
    assert preview.time[0] == times
    assert preview.stage[0] == [0, 0]