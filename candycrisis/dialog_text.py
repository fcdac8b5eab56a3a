"""Text colouring, the continue countdown, box edge shading and name entry for dialogs."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import IntEnum
from typing import Container, Sequence

from .layout import Rect

EDGE_SIZE = 8
WAVE_STEP = 0.2
CONTINUE_SECONDS = 10

CHANNEL_MASK = 0xFF
BITS_PER_CHANNEL = 8
HALFBRIGHT_MASK = (
    (CHANNEL_MASK >> 1)
    | ((CHANNEL_MASK >> 1) << BITS_PER_CHANNEL)
    | ((CHANNEL_MASK >> 1) << (2 * BITS_PER_CHANNEL))
)

KEY_RETURN = "return"
KEY_BACKSPACE = "backspace"

SOUND_CLICK = "click"
SOUND_SQUISHY = "squishy"
SOUND_PLACE = "place"

# Corner masks: ' ' restores the saved pixel, '-' restores it at half brightness,
# '.' paints black, 'x' halves the current pixel and 'X' keeps it.
_EDGE_MAP = (
    (
        "      --",
        "    -...",
        "   -.xxX",
        "  -.xXXX",
        " -.xXXXX",
        " .xXXXXX",
        "-.xXXXXX",
        "-.XXXXXX",
    ),
    (
        "--      ",
        "...-    ",
        "Xxx.-   ",
        "XXXx.-  ",
        "XXXXx.- ",
        "XXXXXx. ",
        "XXXXXx.-",
        "XXXXXX.-",
    ),
    (
        "-.XXXXXX",
        "-.xXXXXX",
        " .xXXXXX",
        " -.xXXXX",
        "  -.xXXX",
        "   -.xxX",
        "    -...",
        "      --",
    ),
    (
        "XXXXXX.-",
        "XXXXXx.-",
        "XXXXXx. ",
        "XXXXx.- ",
        "XXXx.-  ",
        "Xxx.-   ",
        "...-    ",
        "--      ",
    ),
)

Pixels = list[list[int]]
Edges = list[list[list[int]]]
RGB = tuple[int, int, int]


class TextStyle(IntEnum):
    """How a line of dialog text is coloured."""

    RAINBOW = 0
    BRIGHT_RAINBOW = 1
    WHITE = 2
    BLUE_GLOW = 3
    GRAY = 4
    ALMOST_WHITE = 5


def _five_to_eight(value: int) -> int:
    return (value << 3) | (value >> 2)


def _trunc_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b >= 0) else -quotient


def _wave_rgb(wave: float, base: float, amplitude: float) -> RGB:
    third = 2.0 * math.pi / 3.0
    return (
        int(base + amplitude * math.sin(wave)),
        int(base + amplitude * math.sin(wave + third)),
        int(base + amplitude * math.sin(wave + 2 * third)),
    )


def rainbow_colors(length: int, wave: float, style: TextStyle) -> list[RGB]:
    """Colours of each character of a line of ``length`` characters.

    Rainbow styles shift the phase by a fixed step per character; the other
    styles colour the whole line alike.
    """
    if length < 0:
        raise ValueError(f"negative text length: {length}")
    style = TextStyle(style)
    if style == TextStyle.GRAY:
        fixed: RGB = (96, 96, 96)
    elif style == TextStyle.BLUE_GLOW:
        s = math.sin(wave)
        level = int(88.0 + 120.0 * s * s)
        fixed = (level, level, 255)
    elif style == TextStyle.WHITE:
        fixed = (255, 255, 255)
    else:
        fixed = (224, 224, 224)

    colors: list[RGB] = []
    for _ in range(length):
        if style == TextStyle.BRIGHT_RAINBOW:
            colors.append(_wave_rgb(wave, 208.0, 40.0))
        elif style == TextStyle.RAINBOW:
            colors.append(_wave_rgb(wave, 128.0, 96.0))
        else:
            colors.append(fixed)
        wave += WAVE_STEP
    return colors


@dataclass(frozen=True)
class Countdown:
    """The big digit of the continue dialog at one moment."""

    value: int
    timed_out: bool
    digit: str = ""
    color: RGB = (0, 0, 0)
    shadows: tuple[tuple[int, int], ...] = ()


def continue_countdown(shade: int) -> Countdown:
    """Work out the continue countdown for a dialog shade counter.

    Each hundred shade steps is one second; from green the digit turns through
    yellow to red, fading in from white at the start of each second. The
    shadows are (offset, 8-bit weight) pairs drawn behind the digit.
    """
    if shade < 0:
        raise ValueError(f"negative shade: {shade}")
    countdown = shade // 100
    if countdown >= CONTINUE_SECONDS:
        return Countdown(value=countdown, timed_out=True)

    if countdown < 5:
        r = countdown * 31 // 5
        g = 31
    else:
        r = 31
        g = (10 - countdown) * 31 // 5

    fade = min(shade % 100, 50)
    r = _trunc_div(31 * (49 - fade) + r * fade, 49)
    g = _trunc_div(31 * (49 - fade) + g * fade, 49)
    b = _trunc_div(31 * (49 - fade), 49)

    shadows = tuple(
        (2 * depth, _five_to_eight(20 - 4 * depth)) for depth in range(4, 0, -1)
    )
    return Countdown(
        value=countdown,
        timed_out=False,
        digit=chr(ord("9") - countdown),
        color=(_five_to_eight(r), _five_to_eight(g), _five_to_eight(b)),
        shadows=shadows,
    )


def credits_line(credits: int) -> str:
    """The credits line of the continue dialog."""
    return f"{credits} credit{'s' if credits != 1 else ' '}"


def halfbright(pixel: int) -> int:
    """Halve every colour channel of a 32-bit pixel, dropping the unused byte."""
    return (pixel >> 1) & HALFBRIGHT_MASK


def _corner_origins(rect: Rect) -> tuple[tuple[int, int], ...]:
    return (
        (rect.top, rect.left),
        (rect.top, rect.right - EDGE_SIZE),
        (rect.bottom - EDGE_SIZE, rect.left),
        (rect.bottom - EDGE_SIZE, rect.right - EDGE_SIZE),
    )


def _check_rect(pixels: Sequence[Sequence[int]], rect: Rect) -> None:
    height = len(pixels)
    width = len(pixels[0]) if height else 0
    if rect.width < EDGE_SIZE or rect.height < EDGE_SIZE:
        raise ValueError(f"rectangle smaller than its corners: {rect}")
    if rect.top < 0 or rect.left < 0 or rect.bottom > height or rect.right > width:
        raise ValueError(f"rectangle outside the image: {rect}")


def get_edges(pixels: Sequence[Sequence[int]], rect: Rect) -> Edges:
    """Copy the four 8x8 corners of a rectangle from an image of pixel rows.

    The corners come top-left, top-right, bottom-left, bottom-right.
    """
    _check_rect(pixels, rect)
    return [
        [list(pixels[top + row][left:left + EDGE_SIZE]) for row in range(EDGE_SIZE)]
        for top, left in _corner_origins(rect)
    ]


def curve_edges(pixels: Pixels, rect: Rect, edges: Edges) -> None:
    """Draw the dark rounded border of a dialog box into an image in place.

    ``edges`` holds the corners saved from the image behind the box.
    """
    _check_rect(pixels, rect)
    if len(edges) != 4:
        raise ValueError("four saved corners are needed")

    top, left, bottom, right = rect.top, rect.left, rect.bottom, rect.right

    for x in range(left + EDGE_SIZE, right - EDGE_SIZE):
        pixels[top][x] = 0
        pixels[bottom - 1][x] = 0
        pixels[top + 1][x] = halfbright(pixels[top + 1][x])
        pixels[bottom - 2][x] = halfbright(pixels[bottom - 2][x])

    for y in range(top + EDGE_SIZE, bottom - EDGE_SIZE):
        row = pixels[y]
        row[left] = 0
        row[right - 1] = 0
        row[left + 1] = halfbright(row[left + 1])
        row[right - 2] = halfbright(row[right - 2])

    for corner, (ctop, cleft), saved in zip(_EDGE_MAP, _corner_origins(rect), edges):
        for dy, mask_row in enumerate(corner):
            row = pixels[ctop + dy]
            for dx, mark in enumerate(mask_row):
                x = cleft + dx
                if mark == " ":
                    row[x] = saved[dy][dx]
                elif mark == "-":
                    row[x] = halfbright(saved[dy][dx])
                elif mark == ".":
                    row[x] = 0
                elif mark == "x":
                    row[x] = halfbright(row[x])


def edit_name(
    name: str, char: str | None, key: str | None, accepted: Container[str]
) -> tuple[str, bool, list[str]]:
    """Apply one keystroke to the high-score name being typed.

    Returns the new name, whether the name was confirmed with return, and the
    sounds to play. Return only confirms a name that is not empty; characters
    are added only when ``accepted`` holds them.
    """
    sounds: list[str] = []
    if key == KEY_RETURN:
        if name:
            return name, True, [SOUND_SQUISHY]
        sounds.append(SOUND_CLICK)

    if key == KEY_BACKSPACE and name:
        name = name[:-1]
        sounds.append(SOUND_CLICK)

    if char and char in accepted:
        name += char
        sounds.append(SOUND_PLACE)

    return name, False, sounds