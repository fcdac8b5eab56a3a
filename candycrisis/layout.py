"""Screen geometry, resource lookup and window sizing."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Iterable

PROJECT_VERSION = "3.0.2"
WINDOW_TITLE = f"Candy Crisis (source port v{PROJECT_VERSION})"

SCREEN_WIDTH = 640
SCREEN_HEIGHT = 480
WIDESCREEN_HEIGHT = 360

RESOURCE_PROBE = ("snd", 128, ".wav")


class ResourceError(Exception):
    """Raised when the game's resource folder cannot be found."""


@dataclass(frozen=True)
class Point:
    """A screen point, vertical coordinate first."""

    v: int
    h: int


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given as top, left, bottom, right."""

    top: int
    left: int
    bottom: int
    right: int

    @property
    def width(self) -> int:
        return self.right - self.left

    @property
    def height(self) -> int:
        return self.bottom - self.top

    def offset(self, dh: int, dv: int) -> "Rect":
        """Return the rectangle moved by dh horizontally and dv vertically."""
        return Rect(self.top + dv, self.left + dh, self.bottom + dv, self.right + dh)

    def contains(self, point: Point) -> bool:
        """True when the point lies inside; the bottom and right edges are excluded."""
        return self.top <= point.v < self.bottom and self.left <= point.h < self.right

    def union(self, other: "Rect") -> "Rect":
        """Return the smallest rectangle holding both rectangles."""
        return Rect(
            min(self.top, other.top),
            min(self.left, other.left),
            max(self.bottom, other.bottom),
            max(self.right, other.right),
        )


def center_rect_on_screen(rect: Rect, location_x: float, location_y: float) -> Rect:
    """Place a rectangle at a fractional position of the 640x480 screen.

    The horizontal position is rounded down to a multiple of four.
    """
    dest_h = int(location_x * (SCREEN_WIDTH - rect.width)) & ~3
    dest_v = int(location_y * (SCREEN_HEIGHT - rect.height))
    return rect.offset(-rect.left, -rect.top).offset(dest_h, dest_v)


def quick_resource_name(resource_dir: str, prefix: str, resource_id: int, extension: str) -> str:
    """Build a resource file name such as ``<dir>snd_128.wav``."""
    if resource_id:
        return f"{resource_dir}{prefix}_{resource_id}{extension}"
    return f"{resource_dir}{prefix}{extension}"


def find_resource_dir(candidates: Iterable[str | os.PathLike]) -> str:
    """Return the first candidate folder that holds the game's sound resources."""
    for candidate in candidates:
        directory = os.fspath(candidate)
        if not directory.endswith(("/", os.sep)):
            directory += os.sep
        if os.path.isfile(quick_resource_name(directory, *RESOURCE_PROBE)):
            return directory
    raise ResourceError("Couldn't find the CandyCrisisResources or share/candycrisis folder.")


def window_scale(display_width: int, display_height: int, widescreen: bool, crisp: bool) -> float:
    """Pick a window scale covering at most 75% of the usable display."""
    res_h = WIDESCREEN_HEIGHT if widescreen else SCREEN_HEIGHT
    scale_x = (display_width * 75 // 100) / SCREEN_WIDTH
    scale_y = (display_height * 75 // 100) / res_h
    scale = min(scale_x, scale_y)
    if crisp:
        scale = float(int(scale))
    return max(1.0, scale)