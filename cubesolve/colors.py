"""Classification of camera samples into sticker colours."""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum

BGR = tuple[int, int, int]
Frame = Sequence[Sequence[BGR]]


class Color(Enum):
    WHITE = "white"
    RED = "red"
    ORANGE = "orange"
    YELLOW = "yellow"
    GREEN = "green"
    BLUE = "blue"
    UNKNOWN = "unknown"

    @property
    def display_bgr(self) -> BGR:
        """The BGR triple used to draw this colour."""
        return _DISPLAY_BGR[self]


_DISPLAY_BGR: dict[Color, BGR] = {
    Color.WHITE: (255, 255, 255),
    Color.RED: (0, 0, 255),
    Color.ORANGE: (0, 165, 255),
    Color.YELLOW: (0, 255, 255),
    Color.GREEN: (0, 255, 0),
    Color.BLUE: (255, 0, 0),
    Color.UNKNOWN: (50, 50, 50),
}

# Inclusive hue ranges on the 0..180 scale, checked in this order.
_HUE_RANGES = (
    (160, 190, Color.RED),
    (3, 19, Color.ORANGE),
    (20, 30, Color.YELLOW),
    (60, 90, Color.GREEN),
    (100, 120, Color.BLUE),
)


def bgr_to_hue(bgr: BGR) -> int:
    """Return the hue of an 8-bit BGR pixel on the 0..180 scale."""
    b, g, r = bgr
    high = max(b, g, r)
    spread = high - min(b, g, r)
    if spread == 0:
        return 0
    if high == r:
        hue = 60 * (g - b) / spread
    elif high == g:
        hue = 120 + 60 * (b - r) / spread
    else:
        hue = 240 + 60 * (r - g) / spread
    if hue < 0:
        hue += 360
    return int(hue / 2 + 0.5)


def _is_white(bgr: BGR) -> bool:
    b, g, r = bgr
    return (
        min(b, g, r) > 200
        and abs(r - g) < 30
        and abs(g - b) < 30
        and abs(b - r) < 30
    )


def classify_color(bgr: BGR) -> Color:
    """Name the sticker colour of a BGR sample; unmatched hues count as white."""
    if _is_white(bgr):
        return Color.WHITE
    hue = bgr_to_hue(bgr)
    for low, high, color in _HUE_RANGES:
        if low <= hue <= high:
            return color
    return Color.WHITE


def median_color(frame: Frame, center_x: int, center_y: int, region: int = 5) -> BGR:
    """Per-channel median of the pixels in a square around a point.

    Pixels outside the frame are ignored; ``frame[y][x]`` is a BGR triple.
    """
    half = region // 2
    pixels = [
        frame[y][x]
        for y in range(center_y - half, center_y + half + 1)
        if 0 <= y < len(frame)
        for x in range(center_x - half, center_x + half + 1)
        if 0 <= x < len(frame[y])
    ]
    if not pixels:
        raise ValueError(f"no pixels around ({center_x}, {center_y})")
    mid = len(pixels) // 2
    b, g, r = (sorted(channel)[mid] for channel in zip(*pixels))
    return b, g, r


def sample_face(frame: Frame, box_size: int = 60) -> list[list[Color]]:
    """Classify the nine stickers of a 3x3 grid centred in ``frame``."""
    rows = len(frame)
    cols = len(frame[0]) if rows else 0
    grid = 3 * box_size
    if box_size <= 0 or rows < grid or cols < grid:
        raise ValueError(
            f"a {cols}x{rows} frame cannot hold a grid of {box_size}-pixel boxes"
        )
    start_x = (cols - grid) // 2
    start_y = (rows - grid) // 2
    return [
        [
            classify_color(
                median_color(
                    frame,
                    start_x + j * box_size + box_size // 2,
                    start_y + i * box_size + box_size // 2,
                )
            )
            for j in range(3)
        ]
        for i in range(3)
    ]