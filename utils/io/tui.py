import math
from typing import TypeAlias

from localtypes import Label

# Constants

RESET = "\033[0m"

RGB: TypeAlias = tuple[int, int, int]


def fg_color_24b(red: int, green: int, blue: int) -> str:
    return f"\033[38;2;{red};{green};{blue}m"


def bg_color_24b(red: int, green: int, blue: int) -> str:
    return f"\033[48;2;{red};{green};{blue}m"


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def color_chart(normalized: float) -> RGB:
    """
    Map a value of [0, 1] to a color.

    - blue falls at double speed, reaching 0 at 0.5
    - green rises to a peak at 0.5, then falls back
    - red stays at 0 until 0.5, then rises at double speed
    """
    normalized = min(max(normalized, 0.0), 1.0)

    blue = max(255 - _round_half_up(255 * 2 * normalized), 0)
    if normalized < 0.5:
        green = _round_half_up(255 * 2 * normalized)
    else:
        green = 255 - _round_half_up(255 * 2 * (normalized - 0.5))
    red = 0 if normalized < 0.5 else _round_half_up(255 * 2 * (normalized - 0.5))

    return red, green, blue


def color_hex(normalized: float) -> str:
    """Chart color as RRGGBB, two lowercase hex digits per channel."""
    return "".join(f"{channel:02x}" for channel in color_chart(normalized))


def label_color(label: Label, max_label: Label) -> RGB | None:
    """Chart color of a label, scaled by the largest label; None for "off"."""
    if label == 0 or max_label <= 0:
        return None
    return color_chart(label / max_label)


if __name__ == "__main__":
    for i in range(11):
        red, green, blue = color_chart(i / 10)
        print(f"{bg_color_24b(red, green, blue)} {i / 10:.1f} {RESET}", end=" ")
    print()
