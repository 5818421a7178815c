"""ANSI truecolor rendering of a derived key.

Layout rules, applied to the 32 key bytes in order:

* Before every eighth byte (except the first) a ``\\r\\n`` row break is
  emitted, giving four rows.
* Each byte becomes a cell of two squares: the high nibble's colour then
  the low nibble's colour, each two spaces wide, followed by a reset.
* Odd-indexed bytes get two extra spaces after the reset, so cells pair up
  visually within a row.
* One more reset closes the whole mosaic.

Both foreground and background are set to the same colour so the squares
render solid regardless of the terminal theme. The exact spacing is part of
the output format; downstream tools diff rendered mosaics directly.
"""

from typing import List, Tuple

from mim.palette import palette_colour
from mim.types import RGB, DerivedKey
from mim.utils.nibbles import ROW_BYTES, split_nibbles

ESC = "\x1b"
ANSI_RESET = f"{ESC}[0m"
ROW_SEPARATOR = "\r\n"
CELL_PADDING = "  "


def ansi_rgb(rgb: RGB) -> str:
    """Return a single escape sequence setting fg and bg to ``rgb``."""
    r, g, b = rgb
    return f"{ESC}[38;2;{r};{g};{b};48;2;{r};{g};{b}m"


def split_byte(b: int) -> Tuple[RGB, RGB]:
    """Split a byte into its two nibbles and look both up in the palette."""
    if not 0 <= b <= 0xFF:
        raise ValueError(f"Not a byte value: {b}")
    return palette_colour(b >> 4), palette_colour(b & 0x0F)


def render_cell(left: RGB, right: RGB, paired: bool = False) -> str:
    """Render one byte-cell; ``paired`` cells carry trailing padding."""
    cell = (
        ansi_rgb(left) + CELL_PADDING + ansi_rgb(right) + CELL_PADDING + ANSI_RESET
    )
    if paired:
        cell += CELL_PADDING
    return cell


def render_ansi(key: DerivedKey) -> str:
    """Render a 32 byte derived key as an ANSI mosaic string."""
    parts: List[str] = []
    for i, (high, low) in enumerate(split_nibbles(key)):
        if i % ROW_BYTES == 0 and i != 0:
            parts.append(ROW_SEPARATOR)
        left, right = palette_colour(int(high)), palette_colour(int(low))
        parts.append(render_cell(left, right, paired=i % 2 == 1))
    parts.append(ANSI_RESET)
    return "".join(parts)
