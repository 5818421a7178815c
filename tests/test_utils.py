import re
from typing import List

from mim.renderer.ansi import ANSI_RESET, CELL_PADDING, ansi_rgb
from mim.types import RGB

COLOUR_SEQUENCE = re.compile(
    r"\x1b\[38;2;(\d+);(\d+);(\d+);48;2;(\d+);(\d+);(\d+)m"
)
ANY_SEQUENCE = re.compile(r"\x1b\[[0-9;]*m")


def colour_sequences(output: str) -> List[RGB]:
    """Return the RGB triples of every colour-set sequence, checking fg == bg."""
    colours: List[RGB] = []
    for match in COLOUR_SEQUENCE.finditer(output):
        values = tuple(int(v) for v in match.groups())
        assert values[:3] == values[3:], f"fg/bg mismatch in {match.group(0)!r}"
        colours.append((values[0], values[1], values[2]))
    return colours


def strip_ansi(output: str) -> str:
    return ANY_SEQUENCE.sub("", output)


def solid_mosaic(rgb: RGB) -> str:
    """Expected rendering of a key whose every nibble maps to ``rgb``."""
    seq = ansi_rgb(rgb)
    cell = seq + CELL_PADDING + seq + CELL_PADDING + ANSI_RESET
    row = (cell + cell + CELL_PADDING) * 4
    return "\r\n".join([row] * 4) + ANSI_RESET
