"""Fixed sixteen colour palette.

Each 4-bit nibble of a derived key selects one entry, so the index of an
entry is exactly the nibble value (``0x0``-``0xF``). The table is a
persistent vector and is shared read-only by every render.
"""

from pyrsistent import pvector
from pyrsistent.typing import PVector

from mim.types import RGB, ColourName

PALETTE: PVector[RGB] = pvector(
    [
        (0, 0, 0),
        (194, 54, 33),
        (37, 188, 36),
        (173, 173, 39),
        (73, 46, 225),
        (211, 56, 211),
        (51, 187, 200),
        (203, 204, 205),
        (129, 131, 131),
        (252, 57, 31),
        (49, 231, 34),
        (234, 236, 35),
        (88, 51, 255),
        (249, 53, 248),
        (20, 240, 240),
        (233, 235, 235),
    ]
)

COLOUR_NAMES: PVector[ColourName] = pvector(list(ColourName))


def palette_colour(index: int) -> RGB:
    """Return the RGB triple for a nibble value.

    Fails fast on anything outside ``0..15``; negative indices are not
    allowed to wrap around.
    """
    if not 0 <= index < len(PALETTE):
        raise ValueError(f"Palette index out of range: {index}")
    return PALETTE[index]


def colour_name(index: int) -> ColourName:
    """Return the symbolic name of a palette entry."""
    palette_colour(index)
    return COLOUR_NAMES[index]
