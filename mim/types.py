"""Common type aliases and enumerations.

``RGB`` triples flow from the palette into the ANSI renderer; ``DerivedKey``
is the fixed-size buffer produced by :func:`mim.derive.derive` and consumed
by everything downstream.
"""

from enum import StrEnum, auto
from typing import Tuple

import numpy as np
import numpy.typing as npt

RGB = Tuple[int, int, int]
DerivedKey = bytes
UInt8Array = npt.NDArray[np.uint8]


class ColourName(StrEnum):
    """Human readable names of the sixteen palette entries, in index order."""

    BLACK = auto()
    RED = auto()
    GREEN = auto()
    YELLOW = auto()
    BLUE = auto()
    MAGENTA = auto()
    CYAN = auto()
    WHITE = auto()
    GRAY = auto()
    BRIGHT_RED = auto()
    BRIGHT_GREEN = auto()
    BRIGHT_YELLOW = auto()
    BRIGHT_BLUE = auto()
    BRIGHT_MAGENTA = auto()
    BRIGHT_CYAN = auto()
    BRIGHT_WHITE = auto()
