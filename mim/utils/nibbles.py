"""Nibble helpers for derived keys.

A derived key is viewed as a ``uint8`` array and split into its high and
low 4-bit halves with plain shifts and masks; each half is a palette index.
"""

import numpy as np

from mim.derive import DERIVED_KEY_SIZE
from mim.types import DerivedKey, UInt8Array

ROW_BYTES = 8
ROWS = DERIVED_KEY_SIZE // ROW_BYTES


def key_array(key: DerivedKey) -> UInt8Array:
    """Return ``key`` as a read-only ``uint8`` array, checking its length."""
    if len(key) != DERIVED_KEY_SIZE:
        raise ValueError(
            f"Derived key must be {DERIVED_KEY_SIZE} bytes, got {len(key)}"
        )
    return np.frombuffer(bytes(key), dtype=np.uint8)


def split_nibbles(key: DerivedKey) -> UInt8Array:
    """Return a ``(32, 2)`` array of ``(high, low)`` nibbles per byte."""
    arr = key_array(key)
    return np.stack([arr >> 4, arr & 0x0F], axis=1).astype(np.uint8)


def nibble_grid(key: DerivedKey) -> UInt8Array:
    """Return the ``(4, 16)`` palette index matrix in on-screen order.

    Row ``r`` covers bytes ``8r .. 8r+7``; every byte contributes its high
    nibble followed by its low nibble.
    """
    return split_nibbles(key).reshape(ROWS, ROW_BYTES * 2)
