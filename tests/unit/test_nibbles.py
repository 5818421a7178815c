# tests/unit/test_nibbles.py

import numpy as np
import pytest

from mim.utils.nibbles import key_array, nibble_grid, split_nibbles


def test_split_nibbles_high_then_low() -> None:
    key = bytes([0xA5, 0x0F, 0xF0, 0x00] * 8)
    nibbles = split_nibbles(key)
    assert nibbles.shape == (32, 2)
    assert nibbles.dtype == np.uint8
    assert nibbles[:4].tolist() == [[0xA, 0x5], [0x0, 0xF], [0xF, 0x0], [0x0, 0x0]]


def test_grid_follows_screen_order() -> None:
    grid = nibble_grid(bytes(range(32)))
    assert grid.shape == (4, 16)
    assert grid[0].tolist() == [0, 0, 0, 1, 0, 2, 0, 3, 0, 4, 0, 5, 0, 6, 0, 7]
    assert grid[1].tolist() == [0, 8, 0, 9, 0, 10, 0, 11, 0, 12, 0, 13, 0, 14, 0, 15]
    assert grid[2].tolist() == [1, 0, 1, 1, 1, 2, 1, 3, 1, 4, 1, 5, 1, 6, 1, 7]


def test_grid_indices_are_nibbles() -> None:
    grid = nibble_grid(bytes([0xFF] * 32))
    assert int(grid.max()) == 15
    assert int(grid.min()) == 15


@pytest.mark.parametrize("length", [0, 31, 33, 64])
def test_wrong_key_length_fails(length: int) -> None:
    with pytest.raises(ValueError):
        key_array(bytes(length))
