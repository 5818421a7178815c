"""The public :class:`Mosaic` value type.

Examples
--------
>>> import hashlib
>>> from mim import Mosaic
>>> fingerprint = hashlib.sha256(b"certificate contents").digest()
>>> moz = Mosaic.new(fingerprint)
>>> print(moz.ansi())  # doctest: +SKIP
"""

from dataclasses import dataclass

from mim.derive import DERIVED_KEY_SIZE, derive
from mim.renderer.ansi import render_ansi
from mim.types import DerivedKey, UInt8Array
from mim.utils.nibbles import nibble_grid


@dataclass(frozen=True)
class Mosaic:
    """Hash visualisation built from a 256 bit derived key.

    Instances are immutable value objects; rendering never mutates them and
    returns a fresh string on every call. Two mosaics compare equal exactly
    when their derived keys do.

    Attributes:
        data (bytes): The 32 byte key produced by :func:`mim.derive.derive`.
    """

    data: DerivedKey

    def __post_init__(self) -> None:
        if not isinstance(self.data, bytes):
            raise TypeError(f"Mosaic data must be bytes, got {type(self.data).__name__}")
        if len(self.data) != DERIVED_KEY_SIZE:
            raise ValueError(
                f"Mosaic data must be {DERIVED_KEY_SIZE} bytes, got {len(self.data)}"
            )

    @classmethod
    def new(cls, data: bytes) -> "Mosaic":
        """Derive a mosaic from any fingerprint bytes (empty included)."""
        return cls(data=derive(data))

    def ansi(self) -> str:
        """Return the mosaic as ANSI truecolor escape sequences."""
        return render_ansi(self.data)

    def cells(self) -> UInt8Array:
        """Return the ``(4, 16)`` matrix of palette indices."""
        return nibble_grid(self.data)

    def __str__(self) -> str:
        return self.ansi()
