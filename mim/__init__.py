"""MIM: hash visualisation with 4x4 colour matrices.

Fingerprints (SSH keys, x509 certificate hashes, any digest) are hard to
compare as hex. ``mim`` stretches any fingerprint into a 256 bit key with
HKDF-SHA256 and renders it as a small grid of coloured squares for the
terminal, so a mismatch is visible at a glance::

    import hashlib
    from mim import Mosaic

    fingerprint = hashlib.sha256(b"certificate contents").digest()
    print(Mosaic.new(fingerprint).ansi())

Hashing the original content is the caller's job; the mosaic only derives
and renders.
"""

from mim.derive import DERIVED_KEY_SIZE, derive
from mim.mosaic import Mosaic
from mim.palette import COLOUR_NAMES, PALETTE
from mim.renderer.ansi import ANSI_RESET, render_ansi

__all__ = [
    "ANSI_RESET",
    "COLOUR_NAMES",
    "DERIVED_KEY_SIZE",
    "Mosaic",
    "PALETTE",
    "derive",
    "render_ansi",
]
