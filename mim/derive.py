"""Key derivation.

Any input buffer, whatever its length, is stretched or compressed into a
fixed 256 bit key with HKDF-SHA256 (RFC 5869). There is no salt and no
context info: the goal is to spread the input's entropy uniformly over a
fixed-size buffer, not to protect a secret.
"""

import logging

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.kdf.hkdf import HKDF

from mim.types import DerivedKey

logger = logging.getLogger(__name__)

DERIVED_KEY_SIZE = 32


def derive(data: bytes) -> DerivedKey:
    """Derive the 32 byte mosaic key for ``data``.

    Args:
        data: Any bytes-like object. Empty input is valid.

    Returns:
        Exactly ``DERIVED_KEY_SIZE`` bytes.

    Raises:
        TypeError: If ``data`` is not bytes-like (e.g. ``str``).
        RuntimeError: If the HKDF primitive refuses a 32 byte output, which
            would mean the primitive itself is broken.
    """
    # str and int are not bytes-like; memoryview rejects both.
    ikm = memoryview(data).tobytes()
    logger.debug("deriving mosaic key from %d input bytes", len(ikm))

    try:
        hkdf = HKDF(
            algorithm=hashes.SHA256(),
            length=DERIVED_KEY_SIZE,
            salt=None,
            info=b"",
        )
        return hkdf.derive(ikm)
    except ValueError as e:
        raise RuntimeError("hkdf to provide 32 bytes") from e
