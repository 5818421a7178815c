"""Command-line demo: hash some content and print its mosaic.

    python -m mim "some text"
    python -m mim --file server.crt
    python -m mim --hex 3f0a...   # already a fingerprint, no hashing
"""

from __future__ import annotations

import argparse
import hashlib
import logging
from pathlib import Path
from typing import Optional, Sequence

from mim.mosaic import Mosaic

DEMO_TEXT = "certificate contents would typically go here"


def fingerprint_from_args(args: argparse.Namespace) -> bytes:
    if args.hex is not None:
        return bytes.fromhex(args.hex)
    if args.file is not None:
        return hashlib.sha256(Path(args.file).read_bytes()).digest()
    return hashlib.sha256(args.text.encode("utf-8")).digest()


def main(argv: Optional[Sequence[str]] = None) -> None:
    p = argparse.ArgumentParser(
        prog="mim", description="Print a SHA-256 fingerprint and its colour mosaic."
    )
    p.add_argument("text", nargs="?", default=DEMO_TEXT, help="Text to hash.")
    src = p.add_mutually_exclusive_group()
    src.add_argument("--file", type=Path, default=None, help="Hash this file instead of text.")
    src.add_argument(
        "--hex", default=None, help="Visualise this hex fingerprint as-is (no hashing)."
    )
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    args = p.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        fingerprint = fingerprint_from_args(args)
    except OSError as e:
        p.error(f"cannot read {args.file}: {e}")
    except ValueError as e:
        p.error(f"invalid hex fingerprint: {e}")

    moz = Mosaic.new(fingerprint)
    print(f"Fingerprint: {fingerprint.hex()}")
    print(f"\n{moz.ansi()}")


if __name__ == "__main__":
    main()
