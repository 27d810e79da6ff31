"""PBKDF2 salt derivation."""

from __future__ import annotations

import base64
import hashlib

from saltyhash.core.types import SALT_LENGTH

SEED_BYTES = 16


def derive_salt(secret: str, seed: bytes, rounds: int, algorithm: str) -> str:
    """Stretch *secret* with *seed* into a 22-character base64 salt.

    PBKDF2-HMAC yields 22 bytes, whose standard base64 form is 32
    characters; the first 22 are kept.
    """
    derived = hashlib.pbkdf2_hmac(algorithm, secret.encode(), seed, rounds, dklen=SALT_LENGTH)
    return base64.b64encode(derived).decode("ascii")[:SALT_LENGTH]
