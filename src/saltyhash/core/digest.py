"""Iterated hex-digest hardening."""

from __future__ import annotations

import hashlib

from saltyhash.core.types import DIGEST_LENGTH


def iterate_digest(secret: str, salt: str, rounds: int, algorithm: str) -> str:
    """Digest ``secret + salt`` *rounds* times and keep the first 31 hex chars.

    Each round digests the previous round's hex output, not the original
    input. Cost grows linearly with *rounds*.
    """
    value = secret + salt
    for _ in range(rounds):
        value = hashlib.new(algorithm, value.encode()).hexdigest()
    return value[:DIGEST_LENGTH]
