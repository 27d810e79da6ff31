"""Digest algorithms supported by the local ``hashlib`` provider."""

from __future__ import annotations

import hashlib
from functools import lru_cache

from saltyhash.core.types import DIGEST_LENGTH


def _usable(name: str) -> bool:
    try:
        digest = hashlib.new(name)
    except ValueError:
        return False
    # shake_* report digest_size 0 and need an explicit length
    return digest.digest_size * 2 >= DIGEST_LENGTH


@lru_cache(maxsize=1)
def _supported() -> frozenset[str]:
    return frozenset(name for name in hashlib.algorithms_available if _usable(name))


def available_algorithms() -> list[str]:
    """Return the sorted names accepted by ``hash`` and ``generate_salt_from_kdf``.

    The set depends on the OpenSSL build behind ``hashlib``; callers should
    not assume anything beyond ``hashlib.algorithms_guaranteed``.
    """
    return sorted(_supported())


def is_supported(algorithm: object) -> bool:
    """True if *algorithm* names a usable digest (exact, case-sensitive match)."""
    return isinstance(algorithm, str) and algorithm in _supported()
