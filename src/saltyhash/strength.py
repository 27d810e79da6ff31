"""Password strength heuristic and plain random salts."""

from __future__ import annotations

import re
import string

from saltyhash.entropy import RandomSource, SystemRandomSource
from saltyhash.exceptions import InvalidSaltLengthError

SALT_ALPHABET = string.ascii_uppercase + string.ascii_lowercase + string.digits
SPECIAL_CHARACTERS = "!@#$%^&*"

_CHECKS = (
    re.compile(r"[A-Z]"),
    re.compile(r"[a-z]"),
    re.compile(r"\d"),
    re.compile(f"[{re.escape(SPECIAL_CHARACTERS)}]"),
)


def is_strong_password(password: str, min_length: int = 8) -> bool:
    """True if *password* is long enough and mixes case, digits and symbols."""
    return len(password) >= min_length and all(check.search(password) for check in _CHECKS)


def generate_random_salt(length: int = 16, source: RandomSource | None = None) -> str:
    """Return *length* characters drawn uniformly from ``[A-Za-z0-9]``.

    Bytes that would bias the distribution (>= 248, the largest multiple of
    62 below 256) are discarded and redrawn.
    """
    if length <= 0:
        raise InvalidSaltLengthError(length, expected=1)
    source = source or SystemRandomSource()
    size = len(SALT_ALPHABET)
    limit = 256 - (256 % size)

    chars: list[str] = []
    while len(chars) < length:
        for byte in source.token_bytes(length - len(chars)):
            if byte < limit:
                chars.append(SALT_ALPHABET[byte % size])
    return "".join(chars)
