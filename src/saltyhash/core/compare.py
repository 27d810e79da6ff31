"""Constant-time string comparison."""

from __future__ import annotations


def constant_time_compare(a: str, b: str) -> bool:
    """Return True if *a* equals *b* without exiting at the first difference.

    Every character pair is XORed into one accumulator, so the loop runs the
    full length whatever the contents. Unequal lengths return False straight
    away: the length of a stored secret is not protected, only its content.
    """
    if len(a) != len(b):
        return False
    result = 0
    for x, y in zip(a, b):
        result |= ord(x) ^ ord(y)
    return result == 0
