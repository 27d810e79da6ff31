"""Deterministic random source for tests and reproducible fixtures.

Not cryptographically secure. Never pass it to a hasher that encodes real
credentials.
"""

from __future__ import annotations

import random


class SeededRandomSource:
    """Replays the same byte stream for the same *seed*."""

    def __init__(self, seed: int | str | bytes = 0):
        self.seed = seed
        self._rng = random.Random(seed)

    def token_bytes(self, n: int) -> bytes:
        return self._rng.randbytes(n)

    def reset(self) -> None:
        """Rewind the stream to its first byte."""
        self._rng.seed(self.seed)
