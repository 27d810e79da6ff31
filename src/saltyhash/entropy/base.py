"""Random byte source protocol."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class RandomSource(Protocol):
    """Interface for the randomness a hasher draws salts from."""

    def token_bytes(self, n: int) -> bytes:
        """Return *n* random bytes."""
        ...
