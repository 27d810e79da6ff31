"""Async facade over :class:`~saltyhash.hasher.SaltyHash`.

Each coroutine runs the synchronous operation on a worker thread so the
event loop stays responsive while rounds are computed. Results and errors
are exactly those of the synchronous engine.
"""

from __future__ import annotations

import asyncio

from saltyhash.config import SaltyHashConfig
from saltyhash.core.compare import constant_time_compare
from saltyhash.entropy import RandomSource
from saltyhash.hasher import SaltyHash


class AsyncSaltyHash:
    """Awaitable counterpart of :class:`SaltyHash`."""

    def __init__(
        self,
        config: SaltyHashConfig | None = None,
        *,
        random_source: RandomSource | None = None,
        hasher: SaltyHash | None = None,
    ):
        self._hasher = hasher or SaltyHash(config, random_source=random_source)

    @property
    def hasher(self) -> SaltyHash:
        return self._hasher

    async def hash(
        self,
        input: str,
        rounds: int | None = None,
        algorithm: str | None = None,
        version: str | None = None,
    ) -> str:
        return await asyncio.to_thread(self._hasher.hash, input, rounds, algorithm, version)

    async def compare_password(self, password: str, hashed: str) -> bool:
        return await asyncio.to_thread(self._hasher.compare_password, password, hashed)

    async def generate_salt_from_kdf(
        self,
        input: str,
        rounds: int | None = None,
        algorithm: str | None = None,
    ) -> str:
        return await asyncio.to_thread(self._hasher.generate_salt_from_kdf, input, rounds, algorithm)

    @staticmethod
    def constant_time_compare(a: str, b: str) -> bool:
        return constant_time_compare(a, b)
