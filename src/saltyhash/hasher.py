"""The SaltyHash engine: encode, verify, and derive salts."""

from __future__ import annotations

import logging

from saltyhash.config import SaltyHashConfig
from saltyhash.core.compare import constant_time_compare
from saltyhash.core.digest import iterate_digest
from saltyhash.core.kdf import SEED_BYTES, derive_salt
from saltyhash.core.types import EncodedHash
from saltyhash.core.validation import (
    require_algorithm,
    require_rounds,
    require_text,
    require_version,
)
from saltyhash.entropy import RandomSource, SystemRandomSource

log = logging.getLogger(__name__)


class SaltyHash:
    """Salted, versioned, iterated password hashing.

    >>> hasher = SaltyHash()
    >>> stored = hasher.hash("Tr0ub4dor&3", rounds=4)
    >>> hasher.compare_password("Tr0ub4dor&3", stored)
    True

    Cost is linear in ``rounds`` for both :meth:`hash` and
    :meth:`compare_password`. Rounds are never capped; a warning is logged
    above ``config.warn_rounds_above``.
    """

    def __init__(
        self,
        config: SaltyHashConfig | None = None,
        *,
        random_source: RandomSource | None = None,
    ):
        self._config = config or SaltyHashConfig()
        self._random = random_source or SystemRandomSource()

    @property
    def config(self) -> SaltyHashConfig:
        return self._config

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def hash(
        self,
        input: str,
        rounds: int | None = None,
        algorithm: str | None = None,
        version: str | None = None,
    ) -> str:
        """Encode *input* as ``$<version>$<rounds>$<salt><digest>``."""
        return str(self.encode(input, rounds, algorithm, version))

    def encode(
        self,
        input: str,
        rounds: int | None = None,
        algorithm: str | None = None,
        version: str | None = None,
    ) -> EncodedHash:
        """Like :meth:`hash`, but return the structured record."""
        rounds = self._config.rounds if rounds is None else rounds
        algorithm = self._config.algorithm if algorithm is None else algorithm
        version = self._config.version if version is None else version

        require_text(input)
        rounds = require_rounds(rounds)
        require_algorithm(algorithm)
        require_version(version)
        self._check_cost(rounds)

        log.debug("Encoding with %s, %d rounds, version %s", algorithm, rounds, version)
        salt = derive_salt(input, self._random.token_bytes(SEED_BYTES), rounds, algorithm)
        digest = iterate_digest(input, salt, rounds, algorithm)
        return EncodedHash(version=version, rounds=rounds, salt=salt, digest=digest)

    def compare_password(self, password: str, hashed: str) -> bool:
        """Check *password* against a stored hash.

        Returns False for a well-formed hash that does not match. Raises
        :class:`~saltyhash.exceptions.EmptyInputError` or a
        :class:`~saltyhash.exceptions.MalformedHashError` when the hash
        cannot be verified at all.
        """
        require_text(password, "password")
        require_text(hashed, "hashed")
        algorithm = require_algorithm(self._config.verify_algorithm)
        record = EncodedHash.parse(hashed)
        self._check_cost(record.rounds)

        log.debug("Verifying with %s, %d rounds, version %s", algorithm, record.rounds, record.version)
        candidate = iterate_digest(password, record.salt, record.rounds, algorithm)
        return constant_time_compare(candidate, record.digest)

    def generate_salt_from_kdf(
        self,
        input: str,
        rounds: int | None = None,
        algorithm: str | None = None,
    ) -> str:
        """Derive a fresh 22-character salt from *input* and random bytes."""
        rounds = self._config.kdf_rounds if rounds is None else rounds
        algorithm = self._config.algorithm if algorithm is None else algorithm

        require_text(input)
        rounds = require_rounds(rounds)
        require_algorithm(algorithm)
        self._check_cost(rounds)

        log.debug("Deriving KDF salt with %s, %d rounds", algorithm, rounds)
        return derive_salt(input, self._random.token_bytes(SEED_BYTES), rounds, algorithm)

    @staticmethod
    def constant_time_compare(a: str, b: str) -> bool:
        """See :func:`saltyhash.core.compare.constant_time_compare`."""
        return constant_time_compare(a, b)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _check_cost(self, rounds: int) -> None:
        limit = self._config.warn_rounds_above
        if limit is not None and rounds > limit:
            log.warning(
                "%d rounds exceeds %d; hashing time grows linearly with rounds",
                rounds,
                limit,
            )


# ----------------------------------------------------------------------
# Module-level shortcuts bound to a default engine (system CSPRNG)
# ----------------------------------------------------------------------

_default = SaltyHash()


def hash(input: str, rounds: int = 12, algorithm: str = "sha256", version: str = "2a") -> str:
    """Encode *input*; see :meth:`SaltyHash.hash`."""
    return _default.hash(input, rounds, algorithm, version)


def compare_password(password: str, hashed: str) -> bool:
    """Verify *password*; see :meth:`SaltyHash.compare_password`."""
    return _default.compare_password(password, hashed)


def generate_salt_from_kdf(input: str, rounds: int = 100_000, algorithm: str = "sha256") -> str:
    """Derive a KDF salt; see :meth:`SaltyHash.generate_salt_from_kdf`."""
    return _default.generate_salt_from_kdf(input, rounds, algorithm)
