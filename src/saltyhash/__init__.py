"""SaltyHash — salted, versioned, iterated password hashing."""

from saltyhash.aio import AsyncSaltyHash
from saltyhash.config import SaltyHashConfig
from saltyhash.core.algorithms import available_algorithms
from saltyhash.core.compare import constant_time_compare
from saltyhash.core.types import EncodedHash
from saltyhash.exceptions import (
    EmptyInputError,
    InvalidDigestLengthError,
    InvalidInputError,
    InvalidRoundsError,
    InvalidSaltLengthError,
    InvalidVersionError,
    MalformedHashError,
    SaltyHashError,
    UnsupportedAlgorithmError,
)
from saltyhash.hasher import SaltyHash, compare_password, generate_salt_from_kdf, hash
from saltyhash.strength import generate_random_salt, is_strong_password

__version__ = "1.0.0"
__all__ = [
    "AsyncSaltyHash",
    "EmptyInputError",
    "EncodedHash",
    "InvalidDigestLengthError",
    "InvalidInputError",
    "InvalidRoundsError",
    "InvalidSaltLengthError",
    "InvalidVersionError",
    "MalformedHashError",
    "SaltyHash",
    "SaltyHashConfig",
    "SaltyHashError",
    "UnsupportedAlgorithmError",
    "available_algorithms",
    "compare_password",
    "constant_time_compare",
    "generate_random_salt",
    "generate_salt_from_kdf",
    "hash",
    "is_strong_password",
]
