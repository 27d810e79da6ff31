"""SaltyHash core primitives."""

from saltyhash.core.algorithms import available_algorithms, is_supported
from saltyhash.core.compare import constant_time_compare
from saltyhash.core.digest import iterate_digest
from saltyhash.core.kdf import derive_salt
from saltyhash.core.types import EncodedHash

__all__ = [
    "EncodedHash",
    "available_algorithms",
    "constant_time_compare",
    "derive_salt",
    "is_supported",
    "iterate_digest",
]
