"""Argument checks shared by every public operation.

Each check raises before any randomness is drawn or digest computed.
"""

from __future__ import annotations

from numbers import Integral

from saltyhash.core.algorithms import is_supported
from saltyhash.core.types import DELIMITER, VERSION_LENGTH
from saltyhash.exceptions import (
    EmptyInputError,
    InvalidInputError,
    InvalidRoundsError,
    InvalidVersionError,
    UnsupportedAlgorithmError,
)


def require_text(value: str | None, name: str = "input") -> str:
    if not value or not value.strip():
        raise EmptyInputError(name)
    try:
        value.encode()
    except UnicodeEncodeError as exc:
        raise InvalidInputError(name) from exc
    return value


def require_rounds(rounds: object) -> int:
    # bool is an Integral too
    if isinstance(rounds, bool) or not isinstance(rounds, Integral) or rounds <= 0:
        raise InvalidRoundsError(rounds)
    return int(rounds)


def require_algorithm(algorithm: str) -> str:
    if not is_supported(algorithm):
        raise UnsupportedAlgorithmError(algorithm)
    return algorithm


def require_version(version: str) -> str:
    if not isinstance(version, str) or len(version) != VERSION_LENGTH or DELIMITER in version:
        raise InvalidVersionError(version)
    return version
