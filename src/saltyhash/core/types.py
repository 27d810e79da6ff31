"""The encoded hash record and its wire format."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from saltyhash.exceptions import (
    InvalidDigestLengthError,
    InvalidSaltLengthError,
    InvalidVersionError,
    MalformedHashError,
)

DELIMITER = "$"
VERSION_LENGTH = 2
SALT_LENGTH = 22
DIGEST_LENGTH = 31


class EncodedHash(BaseModel):
    """One stored credential: ``$<version>$<rounds>$<salt><digest>``.

    *salt* and *digest* share the last field with no separator between
    them, so their widths are fixed. Changing either breaks every hash
    stored before the change.

    >>> h = EncodedHash.parse("$2a$4$" + "s" * 22 + "d" * 31)
    >>> h.rounds
    4
    >>> h.to_string() == "$2a$4$" + "s" * 22 + "d" * 31
    True
    """

    model_config = ConfigDict(frozen=True)

    version: str = Field(min_length=VERSION_LENGTH, max_length=VERSION_LENGTH, pattern=r"^[^$]*$")
    rounds: int = Field(gt=0)
    salt: str = Field(min_length=SALT_LENGTH, max_length=SALT_LENGTH, pattern=r"^[^$]*$")
    digest: str = Field(min_length=DIGEST_LENGTH, max_length=DIGEST_LENGTH, pattern=r"^[^$]*$")

    @classmethod
    def parse(cls, hashed: str) -> EncodedHash:
        """Split a stored string back into its four fields.

        Raises :class:`MalformedHashError` (or one of its width-specific
        subclasses) and :class:`InvalidVersionError` on structural problems.
        """
        parts = hashed.split(DELIMITER)
        if len(parts) != 4 or parts[0]:
            raise MalformedHashError(
                "Invalid hash format (expected $<version>$<rounds>$<salt><digest>)"
            )
        _, version, rounds, tail = parts

        if len(version) != VERSION_LENGTH:
            raise InvalidVersionError(version)
        if not (rounds.isascii() and rounds.isdigit()):
            raise MalformedHashError(f"Invalid rounds field: {rounds[:16]!r}")
        try:
            count = int(rounds)
        except ValueError as exc:
            # past sys.get_int_max_str_digits()
            raise MalformedHashError(f"Rounds field too long ({len(rounds)} digits)") from exc
        if count <= 0:
            raise MalformedHashError(f"Invalid rounds field: {rounds[:16]!r}")

        salt, digest = tail[:SALT_LENGTH], tail[SALT_LENGTH:]
        if len(salt) != SALT_LENGTH:
            raise InvalidSaltLengthError(len(salt), SALT_LENGTH)
        if len(digest) != DIGEST_LENGTH:
            raise InvalidDigestLengthError(len(digest), DIGEST_LENGTH)

        return cls(version=version, rounds=count, salt=salt, digest=digest)

    def to_string(self) -> str:
        return f"{DELIMITER}{self.version}{DELIMITER}{self.rounds}{DELIMITER}{self.salt}{self.digest}"

    def __str__(self) -> str:
        return self.to_string()
