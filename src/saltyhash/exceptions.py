"""SaltyHash exceptions."""


class SaltyHashError(ValueError):
    """Base exception for all SaltyHash errors."""


class EmptyInputError(SaltyHashError):
    """Raised when a required string is missing, empty, or blank."""

    def __init__(self, name: str = "input"):
        self.name = name
        super().__init__(f"{name} is required and cannot be empty")


class InvalidInputError(SaltyHashError):
    """Raised when a string cannot be encoded as UTF-8 (e.g. lone surrogates)."""

    def __init__(self, name: str = "input"):
        self.name = name
        super().__init__(f"{name} must be encodable as UTF-8")


class InvalidRoundsError(SaltyHashError):
    """Raised when a round count is not a positive integer."""

    def __init__(self, rounds: object):
        self.rounds = rounds
        super().__init__(f"Rounds must be a positive integer (got {rounds!r})")


class UnsupportedAlgorithmError(SaltyHashError):
    """Raised when the digest provider does not know the algorithm name."""

    def __init__(self, algorithm: str):
        self.algorithm = algorithm
        super().__init__(f"Unsupported algorithm: {algorithm}")


class InvalidVersionError(SaltyHashError):
    """Raised when a version tag is not exactly 2 characters."""

    def __init__(self, version: str):
        self.version = version
        super().__init__(f"Version must be exactly 2 characters (got {version!r})")


class MalformedHashError(SaltyHashError):
    """Raised when a stored hash cannot be parsed."""


class InvalidSaltLengthError(MalformedHashError):
    """Raised when a salt does not have the expected width."""

    def __init__(self, length: int, expected: int = 22):
        self.length = length
        self.expected = expected
        super().__init__(f"Invalid salt length: {length} (expected {expected})")


class InvalidDigestLengthError(MalformedHashError):
    """Raised when a stored digest does not have the expected width."""

    def __init__(self, length: int, expected: int = 31):
        self.length = length
        self.expected = expected
        super().__init__(f"Invalid hash length: {length} (expected {expected})")
