"""SaltyHash configuration."""

from __future__ import annotations

import os

from pydantic import BaseModel, Field

_ENV_PREFIX = "SALTYHASH_"


class SaltyHashConfig(BaseModel):
    """Defaults for a :class:`~saltyhash.hasher.SaltyHash` engine.

    Explicit call arguments always override these values.
    """

    rounds: int = Field(default=12, ge=1)
    algorithm: str = "sha256"
    version: str = Field(default="2a", min_length=2, max_length=2)
    kdf_rounds: int = Field(default=100_000, ge=1)
    # The wire format has no algorithm field, so verification cannot know
    # which digest produced a stored hash.
    verify_algorithm: str = "sha256"
    warn_rounds_above: int | None = Field(default=1_000_000, ge=1)

    @classmethod
    def from_env(cls) -> SaltyHashConfig:
        """Build a config from ``SALTYHASH_*`` environment variables."""
        values: dict[str, str] = {}
        for name in cls.model_fields:
            raw = os.environ.get(f"{_ENV_PREFIX}{name.upper()}")
            if raw is not None and raw.strip():
                values[name] = raw.strip()
        if values.get("warn_rounds_above", "").lower() in ("none", "off", "0"):
            values.pop("warn_rounds_above")
            return cls(warn_rounds_above=None, **values)
        return cls(**values)
