"""Operating-system CSPRNG (default for every hasher)."""

from __future__ import annotations

import secrets


class SystemRandomSource:
    """Draws bytes from :func:`secrets.token_bytes`."""

    def token_bytes(self, n: int) -> bytes:
        return secrets.token_bytes(n)
