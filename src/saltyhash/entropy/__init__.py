"""Random byte sources."""

from saltyhash.entropy.base import RandomSource
from saltyhash.entropy.seeded import SeededRandomSource
from saltyhash.entropy.system import SystemRandomSource

__all__ = ["RandomSource", "SeededRandomSource", "SystemRandomSource"]
