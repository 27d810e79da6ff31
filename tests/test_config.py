"""Tests for SaltyHashConfig."""

import pytest
from pydantic import ValidationError

from saltyhash.config import SaltyHashConfig


class TestDefaults:
    def test_defaults(self):
        cfg = SaltyHashConfig()
        assert cfg.rounds == 12
        assert cfg.algorithm == "sha256"
        assert cfg.version == "2a"
        assert cfg.kdf_rounds == 100_000
        assert cfg.verify_algorithm == "sha256"
        assert cfg.warn_rounds_above == 1_000_000

    @pytest.mark.parametrize(
        "kwargs",
        [{"rounds": 0}, {"kdf_rounds": -1}, {"version": "2"}, {"version": "2ab"}, {"warn_rounds_above": 0}],
    )
    def test_invalid_values(self, kwargs):
        with pytest.raises(ValidationError):
            SaltyHashConfig(**kwargs)


class TestFromEnv:
    @pytest.fixture(autouse=True)
    def _clean_env(self, monkeypatch):
        for name in SaltyHashConfig.model_fields:
            monkeypatch.delenv(f"SALTYHASH_{name.upper()}", raising=False)

    def test_empty_env_gives_defaults(self):
        assert SaltyHashConfig.from_env() == SaltyHashConfig()

    def test_reads_values(self, monkeypatch):
        monkeypatch.setenv("SALTYHASH_ROUNDS", "20")
        monkeypatch.setenv("SALTYHASH_ALGORITHM", "sha512")
        monkeypatch.setenv("SALTYHASH_VERSION", "2b")
        monkeypatch.setenv("SALTYHASH_KDF_ROUNDS", "5000")
        monkeypatch.setenv("SALTYHASH_VERIFY_ALGORITHM", "sha512")
        cfg = SaltyHashConfig.from_env()
        assert cfg.rounds == 20
        assert cfg.algorithm == "sha512"
        assert cfg.version == "2b"
        assert cfg.kdf_rounds == 5000
        assert cfg.verify_algorithm == "sha512"

    @pytest.mark.parametrize("raw", ["none", "OFF", "0"])
    def test_disable_cost_warning(self, monkeypatch, raw):
        monkeypatch.setenv("SALTYHASH_WARN_ROUNDS_ABOVE", raw)
        assert SaltyHashConfig.from_env().warn_rounds_above is None

    def test_invalid_env_value(self, monkeypatch):
        monkeypatch.setenv("SALTYHASH_ROUNDS", "lots")
        with pytest.raises(ValidationError):
            SaltyHashConfig.from_env()
