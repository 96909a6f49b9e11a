import pytest
from pydantic import ValidationError

from goodstuff.config import SamplingConfig


def test_defaults():
    config = SamplingConfig()
    assert config.seed is None
    assert config.thread_safe is True


def test_seed_masked_to_32_bits():
    assert SamplingConfig(seed=2**32 + 5).seed == 5
    assert SamplingConfig(seed=-1).seed == 0xFFFFFFFF


def test_seed_rejects_non_integer():
    with pytest.raises(ValidationError):
        SamplingConfig(seed="not-a-seed")


def test_from_env(monkeypatch):
    monkeypatch.setenv("GOODSTUFF_SEED", " 42 ")
    assert SamplingConfig.from_env().seed == 42


def test_from_env_missing(monkeypatch):
    monkeypatch.delenv("GOODSTUFF_SEED", raising=False)
    assert SamplingConfig.from_env().seed is None


def test_from_env_custom_variable(monkeypatch):
    monkeypatch.setenv("LOOT_SEED", "7")
    assert SamplingConfig.from_env("LOOT_SEED").seed == 7


def test_from_env_invalid(monkeypatch):
    monkeypatch.setenv("GOODSTUFF_SEED", "abc")
    with pytest.raises(ValueError):
        SamplingConfig.from_env()
