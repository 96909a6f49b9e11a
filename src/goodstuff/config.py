"""Configuration models for goodstuff."""

from __future__ import annotations

import os
from typing import Optional

from pydantic import BaseModel, Field, field_validator


class SamplingConfig(BaseModel):
    """Controls how samplers obtain their random source."""

    seed: Optional[int] = Field(
        default=None,
        description="Seed for reproducible draws. None seeds from system entropy.",
    )
    thread_safe: bool = Field(
        default=True,
        description="Serialize draws on the shared random source with a lock.",
    )

    @field_validator("seed")
    @classmethod
    def _mask_seed(cls, value: Optional[int]) -> Optional[int]:
        if value is None:
            return None
        return value & 0xFFFFFFFF

    @classmethod
    def from_env(cls, env_var: str = "GOODSTUFF_SEED") -> "SamplingConfig":
        raw = os.getenv(env_var)
        if raw is None or not raw.strip():
            return cls()
        try:
            seed = int(raw.strip())
        except ValueError as exc:
            raise ValueError(f"{env_var} must be an integer, got {raw!r}") from exc
        return cls(seed=seed)


__all__ = ["SamplingConfig"]
