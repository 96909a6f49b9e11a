"""Random sources satisfying the ``() -> float in [0, 1)`` contract."""

from __future__ import annotations

import random
import threading
import zlib
from typing import Optional

from .config import SamplingConfig


class SeededRandomSource:
    """Callable uniform source backed by a private ``random.Random``.

    Instances are meant to be created once and reused across many draws.
    With ``thread_safe`` enabled every draw holds a lock, so a single source
    can be shared between threads; otherwise give each thread its own source,
    e.g. via :meth:`derive`.
    """

    def __init__(self, seed: Optional[int] = None, *, thread_safe: bool = True) -> None:
        self._seed = seed
        self._random = random.Random(seed)
        self._lock: Optional[threading.Lock] = threading.Lock() if thread_safe else None

    @property
    def seed(self) -> Optional[int]:
        return self._seed

    @property
    def thread_safe(self) -> bool:
        return self._lock is not None

    def __call__(self) -> float:
        if self._lock is None:
            return self._random.random()
        with self._lock:
            return self._random.random()

    def reseed(self, seed: Optional[int]) -> None:
        if self._lock is None:
            self._reseed(seed)
            return
        with self._lock:
            self._reseed(seed)

    def derive(self, tag: str) -> "SeededRandomSource":
        """Return an independent source for ``tag``.

        Seeded sources derive a stable seed from the base seed and a CRC32 of
        the tag, so the same tag always yields the same stream.
        """

        crc = zlib.crc32(str(tag).encode("utf-8")) & 0xFFFFFFFF
        if self._seed is not None:
            base = self._seed
        elif self._lock is None:
            base = self._random.getrandbits(32)
        else:
            with self._lock:
                base = self._random.getrandbits(32)
        return SeededRandomSource((base ^ crc) & 0xFFFFFFFF, thread_safe=self.thread_safe)

    def _reseed(self, seed: Optional[int]) -> None:
        self._seed = seed
        self._random.seed(seed)


def random_source_from_config(config: Optional[SamplingConfig] = None) -> SeededRandomSource:
    """Build a random source from a :class:`SamplingConfig`."""

    config = config or SamplingConfig()
    return SeededRandomSource(config.seed, thread_safe=config.thread_safe)


__all__ = ["SeededRandomSource", "random_source_from_config"]
