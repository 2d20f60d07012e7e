"""
Random source adapters.

SystemRandomSource is the production default: it reads from the OS entropy
pool, so concurrent callers never share generator state and their draws are
uncorrelated. SeededRandomSource is reproducible (CLI --seed, replays) and
serialises access to its generator with a lock.
"""

from __future__ import annotations

import logging
import random
import threading
from dataclasses import dataclass, field

from innoquest.core.ports.random import RandomPort

logger = logging.getLogger(__name__)


class SystemRandomSource:
    """Thread-safe, unseeded random source."""

    def __init__(self) -> None:
        self._rng = random.SystemRandom()

    def random(self) -> float:
        return self._rng.random()


@dataclass
class SeededRandomSource:
    """Reproducible random source for replays."""

    seed: int
    _rng: random.Random = field(init=False, repr=False)
    _lock: threading.Lock = field(init=False, repr=False, default_factory=threading.Lock)

    def __post_init__(self) -> None:
        self._rng = random.Random(self.seed)
        logger.debug("SeededRandomSource initialised with seed=%s", self.seed)

    def random(self) -> float:
        with self._lock:
            return self._rng.random()


# Default adapter instance
default_random_source = SystemRandomSource()


# Verify protocol compliance at module load time
def _verify_protocol_compliance() -> None:
    """Verify both sources satisfy RandomPort."""
    system: RandomPort = default_random_source
    seeded: RandomPort = SeededRandomSource(seed=0)
    _ = (system, seeded)


_verify_protocol_compliance()
