"""
Random source interface.

Protocol-based interface for the engine's only source of non-determinism.
Bernoulli trials and uniform draws are derived from a single operation so a
test double only has to supply a sequence of floats.

Key requirements:
- Each call returns an independent draw in [0.0, 1.0)
- Implementations shared between threads must be safe for concurrent use
"""

from __future__ import annotations

from typing import Protocol


class RandomPort(Protocol):
    """Uniform random source."""

    def random(self) -> float:
        """Return the next uniform draw in [0.0, 1.0)."""
        ...


def bernoulli(rng: RandomPort, probability: float) -> bool:
    """One trial that succeeds with the given probability."""
    return rng.random() < probability


def uniform(rng: RandomPort, low: float, high: float) -> float:
    """Uniform draw in [low, high)."""
    return low + rng.random() * (high - low)
