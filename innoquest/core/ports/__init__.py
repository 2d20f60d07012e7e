# innoquest: Ports (Protocol Interfaces)
# Abstract interfaces for adapters; no implementations here

from innoquest.core.ports.random import RandomPort, bernoulli, uniform

__all__ = [
    "RandomPort",
    "bernoulli",
    "uniform",
]
