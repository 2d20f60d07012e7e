"""
R&D resolver component port definitions.
"""

from __future__ import annotations

from innoquest.core.ports.random import RandomPort

__all__ = ["RandomPort"]
