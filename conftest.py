import pytest


class ScriptedRandom:
    """
    Deterministic random source for tests.

    Returns the given draws in order; raises if the engine asks for more
    draws than the test scripted.
    """

    def __init__(self, *values: float) -> None:
        self._values = list(values)
        self.calls = 0

    def random(self) -> float:
        if not self._values:
            raise AssertionError("ScriptedRandom exhausted")
        self.calls += 1
        return self._values.pop(0)


@pytest.fixture
def scripted():
    """Factory for scripted random sources: scripted(0.1, 0.9)."""
    return ScriptedRandom
