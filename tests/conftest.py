"""Shared fixtures for the test suite."""

import pytest


class ScriptedRandom:
    """Random source that replays a fixed list of draws.

    Raises ``IndexError`` once the script is exhausted, so tests can also
    assert that no entropy was consumed.
    """

    def __init__(self, values):
        self._values = list(values)
        self.requested = []

    def integers(self, n):
        value = self._values.pop(0)
        if not 0 <= value < n:
            raise AssertionError(f"Scripted value {value} outside [0, {n}).")
        self.requested.append(n)
        return value

    @property
    def remaining(self):
        return len(self._values)


@pytest.fixture()
def scripted():
    """Factory building a :class:`ScriptedRandom` from a list of draws."""

    def _make(values):
        return ScriptedRandom(values)

    return _make
