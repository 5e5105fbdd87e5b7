"""
Shared fixtures for the pet test suite.
"""

import pytest

from event_dispatcher import global_event_dispatcher
from pet.state import PetState, create_pet


class FixedRandom:
    """Random source stub: returns queued rolls, then a default that never triggers a treat."""

    def __init__(self, *rolls, default=20):
        self.rolls = list(rolls)
        self.default = default
        self.calls = []

    def randint(self, a, b):
        self.calls.append((a, b))
        if self.rolls:
            return self.rolls.pop(0)
        return self.default


@pytest.fixture
def no_treat():
    return FixedRandom()


@pytest.fixture
def treat():
    return FixedRandom(default=1)


@pytest.fixture
def pet() -> PetState:
    return create_pet("dog", "rex")


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep tests away from log files and global listeners."""
    monkeypatch.setenv("PET_FILE_LOGGING", "false")
    monkeypatch.delenv("PET_DEFAULT_NAME", raising=False)
    global_event_dispatcher.clear()
    yield
    global_event_dispatcher.clear()


@pytest.fixture
def fixed_random():
    """Factory for FixedRandom stubs: fixed_random(1, 5, default=20)."""
    return FixedRandom
