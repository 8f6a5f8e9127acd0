"""Shared fixtures for the Notes UI tests."""

from __future__ import annotations

import itertools

import pytest
from fastapi.testclient import TestClient

from src.ui.main import create_app
from src.ui.sessions import SessionRegistry
from src.ui.store import NotesStore

START_MS = 1_700_000_000_000


class FakeClock:
    """Manually advanced epoch-milliseconds clock."""

    def __init__(self, now: int = START_MS) -> None:
        self.now = now

    def __call__(self) -> int:
        return self.now

    def advance(self, ms: int = 1000) -> int:
        self.now += ms
        return self.now


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def store(clock: FakeClock) -> NotesStore:
    """A seeded store with a controllable clock and predictable ids."""
    counter = itertools.count(1)
    return NotesStore(clock=clock, make_id=lambda: f"n{next(counter)}")


@pytest.fixture()
def client() -> TestClient:
    """A client against a fresh app; cookies persist across requests."""
    return TestClient(create_app(SessionRegistry()))
