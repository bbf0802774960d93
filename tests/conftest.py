"""Pytest configuration and shared fixtures for fallible tests."""

from __future__ import annotations

import pytest


@pytest.fixture(autouse=True)
def fresh_config(monkeypatch: pytest.MonkeyPatch):
    """Run every test against an unset configuration and a clean environment."""
    from fallible import reset_config

    monkeypatch.delenv('FALLIBLE_RETRY_DELAY', raising=False)
    monkeypatch.delenv('FALLIBLE_LOG_LEVEL', raising=False)
    reset_config()
    yield
    reset_config()


@pytest.fixture
def sample_ok():
    """Sample Ok value for testing."""
    from fallible import Ok

    return Ok(42)


@pytest.fixture
def sample_err():
    """Sample Err value for testing."""
    from fallible import Err

    return Err('boom')


@pytest.fixture
def sleeps() -> list[float]:
    """Recorded delays passed to the retry sleep primitive."""
    return []


@pytest.fixture
def fake_sleep(sleeps: list[float]):
    """A sleep primitive that records the requested delay instead of blocking."""
    return sleeps.append


class CallCounter:
    """Callable stub that records its arguments and returns a fixed value."""

    def __init__(self, returns=None) -> None:
        self.calls: list[tuple] = []
        self.returns = returns

    def __call__(self, *args):
        self.calls.append(args)
        return self.returns

    @property
    def count(self) -> int:
        return len(self.calls)


@pytest.fixture
def counter():
    """Factory for CallCounter stubs."""
    return CallCounter
