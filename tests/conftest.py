"""Shared pytest fixtures for SecretKeep SDK tests."""

import pytest
from unittest.mock import Mock

from secretkeep_sdk.config.constants import (
    INITIAL_INTERVAL_ENV_VAR,
    MAX_ELAPSED_TIME_ENV_VAR,
    MAX_INTERVAL_ENV_VAR,
    MULTIPLIER_ENV_VAR,
    RANDOMIZATION_FACTOR_ENV_VAR,
)
from secretkeep_sdk.reliability import (
    with_initial_interval,
    with_max_elapsed_time,
    with_max_interval,
    with_multiplier,
    with_randomization_factor,
)
from tests.helpers.fake_clock import FakeClock

RETRY_ENV_VARS = [
    INITIAL_INTERVAL_ENV_VAR,
    MAX_INTERVAL_ENV_VAR,
    MAX_ELAPSED_TIME_ENV_VAR,
    MULTIPLIER_ENV_VAR,
    RANDOMIZATION_FACTOR_ENV_VAR,
]


def pytest_configure(config):
    config.addinivalue_line("markers", "slow: timing-based tests that sleep on the real clock")


@pytest.fixture(autouse=True)
def clean_retry_env(monkeypatch):
    """Keep retry defaults independent of the developer's environment."""
    for name in RETRY_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def fast_options():
    """Deterministic millisecond backoff: 1ms, 2ms, 4ms, 5ms, ... for up to 5s."""
    return [
        with_initial_interval(0.001),
        with_max_interval(0.005),
        with_multiplier(2.0),
        with_randomization_factor(0),
        with_max_elapsed_time(5.0),
    ]


@pytest.fixture
def fake_clock():
    return FakeClock()


@pytest.fixture
def flaky_operation():
    """
    Factory for a Mock that raises ``error`` ``failures`` times, then returns ``result``.

    A fresh clone of ``error`` is raised each time, like a real call site would.
    """
    def make(failures: int, error, result=None):
        effects = [error.clone() if hasattr(error, "clone") else error for _ in range(failures)]
        return Mock(side_effect=effects + [result])
    return make


@pytest.fixture
def failing_operation():
    """Factory for a Mock that always raises a fresh clone of ``error``."""
    def make(error):
        def fail():
            raise error.clone()
        return Mock(side_effect=fail)
    return make
