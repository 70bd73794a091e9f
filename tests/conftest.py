"""Pytest fixtures for Starsky tests."""

from __future__ import annotations

import os
import random

import pytest
from hypothesis import Phase, Verbosity, settings

from starsky.config import SkyConfig

settings.register_profile(
    "ci",
    max_examples=100,
    deadline=None,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
)
settings.register_profile(
    "dev",
    max_examples=20,
    deadline=500,
)
settings.register_profile(
    "debug",
    max_examples=10,
    verbosity=Verbosity.verbose,
    deadline=None,
)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def seeded_config() -> SkyConfig:
    return SkyConfig(seed=7)


@pytest.fixture
def fast_config() -> SkyConfig:
    """Config with a short tick so pilot tests see animation quickly."""
    return SkyConfig(seed=7, tick_interval=0.02)


class RecordingSink:
    """Stands in for ``textual.log``, keeping ``(level, message)`` pairs."""

    def __init__(self) -> None:
        self.records: list[tuple[str, str]] = []

    def _record(self, level: str, message: str) -> None:
        self.records.append((level, message))

    def debug(self, message: str) -> None:
        self._record("debug", message)

    def info(self, message: str) -> None:
        self._record("info", message)

    def warning(self, message: str) -> None:
        self._record("warning", message)

    def error(self, message: str) -> None:
        self._record("error", message)


@pytest.fixture
def log_sink() -> RecordingSink:
    return RecordingSink()
