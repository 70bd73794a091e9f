"""Unit tests for SkyConfig."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from starsky.config import SkyConfig

pytestmark = pytest.mark.unit


class TestSkyConfig:
    def test_defaults(self):
        config = SkyConfig()

        assert (config.cols, config.rows) == (20, 10)
        assert config.star_count == 40
        assert config.tick_interval == pytest.approx(0.5)
        assert config.initial_theme == 0
        assert config.seed is None

    @pytest.mark.parametrize("field", ["cols", "rows", "star_count"])
    def test_sizes_must_be_positive(self, field: str):
        with pytest.raises(ValidationError):
            SkyConfig(**{field: 0})

    def test_tick_interval_must_be_positive(self):
        with pytest.raises(ValidationError):
            SkyConfig(tick_interval=0)

    @pytest.mark.parametrize("index", [-1, 3])
    def test_initial_theme_must_exist(self, index: int):
        with pytest.raises(ValidationError, match="initial_theme"):
            SkyConfig(initial_theme=index)

    def test_seeded_rng_is_repeatable(self):
        config = SkyConfig(seed=11)
        first_rng = config.make_rng()
        second_rng = config.make_rng()

        first = [first_rng.random() for _ in range(3)]
        second = [second_rng.random() for _ in range(3)]

        assert first == second
        assert len(set(first)) == 3

    def test_config_is_frozen(self):
        config = SkyConfig()
        with pytest.raises(ValidationError):
            config.cols = 5  # type: ignore[misc]
