"""Tests for application configuration."""

from __future__ import annotations

import pytest

from fortuner.config import MAX_SEED, AppConfig


class TestAppConfig:
    """Test AppConfig dataclass."""

    def test_default_config(self) -> None:
        """Should create config with default values."""
        config = AppConfig()

        assert config.sources == []
        assert config.pattern is None
        assert config.insensitive is False
        assert config.seed is None
        assert config.encoding == "utf-8"

    def test_custom_config(self) -> None:
        """Should create config with custom values."""
        config = AppConfig(sources=["a", "b"], pattern="dog", insensitive=True, seed=3)

        assert config.sources == ["a", "b"]
        assert config.pattern == "dog"
        assert config.insensitive is True
        assert config.seed == 3

    def test_search_mode(self) -> None:
        """Search mode is on exactly when a pattern is set."""
        assert AppConfig(pattern="x").search_mode
        assert AppConfig(pattern="").search_mode
        assert not AppConfig().search_mode

    def test_seed_bounds(self) -> None:
        """Seeds must fit in an unsigned 64-bit integer."""
        assert AppConfig(seed=0).seed == 0
        assert AppConfig(seed=MAX_SEED).seed == MAX_SEED
        with pytest.raises(ValueError):
            AppConfig(seed=-1)
        with pytest.raises(ValueError):
            AppConfig(seed=MAX_SEED + 1)
