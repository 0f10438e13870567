"""Tests for GameConfig."""

import pytest
from pydantic import ValidationError

from classic_snake.config import GameConfig


class TestGameConfig:
    def test_defaults(self):
        cfg = GameConfig()
        assert cfg.rows == 20
        assert cfg.cols == 20
        assert cfg.seed is None
        assert cfg.tick_interval_seconds == pytest.approx(0.18)

    @pytest.mark.parametrize("kwargs", [
        {"rows": 0},
        {"cols": 2},
        {"seed": -1},
        {"tick_interval_seconds": 0.0},
    ])
    def test_rejects_invalid_values(self, kwargs):
        with pytest.raises(ValidationError):
            GameConfig(**kwargs)

    def test_validation_error_is_value_error(self):
        with pytest.raises(ValueError):
            GameConfig(rows=-3)

    def test_save_and_load(self, tmp_path):
        cfg = GameConfig(rows=12, cols=14, seed=99, tick_interval_seconds=0.1)
        path = tmp_path / "nested" / "config.json"
        cfg.save(path)
        loaded = GameConfig.load(path)
        assert loaded == cfg

    def test_load_validates(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text('{"rows": 0}')
        with pytest.raises(ValidationError):
            GameConfig.load(path)
