"""Tests for game configuration and modes."""

import json
from pathlib import Path

import pytest

from lovegraph.game.config import (
    DEFAULT_MAX_ATTEMPTS,
    GAME_MODES,
    GameConfig,
    get_mode,
    load_config,
)
from lovegraph.game.puzzle import PuzzleConstraints
from lovegraph.game.scoring import ScoringWeights


class TestGameConfig:
    def test_defaults(self):
        config = GameConfig()
        assert config.max_attempts == DEFAULT_MAX_ATTEMPTS == 100
        assert config.puzzle == PuzzleConstraints()
        assert config.scoring == ScoringWeights()

    def test_validate_attempts(self):
        with pytest.raises(ValueError):
            GameConfig(max_attempts=0).validate()

    def test_validate_puzzle(self):
        with pytest.raises(ValueError):
            GameConfig(puzzle=PuzzleConstraints(min_path_len=0)).validate()

    def test_dict_roundtrip(self):
        config = GameConfig(max_attempts=7, hint_slack=1)
        assert GameConfig.from_dict(config.to_dict()) == config

    def test_from_dict_starts_from_mode(self):
        config = GameConfig.from_dict({"mode": "quick", "max_attempts": 9})
        assert config.max_attempts == 9
        assert config.puzzle == GAME_MODES["quick"].puzzle

    def test_nested_override_keeps_mode_fields(self):
        config = GameConfig.from_dict({"mode": "hard", "puzzle": {"max_path_len": 9}})
        assert config.puzzle == PuzzleConstraints(
            min_path_len=5, max_path_len=9, max_samples=300,
        )
        assert config.scoring == GAME_MODES["hard"].scoring

    def test_nested_scoring_override(self):
        config = GameConfig.from_dict({"mode": "quick", "scoring": {"base": 500}})
        assert config.scoring == ScoringWeights(
            base=500, time_budget_seconds=120, points_per_spare_attempt=100,
        )

    def test_mode_argument_is_base(self):
        config = GameConfig.from_dict({"max_attempts": 7}, mode="hard")
        assert config.max_attempts == 7
        assert config.puzzle == GAME_MODES["hard"].puzzle
        assert config.hint_slack == 0

    def test_mode_in_dict_wins(self):
        config = GameConfig.from_dict({"mode": "quick"}, mode="hard")
        assert config == GAME_MODES["quick"]

    def test_section_must_be_object(self):
        with pytest.raises(ValueError):
            GameConfig.from_dict({"puzzle": [3, 6]})

    def test_from_dict_rejects_bad_values(self):
        with pytest.raises(ValueError):
            GameConfig.from_dict({"max_attempts": -3})


class TestModes:
    @pytest.mark.parametrize("name", sorted(GAME_MODES))
    def test_every_mode_is_valid(self, name):
        GAME_MODES[name].validate()

    def test_classic_is_default(self):
        assert get_mode("classic") == GameConfig()

    def test_unknown_mode(self):
        with pytest.raises(ValueError, match="Unknown game mode"):
            get_mode("speedrun")


class TestLoadConfig:
    def test_load(self, tmp_path: Path):
        path = tmp_path / "game.json"
        path.write_text(json.dumps({
            "max_attempts": 30,
            "puzzle": {"min_path_len": 4, "max_path_len": 5},
        }))
        config = load_config(path)
        assert config.max_attempts == 30
        assert config.puzzle.min_path_len == 4
        assert config.puzzle.max_samples == 100

    def test_load_mode(self, tmp_path: Path):
        path = tmp_path / "game.json"
        path.write_text(json.dumps({"mode": "hard"}))
        assert load_config(path) == GAME_MODES["hard"]

    def test_load_over_mode(self, tmp_path: Path):
        path = tmp_path / "game.json"
        path.write_text(json.dumps({"puzzle": {"max_path_len": 9}}))
        config = load_config(path, mode="hard")
        assert config.max_attempts == GAME_MODES["hard"].max_attempts
        assert config.puzzle.min_path_len == 5
        assert config.puzzle.max_path_len == 9

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(ValueError):
            load_config(tmp_path / "nope.json")

    def test_invalid_json(self, tmp_path: Path):
        path = tmp_path / "game.json"
        path.write_text("{not json")
        with pytest.raises(ValueError):
            load_config(path)

    def test_not_an_object(self, tmp_path: Path):
        path = tmp_path / "game.json"
        path.write_text("[1, 2]")
        with pytest.raises(ValueError):
            load_config(path)

    def test_unknown_mode(self, tmp_path: Path):
        path = tmp_path / "game.json"
        path.write_text(json.dumps({"mode": "speedrun"}))
        with pytest.raises(ValueError):
            load_config(path)
