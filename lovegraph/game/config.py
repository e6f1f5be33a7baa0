"""Game configuration and named game modes.

Game variants differ only in numbers (attempt budget, puzzle difficulty,
scoring weights), so a mode is just a GameConfig preset.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field, replace
from pathlib import Path

from loguru import logger

from lovegraph.game.puzzle import PuzzleConstraints
from lovegraph.game.scoring import ScoringWeights

DEFAULT_MAX_ATTEMPTS = 100
DEFAULT_HINT_SLACK = 2          # Extra path length a hint may use beyond attempts left
DEFAULT_SUGGESTION_LIMIT = 8


@dataclass(frozen=True)
class GameConfig:
    """Configuration for a game session."""
    max_attempts: int = DEFAULT_MAX_ATTEMPTS
    puzzle: PuzzleConstraints = field(default_factory=PuzzleConstraints)
    scoring: ScoringWeights = field(default_factory=ScoringWeights)
    hint_slack: int = DEFAULT_HINT_SLACK
    suggestion_limit: int = DEFAULT_SUGGESTION_LIMIT

    def validate(self) -> None:
        """Raise ValueError if any setting is out of range."""
        if self.max_attempts < 1:
            raise ValueError(f"max_attempts must be >= 1, got {self.max_attempts}")
        if self.hint_slack < 0:
            raise ValueError(f"hint_slack must be >= 0, got {self.hint_slack}")
        if self.suggestion_limit < 1:
            raise ValueError(
                f"suggestion_limit must be >= 1, got {self.suggestion_limit}"
            )
        self.puzzle.validate()

    def to_dict(self) -> dict:
        return {
            "max_attempts": self.max_attempts,
            "puzzle": self.puzzle.to_dict(),
            "scoring": self.scoring.to_dict(),
            "hint_slack": self.hint_slack,
            "suggestion_limit": self.suggestion_limit,
        }

    @classmethod
    def from_dict(cls, d: dict, mode: str | None = None) -> GameConfig:
        """Build a config from a dict of overrides.

        The starting point is the mode named in the dict, else `mode`,
        else the defaults. Nested "puzzle" and "scoring" sections only
        replace the fields they name.
        """
        mode = d.get("mode", mode)
        base = get_mode(mode) if mode is not None else cls()
        config = replace(
            base,
            max_attempts=int(d.get("max_attempts", base.max_attempts)),
            puzzle=PuzzleConstraints.from_dict(
                {**base.puzzle.to_dict(), **_section(d, "puzzle")}
            ),
            scoring=ScoringWeights.from_dict(
                {**base.scoring.to_dict(), **_section(d, "scoring")}
            ),
            hint_slack=int(d.get("hint_slack", base.hint_slack)),
            suggestion_limit=int(d.get("suggestion_limit", base.suggestion_limit)),
        )
        config.validate()
        return config


def _section(d: dict, key: str) -> dict:
    section = d.get(key, {})
    if not isinstance(section, dict):
        raise ValueError(f'"{key}" must be an object, got {type(section).__name__}')
    return section


# ── Game modes ────────────────────────────────────────────

GAME_MODES: dict[str, GameConfig] = {
    # Default game: generous budget, any chain of 3-6 people
    "classic": GameConfig(),
    # Short rounds: tight attempt budget, nearby pairs
    "quick": GameConfig(
        max_attempts=15,
        puzzle=PuzzleConstraints(min_path_len=3, max_path_len=4),
        scoring=ScoringWeights(time_budget_seconds=120, points_per_spare_attempt=100),
    ),
    # Long chains, few mistakes allowed, no hints past the budget
    "hard": GameConfig(
        max_attempts=25,
        puzzle=PuzzleConstraints(min_path_len=5, max_path_len=8, max_samples=300),
        scoring=ScoringWeights(base=2000, points_per_spare_attempt=80),
        hint_slack=0,
    ),
}


def get_mode(name: str) -> GameConfig:
    """Look up a game mode preset by name."""
    try:
        return GAME_MODES[name]
    except KeyError:
        raise ValueError(
            f"Unknown game mode '{name}' (choose from: {', '.join(sorted(GAME_MODES))})"
        ) from None


def load_config(path: Path, mode: str | None = None) -> GameConfig:
    """Load a GameConfig from a JSON file.

    The file may name a "mode" to start from and override any field.
    Without one, `mode` is the starting point. Missing fields keep the
    values of that mode (or the defaults).
    """
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        logger.error(f"Failed to load game config {path}: {e}")
        raise ValueError(f"Cannot read game config {path}: {e}") from e

    if not isinstance(data, dict):
        raise ValueError(f"Game config {path} must be a JSON object")

    config = GameConfig.from_dict(data, mode=mode)
    logger.info(f"Loaded game config from {path} (max_attempts={config.max_attempts})")
    return config
