"""Connect game — puzzle generation, the reveal session, and scoring.

A game picks two people who are a few links apart, shows only those two,
and asks the player to rebuild a chain between them by naming people one
at a time. Variants (attempt budget, difficulty, scoring weights) are
GameConfig presets in GAME_MODES, all running on the same GameSession.
"""

from lovegraph.game.puzzle import (
    Puzzle,
    PuzzleConstraints,
    generate_puzzle,
    puzzle_for,
)
from lovegraph.game.scoring import ScoringWeights, compute_score
from lovegraph.game.models import (
    GameStatus,
    GuessOutcome,
    GuessResult,
    Hint,
)
from lovegraph.game.config import GAME_MODES, GameConfig, get_mode, load_config
from lovegraph.game.session import GameSession, format_elapsed

__all__ = [
    "GAME_MODES",
    "GameConfig",
    "GameSession",
    "GameStatus",
    "GuessOutcome",
    "GuessResult",
    "Hint",
    "Puzzle",
    "PuzzleConstraints",
    "ScoringWeights",
    "compute_score",
    "format_elapsed",
    "generate_puzzle",
    "get_mode",
    "load_config",
    "puzzle_for",
]
