"""Data models for the connect game.

Defines session states, guess outcomes, and the result objects that
GameSession hands back to whatever UI drives it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from lovegraph.network.graph import Edge


class GameStatus(str, Enum):
    """Lifecycle of a game session."""
    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    WON = "won"
    LOST = "lost"

    @property
    def is_terminal(self) -> bool:
        return self in (GameStatus.WON, GameStatus.LOST)


class GuessOutcome(str, Enum):
    """What happened to a single guess."""
    REVEALED = "revealed"                    # Bridged into the known region
    NOT_FOUND = "not_found"                  # Nobody by that name (costs an attempt)
    ALREADY_REVEALED = "already_revealed"    # Known already (free)
    NO_LINK_TO_REVEALED = "no_link_to_revealed"  # Exists, no bridge (costs an attempt)
    EMPTY = "empty"                          # Blank input (free)
    GAME_NOT_ACTIVE = "game_not_active"      # Session not in progress (free)

    @property
    def costs_attempt(self) -> bool:
        return self in _COSTLY


_COSTLY = frozenset({
    GuessOutcome.REVEALED,
    GuessOutcome.NOT_FOUND,
    GuessOutcome.NO_LINK_TO_REVEALED,
})

# Player-facing messages, one per outcome
OUTCOME_MESSAGES: dict[GuessOutcome, str] = {
    GuessOutcome.REVEALED: "Revealed {name}.",
    GuessOutcome.NOT_FOUND: "Nobody called '{name}' is in the network.",
    GuessOutcome.ALREADY_REVEALED: "{name} is already on the board.",
    GuessOutcome.NO_LINK_TO_REVEALED: "{name} has no connection to anyone revealed so far.",
    GuessOutcome.EMPTY: "Type a name to guess.",
    GuessOutcome.GAME_NOT_ACTIVE: "No game in progress.",
}


@dataclass(frozen=True)
class GuessResult:
    """Outcome of GameSession.guess(). Every guess produces one."""

    outcome: GuessOutcome
    name: str                       # Canonical name when resolved, else the input
    attempts: int                   # Attempts used after this guess
    status: GameStatus              # Session status after this guess
    new_connections: frozenset[Edge] = field(default_factory=frozenset)
    score: int | None = None        # Set only when this guess won the game

    @property
    def ok(self) -> bool:
        return self.outcome is GuessOutcome.REVEALED

    @property
    def won(self) -> bool:
        return self.status is GameStatus.WON

    @property
    def message(self) -> str:
        return OUTCOME_MESSAGES[self.outcome].format(name=self.name)


@dataclass(frozen=True)
class Hint:
    """A suggested next guess and the chain it leads along."""
    person: str
    path_to_target: list[str]

    @property
    def message(self) -> str:
        return f"Try: {self.person}"
