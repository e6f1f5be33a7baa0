"""Game session — the incremental reveal state machine.

The player sees only the start and target people. Each guess names
someone from the network; if that person links into the region revealed
so far, they are added along with every connection they have to revealed
people. The game is won once start and target are joined through
revealed connections, and lost when the attempt budget runs out.

States:
    NOT_STARTED -> IN_PROGRESS      start()
    IN_PROGRESS -> WON | LOST       guess()
    any         -> IN_PROGRESS      start() (replaces the session wholesale)

Terminal states ignore guesses.
"""

from __future__ import annotations

import random
import time
from typing import Any, Callable

from loguru import logger

from lovegraph.errors import GameNotActiveError
from lovegraph.game.config import GameConfig
from lovegraph.game.models import GameStatus, GuessOutcome, GuessResult, Hint
from lovegraph.game.puzzle import Puzzle, generate_puzzle
from lovegraph.game.scoring import compute_score
from lovegraph.network.graph import ConnectionGraph, Edge, make_edge
from lovegraph.network.paths import is_connected, shortest_path


class GameSession:
    """One connect game over a fixed connection graph.

    The graph is treated as read-only for the lifetime of the session.
    A single player drives the session, so no locking is done.
    """

    def __init__(
        self,
        graph: ConnectionGraph,
        config: GameConfig | None = None,
        rng: random.Random | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._graph = graph
        self._config = config or GameConfig()
        self._config.validate()
        self._rng = rng
        self._clock = clock
        self._reset(GameStatus.NOT_STARTED)

    def _reset(self, status: GameStatus, puzzle: Puzzle | None = None) -> None:
        self._status = status
        self._puzzle = puzzle
        self._start = puzzle.start if puzzle else ""
        self._target = puzzle.target if puzzle else ""
        self._revealed: set[str] = {self._start, self._target} if puzzle else set()
        self._connections: set[Edge] = set()
        self._attempts = 0
        self._started_at: float | None = None
        self._ended_at: float | None = None
        self._score: int | None = None

    # ── Lifecycle ─────────────────────────────────────────

    def start(self, puzzle: Puzzle | None = None) -> Puzzle:
        """Begin a new game, discarding any previous state.

        Args:
            puzzle: Play a fixed start/target pair instead of generating one
                (e.g. a shared daily puzzle).

        Raises:
            InsufficientDataError: The graph has fewer than two people.
                The session is left untouched.
            ValueError: A fixed puzzle names someone outside the graph, or
                uses the same person twice.
        """
        if puzzle is None:
            puzzle = generate_puzzle(self._graph, self._config.puzzle, rng=self._rng)
        elif puzzle.start not in self._graph or puzzle.target not in self._graph:
            raise ValueError(
                f"Puzzle {puzzle.start} -> {puzzle.target} is not in this graph"
            )
        elif puzzle.start == puzzle.target:
            raise ValueError(f"Puzzle start and target are both {puzzle.start}")

        self._reset(GameStatus.IN_PROGRESS, puzzle)
        self._started_at = self._clock()

        logger.info(
            f"Game started: {puzzle.start} -> {puzzle.target} "
            f"(max_attempts={self._config.max_attempts}"
            + (", degraded puzzle" if puzzle.degraded else "")
            + ")"
        )
        return puzzle

    def guess(self, name: str) -> GuessResult:
        """Submit a guess and advance the state machine.

        Never raises for bad input; every outcome is reported on the
        returned GuessResult.
        """
        raw = (name or "").strip()

        if self._status is not GameStatus.IN_PROGRESS:
            return self._result(GuessOutcome.GAME_NOT_ACTIVE, raw)
        if not raw:
            return self._result(GuessOutcome.EMPTY, raw)

        person = self._graph.resolve(raw)
        if person is None:
            logger.debug(f"Guess '{raw}': not in the network")
            return self._spend_attempt(GuessOutcome.NOT_FOUND, raw)

        if person in self._revealed:
            logger.debug(f"Guess '{person}': already revealed")
            return self._result(GuessOutcome.ALREADY_REVEALED, person)

        links = self._graph.neighbors(person) & self._revealed
        if not links:
            logger.debug(f"Guess '{person}': no link to revealed people")
            return self._spend_attempt(GuessOutcome.NO_LINK_TO_REVEALED, person)

        self._revealed.add(person)
        new_edges = frozenset(make_edge(person, other) for other in links)
        self._connections |= new_edges
        self._attempts += 1
        logger.debug(
            f"Guess '{person}': revealed with {len(new_edges)} new connections "
            f"(attempt {self._attempts}/{self._config.max_attempts})"
        )

        if is_connected(self._connections, self._start, self._target):
            self._finish(GameStatus.WON)
        elif self._attempts >= self._config.max_attempts:
            self._finish(GameStatus.LOST)

        return self._result(
            GuessOutcome.REVEALED,
            person,
            new_connections=new_edges,
            score=self._score,
        )

    def _spend_attempt(self, outcome: GuessOutcome, name: str) -> GuessResult:
        self._attempts += 1
        if self._attempts >= self._config.max_attempts:
            self._finish(GameStatus.LOST)
        return self._result(outcome, name)

    def _finish(self, status: GameStatus) -> None:
        self._status = status
        self._ended_at = self._clock()
        if status is GameStatus.WON:
            self._score = compute_score(
                self.elapsed_ms,
                self._attempts,
                self._config.max_attempts,
                self._config.scoring,
            )
            logger.info(
                f"Game won in {self._attempts} attempts, "
                f"{format_elapsed(self.elapsed_ms)} (score {self._score})"
            )
        else:
            logger.info(
                f"Game lost: {self._start} and {self._target} still apart "
                f"after {self._attempts} attempts"
            )

    def _result(
        self,
        outcome: GuessOutcome,
        name: str,
        new_connections: frozenset[Edge] = frozenset(),
        score: int | None = None,
    ) -> GuessResult:
        return GuessResult(
            outcome=outcome,
            name=name,
            attempts=self._attempts,
            status=self._status,
            new_connections=new_connections,
            score=score,
        )

    # ── Assistance ────────────────────────────────────────

    def require_active(self) -> None:
        """Raise GameNotActiveError unless a game is in progress."""
        if self._status is not GameStatus.IN_PROGRESS:
            raise GameNotActiveError(self._status.value)

    def hint(self) -> Hint | None:
        """Suggest an unrevealed person that links in and leads to the target.

        Scans people in enumeration order and returns the first one who is
        adjacent to a revealed person and whose shortest path to the
        target fits in the remaining attempts (plus the configured slack).
        Returns None outside an active game or when nobody qualifies.
        Hints do not cost attempts.
        """
        if self._status is not GameStatus.IN_PROGRESS:
            return None

        budget = self.attempts_left + self._config.hint_slack
        for person in self._graph.people:
            if person in self._revealed:
                continue
            if not self._graph.neighbors(person) & self._revealed:
                continue
            path = shortest_path(self._graph, person, self._target)
            if path is not None and len(path) <= budget:
                return Hint(person=person, path_to_target=path)
        return None

    def suggestions(self, query: str, limit: int | None = None) -> list[str]:
        """Autocomplete names for the guess box, hiding revealed people."""
        return self._graph.suggest(
            query,
            exclude=self._revealed,
            limit=limit or self._config.suggestion_limit,
        )

    # ── Read-only state ───────────────────────────────────

    @property
    def graph(self) -> ConnectionGraph:
        return self._graph

    @property
    def config(self) -> GameConfig:
        return self._config

    @property
    def status(self) -> GameStatus:
        return self._status

    @property
    def is_over(self) -> bool:
        return self._status.is_terminal

    @property
    def puzzle(self) -> Puzzle | None:
        return self._puzzle

    @property
    def start_person(self) -> str:
        return self._start

    @property
    def target_person(self) -> str:
        return self._target

    @property
    def revealed_people(self) -> frozenset[str]:
        return frozenset(self._revealed)

    @property
    def revealed_connections(self) -> frozenset[Edge]:
        return frozenset(self._connections)

    @property
    def attempts(self) -> int:
        return self._attempts

    @property
    def max_attempts(self) -> int:
        return self._config.max_attempts

    @property
    def attempts_left(self) -> int:
        return max(0, self._config.max_attempts - self._attempts)

    @property
    def elapsed_ms(self) -> int:
        """Milliseconds since start, frozen once the game ends."""
        if self._started_at is None:
            return 0
        end = self._ended_at if self._ended_at is not None else self._clock()
        return max(0, int((end - self._started_at) * 1000))

    @property
    def score(self) -> int | None:
        """Final score; None unless the game was won."""
        return self._score

    def snapshot(self) -> dict[str, Any]:
        """Plain-data view of the session for a UI layer."""
        return {
            "status": self._status.value,
            "start": self._start,
            "target": self._target,
            "revealed_people": sorted(self._revealed),
            "revealed_connections": sorted(
                sorted(edge) for edge in self._connections
            ),
            "attempts": self._attempts,
            "max_attempts": self._config.max_attempts,
            "elapsed_ms": self.elapsed_ms,
            "score": self._score,
        }


def format_elapsed(ms: int) -> str:
    """Format milliseconds as m:ss."""
    seconds = max(0, int(ms)) // 1000
    return f"{seconds // 60}:{seconds % 60:02d}"
