"""Puzzle generator — pick a start/target pair worth connecting.

A good puzzle joins two people who are not directly linked but are
reachable through a short chain. Pairs are sampled at random within a
fixed budget; if nothing qualifies, the first two people in enumeration
order are used instead and the puzzle is marked degraded.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, asdict

from loguru import logger

from lovegraph.errors import InsufficientDataError
from lovegraph.network.graph import ConnectionGraph
from lovegraph.network.paths import shortest_path

# Path lengths count people on the path, so 3 means one person in between
DEFAULT_MIN_PATH_LEN = 3
DEFAULT_MAX_PATH_LEN = 6
DEFAULT_MAX_SAMPLES = 100

_rng = random.Random()


@dataclass(frozen=True)
class PuzzleConstraints:
    """Difficulty window for generated puzzles."""
    min_path_len: int = DEFAULT_MIN_PATH_LEN
    max_path_len: int = DEFAULT_MAX_PATH_LEN
    max_samples: int = DEFAULT_MAX_SAMPLES

    def validate(self) -> None:
        if self.min_path_len < 2:
            raise ValueError(f"min_path_len must be >= 2, got {self.min_path_len}")
        if self.max_path_len < self.min_path_len:
            raise ValueError(
                f"max_path_len ({self.max_path_len}) is below "
                f"min_path_len ({self.min_path_len})"
            )
        if self.max_samples < 0:
            raise ValueError(f"max_samples must be >= 0, got {self.max_samples}")

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, d: dict) -> PuzzleConstraints:
        return cls(
            min_path_len=int(d.get("min_path_len", DEFAULT_MIN_PATH_LEN)),
            max_path_len=int(d.get("max_path_len", DEFAULT_MAX_PATH_LEN)),
            max_samples=int(d.get("max_samples", DEFAULT_MAX_SAMPLES)),
        )


@dataclass(frozen=True)
class Puzzle:
    """A start/target pair chosen for a game."""
    start: str
    target: str
    path: list[str] | None  # A shortest solution, None if unreachable
    samples_used: int
    degraded: bool = False  # True when the fallback pair was used

    @property
    def path_len(self) -> int | None:
        return len(self.path) if self.path is not None else None


def generate_puzzle(
    graph: ConnectionGraph,
    constraints: PuzzleConstraints = PuzzleConstraints(),
    rng: random.Random | None = None,
) -> Puzzle:
    """Pick a start/target pair that satisfies the difficulty window.

    Args:
        graph: The full accepted-connection graph.
        constraints: Path length window and sampling budget.
        rng: Random source. Pass a seeded Random for reproducible puzzles.

    Returns:
        The first sampled pair that is not directly connected and whose
        shortest path length falls in [min_path_len, max_path_len], or
        the degraded fallback pair if the budget runs out.

    Raises:
        InsufficientDataError: Fewer than two people in the graph.
        ValueError: Constraints are inconsistent.
    """
    constraints.validate()
    rng = rng or _rng

    people = graph.people
    if len(people) < 2:
        raise InsufficientDataError(len(people))

    for sample in range(1, constraints.max_samples + 1):
        start = rng.choice(people)
        target = rng.choice(people)

        if start == target or graph.are_connected(start, target):
            continue

        path = shortest_path(graph, start, target)
        if path is None:
            continue
        if constraints.min_path_len <= len(path) <= constraints.max_path_len:
            logger.debug(
                f"Puzzle picked after {sample} samples: "
                f"{start} -> {target} ({len(path)} people)"
            )
            return Puzzle(start=start, target=target, path=path, samples_used=sample)

    # TODO: offer a stricter mode that raises here instead of degrading
    start, target = people[0], people[1]
    logger.warning(
        f"No pair fits path length {constraints.min_path_len}-"
        f"{constraints.max_path_len} after {constraints.max_samples} samples; "
        f"falling back to {start} -> {target}"
    )
    return Puzzle(
        start=start,
        target=target,
        path=shortest_path(graph, start, target),
        samples_used=constraints.max_samples,
        degraded=True,
    )


def puzzle_for(graph: ConnectionGraph, start: str, target: str) -> Puzzle:
    """Build a Puzzle for a chosen pair (no sampling, no constraint checks)."""
    return Puzzle(
        start=start,
        target=target,
        path=shortest_path(graph, start, target),
        samples_used=0,
    )
