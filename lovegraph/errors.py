"""Exception types raised by lovegraph.

Guess failures are not exceptions: they come back as GuessOutcome values
on a GuessResult so the player always sees them. Exceptions are reserved
for conditions the caller has to handle before a game can continue.
"""

from __future__ import annotations


class LoveGraphError(Exception):
    """Base class for every lovegraph error."""


class InsufficientDataError(LoveGraphError):
    """Fewer than two distinct people exist, so no puzzle can be built."""

    def __init__(self, people_count: int) -> None:
        self.people_count = people_count
        super().__init__(
            f"Need at least 2 connected people to start a game, found {people_count}"
        )


class GameNotActiveError(LoveGraphError):
    """An operation needed an in-progress game."""

    def __init__(self, status: str) -> None:
        self.status = status
        super().__init__(f"No game in progress (status: {status})")


class SnapshotError(LoveGraphError):
    """A connection snapshot file could not be read or parsed."""
