"""lovegraph — connection graph engine for a network of claimed romances.

Subpackages:
- network: graph store built from accepted connections, shortest paths,
  reachability
- game: puzzle generation, the incremental reveal session, scoring

The engine only computes over what it is given. Persistence, accounts,
moderation and rendering belong to the surrounding application;
snapshot and cli are thin adapters for working with exported data.
"""

from lovegraph.errors import (
    GameNotActiveError,
    InsufficientDataError,
    LoveGraphError,
    SnapshotError,
)
from lovegraph.network import ConnectionGraph, build_graph, is_connected, shortest_path
from lovegraph.game import GameConfig, GameSession, generate_puzzle

__version__ = "0.1.0"

__all__ = [
    "ConnectionGraph",
    "GameConfig",
    "GameNotActiveError",
    "GameSession",
    "InsufficientDataError",
    "LoveGraphError",
    "SnapshotError",
    "build_graph",
    "generate_puzzle",
    "is_connected",
    "shortest_path",
]
