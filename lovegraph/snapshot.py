"""Snapshot loader — read exported names and connections from JSON.

The storage layer exports its two tables as one document:

    {
      "names": [{"id": 1, "name": "Ana", "instagram": "@ana"}, ...],
      "connections": [{"id": 7, "name1": "Ana", "name2": "Bia",
                       "status": "accepted"}, ...]
    }

Only accepted connections reach the graph. Moderation itself happens
upstream; this module just honours the status it was given.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path

from loguru import logger

from lovegraph.errors import SnapshotError
from lovegraph.network.graph import ConnectionGraph, build_graph
from lovegraph.network.person import ConnectionRecord, Person, accepted_edges


@dataclass
class Snapshot:
    """People and connection records exported from storage."""
    people: list[Person] = field(default_factory=list)
    connections: list[ConnectionRecord] = field(default_factory=list)

    def accepted_edges(self) -> list[tuple[str, str]]:
        return accepted_edges(self.connections)

    def build_graph(self) -> ConnectionGraph:
        return build_graph(self.accepted_edges())

    def person(self, name: str) -> Person | None:
        """Find display metadata for a name (case-insensitive)."""
        folded = name.strip().casefold()
        for person in self.people:
            if person.name.casefold() == folded:
                return person
        return None

    def to_dict(self) -> dict:
        return {
            "names": [p.to_dict() for p in self.people],
            "connections": [c.to_dict() for c in self.connections],
        }

    @classmethod
    def from_dict(cls, d: dict) -> Snapshot:
        people = []
        for row in _rows(d, "names"):
            if not isinstance(row, dict) or not str(row.get("name") or "").strip():
                logger.warning(f"Skipping name row without a name: {row!r}")
                continue
            people.append(Person.from_dict(row))

        connections = []
        for row in _rows(d, "connections"):
            if not isinstance(row, dict):
                raise SnapshotError(f"Bad connection row {row!r}: not an object")
            try:
                connections.append(ConnectionRecord.from_dict(row))
            except (KeyError, TypeError, ValueError) as e:
                raise SnapshotError(f"Bad connection row {row!r}: {e}") from e

        return cls(people=people, connections=connections)


def _rows(d: dict, key: str) -> list:
    rows = d.get(key, [])
    if not isinstance(rows, list):
        raise SnapshotError(f'"{key}" must be a list, got {type(rows).__name__}')
    return rows


def load_snapshot(path: Path) -> Snapshot:
    """Read a snapshot JSON file.

    Raises:
        SnapshotError: The file is missing, not JSON, or has bad rows.
    """
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        logger.error(f"Failed to load snapshot {path}: {e}")
        raise SnapshotError(f"Cannot read snapshot {path}: {e}") from e

    if not isinstance(data, dict):
        raise SnapshotError(f"Snapshot {path} must be a JSON object")

    snapshot = Snapshot.from_dict(data)
    logger.info(
        f"Loaded snapshot {path}: {len(snapshot.people)} names, "
        f"{len(snapshot.connections)} connections"
    )
    return snapshot
