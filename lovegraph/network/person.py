"""People and connection records as handed over by the storage layer.

These mirror the rows the application stores (names and connections with
a moderation status). The graph engine itself only needs the accepted
(name, name) pairs; accepted_edges() does that projection.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from enum import Enum
from typing import Iterable

from loguru import logger


class ConnectionStatus(str, Enum):
    """Moderation state of a claimed connection."""
    PENDING = "pending"
    ACCEPTED = "accepted"
    REJECTED = "rejected"


@dataclass
class Person:
    """A named person with optional display metadata."""
    name: str
    instagram: str | None = None

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, d: dict) -> Person:
        return cls(
            name=str(d["name"]).strip(),
            instagram=d.get("instagram") or None,
        )


@dataclass
class ConnectionRecord:
    """A claimed link between two people."""
    name1: str
    name2: str
    status: ConnectionStatus = ConnectionStatus.PENDING
    id: int | None = None

    @property
    def is_accepted(self) -> bool:
        return self.status is ConnectionStatus.ACCEPTED

    def as_pair(self) -> tuple[str, str]:
        return (self.name1, self.name2)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name1": self.name1,
            "name2": self.name2,
            "status": self.status.value,
        }

    @classmethod
    def from_dict(cls, d: dict) -> ConnectionRecord:
        # Rows written before moderation existed have no status column
        raw_status = d.get("status") or ConnectionStatus.PENDING.value
        return cls(
            name1=_required_name(d, "name1"),
            name2=_required_name(d, "name2"),
            status=ConnectionStatus(str(raw_status).lower()),
            id=d.get("id"),
        )


def _required_name(d: dict, key: str) -> str:
    """A stripped, non-empty name from a row; null and blank are rejected."""
    value = d[key]
    if value is None or not str(value).strip():
        raise ValueError(f"{key} is missing or blank")
    return str(value).strip()


def accepted_edges(records: Iterable[ConnectionRecord]) -> list[tuple[str, str]]:
    """Project accepted records onto the (name, name) pairs the graph needs."""
    pairs = []
    hidden = 0
    for record in records:
        if record.is_accepted:
            pairs.append(record.as_pair())
        else:
            hidden += 1
    if hidden:
        logger.debug(f"{hidden} connections not accepted, left out of the graph")
    return pairs
