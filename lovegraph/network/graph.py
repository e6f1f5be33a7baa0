"""Connection graph — adjacency built from accepted person pairs.

The graph is derived entirely from a flat edge list and never patched in
place. When the accepted connections change, build a new one.
"""

from __future__ import annotations

from typing import Iterable, Iterator

from loguru import logger

Edge = frozenset  # frozenset[str] with exactly two names


def make_edge(a: str, b: str) -> Edge:
    """Unordered pair used for edge sets."""
    return frozenset((a, b))


class ConnectionGraph:
    """Immutable adjacency mapping from person name to connected names.

    Names keep their original casing as the canonical key. Lookups through
    resolve() and suggest() are case-insensitive.
    """

    def __init__(self, adjacency: dict[str, set[str]]) -> None:
        self._adj: dict[str, frozenset[str]] = {
            name: frozenset(others) for name, others in adjacency.items()
        }
        self._people: tuple[str, ...] = tuple(sorted(self._adj))
        self._folded: dict[str, str] = {}
        for name in self._people:
            self._folded.setdefault(name.casefold(), name)
        self._edges: frozenset[Edge] = frozenset(
            make_edge(a, b) for a, others in self._adj.items() for b in others
        )

    # ── Read-only views ───────────────────────────────────

    @property
    def people(self) -> list[str]:
        """Every person appearing in at least one edge, sorted."""
        return list(self._people)

    @property
    def edges(self) -> frozenset[Edge]:
        return self._edges

    def __contains__(self, name: object) -> bool:
        return name in self._adj

    def __len__(self) -> int:
        return len(self._people)

    def __iter__(self) -> Iterator[str]:
        return iter(self._people)

    def __repr__(self) -> str:
        return f"ConnectionGraph(people={len(self._people)}, edges={len(self._edges)})"

    # ── Queries ───────────────────────────────────────────

    def neighbors(self, name: str) -> set[str]:
        """Directly connected people. Empty set for unknown names."""
        return set(self._adj.get(name, ()))

    def sorted_neighbors(self, name: str) -> list[str]:
        """Neighbors in stable enumeration order (used by BFS)."""
        return sorted(self._adj.get(name, ()))

    def are_connected(self, a: str, b: str) -> bool:
        return b in self._adj.get(a, ())

    def degree(self, name: str) -> int:
        """Number of accepted connections a person has."""
        return len(self._adj.get(name, ()))

    def resolve(self, name: str) -> str | None:
        """Map user input to the canonical name, ignoring case.

        An exact match wins; otherwise the first spelling seen (in sorted
        order) for that case-folded name is returned.
        """
        name = name.strip()
        if name in self._adj:
            return name
        return self._folded.get(name.casefold())

    def suggest(
        self,
        query: str,
        exclude: Iterable[str] = (),
        limit: int = 8,
    ) -> list[str]:
        """Autocomplete: people whose name contains the query (case-insensitive)."""
        needle = query.strip().casefold()
        if not needle:
            return []
        skip = set(exclude)
        matches = []
        for name in self._people:
            if name in skip or needle not in name.casefold():
                continue
            matches.append(name)
            if len(matches) >= limit:
                break
        return matches

    def ego_subgraph(self, query: str) -> ConnectionGraph:
        """Filter the network view around a search query.

        An exact (case-insensitive) name match keeps only that person's own
        connections. Otherwise every edge with an endpoint containing the
        query is kept. An empty query returns the graph unchanged.
        """
        needle = query.strip().casefold()
        if not needle:
            return self

        exact = self._folded.get(needle)
        if exact is not None:
            pairs = [(exact, other) for other in self.sorted_neighbors(exact)]
        else:
            pairs = [
                tuple(sorted(edge))
                for edge in self._edges
                if any(needle in name.casefold() for name in edge)
            ]
        return build_graph(pairs)


# ── Construction ──────────────────────────────────────────


def build_graph(edges: Iterable[tuple[str, str]]) -> ConnectionGraph:
    """Build a ConnectionGraph from (name, name) pairs.

    Duplicate pairs (in either order) collapse into one edge. Blank names
    and self-links are skipped.
    """
    adjacency: dict[str, set[str]] = {}
    skipped = 0

    for pair in edges:
        a, b = pair
        a = (a or "").strip()
        b = (b or "").strip()
        if not a or not b or a == b:
            skipped += 1
            logger.warning(f"Skipping malformed connection: {pair!r}")
            continue
        adjacency.setdefault(a, set()).add(b)
        adjacency.setdefault(b, set()).add(a)

    graph = ConnectionGraph(adjacency)
    logger.info(
        f"Connection graph built: {len(graph)} people, "
        f"{len(graph.edges)} connections"
        + (f" ({skipped} skipped)" if skipped else "")
    )
    return graph


def neighbors(graph: ConnectionGraph, name: str) -> set[str]:
    """Directly connected people; never raises for unknown names."""
    return graph.neighbors(name)


def are_connected(graph: ConnectionGraph, a: str, b: str) -> bool:
    """True iff a and b share an accepted connection."""
    return graph.are_connected(a, b)
