"""Path finding over connection graphs (BFS).

shortest_path() walks the full graph. is_connected() only looks at the
edge set it is given, which is how the game tests the revealed subgraph.
"""

from __future__ import annotations

from collections import deque
from typing import Iterable

from lovegraph.network.graph import ConnectionGraph, Edge


def shortest_path(
    graph: ConnectionGraph,
    start: str,
    target: str,
) -> list[str] | None:
    """Find the shortest chain of connections from start to target.

    Returns the names along the path, inclusive of both ends, or None if
    either person is unknown or no path exists. Among equally short
    paths, the first one BFS discovers in sorted neighbor order wins.
    """
    if start not in graph or target not in graph:
        return None
    if start == target:
        return [start]

    visited = {start}
    queue: deque[list[str]] = deque([[start]])

    while queue:
        path = queue.popleft()
        for other in graph.sorted_neighbors(path[-1]):
            if other == target:
                return path + [other]
            if other not in visited:
                visited.add(other)
                queue.append(path + [other])

    return None


def is_connected(edges: Iterable[Edge], start: str, target: str) -> bool:
    """Check whether start reaches target using only the given edges.

    Pure function of its arguments. A person only counts as present if
    they appear in at least one edge, so an empty edge set never connects
    anything (not even a person to themselves). Edges that do not join
    two distinct people (a self-link) are ignored.
    """
    adjacency: dict[str, set[str]] = {}
    for edge in edges:
        if len(edge) != 2:
            continue
        a, b = tuple(edge)
        adjacency.setdefault(a, set()).add(b)
        adjacency.setdefault(b, set()).add(a)

    if start not in adjacency or target not in adjacency:
        return False
    if start == target:
        return True

    visited = {start}
    queue: deque[str] = deque([start])
    while queue:
        current = queue.popleft()
        for other in adjacency[current]:
            if other == target:
                return True
            if other not in visited:
                visited.add(other)
                queue.append(other)
    return False


def edges_of(graph: ConnectionGraph) -> frozenset[Edge]:
    """The full edge set of a graph, in the form is_connected() takes."""
    return graph.edges


def reachable(graph: ConnectionGraph, start: str) -> set[str]:
    """Everyone in start's connected component (including start)."""
    if start not in graph:
        return set()

    seen = {start}
    queue: deque[str] = deque([start])
    while queue:
        for other in graph.sorted_neighbors(queue.popleft()):
            if other not in seen:
                seen.add(other)
                queue.append(other)
    return seen


def components(graph: ConnectionGraph) -> list[set[str]]:
    """Connected components, largest first."""
    remaining = set(graph.people)
    found: list[set[str]] = []
    for name in graph.people:
        if name not in remaining:
            continue
        component = reachable(graph, name)
        remaining -= component
        found.append(component)
    found.sort(key=len, reverse=True)
    return found
