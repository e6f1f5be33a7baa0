"""Connection network — graph store and path finding.

Builds an immutable adjacency structure from accepted person pairs and
answers shortest-path and reachability queries over it. Everything here
is pure in-memory computation; loading connections is the caller's job.
"""

from lovegraph.network.graph import (
    ConnectionGraph,
    Edge,
    are_connected,
    build_graph,
    make_edge,
    neighbors,
)
from lovegraph.network.paths import (
    components,
    edges_of,
    is_connected,
    reachable,
    shortest_path,
)
from lovegraph.network.person import (
    ConnectionRecord,
    ConnectionStatus,
    Person,
    accepted_edges,
)

__all__ = [
    "ConnectionGraph",
    "ConnectionRecord",
    "ConnectionStatus",
    "Edge",
    "Person",
    "accepted_edges",
    "are_connected",
    "build_graph",
    "components",
    "edges_of",
    "is_connected",
    "make_edge",
    "neighbors",
    "reachable",
    "shortest_path",
]
