"""arenagraph — a small in-process graph container.

Nodes and edges carry arbitrary payloads and are addressed by typed handles
drawn from one shared allocator. Removing a node cascades to its edges.
"""

from arenagraph.core.cursors import (
    NeighborPayloads,
    NeighborPayloadsCursor,
    Neighbors,
    NeighborsCursor,
)
from arenagraph.core.graph import Graph
from arenagraph.core.store import Slot
from arenagraph.domain.errors import (
    AliasedAccessError,
    GraphError,
    MissingEdgeError,
    MissingNodeError,
)
from arenagraph.domain.ids import EdgeId, NodeId

__version__ = "0.1.0"

__all__ = [
    "AliasedAccessError",
    "EdgeId",
    "Graph",
    "GraphError",
    "MissingEdgeError",
    "MissingNodeError",
    "NeighborPayloads",
    "NeighborPayloadsCursor",
    "Neighbors",
    "NeighborsCursor",
    "NodeId",
    "Slot",
    "__version__",
]
