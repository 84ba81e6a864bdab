"""
graph/
-----
Core data layer.  Public API:

    from graph import Graph, Node, Edge
    from graph import NodeStatus, EdgeStatus
    from graph import GraphError, NodeNotFoundError, …
"""

from graph.node   import Node,  NodeStatus
from graph.edge   import Edge,  EdgeStatus, edge_id_for
from graph.graph  import Graph
from graph.errors import (
    GraphError,
    NodeNotFoundError,
    EdgeNotFoundError,
    DuplicateEdgeError,
    InvalidEdgeError,
)

__all__ = [
    "Node",      "NodeStatus",
    "Edge",      "EdgeStatus",  "edge_id_for",
    "Graph",
    "GraphError",
    "NodeNotFoundError",
    "EdgeNotFoundError",
    "DuplicateEdgeError",
    "InvalidEdgeError",
]
