"""
errors.py — Graph Editing Errors
=================================
Raised by the graph container when an edit would break one of its
invariants, and by the engine when asked to start from a node that
does not exist.  All of them are ValueErrors so callers that only care
about "bad input" can catch one thing.
"""


class GraphError(ValueError):
    """Base class for every graph-level error."""


class NodeNotFoundError(GraphError):
    def __init__(self, node_id: str):
        super().__init__(f"Unknown node: {node_id!r}")
        self.node_id = node_id


class EdgeNotFoundError(GraphError):
    def __init__(self, edge_id: str):
        super().__init__(f"Unknown edge: {edge_id!r}")
        self.edge_id = edge_id


class DuplicateEdgeError(GraphError):
    def __init__(self, source: str, target: str):
        super().__init__(f"Edge already exists between {source!r} and {target!r}")
        self.source = source
        self.target = target


class InvalidEdgeError(GraphError):
    """Self loops and non-numeric weights."""
