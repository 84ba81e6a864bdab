"""
edge.py — Graph Edge
====================
Undirected, weighted connection between two nodes.  Carries its own
visual status so the renderer can draw the final shortest path.

Design decisions:
  - `source` and `target` are node-id strings, NOT Node references.
    This keeps edges serialisable and avoids circular references.
  - The id is derived from the endpoint pair ("A-B").  Node ids may hold
    dashes, so the Graph, not this class, guarantees ids stay unique.
  - Weight is expected to be positive.  Nothing here enforces it;
    Dijkstra's result with negative weights is simply undefined.
"""

from enum import Enum
from typing import Optional


# ---------------------------------------------------------------------------
# Edge Status Enum: visual encoding for the renderer
# ---------------------------------------------------------------------------
class EdgeStatus(Enum):
    DEFAULT = "default"   # thin, neutral grey
    PATH    = "path"      # thick, on the final shortest path


def edge_id_for(source: str, target: str) -> str:
    return f"{source}-{target}"


# ---------------------------------------------------------------------------
# Edge
# ---------------------------------------------------------------------------
class Edge:
    """
    Attributes:
        id      : "{source}-{target}" unless supplied explicitly.
        source  : ID of one endpoint.
        target  : ID of the other endpoint.
        weight  : Numeric cost.
        status  : EdgeStatus for visual encoding.
    """

    __slots__ = ("id", "source", "target", "weight", "status")

    def __init__(
        self,
        source: str,
        target: str,
        weight: float = 1.0,
        edge_id: Optional[str] = None,
        status: EdgeStatus = EdgeStatus.DEFAULT,
    ):
        self.id:     str        = edge_id or edge_id_for(source, target)
        self.source: str        = source
        self.target: str        = target
        self.weight: float      = weight
        self.status: EdgeStatus = status

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def reset(self) -> None:
        self.status = EdgeStatus.DEFAULT

    def touches(self, node_id: str) -> bool:
        return node_id in (self.source, self.target)

    def copy(self) -> "Edge":
        return Edge(self.source, self.target, self.weight, edge_id=self.id, status=self.status)

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------
    def to_dict(self) -> dict:
        return {
            "id":     self.id,
            "source": self.source,
            "target": self.target,
            "weight": self.weight,
            "status": self.status.value,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Edge":
        return cls(
            source=data["source"],
            target=data["target"],
            weight=data.get("weight", 1.0),
            edge_id=data.get("id"),
            status=EdgeStatus(data.get("status", "default")),
        )

    # ------------------------------------------------------------------
    # Dunder
    # ------------------------------------------------------------------
    def __repr__(self) -> str:
        return f"Edge({self.source} ↔ {self.target}, w={self.weight}, status={self.status.value})"

    def __eq__(self, other) -> bool:
        return (
            isinstance(other, Edge)
            and self.id == other.id
            and self.source == other.source
            and self.target == other.target
            and self.weight == other.weight
            and self.status == other.status
        )

    def __hash__(self) -> int:
        return hash(self.id)
