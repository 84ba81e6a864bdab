from enum import Enum
from typing import Optional

from graph.geometry import generate_id


# ---------------------------------------------------------------------------
# Node Status Enum: maps 1-to-1 with the visual encoding palette
# ---------------------------------------------------------------------------
class NodeStatus(Enum):
    DEFAULT  = "default"   # neutral grey
    VISITED  = "visited"   # finalised by the algorithm
    CURRENT  = "current"   # the node relaxed in this step
    START    = "start"     # chosen start node
    END      = "end"       # chosen end node
    PATH     = "path"      # on the final shortest path


# ---------------------------------------------------------------------------
# Node
# ---------------------------------------------------------------------------
class Node:
    """
    Stable identity (id), editable label and position, presentational status.

    Attributes:
        id      : Unique identifier (short random string by default, or user-supplied).
        label   : Human-readable name shown on the canvas.  Independent of id.
        x, y    : Canvas coordinates in pixels.  Irrelevant to the algorithm.
        status  : NodeStatus, recomputed by the engine every step.
    """

    __slots__ = ("id", "label", "x", "y", "status")

    def __init__(
        self,
        x: float = 0.0,
        y: float = 0.0,
        label: Optional[str] = None,
        node_id: Optional[str] = None,
        status: NodeStatus = NodeStatus.DEFAULT,
    ):
        self.id: str            = node_id or generate_id()
        self.label: str         = label or self.id
        self.x: float           = float(x)
        self.y: float           = float(y)
        self.status: NodeStatus = status

    # ------------------------------------------------------------------
    # Status helpers
    # ------------------------------------------------------------------
    def reset(self) -> None:
        """Back to default, keeping the start / end markers."""
        if self.status not in (NodeStatus.START, NodeStatus.END):
            self.status = NodeStatus.DEFAULT

    @property
    def is_endpoint(self) -> bool:
        return self.status in (NodeStatus.START, NodeStatus.END)

    def copy(self) -> "Node":
        return Node(x=self.x, y=self.y, label=self.label, node_id=self.id, status=self.status)

    # ------------------------------------------------------------------
    # Geometry
    # ------------------------------------------------------------------
    def distance_to(self, other: "Node") -> float:
        return ((self.x - other.x) ** 2 + (self.y - other.y) ** 2) ** 0.5

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------
    def to_dict(self) -> dict:
        return {
            "id":     self.id,
            "label":  self.label,
            "x":      self.x,
            "y":      self.y,
            "status": self.status.value,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Node":
        return cls(
            x=data["x"],
            y=data["y"],
            label=data.get("label"),
            node_id=data["id"],
            status=NodeStatus(data.get("status", "default")),
        )

    # ------------------------------------------------------------------
    # Dunder
    # ------------------------------------------------------------------
    def __repr__(self) -> str:
        return f"Node(id={self.id}, label={self.label}, status={self.status.value}, pos=({self.x:.2f},{self.y:.2f}))"

    def __eq__(self, other) -> bool:
        return (
            isinstance(other, Node)
            and self.id == other.id
            and self.label == other.label
            and self.x == other.x
            and self.y == other.y
            and self.status == other.status
        )

    def __hash__(self) -> int:
        return hash(self.id)
