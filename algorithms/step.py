"""
step.py — Algorithm Step Snapshot
==================================
The engine turns one DijkstraStep into the next.  A step is a
frozen-in-time picture of everything the visualizer needs to render one
frame and everything the engine needs to compute the following one:

    • Tentative distances and predecessors for every node
    • Which node is next in line, which are finalised / still open
    • A private copy of the graph whose node / edge statuses are the
      colouring for this frame
    • The pseudocode line and a plain-English explanation (Learning Mode)

Design decisions:
  - DijkstraStep is a frozen dataclass.  Every field holds an object that
    belongs to this step alone (fresh dicts, frozensets, a Graph copy),
    so keeping the whole history around for scrubbing is safe.
  - `distances` and `previous` are read-only mapping views over private
    dicts; `graph` must still be treated as read-only by convention.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional, Tuple, FrozenSet

from graph import Graph


INF = float("inf")


@dataclass(frozen=True)
class DijkstraStep:
    """
    Attributes:
        distances       : {node_id: float} — best known distance, INF when unreachable so far.
        previous        : {node_id: node_id | None} — predecessor on the best known path.
        current_node    : Node to be processed by the next advance(), None once finished.
        visited         : Finalised node ids.
        unvisited       : Node ids still eligible for selection (the frontier).
        graph           : Graph copy coloured for this step.
        is_done         : True once no reachable unvisited node remains.
        shortest_path   : Start-to-end node ids, set only on the terminal step of a run.
        start_id        : The run's start node.
        step_number     : 0-based index of this step in the run.
        pseudocode_line : 0-based index into PSEUDOCODE.
        explanation     : Human-readable "why" text for Learning Mode.
    """

    distances:       Mapping[str, float]
    previous:        Mapping[str, Optional[str]]
    current_node:    Optional[str]
    visited:         FrozenSet[str]
    unvisited:       FrozenSet[str]
    graph:           Graph
    is_done:         bool                      = False
    shortest_path:   Optional[Tuple[str, ...]] = None
    start_id:        Optional[str]             = None
    step_number:     int                       = 0
    pseudocode_line: int                       = 0
    explanation:     str                       = field(default="", compare=False)

    def __post_init__(self):
        object.__setattr__(self, "distances", MappingProxyType(dict(self.distances)))
        object.__setattr__(self, "previous", MappingProxyType(dict(self.previous)))

    def distance_to(self, node_id: str) -> float:
        return self.distances.get(node_id, INF)

    def to_dict(self) -> dict:
        """JSON-friendly view: INF becomes "∞", sets become sorted lists."""
        return {
            "step_number":     self.step_number,
            "distances":       {n: format_distance(d) for n, d in self.distances.items()},
            "previous":        dict(self.previous),
            "current_node":    self.current_node,
            "visited":         sorted(self.visited),
            "unvisited":       sorted(self.unvisited),
            "graph":           self.graph.to_dict(),
            "is_done":         self.is_done,
            "shortest_path":   list(self.shortest_path) if self.shortest_path else None,
            "start_id":        self.start_id,
            "pseudocode_line": self.pseudocode_line,
            "explanation":     self.explanation,
        }


@dataclass(frozen=True)
class DijkstraResult:
    success:           bool
    steps:             Tuple[DijkstraStep, ...]
    shortest_path:     Optional[Tuple[str, ...]]
    shortest_distance: Optional[float]

    @property
    def final_step(self) -> DijkstraStep:
        return self.steps[-1]


def format_distance(d: float):
    """INF → "∞", integral floats → int, everything else untouched."""
    if d == INF:
        return "∞"
    if isinstance(d, float) and d.is_integer():
        return int(d)
    return d
