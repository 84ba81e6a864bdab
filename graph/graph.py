"""
graph.py — Graph Container
==========================
Single source of truth for the graph being edited.  The web editor
mutates it; the shortest-path engine only ever works on copies.

Responsibilities:
  1. Editor CRUD on nodes & edges          (create / move / rename / remove)
  2. Adjacency queries                     (neighbours, adjacency_list, …)
  3. Status helpers                        (reset_status, set_node_status)
  4. Copy & serialisation round-trip       (copy / to_dict / from_dict)
  5. Factories                             (demo, adjacency-list import, random)

Design decisions:
  - Nodes & edges live in insertion-ordered dicts keyed by id, so
    iteration order is the order the user drew things in.  The engine's
    tie-break relies on that order being stable.
  - A separate adjacency dict `_adj[node_id] → [(neighbour_id, edge_id)]`
    is maintained incrementally so neighbour queries are O(degree).
  - Edges are undirected.  At most one edge per unordered pair and no
    self loops; the editor operations enforce this, the engine assumes it.
"""

import math
import random
from typing import Dict, List, Tuple, Optional, Iterator

from graph.node import Node, NodeStatus
from graph.edge import Edge, EdgeStatus, edge_id_for
from graph.errors import (
    NodeNotFoundError,
    EdgeNotFoundError,
    DuplicateEdgeError,
    InvalidEdgeError,
)
from graph.geometry import generate_id, next_letter_label


class Graph:
    """
    Attributes:
        nodes : {node_id: Node}
        edges : {edge_id: Edge}
        _adj  : {node_id: [(neighbour_id, edge_id), …]}
    """

    def __init__(self):
        self.nodes: Dict[str, Node] = {}
        self.edges: Dict[str, Edge] = {}
        self._adj:  Dict[str, List[Tuple[str, str]]] = {}

    # ==================================================================
    # NODE CRUD
    # ==================================================================
    def add_node(self, node: Node) -> Node:
        self.nodes[node.id] = node
        self._adj.setdefault(node.id, [])
        return node

    def create_node(
        self,
        x: float,
        y: float,
        label: Optional[str] = None,
        node_id: Optional[str] = None,
    ) -> Node:
        """Create + add in one call.  Label defaults to the next free letter."""
        if label is None:
            label = next_letter_label(self.nodes.values())
        return self.add_node(Node(x=x, y=y, label=label, node_id=node_id))

    def remove_node(self, node_id: str) -> None:
        """Remove a node together with every edge touching it."""
        self.require_node(node_id)
        for eid in [eid for eid, e in self.edges.items() if e.touches(node_id)]:
            self.remove_edge(eid)
        del self.nodes[node_id]
        self._adj.pop(node_id, None)

    def move_node(self, node_id: str, x: float, y: float) -> Node:
        node = self.require_node(node_id)
        node.x, node.y = float(x), float(y)
        return node

    def rename_node(self, node_id: str, label: str) -> Node:
        node = self.require_node(node_id)
        node.label = label
        return node

    def get_node(self, node_id: str) -> Optional[Node]:
        return self.nodes.get(node_id)

    def require_node(self, node_id: str) -> Node:
        node = self.nodes.get(node_id)
        if node is None:
            raise NodeNotFoundError(node_id)
        return node

    def has_node(self, node_id: str) -> bool:
        return node_id in self.nodes

    # ==================================================================
    # EDGE CRUD
    # ==================================================================
    def add_edge(self, edge: Edge) -> Edge:
        """Low-level insert.  Validates endpoints and the one-edge-per-pair rule."""
        self.require_node(edge.source)
        self.require_node(edge.target)
        if edge.source == edge.target:
            raise InvalidEdgeError(f"Self loop on {edge.source!r} is not allowed")
        if self.edge_exists(edge.source, edge.target):
            raise DuplicateEdgeError(edge.source, edge.target)
        if edge.id in self.edges:
            raise InvalidEdgeError(f"Edge id {edge.id!r} is already in use")

        self.edges[edge.id] = edge
        self._adj[edge.source].append((edge.target, edge.id))
        self._adj[edge.target].append((edge.source, edge.id))
        return edge

    def create_edge(self, source: str, target: str, weight: float = 1.0) -> Edge:
        """
        Create + add.  The id is "{source}-{target}" unless dashes in node
        ids make that clash with another pair's edge ("A-B"+"C" vs "A"+"B-C"),
        in which case a random suffix is appended.
        """
        eid = edge_id_for(source, target)
        while eid in self.edges:
            eid = f"{edge_id_for(source, target)}#{generate_id()}"
        return self.add_edge(Edge(source=source, target=target, weight=_as_weight(weight), edge_id=eid))

    def remove_edge(self, edge_id: str) -> None:
        e = self.require_edge(edge_id)
        for end in (e.source, e.target):
            self._adj[end][:] = [(n, eid) for n, eid in self._adj[end] if eid != edge_id]
        del self.edges[edge_id]

    def set_edge_weight(self, edge_id: str, weight: float) -> Edge:
        edge = self.require_edge(edge_id)
        edge.weight = _as_weight(weight)
        return edge

    def get_edge(self, edge_id: str) -> Optional[Edge]:
        return self.edges.get(edge_id)

    def require_edge(self, edge_id: str) -> Edge:
        edge = self.edges.get(edge_id)
        if edge is None:
            raise EdgeNotFoundError(edge_id)
        return edge

    def get_edge_between(self, a: str, b: str) -> Optional[Edge]:
        """The edge connecting a and b, in either direction."""
        for nbr, eid in self._adj.get(a, []):
            if nbr == b:
                return self.edges[eid]
        return None

    def edge_exists(self, a: str, b: str) -> bool:
        return self.get_edge_between(a, b) is not None

    # ==================================================================
    # ADJACENCY QUERIES
    # ==================================================================
    def neighbours(self, node_id: str) -> List[Tuple[str, Edge]]:
        """Return [(neighbour_id, edge)] in edge insertion order."""
        return [(nbr, self.edges[eid]) for nbr, eid in self._adj.get(node_id, [])]

    def adjacency_list(self) -> Dict[str, List[Tuple[str, float]]]:
        """{node_id: [(neighbour_id, weight), …]} — every node present, both directions."""
        return {
            nid: [(nbr, self.edges[eid].weight) for nbr, eid in self._adj.get(nid, [])]
            for nid in self.nodes
        }

    # ==================================================================
    # STATUS
    # ==================================================================
    def reset_status(self) -> None:
        """Wipe algorithm colouring; start / end markers survive."""
        for node in self.nodes.values():
            node.reset()
        for edge in self.edges.values():
            edge.reset()

    def clear_status(self) -> None:
        """Every node and edge back to DEFAULT, endpoints included."""
        for node in self.nodes.values():
            node.status = NodeStatus.DEFAULT
        for edge in self.edges.values():
            edge.status = EdgeStatus.DEFAULT

    def set_node_status(self, node_id: str, status: NodeStatus) -> None:
        self.require_node(node_id).status = status

    def clear(self) -> None:
        self.nodes.clear()
        self.edges.clear()
        self._adj.clear()

    # ==================================================================
    # COPY & SERIALISATION
    # ==================================================================
    def copy(self) -> "Graph":
        """Deep copy: no Node or Edge object is shared with the original."""
        g = Graph()
        for node in self.nodes.values():
            g.nodes[node.id] = node.copy()
        for edge in self.edges.values():
            g.edges[edge.id] = edge.copy()
        g._adj = {nid: list(adj) for nid, adj in self._adj.items()}
        return g

    def to_dict(self) -> dict:
        return {
            "nodes": [n.to_dict() for n in self.nodes.values()],
            "edges": [e.to_dict() for e in self.edges.values()],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Graph":
        g = cls()
        for nd in data.get("nodes", []):
            g.add_node(Node.from_dict(nd))
        for ed in data.get("edges", []):
            g.add_edge(Edge.from_dict(ed))
        return g

    # ==================================================================
    # FACTORIES
    # ==================================================================
    @classmethod
    def demo(cls) -> "Graph":
        """The five-node A–E graph the UI loads with 'Load Demo Graph'."""
        g = cls()
        for nid, x, y in [
            ("A", 100, 150),
            ("B", 250, 80),
            ("C", 400, 150),
            ("D", 250, 250),
            ("E", 550, 220),
        ]:
            g.create_node(x, y, label=nid, node_id=nid)
        for src, tgt, w in [
            ("A", "B", 4),
            ("A", "D", 3),
            ("B", "C", 5),
            ("B", "D", 2),
            ("C", "D", 1),
            ("C", "E", 6),
            ("D", "E", 8),
        ]:
            g.create_edge(src, tgt, weight=w)
        return g

    @classmethod
    def from_adjacency_list(
        cls,
        text: str,
        canvas_w: float = 800,
        canvas_h: float = 500,
    ) -> "Graph":
        """
        Parse a simple text adjacency list.

        Supported formats (one node per line):
            A: B C D            → A connects to B, C, D  (weight 1)
            A: B(3) C(7)        → A–B weight 3, A–C weight 7
            A -> B(3), C(7)     → alternate arrow syntax
            # comment           → ignored

        Node ids and labels are the tokens themselves.  Pairs listed twice
        (e.g. "A: B" and "B: A") produce a single edge, first weight wins.
        Nodes are laid out in a circle.
        """
        adjacency: Dict[str, List[Tuple[str, float]]] = {}

        for line in text.strip().splitlines():
            line = line.strip()
            if not line or line.startswith("#"):
                continue

            if ":" in line:
                parts = line.split(":", 1)
            elif "→" in line:
                parts = line.split("→", 1)
            elif "->" in line:
                parts = line.split("->", 1)
            else:
                raise InvalidEdgeError(f"Cannot parse adjacency line: {line!r}")

            src = parts[0].strip()
            adjacency.setdefault(src, [])

            for token in parts[1].replace(",", " ").split():
                if "(" in token and token.endswith(")"):
                    tgt, w_str = token[:-1].split("(", 1)
                    w = _as_weight(w_str)
                else:
                    tgt, w = token, 1.0
                adjacency.setdefault(tgt, [])
                adjacency[src].append((tgt, w))

        g = cls()
        for (x, y), nid in zip(_circle_layout(len(adjacency), canvas_w, canvas_h), adjacency):
            g.create_node(x, y, label=nid, node_id=nid)

        for src, targets in adjacency.items():
            for tgt, w in targets:
                if src == tgt or g.edge_exists(src, tgt):
                    continue
                g.create_edge(src, tgt, weight=w)
        return g

    @classmethod
    def generate_random(
        cls,
        num_nodes: int = 6,
        edge_probability: float = 0.4,
        weight_range: Tuple[int, int] = (1, 10),
        seed: Optional[int] = None,
        canvas_w: float = 800,
        canvas_h: float = 500,
    ) -> "Graph":
        """
        Erdős–Rényi style random graph with letter labels.
        A random spanning path is added so every node is reachable.
        """
        rng = random.Random(seed)
        num_nodes = max(1, min(num_nodes, 26))
        g = cls()

        ids = []
        for (x, y), label in zip(_circle_layout(num_nodes, canvas_w, canvas_h), _letters(num_nodes)):
            x += rng.uniform(-25, 25)
            y += rng.uniform(-25, 25)
            ids.append(g.create_node(x, y, label=label, node_id=label).id)

        for i in range(num_nodes):
            for j in range(i + 1, num_nodes):
                if rng.random() < edge_probability:
                    g.create_edge(ids[i], ids[j], weight=rng.randint(*weight_range))

        shuffled = list(ids)
        rng.shuffle(shuffled)
        for a, b in zip(shuffled, shuffled[1:]):
            if not g.edge_exists(a, b):
                g.create_edge(a, b, weight=rng.randint(*weight_range))
        return g

    # ==================================================================
    # UTILITY
    # ==================================================================
    def node_count(self) -> int:
        return len(self.nodes)

    def edge_count(self) -> int:
        return len(self.edges)

    def has_negative_edges(self) -> bool:
        return any(e.weight < 0 for e in self.edges.values())

    def node_ids(self) -> List[str]:
        return list(self.nodes.keys())

    def label_of(self, node_id: Optional[str]) -> str:
        node = self.nodes.get(node_id) if node_id else None
        return node.label if node else (node_id or "")

    def __iter__(self) -> Iterator[Node]:
        return iter(self.nodes.values())

    def __eq__(self, other) -> bool:
        return (
            isinstance(other, Graph)
            and list(self.nodes.values()) == list(other.nodes.values())
            and list(self.edges.values()) == list(other.edges.values())
        )

    def __repr__(self) -> str:
        return f"Graph(nodes={self.node_count()}, edges={self.edge_count()})"


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------
def _as_weight(value) -> float:
    try:
        w = float(value)
    except (TypeError, ValueError):
        raise InvalidEdgeError(f"Edge weight must be a number, got {value!r}") from None
    if math.isnan(w) or math.isinf(w):
        raise InvalidEdgeError(f"Edge weight must be finite, got {value!r}")
    return int(w) if w.is_integer() else w


def _circle_layout(n: int, canvas_w: float, canvas_h: float) -> List[Tuple[float, float]]:
    cx, cy = canvas_w / 2, canvas_h / 2
    radius = min(canvas_w, canvas_h) * 0.35
    return [
        (cx + radius * math.cos(2 * math.pi * i / n), cy + radius * math.sin(2 * math.pi * i / n))
        for i in range(n)
    ]


def _letters(n: int) -> List[str]:
    return [chr(ord("A") + i) for i in range(n)]
