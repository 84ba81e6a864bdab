"""
dijkstra.py — Step-wise Dijkstra
=================================
Dijkstra's algorithm as a sequence of pure transitions between frozen
DijkstraStep snapshots:

    initialize(graph, start)  →  step 0
    advance(step)             →  the step after it (one node finalised)
    finish(step, end)         →  terminal step with the path painted on
    run(graph, start, end)    →  DijkstraResult holding the whole timeline

The frontier is scanned linearly instead of kept in a heap: graphs are
editor-sized, and a scan keeps the selection rule easy to show in the
pseudocode panel.

Tie-break: when several unvisited nodes share the minimum distance the
one that comes first in graph order (the order nodes were added) wins.
This only affects which of several equally short paths is reported,
never the distances.

Correctness note: Dijkstra requires non-negative weights.  Nothing here
checks for negative edges; with them the result is undefined.
"""

from dataclasses import replace
from typing import Dict, List, Optional, Sequence, Set, Tuple

from graph import Graph, NodeStatus, NodeNotFoundError
from algorithms.step import DijkstraStep, DijkstraResult, INF, format_distance
from algorithms.path import reconstruct_path, highlight_path


# ---------------------------------------------------------------------------
# Pseudocode
# ---------------------------------------------------------------------------
PSEUDOCODE: List[str] = [
    "def Dijkstra(graph, start, end):",                       # 0
    "    dist ← {v: ∞ for v in V};  dist[start] ← 0",         # 1
    "    prev ← {v: None for v in V}",                        # 2
    "    unvisited ← V;  current ← start",                    # 3
    "    while current is not None:",                         # 4
    "        move current from unvisited to visited",         # 5
    "        for (v, w) in adj(current) if v unvisited:",     # 6
    "            if dist[current] + w < dist[v]:",            # 7
    "                dist[v] ← dist[current] + w",            # 8
    "                prev[v] ← current",                      # 9
    "        current ← argmin dist over unvisited (if < ∞)",  # 10
    "    return path(prev, end)",                             # 11
]

LINE_INIT   = 3
LINE_SELECT = 10
LINE_PATH   = 11


# ---------------------------------------------------------------------------
# Transitions
# ---------------------------------------------------------------------------
def initialize(graph: Graph, start_id: str) -> DijkstraStep:
    """
    Step 0: dist[start] = 0, everything else ∞, nothing visited.

    Raises NodeNotFoundError if `start_id` is not in the graph.
    """
    if not graph.has_node(start_id):
        raise NodeNotFoundError(start_id)

    g = graph.copy()
    g.set_node_status(start_id, NodeStatus.START)

    return DijkstraStep(
        distances={nid: (0.0 if nid == start_id else INF) for nid in g.nodes},
        previous={nid: None for nid in g.nodes},
        current_node=start_id,
        visited=frozenset(),
        unvisited=frozenset(g.nodes),
        graph=g,
        is_done=False,
        start_id=start_id,
        step_number=0,
        pseudocode_line=LINE_INIT,
        explanation=(
            f"Initialise: all distances = ∞ except start '{g.label_of(start_id)}' = 0. "
            f"Every node is unvisited."
        ),
    )


def advance(step: DijkstraStep) -> DijkstraStep:
    """
    Finalise `step.current_node`, relax its unvisited neighbours and pick
    the next node.  Returns `step` itself once the run is over.
    """
    if step.is_done or step.current_node is None:
        return step

    u = step.current_node
    graph = step.graph.copy()
    distances: Dict[str, float]         = dict(step.distances)
    previous:  Dict[str, Optional[str]] = dict(step.previous)
    visited:   Set[str]                 = set(step.visited) | {u}
    unvisited: Set[str]                 = set(step.unvisited) - {u}

    _recolour(graph, u, visited)

    # -- relax --
    d_u = distances[u]
    relaxed: List[Tuple[str, float]] = []
    for v, edge in graph.neighbours(u):
        if v in visited:
            continue
        candidate = d_u + edge.weight
        if candidate < distances.get(v, INF):
            distances[v] = candidate
            previous[v]  = u
            relaxed.append((v, candidate))

    # -- select --
    nxt = _closest_unvisited(graph, unvisited, distances)
    is_done = nxt is None

    return DijkstraStep(
        distances=distances,
        previous=previous,
        current_node=nxt,
        visited=frozenset(visited),
        unvisited=frozenset(unvisited),
        graph=graph,
        is_done=is_done,
        start_id=step.start_id,
        step_number=step.step_number + 1,
        pseudocode_line=LINE_SELECT,
        explanation=_explain(graph, u, d_u, relaxed, nxt, distances),
    )


def finish(step: DijkstraStep, end_id: str) -> DijkstraStep:
    """
    Attach the reconstructed path to a terminal step and highlight it.
    Without a path the step comes back with only its explanation extended.
    """
    if not step.is_done:
        raise ValueError("finish() expects a terminal step (is_done=True)")

    path = reconstruct_path(end_id, step.previous, step.start_id)
    if path is None:
        return replace(
            step,
            explanation=f"{step.explanation} No path exists to '{step.graph.label_of(end_id)}'.",
        )

    labels = " → ".join(step.graph.label_of(n) for n in path)
    return replace(
        step,
        graph=highlight_path(step.graph, path),
        shortest_path=path,
        pseudocode_line=LINE_PATH,
        explanation=(
            f"Done. Shortest path: {labels}, "
            f"distance = {format_distance(step.distance_to(end_id))}."
        ),
    )


def run(graph: Graph, start_id: str, end_id: str) -> DijkstraResult:
    """Initialise, advance to the end, finish; keep every snapshot."""
    step = initialize(graph, start_id)
    steps = [step]
    while not step.is_done:
        step = advance(step)
        steps.append(step)
    steps[-1] = finish(steps[-1], end_id)
    return build_result(steps, end_id)


def build_result(steps: Sequence[DijkstraStep], end_id: str) -> DijkstraResult:
    """Summarise a finished timeline."""
    last = steps[-1]
    d = last.distance_to(end_id)
    return DijkstraResult(
        success=last.shortest_path is not None,
        steps=tuple(steps),
        shortest_path=last.shortest_path,
        shortest_distance=None if d == INF else d,
    )


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------
def _recolour(graph: Graph, current: str, visited: Set[str]) -> None:
    for node in graph.nodes.values():
        if node.id == current:
            if node.status is not NodeStatus.START:
                node.status = NodeStatus.CURRENT
        elif node.id in visited:
            if node.status is not NodeStatus.END:
                node.status = NodeStatus.VISITED


def _closest_unvisited(
    graph: Graph,
    unvisited: Set[str],
    distances: Dict[str, float],
) -> Optional[str]:
    best, best_d = None, INF
    for nid in graph.nodes:
        if nid in unvisited and distances.get(nid, INF) < best_d:
            best, best_d = nid, distances[nid]
    return best


def _explain(
    graph: Graph,
    u: str,
    d_u: float,
    relaxed: List[Tuple[str, float]],
    nxt: Optional[str],
    distances: Dict[str, float],
) -> str:
    label = graph.label_of
    parts = [f"Visit '{label(u)}' (distance {format_distance(d_u)}); its distance is now final."]
    if relaxed:
        updates = ", ".join(f"{label(v)} → {format_distance(d)}" for v, d in relaxed)
        parts.append(f"Updated: {updates}.")
    else:
        parts.append("No neighbour improved.")
    if nxt is None:
        parts.append("No reachable unvisited node remains.")
    else:
        parts.append(f"Next: '{label(nxt)}' with distance {format_distance(distances[nxt])}.")
    return " ".join(parts)
