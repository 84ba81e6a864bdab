"""
path.py — Path Reconstruction & Highlighting
=============================================
Turns a predecessor map into the ordered start → end path and paints
that path onto a graph copy for the final frame.
"""

from typing import Dict, Optional, Sequence, Tuple

from graph import Graph, NodeStatus, EdgeStatus


def reconstruct_path(
    end_id: str,
    previous: Dict[str, Optional[str]],
    start_id: Optional[str] = None,
) -> Optional[Tuple[str, ...]]:
    """
    Walk `previous` back from `end_id`.

    Returns the start-to-end tuple of node ids, or None when `end_id` is
    unknown or was never reached (no predecessor and not the start).
    For end_id == start_id the path is just (start_id,).
    """
    if end_id not in previous:
        return None
    if previous[end_id] is None and end_id != start_id:
        return None

    path = []
    cur: Optional[str] = end_id
    seen = set()
    while cur is not None:
        if cur in seen:
            # only reachable with a corrupted predecessor map
            raise ValueError(f"Predecessor cycle through {cur!r}")
        seen.add(cur)
        path.append(cur)
        cur = previous.get(cur)
    path.reverse()
    return tuple(path)


def highlight_path(graph: Graph, path: Optional[Sequence[str]]) -> Graph:
    """
    Copy of `graph` with `path` painted on it.

    Path nodes become PATH unless they are START / END; every edge joining
    two consecutive path nodes becomes PATH.  Paths shorter than two nodes
    leave the copy untouched.
    """
    out = graph.copy()
    if not path or len(path) < 2:
        return out

    on_path = set(path)
    for node in out.nodes.values():
        if node.id in on_path and not node.is_endpoint:
            node.status = NodeStatus.PATH

    for a, b in zip(path, path[1:]):
        edge = out.get_edge_between(a, b)
        if edge:
            edge.status = EdgeStatus.PATH
    return out


def path_weight(graph: Graph, path: Optional[Sequence[str]]) -> float:
    """Sum of edge weights along `path`.  Missing edges raise KeyError."""
    if not path:
        return 0.0
    total = 0.0
    for a, b in zip(path, path[1:]):
        edge = graph.get_edge_between(a, b)
        if edge is None:
            raise KeyError(f"No edge between {a!r} and {b!r}")
        total += edge.weight
    return total
