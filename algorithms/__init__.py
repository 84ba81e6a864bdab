"""
algorithms/
-----------
The step-wise shortest-path engine.

    from algorithms import initialize, advance, finish, run
    from algorithms import reconstruct_path, highlight_path
"""

from algorithms.step     import DijkstraStep, DijkstraResult, INF, format_distance
from algorithms.path     import reconstruct_path, highlight_path, path_weight
from algorithms.dijkstra import (
    PSEUDOCODE,
    initialize,
    advance,
    finish,
    run,
    build_result,
)

LABEL = "Dijkstra's Algorithm"

__all__ = [
    "DijkstraStep",
    "DijkstraResult",
    "INF",
    "format_distance",
    "reconstruct_path",
    "highlight_path",
    "path_weight",
    "PSEUDOCODE",
    "LABEL",
    "initialize",
    "advance",
    "finish",
    "run",
    "build_result",
]
