"""
recorder.py — Run Recorder & Analytics
========================================
Records a complete Dijkstra run (all steps), then computes the metrics
the Analytics panel renders.

Usage:
    rec = Recorder()
    rec.start(graph=g, start_id="A", end_id="E")
    metrics = rec.run_to_completion()   # drives the stepper to the end
    rec.result                          # DijkstraResult for the timeline
    rec.export()                        # JSON-serialisable snapshot
"""

import logging
import time
from dataclasses import dataclass, asdict
from typing import Optional, List, Dict, Any

from graph import Graph
from algorithms import DijkstraStep, DijkstraResult, LABEL, build_result, path_weight, format_distance
from engine.stepper import Stepper

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Metrics dataclass: what the Analytics panel renders
# ---------------------------------------------------------------------------
@dataclass
class RunMetrics:
    algo_label:        str             = LABEL
    start_id:          str             = ""
    end_id:            str             = ""
    nodes_visited:     int             = 0
    total_steps:       int             = 0          # number of snapshots, step 0 included
    path_length:       int             = 0          # number of edges on the final path
    path_cost:         float           = 0.0        # sum of edge weights along the path
    shortest_distance: Optional[float] = None       # None when the end is unreachable
    path_found:        bool            = False
    wall_time_ms:      float           = 0.0


# ---------------------------------------------------------------------------
# Recorder
# ---------------------------------------------------------------------------
class Recorder:
    """
    Attributes:
        steps   : Full list of DijkstraSteps from the run.
        metrics : Computed RunMetrics (available after run_to_completion).
        stepper : The underlying Stepper.
    """

    def __init__(self):
        self.steps:   List[DijkstraStep]   = []
        self.metrics: Optional[RunMetrics] = None
        self.stepper: Optional[Stepper]    = None

        self._graph:    Optional[Graph] = None
        self._start_id: str             = ""
        self._end_id:   str             = ""

    # ------------------------------------------------------------------
    # Setup & run
    # ------------------------------------------------------------------
    def start(self, graph: Graph, start_id: str, end_id: str) -> None:
        """Prepare a stepper for this run.  Unknown ids raise NodeNotFoundError."""
        self._graph    = graph
        self._start_id = start_id
        self._end_id   = end_id
        self.steps     = []
        self.metrics   = None

        self.stepper = Stepper()
        self.stepper.start(graph, start_id, end_id)

    def run_to_completion(self) -> RunMetrics:
        """Compute every step, keep them, derive the metrics."""
        if self.stepper is None:
            raise RuntimeError("Call start() first.")

        t0 = time.monotonic()
        self.stepper.jump_to_end()
        wall_ms = (time.monotonic() - t0) * 1000

        self.steps   = list(self.stepper.steps)
        self.metrics = self._compute_metrics(wall_ms)
        logger.debug("Run %s -> %s: %s", self._start_id, self._end_id, self.metrics)
        return self.metrics

    def get_metrics(self) -> Optional[RunMetrics]:
        return self.metrics

    @property
    def result(self) -> Optional[DijkstraResult]:
        if not self.steps:
            return None
        return build_result(self.steps, self._end_id)

    # ------------------------------------------------------------------
    # Export (serialisable snapshot)
    # ------------------------------------------------------------------
    def export(self) -> Dict[str, Any]:
        metrics: Dict[str, Any] = asdict(self.metrics) if self.metrics else {}
        if metrics and metrics["shortest_distance"] is None:
            metrics["shortest_distance"] = format_distance(float("inf"))
        return {
            "algorithm": LABEL,
            "start_id":  self._start_id,
            "end_id":    self._end_id,
            "graph":     self._graph.to_dict() if self._graph else {},
            "metrics":   metrics,
            "steps":     [s.to_dict() for s in self.steps],
        }

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _compute_metrics(self, wall_ms: float) -> RunMetrics:
        result = self.result
        last   = self.steps[-1] if self.steps else None
        path   = result.shortest_path if result else None

        return RunMetrics(
            start_id=self._start_id,
            end_id=self._end_id,
            nodes_visited=len(last.visited) if last else 0,
            total_steps=len(self.steps),
            path_length=len(path) - 1 if path else 0,
            path_cost=path_weight(last.graph, path) if (last and path) else 0.0,
            shortest_distance=result.shortest_distance if result else None,
            path_found=bool(result and result.success),
            wall_time_ms=round(wall_ms, 2),
        )
