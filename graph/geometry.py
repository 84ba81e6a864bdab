"""
geometry.py — Editor Helpers
=============================
Small pure functions the canvas editor leans on: id / label generation,
point distance, hit-testing, edge midpoints and the default weight
proposed for a freshly drawn edge.

None of this matters to the shortest-path engine.
"""

import math
import string
import uuid
from typing import Iterable, Optional, Tuple, TYPE_CHECKING

from config import EDGE_WEIGHT_SCALE

if TYPE_CHECKING:
    from graph.node import Node


def generate_id() -> str:
    """Short random id, e.g. '3f9a1c2e'."""
    return uuid.uuid4().hex[:8]


def calculate_distance(x1: float, y1: float, x2: float, y2: float) -> float:
    return math.hypot(x2 - x1, y2 - y1)


def find_node_at(
    nodes: Iterable["Node"],
    x: float,
    y: float,
    tolerance: float = 20,
) -> Optional["Node"]:
    """First node whose centre is within `tolerance` px of (x, y)."""
    for node in nodes:
        if calculate_distance(node.x, node.y, x, y) <= tolerance:
            return node
    return None


def edge_midpoint(source: "Node", target: "Node") -> Tuple[float, float]:
    """Where the weight label goes."""
    return (source.x + target.x) / 2, (source.y + target.y) / 2


def next_letter_label(nodes: Iterable["Node"]) -> str:
    """
    Next single-letter label after the highest one already in use.

    Only one-character labels A–Z count; anything else is ignored.
    After 'Z' the sequence wraps back to 'A' (labels may then repeat,
    which is fine since ids stay unique).
    """
    labels = [n.label for n in nodes]
    if not labels:
        return "A"

    highest = "A"
    for label in labels:
        if len(label) == 1 and label in string.ascii_uppercase and label > highest:
            highest = label

    if highest == "Z":
        return "A"
    return chr(ord(highest) + 1)


def default_edge_weight(
    source: "Node",
    target: "Node",
    scale: float = EDGE_WEIGHT_SCALE,
) -> int:
    """Weight proposed when connecting two nodes: roughly proportional to their distance."""
    return max(1, round(source.distance_to(target) / scale))
