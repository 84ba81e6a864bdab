"""
canvas.py — SVG Graph Renderer
================================
Pure rendering function: Graph (+ optional DijkstraStep) → SVG string.

The renderer consumes:
  • graph      – the Graph being edited (used when no step is shown)
  • step       – the current DijkstraStep; its own graph copy carries the
                 colouring for that frame and replaces `graph`
  • start/end  – the selected endpoints, which always win the colouring
  • config     – visual config (canvas size, colours, fonts, …)

Design decisions:
  - NO mutation.  The caller passes in everything and gets back a string.
  - Status-based colouring is a dict lookup: NodeStatus value → hex colour.
  - Each node / edge sits in a <g> carrying `data-id`, which is what the
    browser-side click, drag and context-menu handlers key on.
"""

import math
from html import escape
from typing import Dict, Optional

from graph import Graph, Node, Edge, NodeStatus, EdgeStatus
from graph.geometry import edge_midpoint
from algorithms import DijkstraStep, format_distance
import config as app_config


# ---------------------------------------------------------------------------
# Visual Config: colour palette, dimensions, fonts
# ---------------------------------------------------------------------------
class CanvasConfig:
    # canvas
    width:  int = app_config.CANVAS_WIDTH
    height: int = app_config.CANVAS_HEIGHT
    bg:     str = "#0d1117"

    # node colours (status → fill)
    node_colors: Dict[str, str] = {
        NodeStatus.DEFAULT.value: "#1c2128",   # dark grey
        NodeStatus.VISITED.value: "#10b981",   # emerald, finalised
        NodeStatus.CURRENT.value: "#f59e0b",   # amber, being processed
        NodeStatus.START.value:   "#0ea5e9",   # cyan
        NodeStatus.END.value:     "#ec4899",   # pink
        NodeStatus.PATH.value:    "#a855f7",   # purple, on the final path
    }
    selected_color: str = "#facc15"            # editor selection ring

    # edge colours
    edge_colors: Dict[str, str] = {
        EdgeStatus.DEFAULT.value: "#30363d",
        EdgeStatus.PATH.value:    "#a855f7",
    }

    # node
    node_radius:        int = 20
    node_stroke:        str = "#30363d"
    node_stroke_width:  int = 2
    node_label_color:   str = "#e6edf3"
    node_label_size:    int = 13
    node_label_weight:  str = "600"

    # edge
    edge_width:         int = 2
    edge_width_path:    int = 4
    edge_weight_color:  str = "#7d8590"
    edge_weight_size:   int = 12
    edge_weight_bg:     str = "#161b22"

    # distance badge under each node while a run is shown
    badge_color:        str = "#7d8590"
    badge_size:         int = 11


CONFIG = CanvasConfig()


# ---------------------------------------------------------------------------
# Main Render Function
# ---------------------------------------------------------------------------
def render_canvas(
    graph: Graph,
    step: Optional[DijkstraStep] = None,
    start_id: Optional[str] = None,
    end_id: Optional[str] = None,
    selected_id: Optional[str] = None,
    config: CanvasConfig = CONFIG,
) -> str:
    """
    Returns an SVG string.

    Args:
        graph       : The graph to render when no step is active.
        step        : Current algorithm step (or None for the plain editor view).
        start_id    : Selected start node, drawn in the start colour.
        end_id      : Selected end node, drawn in the end colour.
        selected_id : Node picked as the first end of a new edge.
        config      : Visual config.
    """
    shown = step.graph if step is not None else graph

    svg_parts = [
        f'<svg id="graph-svg" width="{config.width}" height="{config.height}" '
        f'viewBox="0 0 {config.width} {config.height}" '
        f'xmlns="http://www.w3.org/2000/svg" style="background: {config.bg};">',
        f'<rect width="{config.width}" height="{config.height}" fill="{config.bg}"/>',
    ]

    # -- edges (draw first so nodes sit on top) --
    for edge in shown.edges.values():
        svg_parts.append(_render_edge(shown, edge, config))

    # -- nodes --
    for node in shown.nodes.values():
        svg_parts.append(_render_node(node, step, start_id, end_id, selected_id, config))

    svg_parts.append("</svg>")
    return "\n".join(p for p in svg_parts if p)


def node_fill(
    node: Node,
    start_id: Optional[str] = None,
    end_id: Optional[str] = None,
    config: CanvasConfig = CONFIG,
) -> str:
    """Fill colour for `node`; the selected endpoints override its status."""
    if node.id == start_id:
        key = NodeStatus.START.value
    elif node.id == end_id:
        key = NodeStatus.END.value
    else:
        key = node.status.value
    return config.node_colors.get(key, config.node_colors[NodeStatus.DEFAULT.value])


# ---------------------------------------------------------------------------
# Node Rendering
# ---------------------------------------------------------------------------
def _render_node(
    node: Node,
    step: Optional[DijkstraStep],
    start_id: Optional[str],
    end_id: Optional[str],
    selected_id: Optional[str],
    config: CanvasConfig,
) -> str:
    fill = node_fill(node, start_id, end_id, config)

    stroke = config.node_stroke
    stroke_width = config.node_stroke_width
    glow = ""

    if step is not None and step.current_node == node.id:
        current = config.node_colors[NodeStatus.CURRENT.value]
        stroke = current
        stroke_width = 3
        glow = (
            f'  <circle cx="{node.x}" cy="{node.y}" r="{config.node_radius + 8}" fill="none" '
            f'stroke="{current}" stroke-width="2" opacity="0.35"/>'
        )
    elif node.id == selected_id:
        stroke = config.selected_color
        stroke_width = 3

    cx, cy = node.x, node.y
    r = config.node_radius

    parts = [
        f'<g class="node" data-id="{escape(node.id)}" data-status="{node.status.value}">',
        glow,
        f'  <circle cx="{cx}" cy="{cy}" r="{r}" '
        f'fill="{fill}" stroke="{stroke}" stroke-width="{stroke_width}"/>',
        f'  <text x="{cx}" y="{cy + 5}" text-anchor="middle" '
        f'font-size="{config.node_label_size}" font-family="\'DM Sans\', sans-serif" '
        f'fill="{config.node_label_color}" font-weight="{config.node_label_weight}" '
        f'pointer-events="none">{escape(node.label)}</text>',
    ]

    if step is not None:
        parts.append(
            f'  <text x="{cx}" y="{cy + r + 16}" text-anchor="middle" '
            f'font-size="{config.badge_size}" font-family="\'JetBrains Mono\', monospace" '
            f'fill="{config.badge_color}" pointer-events="none">'
            f'{format_distance(step.distance_to(node.id))}</text>'
        )

    parts.append('</g>')
    return "\n".join(p for p in parts if p)


# ---------------------------------------------------------------------------
# Edge Rendering
# ---------------------------------------------------------------------------
def _render_edge(graph: Graph, edge: Edge, config: CanvasConfig) -> str:
    src_node = graph.get_node(edge.source)
    tgt_node = graph.get_node(edge.target)
    if not src_node or not tgt_node:
        return ""

    on_path = edge.status is EdgeStatus.PATH
    stroke = config.edge_colors.get(edge.status.value, config.edge_colors[EdgeStatus.DEFAULT.value])
    stroke_width = config.edge_width_path if on_path else config.edge_width

    x1, y1 = src_node.x, src_node.y
    x2, y2 = tgt_node.x, tgt_node.y

    dx, dy = x2 - x1, y2 - y1
    dist = math.sqrt(dx * dx + dy * dy)
    if dist < 0.001:
        return ""  # degenerate edge

    # shorten the line by node_radius on both ends
    ux, uy = dx / dist, dy / dist
    r = config.node_radius

    parts = [
        f'<g class="edge" data-id="{escape(edge.id)}" data-status="{edge.status.value}">',
        f'  <line x1="{x1 + ux * r}" y1="{y1 + uy * r}" x2="{x2 - ux * r}" y2="{y2 - uy * r}" '
        f'stroke="{stroke}" stroke-width="{stroke_width}"/>',
    ]

    # weight label at the midpoint, nudged off the line
    mx, my = edge_midpoint(src_node, tgt_node)
    lx, ly = mx - uy * 12, my + ux * 12
    parts.append(
        f'  <circle cx="{lx}" cy="{ly}" r="12" fill="{config.edge_weight_bg}" opacity="0.9"/>'
    )
    parts.append(
        f'  <text class="edge-weight" data-id="{escape(edge.id)}" x="{lx}" y="{ly + 4}" '
        f'text-anchor="middle" font-size="{config.edge_weight_size}" '
        f'font-family="\'DM Sans\', sans-serif" fill="{config.edge_weight_color}" '
        f'font-weight="600">{format_distance(edge.weight)}</text>'
    )

    parts.append('</g>')
    return "\n".join(parts)
