"""
main.py — Dijkstra Visualizer Flask App
=========================================
The web server that powers the visualizer.

Routes:
  GET  /                       – main UI
  GET  /api/state              – current workspace state + rendered panels
  GET  /api/run/export         – full timeline of the current run as JSON
  POST /api/graph/demo         – load the A–E demo graph
  POST /api/graph/clear        – empty the canvas
  POST /api/graph/import       – import from adjacency-list text
  POST /api/graph/random       – generate a random graph
  POST /api/canvas/click       – add node / select / propose edge / pick endpoint
  POST /api/node/move          – drag a node
  POST /api/node/delete        – delete a node and its edges
  POST /api/node/rename        – change a node's label
  POST /api/edge/add           – connect two nodes
  POST /api/edge/delete        – remove an edge
  POST /api/edge/weight        – change an edge's weight
  POST /api/endpoints          – choose start / end nodes
  POST /api/mode               – switch between edit and view mode
  POST /api/run                – validate endpoints and start a run
  POST /api/step/next          – advance one step
  POST /api/step/prev          – rewind one step
  POST /api/step/goto          – jump to step N
  POST /api/reset              – leave the run, back to editing
  POST /api/config/speed       – auto-run speed preset

State management:
  Each browser gets a workspace id in its Flask session cookie.  The
  workspace itself (graph, endpoints, run position, …) lives in an
  in-process dict, so the cookie stays small.  The run's timeline is
  never stored: every step request re-runs the engine up to the wanted
  index, which is deterministic for a given graph and endpoints.
"""

from flask import Flask, render_template_string, request, jsonify, session, abort
import logging
import math
import uuid
import sys
import os
from collections import OrderedDict
from typing import Dict, Any, Optional

# add project root to path so imports work
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

import config
from graph import Graph, GraphError
from graph.geometry import find_node_at, default_edge_weight
from algorithms import PSEUDOCODE
from engine import Stepper, Recorder, RunMetrics
from ui import (
    render_canvas,
    control_panel,
    graph_toolbar,
    info_panel,
    analytics_panel,
    pseudocode_viewer,
    explanation_panel,
)

logger = logging.getLogger(__name__)

app = Flask(__name__)
app.secret_key = config.SECRET_KEY

MSG_SELECT_BOTH = "Please select both start and end nodes"
MSG_DISTINCT    = "Start and end nodes must be different"
MSG_RUNNING     = "Reset the current run before editing the graph"
MSG_NOT_RUNNING = "Press Run to start the algorithm first"

# workspace_id → workspace dict, least recently used first
WORKSPACES: "OrderedDict[str, Dict[str, Any]]" = OrderedDict()


# ---------------------------------------------------------------------------
# Workspace Helpers
# ---------------------------------------------------------------------------
def new_workspace() -> Dict[str, Any]:
    return {
        "graph":       Graph.demo(),
        "start_id":    None,
        "end_id":      None,
        "mode":        "edit",
        "selected_id": None,
        "running":     False,
        "step_idx":    0,
        "total_steps": 0,
        "metrics":     None,
        "speed":       config.DEFAULT_SPEED,
    }


def get_workspace() -> Dict[str, Any]:
    """The calling browser's workspace, created on first use."""
    wid = session.get("workspace_id")
    if wid is not None and wid in WORKSPACES:
        WORKSPACES.move_to_end(wid)
        return WORKSPACES[wid]

    wid = uuid.uuid4().hex
    session["workspace_id"] = wid
    WORKSPACES[wid] = new_workspace()
    logger.info("Created workspace %s", wid[:8])
    while len(WORKSPACES) > max(1, config.MAX_WORKSPACES):
        evicted, _ = WORKSPACES.popitem(last=False)
        logger.info("Evicted workspace %s", evicted[:8])
    return WORKSPACES[wid]


def require_editable(ws: Dict[str, Any]) -> None:
    if ws["running"]:
        abort(409, description=MSG_RUNNING)


def require_running(ws: Dict[str, Any]) -> None:
    if not ws["running"]:
        abort(409, description=MSG_NOT_RUNNING)


def json_body() -> Dict[str, Any]:
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def number_arg(data: Dict[str, Any], key: str) -> float:
    try:
        value = float(data[key])
    except KeyError:
        abort(400, description=f"Missing field: {key}")
    except (TypeError, ValueError, OverflowError):
        abort(400, description=f"Field {key} must be a number")
    if not math.isfinite(value):
        abort(400, description=f"Field {key} must be a finite number")
    return value


def seed_arg(data: Dict[str, Any]) -> Optional[int]:
    seed = data.get("seed")
    if seed is not None and (isinstance(seed, bool) or not isinstance(seed, int)):
        abort(400, description="Field seed must be an integer")
    return seed


def text_arg(data: Dict[str, Any], key: str) -> str:
    value = data.get(key)
    if not isinstance(value, str) or not value.strip():
        abort(400, description=f"Field {key} must be a non-empty string")
    return value.strip()


def replace_graph(ws: Dict[str, Any], graph: Graph,
                  start_id: Optional[str] = None, end_id: Optional[str] = None) -> None:
    ws.update(graph=graph, start_id=start_id, end_id=end_id, selected_id=None)


def forget_node(ws: Dict[str, Any], node_id: str) -> None:
    for key in ("start_id", "end_id", "selected_id"):
        if ws[key] == node_id:
            ws[key] = None


def stepper_for(ws: Dict[str, Any]) -> Stepper:
    """Re-run the engine on the workspace graph up to the current step."""
    stepper = Stepper()
    stepper.set_speed(ws["speed"])
    stepper.start(ws["graph"], ws["start_id"], ws["end_id"])
    stepper.goto_step(ws["step_idx"])
    return stepper


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------
def render_panels(ws: Dict[str, Any]) -> Dict[str, Any]:
    """Every dynamic fragment of the page plus the state the browser script needs."""
    step = None
    is_finished = False
    if ws["running"]:
        stepper = stepper_for(ws)
        step = stepper.current_step
        is_finished = stepper.is_at_end

    metrics: Optional[RunMetrics] = ws["metrics"]
    return {
        "svg": render_canvas(
            ws["graph"], step,
            start_id=ws["start_id"],
            end_id=ws["end_id"],
            selected_id=ws["selected_id"],
        ),
        "controls": control_panel(
            ws["graph"],
            start_id=ws["start_id"],
            end_id=ws["end_id"],
            mode=ws["mode"],
            is_running=ws["running"],
            current_step=ws["step_idx"] + 1 if ws["running"] else 0,
            total_steps=ws["total_steps"],
            is_finished=is_finished,
            speed=ws["speed"],
        ),
        "info":        info_panel(step, ws["end_id"]),
        "analytics":   analytics_panel(metrics if ws["running"] else None),
        "pseudocode":  pseudocode_viewer(PSEUDOCODE, step.pseudocode_line if step else -1),
        "explanation": explanation_panel(step.explanation if step else ""),
        "mode":         ws["mode"],
        "running":      ws["running"],
        "start_id":     ws["start_id"],
        "end_id":       ws["end_id"],
        "selected_id":  ws["selected_id"],
        "current_step": ws["step_idx"],
        "total_steps":  ws["total_steps"],
        "is_finished":  is_finished,
        "interval_ms":  int(config.SPEED_PRESETS.get(ws["speed"], config.AUTO_RUN_INTERVAL_MS / 1000) * 1000),
    }


def respond(ws: Dict[str, Any], **extra):
    payload = render_panels(ws)
    payload.update(extra)
    return jsonify(payload)


# ---------------------------------------------------------------------------
# Error Handlers
# ---------------------------------------------------------------------------
@app.errorhandler(GraphError)
def handle_graph_error(err: GraphError):
    logger.warning("Rejected %s: %s", request.path, err)
    return jsonify({"error": str(err)}), 400


@app.errorhandler(400)
@app.errorhandler(409)
def handle_bad_request(err):
    logger.warning("Rejected %s (%s): %s", request.path, err.code, err.description)
    return jsonify({"error": err.description}), err.code


_HTML_KEYS = {"svg", "controls", "info", "analytics", "pseudocode", "explanation"}


# ---------------------------------------------------------------------------
# Main UI Route
# ---------------------------------------------------------------------------
@app.route("/")
def index():
    ws = get_workspace()
    panels = render_panels(ws)

    html = render_template_string(INDEX_TEMPLATE,
        svg=panels["svg"],
        controls=panels["controls"],
        toolbar=graph_toolbar(),
        info=panels["info"],
        analytics=panels["analytics"],
        pseudocode=panels["pseudocode"],
        explanation=panels["explanation"],
        state={k: v for k, v in panels.items() if k not in _HTML_KEYS},
    )
    return html


@app.route("/api/state", methods=["GET"])
def api_state():
    ws = get_workspace()
    return respond(ws, graph=ws["graph"].to_dict())


# ---------------------------------------------------------------------------
# API: Whole-graph actions
# ---------------------------------------------------------------------------
@app.route("/api/graph/demo", methods=["POST"])
def api_graph_demo():
    ws = get_workspace()
    require_editable(ws)
    replace_graph(ws, Graph.demo(), start_id="A", end_id="E")
    logger.info("Loaded demo graph")
    return respond(ws, message="Demo graph loaded")


@app.route("/api/graph/clear", methods=["POST"])
def api_graph_clear():
    ws = get_workspace()
    require_editable(ws)
    replace_graph(ws, Graph())
    logger.info("Cleared graph")
    return respond(ws, message="Graph cleared")


@app.route("/api/graph/import", methods=["POST"])
def api_graph_import():
    ws = get_workspace()
    require_editable(ws)
    text = text_arg(json_body(), "text")
    graph = Graph.from_adjacency_list(text, config.CANVAS_WIDTH, config.CANVAS_HEIGHT)
    replace_graph(ws, graph)
    logger.info("Imported graph: %d nodes, %d edges", graph.node_count(), graph.edge_count())
    return respond(ws, message="Graph imported")


@app.route("/api/graph/random", methods=["POST"])
def api_graph_random():
    ws = get_workspace()
    require_editable(ws)
    data = json_body()
    num_nodes = int(number_arg(data, "nodes")) if "nodes" in data else config.RANDOM_NUM_NODES
    prob = number_arg(data, "prob") if "prob" in data else config.RANDOM_EDGE_PROBABILITY
    seed = seed_arg(data)
    if not 0.0 <= prob <= 1.0:
        abort(400, description="Edge probability must be between 0 and 1")

    graph = Graph.generate_random(
        num_nodes=num_nodes,
        edge_probability=prob,
        weight_range=config.RANDOM_WEIGHT_RANGE,
        seed=seed,
        canvas_w=config.CANVAS_WIDTH,
        canvas_h=config.CANVAS_HEIGHT,
    )
    replace_graph(ws, graph)
    logger.info("Generated random graph: %d nodes, %d edges", graph.node_count(), graph.edge_count())
    return respond(ws, message="Random graph generated")


# ---------------------------------------------------------------------------
# API: Canvas editing
# ---------------------------------------------------------------------------
@app.route("/api/canvas/click", methods=["POST"])
def api_canvas_click():
    """
    One click on the canvas.  With `pick` = "start" / "end" a hit node
    becomes that endpoint.  Otherwise, in edit mode: empty space adds a
    node, a first node click selects it, clicking it again deselects it,
    and clicking a second node proposes an edge with a default weight
    (the browser confirms it through /api/edge/add).
    """
    ws = get_workspace()
    require_editable(ws)
    data = json_body()
    x, y = number_arg(data, "x"), number_arg(data, "y")
    graph: Graph = ws["graph"]
    hit = find_node_at(graph.nodes.values(), x, y, tolerance=config.NODE_HIT_TOLERANCE)

    pick = data.get("pick")
    if pick in ("start", "end"):
        if hit is None:
            return respond(ws, action="none")
        ws[f"{pick}_id"] = hit.id
        return respond(ws, action="endpoint", message=f"Node {hit.label} set as {pick} node")

    if ws["mode"] != "edit":
        return respond(ws, action="none")

    if hit is None:
        node = graph.create_node(x, y)
        ws["selected_id"] = None
        return respond(ws, action="node_created", node=node.to_dict())

    selected = ws["selected_id"]
    if selected is None or not graph.has_node(selected):
        ws["selected_id"] = hit.id
        return respond(ws, action="selected", node_id=hit.id)
    if selected == hit.id:
        ws["selected_id"] = None
        return respond(ws, action="deselected", node_id=hit.id)

    ws["selected_id"] = None
    if graph.edge_exists(selected, hit.id):
        return respond(ws, action="edge_exists", message="Edge already exists between these nodes")

    source = graph.require_node(selected)
    return respond(
        ws,
        action="edge_proposed",
        source=source.id,
        target=hit.id,
        source_label=source.label,
        target_label=hit.label,
        weight=default_edge_weight(source, hit, scale=config.EDGE_WEIGHT_SCALE),
    )


@app.route("/api/node/move", methods=["POST"])
def api_node_move():
    ws = get_workspace()
    require_editable(ws)
    data = json_body()
    ws["graph"].move_node(text_arg(data, "node_id"), number_arg(data, "x"), number_arg(data, "y"))
    return respond(ws)


@app.route("/api/node/delete", methods=["POST"])
def api_node_delete():
    ws = get_workspace()
    require_editable(ws)
    node_id = text_arg(json_body(), "node_id")
    ws["graph"].remove_node(node_id)
    forget_node(ws, node_id)
    return respond(ws, message="Node removed")


@app.route("/api/node/rename", methods=["POST"])
def api_node_rename():
    ws = get_workspace()
    require_editable(ws)
    data = json_body()
    ws["graph"].rename_node(text_arg(data, "node_id"), text_arg(data, "label"))
    return respond(ws)


@app.route("/api/edge/add", methods=["POST"])
def api_edge_add():
    ws = get_workspace()
    require_editable(ws)
    data = json_body()
    graph: Graph = ws["graph"]
    source, target = text_arg(data, "source"), text_arg(data, "target")
    if data.get("weight") in (None, ""):
        weight = default_edge_weight(
            graph.require_node(source), graph.require_node(target), scale=config.EDGE_WEIGHT_SCALE
        )
    else:
        weight = data["weight"]
    edge = graph.create_edge(source, target, weight=weight)
    ws["selected_id"] = None
    return respond(ws, edge=edge.to_dict(), message=f"Edge created with weight {edge.weight}")


@app.route("/api/edge/delete", methods=["POST"])
def api_edge_delete():
    ws = get_workspace()
    require_editable(ws)
    ws["graph"].remove_edge(text_arg(json_body(), "edge_id"))
    return respond(ws, message="Edge removed")


@app.route("/api/edge/weight", methods=["POST"])
def api_edge_weight():
    ws = get_workspace()
    require_editable(ws)
    data = json_body()
    if "weight" not in data:
        abort(400, description="Missing field: weight")
    ws["graph"].set_edge_weight(text_arg(data, "edge_id"), data["weight"])
    return respond(ws)


# ---------------------------------------------------------------------------
# API: Run configuration
# ---------------------------------------------------------------------------
@app.route("/api/endpoints", methods=["POST"])
def api_endpoints():
    ws = get_workspace()
    require_editable(ws)
    data = json_body()
    graph: Graph = ws["graph"]
    for key in ("start_id", "end_id"):
        if key in data:
            value = data[key] or None
            if value is not None:
                graph.require_node(value)
            ws[key] = value
    return respond(ws)


@app.route("/api/mode", methods=["POST"])
def api_mode():
    ws = get_workspace()
    mode = json_body().get("mode")
    if mode not in ("edit", "view"):
        abort(400, description="Mode must be 'edit' or 'view'")
    ws["mode"] = mode
    ws["selected_id"] = None
    return respond(ws)


@app.route("/api/config/speed", methods=["POST"])
def api_config_speed():
    ws = get_workspace()
    speed = json_body().get("speed", config.DEFAULT_SPEED)
    if speed not in config.SPEED_PRESETS:
        abort(400, description=f"Unknown speed: {speed}")
    ws["speed"] = speed
    return respond(ws)


# ---------------------------------------------------------------------------
# API: Run & Step Navigation
# ---------------------------------------------------------------------------
@app.route("/api/run", methods=["POST"])
def api_run():
    ws = get_workspace()
    start_id, end_id = ws["start_id"], ws["end_id"]
    if not start_id or not end_id:
        return jsonify({"error": MSG_SELECT_BOTH}), 400
    if start_id == end_id:
        return jsonify({"error": MSG_DISTINCT}), 400

    rec = Recorder()
    rec.start(ws["graph"], start_id, end_id)
    metrics = rec.run_to_completion()

    ws.update(
        running=True,
        mode="view",
        selected_id=None,
        step_idx=0,
        total_steps=metrics.total_steps,
        metrics=metrics,
    )
    logger.info(
        "Run %s -> %s: %d steps, path found: %s",
        start_id, end_id, metrics.total_steps, metrics.path_found,
    )
    return respond(ws)


@app.route("/api/run/export", methods=["GET"])
def api_run_export():
    ws = get_workspace()
    require_running(ws)
    rec = Recorder()
    rec.start(ws["graph"], ws["start_id"], ws["end_id"])
    rec.run_to_completion()
    return jsonify(rec.export())


@app.route("/api/step/next", methods=["POST"])
def api_step_next():
    ws = get_workspace()
    require_running(ws)
    if ws["step_idx"] >= ws["total_steps"] - 1:
        return jsonify({"error": "Already at last step"}), 400
    ws["step_idx"] += 1
    finished = ws["step_idx"] == ws["total_steps"] - 1
    return respond(ws, message="Algorithm complete!" if finished else None)


@app.route("/api/step/prev", methods=["POST"])
def api_step_prev():
    ws = get_workspace()
    require_running(ws)
    if ws["step_idx"] <= 0:
        return jsonify({"error": "Already at first step"}), 400
    ws["step_idx"] -= 1
    return respond(ws)


@app.route("/api/step/goto", methods=["POST"])
def api_step_goto():
    ws = get_workspace()
    require_running(ws)
    idx = int(number_arg(json_body(), "index"))
    if not 0 <= idx < ws["total_steps"]:
        return jsonify({"error": "Step index out of range"}), 400
    ws["step_idx"] = idx
    return respond(ws)


@app.route("/api/reset", methods=["POST"])
def api_reset():
    ws = get_workspace()
    ws.update(running=False, step_idx=0, total_steps=0, metrics=None, selected_id=None)
    ws["graph"].reset_status()
    return respond(ws)


INDEX_TEMPLATE = """
<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>Dijkstra's Algorithm Visualizer</title>
  <link rel="preconnect" href="https://fonts.googleapis.com">
  <link rel="preconnect" href="https://fonts.gstatic.com" crossorigin>
  <link href="https://fonts.googleapis.com/css2?family=JetBrains+Mono:wght@400;500;700&family=DM+Sans:wght@400;500;700&display=swap" rel="stylesheet">
  <style>
    * { margin: 0; padding: 0; box-sizing: border-box; }

    :root {
      --bg-dark: #0d1117;
      --bg-darker: #010409;
      --bg-panel: #161b22;
      --bg-panel-hover: #1c2128;
      --border: #30363d;
      --text-primary: #e6edf3;
      --text-secondary: #7d8590;
      --text-muted: #484f58;
      --accent-cyan: #0ea5e9;
      --accent-emerald: #10b981;
      --accent-amber: #f59e0b;
      --accent-rose: #f43f5e;
      --accent-purple: #a855f7;
    }

    body {
      font-family: 'DM Sans', -apple-system, BlinkMacSystemFont, sans-serif;
      background: var(--bg-darker);
      color: var(--text-primary);
      display: flex;
      height: 100vh;
      overflow: hidden;
    }

    #sidebar {
      width: 340px;
      background: var(--bg-dark);
      border-right: 1px solid var(--border);
      overflow-y: auto;
      padding: 20px 16px;
    }
    #info-sidebar { width: 360px; background: var(--bg-dark); border-left: 1px solid var(--border); overflow-y: auto; padding: 20px 16px; }

    #main { flex: 1; display: flex; flex-direction: column; }

    #canvas-container {
      flex: 1;
      display: flex;
      align-items: center;
      justify-content: center;
      border-bottom: 1px solid var(--border);
      user-select: none;
    }
    #canvas-svg { max-width: 100%; max-height: 100%; }
    #canvas-svg g.node { cursor: pointer; }
    #canvas-svg text.edge-weight { cursor: text; }

    #bottom-panel {
      display: grid;
      grid-template-columns: 1fr 1fr;
      gap: 16px;
      padding: 16px;
      background: var(--bg-dark);
      height: 300px;
    }
    #pseudocode-container, #explanation-container {
      display: flex;
      flex-direction: column;
      background: var(--bg-panel);
      border: 1px solid var(--border);
      border-radius: 12px;
      padding: 16px;
      overflow: hidden;
    }
    #pseudocode-container h3, #explanation-container h3 {
      font-size: 13px;
      text-transform: uppercase;
      letter-spacing: 0.5px;
      margin-bottom: 12px;
      color: var(--accent-cyan);
    }

    .code-block {
      background: var(--bg-darker);
      border: 1px solid var(--border);
      border-radius: 8px;
      padding: 12px;
      overflow-y: auto;
      flex: 1;
      font-family: 'JetBrains Mono', monospace;
      font-size: 12px;
      white-space: pre;
    }
    .code-line { padding: 3px 10px; border-radius: 6px; }
    .code-line.highlight {
      background: rgba(14, 165, 233, 0.15);
      border-left: 3px solid var(--accent-cyan);
    }
    .explanation-text { color: var(--text-secondary); line-height: 1.8; font-size: 14px; }
    .explanation-text strong { color: var(--text-primary); }

    .panel {
      background: var(--bg-panel);
      border: 1px solid var(--border);
      border-radius: 12px;
      padding: 16px;
      margin-bottom: 16px;
    }
    .panel h3 {
      font-size: 13px;
      margin-bottom: 12px;
      text-transform: uppercase;
      letter-spacing: 0.5px;
    }

    .button-row { display: flex; gap: 8px; margin: 10px 0; }
    button {
      flex: 1;
      background: var(--accent-cyan);
      color: #fff;
      border: none;
      padding: 9px 12px;
      border-radius: 8px;
      cursor: pointer;
      font-size: 13px;
      font-weight: 600;
      font-family: 'DM Sans', sans-serif;
    }
    button:disabled { opacity: 0.4; cursor: not-allowed; }
    .btn-primary { background: var(--accent-emerald); }
    .btn-secondary { background: var(--bg-panel-hover); border: 1px solid var(--border); }
    button.active-pick { outline: 2px solid var(--accent-amber); }

    select, input[type="number"], input[type="range"], textarea {
      width: 100%;
      padding: 8px 10px;
      margin: 6px 0;
      background: var(--bg-darker);
      border: 1px solid var(--border);
      border-radius: 8px;
      color: var(--text-primary);
      font-size: 13px;
    }
    textarea { font-family: 'JetBrains Mono', monospace; min-height: 110px; }
    label {
      display: block;
      margin: 8px 0 4px;
      font-size: 12px;
      color: var(--text-secondary);
      text-transform: uppercase;
    }

    .tabs { display: flex; gap: 6px; margin-bottom: 12px; }
    .tab-btn { background: transparent; border: 1px solid var(--border); }
    .tab-btn.active { background: var(--accent-cyan); }

    .step-info {
      font-size: 13px;
      margin: 10px 0;
      font-family: 'JetBrains Mono', monospace;
      padding: 8px 12px;
      background: var(--bg-darker);
      border-left: 3px solid var(--accent-cyan);
    }
    .finished-badge {
      background: var(--accent-emerald);
      padding: 2px 8px;
      border-radius: 6px;
      font-size: 11px;
    }

    table { width: 100%; font-size: 13px; margin-top: 8px; border-collapse: collapse; }
    table td, table th { padding: 5px 4px; text-align: left; }
    table th { color: var(--text-secondary); font-weight: 500; }
    .distance-table td:nth-child(2) { font-family: 'JetBrains Mono', monospace; color: var(--accent-cyan); }
    tr.current-row td { background: rgba(245, 158, 11, 0.15); }

    .result { margin-top: 12px; padding: 10px; border-radius: 8px; font-size: 13px; }
    .result.found { background: rgba(168, 85, 247, 0.15); border-left: 3px solid var(--accent-purple); }
    .result.not-found { background: rgba(244, 63, 94, 0.15); border-left: 3px solid var(--accent-rose); }
    .warning { color: var(--accent-amber); font-size: 12px; margin-top: 8px; }
    .hint, .placeholder { font-size: 11px; color: var(--text-muted); margin-top: 8px; font-style: italic; }

    #toast {
      position: fixed;
      bottom: 24px;
      left: 50%;
      transform: translateX(-50%);
      padding: 10px 18px;
      border-radius: 8px;
      background: var(--bg-panel);
      border: 1px solid var(--border);
      font-size: 13px;
      opacity: 0;
      transition: opacity 0.3s ease;
      pointer-events: none;
    }
    #toast.show { opacity: 1; }
    #toast.error { border-color: var(--accent-rose); color: var(--accent-rose); }
  </style>
</head>
<body>
  <div id="sidebar">
    <div id="controls">{{ controls|safe }}</div>
    <div id="toolbar">{{ toolbar|safe }}</div>
    <div id="analytics">{{ analytics|safe }}</div>
  </div>

  <div id="main">
    <div id="canvas-container">
      <div id="canvas-svg">{{ svg|safe }}</div>
    </div>

    <div id="bottom-panel">
      <div id="pseudocode-container">
        <h3>Pseudocode</h3>
        <div id="pseudocode">{{ pseudocode|safe }}</div>
      </div>
      <div id="explanation-container">
        <h3>Step Explanation</h3>
        <div id="explanation">{{ explanation|safe }}</div>
      </div>
    </div>
  </div>

  <div id="info-sidebar">
    <div id="info">{{ info|safe }}</div>
  </div>

  <div id="toast"></div>

  <script>
    let state = {{ state|tojson }};
    let pick = null;
    let autoTimer = null;
    let drag = null;

    // Toasts
    let toastTimer = null;
    function toast(message, kind) {
      const el = document.getElementById('toast');
      el.textContent = message;
      el.className = 'show ' + (kind || '');
      clearTimeout(toastTimer);
      toastTimer = setTimeout(() => { el.className = ''; }, 2500);
    }

    // API helpers
    async function request(method, url, data) {
      const res = await fetch(url, {
        method: method,
        headers: {'Content-Type': 'application/json'},
        body: method === 'GET' ? undefined : JSON.stringify(data || {}),
      });
      const json = await res.json();
      if (json.error) toast(json.error, 'error');
      return json;
    }
    const post = (url, data) => request('POST', url, data);

    function apply(data) {
      if (!data || data.error) return data;
      const panes = {svg: 'canvas-svg', controls: 'controls', info: 'info', analytics: 'analytics',
                     pseudocode: 'pseudocode', explanation: 'explanation'};
      for (const [key, id] of Object.entries(panes)) {
        if (data[key] !== undefined) document.getElementById(id).innerHTML = data[key];
      }
      for (const key of Object.keys(state)) {
        if (data[key] !== undefined) state[key] = data[key];
      }
      if (data.message) toast(data.message);
      if (pick) document.getElementById('btn-pick-' + pick)?.classList.add('active-pick');
      return data;
    }

    function stopAuto(message) {
      if (autoTimer) {
        clearInterval(autoTimer);
        autoTimer = null;
        if (message) toast(message);
      }
    }

    async function stepNext() {
      const data = apply(await post('/api/step/next'));
      if (!data || data.error || data.is_finished) stopAuto();
    }

    // Buttons (delegated: panels are re-rendered after every action)
    document.addEventListener('click', async (e) => {
      const btn = e.target.closest('button');
      if (!btn || btn.disabled) return;
      switch (btn.id) {
        case 'btn-run':
          stopAuto();
          apply(await post('/api/run'));
          break;
        case 'btn-reset':
          stopAuto();
          apply(await post('/api/reset'));
          break;
        case 'btn-next':
          stepNext();
          break;
        case 'btn-prev':
          stopAuto();
          apply(await post('/api/step/prev'));
          break;
        case 'btn-rewind':
          stopAuto();
          apply(await post('/api/step/goto', {index: 0}));
          break;
        case 'btn-auto':
          if (autoTimer) { stopAuto('Auto-run paused'); break; }
          toast('Auto-running algorithm');
          autoTimer = setInterval(stepNext, state.interval_ms);
          break;
        case 'btn-mode-edit':
          apply(await post('/api/mode', {mode: 'edit'}));
          break;
        case 'btn-mode-view':
          apply(await post('/api/mode', {mode: 'view'}));
          break;
        case 'btn-pick-start':
        case 'btn-pick-end':
          pick = btn.id === 'btn-pick-start' ? 'start' : 'end';
          document.querySelectorAll('.active-pick').forEach(b => b.classList.remove('active-pick'));
          btn.classList.add('active-pick');
          toast('Click on a node to set as ' + pick + ' node');
          break;
        case 'btn-demo':
          apply(await post('/api/graph/demo'));
          break;
        case 'btn-clear':
          apply(await post('/api/graph/clear'));
          break;
        case 'btn-gen-random':
          apply(await post('/api/graph/random', {
            nodes: +document.getElementById('rand-nodes').value,
            prob: +document.getElementById('rand-prob').value,
          }));
          break;
        case 'btn-import':
          apply(await post('/api/graph/import', {text: document.getElementById('import-text').value}));
          break;
      }
      if (btn.classList.contains('tab-btn')) {
        const tab = btn.dataset.tab;
        document.querySelectorAll('.tab-btn').forEach(b => b.classList.toggle('active', b === btn));
        document.querySelectorAll('.tab-content').forEach(c => {
          c.style.display = c.dataset.tab === tab ? 'block' : 'none';
        });
      }
    });

    document.addEventListener('change', async (e) => {
      if (e.target.id === 'start-selector') apply(await post('/api/endpoints', {start_id: e.target.value}));
      if (e.target.id === 'end-selector') apply(await post('/api/endpoints', {end_id: e.target.value}));
      if (e.target.id === 'speed-selector') {
        apply(await post('/api/config/speed', {speed: e.target.value}));
        if (autoTimer) { stopAuto(); autoTimer = setInterval(stepNext, state.interval_ms); }
      }
    });

    document.addEventListener('input', (e) => {
      if (e.target.id === 'rand-prob') document.getElementById('rand-prob-val').textContent = e.target.value;
    });

    // Canvas: click / drag / context menu / double-click
    const canvas = document.getElementById('canvas-svg');

    function svgPoint(e) {
      const svg = document.getElementById('graph-svg');
      const pt = svg.createSVGPoint();
      pt.x = e.clientX;
      pt.y = e.clientY;
      return pt.matrixTransform(svg.getScreenCTM().inverse());
    }

    canvas.addEventListener('mousedown', (e) => {
      if (e.button !== 0) return;
      const p = svgPoint(e);
      const g = e.target.closest('g.node');
      drag = {id: g ? g.dataset.id : null, el: g, x0: p.x, y0: p.y, moved: false};
    });

    window.addEventListener('mousemove', (e) => {
      if (!drag || !drag.id || state.mode !== 'edit' || state.running) return;
      const p = svgPoint(e);
      if (Math.hypot(p.x - drag.x0, p.y - drag.y0) > 3) drag.moved = true;
      if (drag.moved) drag.el.setAttribute('transform', 'translate(' + (p.x - drag.x0) + ',' + (p.y - drag.y0) + ')');
    });

    window.addEventListener('mouseup', async (e) => {
      if (!drag) return;
      const d = drag;
      drag = null;
      const p = svgPoint(e);
      if (d.moved) {
        apply(await post('/api/node/move', {node_id: d.id, x: p.x, y: p.y}));
        return;
      }
      if (!canvas.contains(e.target)) return;
      const data = apply(await post('/api/canvas/click', {x: p.x, y: p.y, pick: pick}));
      if (pick && data && data.action === 'endpoint') {
        pick = null;
        document.querySelectorAll('.active-pick').forEach(b => b.classList.remove('active-pick'));
      }
      if (data && data.action === 'edge_proposed') {
        const w = prompt('Weight for edge ' + data.source_label + ' - ' + data.target_label + ':', data.weight);
        if (w !== null) apply(await post('/api/edge/add', {source: data.source, target: data.target, weight: w}));
      }
    });

    canvas.addEventListener('contextmenu', async (e) => {
      e.preventDefault();
      if (state.mode !== 'edit' || state.running) return;
      const node = e.target.closest('g.node');
      const edge = e.target.closest('g.edge');
      if (node) apply(await post('/api/node/delete', {node_id: node.dataset.id}));
      else if (edge) apply(await post('/api/edge/delete', {edge_id: edge.dataset.id}));
    });

    canvas.addEventListener('dblclick', async (e) => {
      if (state.mode !== 'edit' || state.running) return;
      const weight = e.target.closest('text.edge-weight');
      const node = e.target.closest('g.node');
      if (weight) {
        const w = prompt('New weight:', weight.textContent);
        if (w !== null) apply(await post('/api/edge/weight', {edge_id: weight.dataset.id, weight: w}));
      } else if (node) {
        const label = prompt('New label:', node.querySelector('text').textContent);
        if (label) apply(await post('/api/node/rename', {node_id: node.dataset.id, label: label}));
      }
    });
  </script>
</body>
</html>
"""


# ---------------------------------------------------------------------------
# Run
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    logging.basicConfig(level=config.LOG_LEVEL, format=config.LOG_FORMAT)
    print("=" * 60)
    print("  Dijkstra's Algorithm Visualizer")
    print("  Starting Flask server...")
    print(f"  Open http://{config.HOST}:{config.PORT}")
    print("=" * 60)
    app.run(host=config.HOST, port=config.PORT, debug=config.DEBUG)
