"""
controls.py — UI Control Panels
=================================
Every UI panel is a pure function that takes state and returns HTML.

Panels:
  • control_panel       – start/end pickers, edit/view mode, run/reset/next/auto-run
  • graph_toolbar       – demo / clear / random / import tabs
  • info_panel          – current node, distance table, result or "no path"
  • analytics_panel     – nodes visited, steps, path cost, …
  • pseudocode_viewer   – with live line highlighting
  • explanation_panel   – "why this step happened"

Design:
  - All panels are stateless render functions.
  - State is passed in as kwargs.
  - Output is raw HTML strings (no templating engine).
  - The main app stitches them together.
"""

from html import escape
from typing import Optional, List

from graph import Graph
from algorithms import DijkstraStep, format_distance
from engine import RunMetrics
import config


NO_PATH_MESSAGE = "No path exists between the selected nodes."
NEGATIVE_WEIGHT_NOTE = (
    "Dijkstra's algorithm assumes every edge weight is non-negative; "
    "with negative weights the result is not guaranteed to be correct."
)


# ---------------------------------------------------------------------------
# Control Panel
# ---------------------------------------------------------------------------
def control_panel(
    graph: Graph,
    start_id: Optional[str] = None,
    end_id: Optional[str] = None,
    mode: str = "edit",
    is_running: bool = False,
    current_step: int = 0,
    total_steps: int = 0,
    is_finished: bool = False,
    speed: str = config.DEFAULT_SPEED,
) -> str:
    def options(selected: Optional[str]) -> str:
        opts = ['<option value="">-- Select node --</option>']
        for node in graph:
            sel = 'selected' if node.id == selected else ''
            opts.append(f'<option value="{escape(node.id)}" {sel}>{escape(node.label)}</option>')
        return ''.join(opts)

    disabled = 'disabled' if is_running else ''
    speed_opts = ''.join(
        f'<option value="{name}" {"selected" if name == speed else ""}>{name.capitalize()}</option>'
        for name in config.SPEED_PRESETS
    )

    return f"""
    <div class="panel control-panel">
      <h3>🎯 Run Dijkstra</h3>
      <label>Start node:
        <select id="start-selector" {disabled}>{options(start_id)}</select>
      </label>
      <label>End node:
        <select id="end-selector" {disabled}>{options(end_id)}</select>
      </label>
      <div class="button-row">
        <button id="btn-pick-start" class="btn-secondary" {disabled}>Pick start on canvas</button>
        <button id="btn-pick-end" class="btn-secondary" {disabled}>Pick end on canvas</button>
      </div>

      <div class="button-row mode-row">
        <button id="btn-mode-edit" class="{'btn-primary' if mode == 'edit' else 'btn-secondary'}" {disabled}>✏ Edit</button>
        <button id="btn-mode-view" class="{'btn-primary' if mode == 'view' else 'btn-secondary'}">👁 View</button>
      </div>

      <div class="button-row">
        <button id="btn-run" class="btn-primary" {disabled}>▶ Run</button>
        <button id="btn-reset" class="btn-secondary">↺ Reset</button>
      </div>
      <div class="button-row">
        <button id="btn-rewind" title="Back to step 0" {'' if is_running else 'disabled'}>⏮</button>
        <button id="btn-prev" title="Previous step" {'' if is_running else 'disabled'}>◀</button>
        <button id="btn-next" title="Next step" {'' if is_running and not is_finished else 'disabled'}>Next ▶</button>
        <button id="btn-auto" title="Auto-run" {'' if is_running and not is_finished else 'disabled'}>⏯ Auto</button>
      </div>

      <div class="step-info">
        Step <span id="current-step">{current_step}</span> / <span id="total-steps">{total_steps}</span>
        {' <span class="finished-badge">FINISHED</span>' if is_finished else ''}
      </div>
      <div class="speed-control">
        <label>Speed:
          <select id="speed-selector">{speed_opts}</select>
        </label>
      </div>
      <p class="hint">Edit mode: click empty canvas to add a node, click two nodes to connect them,
         drag to move, right-click to delete.</p>
    </div>
    """


# ---------------------------------------------------------------------------
# Graph Toolbar
# ---------------------------------------------------------------------------
def graph_toolbar(active_tab: str = "demo") -> str:
    tabs = ["demo", "random", "import"]
    tab_buttons = []
    for t in tabs:
        active = 'active' if t == active_tab else ''
        tab_buttons.append(f'<button class="tab-btn {active}" data-tab="{t}">{t.capitalize()}</button>')

    def shown(tab: str) -> str:
        return 'block' if tab == active_tab else 'none'

    return f"""
    <div class="panel graph-toolbar">
      <h3>🌐 Graph</h3>
      <div class="tabs">
        {''.join(tab_buttons)}
      </div>

      <div class="tab-content" data-tab="demo" style="display: {shown('demo')};">
        <div class="button-row">
          <button id="btn-demo" class="btn-secondary">Load Demo Graph</button>
          <button id="btn-clear" class="btn-secondary">Clear Graph</button>
        </div>
      </div>

      <div class="tab-content" data-tab="random" style="display: {shown('random')};">
        <label>Nodes: <input type="number" id="rand-nodes" value="{config.RANDOM_NUM_NODES}" min="2" max="26"></label>
        <label>Edge Prob: <input type="range" id="rand-prob" min="0" max="1" step="0.05"
               value="{config.RANDOM_EDGE_PROBABILITY}">
               <span id="rand-prob-val">{config.RANDOM_EDGE_PROBABILITY}</span></label>
        <button id="btn-gen-random" class="btn-secondary">Generate Random</button>
      </div>

      <div class="tab-content" data-tab="import" style="display: {shown('import')};">
        <label>Adjacency list:</label>
        <textarea id="import-text" rows="8" placeholder="A: B(4) D(3)
B: C(5) D(2)
C: D(1) E(6)
D: E(8)"></textarea>
        <button id="btn-import" class="btn-secondary">Import Graph</button>
      </div>
    </div>
    """


# ---------------------------------------------------------------------------
# Info Panel
# ---------------------------------------------------------------------------
def info_panel(step: Optional[DijkstraStep] = None, end_id: Optional[str] = None) -> str:
    """Distance table for `step`; the result block once the run is over."""
    note = f'<p class="hint">{NEGATIVE_WEIGHT_NOTE}</p>'
    if step is None:
        return f"""
        <div class="panel info-panel">
          <h3>📋 Algorithm State</h3>
          <p class="placeholder">Select a start and end node, then press Run.</p>
          {note}
        </div>
        """

    g = step.graph
    current = escape(g.label_of(step.current_node)) if step.current_node else "—"

    rows = []
    for node in g:
        prev = step.previous.get(node.id)
        cls = ' class="current-row"' if node.id == step.current_node else ''
        rows.append(
            f'<tr{cls}><td>{escape(node.label)}</td>'
            f'<td>{format_distance(step.distance_to(node.id))}</td>'
            f'<td>{escape(g.label_of(prev)) if prev else "-"}</td></tr>'
        )

    result = ""
    if step.is_done:
        if step.shortest_path:
            labels = " → ".join(escape(g.label_of(n)) for n in step.shortest_path)
            result = f"""
            <div class="result found">
              <div>Shortest path: <strong>{labels}</strong></div>
              <div>Total distance: <strong>{format_distance(step.distance_to(end_id))}</strong></div>
            </div>
            """
        else:
            result = f'<div class="result not-found">{NO_PATH_MESSAGE}</div>'

    warning = ""
    if g.has_negative_edges():
        warning = '<p class="warning">⚠️ This graph has negative edge weights.</p>'

    return f"""
    <div class="panel info-panel">
      <h3>📋 Algorithm State</h3>
      <table class="info-summary">
        <tr><td>Current node:</td><td><strong>{current}</strong></td></tr>
        <tr><td>Visited:</td><td><strong>{len(step.visited)} / {g.node_count()}</strong></td></tr>
      </table>
      <table class="distance-table">
        <thead><tr><th>Node</th><th>Distance</th><th>Previous</th></tr></thead>
        <tbody>{''.join(rows)}</tbody>
      </table>
      {result}
      {warning}
      {note}
    </div>
    """


# ---------------------------------------------------------------------------
# Analytics Panel
# ---------------------------------------------------------------------------
def analytics_panel(metrics: Optional[RunMetrics] = None) -> str:
    if not metrics:
        return """
        <div class="panel analytics-panel">
          <h3>📊 Analytics</h3>
          <p class="placeholder">Run the algorithm to see metrics.</p>
        </div>
        """

    path_status = "✅ Found" if metrics.path_found else "❌ Not Found"
    distance = "∞" if metrics.shortest_distance is None else format_distance(metrics.shortest_distance)

    return f"""
    <div class="panel analytics-panel">
      <h3>📊 Analytics — {metrics.algo_label}</h3>
      <table>
        <tr><td>Nodes Visited:</td><td><strong>{metrics.nodes_visited}</strong></td></tr>
        <tr><td>Total Steps:</td><td><strong>{metrics.total_steps}</strong></td></tr>
        <tr><td>Path Length:</td><td><strong>{metrics.path_length} edges</strong></td></tr>
        <tr><td>Path Cost:</td><td><strong>{metrics.path_cost:.2f}</strong></td></tr>
        <tr><td>Shortest Distance:</td><td><strong>{distance}</strong></td></tr>
        <tr><td>Wall Time:</td><td><strong>{metrics.wall_time_ms:.2f} ms</strong></td></tr>
        <tr><td>Path:</td><td><strong>{path_status}</strong></td></tr>
      </table>
    </div>
    """


# ---------------------------------------------------------------------------
# Pseudocode Viewer
# ---------------------------------------------------------------------------
def pseudocode_viewer(pseudocode_lines: List[str], current_line: int = -1) -> str:
    lines_html = []
    for i, line in enumerate(pseudocode_lines):
        highlight = 'highlight' if i == current_line else ''
        lines_html.append(f'<div class="code-line {highlight}" data-line="{i}">{escape(line)}</div>')

    return f"""
    <div class="code-block">
      {''.join(lines_html)}
    </div>
    """


# ---------------------------------------------------------------------------
# Explanation Panel
# ---------------------------------------------------------------------------
def explanation_panel(explanation: str = "") -> str:
    if not explanation:
        return (
            '<div class="explanation-text">▶ Pick a start and an end node and press '
            '<strong>Run</strong> to walk through Dijkstra one node at a time.</div>'
        )
    return f'<div class="explanation-text">{escape(explanation)}</div>'
