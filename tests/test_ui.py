"""
Unit tests for the HTML / SVG render functions.
"""

from graph import Graph, Node, NodeStatus
from algorithms import initialize, run, PSEUDOCODE
from engine import RunMetrics
from ui import (
    render_canvas,
    node_fill,
    CanvasConfig,
    control_panel,
    graph_toolbar,
    info_panel,
    analytics_panel,
    pseudocode_viewer,
    explanation_panel,
    NO_PATH_MESSAGE,
    NEGATIVE_WEIGHT_NOTE,
)

COLORS = CanvasConfig.node_colors


class TestCanvas:

    def test_renders_every_node_and_edge(self, demo_graph):
        svg = render_canvas(demo_graph)
        assert svg.startswith("<svg")
        assert svg.count('class="node"') == 5
        assert svg.count('class="edge"') == 7
        assert 'data-id="A-B"' in svg

    def test_weight_labels(self, demo_graph):
        svg = render_canvas(demo_graph)
        assert 'class="edge-weight" data-id="C-E"' in svg
        assert ">6</text>" in svg

    def test_labels_are_escaped(self):
        g = Graph()
        g.create_node(10, 10, label="<b>")
        svg = render_canvas(g)
        assert "&lt;b&gt;" in svg
        assert "<b>" not in svg

    def test_step_graph_replaces_editor_graph(self, demo_graph):
        final = run(demo_graph, "A", "E").final_step
        svg = render_canvas(demo_graph, final, start_id="A", end_id="E")
        assert 'data-status="path"' in svg

    def test_current_node_glow_and_distance_badges(self, demo_graph):
        step = initialize(demo_graph, "A")
        svg = render_canvas(demo_graph, step)
        assert 'opacity="0.35"' in svg
        assert "∞" in svg

    def test_selected_node_ring(self, demo_graph):
        svg = render_canvas(demo_graph, selected_id="B")
        assert CanvasConfig.selected_color in svg

    def test_empty_graph(self):
        svg = render_canvas(Graph())
        assert 'class="node"' not in svg
        assert svg.endswith("</svg>")


class TestNodeFill:

    def test_status_colour(self):
        node = Node(status=NodeStatus.VISITED)
        assert node_fill(node) == COLORS["visited"]

    def test_start_id_takes_precedence(self):
        node = Node(node_id="A", status=NodeStatus.PATH)
        assert node_fill(node, start_id="A") == COLORS["start"]

    def test_end_id_takes_precedence(self):
        node = Node(node_id="E", status=NodeStatus.CURRENT)
        assert node_fill(node, end_id="E") == COLORS["end"]


class TestPanels:

    def test_control_panel_lists_nodes(self, demo_graph):
        html = control_panel(demo_graph, start_id="A", end_id="E")
        assert html.count('<option value="A"') == 2
        assert '<option value="A" selected>' in html
        assert '<option value="E" selected>' in html

    def test_control_panel_locks_pickers_while_running(self, demo_graph):
        html = control_panel(demo_graph, is_running=True, current_step=2, total_steps=6)
        assert '<select id="start-selector" disabled>' in html
        assert 'Step <span id="current-step">2</span> / <span id="total-steps">6</span>' in html

    def test_control_panel_finished_badge(self, demo_graph):
        html = control_panel(demo_graph, is_running=True, is_finished=True)
        assert "FINISHED" in html

    def test_graph_toolbar_tabs(self):
        html = graph_toolbar()
        for button in ("btn-demo", "btn-clear", "btn-gen-random", "btn-import"):
            assert button in html

    def test_info_panel_placeholder(self):
        html = info_panel()
        assert "Select a start and end node" in html
        assert NEGATIVE_WEIGHT_NOTE in html

    def test_info_panel_distance_table(self, demo_graph):
        html = info_panel(initialize(demo_graph, "A"), "E")
        assert "<td>A</td><td>0</td><td>-</td>" in html
        assert "<td>B</td><td>∞</td><td>-</td>" in html
        assert "0 / 5" in html

    def test_info_panel_result(self, demo_graph):
        final = run(demo_graph, "A", "E").final_step
        html = info_panel(final, "E")
        assert "A → D → C → E" in html
        assert "Total distance: <strong>10</strong>" in html
        assert "<td>E</td><td>10</td><td>C</td>" in html

    def test_info_panel_no_path(self, disconnected_graph):
        final = run(disconnected_graph, "A", "F").final_step
        assert NO_PATH_MESSAGE in info_panel(final, "F")

    def test_info_panel_negative_weight_warning(self, demo_graph):
        demo_graph.set_edge_weight("A-B", -1)
        html = info_panel(initialize(demo_graph, "A"), "E")
        assert "negative edge weights" in html

    def test_analytics_placeholder(self):
        assert "Run the algorithm" in analytics_panel(None)

    def test_analytics_metrics(self):
        html = analytics_panel(RunMetrics(nodes_visited=5, total_steps=6, path_found=True,
                                          shortest_distance=10.0, path_cost=10.0))
        assert "<strong>5</strong>" in html
        assert "✅ Found" in html

    def test_analytics_unreachable_distance(self):
        assert "<strong>∞</strong>" in analytics_panel(RunMetrics(shortest_distance=None))

    def test_pseudocode_highlight(self):
        html = pseudocode_viewer(PSEUDOCODE, 3)
        assert 'class="code-line highlight" data-line="3"' in html
        assert html.count("highlight") == 1

    def test_pseudocode_escapes_arrows(self):
        assert "&lt;" in pseudocode_viewer(["if a < b:"])

    def test_explanation_escaped(self):
        assert "&lt;script&gt;" in explanation_panel("<script>")

    def test_explanation_default(self):
        assert "Run" in explanation_panel("")
