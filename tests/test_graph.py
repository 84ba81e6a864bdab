"""
Unit tests for the graph container and its editor operations.
"""

import math
from collections import deque

import pytest

from graph import (
    Graph,
    Node,
    Edge,
    NodeStatus,
    EdgeStatus,
    edge_id_for,
    NodeNotFoundError,
    EdgeNotFoundError,
    DuplicateEdgeError,
    InvalidEdgeError,
)


def _reachable(graph: Graph, start: str) -> set:
    seen, queue = {start}, deque([start])
    while queue:
        for nbr, _ in graph.neighbours(queue.popleft()):
            if nbr not in seen:
                seen.add(nbr)
                queue.append(nbr)
    return seen


class TestDemoGraph:
    """The A-E demo graph."""

    def test_nodes_in_order(self, demo_graph):
        assert demo_graph.node_ids() == ["A", "B", "C", "D", "E"]

    def test_edges_and_weights(self, demo_graph):
        weights = {e.id: e.weight for e in demo_graph.edges.values()}
        assert weights == {
            "A-B": 4, "A-D": 3, "B-C": 5, "B-D": 2, "C-D": 1, "C-E": 6, "D-E": 8,
        }

    def test_labels_match_ids(self, demo_graph):
        assert all(n.label == n.id for n in demo_graph)

    def test_all_statuses_default(self, demo_graph):
        assert all(n.status is NodeStatus.DEFAULT for n in demo_graph)
        assert all(e.status is EdgeStatus.DEFAULT for e in demo_graph.edges.values())


class TestNodeEditing:
    """create / move / rename / remove."""

    def test_create_node_labels_follow_alphabet(self):
        g = Graph()
        labels = [g.create_node(i * 10, 0).label for i in range(3)]
        assert labels == ["A", "B", "C"]

    def test_create_node_after_demo_is_f(self, demo_graph):
        assert demo_graph.create_node(10, 10).label == "F"

    def test_created_ids_are_unique(self):
        g = Graph()
        ids = {g.create_node(0, 0).id for _ in range(30)}
        assert len(ids) == 30

    def test_move_node(self, demo_graph):
        demo_graph.move_node("A", 5, 6)
        assert (demo_graph.nodes["A"].x, demo_graph.nodes["A"].y) == (5.0, 6.0)

    def test_rename_keeps_id(self, demo_graph):
        demo_graph.rename_node("A", "Home")
        assert demo_graph.nodes["A"].label == "Home"
        assert demo_graph.label_of("A") == "Home"

    def test_remove_node_drops_incident_edges(self, demo_graph):
        demo_graph.remove_node("D")
        assert "D" not in demo_graph.nodes
        assert sorted(demo_graph.edges) == ["A-B", "B-C", "C-E"]
        assert [nbr for nbr, _ in demo_graph.neighbours("A")] == ["B"]

    def test_remove_unknown_node_raises(self, demo_graph):
        with pytest.raises(NodeNotFoundError):
            demo_graph.remove_node("Z")

    def test_unknown_node_error_carries_id(self, demo_graph):
        with pytest.raises(NodeNotFoundError) as exc:
            demo_graph.require_node("Q")
        assert exc.value.node_id == "Q"


class TestEdgeEditing:
    """create / remove / reweight and the one-edge-per-pair rule."""

    def test_edge_id_from_endpoints(self):
        assert edge_id_for("A", "B") == "A-B"
        assert Edge("X", "Y").id == "X-Y"

    def test_duplicate_edge_rejected_either_direction(self, demo_graph):
        with pytest.raises(DuplicateEdgeError):
            demo_graph.create_edge("A", "B", 1)
        with pytest.raises(DuplicateEdgeError):
            demo_graph.create_edge("B", "A", 1)

    def test_dashed_ids_do_not_share_an_edge_id(self):
        g = Graph()
        for nid in ("A", "B-C", "A-B", "C"):
            g.create_node(0, 0, node_id=nid)
        first = g.create_edge("A", "B-C", 1)
        second = g.create_edge("A-B", "C", 100)
        assert first.id != second.id
        assert g.edge_count() == 2
        assert g.get_edge_between("A", "B-C").weight == 1
        assert g.get_edge_between("A-B", "C").weight == 100

    def test_add_edge_rejects_taken_id(self, demo_graph):
        demo_graph.create_node(0, 0, node_id="F")
        with pytest.raises(InvalidEdgeError):
            demo_graph.add_edge(Edge("A", "F", 1, edge_id="A-B"))
        assert demo_graph.get_edge("A-B").target == "B"
        assert not demo_graph.edge_exists("A", "F")

    def test_self_loop_rejected(self, demo_graph):
        with pytest.raises(InvalidEdgeError):
            demo_graph.create_edge("A", "A", 1)

    def test_unknown_endpoint_rejected(self, demo_graph):
        with pytest.raises(NodeNotFoundError):
            demo_graph.create_edge("A", "Z", 1)

    def test_edge_is_undirected(self, demo_graph):
        assert demo_graph.edge_exists("E", "C")
        assert demo_graph.get_edge_between("E", "C").id == "C-E"

    def test_remove_edge_updates_adjacency(self, demo_graph):
        demo_graph.remove_edge("A-B")
        assert not demo_graph.edge_exists("A", "B")
        assert "A" not in [nbr for nbr, _ in demo_graph.neighbours("B")]

    def test_remove_unknown_edge_raises(self, demo_graph):
        with pytest.raises(EdgeNotFoundError):
            demo_graph.remove_edge("A-E")

    @pytest.mark.parametrize("raw, expected", [("7", 7), (2.5, 2.5), (3.0, 3)])
    def test_set_edge_weight_parses_numbers(self, demo_graph, raw, expected):
        assert demo_graph.set_edge_weight("A-B", raw).weight == expected

    @pytest.mark.parametrize("raw", ["abc", None, float("nan"), float("inf")])
    def test_set_edge_weight_rejects_non_numbers(self, demo_graph, raw):
        with pytest.raises(InvalidEdgeError):
            demo_graph.set_edge_weight("A-B", raw)

    def test_adjacency_list_has_both_directions(self, demo_graph):
        adj = demo_graph.adjacency_list()
        assert ("B", 4) in adj["A"]
        assert ("A", 4) in adj["B"]
        assert set(adj) == set(demo_graph.nodes)

    def test_negative_edges_detected(self, demo_graph):
        assert not demo_graph.has_negative_edges()
        demo_graph.set_edge_weight("A-B", -2)
        assert demo_graph.has_negative_edges()


class TestStatusAndCopy:
    """Status helpers, deep copy and serialisation."""

    def test_reset_status_keeps_endpoints(self, demo_graph):
        demo_graph.set_node_status("A", NodeStatus.START)
        demo_graph.set_node_status("E", NodeStatus.END)
        demo_graph.set_node_status("C", NodeStatus.PATH)
        demo_graph.edges["C-E"].status = EdgeStatus.PATH

        demo_graph.reset_status()

        assert demo_graph.nodes["A"].status is NodeStatus.START
        assert demo_graph.nodes["E"].status is NodeStatus.END
        assert demo_graph.nodes["C"].status is NodeStatus.DEFAULT
        assert demo_graph.edges["C-E"].status is EdgeStatus.DEFAULT

    def test_clear_status_resets_everything(self, demo_graph):
        demo_graph.set_node_status("A", NodeStatus.START)
        demo_graph.clear_status()
        assert demo_graph.nodes["A"].status is NodeStatus.DEFAULT

    def test_copy_is_deep(self, demo_graph):
        clone = demo_graph.copy()
        clone.set_node_status("B", NodeStatus.VISITED)
        clone.set_edge_weight("A-B", 99)
        clone.create_node(1, 1)

        assert demo_graph.nodes["B"].status is NodeStatus.DEFAULT
        assert demo_graph.edges["A-B"].weight == 4
        assert demo_graph.node_count() == 5

    def test_copy_is_equal(self, demo_graph):
        assert demo_graph.copy() == demo_graph

    def test_dict_round_trip(self, demo_graph):
        demo_graph.set_node_status("D", NodeStatus.PATH)
        rebuilt = Graph.from_dict(demo_graph.to_dict())
        assert rebuilt == demo_graph
        assert rebuilt.nodes["D"].status is NodeStatus.PATH

    def test_clear(self, demo_graph):
        demo_graph.clear()
        assert demo_graph.node_count() == 0
        assert demo_graph.edge_count() == 0

    def test_node_reset_keeps_endpoint(self):
        node = Node(label="S", status=NodeStatus.START)
        node.reset()
        assert node.status is NodeStatus.START
        assert node.is_endpoint


class TestAdjacencyListImport:
    """Graph.from_adjacency_list."""

    def test_weights_and_default_weight(self):
        g = Graph.from_adjacency_list("A: B(3) C\nB -> C(2)")
        assert g.node_ids() == ["A", "B", "C"]
        assert g.get_edge_between("A", "B").weight == 3
        assert g.get_edge_between("A", "C").weight == 1
        assert g.get_edge_between("B", "C").weight == 2

    def test_repeated_pair_keeps_first_weight(self):
        g = Graph.from_adjacency_list("A: B(3)\nB: A(9)")
        assert g.edge_count() == 1
        assert g.get_edge_between("A", "B").weight == 3

    def test_dashed_node_ids_keep_separate_edges(self):
        g = Graph.from_adjacency_list("A: B-C(1)\nA-B: C(100)")
        assert g.node_count() == 4
        assert g.edge_count() == 2
        assert {nbr for nbr, _ in g.neighbours("A")} == {"B-C"}
        assert g.get_edge_between("A", "B-C").weight == 1

    def test_comments_and_blank_lines_ignored(self):
        g = Graph.from_adjacency_list("# header\n\nA: B(1)\n")
        assert g.node_count() == 2

    def test_self_loops_skipped(self):
        g = Graph.from_adjacency_list("A: A(2) B(1)")
        assert g.edge_count() == 1

    def test_unparseable_line_raises(self):
        with pytest.raises(InvalidEdgeError):
            Graph.from_adjacency_list("A B C")

    def test_nodes_laid_out_on_canvas(self):
        g = Graph.from_adjacency_list("A: B C D", canvas_w=800, canvas_h=500)
        for node in g:
            assert 0 <= node.x <= 800
            assert 0 <= node.y <= 500


class TestRandomGraph:
    """Graph.generate_random."""

    def test_seed_is_deterministic(self):
        a = Graph.generate_random(num_nodes=8, seed=7)
        b = Graph.generate_random(num_nodes=8, seed=7)
        assert a == b

    def test_every_node_reachable(self):
        g = Graph.generate_random(num_nodes=10, edge_probability=0.0, seed=3)
        assert _reachable(g, g.node_ids()[0]) == set(g.nodes)

    def test_weights_in_range(self):
        g = Graph.generate_random(num_nodes=8, edge_probability=0.6, weight_range=(2, 5), seed=1)
        assert all(2 <= e.weight <= 5 for e in g.edges.values())

    def test_node_count_capped_at_alphabet(self):
        assert Graph.generate_random(num_nodes=40, seed=0).node_count() == 26

    def test_no_self_loops_or_duplicates(self):
        g = Graph.generate_random(num_nodes=12, edge_probability=0.8, seed=5)
        pairs = [frozenset((e.source, e.target)) for e in g.edges.values()]
        assert all(len(p) == 2 for p in pairs)
        assert len(pairs) == len(set(pairs))

    def test_positions_are_finite(self):
        g = Graph.generate_random(num_nodes=6, seed=2)
        assert all(math.isfinite(n.x) and math.isfinite(n.y) for n in g)
