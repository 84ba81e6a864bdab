"""
Unit tests for the run Recorder and its metrics / export.
"""

import json

import pytest

from engine import Recorder, RunMetrics


@pytest.fixture
def demo_recorder(demo_graph):
    rec = Recorder()
    rec.start(demo_graph, "A", "E")
    rec.run_to_completion()
    return rec


class TestMetrics:

    def test_demo_metrics(self, demo_recorder):
        m = demo_recorder.metrics
        assert isinstance(m, RunMetrics)
        assert m.start_id == "A"
        assert m.end_id == "E"
        assert m.nodes_visited == 5
        assert m.total_steps == 6
        assert m.path_length == 3
        assert m.path_cost == 10
        assert m.shortest_distance == 10
        assert m.path_found is True
        assert m.wall_time_ms >= 0

    def test_get_metrics_matches(self, demo_recorder):
        assert demo_recorder.get_metrics() is demo_recorder.metrics

    def test_unreachable_metrics(self, disconnected_graph):
        rec = Recorder()
        rec.start(disconnected_graph, "A", "F")
        m = rec.run_to_completion()
        assert m.path_found is False
        assert m.shortest_distance is None
        assert m.path_length == 0
        assert m.path_cost == 0
        assert m.nodes_visited == 5

    def test_run_before_start_raises(self):
        with pytest.raises(RuntimeError):
            Recorder().run_to_completion()


class TestResult:

    def test_result_matches_run(self, demo_recorder):
        result = demo_recorder.result
        assert result.success
        assert result.shortest_path == ("A", "D", "C", "E")
        assert len(result.steps) == 6

    def test_result_none_before_run(self, demo_graph):
        rec = Recorder()
        rec.start(demo_graph, "A", "E")
        assert rec.result is None


class TestExport:

    def test_export_is_json_serialisable(self, demo_recorder):
        data = json.loads(json.dumps(demo_recorder.export()))
        assert data["start_id"] == "A"
        assert data["end_id"] == "E"
        assert len(data["steps"]) == 6
        assert data["steps"][-1]["shortest_path"] == ["A", "D", "C", "E"]
        assert data["metrics"]["shortest_distance"] == 10
        assert len(data["graph"]["nodes"]) == 5

    def test_export_uses_infinity_symbol(self, disconnected_graph):
        rec = Recorder()
        rec.start(disconnected_graph, "A", "F")
        rec.run_to_completion()
        data = rec.export()
        assert data["metrics"]["shortest_distance"] == "∞"
        assert data["steps"][-1]["distances"]["F"] == "∞"
        json.dumps(data)
