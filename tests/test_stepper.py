"""
Unit tests for the playback Stepper.
"""

import pytest

import config
from graph import NodeStatus, NodeNotFoundError
from engine import Stepper, StepperState


@pytest.fixture
def stepper(demo_graph):
    s = Stepper()
    s.start(demo_graph, "A", "E")
    return s


class TestLifecycle:

    def test_start_shows_step_zero(self, stepper):
        assert stepper.state is StepperState.PAUSED
        assert stepper.current_idx == 0
        assert stepper.current_step.step_number == 0
        assert stepper.total_steps_fetched == 1

    def test_start_marks_endpoints(self, stepper):
        g = stepper.current_step.graph
        assert g.nodes["A"].status is NodeStatus.START
        assert g.nodes["E"].status is NodeStatus.END

    def test_start_clears_stale_statuses(self, demo_graph):
        demo_graph.set_node_status("B", NodeStatus.PATH)
        demo_graph.set_node_status("C", NodeStatus.END)
        s = Stepper()
        s.start(demo_graph, "A", "E")
        g = s.current_step.graph
        assert g.nodes["B"].status is NodeStatus.DEFAULT
        assert g.nodes["C"].status is NodeStatus.DEFAULT
        # caller's graph untouched
        assert demo_graph.nodes["B"].status is NodeStatus.PATH

    def test_unknown_end_raises(self, demo_graph):
        with pytest.raises(NodeNotFoundError):
            Stepper().start(demo_graph, "A", "Z")

    def test_unknown_start_raises(self, demo_graph):
        with pytest.raises(NodeNotFoundError):
            Stepper().start(demo_graph, "Z", "E")

    def test_reset(self, stepper):
        stepper.reset()
        assert stepper.state is StepperState.IDLE
        assert stepper.current_step is None
        assert stepper.steps == []


class TestNavigation:

    def test_steps_computed_lazily(self, stepper):
        stepper.next_step()
        stepper.next_step()
        assert stepper.total_steps_fetched == 3
        assert stepper.current_step.current_node == "B"

    def test_jump_to_end(self, stepper):
        stepper.jump_to_end()
        assert stepper.state is StepperState.FINISHED
        assert stepper.total_steps_fetched == 6
        assert stepper.is_at_end
        assert stepper.current_step.shortest_path == ("A", "D", "C", "E")

    def test_next_past_end_returns_false(self, stepper):
        stepper.jump_to_end()
        assert stepper.next_step() is False
        assert stepper.current_idx == 5

    def test_prev_step(self, stepper):
        stepper.jump_to_end()
        assert stepper.prev_step() is True
        assert stepper.current_idx == 4
        assert stepper.state is StepperState.PAUSED

    def test_prev_at_start_returns_false(self, stepper):
        assert stepper.prev_step() is False

    def test_goto_step_computes_forward(self, stepper):
        assert stepper.goto_step(3) is True
        assert stepper.current_step.current_node == "C"
        assert stepper.total_steps_fetched == 4

    def test_goto_step_out_of_range(self, stepper):
        assert stepper.goto_step(99) is False
        assert stepper.goto_step(-1) is False

    def test_rewind(self, stepper):
        stepper.goto_step(4)
        stepper.rewind()
        assert stepper.current_idx == 0

    def test_history_survives_scrubbing(self, stepper):
        stepper.jump_to_end()
        first = stepper.steps[0]
        stepper.rewind()
        assert stepper.current_step is first
        assert first.visited == frozenset()

    def test_on_step_callback(self, demo_graph):
        seen = []
        s = Stepper(on_step=lambda step: seen.append(step.step_number))
        s.start(demo_graph, "A", "E")
        s.next_step()
        s.prev_step()
        assert seen == [0, 1, 0]


class TestPlayback:

    def test_play_pause_toggle(self, stepper):
        stepper.play()
        assert stepper.is_playing
        stepper.toggle_play()
        assert stepper.state is StepperState.PAUSED

    def test_play_ignored_when_idle(self):
        s = Stepper()
        s.play()
        assert s.state is StepperState.IDLE

    def test_tick_does_nothing_when_paused(self, stepper):
        assert stepper.tick() is False
        assert stepper.current_idx == 0

    def test_tick_waits_for_speed(self, stepper):
        stepper.set_speed_value(1000)
        stepper.play()
        assert stepper.tick() is False

    def test_speed_presets(self, stepper):
        stepper.set_speed("fast")
        assert stepper.speed == config.SPEED_PRESETS["fast"]
        stepper.set_speed("warp")
        assert stepper.speed == config.SPEED_PRESETS[config.DEFAULT_SPEED]

    def test_speed_value_has_floor(self, stepper):
        stepper.set_speed_value(0)
        assert stepper.speed > 0
