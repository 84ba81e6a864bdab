"""
stepper.py — Step-by-Step Playback Engine
==========================================
The Stepper owns one Dijkstra run.  It computes steps lazily (one
advance() per next_step), buffers every step it has seen so the user
can rewind, and exposes a play/pause/next/prev/speed API.

State machine:
    IDLE  →  start()  →  PAUSED
    PAUSED  →  play()   →  PLAYING
    PLAYING →  pause()  →  PAUSED
    PLAYING →  (terminal step reached) → FINISHED
    any     →  reset()  →  IDLE

Thread safety:
  This class is NOT thread-safe.  Drive it from a single thread; the
  web UI builds a fresh Stepper per request.
"""

import time
from enum import Enum
from typing import Optional, Callable, List

from graph import Graph, NodeStatus, NodeNotFoundError
from algorithms import DijkstraStep, initialize, advance, finish
from config import SPEED_PRESETS, DEFAULT_SPEED


# ---------------------------------------------------------------------------
# States
# ---------------------------------------------------------------------------
class StepperState(Enum):
    IDLE     = "idle"
    PAUSED   = "paused"
    PLAYING  = "playing"
    FINISHED = "finished"


# ---------------------------------------------------------------------------
# Stepper
# ---------------------------------------------------------------------------
class Stepper:
    """
    Attributes:
        state       : Current StepperState.
        steps       : Every step computed so far (buffer for rewind).
        current_idx : Index into `steps` that is currently displayed.
        speed       : Seconds between auto-advance ticks.
        on_step     : Optional callback(DijkstraStep) fired whenever the
                      displayed step changes.  The UI hooks re-rendering here.
    """

    def __init__(self, on_step: Optional[Callable[[DijkstraStep], None]] = None):
        self.steps:       List[DijkstraStep] = []
        self.current_idx: int                = -1
        self.state:       StepperState       = StepperState.IDLE
        self.speed:       float              = SPEED_PRESETS[DEFAULT_SPEED]
        self.on_step:     Optional[Callable[[DijkstraStep], None]] = on_step

        self.start_id: Optional[str] = None
        self.end_id:   Optional[str] = None

        # for auto-play timing
        self._last_tick: float = 0.0

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def start(self, graph: Graph, start_id: str, end_id: str) -> None:
        """
        Prepare a run on a copy of `graph`: statuses reset, `end_id`
        marked END, step 0 computed and displayed.
        """
        if not graph.has_node(end_id):
            raise NodeNotFoundError(end_id)

        prepared = graph.copy()
        prepared.clear_status()
        prepared.set_node_status(end_id, NodeStatus.END)

        self.start_id    = start_id
        self.end_id      = end_id
        self.steps       = [initialize(prepared, start_id)]
        self.current_idx = -1
        self.state       = StepperState.PAUSED
        self._goto(0)

    def reset(self) -> None:
        """Back to IDLE; the caller must call start() again."""
        self.steps       = []
        self.current_idx = -1
        self.state       = StepperState.IDLE
        self.start_id    = None
        self.end_id      = None

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------
    def next_step(self) -> bool:
        """Advance one step forward.  Returns False if already at the end."""
        target = self.current_idx + 1
        if target >= len(self.steps) and not self._fetch_next():
            self.state = StepperState.FINISHED
            return False
        self._goto(target)
        return True

    def prev_step(self) -> bool:
        """Rewind one step.  Returns False if already at the start."""
        if self.current_idx <= 0:
            return False
        self._goto(self.current_idx - 1)
        if self.state == StepperState.FINISHED:
            self.state = StepperState.PAUSED
        return True

    def goto_step(self, idx: int) -> bool:
        """Jump to an arbitrary step index, computing forward if needed."""
        while idx >= len(self.steps):
            if not self._fetch_next():
                break
        if 0 <= idx < len(self.steps):
            self._goto(idx)
            return True
        return False

    def rewind(self) -> None:
        """Jump back to step 0."""
        if self.steps:
            self._goto(0)
            self.state = StepperState.PAUSED

    def jump_to_end(self) -> None:
        """Compute every remaining step and show the final one."""
        while self._fetch_next():
            pass
        if self.steps:
            self._goto(len(self.steps) - 1)
        self.state = StepperState.FINISHED

    # ------------------------------------------------------------------
    # Play / Pause
    # ------------------------------------------------------------------
    def play(self) -> None:
        if self.state in (StepperState.FINISHED, StepperState.IDLE):
            return
        self.state      = StepperState.PLAYING
        self._last_tick = time.monotonic()

    def pause(self) -> None:
        if self.state == StepperState.PLAYING:
            self.state = StepperState.PAUSED

    def toggle_play(self) -> None:
        if self.state == StepperState.PLAYING:
            self.pause()
        else:
            self.play()

    # ------------------------------------------------------------------
    # Tick  (call this from your event loop / timer)
    # ------------------------------------------------------------------
    def tick(self) -> bool:
        """
        Call periodically.  If playing and `speed` seconds have elapsed,
        advances one step.  Returns True if a step was taken.
        """
        if self.state != StepperState.PLAYING:
            return False
        now = time.monotonic()
        if now - self._last_tick < self.speed:
            return False
        self._last_tick = now
        if not self.next_step():
            return False
        if self.is_at_end:
            self.state = StepperState.FINISHED
        return True

    # ------------------------------------------------------------------
    # Speed
    # ------------------------------------------------------------------
    def set_speed(self, preset: str) -> None:
        self.speed = SPEED_PRESETS.get(preset, SPEED_PRESETS[DEFAULT_SPEED])

    def set_speed_value(self, seconds: float) -> None:
        self.speed = max(0.02, seconds)

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------
    @property
    def current_step(self) -> Optional[DijkstraStep]:
        if 0 <= self.current_idx < len(self.steps):
            return self.steps[self.current_idx]
        return None

    @property
    def total_steps_fetched(self) -> int:
        return len(self.steps)

    @property
    def is_at_end(self) -> bool:
        step = self.current_step
        return step is not None and step.is_done and self.current_idx == len(self.steps) - 1

    @property
    def is_finished(self) -> bool:
        return self.state == StepperState.FINISHED

    @property
    def is_playing(self) -> bool:
        return self.state == StepperState.PLAYING

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _fetch_next(self) -> bool:
        """Compute one more step into the buffer.  False once the run is over."""
        if not self.steps or self.steps[-1].is_done:
            return False
        step = advance(self.steps[-1])
        if step.is_done:
            step = finish(step, self.end_id)
        self.steps.append(step)
        return True

    def _goto(self, idx: int) -> None:
        self.current_idx = idx
        self._notify(self.steps[idx])

    def _notify(self, step: DijkstraStep) -> None:
        if self.on_step is not None:
            self.on_step(step)
