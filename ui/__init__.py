"""
ui/
---
Presentation layer.

    from ui import render_canvas
    from ui import control_panel, info_panel, …
"""

from ui.canvas import render_canvas, node_fill, CanvasConfig

from ui.controls import (
    control_panel,
    graph_toolbar,
    info_panel,
    analytics_panel,
    pseudocode_viewer,
    explanation_panel,
    NO_PATH_MESSAGE,
    NEGATIVE_WEIGHT_NOTE,
)

__all__ = [
    "render_canvas",
    "node_fill",
    "CanvasConfig",
    "control_panel",
    "graph_toolbar",
    "info_panel",
    "analytics_panel",
    "pseudocode_viewer",
    "explanation_panel",
    "NO_PATH_MESSAGE",
    "NEGATIVE_WEIGHT_NOTE",
]
