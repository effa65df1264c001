"""
ui/
---
Presentation layer.

    from ui import render_bars
    from ui import run_controls, algorithm_selector, stats_panel, …
"""

from ui.canvas import render_bars, render_frame, bar_color, CanvasConfig

from ui.charts import complexity_curves, performance_bars

from ui.controls import (
    speed_label,
    run_controls,
    algorithm_selector,
    stats_panel,
    complexity_panel,
    code_panel,
    pseudocode_viewer,
    step_controls,
    analytics_panel,
    comparison_panel,
)

__all__ = [
    "render_bars",
    "render_frame",
    "bar_color",
    "CanvasConfig",
    "complexity_curves",
    "performance_bars",
    "speed_label",
    "run_controls",
    "algorithm_selector",
    "stats_panel",
    "complexity_panel",
    "code_panel",
    "pseudocode_viewer",
    "step_controls",
    "analytics_panel",
    "comparison_panel",
]
