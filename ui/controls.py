"""
controls.py — UI Control Panels
=================================
Every UI panel is a pure function that takes state and returns HTML.

Panels:
  • run_controls        – start / stop / regenerate, size & speed sliders
  • algorithm_selector  – dropdown of registered algorithms
  • stats_panel         – live comparisons / swaps / accesses / time
  • complexity_panel    – time & space complexity, stability, description
  • code_panel          – reference implementation in the chosen language
  • pseudocode_viewer   – algorithm pseudocode
  • step_controls       – manual step-through (prev / next / rewind)
  • analytics_panel     – metrics of a recorded run
  • comparison_panel    – side-by-side metrics of two runs

Design:
  - All panels are stateless render functions.
  - State is passed in as kwargs.
  - Output is raw HTML strings (no templating engine); user-visible text
    that did not originate here goes through html.escape.
  - The main app stitches them together.
"""

import html
from typing import Dict, List, Optional

from algorithms import AlgoInfo
from algorithms.snippets import LANGUAGES
from algorithms.step import StatsSnapshot
from engine import ComparisonResult, RunMetrics


# ---------------------------------------------------------------------------
# Speed label (slider readout)
# ---------------------------------------------------------------------------
def speed_label(speed: float) -> str:
    return f"{int(speed)}%"


# ---------------------------------------------------------------------------
# Run Controls
# ---------------------------------------------------------------------------
def run_controls(
    size: int,
    speed: float,
    size_min: int = 5,
    size_max: int = 100,
    speed_min: int = 1,
    speed_max: int = 100,
    distribution: str = "random",
    is_running: bool = False,
    presets: Optional[Dict[str, float]] = None,
) -> str:
    dis = "disabled" if is_running else ""
    preset_buttons = "".join(
        f'<button class="btn-secondary speed-preset" data-preset="{name}">{name.title()}</button>'
        for name in (presets or {})
    )
    distributions = [
        ("random", "Random"),
        ("reversed", "Reversed"),
        ("nearly_sorted", "Nearly sorted"),
        ("few_unique", "Few unique"),
    ]
    dist_options = "".join(
        f'<option value="{key}" {"selected" if key == distribution else ""}>{label}</option>'
        for key, label in distributions
    )

    return f"""
    <div class="panel run-controls">
      <h3>⏯ Controls</h3>
      <div class="button-row">
        <button id="btn-start" class="btn-primary" {dis}>▶ Start</button>
        <button id="btn-stop" class="btn-secondary" {'' if is_running else 'disabled'}>■ Stop</button>
        <button id="btn-regen" class="btn-secondary">↻ New Array</button>
      </div>
      <label>Size: <span id="size-label">{size}</span>
        <input type="range" id="size-range" min="{size_min}" max="{size_max}" value="{size}" {dis}>
      </label>
      <label>Distribution:
        <select id="distribution-selector" {dis}>{dist_options}</select>
      </label>
      <label>Speed: <span id="speed-label">{speed_label(speed)}</span>
        <input type="range" id="speed-range" min="{speed_min}" max="{speed_max}" value="{int(speed)}">
      </label>
      <div class="button-row">{preset_buttons}</div>
    </div>
    """


# ---------------------------------------------------------------------------
# Algorithm Selector
# ---------------------------------------------------------------------------
def algorithm_selector(algorithms: List[AlgoInfo], selected_key: str = "bubble") -> str:
    options = []
    for algo in algorithms:
        sel = 'selected' if algo.key == selected_key else ''
        options.append(
            f'<option value="{algo.key}" {sel}>{algo.label} — {algo.complexity_time}</option>'
        )

    return f"""
    <div class="panel algorithm-selector">
      <h3>🧠 Algorithm</h3>
      <select id="algo-selector">
        {''.join(options)}
      </select>
    </div>
    """


# ---------------------------------------------------------------------------
# Live Stats
# ---------------------------------------------------------------------------
def stats_panel(stats: Optional[StatsSnapshot] = None) -> str:
    stats = stats or StatsSnapshot()
    return f"""
    <div class="panel stats-panel">
      <h3>📈 Stats</h3>
      <table>
        <tr><td>Comparisons:</td><td><strong id="stat-comparisons">{stats.comparisons}</strong></td></tr>
        <tr><td>Swaps:</td><td><strong id="stat-swaps">{stats.swaps}</strong></td></tr>
        <tr><td>Array Accesses:</td><td><strong id="stat-accesses">{stats.accesses}</strong></td></tr>
        <tr><td>Time Taken:</td><td><strong id="stat-time">{stats.elapsed_ms:.2f} ms</strong></td></tr>
      </table>
    </div>
    """


# ---------------------------------------------------------------------------
# Complexity Card
# ---------------------------------------------------------------------------
def complexity_panel(info: AlgoInfo) -> str:
    return f"""
    <div class="panel complexity-panel">
      <h3>⏱ {info.label}</h3>
      <table>
        <tr><td>Time:</td><td><strong>{info.complexity_time}</strong></td></tr>
        <tr><td>Space:</td><td><strong>{info.complexity_space}</strong></td></tr>
        <tr><td>Stable:</td><td><strong>{'Yes' if info.stable else 'No'}</strong></td></tr>
      </table>
      <p class="hint">{html.escape(info.description)}</p>
    </div>
    """


# ---------------------------------------------------------------------------
# Code Snippet
# ---------------------------------------------------------------------------
def code_panel(snippet: str, language: str = "js") -> str:
    options = "".join(
        f'<option value="{key}" {"selected" if key == language else ""}>{label}</option>'
        for key, label in LANGUAGES.items()
    )
    return f"""
    <div class="code-panel">
      <div class="button-row">
        <select id="code-lang">{options}</select>
        <button id="btn-copy" class="btn-secondary">Copy</button>
      </div>
      <pre class="code-block" id="code-box">{html.escape(snippet)}</pre>
    </div>
    """


# ---------------------------------------------------------------------------
# Pseudocode Viewer
# ---------------------------------------------------------------------------
def pseudocode_viewer(pseudocode_lines: List[str], current_line: int = -1) -> str:
    if not pseudocode_lines:
        return """
        <div class="code-block">
          <div style="color: #7d8590; padding: 20px; text-align: center;">
            Select an algorithm to view pseudocode
          </div>
        </div>
        """

    lines_html = []
    for i, line in enumerate(pseudocode_lines):
        highlight = 'highlight' if i == current_line else ''
        lines_html.append(f'<div class="code-line {highlight}" data-line="{i}">{html.escape(line)}</div>')

    return f"""
    <div class="code-block">
      {''.join(lines_html)}
    </div>
    """


# ---------------------------------------------------------------------------
# Manual Step Controls
# ---------------------------------------------------------------------------
def step_controls(current_step: int = 0, total_steps: int = 0, is_finished: bool = False) -> str:
    return f"""
    <div class="panel step-controls">
      <h3>👣 Step Through</h3>
      <div class="button-row">
        <button id="btn-step-start" class="btn-secondary" title="Load the run">Load</button>
        <button id="btn-step-rewind" title="Rewind to start">⏮</button>
        <button id="btn-step-prev" title="Previous step">◀</button>
        <button id="btn-step-next" title="Next step">▶</button>
        <button id="btn-step-play" title="Auto-play">⏯</button>
      </div>
      <div class="step-info">
        Step <span id="current-step">{current_step}</span> / <span id="total-steps">{total_steps}</span>
        {' <span class="finished-badge">FINISHED</span>' if is_finished else ''}
      </div>
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
          <p class="placeholder">Run an algorithm to see metrics.</p>
        </div>
        """

    status = "✅ Sorted" if metrics.sorted_ok else "❌ Not sorted"
    return f"""
    <div class="panel analytics-panel">
      <h3>📊 Analytics — {metrics.algo_label}</h3>
      <table>
        <tr><td>Elements:</td><td><strong>{metrics.size}</strong></td></tr>
        <tr><td>Comparisons:</td><td><strong>{metrics.comparisons}</strong></td></tr>
        <tr><td>Swaps:</td><td><strong>{metrics.swaps}</strong></td></tr>
        <tr><td>Accesses:</td><td><strong>{metrics.accesses}</strong></td></tr>
        <tr><td>Total Steps:</td><td><strong>{metrics.total_steps}</strong></td></tr>
        <tr><td>Wall Time:</td><td><strong>{metrics.wall_time_ms:.2f} ms</strong></td></tr>
        <tr><td>Result:</td><td><strong>{status}</strong></td></tr>
      </table>
    </div>
    """


# ---------------------------------------------------------------------------
# Comparison Panel (side-by-side)
# ---------------------------------------------------------------------------
def comparison_panel(comp: Optional[ComparisonResult] = None) -> str:
    if not comp:
        return """
        <div class="panel comparison-panel">
          <h3>⚖️ Comparison Mode</h3>
          <p class="placeholder">Run two algorithms on the same array to compare.</p>
        </div>
        """

    left = comp.left
    right = comp.right

    def winner_badge(winner_label):
        if winner_label == "tie":
            return "🟰 Tie"
        return f"👑 {winner_label}"

    return f"""
    <div class="panel comparison-panel">
      <h3>⚖️ Comparison: {left.algo_label} vs {right.algo_label}</h3>
      <table class="comparison-table">
        <thead>
          <tr><th>Metric</th><th>{left.algo_label}</th><th>{right.algo_label}</th><th>Winner</th></tr>
        </thead>
        <tbody>
          <tr><td>Comparisons</td><td>{left.comparisons}</td><td>{right.comparisons}</td>
              <td>{winner_badge(comp.winner_comparisons)}</td></tr>
          <tr><td>Swaps</td><td>{left.swaps}</td><td>{right.swaps}</td>
              <td>{winner_badge(comp.winner_swaps)}</td></tr>
          <tr><td>Accesses</td><td>{left.accesses}</td><td>{right.accesses}</td>
              <td>{winner_badge(comp.winner_accesses)}</td></tr>
          <tr><td>Wall Time</td><td>{left.wall_time_ms:.2f} ms</td><td>{right.wall_time_ms:.2f} ms</td>
              <td>—</td></tr>
        </tbody>
      </table>
    </div>
    """
