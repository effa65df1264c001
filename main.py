"""
main.py — Sorting Algorithm Visualizer Flask App
==================================================
The web server that powers the visualizer.

Routes:
  GET  /                       – main UI
  GET  /api/state              – live run state (polled by the page)
  GET  /api/charts             – complexity curves + last-run bar data
  POST /api/array/generate     – generate a new array
  POST /api/run/start          – start an animated run
  POST /api/run/stop           – cancel the animated run
  POST /api/config/algo        – select algorithm
  POST /api/config/speed       – change the speed (slider value or preset)
  POST /api/config/lang        – change the code-snippet language
  POST /api/step/start         – load the current array for manual stepping
  POST /api/step/next          – advance one step
  POST /api/step/prev          – rewind one step
  POST /api/step/goto          – jump to step N
  POST /api/step/play          – toggle auto-play of the loaded run
  POST /api/step/tick          – advance auto-play when its delay has passed
  POST /api/compare            – run two algorithms on the same array

State management:
  One visualizer per process.  The animated run lives in a ControllerHost
  (its own asyncio loop on a background thread); manual stepping uses a
  Stepper guarded by a lock; the selected algorithm / language /
  distribution sit in UI_STATE.
"""

import atexit
import logging
import math
import threading

from flask import Flask, render_template_string, request, jsonify

from algorithms import get_algorithm, list_algorithms, parse_algorithm
from algorithms.snippets import get_snippet, resolve_language
from config import get_settings
from dataset import Distribution, generate
from engine import ControllerHost, Recorder, RunContext, SPEED_PRESETS, Stepper, compare, delay_for
from ui import (
    render_bars,
    render_frame,
    complexity_curves,
    performance_bars,
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


SETTINGS = get_settings()

logging.basicConfig(
    level=getattr(logging, SETTINGS.log_level.upper(), logging.INFO),
    format="%(levelname)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = Flask(__name__)
app.config.update(
    SORTVIZ_SETTINGS=SETTINGS,
    DEBUG=SETTINGS.debug,
)

HOST = ControllerHost(generate(SETTINGS.default_size), settings=SETTINGS)
atexit.register(HOST.shutdown)

STEPPER = Stepper(settings=SETTINGS)
STEP_LOCK = threading.Lock()

UI_STATE = {
    "selected_algo": "bubble",
    "language":      "js",
    "distribution":  Distribution.RANDOM.value,
    "size":          SETTINGS.default_size,
}
UI_LOCK = threading.Lock()


# ---------------------------------------------------------------------------
# Request Helpers
# ---------------------------------------------------------------------------
def get_json():
    return request.get_json(silent=True) or {}


def get_number(data, key, default=None):
    """Read a numeric field; ValueError (→ 400) if present but not a number."""
    raw = data.get(key, default)
    if isinstance(raw, bool):
        raise ValueError(f"'{key}' must be a number")
    try:
        value = float(raw)
    except (TypeError, ValueError):
        raise ValueError(f"'{key}' must be a number, got {raw!r}") from None
    if not math.isfinite(value):
        raise ValueError(f"'{key}' must be finite, got {raw!r}")
    return value


def set_state(**kwargs):
    with UI_LOCK:
        UI_STATE.update(kwargs)


def get_state():
    with UI_LOCK:
        return dict(UI_STATE)


def step_payload():
    """What every step route returns: the current frame plus counters."""
    frame = STEPPER.current_frame
    return {
        "svg":          render_frame(frame) if frame else render_bars(HOST.values()),
        "stats":        stats_panel(frame.stats if frame else None),
        "frame":        frame.to_dict() if frame else None,
        "current_step": STEPPER.current_idx,
        "total_steps":  STEPPER.total_frames,
        "finished":     STEPPER.is_finished,
        "playing":      STEPPER.is_playing,
    }


@app.errorhandler(ValueError)
def bad_request(e):
    # UnknownAlgorithmError is a ValueError too
    return jsonify({"error": str(e)}), 400


# ---------------------------------------------------------------------------
# Main UI Route
# ---------------------------------------------------------------------------
@app.route("/")
def index():
    state = get_state()
    live  = HOST.state()
    info  = get_algorithm(state["selected_algo"])

    values = live["frame"]["values"] if live["frame"] else HOST.values()
    svg = render_bars(values)

    html = render_template_string(INDEX_TEMPLATE,
        svg=svg,
        controls=run_controls(
            size=state["size"],
            speed=live["speed"],
            size_min=SETTINGS.size_min,
            size_max=SETTINGS.size_max,
            speed_min=SETTINGS.speed_min,
            speed_max=SETTINGS.speed_max,
            distribution=state["distribution"],
            is_running=live["state"] != "idle",
            presets=SPEED_PRESETS,
        ),
        algo_selector=algorithm_selector(list_algorithms(), selected_key=info.key),
        stats=stats_panel(),
        complexity=complexity_panel(info),
        code=code_panel(get_snippet(info.algorithm, state["language"]), state["language"]),
        pseudocode=pseudocode_viewer(info.pseudocode),
        steps=step_controls(),
        analytics=analytics_panel(),
        comparison=comparison_panel(),
        algorithms=list_algorithms(),
    )
    return html


# ---------------------------------------------------------------------------
# API: Live State
# ---------------------------------------------------------------------------
@app.route("/api/state")
def api_state():
    """
    Polled by the page.  Pass ?since=<version> to skip the SVG when no new
    frame has been rendered since that version.
    """
    live = HOST.state()
    with STEP_LOCK:
        live["stepping"] = STEPPER.context is not None
    since = request.args.get("since", type=int)
    version, frame, _ = HOST.sink.latest()
    if frame is not None and version != since:
        live["version"] = version
        live["svg"] = render_frame(frame)
    return jsonify(live)


@app.route("/api/charts")
def api_charts():
    result = HOST.last_result
    return jsonify({
        "complexity":  complexity_curves(),
        "performance": performance_bars(result.stats if result else None),
    })


# ---------------------------------------------------------------------------
# API: Array Generation
# ---------------------------------------------------------------------------
@app.route("/api/array/generate", methods=["POST"])
def api_array_generate():
    data = get_json()
    size = int(get_number(data, "size", SETTINGS.default_size))
    distribution = Distribution(data.get("distribution", Distribution.RANDOM.value))
    seed = data.get("seed")
    if seed is not None:
        seed = int(get_number(data, "seed"))

    array = generate(size, distribution, seed=seed, settings=SETTINGS)
    HOST.regenerate(array)
    with STEP_LOCK:
        STEPPER.reset()
    set_state(size=size, distribution=distribution.value)

    logger.info("Generated %d values (%s)", size, distribution.value)
    return jsonify({"svg": render_bars(array.to_list()), "values": array.to_list()})


# ---------------------------------------------------------------------------
# API: Animated Run
# ---------------------------------------------------------------------------
@app.route("/api/run/start", methods=["POST"])
def api_run_start():
    data = get_json()
    algo = parse_algorithm(data.get("algo_key", get_state()["selected_algo"]))
    set_state(selected_algo=algo.value)

    with STEP_LOCK:
        STEPPER.reset()
    started = HOST.start(algo)
    return jsonify({"started": started, "algorithm": algo.value})


@app.route("/api/run/stop", methods=["POST"])
def api_run_stop():
    HOST.stop()
    return jsonify({"stopping": HOST.is_running})


# ---------------------------------------------------------------------------
# API: Config Changes
# ---------------------------------------------------------------------------
@app.route("/api/config/algo", methods=["POST"])
def api_config_algo():
    info = get_algorithm(get_json().get("algo_key", "bubble"))
    set_state(selected_algo=info.key)

    language = get_state()["language"]
    return jsonify({
        "algo_key":   info.key,
        "complexity": complexity_panel(info),
        "pseudocode": pseudocode_viewer(info.pseudocode),
        "code":       code_panel(get_snippet(info.algorithm, language), language),
    })


@app.route("/api/config/speed", methods=["POST"])
def api_config_speed():
    """Accepts a slider value or a preset name ("slow", "fast", ...)."""
    data = get_json()
    preset = data.get("speed")
    if isinstance(preset, str) and preset.strip().lower() in SPEED_PRESETS:
        speed = float(SPEED_PRESETS[preset.strip().lower()])
    else:
        speed = get_number(data, "speed", SETTINGS.default_speed)
    speed = min(max(speed, SETTINGS.speed_min), SETTINGS.speed_max)

    # validated before anything is assigned
    delay_ms = delay_for(speed, SETTINGS)
    HOST.set_speed(speed)
    with STEP_LOCK:
        STEPPER.speed = speed
    return jsonify({"speed": speed, "delay_ms": delay_ms})


@app.route("/api/config/lang", methods=["POST"])
def api_config_lang():
    language = resolve_language(get_json().get("lang", "js"))
    set_state(language=language)
    snippet = get_snippet(get_state()["selected_algo"], language)
    return jsonify({"lang": language, "code": code_panel(snippet, language), "snippet": snippet})


# ---------------------------------------------------------------------------
# API: Step Navigation
# ---------------------------------------------------------------------------
@app.route("/api/step/start", methods=["POST"])
def api_step_start():
    if HOST.is_running:
        return jsonify({"error": "Stop the running sort first"}), 409

    algo = parse_algorithm(get_json().get("algo_key", get_state()["selected_algo"]))
    set_state(selected_algo=algo.value)
    with STEP_LOCK:
        STEPPER.start(RunContext(HOST.values()), algo)
        return jsonify(step_payload())


@app.route("/api/step/next", methods=["POST"])
def api_step_next():
    with STEP_LOCK:
        if STEPPER.context is None:
            return jsonify({"error": "Load a run first"}), 400
        if not STEPPER.next_step():
            return jsonify({"error": "Already at last step"}), 400
        return jsonify(step_payload())


@app.route("/api/step/prev", methods=["POST"])
def api_step_prev():
    with STEP_LOCK:
        if not STEPPER.prev_step():
            return jsonify({"error": "Already at first step"}), 400
        return jsonify(step_payload())


@app.route("/api/step/goto", methods=["POST"])
def api_step_goto():
    idx = int(get_number(get_json(), "index", 0))
    with STEP_LOCK:
        if not STEPPER.goto_step(idx):
            return jsonify({"error": "Invalid step index"}), 400
        return jsonify(step_payload())


@app.route("/api/step/play", methods=["POST"])
def api_step_play():
    with STEP_LOCK:
        if STEPPER.context is None:
            return jsonify({"error": "Load a run first"}), 400
        STEPPER.toggle_play()
        return jsonify(step_payload())


@app.route("/api/step/tick", methods=["POST"])
def api_step_tick():
    """Polled while auto-playing; advances once the speed's delay has passed."""
    with STEP_LOCK:
        advanced = STEPPER.tick()
        payload = step_payload()
    payload["advanced"] = advanced
    return jsonify(payload)


# ---------------------------------------------------------------------------
# API: Comparison Mode
# ---------------------------------------------------------------------------
@app.route("/api/compare", methods=["POST"])
def api_compare():
    data = get_json()
    left_algo  = parse_algorithm(data.get("left", "bubble"))
    right_algo = parse_algorithm(data.get("right", "merge"))
    values = HOST.values()

    left, right = Recorder(), Recorder()
    left.start(left_algo, values)
    right.start(right_algo, values)
    left.run_to_completion()
    right.run_to_completion()

    result = compare(left, right)
    logger.info("Compared %s vs %s on %d values", left_algo.value, right_algo.value, len(values))
    return jsonify({
        "comparison": comparison_panel(result),
        "analytics":  analytics_panel(left.get_metrics()),
        "result":     result.to_dict(),
    })


# ---------------------------------------------------------------------------
# HTML Template
# ---------------------------------------------------------------------------
INDEX_TEMPLATE = """
<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>Sorting Algorithm Visualizer</title>
  <link href="https://fonts.googleapis.com/css2?family=JetBrains+Mono:wght@400;500;700&family=DM+Sans:wght@400;500;700&display=swap" rel="stylesheet">
  <script src="https://cdn.jsdelivr.net/npm/chart.js"></script>
  <style>
    * { margin: 0; padding: 0; box-sizing: border-box; }

    :root {
      --bg-dark: #0d1117;
      --bg-darker: #010409;
      --bg-panel: #161b22;
      --border: #30363d;
      --text-primary: #e6edf3;
      --text-secondary: #7d8590;
      --accent-teal: #06b6d4;
      --accent-emerald: #10b981;
      --accent-amber: #f59e0b;
      --accent-red: #ef4444;
    }

    body {
      font-family: 'DM Sans', sans-serif;
      background: var(--bg-darker);
      color: var(--text-primary);
      display: flex;
      min-height: 100vh;
    }

    #sidebar {
      width: 320px;
      background: var(--bg-dark);
      border-right: 1px solid var(--border);
      overflow-y: auto;
      padding: 20px 14px;
    }

    #main { flex: 1; display: flex; flex-direction: column; padding: 16px; gap: 16px; }

    #canvas-container {
      display: flex;
      justify-content: center;
      border: 1px solid var(--border);
      border-radius: 12px;
      background: var(--bg-dark);
      padding: 8px;
    }
    #canvas-svg svg { max-width: 100%; height: auto; }

    .legend { display: flex; gap: 16px; font-size: 12px; color: var(--text-secondary); }
    .legend span::before {
      content: ''; display: inline-block; width: 10px; height: 10px;
      margin-right: 6px; border-radius: 2px; background: var(--swatch);
    }

    #bottom-panel { display: grid; grid-template-columns: 1fr 1fr; gap: 16px; }
    #charts { display: grid; grid-template-columns: 1fr 1fr; gap: 16px; }
    .chart-box { background: var(--bg-panel); border: 1px solid var(--border); border-radius: 12px; padding: 12px; }

    .panel {
      background: var(--bg-panel);
      border: 1px solid var(--border);
      border-radius: 12px;
      padding: 16px;
      margin-bottom: 14px;
    }
    .panel h3 {
      font-size: 13px;
      text-transform: uppercase;
      letter-spacing: 0.5px;
      margin-bottom: 12px;
    }

    .code-block {
      background: var(--bg-darker);
      border: 1px solid var(--border);
      border-radius: 8px;
      padding: 12px;
      font-family: 'JetBrains Mono', monospace;
      font-size: 12px;
      line-height: 1.6;
      max-height: 320px;
      overflow: auto;
      white-space: pre;
    }
    .code-line.highlight { border-left: 3px solid var(--accent-teal); padding-left: 8px; }

    .button-row { display: flex; gap: 8px; margin-bottom: 10px; }
    button {
      background: var(--accent-teal);
      color: #fff;
      border: none;
      padding: 8px 14px;
      border-radius: 8px;
      cursor: pointer;
      font-weight: 600;
    }
    button:disabled { opacity: 0.4; cursor: not-allowed; }
    .btn-primary { background: var(--accent-emerald); }
    .btn-secondary { background: var(--bg-darker); border: 1px solid var(--border); }

    select, input[type="range"] {
      width: 100%;
      margin: 6px 0;
      padding: 6px;
      background: var(--bg-darker);
      border: 1px solid var(--border);
      border-radius: 8px;
      color: var(--text-primary);
    }
    label { display: block; margin: 8px 0 4px; font-size: 12px; color: var(--text-secondary); }

    table { width: 100%; font-size: 13px; }
    table td:last-child, table td:nth-child(n+2) { text-align: right; font-family: 'JetBrains Mono', monospace; }
    .hint, .placeholder { font-size: 12px; color: var(--text-secondary); margin-top: 8px; }
    .step-info { font-family: 'JetBrains Mono', monospace; font-size: 12px; color: var(--text-secondary); }
    .finished-badge { background: var(--accent-emerald); color: #fff; padding: 2px 8px; border-radius: 6px; }
  </style>
</head>
<body>
  <div id="sidebar">
    <div id="algo-panel">{{ algo_selector|safe }}</div>
    <div id="controls">{{ controls|safe }}</div>
    <div id="stats">{{ stats|safe }}</div>
    <div id="steps">{{ steps|safe }}</div>
    <div class="panel">
      <h3>⚖️ Compare</h3>
      <select id="cmp-left">
        {% for a in algorithms %}<option value="{{ a.key }}">{{ a.label }}</option>{% endfor %}
      </select>
      <select id="cmp-right">
        {% for a in algorithms %}<option value="{{ a.key }}" {% if a.key == 'merge' %}selected{% endif %}>{{ a.label }}</option>{% endfor %}
      </select>
      <button id="btn-compare" class="btn-secondary">Compare</button>
    </div>
    <div id="analytics">{{ analytics|safe }}</div>
  </div>

  <div id="main">
    <div id="canvas-container">
      <div id="canvas-svg">{{ svg|safe }}</div>
    </div>
    <div class="legend">
      <span style="--swatch: #10b981">Unsorted</span>
      <span style="--swatch: #f59e0b">Comparing</span>
      <span style="--swatch: #ef4444">Swapping</span>
      <span style="--swatch: #06b6d4">Sorted</span>
    </div>

    <div id="bottom-panel">
      <div>
        <div id="complexity">{{ complexity|safe }}</div>
        <div class="panel"><h3>Pseudocode</h3><div id="pseudocode">{{ pseudocode|safe }}</div></div>
      </div>
      <div>
        <div class="panel"><h3>Code</h3><div id="code">{{ code|safe }}</div></div>
        <div id="comparison">{{ comparison|safe }}</div>
      </div>
    </div>

    <div id="charts">
      <div class="chart-box"><canvas id="complexity-chart"></canvas></div>
      <div class="chart-box"><canvas id="performance-chart"></canvas></div>
    </div>
  </div>

  <script>
    const $ = (id) => document.getElementById(id);

    async function post(url, data) {
      const res = await fetch(url, {
        method: 'POST',
        headers: {'Content-Type': 'application/json'},
        body: JSON.stringify(data || {}),
      });
      return await res.json();
    }

    function showStats(stats) {
      $('stat-comparisons').textContent = stats.comparisons;
      $('stat-swaps').textContent = stats.swaps;
      $('stat-accesses').textContent = stats.accesses;
      $('stat-time').textContent = stats.elapsed_ms.toFixed(2) + ' ms';
    }

    function setRunning(running) {
      $('btn-start').disabled = running;
      $('btn-stop').disabled = !running;
      $('size-range').disabled = running;
      $('distribution-selector').disabled = running;
    }

    // Live polling of the animated run
    let version = null;
    let lastResult = null;
    async function poll() {
      const res = await fetch('/api/state' + (version === null ? '' : '?since=' + version));
      const data = await res.json();
      version = data.version;
      // a loaded step-through owns the canvas and the counters
      if (!data.stepping) {
        if (data.svg) $('canvas-svg').innerHTML = data.svg;
        showStats(data.stats);
      }
      setRunning(data.state !== 'idle');
      const finished = JSON.stringify(data.last_result);
      if (finished !== lastResult) {
        lastResult = finished;
        refreshCharts();
      }
      setTimeout(poll, 50);
    }

    // Charts
    let complexityChart = null;
    let performanceChart = null;
    async function refreshCharts() {
      if (typeof Chart === 'undefined') return;
      const data = await (await fetch('/api/charts')).json();
      if (!complexityChart) {
        complexityChart = new Chart($('complexity-chart'), {
          type: 'line',
          data: {
            labels: data.complexity.labels,
            datasets: data.complexity.datasets.map(d => ({...d, fill: false, pointRadius: 0})),
          },
          options: {plugins: {title: {display: true, text: 'Time complexity'}}},
        });
      }
      const perf = data.performance;
      if (!performanceChart) {
        performanceChart = new Chart($('performance-chart'), {
          type: 'bar',
          data: {labels: perf.labels, datasets: [{label: 'Last run', data: perf.data, backgroundColor: perf.colors}]},
          options: {plugins: {title: {display: true, text: 'Performance'}}},
        });
      } else {
        performanceChart.data.datasets[0].data = perf.data;
        performanceChart.update();
      }
    }

    // Run controls
    $('btn-start').addEventListener('click', () => post('/api/run/start', {algo_key: $('algo-selector').value}));
    $('btn-stop').addEventListener('click', () => post('/api/run/stop'));

    async function regenerate() {
      const data = await post('/api/array/generate', {
        size: +$('size-range').value,
        distribution: $('distribution-selector').value,
      });
      if (data.svg) $('canvas-svg').innerHTML = data.svg;
    }
    $('btn-regen').addEventListener('click', regenerate);
    $('size-range').addEventListener('input', (e) => { $('size-label').textContent = e.target.value; });
    $('size-range').addEventListener('change', regenerate);
    $('distribution-selector').addEventListener('change', regenerate);

    $('speed-range').addEventListener('input', async (e) => {
      $('speed-label').textContent = e.target.value + '%';
      await post('/api/config/speed', {speed: +e.target.value});
    });
    document.querySelectorAll('.speed-preset').forEach((btn) => btn.addEventListener('click', async () => {
      const data = await post('/api/config/speed', {speed: btn.dataset.preset});
      if (data.error) return;
      $('speed-range').value = data.speed;
      $('speed-label').textContent = data.speed + '%';
    }));

    // Algorithm & language
    $('algo-selector').addEventListener('change', async (e) => {
      const data = await post('/api/config/algo', {algo_key: e.target.value});
      if (data.complexity) $('complexity').innerHTML = data.complexity;
      if (data.pseudocode) $('pseudocode').innerHTML = data.pseudocode;
      if (data.code) $('code').innerHTML = data.code;
    });

    document.addEventListener('change', async (e) => {
      if (e.target.id === 'code-lang') {
        const data = await post('/api/config/lang', {lang: e.target.value});
        if (data.code) $('code').innerHTML = data.code;
      }
    });
    document.addEventListener('click', (e) => {
      if (e.target.id === 'btn-copy') navigator.clipboard.writeText($('code-box').textContent);
    });

    // Manual stepping
    function showStep(data) {
      if (data.error) return;
      if (data.svg) $('canvas-svg').innerHTML = data.svg;
      $('current-step').textContent = data.current_step;
      $('total-steps').textContent = data.total_steps;
      if (data.frame) showStats(data.frame.stats);
    }
    $('btn-step-start').addEventListener('click', async () => showStep(await post('/api/step/start', {algo_key: $('algo-selector').value})));
    $('btn-step-next').addEventListener('click', async () => showStep(await post('/api/step/next')));
    $('btn-step-prev').addEventListener('click', async () => showStep(await post('/api/step/prev')));
    $('btn-step-rewind').addEventListener('click', async () => showStep(await post('/api/step/goto', {index: 0})));

    async function autoPlay() {
      const data = await post('/api/step/tick');
      if (data.advanced) showStep(data);
      if (data.playing) setTimeout(autoPlay, 20);
    }
    $('btn-step-play').addEventListener('click', async () => {
      const data = await post('/api/step/play');
      showStep(data);
      if (data.playing) autoPlay();
    });

    // Comparison
    $('btn-compare').addEventListener('click', async () => {
      const data = await post('/api/compare', {left: $('cmp-left').value, right: $('cmp-right').value});
      if (data.comparison) $('comparison').innerHTML = data.comparison;
      if (data.analytics) $('analytics').innerHTML = data.analytics;
    });

    poll();
  </script>
</body>
</html>
"""


# ---------------------------------------------------------------------------
# Run
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    print("=" * 60)
    print("  Sorting Algorithm Visualizer")
    print("  Starting Flask server...")
    print(f"  Open http://localhost:{SETTINGS.port}")
    print("=" * 60)
    app.run(host=SETTINGS.host, port=SETTINGS.port, debug=SETTINGS.debug, use_reloader=False)
