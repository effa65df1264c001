"""Tests for the Flask routes, driven through app.test_client()."""

import time

import pytest

import main


@pytest.fixture
def client():
    main.app.config["TESTING"] = True
    with main.app.test_client() as c:
        yield c


@pytest.fixture
def idle_host():
    """Make sure no animated run is left over from a previous test."""
    main.HOST.stop()
    wait_idle()
    main.HOST.last_result = None
    yield main.HOST
    main.HOST.stop()
    wait_idle()


def wait_finished(timeout=5.0):
    deadline = time.monotonic() + timeout
    while main.HOST.last_result is None and time.monotonic() < deadline:
        time.sleep(0.01)
    assert main.HOST.last_result is not None


def wait_idle(timeout=5.0):
    deadline = time.monotonic() + timeout
    while main.HOST.is_running and time.monotonic() < deadline:
        time.sleep(0.01)
    assert not main.HOST.is_running


class TestPage:
    def test_index(self, client, idle_host):
        res = client.get("/")
        assert res.status_code == 200
        assert b"Sorting Algorithm Visualizer" in res.data
        assert b"<svg" in res.data

    def test_state(self, client, idle_host):
        data = client.get("/api/state").get_json()
        assert data["state"] == "idle"
        assert "svg" in data
        again = client.get(f"/api/state?since={data['version']}").get_json()
        assert "svg" not in again

    def test_charts(self, client):
        data = client.get("/api/charts").get_json()
        assert len(data["complexity"]["datasets"]) == 4
        assert data["performance"]["labels"] == ["Comparisons", "Swaps", "Time (ms)"]


class TestArray:
    def test_generate(self, client, idle_host):
        res = client.post("/api/array/generate", json={"size": 10, "seed": 3})
        assert res.status_code == 200
        values = res.get_json()["values"]
        assert len(values) == 10
        frame = client.get("/api/state").get_json()["frame"]
        assert frame["values"] == values

    @pytest.mark.parametrize("payload", [
        {"size": 1000},
        {"size": "many"},
        {"size": 10, "distribution": "zigzag"},
        {"size": 10, "seed": "abc"},
    ])
    def test_generate_rejects_bad_input(self, client, idle_host, payload):
        res = client.post("/api/array/generate", json=payload)
        assert res.status_code == 400
        assert "error" in res.get_json()


class TestConfig:
    def test_algo(self, client):
        data = client.post("/api/config/algo", json={"algo_key": "quick"}).get_json()
        assert data["algo_key"] == "quick"
        assert "O(log n)" in data["complexity"]

    def test_unknown_algo(self, client):
        res = client.post("/api/config/algo", json={"algo_key": "bogo"})
        assert res.status_code == 400

    def test_speed(self, client):
        data = client.post("/api/config/speed", json={"speed": 100}).get_json()
        assert data["delay_ms"] == 20
        data = client.post("/api/config/speed", json={"speed": 500}).get_json()
        assert data["speed"] == 100

    def test_speed_must_be_numeric(self, client):
        res = client.post("/api/config/speed", json={"speed": "warp"})
        assert res.status_code == 400

    def test_speed_preset(self, client):
        data = client.post("/api/config/speed", json={"speed": "Slow"}).get_json()
        assert data["speed"] == 10
        assert data["delay_ms"] == main.delay_for(10, main.SETTINGS)

    @pytest.mark.parametrize("speed", ["nan", "inf", "-Infinity"])
    def test_non_finite_speed_leaves_speed_alone(self, client, idle_host, speed):
        client.post("/api/config/speed", json={"speed": 100})
        res = client.post("/api/config/speed", json={"speed": speed})
        assert res.status_code == 400
        assert main.STEPPER.speed == 100

        # a later run still gets a usable delay on every step
        client.post("/api/array/generate", json={"size": 5, "seed": 1})
        assert client.post("/api/run/start", json={"algo_key": "bubble"}).get_json()["started"]
        wait_finished()
        assert main.HOST.last_result.outcome.value == "completed"
        assert main.HOST.controller.speed == 100

    def test_lang(self, client):
        data = client.post("/api/config/lang", json={"lang": "Python"}).get_json()
        assert data["lang"] == "py"
        assert "def " in data["snippet"]


class TestStepping:
    def test_step_through(self, client, idle_host):
        client.post("/api/array/generate", json={"size": 5, "seed": 11})
        data = client.post("/api/step/start", json={"algo_key": "bubble"}).get_json()
        assert data["current_step"] == 0
        assert data["frame"]["highlight"] is None

        data = client.post("/api/step/next").get_json()
        assert data["current_step"] == 1
        assert data["frame"]["highlight"]["kind"] == "comparing"

        assert client.post("/api/step/prev").get_json()["current_step"] == 0
        assert client.post("/api/step/prev").status_code == 400

    def test_goto(self, client, idle_host):
        client.post("/api/array/generate", json={"size": 5, "seed": 11})
        client.post("/api/step/start", json={"algo_key": "insertion"})
        assert client.post("/api/step/goto", json={"index": 3}).get_json()["current_step"] == 3
        assert client.post("/api/step/goto", json={"index": 100000}).status_code == 400

    def test_next_without_start(self, client, idle_host):
        client.post("/api/array/generate", json={"size": 5})
        assert client.post("/api/step/next").status_code == 400

    def test_state_reports_stepping(self, client, idle_host):
        """The page keeps the stepped frame and counters while this is set."""
        client.post("/api/array/generate", json={"size": 5, "seed": 11})
        assert client.get("/api/state").get_json()["stepping"] is False

        client.post("/api/step/start", json={"algo_key": "bubble"})
        client.post("/api/step/next")
        assert client.get("/api/state").get_json()["stepping"] is True
        assert b"data.stepping" in client.get("/").data

        client.post("/api/array/generate", json={"size": 5, "seed": 11})
        assert client.get("/api/state").get_json()["stepping"] is False

    def test_auto_play(self, client, idle_host):
        client.post("/api/config/speed", json={"speed": "turbo"})
        client.post("/api/array/generate", json={"size": 5, "seed": 11})
        client.post("/api/step/start", json={"algo_key": "insertion"})

        assert client.post("/api/step/play").get_json()["playing"] is True
        deadline = time.monotonic() + 5.0
        data = client.post("/api/step/tick").get_json()
        while not data["advanced"] and time.monotonic() < deadline:
            time.sleep(0.01)
            data = client.post("/api/step/tick").get_json()
        assert data["advanced"] is True
        assert data["current_step"] == 1

        paused = client.post("/api/step/play").get_json()
        assert paused["playing"] is False
        assert client.post("/api/step/tick").get_json()["advanced"] is False

    def test_play_without_start(self, client, idle_host):
        client.post("/api/array/generate", json={"size": 5})
        assert client.post("/api/step/play").status_code == 400


class TestRun:
    def test_start_and_stop(self, client, idle_host):
        client.post("/api/config/speed", json={"speed": 100})
        values = client.post("/api/array/generate", json={"size": 20, "seed": 5}).get_json()["values"]

        first = client.post("/api/run/start", json={"algo_key": "bubble"}).get_json()
        assert first["started"] is True
        second = client.post("/api/run/start", json={"algo_key": "quick"}).get_json()
        assert second["started"] is False

        client.post("/api/run/stop")
        wait_finished()
        state = client.get("/api/state").get_json()
        assert state["last_result"]["outcome"] in ("cancelled", "completed")
        assert sorted(state["frame"]["values"]) == sorted(values)

    def test_unknown_algorithm(self, client, idle_host):
        res = client.post("/api/run/start", json={"algo_key": "bogo"})
        assert res.status_code == 400


class TestCompare:
    def test_compare(self, client, idle_host):
        client.post("/api/array/generate", json={"size": 8, "seed": 2})
        data = client.post("/api/compare", json={"left": "bubble", "right": "merge"}).get_json()
        assert data["result"]["left"]["algo_label"] == "Bubble Sort"
        assert data["result"]["right"]["sorted_ok"] is True
        assert "Bubble Sort vs Merge Sort" in data["comparison"]
