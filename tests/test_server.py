import logging

import pytest
from fastapi.testclient import TestClient

from wordfinder.server import create_app
from wordfinder.settings import settings, get_editable_settings, update_settings

WEATHER = ["chill", "coldw", "windy", "storm", "rainy"]


@pytest.fixture
def client():
    saved = get_editable_settings(settings)
    saved_level = logging.getLogger("wordfinder").level
    with TestClient(create_app()) as c:
        yield c
    update_settings(settings, **saved)
    logging.getLogger("wordfinder").setLevel(saved_level)


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok", "strategies": ["brute_force", "dfs", "trie"]}


def test_strategies(client):
    data = client.get("/api/strategies").json()
    assert data["strategies"] == ["brute_force", "dfs", "trie"]
    assert data["default"] == settings.DEFAULT_STRATEGY
    assert data["fallback"] == "trie"


def test_find_default_strategy(client):
    resp = client.post("/find", json={
        "grid": WEATHER,
        "words": ["rain", "chill", "rain", "snow"],
    })
    assert resp.status_code == 200
    data = resp.json()
    assert data["words"] == ["rain", "chill"]
    assert data["word_count"] == 2
    assert data["strategy"] == "brute_force"
    assert data["grid_size"] == [5, 5]
    assert set(data["stage_timings"]) == {"grid", "search", "total"}


@pytest.mark.parametrize("name", ["brute_force", "dfs", "trie"])
def test_find_with_strategy(client, name):
    resp = client.post("/find", json={
        "grid": WEATHER,
        "words": ["chill", "cold", "wind", "storm", "rain", "snow"],
        "strategy": name,
    })
    assert resp.status_code == 200
    data = resp.json()
    assert data["strategy"] == name
    assert sorted(data["words"]) == ["chill", "cold", "rain", "storm", "wind"]


def test_find_unknown_strategy_uses_trie(client):
    resp = client.post("/find", json={"grid": WEATHER, "words": ["storm"], "strategy": "magic"})
    assert resp.status_code == 200
    assert resp.json()["strategy"] == "trie"
    assert resp.json()["words"] == ["storm"]


def test_find_top_n(client):
    resp = client.post("/find", json={
        "grid": WEATHER,
        "words": ["chill", "cold", "wind", "storm", "rain"],
        "top_n": 2,
    })
    assert resp.json()["words"] == ["chill", "cold"]


def test_find_bad_shape(client):
    resp = client.post("/find", json={"grid": ["abc", "ab"], "words": ["ab"]})
    assert resp.status_code == 400
    assert "same number of characters" in resp.json()["detail"]


def test_find_grid_too_large(client):
    resp = client.post("/find", json={"grid": ["a" * 65] * 65, "words": ["a"]})
    assert resp.status_code == 400


@pytest.mark.parametrize("body", [
    {"words": ["a"]},
    {"grid": "abc", "words": ["a"]},
    {"grid": ["abc"], "words": [1, 2]},
    {"grid": ["abc"], "words": ["a"], "top_n": "ten"},
    {"grid": ["abc"], "words": ["a"], "strategy": 3},
    ["abc"],
])
def test_find_malformed_body(client, body):
    resp = client.post("/find", json=body)
    assert resp.status_code == 400


def test_find_invalid_json(client):
    resp = client.post("/find", content=b"{not json", headers={"content-type": "application/json"})
    assert resp.status_code == 400


def test_find_too_many_words(client):
    update_settings(settings, MAX_QUERY_WORDS=3)
    resp = client.post("/find", json={"grid": WEATHER, "words": ["a", "b", "c", "d"]})
    assert resp.status_code == 413


def test_find_uses_configured_default(client):
    update_settings(settings, DEFAULT_STRATEGY="dfs")
    resp = client.post("/find", json={"grid": WEATHER, "words": ["storm"]})
    assert resp.json()["strategy"] == "dfs"


def test_get_settings(client):
    data = client.get("/api/settings").json()
    assert data["settings"]["TOP_N"] == settings.TOP_N
    assert data["field_types"]["DEBUG"] == "bool"
    assert data["field_types"]["DEFAULT_STRATEGY"] == "str"


def test_post_settings(client):
    resp = client.post("/api/settings", json={"TOP_N": 3})
    assert resp.status_code == 200
    assert resp.json()["updated"]["TOP_N"] == 3
    assert settings.TOP_N == 3


def test_post_settings_errors(client):
    resp = client.post("/api/settings", json={"PORT": 1, "TOP_N": 4})
    assert resp.status_code == 400
    data = resp.json()
    assert "PORT" in data["errors"]
    assert data["updated"]["TOP_N"] == 4


def test_post_log_level_takes_effect(client):
    resp = client.post("/api/settings", json={"LOG_LEVEL": "DEBUG"})
    assert resp.status_code == 200
    assert resp.json()["updated"]["LOG_LEVEL"] == "DEBUG"
    assert logging.getLogger("wordfinder").getEffectiveLevel() == logging.DEBUG


def test_post_bad_log_level_rejected(client):
    before = settings.LOG_LEVEL
    resp = client.post("/api/settings", json={"LOG_LEVEL": "NOT_A_LEVEL"})
    assert resp.status_code == 400
    assert "LOG_LEVEL" in resp.json()["errors"]
    assert settings.LOG_LEVEL == before


def test_post_bench_iterations_rejected(client):
    resp = client.post("/api/settings", json={"BENCH_ITERATIONS": 3})
    assert resp.status_code == 400
    assert "BENCH_ITERATIONS" in resp.json()["errors"]
