"""Smoke tests for main FastAPI routes."""

from __future__ import annotations

import asyncio
import random
from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from nodesim.app import create_app
from nodesim.config import Settings
from nodesim.store import NodeStore
from nodesim.updater import UpdateLoop

WELCOME = {"message": "Welcome to the Distributed System Simulator! Visit /nodes to get node data."}


class _StepClock:
    def __init__(self) -> None:
        self.now = datetime(2024, 1, 1, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        self.now += timedelta(seconds=1)
        return self.now


@pytest.fixture()
def settings() -> Settings:
    # Long interval keeps the background loop from firing during a test.
    return Settings(host="127.0.0.1", port=8080, node_count=5, update_interval=3600)


@pytest.fixture()
def store() -> NodeStore:
    return NodeStore(rng=random.Random(7), clock=_StepClock())


@pytest.fixture()
def client(settings: Settings, store: NodeStore):
    app = create_app(settings, store=store)
    with TestClient(app) as test_client:
        yield test_client


def test_root_returns_welcome_message(client) -> None:
    response = client.get("/")
    assert response.status_code == 200
    assert response.json() == WELCOME


def test_nodes_endpoint_returns_all_nodes(client) -> None:
    response = client.get("/nodes")
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("application/json")

    data = response.json()
    assert len(data) == 5
    assert [node["id"] for node in data] == [0, 1, 2, 3, 4]
    for node in data:
        assert list(node) == ["id", "name", "value", "time"]
        assert node["name"] == f"Node-{node['id']}"
        assert 0 <= node["value"] < 100


def test_nodes_reflect_single_update(client, store: NodeStore) -> None:
    before = client.get("/nodes").json()
    updated = store.update_random()
    after = client.get("/nodes").json()

    differing = [index for index, (old, new) in enumerate(zip(before, after)) if old != new]
    assert differing == [updated.id]
    assert after[updated.id]["value"] == updated.value


def test_repeated_requests_are_identical_without_updates(client) -> None:
    assert client.get("/nodes").json() == client.get("/nodes").json()


def test_nodes_encoding_failure_returns_plain_text_500(monkeypatch, client) -> None:
    class _BrokenAdapter:
        @staticmethod
        def dump_json(_nodes):
            raise ValueError("cannot encode")

    monkeypatch.setattr("nodesim.routers.nodes_router.NodeList", _BrokenAdapter)

    response = client.get("/nodes")
    assert response.status_code == 500
    assert response.headers["content-type"].startswith("text/plain")
    assert response.text == "Failed to marshal data"


def test_unknown_path_is_not_found(client) -> None:
    assert client.get("/missing").status_code == 404
    assert client.post("/nodes").status_code == 405


def test_lifespan_starts_and_stops_update_loop(settings: Settings, store: NodeStore) -> None:
    app = create_app(settings, store=store)
    with TestClient(app):
        updater = app.state.runtime_state.updater
        assert store.is_initialized
        assert updater.is_running
        assert updater.interval == settings.update_interval
    assert not updater.is_running


def test_lifespan_stops_update_loop_off_the_event_loop(monkeypatch, settings: Settings, store: NodeStore) -> None:
    stop_calls = []
    original_stop = UpdateLoop.stop

    def recording_stop(self, *args, **kwargs):
        try:
            asyncio.get_running_loop()
        except RuntimeError:
            stop_calls.append("worker")
        else:
            stop_calls.append("event-loop")
        return original_stop(self, *args, **kwargs)

    monkeypatch.setattr(UpdateLoop, "stop", recording_stop)

    app = create_app(settings, store=store)
    with TestClient(app):
        pass
    assert stop_calls == ["worker"]
