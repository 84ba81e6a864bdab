"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

import pytest

from graph import Graph


@pytest.fixture
def demo_graph() -> Graph:
    """The five-node A-E demo graph."""
    return Graph.demo()


@pytest.fixture
def disconnected_graph() -> Graph:
    """Demo graph plus an isolated node F."""
    g = Graph.demo()
    g.create_node(700, 400, label="F", node_id="F")
    return g


@pytest.fixture
def app():
    """The Flask app with a clean workspace store."""
    import main

    main.app.config["TESTING"] = True
    main.WORKSPACES.clear()
    yield main.app
    main.WORKSPACES.clear()


@pytest.fixture
def client(app):
    """Test client; its cookie jar keeps one workspace across requests."""
    with app.test_client() as c:
        yield c


@pytest.fixture
def running_client(client):
    """Client with the demo graph loaded and an A -> E run started."""
    client.post("/api/graph/demo")
    resp = client.post("/api/run")
    assert resp.status_code == 200
    return client
