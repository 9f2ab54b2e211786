from pathlib import Path
from urllib.parse import quote

import pytest
from fastapi.testclient import TestClient

from bacon_graph import LoadError, Settings
from bacon_graph.web import create_app

BACON = "<a>Bacon, Kevin (I)"
CONNERY = "<a>Connery, Sean"
WILD_THINGS = "<t>Wild Things (1998)"


@pytest.fixture
def client(movie_file: Path) -> TestClient:
    return TestClient(create_app(movie_file, settings=Settings.from_env({})))


def test_stats(client: TestClient):
    response = client.get("/api/stats")
    assert response.status_code == 200
    assert response.json() == {"nodes": 14, "persons": 8, "events": 6}


def test_node_lookup(client: TestClient):
    payload = client.get(f"/api/nodes/{quote(WILD_THINGS)}").json()
    assert payload == {"id": WILD_THINGS, "contains": True, "kind": "event", "degree": 2}

    missing = client.get(f"/api/nodes/{quote('<a>Nobody, Here')}").json()
    assert missing["contains"] is False


def test_count_rejects_unknown_kind(client: TestClient):
    assert client.get("/api/count", params={"kind": "person"}).json() == {"kind": "person", "count": 8}
    assert client.get("/api/count", params={"kind": "movie"}).status_code == 400


def test_path_query(client: TestClient):
    payload = client.get("/api/path", params={"source": CONNERY}).json()
    assert payload["status"] == "ok"
    assert payload["target"] == BACON
    assert payload["path"] == [CONNERY, WILD_THINGS, BACON]
    assert payload["degrees"] == 1


def test_path_not_found_is_not_an_error(client: TestClient):
    response = client.get("/api/path", params={"source": "<a>Garbo, Greta", "target": BACON})
    assert response.status_code == 200
    assert response.json()["status"] == "not_found"
    assert response.json()["path"] == []


def test_empty_source_is_rejected(client: TestClient):
    assert client.get("/api/path", params={"source": "  "}).status_code == 400


def test_startup_fails_on_bad_data(tmp_path: Path):
    with pytest.raises(LoadError):
        create_app(tmp_path / "missing.txt", settings=Settings.from_env({}))
