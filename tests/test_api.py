"""
Tests for the heroes HTTP API.
"""

import pytest
from fastapi.testclient import TestClient

from hero_api.api.app import create_app
from hero_api.entities import HeroEntity
from hero_api.repositories import InMemoryHeroRepository

API_VERSION = {"X-Api-Version": "1"}


@pytest.fixture
def client(store):
    """Create a test client over the seeded in-memory store."""
    with TestClient(create_app(store=store)) as test_client:
        yield test_client


@pytest.fixture
def empty_client(empty_store):
    with TestClient(create_app(store=empty_store)) as test_client:
        yield test_client


@pytest.fixture
def failing_client(failing_store):
    with TestClient(create_app(store=failing_store)) as test_client:
        yield test_client


def test_root(client):
    """Test root endpoint."""
    response = client.get("/")
    assert response.status_code == 200
    data = response.json()
    assert data["name"] == "Heroes API"
    assert data["endpoints"]["heroes"] == "/heroes"


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "store_healthy": True}


def test_health_store_down(failing_client):
    assert failing_client.get("/health").status_code == 503


def test_get_hero(client):
    response = client.get("/heroes/12")
    assert response.status_code == 200
    assert response.json() == {"id": 12, "name": "Galactic Agent"}


def test_get_unknown_hero(client):
    response = client.get("/heroes/99")
    assert response.status_code == 404
    assert response.content == b""


def test_get_hero_rejects_non_integer_id(client):
    assert client.get("/heroes/abc").status_code == 422


def test_list_heroes(client):
    response = client.get("/heroes", headers=API_VERSION)
    assert response.status_code == 200
    assert [h["id"] for h in response.json()] == [11, 12, 13, 14]


def test_list_heroes_requires_api_version_header(client):
    assert client.get("/heroes").status_code == 422


def test_search_heroes(client):
    response = client.get("/heroes/", params={"name": "ma"})
    assert response.status_code == 200
    assert response.json() == []

    response = client.get("/heroes/", params={"name": "Ag"})
    assert response.json() == [{"id": 12, "name": "Galactic Agent"}]


def test_search_requires_name(client):
    assert client.get("/heroes/").status_code == 422


def test_empty_store_list_and_search(empty_client):
    response = empty_client.get("/heroes", headers=API_VERSION)
    assert response.status_code == 200
    assert response.json() == []

    response = empty_client.get("/heroes/", params={"name": "x"})
    assert response.status_code == 200
    assert response.json() == []


def test_create_then_get(client):
    response = client.post("/heroes", json={"id": 21, "name": "Storm"})
    assert response.status_code == 201
    assert response.json() == {"id": 21, "name": "Storm"}

    assert client.get("/heroes/21").json() == {"id": 21, "name": "Storm"}


def test_create_with_taken_id_conflicts(client):
    response = client.post("/heroes", json={"id": 11, "name": "Storm"})
    assert response.status_code == 409
    assert response.content == b""
    assert client.get("/heroes/11").json()["name"] == "Wi-Fire"


def test_create_name_containing_existing_name_conflicts():
    store = InMemoryHeroRepository([HeroEntity(id=1, name="Max")])
    with TestClient(create_app(store=store)) as client:
        response = client.post("/heroes", json={"id": 2, "name": "Maximus"})
    assert response.status_code == 409


def test_create_rejects_blank_name(client):
    assert client.post("/heroes", json={"id": 30, "name": ""}).status_code == 422


def test_update_hero(client):
    response = client.put("/heroes", json={"id": 14, "name": "Captain Compiler"})
    assert response.status_code == 200
    assert response.json() == {"id": 14, "name": "Captain Compiler"}
    assert client.get("/heroes/14").json()["name"] == "Captain Compiler"


def test_update_unknown_hero(client):
    response = client.put("/heroes", json={"id": 99, "name": "Nobody"})
    assert response.status_code == 404
    assert client.get("/heroes/99").status_code == 404


def test_update_requires_id(client):
    assert client.put("/heroes", json={"name": "Nobody"}).status_code == 422


def test_delete_hero(client):
    response = client.delete("/heroes/13")
    assert response.status_code == 200
    assert client.get("/heroes/13").status_code == 404
    assert client.delete("/heroes/13").status_code == 404


@pytest.mark.parametrize(
    "method,path,kwargs",
    [
        ("GET", "/heroes/1", {}),
        ("GET", "/heroes", {"headers": API_VERSION}),
        ("GET", "/heroes/", {"params": {"name": "a"}}),
        ("POST", "/heroes", {"json": {"id": 1, "name": "Storm"}}),
        ("PUT", "/heroes", {"json": {"id": 1, "name": "Storm"}}),
        ("DELETE", "/heroes/1", {}),
    ],
)
def test_store_failure_returns_500(failing_client, method, path, kwargs):
    response = failing_client.request(method, path, **kwargs)
    assert response.status_code == 500
