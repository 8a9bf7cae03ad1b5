"""Tests for the JSON API server."""

import pytest
import requests
import api_server


@pytest.fixture
def client(monkeypatch):
    monkeypatch.setattr(api_server, "source", None)
    api_server.app.config["TESTING"] = True
    return api_server.app.test_client()


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.get_json()["status"] == "healthy"


def test_status(client):
    data = client.get("/api/status").get_json()

    assert data["success"] is True
    assert "giphy" in data["data"]
    assert "using_demo_key" in data["data"]
    assert data["data"]["source_available"] is True


def test_search_returns_images(client, fake_get, happy_payload):
    fake_get(happy_payload)

    response = client.post("/api/search", json={"keyword": "happy"})

    assert response.status_code == 200
    data = response.get_json()["data"]
    assert data["keyword"] == "happy"
    assert data["total_results"] == 25
    assert data["images"][0] == {"image_url": "http://media1.giphy.com/media/ENQ5oH9FHOKiI/200.gif"}


def test_search_requires_json(client):
    response = client.post("/api/search", data={"keyword": "happy"})

    assert response.status_code == 400
    assert response.get_json()["success"] is False


def test_search_upstream_failure(client, fake_get):
    fake_get(error=requests.exceptions.Timeout("timed out"))

    response = client.post("/api/search", json={"keyword": "happy"})

    assert response.status_code == 502
    assert response.get_json()["success"] is False


def test_unknown_endpoint(client):
    response = client.get("/nope")

    assert response.status_code == 404
    assert response.get_json()["error"] == "Endpoint not found"


def test_search_without_keyword_passes_empty_string(client, fake_get, happy_payload):
    fake = fake_get(happy_payload)

    response = client.post("/api/search", json={})

    assert response.status_code == 200
    assert response.get_json()["data"]["keyword"] == ""
    assert "q=&" in fake.calls[0][0]


def test_status_reports_missing_key(client, monkeypatch):
    from moodgiphs.config import Config

    monkeypatch.setattr(Config, "GIPHY_API_KEY", "")
    data = client.get("/api/status").get_json()["data"]

    assert data["giphy"] is False
    assert data["source_available"] is False
