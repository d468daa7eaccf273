"""Tests for the HTTP API."""

import pytest
from fastapi.testclient import TestClient

import api.index as api_module


@pytest.fixture
def client():
    return TestClient(api_module.app)


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"ok": True}


def test_match_with_empty_body_uses_defaults(client):
    response = client.post("/match", json={})

    assert response.status_code == 200
    body = response.json()
    assert body["total"] == 54
    assert body["flavorScore"] == 50
    assert body["sensoryScore"] == 60
    assert body["highMatch"] is False
    assert body["details"] is None


def test_match_with_details_and_warnings(client):
    response = client.post(
        "/match",
        json={
            "roasterNotes": "Blueberry, Honey, Clean finish",
            "selectedFlavors": {"level1": ["Fruity"], "level2": ["Berry", "Cocoa"], "level3": ["Blueberry"]},
            "sensoryAttributes": {"sweetness": 4, "finish": 2, "mouthfeel": "Clean"},
            "includeDetails": True,
        },
    )

    assert response.status_code == 200
    body = response.json()
    assert body["details"]["matchedFlavors"] == ["blueberry"]
    assert "mouthfeel: clean" in body["details"]["sensoryMatches"]
    assert body["warnings"] == ["level2:Cocoa"]


def test_match_rejects_invalid_rating(client):
    response = client.post("/match", json={"sensoryAttributes": {"body": 9}})

    assert response.status_code == 422


def test_match_rejects_long_notes(client, monkeypatch):
    monkeypatch.setattr(api_module, "MAX_NOTES_CHARS", 10)

    response = client.post("/match", json={"roasterNotes": "Blueberry, Honey, Clean finish"})

    assert response.status_code == 413


def test_taxonomy_latest(client):
    response = client.get("/taxonomy/latest")

    assert response.status_code == 200
    assert response.json()["options_url"] == f"/taxonomy/{api_module.TAXONOMY_VERSION}/options"


def test_taxonomy_options_by_level(client):
    response = client.get("/taxonomy/v1/options", params={"level": 1})

    assert response.status_code == 200
    body = response.json()
    assert body["total"] == 9
    assert body["options"][0] == {"level": 1, "label_en": "Fruity", "label_ko": "과일", "parents": []}


def test_taxonomy_options_include_parents(client):
    body = client.get("/taxonomy/v1/options", params={"level": 3}).json()

    blueberry = next(item for item in body["options"] if item["label_en"] == "Blueberry")
    assert blueberry["parents"] == ["Berry"]


def test_taxonomy_options_invalid_level(client):
    response = client.get("/taxonomy/v1/options", params={"level": 7})

    assert response.status_code == 400


def test_taxonomy_options_unknown_version(client):
    response = client.get("/taxonomy/v9/options")

    assert response.status_code == 404
