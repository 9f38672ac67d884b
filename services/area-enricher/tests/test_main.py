"""Tests for the Flask event receiver."""

from unittest.mock import Mock, patch

import pytest

from area_enricher.enrichment import Area
from area_enricher.main import create_app

CREATED = {"ce-type": "google.cloud.firestore.document.v1.created"}

EVENT = {
    "value": {
        "name": "projects/agos-dev/databases/(default)/documents/detections/abc123",
        "fields": {
            "location": {"mapValue": {"fields": {
                "lat": {"doubleValue": 14.5995},
                "lng": {"doubleValue": 120.9842},
            }}},
            "trashType": {"stringValue": "plastic"},
        },
    }
}


@pytest.fixture
def enricher():
    enricher = Mock()
    enricher.enrich.return_value = Area(country="Philippines", city="Manila")
    return enricher


@pytest.fixture
def client(enricher):
    return create_app(enricher).test_client()


def test_health(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.data == b"ok"


def test_created_event_is_enriched(client, enricher):
    response = client.post("/", json=EVENT, headers=CREATED)

    assert response.status_code == 200
    assert response.get_json() == {"ok": True, "enriched": True}
    (snapshot,), _ = enricher.enrich.call_args
    assert snapshot.to_dict()["location"] == {"lat": 14.5995, "lng": 120.9842}
    enricher.db.document.assert_called_once_with("detections/abc123")


def test_failed_enrichment_is_still_acknowledged(client, enricher):
    enricher.enrich.return_value = None

    response = client.post("/", json=EVENT, headers=CREATED)

    assert response.status_code == 200
    assert response.get_json() == {"ok": True, "enriched": False}


def test_update_events_are_ignored(client, enricher):
    response = client.post("/", json=EVENT, headers={"ce-type": "google.cloud.firestore.document.v1.updated"})

    assert response.status_code == 204
    enricher.enrich.assert_not_called()


def test_other_collections_are_ignored(client, enricher):
    body = {"value": {"name": "projects/p/databases/(default)/documents/reports/r1", "fields": {}}}

    response = client.post("/", json=body, headers=CREATED)

    assert response.status_code == 204
    enricher.enrich.assert_not_called()


def test_bad_payload_is_rejected(client, enricher):
    response = client.post("/", data="not json", headers=CREATED)

    assert response.status_code == 400
    assert response.get_json()["ok"] is False
    enricher.enrich.assert_not_called()


def test_enricher_is_built_once():
    built = Mock()
    built.enrich.return_value = None
    with patch("area_enricher.main.build_enricher", return_value=built) as build:
        client = create_app().test_client()
        client.post("/", json=EVENT, headers=CREATED)
        client.post("/", json=EVENT, headers=CREATED)

    build.assert_called_once_with()
    assert built.enrich.call_count == 2
