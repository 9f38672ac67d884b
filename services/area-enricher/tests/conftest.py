from unittest.mock import Mock

import pytest

from area_enricher.geocoding import NominatimGeocoder


def _response(payload, status_code=200):
    response = Mock()
    response.status_code = status_code
    response.json.return_value = payload
    return response


@pytest.fixture
def nominatim_response():
    return _response


@pytest.fixture
def session():
    session = Mock()
    session.get.return_value = _response({"address": {}})
    return session


@pytest.fixture
def geocoder(session):
    return NominatimGeocoder(session=session)


@pytest.fixture
def detection_snapshot():
    snapshot = Mock()
    snapshot.to_dict.return_value = {
        "location": {"lat": 14.5995, "lng": 120.9842},
        "trashType": "plastic",
    }
    snapshot.reference.path = "detections/abc123"
    return snapshot
