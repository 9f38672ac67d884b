"""
Reverse geocoding against OpenStreetMap's Nominatim API.

One GET per call, without caching or retries. HTTP errors are
raised to the caller.
"""
import logging
from dataclasses import dataclass, fields
from typing import Any, Dict, Optional

import requests

from . import config

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NominatimAddress:
    """The subset of Nominatim's `address` breakdown this service reads."""

    country: Optional[str] = None
    state: Optional[str] = None
    county: Optional[str] = None
    city: Optional[str] = None
    town: Optional[str] = None
    village: Optional[str] = None
    suburb: Optional[str] = None
    neighbourhood: Optional[str] = None
    quarter: Optional[str] = None

    @classmethod
    def from_payload(cls, payload: Any) -> "NominatimAddress":
        address = payload.get("address") if isinstance(payload, dict) else None
        if not isinstance(address, dict):
            return cls()
        # Empty strings are treated the same as missing keys
        values = {f.name: address.get(f.name) or None for f in fields(cls)}
        return cls(**values)


class NominatimGeocoder:
    def __init__(self, session: Optional[requests.Session] = None,
                 base_url: str = config.NOMINATIM_URL,
                 user_agent: str = config.GEOCODER_USER_AGENT,
                 zoom: int = config.GEOCODER_ZOOM,
                 timeout: Optional[float] = config.GEOCODER_TIMEOUT_S):
        self.session = session or requests.Session()
        self.base_url = base_url
        self.user_agent = user_agent
        self.zoom = zoom
        self.timeout = timeout

    def build_params(self, lat, lng) -> Dict[str, Any]:
        return {
            "format": "json",
            "lat": lat,
            "lon": lng,
            "zoom": self.zoom,
            "addressdetails": 1,
        }

    def reverse(self, lat, lng) -> NominatimAddress:
        """
        Look up the administrative address for a coordinate pair.

        Args:
            lat: Latitude, passed through as-is
            lng: Longitude, passed through as-is

        Returns:
            NominatimAddress with every field the response did not carry set to None

        Raises:
            requests.RequestException: connection failure or non-2xx response
        """
        response = self.session.get(
            self.base_url,
            params=self.build_params(lat, lng),
            headers={"User-Agent": self.user_agent},
            timeout=self.timeout,
        )
        response.raise_for_status()
        logger.debug(f"Nominatim answered {response.status_code} for ({lat}, {lng})")
        return NominatimAddress.from_payload(response.json())
