"""
Enrichment of newly created trash detections with their administrative area.
"""
import logging
from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional

from .firestore_client import write_area
from .geocoding import NominatimAddress, NominatimGeocoder

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Location:
    lat: Any
    lng: Any


@dataclass(frozen=True)
class TrashDetection:
    """Typed view over a detection document. Nothing is validated."""

    location: Location
    trash_type: Optional[str]

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TrashDetection":
        loc = data.get("location") or {}
        return cls(
            location=Location(lat=loc.get("lat"), lng=loc.get("lng")),
            trash_type=data.get("trashType"),
        )


@dataclass(frozen=True)
class Area:
    country: Optional[str] = None
    region: Optional[str] = None
    province: Optional[str] = None
    city: Optional[str] = None
    barangay: Optional[str] = None

    def to_dict(self) -> Dict[str, Optional[str]]:
        return asdict(self)


def normalize_area(address: NominatimAddress) -> Area:
    """Map Nominatim's address breakdown onto the five area fields, first match wins."""
    return Area(
        country=address.country,
        region=address.state,
        province=address.county,
        city=address.city or address.town or address.village,
        barangay=address.suburb or address.neighbourhood or address.quarter,
    )


def _describe(err: BaseException) -> str:
    return str(err) or repr(err)


class AreaEnricher:
    """Reverse-geocodes a detection and merges `area` onto its document."""

    def __init__(self, db, geocoder: NominatimGeocoder):
        self.db = db
        self.geocoder = geocoder

    def enrich(self, snapshot) -> Optional[Area]:
        """
        Enrich one newly created detection.

        Failures are logged and swallowed; the document is then left without `area`.

        Returns:
            The Area written, or None if any step failed
        """
        try:
            detection = TrashDetection.from_dict(snapshot.to_dict() or {})
            address = self.geocoder.reverse(detection.location.lat, detection.location.lng)
            area = normalize_area(address)
            write_area(snapshot.reference, area.to_dict())
        except Exception as e:
            logger.error(f"Reverse geocoding failed: {_describe(e)}")
            return None

        logger.info(f"Wrote area for {snapshot.reference.path}: {area.city}, {area.country}")
        return area
