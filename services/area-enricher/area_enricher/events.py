"""
Decoding of Firestore document events delivered as JSON.

The payload is a DocumentEventData message in its JSON form:

    {"value": {"name": "projects/p/databases/(default)/documents/detections/abc",
               "fields": {"location": {"mapValue": {"fields": {...}}}},
               "createTime": "...", "updateTime": "..."}}
"""
import base64
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from google.api_core.datetime_helpers import DatetimeWithNanoseconds
from google.cloud.firestore import GeoPoint


class EventPayloadError(ValueError):
    """The request body is not a Firestore document event."""


@dataclass
class DocumentEvent:
    path: str
    data: Dict[str, Any] = field(default_factory=dict)
    create_time: Optional[DatetimeWithNanoseconds] = None
    update_time: Optional[DatetimeWithNanoseconds] = None

    @property
    def doc_id(self) -> str:
        return self.path.rsplit("/", 1)[-1]


def decode_value(value: Dict[str, Any]) -> Any:
    if "nullValue" in value:
        return None
    if "booleanValue" in value:
        return bool(value["booleanValue"])
    if "integerValue" in value:
        # int64 travels as a string in JSON
        return int(value["integerValue"])
    if "doubleValue" in value:
        return float(value["doubleValue"])
    if "stringValue" in value:
        return value["stringValue"]
    if "bytesValue" in value:
        return base64.b64decode(value["bytesValue"])
    if "timestampValue" in value:
        return DatetimeWithNanoseconds.from_rfc3339(value["timestampValue"])
    if "geoPointValue" in value:
        point = value["geoPointValue"]
        return GeoPoint(point.get("latitude", 0.0), point.get("longitude", 0.0))
    if "referenceValue" in value:
        return value["referenceValue"]
    if "arrayValue" in value:
        return [decode_value(v) for v in value["arrayValue"].get("values", [])]
    if "mapValue" in value:
        return decode_fields(value["mapValue"].get("fields", {}))
    raise EventPayloadError(f"Unsupported Firestore value: {sorted(value)}")


def decode_fields(fields: Dict[str, Any]) -> Dict[str, Any]:
    return {name: decode_value(v) for name, v in fields.items()}


def _relative_path(name: str) -> str:
    marker = "/documents/"
    if marker not in name:
        raise EventPayloadError(f"Not a document resource name: {name}")
    return name.split(marker, 1)[1]


def _timestamp(raw: Optional[str]) -> Optional[DatetimeWithNanoseconds]:
    return DatetimeWithNanoseconds.from_rfc3339(raw) if raw else None


def parse_document_event(body: Any, collection: str) -> Optional[DocumentEvent]:
    """
    Decode the new document of a created event.

    Returns None when the document is not a direct child of `collection`.

    Raises:
        EventPayloadError: body is not a document event
    """
    if not isinstance(body, dict) or not isinstance(body.get("value"), dict):
        raise EventPayloadError("Missing 'value' document")
    value = body["value"]
    name = value.get("name")
    if not name:
        raise EventPayloadError("Missing 'value.name'")

    path = _relative_path(name)
    segments = path.split("/")
    if len(segments) != 2 or segments[0] != collection:
        return None

    return DocumentEvent(
        path=path,
        data=decode_fields(value.get("fields", {})),
        create_time=_timestamp(value.get("createTime")),
        update_time=_timestamp(value.get("updateTime")),
    )
