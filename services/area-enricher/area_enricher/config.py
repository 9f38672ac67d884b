import os

DETECTIONS_COLLECTION = os.getenv("DETECTIONS_COLLECTION", "detections")

NOMINATIM_URL = os.getenv("NOMINATIM_URL", "https://nominatim.openstreetmap.org/reverse")
GEOCODER_USER_AGENT = os.getenv("GEOCODER_USER_AGENT", "AGOS-Bot/1.0 (your_email@example.com)")
GEOCODER_ZOOM = int(os.getenv("GEOCODER_ZOOM", "18"))

# Unset means no timeout; the hosting runtime's limit applies.
_timeout = os.getenv("GEOCODER_TIMEOUT_S")
GEOCODER_TIMEOUT_S = float(_timeout) if _timeout else None

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

CREATED_EVENT_TYPE = "google.cloud.firestore.document.v1.created"
