"""Write a test detection so the enrichment trigger can be exercised end to end."""
import os

from google.cloud import firestore

from . import config
from .firestore_client import detection_ref, make_client

# Manila
DEFAULT_LAT = 14.5995
DEFAULT_LNG = 120.9842


def write_test_detection(db, lat: float, lng: float, trash_type: str = "plastic",
                         collection: str = config.DETECTIONS_COLLECTION):
    ref = detection_ref(db, None, collection)
    ref.set({
        "location": {"lat": lat, "lng": lng},
        "trashType": trash_type,
        "createdAt": firestore.SERVER_TIMESTAMP,
    })
    return ref


def main():
    lat = float(os.environ.get("SEED_LAT", DEFAULT_LAT))
    lng = float(os.environ.get("SEED_LNG", DEFAULT_LNG))
    trash_type = os.environ.get("SEED_TRASH_TYPE", "plastic")

    db = make_client()
    print("Using Firestore project:", db.project)
    ref = write_test_detection(db, lat, lng, trash_type)
    print("Wrote:", ref.path, "->", {"lat": lat, "lng": lng, "trashType": trash_type})


if __name__ == "__main__":
    main()
