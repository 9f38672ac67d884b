from typing import Any, Dict, Optional

from google.cloud import firestore

from . import config


def make_client(project: Optional[str] = None) -> firestore.Client:
    # Uses ADC and GOOGLE_CLOUD_PROJECT when project is None
    return firestore.Client(project=project)


def detection_ref(db: firestore.Client, doc_id: Optional[str],
                  collection: str = config.DETECTIONS_COLLECTION):
    return db.collection(collection).document(doc_id)


def snapshot_from_event(db: firestore.Client, event) -> firestore.DocumentSnapshot:
    ref = db.document(event.path)
    return firestore.DocumentSnapshot(
        ref,
        event.data,
        True,
        None,
        event.create_time,
        event.update_time,
    )


def write_area(ref, area: Dict[str, Any]) -> None:
    # update() merges only the named field and leaves the rest of the document alone
    ref.update({"area": area})
