import logging
import os
from typing import Optional

from flask import Flask, current_app, jsonify, request

from . import config
from .enrichment import AreaEnricher
from .events import EventPayloadError, parse_document_event
from .firestore_client import make_client, snapshot_from_event
from .geocoding import NominatimGeocoder

logging.basicConfig(level=config.LOG_LEVEL)
logger = logging.getLogger(__name__)


def build_enricher() -> AreaEnricher:
    return AreaEnricher(make_client(), NominatimGeocoder())


def _enricher() -> AreaEnricher:
    # Built once per process, on the first event
    if current_app.config.get("ENRICHER") is None:
        current_app.config["ENRICHER"] = build_enricher()
    return current_app.config["ENRICHER"]


def create_app(enricher: Optional[AreaEnricher] = None) -> Flask:
    app = Flask(__name__)
    app.config["ENRICHER"] = enricher

    @app.get("/")
    def health():
        return "ok", 200

    @app.post("/")
    def on_document_event():
        event_type = request.headers.get("ce-type")
        if event_type and event_type != config.CREATED_EVENT_TYPE:
            logger.info(f"Ignoring {event_type} event")
            return "", 204

        try:
            event = parse_document_event(request.get_json(silent=True), config.DETECTIONS_COLLECTION)
        except EventPayloadError as e:
            logger.warning(f"Rejected event payload: {e}")
            return jsonify({"ok": False, "error": str(e)}), 400

        if event is None:
            return "", 204

        enricher = _enricher()
        snapshot = snapshot_from_event(enricher.db, event)
        area = enricher.enrich(snapshot)
        return jsonify({"ok": True, "enriched": area is not None}), 200

    return app


app = create_app()

if __name__ == "__main__":
    port = int(os.environ.get("PORT", 8080))
    app.run(host="0.0.0.0", port=port, debug=False)
