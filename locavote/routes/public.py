from flask import jsonify, request

from locavote.services.errors import MalformedRequest
from locavote.services.voting import list_locations, record_submission, validate_selections


def register_public_routes(app):
    @app.route("/api/locations")
    def locations():
        catalog = [location.to_catalog_entry() for location in list_locations()]
        return jsonify({"ok": True, "locations": catalog})

    @app.route("/api/submit", methods=["POST"])
    def submit():
        # Parsed regardless of Content-Type; only an unparseable body is malformed.
        body = request.get_json(force=True, silent=True)
        if not isinstance(body, dict):
            raise MalformedRequest("Invalid JSON.")

        raw_selections = body.get("selections")
        if raw_selections is None:
            raw_selections = []

        selections = validate_selections(raw_selections)
        record_submission(selections)
        return jsonify({"ok": True})
