import hmac
import uuid

from flask import current_app


def generate_submission_token():
    return uuid.uuid4().hex


def results_key_configured():
    return bool(current_app.config.get("RESULTS_VIEW_KEY"))


def results_key_matches(provided_key):
    required_key = current_app.config.get("RESULTS_VIEW_KEY") or ""
    if not required_key:
        return False
    return hmac.compare_digest(
        (provided_key or "").encode("utf-8"), required_key.encode("utf-8")
    )
