from flask import jsonify, request
from werkzeug.exceptions import HTTPException

from locavote.services.errors import VotingError


def register_error_handlers(app):
    @app.errorhandler(VotingError)
    def handle_voting_error(error):
        app.logger.warning(
            "%s on %s: %s", type(error).__name__, request.path, error.message
        )
        return jsonify({"ok": False, "error": error.message}), error.status_code

    @app.errorhandler(Exception)
    def handle_unexpected_error(error):
        if isinstance(error, HTTPException):
            return error
        app.logger.exception("Unhandled error on %s", request.path)
        return jsonify({"ok": False, "error": str(error) or "Unknown error."}), 500
