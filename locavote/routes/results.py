from flask import Response, jsonify, request

from locavote.services.errors import AccessDenied, ResultsKeyNotConfigured
from locavote.services.export import results_to_csv
from locavote.services.security import results_key_configured, results_key_matches
from locavote.services.voting import load_results


def register_results_routes(app):
    def require_results_key():
        if not results_key_configured():
            app.logger.error("RESULTS_VIEW_KEY is not set; results are unavailable")
            raise ResultsKeyNotConfigured()
        if not results_key_matches(request.args.get("key", "")):
            raise AccessDenied()

    @app.route("/api/results")
    def results():
        require_results_key()
        return jsonify({"ok": True, "rows": load_results()})

    @app.route("/api/results.csv")
    def results_csv():
        require_results_key()
        return Response(
            results_to_csv(load_results()),
            status=200,
            headers={
                "Content-Type": "text/csv; charset=utf-8",
                "Content-Disposition": 'attachment; filename="uitslag.csv"',
                "Cache-Control": "no-store",
            },
        )
