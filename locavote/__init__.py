from flask import Flask

from locavote.config import Config
from locavote.extensions import db, migrate
from locavote.routes import register_routes
from locavote.services.voting.results import WEIGHTING_MODES


def create_app(test_config=None):
    app = Flask(__name__)
    app.config.from_object(Config)
    if test_config:
        app.config.update(test_config)

    app.logger.setLevel(app.config["LOG_LEVEL"])

    if app.config["RESULTS_WEIGHTING"] not in WEIGHTING_MODES:
        raise ValueError(
            f"RESULTS_WEIGHTING must be one of {', '.join(WEIGHTING_MODES)}, "
            f"got {app.config['RESULTS_WEIGHTING']!r}"
        )

    db.init_app(app)
    migrate.init_app(app, db)

    register_routes(app)
    return app


__all__ = ["db", "migrate", "create_app"]
