from locavote.routes.errors import register_error_handlers
from locavote.routes.public import register_public_routes
from locavote.routes.results import register_results_routes


def register_routes(app):
    register_error_handlers(app)
    register_public_routes(app)
    register_results_routes(app)
