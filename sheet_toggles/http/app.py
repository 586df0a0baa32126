from __future__ import annotations

import json
import logging

from flask import Flask, Response, jsonify, request

from ..config.loader import Settings
from ..errors import ToggleError
from ..services.request import parse_request
from ..services.toggles import RowSource, error_response, get_toggles
from ..sheets.factory import make_source

"""HTTP shell.

GET /?sheet=<document id>&toggles=a,b  ->  200 {"toggles": [...], "fetchedAt": ...}
Any failure (bad query, unreadable sheet, missing credentials) -> 500 with the
error description as a JSON string.
"""

__all__ = [
    "create_app",
    "serve",
]

logger = logging.getLogger(__name__)


def _json_response(status_code: int, body: object) -> Response:
    return Response(json.dumps(body), status=status_code, mimetype="application/json")


def create_app(settings: Settings | None = None, source: RowSource | None = None) -> Flask:
    """Application factory.

    ``source`` overrides the row source built from ``settings``; tests pass a
    file source or a stub. The configured source is built per request so a
    missing credential shows up as a 500 rather than a startup crash.
    """
    app = Flask(__name__)
    app.config["SETTINGS"] = settings or Settings()

    def _row_source() -> RowSource:
        if source is not None:
            return source
        return make_source(app.config["SETTINGS"])

    @app.route("/")
    def toggles():
        try:
            toggle_request = parse_request(request.args.to_dict())
            response = get_toggles(toggle_request, _row_source())
        except ToggleError as e:
            response = error_response(e)
        return _json_response(response.status_code, response.body)

    @app.route("/health")
    def health_check():
        return jsonify({"status": "healthy"})

    @app.errorhandler(404)
    def not_found(error):
        return jsonify({"error": "Endpoint not found"}), 404

    @app.errorhandler(500)
    def internal_error(error):
        logger.error(f"Internal error: {error}")
        return jsonify({"error": "Internal server error"}), 500

    return app


def serve(settings: Settings) -> None:  # pragma: no cover (blocking server loop)
    app = create_app(settings)
    logger.info(f"server listening on {settings.server.host}:{settings.server.port}")
    app.run(host=settings.server.host, port=settings.server.port)
