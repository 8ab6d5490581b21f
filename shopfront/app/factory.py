from __future__ import annotations

import logging

from flask import Flask, g, jsonify
from werkzeug.exceptions import HTTPException

from shopfront.app.api.register import register_api_blueprints
from shopfront.app.cli import cli_bp
from shopfront.app.common.errors import ApiError
from shopfront.app.common.request_context import echo_request_id, init_request_id
from shopfront.app.config import Config
from shopfront.app.extensions import cors, db, migrate


def create_app(config_object: type[Config] = Config) -> Flask:
    app = Flask(__name__, instance_relative_config=True)
    app.config.from_object(config_object)
    app.json.sort_keys = False

    logging.basicConfig(
        level=app.config.get("LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )

    # Extensions
    db.init_app(app)
    migrate.init_app(app, db)
    cors.init_app(app, resources={r"/api/*": {"origins": app.config.get("CORS_ORIGINS") or "*"}})

    # Request id
    @app.before_request
    def _before_request():
        init_request_id()

    app.after_request(echo_request_id)

    @app.get("/health")
    def health():
        return {"status": "ok"}, 200

    register_api_blueprints(app)

    # CLI (flask init-db, flask seed)
    app.register_blueprint(cli_bp)

    # Error handlers
    @app.errorhandler(ApiError)
    def handle_api_error(err: ApiError):
        return jsonify(err.to_dict(getattr(g, "request_id", None))), err.status_code

    @app.errorhandler(HTTPException)
    def handle_http_exception(err: HTTPException):
        # Normalize Werkzeug errors into our JSON shape
        code = "not_found" if err.code == 404 else "http_error"
        payload = {
            "error": {
                "code": code,
                "message": err.description,
                "details": {"name": err.name},
                "request_id": getattr(g, "request_id", None),
            }
        }
        return jsonify(payload), err.code or 500

    @app.errorhandler(Exception)
    def handle_unexpected(err: Exception):
        app.logger.exception("Unhandled exception")
        payload = {
            "error": {
                "code": "internal_error",
                "message": "Internal server error",
                "details": {},
                "request_id": getattr(g, "request_id", None),
            }
        }
        return jsonify(payload), 500

    return app
