"""Flask application factory for the InputMask backend."""

from __future__ import annotations

import logging

from flask import Flask, Response
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from src.backend.routes.api import api_bp
from src.common.settings import get_settings


def create_app() -> Flask:
    settings = get_settings()
    if settings.log_json:
        logging.basicConfig(
            level=settings.log_level,
            format='{"time":"%(asctime)s","level":"%(levelname)s","logger":"%(name)s","message":"%(message)s"}',
        )
    else:
        logging.basicConfig(level=settings.log_level)

    app = Flask(__name__)
    app.register_blueprint(api_bp, url_prefix="/api")

    @app.get("/metrics")
    def metrics():
        return Response(generate_latest(), mimetype=CONTENT_TYPE_LATEST)

    return app


if __name__ == "__main__":  # pragma: no cover
    settings = get_settings()
    app = create_app()
    app.run(host=settings.api_host, port=settings.api_port, debug=True)
