"""Application factory and app-wide configuration."""

import logging
from http import HTTPStatus
from typing import Optional

from flask import Flask, jsonify
from flask_cors import CORS
from werkzeug.exceptions import BadRequest

from epf_projection.app.api.routes import api_bp
from epf_projection.config import AppSettings
from epf_projection.logging_config import configure_logging

logger = logging.getLogger(__name__)


def create_app(settings: Optional[AppSettings] = None) -> Flask:
    """Build the Flask app instance."""
    settings = settings or AppSettings()
    configure_logging(settings.log_level)

    app = Flask(__name__)
    app.config["DEBUG"] = settings.debug
    app.extensions["epf_settings"] = settings

    CORS(
        app,
        resources={r"/api/*": {"origins": settings.cors_origins}},
        supports_credentials=True,
    )

    @app.errorhandler(BadRequest)
    def _handle_bad_request(exc: BadRequest):
        return jsonify({"detail": exc.description}), HTTPStatus.BAD_REQUEST

    app.register_blueprint(api_bp, url_prefix="/api")
    logger.info(
        "%s ready (max_years=%d, origins=%s)",
        settings.service_name,
        settings.max_years,
        ",".join(settings.cors_origins),
    )
    return app
