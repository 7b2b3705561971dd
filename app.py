"""
StudyHub — Flask Web Application

Learning-platform backend: sign up, log in, browse and search materials,
complete them to earn points, and chat with a placeholder AI tutor.
"""

from __future__ import annotations

import logging
import os
from typing import Any

from flask import Flask, Response, jsonify, render_template
from flask_wtf.csrf import CSRFProtect

from auth import auth_bp, login_manager
from blueprints import register_blueprints
from errors import NotFoundError, StoreError
from extensions import limiter
from helpers import wants_json
from logging_config import init_logging
from store import init_store

logger = logging.getLogger(__name__)


def create_app(test_config: dict[str, Any] | None = None) -> Flask:
    app = Flask(__name__)

    # Load config
    from config import config_by_name
    env = os.environ.get("FLASK_ENV", "development")
    cfg = config_by_name.get(env, config_by_name["development"])
    app.config.from_object(cfg)
    if test_config is not None:
        app.config.update(test_config)
    elif hasattr(cfg, "validate"):
        cfg.validate()

    # CSRF protection
    csrf = CSRFProtect(app)
    app.extensions["csrf"] = csrf

    # Structured logging
    init_logging(app)

    # Dataset store (seeds a missing JSON file)
    init_store(app)

    # Rate limiter (disabled in testing)
    app.config["RATELIMIT_ENABLED"] = not app.config.get("TESTING", False)
    limiter.init_app(app)

    # Register auth blueprint and login manager
    app.register_blueprint(auth_bp)
    login_manager.init_app(app)

    # Register all application blueprints
    register_blueprints(app)

    @app.errorhandler(NotFoundError)
    def handle_not_found(exc: NotFoundError):
        if wants_json():
            return jsonify({"error": str(exc)}), 404
        return render_template("not_found.html", kind=exc.kind), 404

    @app.errorhandler(StoreError)
    def handle_store_error(exc: StoreError):
        logger.error("Dataset store failure (%s): %s", exc.path, exc, exc_info=exc)
        if wants_json():
            return jsonify({"error": "Something went wrong. Please try again later."}), 500
        return render_template("error.html"), 500

    # Security headers
    @app.after_request
    def set_security_headers(response: Response) -> Response:
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "SAMEORIGIN"
        response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
        return response

    return app


if __name__ == "__main__":
    application = create_app()
    application.run(debug=application.config.get("DEBUG", False), port=application.config["PORT"], threaded=True)
