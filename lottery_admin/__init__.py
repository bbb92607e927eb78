"""Flask application package for the lottery admin dashboard."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from dotenv import load_dotenv
from flask import Flask


def create_app(overrides: Mapping[str, Any] | None = None) -> Flask:
    """Application factory.

    Args:
        overrides: Config values applied on top of the environment's config
            class (tests and scripts use this to point at another database).

    Returns:
        Configured Flask application.
    """
    load_dotenv()

    from lottery_admin.config import get_config
    from lottery_admin.db import init_db
    from lottery_admin.error_handlers import register_error_handlers
    from lottery_admin.logging_config import configure_logging
    from lottery_admin.routes.auth import auth_bp
    from lottery_admin.routes.draws import draws_bp
    from lottery_admin.routes.health import health_bp
    from lottery_admin.routes.tickets import tickets_bp
    from lottery_admin.routes.users import users_bp
    from lottery_admin.routes.web import web_bp
    from lottery_admin.routes.winning_numbers import winning_numbers_bp

    app = Flask(__name__)
    app.config.from_object(get_config())
    if overrides:
        app.config.update(overrides)

    configure_logging(app)
    init_db(app)
    register_error_handlers(app)

    app.register_blueprint(health_bp)
    app.register_blueprint(web_bp)
    app.register_blueprint(auth_bp, url_prefix="/api")
    app.register_blueprint(draws_bp, url_prefix="/api")
    app.register_blueprint(winning_numbers_bp, url_prefix="/api")
    app.register_blueprint(tickets_bp, url_prefix="/api")
    app.register_blueprint(users_bp, url_prefix="/api")

    return app
