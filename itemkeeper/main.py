"""Flask application entry point."""

import logging
from datetime import timedelta

from flask import Flask, jsonify
from flask_cors import CORS
from werkzeug.exceptions import HTTPException

from .auth.service import CredentialStore
from .auth.token import TokenCodec
from .config import Settings, settings
from .db import Core, ItemStore
from .db.seed import seed_items, seed_users
from .exceptions import ItemKeeperError
from .utils import isodatetime

# Configure logging
logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


# Error handlers
def handle_item_keeper_error(error: ItemKeeperError):
    """Handle ItemKeeperError exceptions with their own status code."""
    response = {"error": error.message}
    if error.details:
        response["details"] = error.details
    return jsonify(response), error.status_code


def handle_http_exception(error: HTTPException):
    """Handle routing errors (unknown path, wrong method) as JSON."""
    return jsonify({"error": error.name}), error.code


def handle_internal_error(error: Exception):
    """Handle unexpected exceptions."""
    logger.exception(f"Internal error: {error}")
    return jsonify({"error": "Server error"}), 500


# Health check endpoint
def health():
    """Health check endpoint."""
    return jsonify({"status": "OK", "timestamp": isodatetime.now()})


def create_app(
    config: Settings | None = None,
    users: CredentialStore | None = None,
    items: ItemStore | None = None,
) -> Flask:
    """
    Create a Flask app with its own stores.

    Args:
        config: Settings override (defaults to the environment settings)
        users: Credential store (defaults to the seeded admin user)
        items: Item store (defaults to the seeded sample items)

    Returns:
        Configured Flask application
    """
    config = config or settings

    app = Flask(__name__)

    # CORS configuration (allow-all by default)
    CORS(app, origins=config.cors_origins)

    if users is None:
        users = CredentialStore(seed_users(), work_factor=config.bcrypt_work_factor)
    if items is None:
        items = ItemStore(seed_items())

    tokens = TokenCodec(
        config.jwt_secret_key,
        algorithm=config.jwt_algorithm,
        default_ttl=timedelta(seconds=config.token_ttl_seconds),
    )
    Core(users=users, items=items, tokens=tokens).init_app(app)

    app.register_error_handler(ItemKeeperError, handle_item_keeper_error)
    app.register_error_handler(HTTPException, handle_http_exception)
    app.register_error_handler(Exception, handle_internal_error)

    app.add_url_rule("/health", view_func=health, methods=["GET"])

    # Register API blueprints
    from .api.items import items_bp
    from .auth.api import auth_bp

    app.register_blueprint(auth_bp)
    app.register_blueprint(items_bp)

    logger.info(f"App created with {len(users)} user(s) and {len(items)} item(s)")
    return app


app = create_app()


def run():
    """Run the development server."""
    logger.info(f"Server running on port {settings.port}")
    app.run(host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
