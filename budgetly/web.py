"""Flask app exposing the Plaid proxy endpoints to the Budgetly app."""

from typing import Callable, Optional

from flask import Flask, g, jsonify, request
from flask_cors import CORS

from budgetly import proxy
from budgetly.errors import MalformedResponseError, UpstreamError, ValidationError
from budgetly.logger import get_logger
from budgetly.models.config import PlaidConfig
from budgetly.plaid_client import PlaidClient

logger = get_logger("budgetly.web")

PORT = 8080
USER_ID_HEADER = "X-User-Id"


def session_user_id() -> Optional[str]:
    """Read the caller's user id from the request session."""
    return g.get("user_id")


def create_app(
    config: PlaidConfig,
    client: Optional[PlaidClient] = None,
    user_id_provider: Callable[[], Optional[str]] = session_user_id,
) -> Flask:
    """Create Flask app with all routes."""
    app = Flask(__name__)
    CORS(
        app,
        origins="*",
        send_wildcard=True,
        methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Accept", "Content-Type", "Origin", "Authorization", USER_ID_HEADER],
    )
    plaid = client or PlaidClient(config)

    @app.before_request
    def load_session_user():
        """Attach the caller's user id to the request session."""
        user_id = request.headers.get(USER_ID_HEADER, "").strip()
        g.user_id = user_id or None

    @app.route("/create_link_token", methods=["POST"])
    def create_link_token():
        """Create a link_token for the iOS Link flow."""
        response = proxy.create_link_token(plaid, user_id_provider())
        return jsonify(response.model_dump(exclude_unset=True))

    @app.route("/exchange_public_token", methods=["POST"])
    def exchange_public_token():
        """Exchange public_token, then return the last 30 days of transactions."""
        body = request.get_json(silent=True)
        transactions = proxy.exchange_and_fetch(plaid, body)
        return jsonify(transactions.model_dump())

    @app.route("/status")
    def status():
        """Health check endpoint."""
        return jsonify({"status": "running", "environment": config.environment})

    @app.errorhandler(ValidationError)
    def handle_validation_error(e: ValidationError):
        return jsonify({"error": str(e)}), 400

    @app.errorhandler(UpstreamError)
    def handle_upstream_error(e: UpstreamError):
        return jsonify({
            "error": f"Plaid error {e.status}",
            "upstream_status": e.status,
            "upstream_body": e.body,
        }), 400

    @app.errorhandler(MalformedResponseError)
    def handle_malformed_response(e: MalformedResponseError):
        return jsonify({"error": "Internal server error"}), 500

    return app


def start_server(config: PlaidConfig, host: str = "0.0.0.0", port: int = PORT):
    """Run the backend with Flask's threaded server."""
    app = create_app(config)
    logger.info(f"Starting Budgetly backend on http://{host}:{port} (Plaid {config.environment})")
    app.run(host=host, port=port, debug=False, threaded=True)
