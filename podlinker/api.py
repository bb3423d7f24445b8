"""JSON endpoint: POST {"showName", "episodeTitle"} -> podlink or classified error."""
from __future__ import annotations
from flask import Flask, jsonify, request
from flask_cors import CORS

from . import config
from .log import get_logger, setup_logging
from .resolvers.orchestrator import handle_request

logger = get_logger(__name__)


def create_app() -> Flask:
    app = Flask(__name__)
    CORS(app, resources={
        r"/*": {
            "origins": "*",
            "methods": ["POST", "OPTIONS"],
            "allow_headers": ["Content-Type"],
        }
    }, send_wildcard=True)

    @app.route("/", methods=["POST"])
    def resolve():
        body = request.get_json(force=True, silent=True)
        if body is None:
            return jsonify({"error": "Invalid JSON body", "message": "Request body must be valid JSON"}), 400
        status, payload = handle_request(body)
        return jsonify(payload), status

    @app.errorhandler(405)
    def method_not_allowed(_e):
        return jsonify({"error": "Method not allowed. Use POST."}), 405

    @app.errorhandler(404)
    def not_found(_e):
        return jsonify({"error": "Not found", "message": f"No route for {request.path}"}), 404

    return app


def main() -> None:
    setup_logging()
    logger.info("Serving podlinker API on %s:%s", config.API_HOST, config.API_PORT)
    create_app().run(host=config.API_HOST, port=config.API_PORT)


if __name__ == "__main__":
    main()
