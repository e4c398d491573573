from flask import Blueprint, current_app, jsonify, request

from .handler import METHOD_NOT_ALLOWED

api_bp = Blueprint("api", __name__)

# Every method reaches the relay so non-POST requests get its 405 body.
RELAY_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


@api_bp.route("/api/chat", methods=RELAY_METHODS, provide_automatic_options=False)
@api_bp.route("/api/generate", methods=RELAY_METHODS, provide_automatic_options=False)
def generate():
    relay = current_app.extensions["prompt_relay"]
    status_code, body = relay.handle(request.method, request.get_json(silent=True))
    if status_code == 405:
        return jsonify(body), status_code, {"Allow": "POST"}
    return jsonify(body), status_code


@api_bp.app_errorhandler(405)
def method_not_allowed(error):
    headers = {}
    if error.valid_methods:
        headers["Allow"] = ", ".join(error.valid_methods)
    return jsonify({"message": METHOD_NOT_ALLOWED}), 405, headers
