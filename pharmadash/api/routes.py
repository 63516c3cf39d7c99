"""
Flask route handlers for the dashboard's JSON API.
"""

import inspect
import sys
import traceback
from datetime import datetime, timedelta, timezone

from flask import Response, current_app, g, jsonify, request

from pharmadash.actions import items as item_actions
from pharmadash.actions import pharmacies as pharmacy_actions
from pharmadash.actions.registry import ACTIONS, NOT_JSON, missing_fields
from pharmadash.cascade import AddressCascade
from pharmadash.config import NAME_SUGGESTION_LIMIT, SESSION_EXPIRY_HOURS
from pharmadash.fanout import load_item_form
from pharmadash.models import (
    NETWORK_ERROR,
    NOT_FOUND,
    PERMISSION_DENIED,
    UNAUTHORIZED,
    ActionContext,
)
from pharmadash.session import (
    authenticate,
    current_session,
    end_session,
    login_required,
    start_session,
)

ERROR_STATUS = {
    UNAUTHORIZED: 401,
    PERMISSION_DENIED: 403,
    NOT_FOUND: 404,
    NETWORK_ERROR: 502,
}


def action_context() -> ActionContext:
    session = g.session if "session" in g else current_session()
    return ActionContext(session=session, client=current_app.config["UPSTREAM_CLIENT"])


def respond(result):
    """Serialize a ProxyResult with the HTTP status matching its error kind."""
    status = 200 if result.ok else ERROR_STATUS.get(result.error, 502)
    return jsonify(result.to_dict()), status


def register_routes(app):
    """Register all API routes on the Flask *app*."""

    # ── Health / info ────────────────────────────────────────────────

    @app.route("/", methods=["GET"])
    def index():
        return jsonify({
            "service": "PharmaDash Admin Gateway",
            "version": "1.0.0",
            "status": "running",
            "endpoints": {
                "login": "/api/auth/login",
                "logout": "/api/auth/logout",
                "session": "/api/auth/session",
                "actions": "/api/actions/<name>",
                "health": "/health",
            },
        })

    @app.route("/health", methods=["GET"])
    def health():
        client = app.config["UPSTREAM_CLIENT"]
        checks = {"upstream": False}
        try:
            client.request("GET", "/")
            checks["upstream"] = True
        except Exception as e:
            print(f"[WARN] Upstream unreachable: {e}", file=sys.stderr)

        healthy = all(checks.values())
        return jsonify({
            "status": "healthy" if healthy else "unhealthy",
            "checks": checks,
            "upstream": client.base_url,
        }), 200 if healthy else 503

    # ── Auth ─────────────────────────────────────────────────────────

    @app.route("/api/auth/login", methods=["POST"])
    def login():
        if not request.is_json:
            return jsonify({"error": "Content-Type must be application/json"}), 400

        data = request.get_json(silent=True) or {}
        mobile_no = str(data.get("mobileNo", "")).strip()
        password = data.get("password", "")
        if not mobile_no or not password:
            return jsonify({"error": "mobileNo and password are required"}), 400

        session = authenticate(app.config["UPSTREAM_CLIENT"], mobile_no, password)
        if session is None:
            return jsonify({"error": "Invalid credentials."}), 401

        print(f"[auth] {session.display_name} signed in (role={session.role})")
        response = jsonify({
            "success": True,
            "user": session.public_view(),
            "expires_at": (datetime.now(timezone.utc)
                           + timedelta(hours=SESSION_EXPIRY_HOURS)).isoformat(),
        })
        return start_session(response, session), 200

    @app.route("/api/auth/logout", methods=["POST"])
    def logout():
        response = jsonify({"success": True, "message": "Logged out successfully"})
        return end_session(response), 200

    @app.route("/api/auth/session", methods=["GET"])
    @login_required
    def get_session():
        return jsonify({"success": True, "user": g.session.public_view()}), 200

    # ── Lookups used by the item form ────────────────────────────────

    def suggestion_lookup(action):
        session = current_session()
        if session is None:
            return jsonify({"error": UNAUTHORIZED}), 401
        try:
            limit = int(request.args.get("limit", NAME_SUGGESTION_LIMIT))
        except ValueError:
            return jsonify({"error": "limit must be an integer"}), 400

        ctx = ActionContext(session=session, client=app.config["UPSTREAM_CLIENT"])
        result = action(ctx, request.args.get("search", ""), limit)
        if result.ok:
            return jsonify({"items": result.data}), 200
        status = result.meta.get("status") or ERROR_STATUS.get(result.error, 502)
        return jsonify({"error": result.error, "detail": result.meta.get("detail")}), status

    @app.route("/api/items/forms", methods=["GET"])
    def item_forms():
        return suggestion_lookup(item_actions.fetch_item_forms)

    @app.route("/api/items/names", methods=["GET"])
    def item_names():
        return suggestion_lookup(item_actions.fetch_item_names)

    # ── Proxy actions ────────────────────────────────────────────────

    @app.route("/api/actions", methods=["GET"])
    def list_actions():
        return jsonify({"actions": sorted(n for n in ACTIONS if n not in NOT_JSON)})

    @app.route("/api/actions/<name>", methods=["POST"])
    def run_action(name):
        fn = ACTIONS.get(name)
        if fn is None or name in NOT_JSON:
            return jsonify({"error": f"Unknown action '{name}'"}), 404

        kwargs = request.get_json(silent=True) or {}
        if not isinstance(kwargs, dict):
            return jsonify({"error": "Request body must be a JSON object"}), 400

        ctx = action_context()
        try:
            inspect.signature(fn).bind(ctx, **kwargs)
        except TypeError as e:
            return jsonify({"error": "Invalid arguments", "detail": str(e)}), 400

        missing = missing_fields(name, kwargs)
        if missing:
            return jsonify({"error": "missing required fields", "detail": missing}), 400

        return respond(fn(ctx, **kwargs))

    @app.route("/api/items/<item_id>/image", methods=["POST"])
    def upload_image(item_id):
        upload = request.files.get("file")
        if upload is None or not upload.filename:
            return jsonify({"error": "file is required"}), 400
        result = item_actions.upload_item_image(
            action_context(), item_id, upload.filename, upload.read(),
            upload.mimetype or "application/octet-stream",
        )
        return respond(result)

    @app.route("/api/pharmacy-files/<file_id>/download", methods=["GET"])
    def download_file(file_id):
        result = pharmacy_actions.download_pharmacy_file(action_context(), file_id)
        if not result.ok:
            return respond(result)
        return Response(result.data, mimetype=result.meta["content_type"])

    # ── Multi-step loaders ───────────────────────────────────────────

    @app.route("/api/cascade/address", methods=["POST"])
    def address_cascade():
        data = request.get_json(silent=True) or {}
        if not isinstance(data, dict):
            return jsonify({"error": "Request body must be a JSON object"}), 400
        cascade = AddressCascade(action_context())

        try:
            if cascade.load() and data.get("stateId"):
                if cascade.select_state(data["stateId"]) and data.get("cityId"):
                    if cascade.select_city(data["cityId"]) and data.get("districtId"):
                        cascade.select_district(data["districtId"])
        except ValueError as e:
            return jsonify({"error": "Invalid selection", "detail": str(e)}), 400

        snapshot = cascade.snapshot()
        if cascade.error and not cascade.states:
            return jsonify({"error": cascade.error}), ERROR_STATUS.get(cascade.error, 502)
        return jsonify(snapshot), 200

    @app.route("/api/forms/items", methods=["POST"])
    def item_form():
        filters = request.get_json(silent=True) or {}
        if not isinstance(filters, dict):
            return jsonify({"error": "Request body must be a JSON object"}), 400
        return respond(load_item_form(action_context(), filters))

    # ── Error handlers ───────────────────────────────────────────────

    @app.errorhandler(404)
    def not_found(e):
        return jsonify({"error": "Endpoint not found", "message": str(e)}), 404

    @app.errorhandler(405)
    def method_not_allowed(e):
        return jsonify({"error": "Method not allowed", "message": str(e)}), 405

    @app.errorhandler(500)
    def internal_error(e):
        traceback.print_exc()
        return jsonify({"error": "Internal server error", "message": str(e)}), 500
