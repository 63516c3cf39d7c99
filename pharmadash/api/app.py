"""
Flask application factory and server entry-point.
"""

import os

from flask import Flask
from flask_cors import CORS

from pharmadash.api.routes import register_routes
from pharmadash.config import API_BASE_URL, SESSION_EXPIRY_HOURS, get_env
from pharmadash.upstream import UpstreamClient


def create_app(client=None):
    """Build and return a fully configured Flask application."""
    app = Flask(__name__)
    # cookies carry the session, so credentials must be allowed cross-origin
    CORS(app, supports_credentials=True)

    app.config["UPSTREAM_CLIENT"] = client if client is not None else UpstreamClient()
    print(f"[init] Upstream API: {app.config['UPSTREAM_CLIENT'].base_url}")

    register_routes(app)
    return app


def main():
    """Run the development server."""
    print("=" * 60)
    print("PharmaDash Admin Gateway")
    print("=" * 60)

    debug = os.getenv("FLASK_ENV") == "development"
    if not debug:
        # refuse to sign sessions with the development key
        get_env("SESSION_SECRET_KEY")

    app = create_app()

    host = os.getenv("API_HOST", "0.0.0.0")
    port = int(os.getenv("API_PORT", "8000"))

    print(f"\n[server] Starting Flask API on {host}:{port}")
    print(f"[server] Debug mode: {debug}")
    print(f"[server] Upstream: {API_BASE_URL}")
    print(f"[server] Session expiry: {SESSION_EXPIRY_HOURS} hours")
    print("\nAPI Endpoints:")
    print(f"  - POST http://{host}:{port}/api/auth/login")
    print(f"  - POST http://{host}:{port}/api/auth/logout")
    print(f"  - GET  http://{host}:{port}/api/auth/session")
    print(f"  - POST http://{host}:{port}/api/actions/<name>")
    print(f"  - GET  http://{host}:{port}/api/items/forms")
    print(f"  - GET  http://{host}:{port}/health")
    print("\n" + "=" * 60)

    app.run(host=host, port=port, debug=debug, threaded=True)


if __name__ == "__main__":
    main()
