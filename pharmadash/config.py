"""
Centralised configuration constants and environment helpers.
"""

import os
import sys

from dotenv import load_dotenv

load_dotenv()

# ── Upstream API ─────────────────────────────────────────────────────
API_BASE_URL = os.getenv("PHARMA_API_URL", "http://localhost:3001").rstrip("/")

# Seconds; unset means requests' default (wait indefinitely).
_timeout = os.getenv("UPSTREAM_TIMEOUT")
UPSTREAM_TIMEOUT = float(_timeout) if _timeout else None

# ── Session ──────────────────────────────────────────────────────────
SECRET_KEY = os.getenv("SESSION_SECRET_KEY", "dev-secret-key-change-in-production")
SESSION_EXPIRY_HOURS = int(os.getenv("SESSION_EXPIRY_HOURS", str(30 * 24)))
SESSION_COOKIE_NAME = os.getenv("SESSION_COOKIE_NAME", "pharmadash_session")
SESSION_COOKIE_SECURE = os.getenv("SESSION_COOKIE_SECURE", "false").lower() == "true"
MIN_PASSWORD_LENGTH = 6

ROLES = {
    "admin", "warehouse_manager", "warehouse_user",
    "pharmacy_manager", "pharmacy_user",
}

# ── Listing defaults ─────────────────────────────────────────────────
DEFAULT_PAGE_SIZE = 20
MANUFACTURER_LIST_LIMIT = 500
FORM_WAREHOUSE_LIMIT = 100
NAME_SUGGESTION_LIMIT = 10


def get_env(name: str) -> str:
    """Return an environment variable or exit with an error message."""
    value = os.getenv(name)
    if not value:
        print(f"ERROR: env var {name} is not set", file=sys.stderr)
        sys.exit(1)
    return value
