"""
Session bridge: exchanges credentials for upstream tokens and keeps them in a
signed cookie.
"""

import sys
from datetime import datetime, timedelta, timezone
from functools import wraps
from typing import Any, Dict, Optional

import jwt
import requests
from flask import g, jsonify, request

from pharmadash.config import (
    MIN_PASSWORD_LENGTH,
    SECRET_KEY,
    SESSION_COOKIE_NAME,
    SESSION_COOKIE_SECURE,
    SESSION_EXPIRY_HOURS,
)
from pharmadash.models import UNAUTHORIZED, Session


def authenticate(client, identifier: str, secret: str) -> Optional[Session]:
    """Log in against the upstream API; ``None`` means refused."""
    if not isinstance(identifier, str) or not identifier.strip():
        return None
    if not isinstance(secret, str) or len(secret) < MIN_PASSWORD_LENGTH:
        return None

    try:
        response = client.request(
            "POST", "/auth/login",
            json={"mobileNo": identifier, "password": secret},
        )
        if not response.ok:
            return None
        data = response.json()
        user = data["user"]
        return Session(
            user_id=str(user["id"]),
            display_name=user.get("userName") or "",
            mobile_no=user.get("mobileNo"),
            role=user.get("role") or "",
            warehouse_id=user.get("warehouseId"),
            pharmacy_id=user.get("pharmacyId"),
            enabled=bool(user.get("enabled", True)),
            access_token=data["accessToken"],
            refresh_token=data.get("refreshToken") or "",
        )
    except (requests.RequestException, ValueError, KeyError, TypeError) as e:
        print(f"[auth] Login request failed: {e}", file=sys.stderr)
        return None


def issue_token(session: Session, now: Optional[datetime] = None) -> str:
    """Sign *session* into a JWT that expires after SESSION_EXPIRY_HOURS."""
    now = now or datetime.now(timezone.utc)
    payload = {
        "sub": session.user_id,
        "name": session.display_name,
        "mobileNo": session.mobile_no,
        "role": session.role,
        "warehouseId": session.warehouse_id,
        "pharmacyId": session.pharmacy_id,
        "enabled": session.enabled,
        "accessToken": session.access_token,
        "refreshToken": session.refresh_token,
        "iat": now,
        "exp": now + timedelta(hours=SESSION_EXPIRY_HOURS),
    }
    return jwt.encode(payload, SECRET_KEY, algorithm="HS256")


def read_token(token: str) -> Optional[Session]:
    """Verify a session JWT and rebuild the Session (or None)."""
    payload = verify_token(token)
    if not payload or not payload.get("accessToken"):
        return None
    return Session(
        user_id=payload["sub"],
        display_name=payload.get("name") or "",
        mobile_no=payload.get("mobileNo"),
        role=payload.get("role") or "",
        warehouse_id=payload.get("warehouseId"),
        pharmacy_id=payload.get("pharmacyId"),
        enabled=bool(payload.get("enabled", True)),
        access_token=payload["accessToken"],
        refresh_token=payload.get("refreshToken") or "",
    )


def verify_token(token: str) -> Optional[Dict[str, Any]]:
    """Verify a JWT token and return the decoded payload (or None)."""
    try:
        return jwt.decode(token, SECRET_KEY, algorithms=["HS256"])
    except jwt.ExpiredSignatureError:
        return None
    except jwt.InvalidTokenError:
        return None


def current_session(req=None) -> Optional[Session]:
    """Return the session carried by the request, if any."""
    req = req if req is not None else request
    token = req.cookies.get(SESSION_COOKIE_NAME)

    # Fallback: Authorization header (Bearer <session token>)
    if not token and "Authorization" in req.headers:
        parts = req.headers["Authorization"].split(" ")
        if len(parts) == 2 and parts[0].lower() == "bearer":
            token = parts[1]

    if not token:
        return None
    return read_token(token)


def start_session(response, session: Session):
    """Attach the signed session cookie to *response*."""
    response.set_cookie(
        SESSION_COOKIE_NAME,
        issue_token(session),
        max_age=SESSION_EXPIRY_HOURS * 3600,
        httponly=True,
        secure=SESSION_COOKIE_SECURE,
        samesite="Lax",
    )
    return response


def end_session(response):
    """Drop the session cookie. The upstream tokens are not revoked."""
    response.delete_cookie(SESSION_COOKIE_NAME)
    return response


def login_required(f):
    """Decorator that rejects requests without a valid session."""
    @wraps(f)
    def decorated(*args, **kwargs):
        session = current_session()
        if session is None:
            return jsonify({"error": UNAUTHORIZED}), 401
        g.session = session
        return f(*args, **kwargs)

    return decorated
