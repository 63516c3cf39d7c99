"""
Generic proxy helper: one authorised upstream call, mapped onto ProxyResult.
"""

import sys
from functools import wraps
from typing import Any, Callable, Dict, Optional

from pharmadash.models import (
    NETWORK_ERROR,
    NOT_FOUND,
    PERMISSION_DENIED,
    UNAUTHORIZED,
    ActionContext,
    ProxyResult,
)


def call(
    ctx: ActionContext,
    path: str,
    method: str = "GET",
    params: Optional[Dict[str, Any]] = None,
    body: Any = None,
    files: Optional[Dict[str, Any]] = None,
    normalize: Optional[Callable[[Any], Any]] = None,
    write: bool = False,
    not_found: bool = False,
    raw: bool = False,
    failure_message: Optional[str] = None,
) -> ProxyResult:
    """Forward one request upstream on behalf of the session in *ctx*.

    Never raises: transport errors, bad JSON and normalizer errors all come
    back as NETWORK_ERROR.
    """
    session = ctx.session
    if session is None or not session.access_token:
        return ProxyResult.failure(UNAUTHORIZED, write=write)

    try:
        response = ctx.client.request(
            method, path,
            token=session.access_token,
            params=params,
            json=body,
            files=files,
        )

        status = response.status_code
        if status == 401:
            return ProxyResult.failure(UNAUTHORIZED, write=write)
        if status == 403:
            return ProxyResult.failure(PERMISSION_DENIED, write=write)
        if status == 404 and not_found:
            return ProxyResult.failure(NOT_FOUND, write=write)
        if not 200 <= status < 300:
            print(f"[proxy] {method} {path} -> HTTP {status}", file=sys.stderr)
            message = extract_message(response, failure_message) if write else None
            # keep the upstream status and body text
            return ProxyResult.failure(NETWORK_ERROR, message=message, write=write,
                                       status=status, detail=response.text or "")

        if raw:
            return ProxyResult.success(
                response.content, write=write,
                content_type=response.headers.get("Content-Type", "application/octet-stream"),
            )

        data = response.json() if response.content else None
        if normalize is not None:
            data = normalize(data)
        return ProxyResult.success(data, write=write)

    except Exception as e:
        print(f"[ERROR] {method} {path} failed: {e}", file=sys.stderr)
        return ProxyResult.failure(
            NETWORK_ERROR,
            message=failure_message if write else None,
            write=write,
        )


def guarded(fn):
    """Decorator for read actions that build their query from caller input.

    Bad arguments (a non-numeric page, filters that are not a mapping) come
    back as NETWORK_ERROR like any other proxy failure.
    """
    @wraps(fn)
    def decorated(*args, **kwargs):
        try:
            return fn(*args, **kwargs)
        except (TypeError, ValueError, AttributeError) as e:
            print(f"[ERROR] {fn.__name__} rejected its arguments: {e}", file=sys.stderr)
            return ProxyResult.failure(NETWORK_ERROR)

    return decorated


def extract_message(response, default: Optional[str] = None) -> str:
    """Best-effort server-supplied error message for a failed write."""
    fallback = default or f"Request failed with status {response.status_code}"
    try:
        payload = response.json()
    except ValueError:
        text = (response.text or "").strip()
        return text or fallback

    if isinstance(payload, dict):
        message = payload.get("message") or payload.get("error")
        if isinstance(message, list):
            message = "; ".join(str(m) for m in message)
        if message:
            return str(message)
    return fallback
