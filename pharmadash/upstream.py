"""
Thin HTTP client for the external pharmacy/warehouse API.
"""

from typing import Any, Dict, Optional

import requests

from pharmadash.config import API_BASE_URL, UPSTREAM_TIMEOUT


class UpstreamClient:
    """Issues single requests against the configured base URL.

    No retries, no caching; *http* may be any object exposing
    ``requests.Session.request``.
    """

    def __init__(self, base_url: str = API_BASE_URL, http=None,
                 timeout: Optional[float] = UPSTREAM_TIMEOUT):
        self.base_url = base_url.rstrip("/")
        self.http = http if http is not None else requests.Session()
        self.timeout = timeout

    def url(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    def request(self, method: str, path: str, token: Optional[str] = None,
                params: Optional[Dict[str, Any]] = None, json: Any = None,
                files: Optional[Dict[str, Any]] = None) -> requests.Response:
        headers = {}
        if token:
            headers["Authorization"] = f"Bearer {token}"
        if files is None:
            headers["Content-Type"] = "application/json"
        return self.http.request(
            method,
            self.url(path),
            headers=headers,
            params=clean_params(params),
            json=json,
            files=files,
            timeout=self.timeout,
        )


def clean_params(params: Optional[Dict[str, Any]]) -> Optional[Dict[str, str]]:
    """Drop unset values and render booleans the way the upstream expects."""
    if not params:
        return None
    cleaned = {}
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, bool):
            value = "true" if value else "false"
        cleaned[key] = str(value)
    return cleaned or None
