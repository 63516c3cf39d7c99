"""
Shared fakes for the upstream API.
"""

import json
import re
from urllib.parse import urlparse

import pytest

from pharmadash.models import ActionContext, Session
from pharmadash.upstream import UpstreamClient

BASE_URL = "http://upstream.test"


# ── Helpers / Fakes ──────────────────────────────────────────────────

class FakeResponse:
    """Mimic the bits of requests.Response the gateway reads."""
    def __init__(self, status_code=200, body=None, text=None, content=None, headers=None):
        self.status_code = status_code
        self._body = body
        if content is not None:
            self.content = content
        elif body is not None:
            self.content = json.dumps(body).encode()
        else:
            self.content = (text or "").encode()
        self.text = text if text is not None else self.content.decode(errors="replace")
        self.headers = headers or {}
        self.json_calls = 0

    @property
    def ok(self):
        return 200 <= self.status_code < 400

    def json(self):
        self.json_calls += 1
        if self._body is None:
            raise ValueError("No JSON object could be decoded")
        return self._body


class FakeHTTP:
    """Mimic requests.Session.request; replays queued responses in order."""
    def __init__(self, *responses):
        self.responses = list(responses)
        self.calls = []

    def request(self, method, url, **kwargs):
        self.calls.append({"method": method, "url": url, **kwargs})
        if not self.responses:
            raise AssertionError(f"unexpected request {method} {url}")
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    @property
    def last(self):
        return self.calls[-1]


class StatefulUpstream:
    """A tiny in-memory upstream: currencies, toggles, address tree, login."""
    def __init__(self):
        self.calls = []
        self.currencies = []
        self.states = [{"id": "s1", "name": "Baghdad"}, {"id": "s2", "name": "Basra"}]
        self.cities = [
            {"id": "c1", "name": "Karkh", "stateId": "s1"},
            {"id": "c2", "name": "Rusafa", "stateId": "s1"},
            {"id": "c3", "name": "Zubair", "stateId": "s2"},
        ]
        self.districts = [
            {"id": "d1", "name": "Mansour", "cityId": "c1"},
            {"id": "d2", "name": "Adhamiya", "cityId": "c2"},
            {"id": "d3", "name": "Safwan", "cityId": "c3"},
        ]
        self.fail_paths = set()

    def request(self, method, url, **kwargs):
        self.calls.append({"method": method, "url": url, **kwargs})
        path = urlparse(url).path
        params = kwargs.get("params") or {}
        body = kwargs.get("json")

        if path in self.fail_paths:
            return FakeResponse(500, {"message": "boom"})

        if path == "/auth/login" and method == "POST":
            if body == {"mobileNo": "0770", "password": "secret1"}:
                return FakeResponse(200, {
                    "accessToken": "upstream-access",
                    "refreshToken": "upstream-refresh",
                    "user": {
                        "id": "u1", "userName": "Admin", "mobileNo": "0770",
                        "role": "admin", "warehouseId": None, "pharmacyId": None,
                        "enabled": True,
                    },
                })
            return FakeResponse(401, {"message": "Invalid credentials"})

        if kwargs.get("headers", {}).get("Authorization") != "Bearer upstream-access":
            return FakeResponse(401, {"message": "Unauthorized"})

        if path == "/currencies" and method == "GET":
            return FakeResponse(200, {"message": "ok", "currencies": list(self.currencies),
                                      "total": len(self.currencies)})
        if path == "/currencies" and method == "POST":
            currency = dict(body, id=f"cur{len(self.currencies) + 1}", active=True)
            self.currencies.append(currency)
            return FakeResponse(201, {"message": "Currency created", "currency": currency})
        match = re.fullmatch(r"/currencies/([^/]+)/toggle-active", path)
        if match and method == "PATCH":
            for currency in self.currencies:
                if currency["id"] == match.group(1):
                    currency["active"] = not currency["active"]
                    return FakeResponse(200, {"message": "Toggled", "currency": dict(currency)})
            return FakeResponse(404, {"message": "Currency not found"})

        if path == "/public/address/states":
            return FakeResponse(200, {"states": self.states, "total": len(self.states)})
        if path == "/public/address/cities":
            cities = [c for c in self.cities if c["stateId"] == params.get("stateId")]
            return FakeResponse(200, {"cities": cities, "total": len(cities)})
        if path == "/public/address/districts":
            districts = [d for d in self.districts if d["cityId"] == params.get("cityId")]
            return FakeResponse(200, {"districts": districts, "total": len(districts)})

        return FakeResponse(404, {"message": f"no route {method} {path}"})


def make_session(**overrides):
    values = dict(
        user_id="u1", display_name="Admin", role="admin",
        access_token="upstream-access", refresh_token="upstream-refresh",
        mobile_no="0770",
    )
    values.update(overrides)
    return Session(**values)


def make_ctx(http, session="default"):
    if session == "default":
        session = make_session()
    return ActionContext(session=session, client=UpstreamClient(base_url=BASE_URL, http=http))


@pytest.fixture
def upstream():
    return StatefulUpstream()


@pytest.fixture
def ctx(upstream):
    return make_ctx(upstream)
