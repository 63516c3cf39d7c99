"""
Integration tests for the Flask routes, driven through the test client.
"""

import io

import pytest
import requests

from pharmadash.api.app import create_app
from pharmadash.config import SESSION_COOKIE_NAME
from pharmadash.session import issue_token
from pharmadash.upstream import UpstreamClient

from conftest import BASE_URL, FakeHTTP, FakeResponse, make_session

CREDENTIALS = {"mobileNo": "0770", "password": "secret1"}


def app_for(http):
    app = create_app(UpstreamClient(base_url=BASE_URL, http=http))
    app.config["TESTING"] = True
    return app


def bearer():
    return {"Authorization": f"Bearer {issue_token(make_session())}"}


@pytest.fixture
def client(upstream):
    return app_for(upstream).test_client()


@pytest.fixture
def logged_in(client, upstream):
    response = client.post("/api/auth/login", json=CREDENTIALS)
    assert response.status_code == 200
    upstream.calls.clear()
    return client


# ── Tests: info ──────────────────────────────────────────────────────

def test_index_lists_endpoints(client):
    body = client.get("/").get_json()
    assert body["status"] == "running"
    assert body["endpoints"]["login"] == "/api/auth/login"


def test_health_ok(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.get_json()["checks"] == {"upstream": True}


def test_health_upstream_down():
    client = app_for(FakeHTTP(requests.ConnectionError("refused"))).test_client()
    response = client.get("/health")

    assert response.status_code == 503
    assert response.get_json()["status"] == "unhealthy"


def test_unknown_endpoint_is_json(client):
    response = client.get("/no/such/thing")
    assert response.status_code == 404
    assert response.get_json()["error"] == "Endpoint not found"


# ── Tests: auth ──────────────────────────────────────────────────────

def test_login_session_logout(client):
    login = client.post("/api/auth/login", json=CREDENTIALS)
    body = login.get_json()

    assert login.status_code == 200
    assert body["success"] is True
    assert body["user"]["id"] == "u1"
    assert "accessToken" not in body["user"]
    assert SESSION_COOKIE_NAME in login.headers["Set-Cookie"]
    assert "HttpOnly" in login.headers["Set-Cookie"]

    session = client.get("/api/auth/session")
    assert session.status_code == 200
    assert session.get_json()["user"]["role"] == "admin"

    client.post("/api/auth/logout")
    assert client.get("/api/auth/session").status_code == 401


def test_login_bad_credentials(client):
    response = client.post("/api/auth/login", json={"mobileNo": "0770", "password": "wrong-one"})
    assert response.status_code == 401
    assert response.get_json() == {"error": "Invalid credentials."}


def test_login_short_password_never_reaches_upstream(client, upstream):
    response = client.post("/api/auth/login", json={"mobileNo": "0770", "password": "12345"})
    assert response.status_code == 401
    assert upstream.calls == []


def test_login_requires_json(client):
    response = client.post("/api/auth/login", data="mobileNo=0770", content_type="text/plain")
    assert response.status_code == 400


def test_login_missing_fields(client, upstream):
    response = client.post("/api/auth/login", json={"mobileNo": "0770"})
    assert response.status_code == 400
    assert upstream.calls == []


# ── Tests: actions ───────────────────────────────────────────────────

def test_action_without_login_is_unauthorized(client, upstream):
    response = client.post("/api/actions/fetch_currencies", json={})

    assert response.status_code == 401
    assert response.get_json() == {"error": "UNAUTHORIZED"}
    assert upstream.calls == []


def test_create_list_toggle_via_actions(logged_in):
    created = logged_in.post("/api/actions/create_currency",
                             json={"data": {"code": "EUR", "name": "Euro", "symbol": "€"}})
    assert created.status_code == 200
    currency = created.get_json()["currency"]

    listed = logged_in.post("/api/actions/fetch_currencies").get_json()
    assert [c["code"] for c in listed["currencies"]] == ["EUR"]

    toggled = logged_in.post("/api/actions/toggle_currency_active", json={"currency_id": currency["id"]})
    assert toggled.get_json()["currency"]["active"] is False


def test_action_missing_required_fields(logged_in, upstream):
    response = logged_in.post("/api/actions/create_currency", json={"data": {"code": "EUR"}})

    assert response.status_code == 400
    assert response.get_json() == {"error": "missing required fields", "detail": ["name", "symbol"]}
    assert upstream.calls == []


def test_action_bad_arguments(logged_in):
    response = logged_in.post("/api/actions/fetch_currency_by_id", json={"bogus": 1})
    assert response.status_code == 400
    assert response.get_json()["error"] == "Invalid arguments"


def test_action_body_must_be_object(logged_in):
    response = logged_in.post("/api/actions/fetch_currencies", json=["x"])
    assert response.status_code == 400


@pytest.mark.parametrize("name", ["no_such_action", "download_pharmacy_file", "item_params"])
def test_unknown_action(logged_in, name):
    assert logged_in.post(f"/api/actions/{name}", json={}).status_code == 404


def test_action_catalogue(client):
    names = client.get("/api/actions").get_json()["actions"]
    assert "fetch_currencies" in names
    assert "upload_item_image" not in names


@pytest.mark.parametrize("name,kwargs", [
    ("fetch_warehouses", {"page": "two"}),
    ("fetch_warehouses", {"filters": ["status"]}),
    ("fetch_users", {"filters": "admin"}),
    ("fetch_items", {"filters": [1, 2]}),
])
def test_action_bad_argument_values_stay_in_envelope(logged_in, upstream, name, kwargs):
    response = logged_in.post(f"/api/actions/{name}", json=kwargs)

    assert response.status_code == 502
    assert response.get_json() == {"error": "NETWORK_ERROR"}
    assert upstream.calls == []


def test_write_failure_status_and_envelope(logged_in, upstream):
    upstream.fail_paths.add("/currencies")
    response = logged_in.post("/api/actions/create_currency",
                              json={"data": {"code": "EUR", "name": "Euro", "symbol": "€"}})

    assert response.status_code == 502
    assert response.get_json() == {"success": False, "error": "NETWORK_ERROR", "message": "boom"}


# ── Tests: item form lookups ─────────────────────────────────────────

def test_item_forms_lookup():
    http = FakeHTTP(FakeResponse(200, {"items": ["Tablet", "Syrup"]}))
    response = app_for(http).test_client().get("/api/items/forms?search=ta", headers=bearer())

    assert response.status_code == 200
    assert response.get_json() == {"items": ["Tablet", "Syrup"]}
    assert http.last["url"] == f"{BASE_URL}/items/forms"
    assert http.last["params"] == {"search": "ta", "limit": "10"}


def test_item_names_lookup_upstream_failure():
    http = FakeHTTP(FakeResponse(500, text="oops"))
    response = app_for(http).test_client().get("/api/items/names", headers=bearer())

    assert response.status_code == 500
    assert response.get_json() == {"error": "NETWORK_ERROR", "detail": "oops"}


def test_item_forms_lookup_keeps_upstream_status_and_text():
    http = FakeHTTP(FakeResponse(400, text="bad search"))
    response = app_for(http).test_client().get("/api/items/forms?search=%25", headers=bearer())

    assert response.status_code == 400
    assert response.get_json()["detail"] == "bad search"


def test_item_forms_lookup_transport_error_is_502():
    http = FakeHTTP(requests.ConnectionError("refused"))
    response = app_for(http).test_client().get("/api/items/forms", headers=bearer())

    assert response.status_code == 502
    assert response.get_json() == {"error": "NETWORK_ERROR", "detail": None}


def test_item_forms_lookup_rejects_bad_limit():
    http = FakeHTTP()
    response = app_for(http).test_client().get("/api/items/forms?limit=ten", headers=bearer())

    assert response.status_code == 400
    assert http.calls == []


def test_item_forms_lookup_requires_session():
    http = FakeHTTP()
    response = app_for(http).test_client().get("/api/items/forms")

    assert response.status_code == 401
    assert http.calls == []


def test_item_form_bundle_requires_object_body():
    response = app_for(FakeHTTP()).test_client().post("/api/forms/items", json=[1], headers=bearer())
    assert response.status_code == 400


# ── Tests: files ─────────────────────────────────────────────────────

def test_download_streams_bytes():
    http = FakeHTTP(FakeResponse(200, content=b"%PDF-1.7", headers={"Content-Type": "application/pdf"}))
    response = app_for(http).test_client().get("/api/pharmacy-files/f1/download", headers=bearer())

    assert response.status_code == 200
    assert response.data == b"%PDF-1.7"
    assert response.mimetype == "application/pdf"


def test_download_not_authorized():
    http = FakeHTTP(FakeResponse(403))
    response = app_for(http).test_client().get("/api/pharmacy-files/f1/download", headers=bearer())

    assert response.status_code == 403
    assert response.get_json() == {"error": "PERMISSION_DENIED"}


def test_upload_forwards_multipart():
    http = FakeHTTP(FakeResponse(201, {"id": "img1"}))
    response = app_for(http).test_client().post(
        "/api/items/i1/image",
        data={"file": (io.BytesIO(b"\x89PNG"), "box.png", "image/png")},
        content_type="multipart/form-data",
        headers=bearer(),
    )

    assert response.status_code == 200
    assert response.get_json()["success"] is True
    assert http.last["files"]["file"] == ("box.png", b"\x89PNG", "image/png")


def test_upload_requires_file():
    http = FakeHTTP()
    response = app_for(http).test_client().post("/api/items/i1/image", data={},
                                                content_type="multipart/form-data",
                                                headers=bearer())
    assert response.status_code == 400
    assert http.calls == []


# ── Tests: address cascade ───────────────────────────────────────────

def test_address_cascade_route(logged_in):
    response = logged_in.post("/api/cascade/address", json={"stateId": "s2", "cityId": "c3"})
    body = response.get_json()

    assert response.status_code == 200
    assert body["stage"] == "district_list"
    assert body["selection"] == {"state": "s2", "city": "c3", "district": None}
    assert [d["id"] for d in body["districts"]] == ["d3"]


def test_address_cascade_anonymous(client):
    response = client.post("/api/cascade/address", json={})
    assert response.status_code == 401
    assert response.get_json() == {"error": "UNAUTHORIZED"}


def test_address_cascade_complete_selection(logged_in):
    response = logged_in.post("/api/cascade/address",
                              json={"stateId": "s1", "cityId": "c1", "districtId": "d1"})

    assert response.status_code == 200
    assert response.get_json()["stage"] == "complete"


def test_address_cascade_rejects_district_of_other_city(logged_in):
    response = logged_in.post("/api/cascade/address",
                              json={"stateId": "s1", "cityId": "c1", "districtId": "d3"})

    assert response.status_code == 400
    assert response.get_json()["error"] == "Invalid selection"


def test_address_cascade_requires_object_body(logged_in, upstream):
    response = logged_in.post("/api/cascade/address", json=["s1"])

    assert response.status_code == 400
    assert upstream.calls == []
