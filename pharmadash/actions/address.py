"""
States, cities and districts.

Public lookups feed the address dropdowns; the admin endpoints maintain the
reference data.
"""

from pharmadash.actions.crud import Resource
from pharmadash.proxy import call

STATES = Resource("/admin/address/states", "states", "state")
CITIES = Resource("/admin/address/cities", "cities", "city")
DISTRICTS = Resource("/admin/address/districts", "districts", "district")


# ── Lookups ──────────────────────────────────────────────────────────

def fetch_states(ctx):
    return call(ctx, "/public/address/states", normalize=STATES.normalize_list)


def fetch_cities(ctx, state_id: str):
    return call(ctx, "/public/address/cities", params={"stateId": state_id},
                normalize=CITIES.normalize_list)


def fetch_districts(ctx, city_id: str):
    return call(ctx, "/public/address/districts", params={"cityId": city_id},
                normalize=DISTRICTS.normalize_list)


# ── Admin maintenance ────────────────────────────────────────────────

def create_state(ctx, data: dict):
    return STATES.create(ctx, data)


def update_state(ctx, state_id: str, data: dict):
    return STATES.update(ctx, state_id, data)


def delete_state(ctx, state_id: str):
    return STATES.delete(ctx, state_id)


def create_city(ctx, data: dict):
    return CITIES.create(ctx, data)


def update_city(ctx, city_id: str, data: dict):
    return CITIES.update(ctx, city_id, data)


def delete_city(ctx, city_id: str):
    return CITIES.delete(ctx, city_id)


def create_district(ctx, data: dict):
    return DISTRICTS.create(ctx, data)


def update_district(ctx, district_id: str, data: dict):
    return DISTRICTS.update(ctx, district_id, data)


def delete_district(ctx, district_id: str):
    return DISTRICTS.delete(ctx, district_id)
