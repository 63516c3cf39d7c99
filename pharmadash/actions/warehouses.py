"""
Warehouses, their managers and the districts each warehouse serves.
"""

from typing import Any, Dict, Optional

from pharmadash import normalize
from pharmadash.actions.crud import Resource
from pharmadash.config import DEFAULT_PAGE_SIZE
from pharmadash.definitions import Warehouse
from pharmadash.proxy import call, guarded

WAREHOUSES = Resource("/admin/warehouses", "warehouses", "warehouse")

WAREHOUSE_FILTERS = ("status", "search", "district", "orderBy", "orderDirection")


def page_params(page: int, limit: int) -> Dict[str, int]:
    """Translate a 1-based page into the upstream's offset/limit pair."""
    page = max(int(page), 1)
    limit = int(limit)
    return {"limit": limit, "offset": (page - 1) * limit}


@guarded
def fetch_warehouses(ctx, page: int = 1, limit: int = DEFAULT_PAGE_SIZE,
                     filters: Optional[Dict[str, Any]] = None):
    filters = filters or {}
    params = page_params(page, limit)
    params.update({k: filters[k] for k in WAREHOUSE_FILTERS if filters.get(k)})
    return WAREHOUSES.list(ctx, params=params)


def fetch_warehouse_details(ctx, warehouse_id: str):
    return WAREHOUSES.get(ctx, warehouse_id)


def create_warehouse(ctx, data: Warehouse):
    """*data* carries ``warehouse_name``, ``district``, ``phone``, ``location``."""
    return WAREHOUSES.create(ctx, data, path=f"{WAREHOUSES.path}/create")


def create_warehouse_manager(ctx, data: Dict[str, str]):
    """*data* carries ``userName``, ``mobileNo``, ``password``, ``warehouseId``."""
    return call(ctx, f"{WAREHOUSES.path}/users/warehouse-manager", "POST", body=data,
                write=True,
                normalize=normalize.entity("user", "Warehouse manager created successfully"),
                failure_message="Failed to create warehouse manager")


# ── Served districts ─────────────────────────────────────────────────

def fetch_warehouse_districts(ctx, warehouse_id: str):
    return call(ctx, WAREHOUSES.item_path(warehouse_id, "districts"),
                normalize=normalize.listing("districts"))


def add_district_to_warehouse(ctx, warehouse_id: str, district_id: str):
    return call(ctx, WAREHOUSES.item_path(warehouse_id, "districts"), "POST",
                body={"districtId": district_id}, write=True,
                normalize=normalize.message_only("District added successfully"),
                failure_message="Failed to add district to warehouse")


def remove_district_from_warehouse(ctx, warehouse_id: str, district_id: str):
    return call(ctx, WAREHOUSES.item_path(warehouse_id, "districts", district_id), "DELETE",
                write=True,
                normalize=normalize.message_only("District removed successfully"),
                failure_message="Failed to remove district from warehouse")


def update_district_status(ctx, warehouse_id: str, district_id: str, active: bool):
    return call(ctx, WAREHOUSES.item_path(warehouse_id, "districts", district_id), "PUT",
                body={"districtId": district_id, "active": bool(active)}, write=True,
                normalize=normalize.message_only("District status updated successfully"),
                failure_message="Failed to update district status")
