"""
Name -> callable table of every proxy action, plus the required fields the
create forms must fill before a submission is forwarded.
"""

import inspect
from typing import Callable, Dict

from pharmadash.actions import address, catalog, ingredients, items, pharmacies, users, warehouses

MODULES = (address, catalog, ingredients, items, pharmacies, users, warehouses)

# Actions that need a route of their own (multipart in, bytes out).
NOT_JSON = {"upload_item_image", "download_pharmacy_file"}

REQUIRED_FIELDS = {
    "create_state": ("name",),
    "create_city": ("name", "stateId"),
    "create_district": ("name", "cityId"),
    "create_currency": ("code", "name", "symbol"),
    "create_manufacturer": ("name", "code", "country"),
    "create_item_group": ("name",),
    "create_item": ("item_name", "manufacturer_id", "item_group", "barcode", "currency", "form"),
    "create_active_ingredient": ("active_ingredient_name",),
    "add_ingredient_to_item": ("item_id", "ingredient_id", "strength"),
    "create_admin_user": ("userName", "mobileNo", "password"),
    "create_warehouse": ("warehouse_name", "district", "phone", "location"),
    "create_warehouse_manager": ("userName", "mobileNo", "password", "warehouseId"),
}


def _collect() -> Dict[str, Callable]:
    actions = {}
    for module in MODULES:
        for name, fn in inspect.getmembers(module, inspect.isfunction):
            if fn.__module__ != module.__name__ or name.startswith("_"):
                continue
            params = list(inspect.signature(fn).parameters)
            if params and params[0] == "ctx":
                actions[name] = fn
    return actions


ACTIONS = _collect()


def missing_fields(name: str, kwargs: dict):
    """Required keys of a create payload that are absent or blank."""
    required = REQUIRED_FIELDS.get(name, ())
    data = kwargs.get("data")
    if not isinstance(data, dict):
        return list(required)
    return [f for f in required if data.get(f) in (None, "")]
