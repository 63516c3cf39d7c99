"""
Reference catalogues used by the item form: currencies, manufacturers and
item groups.
"""

from pharmadash.actions.crud import Resource
from pharmadash.config import MANUFACTURER_LIST_LIMIT
from pharmadash.definitions import Currency, ItemGroup, Manufacturer

CURRENCIES = Resource("/currencies", "currencies", "currency")
MANUFACTURERS = Resource("/manufacturers", "manufacturers", "manufacturer")
ITEM_GROUPS = Resource("/item-groups", "itemGroups", "itemGroup",
                       label="item group", list_aliases=("item_groups",))


# ── Currencies ───────────────────────────────────────────────────────

def fetch_currencies(ctx):
    return CURRENCIES.list(ctx)


def fetch_active_currencies(ctx):
    return CURRENCIES.list(ctx, sub="active")


def fetch_default_currency(ctx):
    return CURRENCIES.fetch(ctx, "default")


def fetch_currency_stats(ctx):
    return CURRENCIES.fetch(ctx, "stats")


def fetch_currency_by_code(ctx, code: str):
    return CURRENCIES.get(ctx, code, "code")


def fetch_currency_by_id(ctx, currency_id: str):
    return CURRENCIES.get(ctx, currency_id)


def create_currency(ctx, data: Currency):
    return CURRENCIES.create(ctx, data)


def update_currency(ctx, currency_id: str, data: Currency):
    return CURRENCIES.update(ctx, currency_id, data)


def set_default_currency(ctx, currency_id: str):
    return CURRENCIES.patch_flag(ctx, currency_id, "set-default", done="set as default")


def toggle_currency_active(ctx, currency_id: str):
    return CURRENCIES.patch_flag(ctx, currency_id, "toggle-active")


def delete_currency(ctx, currency_id: str):
    return CURRENCIES.delete(ctx, currency_id)


# ── Manufacturers ────────────────────────────────────────────────────

def fetch_manufacturers(ctx):
    return MANUFACTURERS.list(ctx, params={"limit": MANUFACTURER_LIST_LIMIT})


def fetch_active_manufacturers(ctx):
    return MANUFACTURERS.list(ctx, sub="active")


def fetch_manufacturer_stats(ctx):
    return MANUFACTURERS.fetch(ctx, "stats")


def fetch_manufacturer_by_id(ctx, manufacturer_id: str):
    return MANUFACTURERS.get(ctx, manufacturer_id)


def create_manufacturer(ctx, data: Manufacturer):
    return MANUFACTURERS.create(ctx, data)


def update_manufacturer(ctx, manufacturer_id: str, data: Manufacturer):
    return MANUFACTURERS.update(ctx, manufacturer_id, data)


def toggle_manufacturer_active(ctx, manufacturer_id: str):
    return MANUFACTURERS.patch_flag(ctx, manufacturer_id, "toggle-active")


def delete_manufacturer(ctx, manufacturer_id: str):
    return MANUFACTURERS.delete(ctx, manufacturer_id)


# ── Item groups ──────────────────────────────────────────────────────

def fetch_item_groups(ctx):
    return ITEM_GROUPS.list(ctx)


def fetch_active_item_groups(ctx):
    return ITEM_GROUPS.list(ctx, sub="active")


def fetch_item_group_stats(ctx):
    return ITEM_GROUPS.fetch(ctx, "stats")


def fetch_item_group_by_id(ctx, item_group_id: str):
    return ITEM_GROUPS.get(ctx, item_group_id)


def create_item_group(ctx, data: ItemGroup):
    return ITEM_GROUPS.create(ctx, data)


def update_item_group(ctx, item_group_id: str, data: ItemGroup):
    return ITEM_GROUPS.update(ctx, item_group_id, data)


def toggle_item_group_active(ctx, item_group_id: str):
    return ITEM_GROUPS.patch_flag(ctx, item_group_id, "toggle-active")


def delete_item_group(ctx, item_group_id: str):
    return ITEM_GROUPS.delete(ctx, item_group_id)
