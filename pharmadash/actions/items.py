"""
Items (medicines and other stock-keeping units) and their image files.
"""

from typing import Any, Dict, Optional

from pharmadash import normalize
from pharmadash.actions.crud import Resource
from pharmadash.config import NAME_SUGGESTION_LIMIT
from pharmadash.definitions import Item
from pharmadash.proxy import call, guarded

ITEMS = Resource("/items", "items", "item")

ITEM_FILTERS = (
    "manufacturer_id", "item_group", "warehouse", "drug_class",
    "enabled", "search", "limit", "offset",
)


def item_params(filters: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """Keep known filters that are set; ``enabled=False`` counts as set."""
    filters = filters or {}
    params = {}
    for key in ITEM_FILTERS:
        value = filters.get(key)
        if isinstance(value, bool) or value:
            params[key] = value
    return params


# ── Reads ────────────────────────────────────────────────────────────

@guarded
def fetch_items(ctx, filters: Optional[Dict[str, Any]] = None):
    return ITEMS.list(ctx, params=item_params(filters))


def fetch_enabled_items(ctx):
    return ITEMS.list(ctx, sub="enabled")


@guarded
def search_items(ctx, filters: Dict[str, Any]):
    return ITEMS.list(ctx, params=item_params(filters), sub="search")


def fetch_item_stats(ctx):
    return ITEMS.fetch(ctx, "stats")


def fetch_item_names(ctx, search: str = "", limit: int = NAME_SUGGESTION_LIMIT):
    return call(ctx, "/items/names", params={"search": search or "", "limit": limit},
                normalize=normalize.item_names)


def fetch_item_forms(ctx, search: str = "", limit: int = NAME_SUGGESTION_LIMIT):
    return call(ctx, "/items/forms", params={"search": search or "", "limit": limit},
                normalize=normalize.item_forms)


def fetch_item_by_barcode(ctx, barcode: str):
    return ITEMS.get(ctx, barcode, "barcode")


def fetch_item_by_id(ctx, item_id: str):
    return ITEMS.get(ctx, item_id)


def fetch_item_with_files(ctx, item_id: str):
    return call(ctx, ITEMS.item_path(item_id, "details"), not_found=True)


# ── Writes ───────────────────────────────────────────────────────────

def create_item(ctx, data: Item):
    return ITEMS.create(ctx, data)


def update_item(ctx, item_id: str, data: Item):
    return ITEMS.update(ctx, item_id, data)


def toggle_item_enabled(ctx, item_id: str):
    return ITEMS.patch_flag(ctx, item_id, "toggle-enabled")


def delete_item(ctx, item_id: str):
    return ITEMS.delete(ctx, item_id)


def _uploaded(body):
    body = body if isinstance(body, dict) else {}
    return {"message": body.get("message") or "Image uploaded successfully", "data": body}


def upload_item_image(ctx, item_id: str, filename: str, content: bytes,
                      mimetype: str = "application/octet-stream"):
    """Multipart upload; the upstream answers with the stored file record."""
    return call(ctx, f"/item-files/upload-image/{item_id}", "POST",
                files={"file": (filename, content, mimetype)}, write=True,
                normalize=_uploaded, failure_message="Failed to upload image")
