"""
Resource descriptor bundling the usual list/get/create/update/delete/toggle
verbs for one upstream collection.
"""

from typing import Any, Dict, Optional

from pharmadash import normalize
from pharmadash.proxy import call


class Resource:
    """One upstream collection, e.g. ``Resource("/currencies", "currencies", "currency")``.

    *list_key* is the canonical key of list payloads, *entity_key* the key a
    single record arrives under in write responses, *label* the human name
    used in default messages.
    """

    def __init__(self, path: str, list_key: str, entity_key: str,
                 label: Optional[str] = None, list_aliases=()):
        self.path = path.rstrip("/")
        self.list_key = list_key
        self.entity_key = entity_key
        self.label = label or entity_key
        self.normalize_list = normalize.listing(list_key, *list_aliases)

    def item_path(self, key: str, *suffix: str) -> str:
        return "/".join((self.path, str(key)) + suffix)

    # ── reads ────────────────────────────────────────────────────────

    def list(self, ctx, params: Optional[Dict[str, Any]] = None, sub: Optional[str] = None):
        path = f"{self.path}/{sub}" if sub else self.path
        return call(ctx, path, params=params, normalize=self.normalize_list)

    def get(self, ctx, key: str, *prefix: str):
        path = "/".join((self.path,) + prefix + (str(key),))
        return call(ctx, path, not_found=True)

    def fetch(self, ctx, sub: str):
        """Plain GET of a sub-resource such as ``stats`` or ``default``."""
        return call(ctx, f"{self.path}/{sub}")

    # ── writes ───────────────────────────────────────────────────────

    def create(self, ctx, data: Dict[str, Any], path: Optional[str] = None):
        return call(ctx, path or self.path, "POST", body=data, write=True,
                    normalize=normalize.entity(self.entity_key, f"{self.label.capitalize()} created successfully"),
                    failure_message=f"Failed to create {self.label}")

    def update(self, ctx, key: str, data: Dict[str, Any]):
        return call(ctx, self.item_path(key), "PATCH", body=data, write=True,
                    normalize=normalize.entity(self.entity_key, f"{self.label.capitalize()} updated successfully"),
                    failure_message=f"Failed to update {self.label}")

    def delete(self, ctx, key: str):
        return call(ctx, self.item_path(key), "DELETE", write=True,
                    normalize=normalize.message_only(f"{self.label.capitalize()} deleted successfully"),
                    failure_message=f"Failed to delete {self.label}")

    def patch_flag(self, ctx, key: str, flag: str, method: str = "PATCH",
                   body: Any = None, done: str = "updated"):
        """Bespoke flag endpoints: ``toggle-active``, ``set-default``, ``enable``..."""
        return call(ctx, self.item_path(key, flag), method, body=body, write=True,
                    normalize=normalize.entity(self.entity_key, f"{self.label.capitalize()} {done} successfully"),
                    failure_message=f"Failed to update {self.label}")
