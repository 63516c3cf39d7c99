"""
Response-shape normalizers.

The upstream API returns the same concept under different keys depending on
the endpoint and release; these helpers fold them into one shape per
resource.
"""

from typing import Any, Callable, Dict, Iterable, List, Optional

NAME_FIELDS = ("item_name", "name", "title")


def pick_list(body: Any, keys: Iterable[str], target: str,
              default_message: str = "") -> Dict[str, Any]:
    """Find the list under the first matching key, else treat *body* as one."""
    items: Optional[List[Any]] = None
    message = default_message
    total = None

    if isinstance(body, dict):
        for key in keys:
            if isinstance(body.get(key), list):
                items = list(body[key])
                break
        message = body.get("message") or default_message
        total = body.get("total")
        if items is None:
            items = []
    elif isinstance(body, list):
        items = list(body)
    else:
        items = []

    return {
        "message": message,
        target: items,
        "total": total if isinstance(total, int) else len(items),
    }


def active_ingredients(body: Any) -> Dict[str, Any]:
    return pick_list(
        body,
        ("ingredients", "activeIngredients", "active_ingredients"),
        "activeIngredients",
        "Active ingredients retrieved successfully",
    )


def listing(*keys: str, target: Optional[str] = None,
            default_message: str = "") -> Callable[[Any], Dict[str, Any]]:
    """Build a list normalizer; the first key is the canonical name."""
    target = target or keys[0]

    def normalize(body: Any) -> Dict[str, Any]:
        if isinstance(body, dict):
            # keep pagination, filters and friends
            result = dict(body)
            for key in keys:
                result.pop(key, None)
            result.update(pick_list(body, keys, target, default_message))
            return result
        return pick_list(body, keys, target, default_message)

    return normalize


def _name_of(entry: Any) -> Optional[str]:
    if isinstance(entry, str):
        return entry
    if isinstance(entry, dict):
        for field in NAME_FIELDS:
            value = entry.get(field)
            if value:
                return value if isinstance(value, str) else None
    return None


def item_names(body: Any) -> List[str]:
    """Collapse every known suggestion shape into a list of strings."""
    if isinstance(body, list):
        entries = body
    elif isinstance(body, dict):
        entries = []
        for key in ("names", "items", "results"):
            if isinstance(body.get(key), list):
                entries = body[key]
                break
    else:
        entries = []

    names = []
    for entry in entries:
        name = _name_of(entry)
        if isinstance(name, str):
            names.append(name)
    return names


def item_forms(body: Any) -> List[str]:
    items = body.get("items") if isinstance(body, dict) else None
    return [i for i in items if isinstance(i, str)] if isinstance(items, list) else []


def entity(key: Optional[str], default_message: str) -> Callable[[Any], Dict[str, Any]]:
    """Write-success normalizer: ``{"message", key: body[key]}``."""

    def normalize(body: Any) -> Dict[str, Any]:
        body = body if isinstance(body, dict) else {}
        result = {"message": body.get("message") or default_message}
        if key is not None and key in body:
            result[key] = body[key]
        return result

    return normalize


def message_only(default_message: str) -> Callable[[Any], Dict[str, Any]]:
    return entity(None, default_message)
