"""
Platform users (admin view).
"""

from typing import Any, Dict, Optional

from pharmadash.actions.crud import Resource
from pharmadash.proxy import guarded

USERS = Resource("/admin/users", "users", "user")

USER_FILTERS = ("role", "enabled", "search", "orderBy", "orderDirection", "limit", "offset")


@guarded
def fetch_users(ctx, filters: Optional[Dict[str, Any]] = None):
    filters = filters or {}
    params = {k: filters[k] for k in USER_FILTERS
              if isinstance(filters.get(k), bool) or filters.get(k)}
    return USERS.list(ctx, params=params)


def create_admin_user(ctx, data: Dict[str, str]):
    """*data* carries ``userName``, ``mobileNo`` and ``password``."""
    return USERS.create(ctx, data, path=f"{USERS.path}/create-admin")


def enable_user(ctx, user_id: str):
    return USERS.patch_flag(ctx, user_id, "enable", method="PUT", done="enabled")


def disable_user(ctx, user_id: str):
    return USERS.patch_flag(ctx, user_id, "disable", method="PUT", done="disabled")
