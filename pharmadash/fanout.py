"""
Concurrent fail-fast loading of independent read actions.
"""

from concurrent.futures import ThreadPoolExecutor
from typing import Any, Callable, Dict, Optional

from pharmadash.actions import catalog, items, warehouses
from pharmadash.config import FORM_WAREHOUSE_LIMIT
from pharmadash.models import ActionContext, ProxyResult


def gather(loaders: Dict[str, Callable[[], ProxyResult]]) -> ProxyResult:
    """Run every loader, wait for all, then fail on the first error in
    declaration order. On success ``data`` maps each name to its payload.
    """
    if not loaders:
        return ProxyResult.success({})

    with ThreadPoolExecutor(max_workers=len(loaders)) as pool:
        futures = {name: pool.submit(fn) for name, fn in loaders.items()}
        results = {name: future.result() for name, future in futures.items()}

    for result in results.values():
        if not result.ok:
            return result
    return ProxyResult.success({name: r.data for name, r in results.items()})


def load_item_form(ctx: ActionContext, filters: Optional[Dict[str, Any]] = None) -> ProxyResult:
    """Items page plus every lookup the item form needs."""
    return gather({
        "items": lambda: items.fetch_items(ctx, filters),
        "manufacturers": lambda: catalog.fetch_manufacturers(ctx),
        "itemGroups": lambda: catalog.fetch_item_groups(ctx),
        "currencies": lambda: catalog.fetch_currencies(ctx),
        "warehouses": lambda: warehouses.fetch_warehouses(ctx, 1, FORM_WAREHOUSE_LIMIT),
    })
