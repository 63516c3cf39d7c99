"""
Pharmacy onboarding: review queue, approval and uploaded documents.
"""

from typing import Optional

from pharmadash import normalize
from pharmadash.actions.crud import Resource
from pharmadash.config import DEFAULT_PAGE_SIZE
from pharmadash.proxy import call

PHARMACIES = Resource("/admin/pharmacies", "pharmacies", "pharmacy")
PHARMACY_FILES = "/admin/pharmacy-files"
PENDING_REVIEW_LIMIT = 5


def fetch_pending_pharmacies(ctx):
    return PHARMACIES.list(ctx, params={"status": "Pending", "limit": PENDING_REVIEW_LIMIT})


def fetch_all_pharmacies(ctx, page: int = 1, limit: int = DEFAULT_PAGE_SIZE):
    # this endpoint pages by number, not by offset
    return PHARMACIES.list(ctx, params={"page": page, "limit": limit})


def approve_pharmacy(ctx, pharmacy_id: str):
    return PHARMACIES.patch_flag(ctx, pharmacy_id, "approve", method="PUT", done="approved")


def reject_pharmacy(ctx, pharmacy_id: str, reason: Optional[str] = None):
    return PHARMACIES.patch_flag(ctx, pharmacy_id, "reject", method="PUT",
                                 body={"reason": reason}, done="rejected")


def fetch_pharmacy_files(ctx, pharmacy_id: str):
    return call(ctx, f"{PHARMACY_FILES}/pharmacy/{pharmacy_id}",
                normalize=normalize.listing("files"))


def download_pharmacy_file(ctx, file_id: str):
    """Raw bytes; ``meta["content_type"]`` carries the upstream media type."""
    return call(ctx, f"{PHARMACY_FILES}/download/{file_id}", raw=True)
