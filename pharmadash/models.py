"""
Domain dataclasses used across the application.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

# ── Error kinds surfaced to callers ──────────────────────────────────
UNAUTHORIZED = "UNAUTHORIZED"
PERMISSION_DENIED = "PERMISSION_DENIED"
NOT_FOUND = "NOT_FOUND"
NETWORK_ERROR = "NETWORK_ERROR"

ERROR_KINDS = (UNAUTHORIZED, PERMISSION_DENIED, NOT_FOUND, NETWORK_ERROR)


@dataclass
class Session:
    """The logged-in user's identity plus the upstream token pair."""
    user_id: str
    display_name: str
    role: str                        # one of config.ROLES
    access_token: str
    refresh_token: str               # stored, never exercised
    mobile_no: Optional[str] = None
    warehouse_id: Optional[str] = None
    pharmacy_id: Optional[str] = None
    enabled: bool = True

    def public_view(self) -> Dict[str, Any]:
        """Fields safe to hand to the browser (no tokens)."""
        return {
            "id": self.user_id,
            "name": self.display_name,
            "mobileNo": self.mobile_no,
            "role": self.role,
            "warehouseId": self.warehouse_id,
            "pharmacyId": self.pharmacy_id,
            "enabled": self.enabled,
        }


@dataclass
class ActionContext:
    """Explicit per-call dependencies of a proxy action."""
    session: Optional[Session]
    client: Any                      # upstream.UpstreamClient


@dataclass
class ProxyResult:
    """Outcome of one proxied call, shared by read and write actions."""
    ok: bool
    data: Any = None
    error: Optional[str] = None      # one of ERROR_KINDS when not ok
    message: Optional[str] = None
    write: bool = False
    meta: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def success(cls, data: Any = None, write: bool = False, **meta) -> "ProxyResult":
        return cls(ok=True, data=data, write=write, meta=meta)

    @classmethod
    def failure(cls, error: str, message: Optional[str] = None,
                write: bool = False, **meta) -> "ProxyResult":
        if error not in ERROR_KINDS:
            raise ValueError(f"Unknown error kind: {error}")
        if write and message is None:
            message = error
        return cls(ok=False, error=error, message=message, write=write, meta=meta)

    def to_dict(self) -> Dict[str, Any]:
        """Render the JSON envelope handed to the UI."""
        if not self.ok:
            if self.write:
                return {"success": False, "error": self.error, "message": self.message}
            return {"error": self.error}
        if self.write:
            body = {"success": True}
            if isinstance(self.data, dict):
                body.update(self.data)
            body.setdefault("message", self.message)
            return body
        return self.data
