from __future__ import annotations

from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from typing import Any

from ..errors import PermissionValidationError

OUTCOME_SUCCESS = "success"
OUTCOME_REJECTED = "rejected"
OUTCOME_FAILURE = "failure"
OUTCOME_ERROR = "error"


@dataclass(frozen=True, slots=True)
class PermissionRejection:
    """A permission string the service refused, and why."""

    permission: str
    code: str

    @classmethod
    def from_error(cls, exc: PermissionValidationError) -> "PermissionRejection":
        permission = exc.permission if isinstance(exc.permission, str) else repr(exc.permission)
        return cls(permission=permission, code=exc.code)


@dataclass(slots=True)
class AccessEvent:
    """One request against the permission service, as written to the access log."""

    method: str
    path: str
    status_code: int
    outcome: str
    client_ip: str | None = None
    request_id: str | None = None
    latency_ms: int | None = None
    user_agent: str | None = None
    rejected_permission: str | None = None
    rejection_code: str | None = None
    occurred_at: datetime = field(default_factory=lambda: datetime.now(tz=timezone.utc))

    def to_payload(self) -> dict[str, Any]:
        payload = asdict(self)
        payload["occurred_at"] = self.occurred_at.astimezone(timezone.utc).isoformat()
        return payload


def outcome_for(status_code: int, rejection: PermissionRejection | None) -> str:
    if rejection is not None:
        return OUTCOME_REJECTED
    if status_code >= 500:
        return OUTCOME_ERROR
    if status_code >= 400:
        return OUTCOME_FAILURE
    return OUTCOME_SUCCESS
