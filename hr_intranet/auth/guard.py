"""Authorization decisions for admin-only routes."""

from dataclasses import dataclass

from fastapi import Request

from hr_intranet.audit import security_event
from hr_intranet.deps import current_session
from hr_intranet.errors import AuthorizationError
from hr_intranet.sessions import SessionRecord


@dataclass(frozen=True)
class Permit:
    session: SessionRecord


@dataclass(frozen=True)
class Deny:
    reason: str


Decision = Permit | Deny


def require_admin(session: SessionRecord | None) -> Decision:
    if session is None:
        return Deny("no session")
    if session.is_admin is not True:
        return Deny("admin rights required")
    return Permit(session)


def admin_required(request: Request) -> SessionRecord:
    """FastAPI dependency: the caller's session if it is admin, else 403."""
    decision = require_admin(current_session(request))
    if isinstance(decision, Deny):
        security_event(f"Unauthorized access to {request.url.path} ({decision.reason})", request)
        raise AuthorizationError()
    return decision.session
