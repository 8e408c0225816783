"""Resolve the session cookie on every request and keep it in sync.

Handlers read and replace ``request.state.session``; after the handler
runs, the cookie is reissued when the session changed and deleted when the
session was dropped.
"""

from fastapi import Request, Response

from hr_intranet.auth.utils import create_token, decode_token
from hr_intranet.deps import get_session_store, get_settings


# Requests that never need a session (supervisor probes, assets)
SESSIONLESS_PATHS = {"/health"}
SESSIONLESS_PREFIXES = ("/static/",)


async def session_middleware(request: Request, call_next) -> Response:
    path = request.url.path
    if path in SESSIONLESS_PATHS or path.startswith(SESSIONLESS_PREFIXES):
        return await call_next(request)

    settings = get_settings(request)
    store = get_session_store(request)

    cookie_session_id = decode_token(request.cookies.get(settings.session_cookie_name), settings)
    session = store.get(cookie_session_id)
    if session is None:
        # First contact, or the cookie names a destroyed/expired session
        session = store.get(store.create())
    request.state.session = session

    response = await call_next(request)

    final = getattr(request.state, "session", None)
    if final is None:
        response.delete_cookie(settings.session_cookie_name)
    elif final.session_id != cookie_session_id:
        max_age = settings.session_ttl_minutes * 60 if settings.session_ttl_minutes > 0 else None
        response.set_cookie(
            settings.session_cookie_name,
            create_token(final.session_id, settings),
            httponly=True,
            samesite="lax",
            secure=settings.session_cookie_secure,
            max_age=max_age,
        )
    return response
