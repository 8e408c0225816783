import logging
from pathlib import Path

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from hr_intranet.audit import client_address, security_event
from hr_intranet.auth.utils import check_credentials
from hr_intranet.deps import current_session, get_session_store, get_settings
from hr_intranet.errors import AuthenticationError
from hr_intranet.forms import read_payload

logger = logging.getLogger(__name__)

templates = Jinja2Templates(directory=str(Path(__file__).parent.parent / "templates"))

router = APIRouter(tags=["auth"])


@router.get("/login", response_class=HTMLResponse)
async def login_page(request: Request):
    return templates.TemplateResponse(request, "login.html")


@router.post("/login")
async def login(request: Request):
    payload = await read_payload(request)
    settings = get_settings(request)

    if not check_credentials(payload.get("username"), payload.get("password"), settings):
        security_event(f"Failed login for {payload.get('username')!r}", request)
        raise AuthenticationError()

    # New id on every login; the pre-login id is dropped
    store = get_session_store(request)
    previous = current_session(request)
    if previous is not None:
        store.destroy(previous.session_id)
    session_id = store.create()
    store.set_admin(session_id)
    request.state.session = store.get(session_id)
    logger.info(f"Admin login (IP: {client_address(request)})")

    return RedirectResponse("/", status_code=302)


@router.get("/logout")
async def logout(request: Request):
    session = current_session(request)
    if session is not None:
        get_session_store(request).destroy(session.session_id)
    request.state.session = None
    return RedirectResponse("/", status_code=302)
