import os
from pathlib import Path

from fastapi import APIRouter, Depends, Request
from fastapi.responses import FileResponse, HTMLResponse
from fastapi.templating import Jinja2Templates

from hr_intranet.auth.guard import admin_required
from hr_intranet.errors import ResourceError

BASE_DIR = Path(__file__).parent.parent
templates = Jinja2Templates(directory=str(BASE_DIR / "templates"))

# The only file /flag can ever serve
FLAG_PATH = BASE_DIR / "private" / "flag.txt"
FLAG_DOWNLOAD_NAME = "flag.txt"

router = APIRouter(tags=["admin"], dependencies=[Depends(admin_required)])


@router.get("/admin", response_class=HTMLResponse)
async def admin_panel(request: Request):
    return templates.TemplateResponse(request, "admin.html")


@router.get("/flag")
async def download_flag():
    if not FLAG_PATH.is_file() or not os.access(FLAG_PATH, os.R_OK):
        raise ResourceError(f"flag resource unreadable at {FLAG_PATH}")
    return FileResponse(FLAG_PATH, filename=FLAG_DOWNLOAD_NAME, media_type="text/plain")
