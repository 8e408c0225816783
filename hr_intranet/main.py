import logging
from contextlib import asynccontextmanager
from datetime import timedelta
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates

from hr_intranet.admin.router import router as admin_router
from hr_intranet.audit import client_address, log_safely
from hr_intranet.auth.middleware import session_middleware
from hr_intranet.auth.router import router as auth_router
from hr_intranet.config import Settings, settings as default_settings
from hr_intranet.deps import current_session, get_settings
from hr_intranet.errors import register_exception_handlers
from hr_intranet.search.directory import DirectoryIndex
from hr_intranet.search.router import router as search_router
from hr_intranet.sessions import SessionStore

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

logger = logging.getLogger(__name__)
access_logger = logging.getLogger("hr_intranet.access")

BASE_DIR = Path(__file__).parent
templates = Jinja2Templates(directory=str(BASE_DIR / "templates"))


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
    logging.getLogger("hr_intranet").setLevel(level.upper())


@asynccontextmanager
async def lifespan(app: FastAPI):
    if not app.state.settings.admin_password:
        logger.warning("ADMIN_PASSWORD is not set; every login attempt will be rejected")
    logger.info("Intranet HR started")
    yield
    logger.info(f"Intranet HR stopped, dropping {len(app.state.sessions)} sessions")


def create_app(
    settings: Settings | None = None,
    directory: DirectoryIndex | None = None,
) -> FastAPI:
    settings = settings or default_settings
    configure_logging(settings.log_level)

    app = FastAPI(title="Intranet HR", version="0.1.0", lifespan=lifespan)
    app.state.settings = settings
    app.state.directory = directory if directory is not None else DirectoryIndex()
    ttl = timedelta(minutes=settings.session_ttl_minutes) if settings.session_ttl_minutes > 0 else None
    app.state.sessions = SessionStore(ttl=ttl)

    app.mount("/static", StaticFiles(directory=str(BASE_DIR / "static")), name="static")
    register_exception_handlers(app)

    # Registered first so it runs innermost, after the access log
    app.middleware("http")(session_middleware)

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        log_safely(
            access_logger,
            logging.INFO,
            f"{request.method} {request.url.path} (IP: {client_address(request)})",
        )
        return await call_next(request)

    app.include_router(auth_router)
    app.include_router(search_router)
    app.include_router(admin_router)

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    @app.get("/")
    async def index(request: Request):
        session = current_session(request)
        return templates.TemplateResponse(
            request,
            "index.html",
            {
                "is_admin": bool(session and session.is_admin),
                "max_length": get_settings(request).search_max_length,
            },
        )

    return app


app = create_app()


def run() -> None:
    import uvicorn

    uvicorn.run(app, host=default_settings.host, port=default_settings.port)
