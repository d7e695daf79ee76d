"""FastAPI application entrypoint. No business logic; only wiring, handlers and startup seeding."""

from dotenv import load_dotenv

load_dotenv()

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import Depends, FastAPI, Request, status
from fastapi.responses import JSONResponse, RedirectResponse, Response
from fastapi.staticfiles import StaticFiles

from userpanel.api import router as api_router
from userpanel.api.deps import enforce_access_rules
from userpanel.core.config import settings
from userpanel.core.database import SessionLocal
from userpanel.core.exceptions import NotAuthenticatedError
from userpanel.core.security import get_password_hasher
from userpanel.services.seed import seed_initial_data

STATIC_DIR = Path(__file__).resolve().parent / "static"


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
    if settings.SEED_ON_STARTUP:
        db = SessionLocal()
        try:
            seed_initial_data(db, get_password_hasher(settings))
        finally:
            db.close()
    yield


app = FastAPI(
    title="User Panel",
    version="0.1.0",
    # Docs are served by userpanel.api.docs behind the access rules.
    docs_url=None,
    redoc_url=None,
    openapi_url=None,
    lifespan=lifespan,
    dependencies=[Depends(enforce_access_rules)],
)

app.mount("/css", StaticFiles(directory=str(STATIC_DIR / "css")), name="css")

app.include_router(api_router)


@app.exception_handler(NotAuthenticatedError)
async def not_authenticated_handler(request: Request, exc: NotAuthenticatedError) -> Response:
    """API callers get 401; browsers are sent to the login form."""
    if exc.path.startswith("/api/"):
        return JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED,
            content={"detail": exc.message},
            headers={"WWW-Authenticate": "Bearer"},
        )
    return RedirectResponse("/login", status_code=status.HTTP_303_SEE_OTHER)
