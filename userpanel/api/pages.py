"""Server-rendered pages: login form, logout, and the admin and user pages."""

from pathlib import Path
from typing import Annotated

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates
from sqlalchemy.orm import Session

from userpanel.api.deps import (
    current_user_or_404,
    get_current_principal,
    get_hasher,
    get_user_service,
    user_with_roles,
)
from userpanel.core.config import get_settings
from userpanel.core.database import get_db
from userpanel.core.exceptions import AuthenticationError
from userpanel.core.security import PasswordHasher, create_access_token
from userpanel.schemas.auth import Principal
from userpanel.services.auth import authenticate, login_success_redirect
from userpanel.services.user_service import UserService

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

router = APIRouter()


@router.get("/", response_class=HTMLResponse)
@router.get("/login", response_class=HTMLResponse)
def login_page(request: Request) -> HTMLResponse:
    """Render the login form; ?error and ?logout show a notice."""
    return templates.TemplateResponse(
        request,
        "login.html",
        {
            "error": "error" in request.query_params,
            "logged_out": "logout" in request.query_params,
        },
    )


@router.post("/login")
def login(
    username: Annotated[str, Form()],
    password: Annotated[str, Form()],
    db: Annotated[Session, Depends(get_db)],
    hasher: Annotated[PasswordHasher, Depends(get_hasher)],
) -> RedirectResponse:
    """Check the form credentials, set the session cookie, and redirect by role."""
    try:
        principal = authenticate(db, username, password, hasher)
    except AuthenticationError:
        return RedirectResponse("/login?error", status_code=303)

    settings = get_settings()
    token = create_access_token(sub=principal.username, authorities=list(principal.authorities))
    response = RedirectResponse(login_success_redirect(principal), status_code=303)
    response.set_cookie(
        settings.SESSION_COOKIE_NAME,
        token,
        max_age=settings.JWT_EXPIRE_MINUTES * 60,
        httponly=True,
        secure=settings.SESSION_COOKIE_SECURE,
        samesite="lax",
    )
    return response


def _logout_response() -> RedirectResponse:
    response = RedirectResponse("/login?logout", status_code=303)
    response.delete_cookie(get_settings().SESSION_COOKIE_NAME)
    return response


@router.get("/logout")
def logout_link() -> RedirectResponse:
    return _logout_response()


@router.post("/logout")
def logout() -> RedirectResponse:
    """Clear the session cookie and go back to the login form."""
    return _logout_response()


@router.get("/admin", response_class=HTMLResponse)
def admin_page(
    request: Request,
    principal: Annotated[Principal, Depends(get_current_principal)],
    service: Annotated[UserService, Depends(get_user_service)],
) -> HTMLResponse:
    users = [user_with_roles(u, roles) for u, roles in service.get_all_users_with_roles().items()]
    return templates.TemplateResponse(
        request,
        "admin.html",
        {"current_user": current_user_or_404(service, principal), "users": users},
    )


@router.get("/user", response_class=HTMLResponse)
def user_page(
    request: Request,
    principal: Annotated[Principal, Depends(get_current_principal)],
    service: Annotated[UserService, Depends(get_user_service)],
) -> HTMLResponse:
    return templates.TemplateResponse(
        request,
        "user.html",
        {"current_user": current_user_or_404(service, principal)},
    )
