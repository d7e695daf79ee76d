"""HTTP routes: REST API under /api plus the server-rendered pages."""

from fastapi import APIRouter

from userpanel.api import admin, auth, docs, fallback, health, pages, user

router = APIRouter()
router.include_router(pages.router, tags=["pages"])
router.include_router(docs.router)
router.include_router(auth.router, prefix="/api/auth", tags=["auth"])
router.include_router(health.router, prefix="/api/health", tags=["health"])
router.include_router(admin.router, prefix="/api/admin", tags=["admin"])
router.include_router(user.router, prefix="/api/user", tags=["user"])
# Must stay last: matches every path.
router.include_router(fallback.router)
