"""Catch-all route for unknown paths; include it last."""

from fastapi import APIRouter, HTTPException, status

router = APIRouter(include_in_schema=False)


@router.api_route("/{path:path}", methods=["GET", "POST", "PUT", "PATCH", "DELETE"])
def not_found(path: str) -> None:
    """
    Answer 404 for paths no other route serves.

    As an API route it runs the app-wide access check first, so anonymous
    callers get 401 or the login redirect instead of learning which paths exist.
    """
    raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not Found")
