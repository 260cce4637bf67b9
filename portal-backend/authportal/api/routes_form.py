# File: authportal/api/routes_form.py

from pathlib import Path

from fastapi import APIRouter
from fastapi.responses import FileResponse

STATIC_DIR = Path(__file__).resolve().parent.parent / "static"
LOGIN_PAGE = STATIC_DIR / "login.html"

router = APIRouter(tags=["form"])


@router.get("/", include_in_schema=False)
def credential_form():
    """Serve the credential submission form."""
    return FileResponse(LOGIN_PAGE, media_type="text/html")
