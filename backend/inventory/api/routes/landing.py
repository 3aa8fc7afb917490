"""Landing Page: serves the static dashboard at /."""

from pathlib import Path

from fastapi import APIRouter
from fastapi.responses import FileResponse

from inventory.config import get_settings
from inventory.core.errors import ResourceNotFoundError

router = APIRouter(tags=["landing"])


@router.get("/", include_in_schema=False)
async def landing_page():
    index = Path(get_settings().static_dir) / "index.html"
    if not index.is_file():
        raise ResourceNotFoundError("Landing page")
    return FileResponse(index)
