"""
Front-end entry point.

Serves files from the static directory and falls back to index.html so the
single-page front-end can own its own routes.
"""
from pathlib import Path
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import FileResponse

from senior_care.api.dependencies.app_state import get_app_settings
from senior_care.config.settings import Settings

router = APIRouter(include_in_schema=False)

INDEX_FILE = "index.html"


def resolve_static_file(static_dir: Path, requested: str) -> Optional[Path]:
    """Return the file for ``requested`` if it exists inside ``static_dir``."""
    root = static_dir.resolve()
    candidate = (root / requested).resolve()
    if candidate != root and root not in candidate.parents:
        return None
    return candidate if candidate.is_file() else None


@router.get("/{full_path:path}")
async def serve_frontend(full_path: str, settings: Settings = Depends(get_app_settings)):
    if full_path == "api" or full_path.startswith("api/"):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not found")

    static_file = resolve_static_file(settings.static_dir, full_path) if full_path else None
    if static_file is not None:
        return FileResponse(static_file)

    index = settings.static_dir / INDEX_FILE
    if not index.is_file():
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not found")
    return FileResponse(index)
