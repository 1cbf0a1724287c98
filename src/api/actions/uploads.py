from fastapi import APIRouter, HTTPException
from fastapi.responses import FileResponse

from core.config import get_settings
from services.io import PDF_CONTENT_TYPE, resolve_upload

router = APIRouter()

@router.get("/uploads/{filename}", tags=["Files"])
async def get_upload(filename: str):
    """Serve a previously uploaded PDF to the document viewer."""
    try:
        path = resolve_upload(filename, get_settings().upload_dir)
    except FileNotFoundError:
        raise HTTPException(status_code=404, detail={"error": "File not found"})
    return FileResponse(path, media_type=PDF_CONTENT_TYPE)
