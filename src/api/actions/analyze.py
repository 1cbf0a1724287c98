import logging
from pathlib import Path
from typing import Annotated, Optional

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile
from fastapi.concurrency import run_in_threadpool

from api.dependencies import get_session
from core.config import get_settings
from schemas.requests import ContractInput
from schemas.responses import AnalyzeResponse
from services.contract_runner import run_analysis
from services.io import is_pdf_upload
from services.session import DocumentSession

logger = logging.getLogger(__name__)

router = APIRouter()

@router.post("/api/analyze", response_model=AnalyzeResponse, tags=["Pipeline"])
async def analyze_contract(
    document: Annotated[Optional[UploadFile], File()] = None,
    session: DocumentSession = Depends(get_session),
):
    """
    Upload a contract PDF, run layout analysis and return its structured content.

    The extracted full text replaces the session's current document context.
    """
    if document is None:
        raise HTTPException(status_code=400, detail={"error": "No file uploaded"})

    if not is_pdf_upload(document.filename, document.content_type):
        raise HTTPException(status_code=400, detail={"error": "Only PDF files are allowed"})

    content = await document.read()
    if not content:
        raise HTTPException(status_code=400, detail={"error": "Uploaded file is empty"})

    try:
        result = await run_in_threadpool(
            run_analysis,
            ContractInput(pdf_bytes=content, filename=document.filename),
            session=session,
            store=True,
            settings=get_settings(),
        )
    except Exception as e:
        logger.exception("Analysis error")
        raise HTTPException(
            status_code=500,
            detail={"error": "Failed to analyze document", "details": str(e)},
        )

    stored_name = Path(result.stored_path).name if result.stored_path else ""
    return AnalyzeResponse(
        filename=document.filename,
        file_path=f"/uploads/{stored_name}",
        content=result.content,
    )
