import logging

from fastapi import APIRouter, Depends, HTTPException
from fastapi.concurrency import run_in_threadpool

from api.dependencies import get_session
from schemas.requests import QueryRequest
from schemas.responses import QueryResponse
from services.qa import answer_question
from services.session import DocumentSession, NoDocumentContextError

logger = logging.getLogger(__name__)

router = APIRouter()

@router.post("/api/query", response_model=QueryResponse, tags=["Pipeline"])
async def query_document(
    request: QueryRequest,
    session: DocumentSession = Depends(get_session),
):
    """Answer a question about the most recently analyzed document."""
    question = (request.question or "").strip()
    if not question:
        raise HTTPException(status_code=400, detail={"error": "Question is required"})

    try:
        context = session.require_context()
    except NoDocumentContextError as e:
        raise HTTPException(status_code=400, detail={"error": str(e)})

    try:
        answer = await run_in_threadpool(answer_question, question, context.full_text)
    except Exception as e:
        logger.exception("Query error")
        raise HTTPException(
            status_code=500,
            detail={"error": "Failed to process query", "details": str(e)},
        )

    return QueryResponse(answer=answer)
