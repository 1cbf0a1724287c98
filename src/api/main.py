from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from api.actions import analyze, config, health, query, uploads
from core.config import get_settings
from core.logging import configure_logging
from services.session import DocumentSession

settings = get_settings()
configure_logging(settings.log_level)

app = FastAPI(title="Contract QA API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

# one current document per process
app.state.session = DocumentSession()

app.include_router(health.router)
app.include_router(config.router)
app.include_router(analyze.router)
app.include_router(query.router)
app.include_router(uploads.router)


@app.exception_handler(StarletteHTTPException)
async def error_body_handler(request: Request, exc: StarletteHTTPException):
    # the viewer reads {"error", "details"} at the top level
    if isinstance(exc.detail, dict):
        return JSONResponse(
            status_code=exc.status_code,
            content=exc.detail,
            headers=getattr(exc, "headers", None),
        )
    return await http_exception_handler(request, exc)


def serve() -> None:
    """Run the API with uvicorn using the configured host/port."""
    import uvicorn

    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


__all__ = ["app", "serve"]
