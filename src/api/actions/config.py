from typing import Any, Dict

from fastapi import APIRouter

from core.config import get_settings

router = APIRouter()

@router.get("/config", tags=["System"])
async def get_configuration() -> Dict[str, Any]:
    """Effective runtime configuration; API keys are masked."""
    # SecretStr fields dump as "**********" in json mode
    return get_settings().model_dump(mode="json")
