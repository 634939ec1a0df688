"""
Health check routes for Brooklyn Voice Guide.
"""
from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from voice_guide.api.dependencies import get_app_settings
from voice_guide.config.settings import Settings


router = APIRouter()


@router.get("/ping", tags=["Health"])
async def ping():
    """
    Basic health check endpoint.

    Returns:
        dict: Simple pong response
    """
    return {"message": "pong"}


@router.get("/health", tags=["Health"])
async def health_check(settings: Settings = Depends(get_app_settings)):
    """
    Report service status and whether the OpenAI credential is configured.
    The credential itself is never returned.
    """
    return {
        "status": "healthy" if settings.has_openai_api_key else "degraded",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "environment": settings.environment,
        "service": settings.service_name,
        "openai_api_key_configured": settings.has_openai_api_key
    }
