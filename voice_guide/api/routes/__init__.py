"""
API routes module.
Contains FastAPI route definitions.
"""

# Export all routers for easy import in main.py
from .healthcheck import router as healthcheck_router
from .voice import router as voice_router

__all__ = ["healthcheck_router", "voice_router"]
