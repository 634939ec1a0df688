"""
Brooklyn Voice Guide FastAPI Application (Clean Architecture).
Serves the voice conversation endpoint for local development and ASGI hosts.
"""
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from voice_guide.api.routes.healthcheck import router as healthcheck_router
from voice_guide.api.routes.voice import router as voice_router
from voice_guide.api.dependencies import get_dependency_container, validate_dependencies


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.
    """
    validate_dependencies()
    yield


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application with Clean Architecture.
    """
    settings = get_dependency_container().settings

    app = FastAPI(
        title="Brooklyn Voice Guide API",
        version="1.0.0",
        description="Voice assistant proxy: speech-to-text, Brooklyn guide reply, text-to-speech",
        lifespan=lifespan
    )

    # CORS Middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Route registration
    app.include_router(healthcheck_router, prefix="/api")
    app.include_router(voice_router, prefix="/api")

    return app


app = create_app()
