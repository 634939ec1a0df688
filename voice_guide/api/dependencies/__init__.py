"""
Dependency injection configuration for Brooklyn Voice Guide.
Central configuration following Clean Architecture principles.
"""
from functools import lru_cache
from typing import Optional

from voice_guide.config.settings import Settings, get_settings
from voice_guide.core.ports.stage_factory import StageFactoryPort
from voice_guide.adapters.openai_stages.stage_factory import OpenAIStageFactory
from voice_guide.api.voice_handler import VoiceRequestHandler


class DependencyContainer:
    """
    Dependency injection container following Clean Architecture.
    """

    def __init__(self, settings: Optional[Settings] = None):
        """Initialize dependency container."""
        self._settings = settings
        self._stage_factory = None
        self._voice_request_handler = None

    # CONFIGURATION
    @property
    def settings(self) -> Settings:
        """Get settings instance (singleton)."""
        if self._settings is None:
            self._settings = get_settings()
        return self._settings

    # INFRASTRUCTURE LAYER (Outer layer)
    @property
    def stage_factory(self) -> StageFactoryPort:
        """Get pipeline stage factory (singleton)."""
        if self._stage_factory is None:
            self._stage_factory = OpenAIStageFactory(self.settings)
        return self._stage_factory

    # PRESENTATION LAYER
    @property
    def voice_request_handler(self) -> VoiceRequestHandler:
        """Get voice request handler (singleton)."""
        if self._voice_request_handler is None:
            self._voice_request_handler = VoiceRequestHandler(
                settings=self.settings,
                stage_factory=self.stage_factory
            )
        return self._voice_request_handler

    # TESTING SUPPORT
    def override_settings(self, settings: Settings) -> None:
        """Override settings (for testing)."""
        self._settings = settings
        # Reset dependent services
        self._stage_factory = None
        self._voice_request_handler = None

    def override_stage_factory(self, stage_factory: StageFactoryPort) -> None:
        """Override stage factory (for testing)."""
        self._stage_factory = stage_factory
        # Reset dependent services
        self._voice_request_handler = None


# GLOBAL CONTAINER INSTANCE
@lru_cache()
def get_dependency_container() -> DependencyContainer:
    """Get global dependency container (singleton)."""
    return DependencyContainer()


# FASTAPI DEPENDENCY FUNCTIONS
def get_app_settings() -> Settings:
    """FastAPI dependency for settings."""
    return get_dependency_container().settings


def get_voice_request_handler() -> VoiceRequestHandler:
    """FastAPI dependency for the voice request handler."""
    return get_dependency_container().voice_request_handler


# CONFIGURATION VALIDATION
def validate_dependencies() -> None:
    """
    Validate that all dependencies can be created successfully.
    Call this at application startup. A missing OpenAI key is not an
    error here; it is reported per request.
    """
    container = get_dependency_container()
    container.voice_request_handler
