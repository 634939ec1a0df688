"""
Stage factory port.

Builds the three pipeline stages bound to the credential read for the
current request, so adapters never read global configuration themselves.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Awaitable, Callable, Optional

from .transcription_service import TranscriptionServicePort
from .response_generation import ResponseGenerationPort
from .speech_synthesis import SpeechSynthesisPort


@dataclass(frozen=True)
class ConversationStages:
    """Ordered set of stages for one request."""
    transcription: TranscriptionServicePort
    response_generation: ResponseGenerationPort
    speech_synthesis: SpeechSynthesisPort
    release: Optional[Callable[[], Awaitable[None]]] = None

    async def aclose(self) -> None:
        """Release resources shared by the stages, such as an HTTP connection pool."""
        if self.release is not None:
            await self.release()


class StageFactoryPort(ABC):
    """Port (interface) for creating request-scoped pipeline stages."""

    @abstractmethod
    def create_stages(self, api_key: str) -> ConversationStages:
        """
        Create stages authorized with the given credential.

        Args:
            api_key: Bearer credential for all outbound calls

        Returns:
            ConversationStages for a single request
        """
        pass
