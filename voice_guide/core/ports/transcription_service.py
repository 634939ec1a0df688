"""
Transcription service port for speech-to-text operations.

This module defines the contract for transcription implementations,
following Clean Architecture principles by defining the interface
without implementation details.
"""
from abc import ABC, abstractmethod


class TranscriptionServicePort(ABC):
    """
    Port (interface) for audio transcription.

    Implementations perform exactly one outbound call per invocation.
    """

    stage_name = "transcription"

    @abstractmethod
    async def transcribe(self, audio_data: bytes, mime_type: str) -> str:
        """
        Transcribe audio data to text.

        Args:
            audio_data: Raw audio bytes to transcribe
            mime_type: Media type of the audio (e.g., 'audio/webm')

        Returns:
            Transcribed plain text

        Raises:
            UpstreamError: If the speech-recognition service rejects the request
        """
        pass
