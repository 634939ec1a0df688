"""
Response generation port for chat completion operations.
"""
from abc import ABC, abstractmethod


class ResponseGenerationPort(ABC):
    """
    Port (interface) for generating the guide's spoken reply to a transcript.
    """

    stage_name = "ai-response"

    @abstractmethod
    async def generate_reply(self, transcript: str) -> str:
        """
        Generate a reply for the user's transcribed question.

        Args:
            transcript: Text produced by the transcription stage

        Returns:
            Reply text suitable for speech synthesis

        Raises:
            UpstreamError: If the language-generation service rejects the request
        """
        pass
