"""
Speech synthesis port for text-to-speech operations.
"""
from abc import ABC, abstractmethod


class SpeechSynthesisPort(ABC):
    """
    Port (interface) for converting reply text to encoded audio.
    """

    stage_name = "speech-synthesis"

    @abstractmethod
    async def synthesize(self, text: str) -> str:
        """
        Synthesize speech for the given text.

        Args:
            text: Reply text to speak

        Returns:
            Synthesized audio as base64 text

        Raises:
            UpstreamError: If the speech-synthesis service rejects the request
        """
        pass
