"""
OpenAI Speech Synthesis Adapter.
"""
import base64

from openai import APIStatusError, AsyncOpenAI

from voice_guide.core.ports.speech_synthesis import SpeechSynthesisPort
from voice_guide.infrastructure.logging.log_decorators import log_stage_call
from .client import upstream_error_from


class OpenAISpeechSynthesisAdapter(SpeechSynthesisPort):
    """Adapter that speaks reply text with a fixed OpenAI voice."""

    def __init__(self, client: AsyncOpenAI, model: str = "tts-1", voice: str = "alloy"):
        self.client = client
        self.model = model
        self.voice = voice

    @log_stage_call("speech-synthesis")
    async def synthesize(self, text: str) -> str:
        try:
            response = await self.client.audio.speech.create(
                model=self.model,
                input=text,
                voice=self.voice
            )
        except APIStatusError as e:
            raise upstream_error_from(self.stage_name, e) from e

        return base64.b64encode(response.content).decode("ascii")
