"""
OpenAI Chat Response Adapter.

Implements ResponseGenerationPort with the chat completions endpoint and
the static Brooklyn guide persona.
"""
from openai import APIStatusError, AsyncOpenAI

from voice_guide.core.ports.response_generation import ResponseGenerationPort
from voice_guide.core.services.persona import build_guide_messages
from voice_guide.infrastructure.logging.log_decorators import log_stage_call
from .client import upstream_error_from


class OpenAIChatResponseAdapter(ResponseGenerationPort):
    """
    Adapter that generates the guide's reply with an OpenAI chat model.
    """

    def __init__(
        self,
        client: AsyncOpenAI,
        model: str = "gpt-4",
        temperature: float = 0.7,
        max_tokens: int = 200
    ):
        """
        Initialize the chat response adapter.

        Args:
            client: Async OpenAI client bound to the request credential
            model: Chat model identifier
            temperature: Sampling temperature
            max_tokens: Upper bound on generated tokens
        """
        self.client = client
        self.model = model
        self.temperature = temperature
        self.max_tokens = max_tokens

    @log_stage_call("ai-response")
    async def generate_reply(self, transcript: str) -> str:
        """Send persona and transcript; return the first choice's content."""
        try:
            response = await self.client.chat.completions.create(
                model=self.model,
                messages=build_guide_messages(transcript),
                temperature=self.temperature,
                max_tokens=self.max_tokens
            )
        except APIStatusError as e:
            raise upstream_error_from(self.stage_name, e) from e

        return response.choices[0].message.content or ""
