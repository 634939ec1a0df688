"""
OpenAI stage factory.

Creates the three OpenAI-backed stages for one request, sharing a single
client bound to that request's credential. Closing the stages closes the
client and its connection pool.
"""
from voice_guide.config.settings import Settings
from voice_guide.core.ports.stage_factory import ConversationStages, StageFactoryPort
from .client import create_openai_client
from .openai_transcription_adapter import OpenAITranscriptionAdapter
from .openai_chat_adapter import OpenAIChatResponseAdapter
from .openai_speech_adapter import OpenAISpeechSynthesisAdapter


class OpenAIStageFactory(StageFactoryPort):
    """Stage factory backed by the OpenAI API."""

    def __init__(self, settings: Settings):
        self.settings = settings

    def create_stages(self, api_key: str) -> ConversationStages:
        client = create_openai_client(api_key, self.settings)
        return ConversationStages(
            transcription=OpenAITranscriptionAdapter(
                client,
                model=self.settings.transcription_model
            ),
            response_generation=OpenAIChatResponseAdapter(
                client,
                model=self.settings.chat_model,
                temperature=self.settings.chat_temperature,
                max_tokens=self.settings.chat_max_tokens
            ),
            speech_synthesis=OpenAISpeechSynthesisAdapter(
                client,
                model=self.settings.speech_model,
                voice=self.settings.speech_voice
            ),
            release=client.close
        )
