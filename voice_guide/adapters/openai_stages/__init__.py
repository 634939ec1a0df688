"""OpenAI adapters for the transcription, response and speech stages."""

from .openai_transcription_adapter import OpenAITranscriptionAdapter
from .openai_chat_adapter import OpenAIChatResponseAdapter
from .openai_speech_adapter import OpenAISpeechSynthesisAdapter
from .stage_factory import OpenAIStageFactory

__all__ = [
    'OpenAITranscriptionAdapter',
    'OpenAIChatResponseAdapter',
    'OpenAISpeechSynthesisAdapter',
    'OpenAIStageFactory'
]
