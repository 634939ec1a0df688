"""Ports (interfaces) for the voice conversation pipeline stages."""

from .transcription_service import TranscriptionServicePort
from .response_generation import ResponseGenerationPort
from .speech_synthesis import SpeechSynthesisPort
from .stage_factory import ConversationStages, StageFactoryPort

__all__ = [
    "TranscriptionServicePort",
    "ResponseGenerationPort",
    "SpeechSynthesisPort",
    "ConversationStages",
    "StageFactoryPort"
]
