"""Application use cases."""

from .voice_conversation import VoiceConversationUseCase, InvalidStateTransition

__all__ = ['VoiceConversationUseCase', 'InvalidStateTransition']
