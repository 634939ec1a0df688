"""
Domain models module.
Contains request-scoped entities for the voice conversation pipeline.
"""

from .conversation import (
    PipelineState,
    PIPELINE_TRANSITIONS,
    IncomingAudio,
    ConversationResult
)

__all__ = [
    "PipelineState",
    "PIPELINE_TRANSITIONS",
    "IncomingAudio",
    "ConversationResult"
]
