"""
Conversation domain models for Brooklyn Voice Guide.
Pure request-scoped entities without infrastructure dependencies.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Dict


class PipelineState(Enum):
    """Lifecycle states of a single voice conversation request."""
    VALIDATING = "validating"
    TRANSCRIBING = "transcribing"
    GENERATING = "generating"
    SYNTHESIZING = "synthesizing"
    SUCCEEDED = "succeeded"
    FAILED = "failed"

    @property
    def is_terminal(self) -> bool:
        return self in (PipelineState.SUCCEEDED, PipelineState.FAILED)


# Forward-only transitions; FAILED is reachable from every non-terminal state
PIPELINE_TRANSITIONS = {
    PipelineState.VALIDATING: PipelineState.TRANSCRIBING,
    PipelineState.TRANSCRIBING: PipelineState.GENERATING,
    PipelineState.GENERATING: PipelineState.SYNTHESIZING,
    PipelineState.SYNTHESIZING: PipelineState.SUCCEEDED,
}


@dataclass(frozen=True)
class IncomingAudio:
    """Decoded audio accepted by the request gate."""
    audio_bytes: bytes
    mime_type: str

    @property
    def size_bytes(self) -> int:
        return len(self.audio_bytes)


@dataclass(frozen=True)
class ConversationResult:
    """Aggregate returned to the caller once all three stages succeed."""
    transcript: str
    ai_response: str
    audio_response: str  # base64 text

    def to_payload(self) -> Dict[str, str]:
        """Convert to the wire payload with camelCase keys."""
        return {
            "transcript": self.transcript,
            "aiResponse": self.ai_response,
            "audioResponse": self.audio_response,
        }
