"""
Voice conversation use case.

This module contains the pipeline that turns one recorded question into a
transcript, a spoken-style reply and synthesized audio, following Clean
Architecture principles with dependency inversion.
"""
from typing import List

from ..exceptions import VoiceGuideError
from ..models.conversation import (
    PIPELINE_TRANSITIONS,
    ConversationResult,
    IncomingAudio,
    PipelineState
)
from ..ports.stage_factory import ConversationStages
from voice_guide.infrastructure.logging.log_config import get_logger

logger = get_logger(__name__)


class InvalidStateTransition(VoiceGuideError):
    """Raised when the pipeline is driven out of its forward-only order."""

    default_error_code = "INVALID_STATE_TRANSITION"


class VoiceConversationUseCase:
    """
    Use case for a single voice conversation turn.

    Runs transcription, response generation and speech synthesis strictly in
    sequence. A failure at any stage moves the pipeline to FAILED and stops
    the remaining stages, so a partial result is never returned.

    Instances are request-scoped: the state machine is not reusable.
    """

    def __init__(self, stages: ConversationStages):
        """
        Initialize the voice conversation use case.

        Args:
            stages: Transcription, response generation and synthesis stages
        """
        self.stages = stages
        self.state = PipelineState.VALIDATING
        self.history: List[PipelineState] = [PipelineState.VALIDATING]

    def _advance(self) -> None:
        next_state = PIPELINE_TRANSITIONS.get(self.state)
        if next_state is None:
            raise InvalidStateTransition(
                f"No forward transition from state '{self.state.value}'"
            )
        self.state = next_state
        self.history.append(next_state)
        logger.debug("Pipeline state changed", extra={
            "extra_fields": {"state": next_state.value}
        })

    def _fail(self) -> None:
        failed_state = self.state
        self.state = PipelineState.FAILED
        self.history.append(PipelineState.FAILED)
        logger.debug("Pipeline failed", extra={
            "extra_fields": {"failed_state": failed_state.value}
        })

    async def execute(self, audio: IncomingAudio) -> ConversationResult:
        """
        Run the full pipeline for validated audio.

        Args:
            audio: Decoded audio accepted by the request gate

        Returns:
            ConversationResult with transcript, reply and base64 audio

        Raises:
            UpstreamError: If any provider call fails
            InvalidStateTransition: If the instance is executed twice
        """
        if self.state is not PipelineState.VALIDATING:
            raise InvalidStateTransition(
                f"Pipeline already in state '{self.state.value}'"
            )

        logger.info("Starting voice conversation pipeline", extra={
            "extra_fields": {
                "audio_size_bytes": audio.size_bytes,
                "mime_type": audio.mime_type
            }
        })

        try:
            self._advance()
            transcript = await self.stages.transcription.transcribe(
                audio.audio_bytes, audio.mime_type
            )

            self._advance()
            ai_response = await self.stages.response_generation.generate_reply(transcript)

            self._advance()
            audio_response = await self.stages.speech_synthesis.synthesize(ai_response)

            self._advance()
        except Exception:
            self._fail()
            raise

        logger.info("Voice conversation pipeline completed", extra={
            "extra_fields": {
                "transcript_length": len(transcript),
                "reply_length": len(ai_response),
                "audio_response_length": len(audio_response)
            }
        })

        return ConversationResult(
            transcript=transcript,
            ai_response=ai_response,
            audio_response=audio_response
        )
