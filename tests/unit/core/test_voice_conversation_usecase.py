"""
Unit tests for Voice Conversation Use Case.

Tests the sequential pipeline, its state machine and atomic failure.
"""
import pytest

from voice_guide.core.exceptions import UpstreamError
from voice_guide.core.models import IncomingAudio, PipelineState
from voice_guide.core.usecases.voice_conversation import InvalidStateTransition, VoiceConversationUseCase
from tests.utils.stub_stages import (
    BRUNCH_AUDIO_BASE64,
    BRUNCH_QUESTION,
    BRUNCH_REPLY,
    build_stub_stages,
    upstream_error
)


@pytest.fixture
def incoming_audio():
    return IncomingAudio(audio_bytes=b"recorded question", mime_type="audio/webm")


class TestVoiceConversationUseCase:
    """Test VoiceConversationUseCase class."""

    @pytest.mark.unit
    def test_initial_state(self, brunch_stages):
        use_case = VoiceConversationUseCase(brunch_stages)

        assert use_case.state is PipelineState.VALIDATING
        assert use_case.history == [PipelineState.VALIDATING]

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_execute_success(self, brunch_stages, incoming_audio):
        use_case = VoiceConversationUseCase(brunch_stages)

        result = await use_case.execute(incoming_audio)

        assert result.transcript == BRUNCH_QUESTION
        assert result.ai_response == BRUNCH_REPLY
        assert result.audio_response == BRUNCH_AUDIO_BASE64
        assert use_case.state is PipelineState.SUCCEEDED
        assert use_case.history == [
            PipelineState.VALIDATING,
            PipelineState.TRANSCRIBING,
            PipelineState.GENERATING,
            PipelineState.SYNTHESIZING,
            PipelineState.SUCCEEDED
        ]

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_each_stage_receives_previous_output(self, brunch_stages, incoming_audio):
        await VoiceConversationUseCase(brunch_stages).execute(incoming_audio)

        assert brunch_stages.transcription.calls == [(b"recorded question", "audio/webm")]
        assert brunch_stages.response_generation.calls == [BRUNCH_QUESTION]
        assert brunch_stages.speech_synthesis.calls == [BRUNCH_REPLY]

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_transcription_failure_short_circuits(self, incoming_audio):
        stages = build_stub_stages(transcription_error=upstream_error("transcription"))
        use_case = VoiceConversationUseCase(stages)

        with pytest.raises(UpstreamError) as exc_info:
            await use_case.execute(incoming_audio)

        assert exc_info.value.stage == "transcription"
        assert stages.response_generation.calls == []
        assert stages.speech_synthesis.calls == []
        assert use_case.state is PipelineState.FAILED
        assert use_case.history[-2:] == [PipelineState.TRANSCRIBING, PipelineState.FAILED]

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_generation_failure_skips_synthesis(self, incoming_audio):
        stages = build_stub_stages(
            transcript=BRUNCH_QUESTION,
            generation_error=upstream_error("ai-response")
        )
        use_case = VoiceConversationUseCase(stages)

        with pytest.raises(UpstreamError):
            await use_case.execute(incoming_audio)

        assert stages.speech_synthesis.calls == []
        assert use_case.history[-2:] == [PipelineState.GENERATING, PipelineState.FAILED]

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_unexpected_error_also_fails_pipeline(self, incoming_audio):
        stages = build_stub_stages(
            transcript=BRUNCH_QUESTION,
            reply=BRUNCH_REPLY,
            synthesis_error=RuntimeError("socket closed")
        )
        use_case = VoiceConversationUseCase(stages)

        with pytest.raises(RuntimeError, match="socket closed"):
            await use_case.execute(incoming_audio)

        assert use_case.history[-2:] == [PipelineState.SYNTHESIZING, PipelineState.FAILED]

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_use_case_cannot_run_twice(self, brunch_stages, incoming_audio):
        use_case = VoiceConversationUseCase(brunch_stages)
        await use_case.execute(incoming_audio)

        with pytest.raises(InvalidStateTransition):
            await use_case.execute(incoming_audio)

        assert len(brunch_stages.transcription.calls) == 1


@pytest.mark.unit
def test_terminal_states():
    assert PipelineState.SUCCEEDED.is_terminal
    assert PipelineState.FAILED.is_terminal
    assert not PipelineState.TRANSCRIBING.is_terminal
