"""
Unit tests for the OpenAI stage adapters.

The SDK client is mocked; tests check the parameters sent to each
endpoint and the translation of provider errors into UpstreamError.
"""
from unittest.mock import AsyncMock, patch

import pytest

from voice_guide.adapters.openai_stages import (
    OpenAIChatResponseAdapter,
    OpenAISpeechSynthesisAdapter,
    OpenAIStageFactory,
    OpenAITranscriptionAdapter
)
from voice_guide.adapters.openai_stages.client import create_openai_client
from voice_guide.adapters.openai_stages.openai_transcription_adapter import audio_filename_for
from voice_guide.core.exceptions import UpstreamError
from voice_guide.core.services.persona import BROOKLYN_GUIDE_PROMPT
from tests.utils.stub_stages import (
    BRUNCH_QUESTION,
    BRUNCH_REPLY,
    create_mock_openai_client,
    make_api_status_error
)


@pytest.fixture
def mock_client():
    return create_mock_openai_client(
        transcript=BRUNCH_QUESTION,
        reply=BRUNCH_REPLY,
        audio_bytes=b"ABC"
    )


class TestOpenAITranscriptionAdapter:
    """Test OpenAITranscriptionAdapter class."""

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_transcribe_sends_file_part_and_model(self, mock_client):
        adapter = OpenAITranscriptionAdapter(mock_client)

        text = await adapter.transcribe(b"webm bytes", "audio/webm")

        assert text == BRUNCH_QUESTION
        mock_client.audio.transcriptions.create.assert_awaited_once_with(
            model="whisper-1",
            file=("audio.webm", b"webm bytes", "audio/webm")
        )

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_transcribe_passes_content_type_through(self, mock_client):
        adapter = OpenAITranscriptionAdapter(mock_client, model="whisper-large")

        await adapter.transcribe(b"mp4 bytes", "audio/mp4;codecs=mp4a.40.2")

        kwargs = mock_client.audio.transcriptions.create.await_args.kwargs
        assert kwargs["model"] == "whisper-large"
        assert kwargs["file"] == ("audio.mp4", b"mp4 bytes", "audio/mp4;codecs=mp4a.40.2")

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_transcribe_failure_raises_upstream_error(self, mock_client):
        mock_client.audio.transcriptions.create = AsyncMock(
            side_effect=make_api_status_error(400, '{"error": {"message": "Invalid file format."}}')
        )
        adapter = OpenAITranscriptionAdapter(mock_client)

        with pytest.raises(UpstreamError) as exc_info:
            await adapter.transcribe(b"bytes", "audio/webm")

        error = exc_info.value
        assert error.stage == "transcription"
        assert error.upstream_status == 400
        assert error.upstream_body == '{"error": {"message": "Invalid file format."}}'
        assert error.message.startswith("Whisper API error: ")

    @pytest.mark.unit
    @pytest.mark.parametrize("mime_type, filename", [
        ("audio/webm", "audio.webm"),
        ("audio/webm;codecs=opus", "audio.webm"),
        ("audio/ogg", "audio.ogg"),
        ("audio/mpeg", "audio.mp3"),
        ("audio/x-wav", "audio.wav"),
        ("AUDIO/MP4", "audio.mp4"),
        ("application/octet-stream", "audio.webm"),
        ("", "audio.webm"),
    ])
    def test_audio_filename_for(self, mime_type, filename):
        assert audio_filename_for(mime_type) == filename


class TestOpenAIChatResponseAdapter:
    """Test OpenAIChatResponseAdapter class."""

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_generate_reply_sends_persona_and_transcript(self, mock_client):
        adapter = OpenAIChatResponseAdapter(mock_client)

        reply = await adapter.generate_reply(BRUNCH_QUESTION)

        assert reply == BRUNCH_REPLY
        mock_client.chat.completions.create.assert_awaited_once_with(
            model="gpt-4",
            messages=[
                {"role": "system", "content": BROOKLYN_GUIDE_PROMPT},
                {"role": "user", "content": BRUNCH_QUESTION}
            ],
            temperature=0.7,
            max_tokens=200
        )

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_generate_reply_failure_raises_upstream_error(self, mock_client):
        mock_client.chat.completions.create = AsyncMock(
            side_effect=make_api_status_error(429, "Rate limit reached", path="/v1/chat/completions")
        )
        adapter = OpenAIChatResponseAdapter(mock_client)

        with pytest.raises(UpstreamError) as exc_info:
            await adapter.generate_reply(BRUNCH_QUESTION)

        assert exc_info.value.stage == "ai-response"
        assert exc_info.value.message == "GPT-4 API error: Rate limit reached"

    @pytest.mark.unit
    def test_persona_covers_guide_topics(self):
        for topic in ("Restaurants and cafes", "Events and activities", "Neighborhoods to explore",
                      "Shopping destinations", "Attractions and landmarks", "(2-4 sentences)"):
            assert topic in BROOKLYN_GUIDE_PROMPT


class TestOpenAISpeechSynthesisAdapter:
    """Test OpenAISpeechSynthesisAdapter class."""

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_synthesize_returns_base64_audio(self, mock_client):
        adapter = OpenAISpeechSynthesisAdapter(mock_client)

        audio = await adapter.synthesize(BRUNCH_REPLY)

        assert audio == "QUJD"
        mock_client.audio.speech.create.assert_awaited_once_with(
            model="tts-1",
            input=BRUNCH_REPLY,
            voice="alloy"
        )

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_synthesize_failure_raises_upstream_error(self, mock_client):
        mock_client.audio.speech.create = AsyncMock(
            side_effect=make_api_status_error(500, "server error", path="/v1/audio/speech")
        )
        adapter = OpenAISpeechSynthesisAdapter(mock_client)

        with pytest.raises(UpstreamError) as exc_info:
            await adapter.synthesize(BRUNCH_REPLY)

        assert exc_info.value.stage == "speech-synthesis"
        assert exc_info.value.message == "TTS API error: server error"


class TestOpenAIStageFactory:
    """Test OpenAIStageFactory and client construction."""

    @pytest.mark.unit
    def test_create_stages_uses_settings(self, test_settings, mock_client):
        settings = test_settings.model_copy(update={
            "chat_model": "gpt-4o",
            "chat_max_tokens": 120,
            "speech_voice": "nova"
        })

        with patch(
            "voice_guide.adapters.openai_stages.stage_factory.create_openai_client",
            return_value=mock_client
        ) as create_client:
            stages = OpenAIStageFactory(settings).create_stages("sk-request-key")

        create_client.assert_called_once_with("sk-request-key", settings)
        assert stages.transcription.model == "whisper-1"
        assert stages.response_generation.model == "gpt-4o"
        assert stages.response_generation.max_tokens == 120
        assert stages.speech_synthesis.voice == "nova"
        assert stages.transcription.client is stages.speech_synthesis.client

    @pytest.mark.unit
    def test_client_disables_retries_and_timeout(self, test_settings):
        client = create_openai_client("sk-request-key", test_settings)

        assert client.api_key == "sk-request-key"
        assert client.max_retries == 0
        assert client.timeout is None

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_closing_stages_closes_shared_client(self, test_settings, mock_client):
        with patch(
            "voice_guide.adapters.openai_stages.stage_factory.create_openai_client",
            return_value=mock_client
        ):
            stages = OpenAIStageFactory(test_settings).create_stages("sk-request-key")

        await stages.aclose()

        mock_client.close.assert_awaited_once()
