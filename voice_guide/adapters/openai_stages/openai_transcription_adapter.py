"""
OpenAI Transcription Adapter.

Adapter implementation that connects the TranscriptionServicePort interface
with the OpenAI Whisper transcription endpoint.
"""
from openai import APIStatusError, AsyncOpenAI

from voice_guide.core.ports.transcription_service import TranscriptionServicePort
from voice_guide.infrastructure.logging.log_decorators import log_stage_call
from .client import upstream_error_from


DEFAULT_AUDIO_EXTENSION = "webm"

# Whisper detects the container from the upload's file extension
MIME_TYPE_EXTENSIONS = {
    "audio/webm": "webm",
    "video/webm": "webm",
    "audio/ogg": "ogg",
    "audio/mp4": "mp4",
    "audio/m4a": "m4a",
    "audio/x-m4a": "m4a",
    "audio/mpeg": "mp3",
    "audio/mp3": "mp3",
    "audio/mpga": "mpga",
    "audio/wav": "wav",
    "audio/wave": "wav",
    "audio/x-wav": "wav",
    "audio/flac": "flac",
}


def audio_filename_for(mime_type: str) -> str:
    """
    Build the upload filename for a media type.

    Codec parameters are ignored ('audio/webm;codecs=opus' -> 'audio.webm').
    Unknown types fall back to webm.
    """
    base_type = (mime_type or "").split(";", 1)[0].strip().lower()
    extension = MIME_TYPE_EXTENSIONS.get(base_type, DEFAULT_AUDIO_EXTENSION)
    return f"audio.{extension}"


class OpenAITranscriptionAdapter(TranscriptionServicePort):
    """
    Adapter that implements TranscriptionServicePort using OpenAI Whisper.

    The audio is sent as a multipart file part with the client's content
    type passed through unchanged.
    """

    def __init__(self, client: AsyncOpenAI, model: str = "whisper-1"):
        """
        Initialize the OpenAI transcription adapter.

        Args:
            client: Async OpenAI client bound to the request credential
            model: Speech-recognition model identifier
        """
        self.client = client
        self.model = model

    @log_stage_call("transcription")
    async def transcribe(self, audio_data: bytes, mime_type: str) -> str:
        filename = audio_filename_for(mime_type)
        try:
            result = await self.client.audio.transcriptions.create(
                model=self.model,
                file=(filename, audio_data, mime_type)
            )
        except APIStatusError as e:
            raise upstream_error_from(self.stage_name, e) from e

        return result.text
