"""
Request gate for incoming voice requests.

Validates method, audio payload and credential before any outbound call
is made. Checks run in a fixed order: method, audio, credential.
"""
import base64
import binascii
from typing import Any, Optional

from ..exceptions import BadRequestError, MethodNotAllowedError, MisconfiguredError
from ..models.conversation import IncomingAudio


ALLOWED_METHOD = "POST"
URL_SAFE_TO_STANDARD = str.maketrans("-_", "+/")


def validate_method(method: Optional[str]) -> None:
    """Reject anything other than POST."""
    if not isinstance(method, str) or method.upper() != ALLOWED_METHOD:
        raise MethodNotAllowedError(details={"method": method})


def extract_audio_field(body: Any) -> str:
    """Return the non-empty base64 audio string from the request body."""
    audio = body.get("audio") if isinstance(body, dict) else None
    if not isinstance(audio, str) or not audio:
        raise BadRequestError()
    return audio


def resolve_mime_type(body: Any, default_mime_type: str) -> str:
    """Return the client's mimeType, falling back to the configured default."""
    mime_type = body.get("mimeType") if isinstance(body, dict) else None
    if isinstance(mime_type, str) and mime_type.strip():
        return mime_type.strip()
    return default_mime_type


def normalize_base64(audio: str) -> str:
    """Map URL-safe characters to the standard alphabet, drop whitespace and restore padding."""
    normalized = "".join(audio.split()).translate(URL_SAFE_TO_STANDARD)
    return normalized + "=" * (-len(normalized) % 4)


def decode_audio(audio: str) -> bytes:
    """Decode base64 audio text into raw bytes. Standard, URL-safe and unpadded forms are accepted."""
    try:
        audio_bytes = base64.b64decode(normalize_base64(audio))
    except (binascii.Error, ValueError):
        raise BadRequestError("Audio data is not valid base64", details={"audio_length": len(audio)})

    if not audio_bytes:
        raise BadRequestError()
    return audio_bytes


def validate_voice_request(
    method: Optional[str],
    body: Any,
    api_key: Optional[str],
    default_mime_type: str = "audio/webm"
) -> IncomingAudio:
    """
    Validate an incoming request and decode its audio.

    Args:
        method: HTTP method of the request
        body: Parsed JSON body (anything other than a dict counts as empty)
        api_key: Credential read from configuration for this invocation
        default_mime_type: Media type used when the client sends none

    Returns:
        IncomingAudio ready for the transcription stage

    Raises:
        MethodNotAllowedError: If method is not POST
        BadRequestError: If audio is missing, empty or undecodable
        MisconfiguredError: If the credential is absent
    """
    validate_method(method)
    audio = extract_audio_field(body)

    if not api_key:
        raise MisconfiguredError()

    return IncomingAudio(
        audio_bytes=decode_audio(audio),
        mime_type=resolve_mime_type(body, default_mime_type)
    )
