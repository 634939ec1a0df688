"""
Voice schemas for Brooklyn Voice Guide API.
Pydantic models documenting the request/response contract.
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class VoiceRequest(BaseModel):
    """
    Request model for a voice conversation turn.
    """
    model_config = ConfigDict(populate_by_name=True)

    audio: str = Field(..., description="Recorded question as base64 text")
    mime_type: Optional[str] = Field(
        default=None,
        alias="mimeType",
        description="Media type of the recording (defaults to audio/webm)"
    )


class VoiceResponse(BaseModel):
    """
    Response model for a successful voice conversation turn.
    """
    model_config = ConfigDict(populate_by_name=True)

    transcript: str = Field(..., description="Text transcribed from the recording")
    ai_response: str = Field(..., alias="aiResponse", description="Guide's reply text")
    audio_response: str = Field(..., alias="audioResponse", description="Spoken reply as base64 text")


class ErrorResponse(BaseModel):
    """
    Response model for every failed request.
    """
    error: str = Field(..., description="Human-readable error message")
