"""
Schemas module for Brooklyn Voice Guide API.
Contains Pydantic models for request/response documentation.
"""

from .voice import VoiceRequest, VoiceResponse, ErrorResponse

__all__ = [
    "VoiceRequest",
    "VoiceResponse",
    "ErrorResponse"
]
