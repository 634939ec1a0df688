"""
Domain exceptions for the voice guide pipeline.

Every error carries an HTTP status code so the presentation layer can map
it to a response without knowing the concrete class.
"""
from typing import Any, Dict, Optional


class VoiceGuideError(Exception):
    """Base exception for all voice guide failures."""

    status_code: int = 500
    default_error_code: str = "VOICE_GUIDE_ERROR"
    default_message: str = "Internal server error"

    def __init__(
        self,
        message: Optional[str] = None,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        """
        Initialize voice guide error.

        Args:
            message: Error message shown to the caller
            error_code: Specific error code (e.g., 'UPSTREAM_ERROR')
            details: Additional error details for logs
        """
        self.message = message or self.default_message
        self.error_code = error_code or self.default_error_code
        self.details = details or {}
        super().__init__(self.message)


class MethodNotAllowedError(VoiceGuideError):
    """Raised when the request uses any method other than POST."""

    status_code = 405
    default_error_code = "METHOD_NOT_ALLOWED"
    default_message = "Method not allowed"


class BadRequestError(VoiceGuideError):
    """Raised when the request body carries no usable audio."""

    status_code = 400
    default_error_code = "BAD_REQUEST"
    default_message = "No audio data provided"


class MisconfiguredError(VoiceGuideError):
    """Raised when the OpenAI credential is absent from configuration."""

    status_code = 500
    default_error_code = "MISCONFIGURED"
    default_message = "OpenAI API key not configured"


class UpstreamError(VoiceGuideError):
    """Raised when an outbound provider call returns a non-success response."""

    default_error_code = "UPSTREAM_ERROR"

    STAGE_LABELS = {
        "transcription": "Whisper",
        "ai-response": "GPT-4",
        "speech-synthesis": "TTS",
    }

    def __init__(
        self,
        stage: str,
        upstream_body: str,
        upstream_status: Optional[int] = None
    ):
        """
        Initialize upstream error.

        Args:
            stage: Pipeline stage name ('transcription', 'ai-response', 'speech-synthesis')
            upstream_body: Raw error body returned by the provider
            upstream_status: HTTP status returned by the provider, if known
        """
        self.stage = stage
        self.upstream_body = upstream_body
        self.upstream_status = upstream_status
        label = self.STAGE_LABELS.get(stage, stage)
        super().__init__(
            message=f"{label} API error: {upstream_body}",
            details={"stage": stage, "upstream_status": upstream_status}
        )


class UnknownFailureError(VoiceGuideError):
    """Wraps any unexpected exception raised while processing a request."""

    default_error_code = "UNKNOWN_FAILURE"

    @classmethod
    def wrap(cls, error: Exception) -> "UnknownFailureError":
        """Wrap an arbitrary exception, keeping its message when it has one."""
        return cls(
            message=str(error) or None,
            details={"error_type": type(error).__name__}
        )
