"""
Transport-neutral voice request handler.

Both the FastAPI route and the Lambda entry point delegate here. This is
the single place where errors are caught, logged and mapped to a status
code and a JSON body.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from voice_guide.config.settings import Settings
from voice_guide.core.exceptions import (
    BadRequestError,
    MethodNotAllowedError,
    UnknownFailureError,
    UpstreamError,
    VoiceGuideError
)
from voice_guide.core.ports.stage_factory import ConversationStages, StageFactoryPort
from voice_guide.core.services.request_gate import validate_voice_request
from voice_guide.core.usecases.voice_conversation import VoiceConversationUseCase
from voice_guide.infrastructure.logging.log_config import get_logger

logger = get_logger(__name__)

# Client mistakes; everything else is an operator concern
CLIENT_ERRORS = (MethodNotAllowedError, BadRequestError)


@dataclass
class HandlerResponse:
    """Status code and JSON body produced for one request."""
    status_code: int
    body: Dict[str, Any] = field(default_factory=dict)

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300


def error_response(error: VoiceGuideError) -> HandlerResponse:
    """Map a domain error to its response; the body carries only the message."""
    return HandlerResponse(status_code=error.status_code, body={"error": error.message})


class VoiceRequestHandler:
    """
    Handles one voice request end to end.

    Settings and the stage factory are injected so tests can run the whole
    flow with stub stages and without touching the environment.
    """

    def __init__(self, settings: Settings, stage_factory: StageFactoryPort):
        """
        Initialize the handler.

        Args:
            settings: Application settings holding the credential
            stage_factory: Factory creating request-scoped pipeline stages
        """
        self.settings = settings
        self.stage_factory = stage_factory

    async def handle(
        self,
        method: Optional[str],
        body: Any,
        request_id: Optional[str] = None
    ) -> HandlerResponse:
        """
        Validate the request, run the pipeline and build the response.

        Args:
            method: HTTP method
            body: Parsed JSON body
            request_id: Platform request id, used only for log correlation

        Returns:
            HandlerResponse with either the three success fields or an error
        """
        log_fields = {"request_id": request_id, "method": method}
        stages = None

        try:
            api_key = self.settings.get_openai_api_key()
            audio = validate_voice_request(
                method,
                body,
                api_key,
                default_mime_type=self.settings.default_audio_mime_type
            )

            stages = self.stage_factory.create_stages(api_key)
            result = await VoiceConversationUseCase(stages).execute(audio)

        except CLIENT_ERRORS as e:
            logger.warning("Voice request rejected", extra={"extra_fields": {
                **log_fields,
                "error_code": e.error_code,
                "status_code": e.status_code
            }})
            return error_response(e)

        except UpstreamError as e:
            logger.error("Upstream provider call failed", extra={"extra_fields": {
                **log_fields,
                "error_code": e.error_code,
                "stage": e.stage,
                "upstream_status": e.upstream_status,
                "error_message": e.message
            }})
            return error_response(e)

        except VoiceGuideError as e:
            logger.error("Voice request failed", extra={"extra_fields": {
                **log_fields,
                "error_code": e.error_code,
                "error_type": type(e).__name__,
                "error_message": e.message
            }})
            return error_response(e)

        except Exception as e:
            wrapped = UnknownFailureError.wrap(e)
            logger.exception("Unexpected error while processing voice request", extra={"extra_fields": {
                **log_fields,
                "error_code": wrapped.error_code,
                "error_type": type(e).__name__
            }})
            return error_response(wrapped)

        finally:
            if stages is not None:
                await self._release_stages(stages, log_fields)

        logger.info("Voice request completed", extra={"extra_fields": log_fields})
        return HandlerResponse(status_code=200, body=result.to_payload())

    async def _release_stages(self, stages: ConversationStages, log_fields: Dict[str, Any]) -> None:
        """Close request-scoped stage resources; the response is already decided."""
        try:
            await stages.aclose()
        except Exception as e:
            logger.warning("Failed to release pipeline stages", extra={"extra_fields": {
                **log_fields,
                "error_type": type(e).__name__,
                "error_message": str(e)
            }})
