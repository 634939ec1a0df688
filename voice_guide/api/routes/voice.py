"""
Voice routes for Brooklyn Voice Guide API.
Accepts a recorded question and returns transcript, reply and spoken reply.
"""
import json
from typing import Any

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from voice_guide.api.dependencies import get_voice_request_handler
from voice_guide.api.voice_handler import VoiceRequestHandler
from voice_guide.infrastructure.logging.log_config import get_logger
from voice_guide.schemas.voice import ErrorResponse, VoiceRequest, VoiceResponse

logger = get_logger(__name__)

router = APIRouter(tags=["Voice"])

# Non-POST methods are routed too so they get the JSON 405 body
OTHER_METHODS = ["GET", "PUT", "PATCH", "DELETE", "OPTIONS", "HEAD"]


async def read_json_body(request: Request) -> Any:
    """
    Parse the request body as JSON.

    An empty or malformed body yields None, which the request gate treats
    as missing audio.
    """
    raw_body = await request.body()
    if not raw_body:
        return None
    try:
        return json.loads(raw_body)
    except ValueError:
        logger.debug("Request body is not valid JSON", extra={
            "extra_fields": {"body_size": len(raw_body)}
        })
        return None


async def dispatch(request: Request, handler: VoiceRequestHandler) -> JSONResponse:
    """Hand the request to the voice handler and render its result."""
    body = await read_json_body(request)
    result = await handler.handle(
        request.method,
        body,
        request_id=request.headers.get("x-request-id")
    )
    return JSONResponse(status_code=result.status_code, content=result.body)


@router.post(
    "/voice",
    response_model=VoiceResponse,
    responses={
        400: {"model": ErrorResponse, "description": "No audio data provided"},
        405: {"model": ErrorResponse, "description": "Method not allowed"},
        500: {"model": ErrorResponse, "description": "Misconfiguration or upstream failure"},
    },
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": VoiceRequest.model_json_schema(by_alias=True)}},
        }
    },
)
async def voice_conversation(
    request: Request,
    handler: VoiceRequestHandler = Depends(get_voice_request_handler)
) -> JSONResponse:
    """
    Run one voice conversation turn.

    Transcribes the recording, asks the Brooklyn guide for a reply and
    returns the reply as synthesized speech.
    """
    return await dispatch(request, handler)


@router.api_route("/voice", methods=OTHER_METHODS, include_in_schema=False)
async def voice_method_not_allowed(
    request: Request,
    handler: VoiceRequestHandler = Depends(get_voice_request_handler)
) -> JSONResponse:
    return await dispatch(request, handler)
