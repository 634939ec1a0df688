"""
Lambda presentation layer handler for the voice guide.

Handles API Gateway proxy events (REST API v1 and HTTP API v2 payloads),
delegating all validation and processing to VoiceRequestHandler.

Event Flow:
1. API Gateway invokes the Lambda with the client's HTTP request
2. Handler extracts method and JSON body from the event
3. VoiceRequestHandler runs the gate and pipeline and maps errors
4. Handler wraps the result in a proxy response
"""
import asyncio
import base64
import binascii
import json
from typing import Any, Dict, Optional

from voice_guide.api.dependencies import get_dependency_container
from voice_guide.api.voice_handler import HandlerResponse
from voice_guide.infrastructure.logging.log_config import get_logger

logger = get_logger(__name__)


def extract_http_method(event: Dict[str, Any]) -> Optional[str]:
    """Read the HTTP method from a v1 or v2 proxy event."""
    method = event.get("httpMethod")
    if method:
        return method
    request_context = event.get("requestContext") or {}
    if not isinstance(request_context, dict):
        return None
    http = request_context.get("http") or {}
    return http.get("method") if isinstance(http, dict) else None


def parse_event_body(event: Dict[str, Any]) -> Any:
    """
    Decode the proxy event body into JSON.

    Direct invocations may pass the body as a dict already. A body that
    cannot be decoded yields None, which is treated as missing audio.
    """
    body = event.get("body")
    if body is None or isinstance(body, dict):
        return body
    if not isinstance(body, (str, bytes)):
        logger.warning("Unsupported Lambda event body type", extra={
            "extra_fields": {"body_type": type(body).__name__}
        })
        return None

    try:
        if event.get("isBase64Encoded"):
            body = base64.b64decode(body).decode("utf-8")
        return json.loads(body)
    except (binascii.Error, UnicodeDecodeError, TypeError, ValueError):
        logger.warning("Could not decode Lambda event body", extra={
            "extra_fields": {"is_base64_encoded": bool(event.get("isBase64Encoded"))}
        })
        return None


def build_lambda_response(result: HandlerResponse, request_id: Optional[str]) -> Dict[str, Any]:
    """Wrap a handler result in an API Gateway proxy response."""
    headers = {"Content-Type": "application/json"}
    if request_id:
        headers["X-Request-ID"] = request_id

    return {
        "statusCode": result.status_code,
        "headers": headers,
        "body": json.dumps(result.body)
    }


def lambda_handler(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    """
    AWS Lambda handler for voice conversation requests.

    Args:
        event: API Gateway proxy event
        context: AWS Lambda context

    Returns:
        API Gateway proxy response with JSON body
    """
    request_id = getattr(context, "aws_request_id", None)
    method = extract_http_method(event)

    logger.info("Voice guide Lambda invoked", extra={"extra_fields": {
        "request_id": request_id,
        "function_name": getattr(context, "function_name", None),
        "method": method
    }})

    handler = get_dependency_container().voice_request_handler
    result = asyncio.run(handler.handle(method, parse_event_body(event), request_id=request_id))

    logger.info("Voice guide Lambda completed", extra={"extra_fields": {
        "request_id": request_id,
        "status_code": result.status_code
    }})

    return build_lambda_response(result, request_id)


def health_check_handler(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    """
    Health check endpoint for the voice guide Lambda.

    Args:
        event: Lambda event
        context: Lambda context

    Returns:
        Health status response
    """
    settings = get_dependency_container().settings
    health_status = {
        "status": "healthy" if settings.has_openai_api_key else "degraded",
        "service": settings.service_name,
        "version": "1.0.0",
        "request_id": getattr(context, "aws_request_id", None),
        "openai_api_key_configured": settings.has_openai_api_key
    }

    return {
        "statusCode": 200,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(health_status)
    }
