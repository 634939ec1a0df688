"""
OpenAI client construction and error translation shared by all stage adapters.
"""
from openai import APIStatusError, AsyncOpenAI

from voice_guide.config.settings import Settings
from voice_guide.core.exceptions import UpstreamError


def create_openai_client(api_key: str, settings: Settings) -> AsyncOpenAI:
    """
    Create an async OpenAI client for one request.

    Retries are disabled: a single failed attempt fails the request.
    A timeout of None leaves the platform's request limit as the only bound.
    """
    return AsyncOpenAI(
        api_key=api_key,
        base_url=settings.openai_base_url,
        timeout=settings.request_timeout_seconds,
        max_retries=0
    )


def upstream_error_from(stage: str, error: APIStatusError) -> UpstreamError:
    """Translate an SDK status error into an UpstreamError with the raw body."""
    body = error.response.text if error.response is not None else ""
    return UpstreamError(
        stage=stage,
        upstream_body=body or error.message,
        upstream_status=error.status_code
    )
