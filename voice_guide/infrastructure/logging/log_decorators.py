"""
Logging decorators for outbound pipeline stages.
Provides structured, timed and redacted logging around provider calls.
"""
import logging
import functools
import time
import uuid
import inspect
from typing import Dict, Any, Optional, Callable, Set

from voice_guide.config.settings import get_settings
from .log_config import get_logger


# Default sensitive fields blacklist
DEFAULT_SENSITIVE_FIELDS: Set[str] = {
    'password', 'secret', 'token', 'key', 'api_key', 'authorization',
    'audio', 'audio_data', 'audio_bytes', 'credential'
}

SLOW_OPERATION_MS = 5000


def _sanitize_sensitive_data(data: Any, blacklist: Set[str]) -> Any:
    """
    Recursively sanitize sensitive data from logs.
    Replaces values of keys matching sensitive fields with [REDACTED].

    Args:
        data: Data to sanitize (dict, list, etc.)
        blacklist: Set of sensitive field names

    Returns:
        Sanitized data with sensitive fields masked
    """
    if isinstance(data, dict):
        sanitized = {}
        for key, value in data.items():
            if any(sensitive in str(key).lower() for sensitive in blacklist):
                sanitized[key] = "[REDACTED]"
            else:
                sanitized[key] = _sanitize_sensitive_data(value, blacklist)
        return sanitized
    elif isinstance(data, (list, tuple)):
        return [_sanitize_sensitive_data(item, blacklist) for item in data]
    elif isinstance(data, bytes):
        return f"[BINARY_DATA_{len(data)}_BYTES]"
    else:
        return data


def _build_operation_context(operation: str, method_name: str, component_name: str) -> Dict[str, Any]:
    """Build base context for operation logging."""
    settings = get_settings()
    return {
        "component": component_name,
        "operation": operation,
        "method": method_name,
        "environment": settings.environment,
        "service": settings.service_name,
        "operation_id": f"op_{uuid.uuid4().hex[:8]}"
    }


def log_stage_call(
    operation: str,
    level: str = "INFO",
    include_args: bool = False,
    include_result: bool = False,
    sensitive_fields: Optional[Set[str]] = None
) -> Callable:
    """
    Decorator for async adapter methods that perform one outbound call.

    Logs start, completion (with duration) and failure, then re-raises.
    Arguments and results are only logged on request and always sanitized.

    Args:
        operation: Operation name (e.g., 'transcription')
        level: Logging level for start/completion records
        include_args: Whether to log function arguments
        include_result: Whether to log the returned value
        sensitive_fields: Additional sensitive fields to blacklist

    Returns:
        Decorated coroutine function
    """
    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        async def wrapper(self, *args, **kwargs):
            component_name = self.__class__.__name__
            logger = get_logger(f"{func.__module__}.{component_name}")

            blacklist = DEFAULT_SENSITIVE_FIELDS.copy()
            if sensitive_fields:
                blacklist.update(sensitive_fields)

            context = _build_operation_context(operation, func.__name__, component_name)

            if include_args:
                bound_args = inspect.signature(func).bind(self, *args, **kwargs)
                bound_args.apply_defaults()
                args_dict = {k: v for k, v in bound_args.arguments.items() if k != 'self'}
                context["arguments"] = _sanitize_sensitive_data(args_dict, blacklist)

            log_level = getattr(logging, level.upper(), logging.INFO)
            logger.log(log_level, f"Starting {operation}", extra={"extra_fields": {**context, "status": "started"}})

            start_time = time.perf_counter()
            try:
                result = await func(self, *args, **kwargs)
            except Exception as e:
                error_context = {
                    **context,
                    "status": "failed",
                    "error_type": type(e).__name__,
                    "error_message": str(e),
                    "duration_ms": round((time.perf_counter() - start_time) * 1000, 2)
                }
                logger.error(f"Failed {operation}", extra={"extra_fields": error_context})
                raise

            duration_ms = (time.perf_counter() - start_time) * 1000
            success_context = {**context, "status": "completed", "duration_ms": round(duration_ms, 2)}
            if duration_ms > SLOW_OPERATION_MS:
                success_context["slow_operation"] = True

            if include_result and result is not None:
                success_context["result"] = _sanitize_sensitive_data(result, blacklist)
            if isinstance(result, str):
                success_context["result_length"] = len(result)

            logger.log(log_level, f"Completed {operation}", extra={"extra_fields": success_context})
            return result

        return wrapper
    return decorator
