"""Logging infrastructure: formatters, logger factory and stage decorators."""

from .log_config import get_logger, JSONFormatter, DevelopmentFormatter
from .log_decorators import log_stage_call

__all__ = ["get_logger", "JSONFormatter", "DevelopmentFormatter", "log_stage_call"]
