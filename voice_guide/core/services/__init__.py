"""Core domain services: request gate and persona prompt."""

from .persona import BROOKLYN_GUIDE_PROMPT, build_guide_messages
from .request_gate import validate_voice_request

__all__ = ['BROOKLYN_GUIDE_PROMPT', 'build_guide_messages', 'validate_voice_request']
