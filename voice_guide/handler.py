"""
Lambda handler for Brooklyn Voice Guide.

This module serves as the entry point for the Lambda function that turns a
recorded question into a spoken Brooklyn travel recommendation.

Event Flow:
1. API Gateway forwards the client's POST with base64 audio
2. Presentation layer validates and runs the three-stage pipeline
3. Response carries transcript, reply and base64 speech, or an error
"""

# Delegate to the Clean Architecture handler
from voice_guide.presentation.lambda_handler import lambda_handler, health_check_handler

__all__ = ["lambda_handler", "health_check_handler"]
