"""
Shared test configuration and fixtures for Brooklyn Voice Guide tests.
"""
import base64
import sys
from pathlib import Path

import pytest

# Setup Python path once for all tests
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# Import after path setup
from voice_guide.api.voice_handler import VoiceRequestHandler
from voice_guide.config.settings import Settings
from tests.utils.stub_stages import (
    BRUNCH_AUDIO_BASE64,
    BRUNCH_QUESTION,
    BRUNCH_REPLY,
    RECORDED_AUDIO,
    StubStageFactory,
    build_stub_stages
)


# ENVIRONMENT & CONFIGURATION FIXTURES

@pytest.fixture
def test_settings() -> Settings:
    """Settings with a test credential, independent of env files."""
    return Settings(_env_file=None, environment="test", openai_api_key="sk-test-key")


@pytest.fixture
def unconfigured_settings() -> Settings:
    """Settings without any OpenAI credential."""
    return Settings(_env_file=None, environment="test", openai_api_key=None)


# PIPELINE FIXTURES

@pytest.fixture
def brunch_stages():
    """Stub stages reproducing the Williamsburg brunch conversation."""
    return build_stub_stages(
        transcript=BRUNCH_QUESTION,
        reply=BRUNCH_REPLY,
        audio_base64=BRUNCH_AUDIO_BASE64
    )


@pytest.fixture
def stub_factory(brunch_stages) -> StubStageFactory:
    return StubStageFactory(brunch_stages)


@pytest.fixture
def voice_handler(test_settings, stub_factory) -> VoiceRequestHandler:
    return VoiceRequestHandler(settings=test_settings, stage_factory=stub_factory)


# REQUEST FIXTURES

@pytest.fixture
def audio_base64() -> str:
    return base64.b64encode(RECORDED_AUDIO).decode("ascii")


@pytest.fixture
def voice_request_body(audio_base64) -> dict:
    return {"audio": audio_base64, "mimeType": "audio/webm"}
