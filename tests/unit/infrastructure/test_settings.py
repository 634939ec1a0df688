"""
Unit tests for application settings.
"""
import pytest

from voice_guide.config.settings import Settings


@pytest.mark.unit
def test_defaults(monkeypatch):
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)

    settings = Settings(_env_file=None)

    assert settings.transcription_model == "whisper-1"
    assert settings.chat_model == "gpt-4"
    assert settings.chat_temperature == 0.7
    assert settings.chat_max_tokens == 200
    assert settings.speech_model == "tts-1"
    assert settings.speech_voice == "alloy"
    assert settings.default_audio_mime_type == "audio/webm"
    assert settings.request_timeout_seconds is None
    assert settings.has_openai_api_key is False
    assert settings.get_openai_api_key() is None


@pytest.mark.unit
def test_reads_credential_from_environment(monkeypatch):
    monkeypatch.setenv("OPENAI_API_KEY", "sk-from-env")

    settings = Settings(_env_file=None)

    assert settings.has_openai_api_key is True
    assert settings.get_openai_api_key() == "sk-from-env"


@pytest.mark.unit
def test_blank_credential_is_missing(monkeypatch):
    monkeypatch.setenv("OPENAI_API_KEY", "   ")

    settings = Settings(_env_file=None)

    assert settings.has_openai_api_key is False
    assert settings.get_openai_api_key() is None


@pytest.mark.unit
def test_credential_hidden_in_repr(test_settings):
    assert "sk-test-key" not in repr(test_settings)
    assert "sk-test-key" not in str(test_settings.model_dump())


@pytest.mark.unit
def test_model_overrides_from_environment(monkeypatch):
    monkeypatch.setenv("CHAT_MODEL", "gpt-4o-mini")
    monkeypatch.setenv("SPEECH_VOICE", "nova")
    monkeypatch.setenv("REQUEST_TIMEOUT_SECONDS", "30")

    settings = Settings(_env_file=None)

    assert settings.chat_model == "gpt-4o-mini"
    assert settings.speech_voice == "nova"
    assert settings.request_timeout_seconds == 30.0


@pytest.mark.unit
@pytest.mark.parametrize("environment, is_dev, is_prod", [
    ("development", True, False),
    ("local", True, False),
    ("production", False, True),
    ("PROD", False, True),
    ("staging", False, False),
])
def test_environment_flags(environment, is_dev, is_prod):
    settings = Settings(_env_file=None, environment=environment)

    assert settings.is_development is is_dev
    assert settings.is_production is is_prod
