"""Tests for the TTS provider adapters."""

from __future__ import annotations

import base64
from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest

from tts_bench.services.tts.base import (
    ProviderConfig,
    TTSConnectionError,
    TTSMalformedResponseError,
    TTSMissingCredentialError,
    TTSProviderError,
    TTSSynthesisError,
)
from tts_bench.services.tts.elevenlabs import ElevenLabsTTSProvider
from tts_bench.services.tts.gemini import GeminiTTSProvider
from tts_bench.services.tts.inworld import InworldTTSProvider
from tts_bench.services.tts.openai import OpenAITTSProvider


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def openai_config():
    return ProviderConfig(
        provider_id="openai",
        model="gpt-4o-mini-tts",
        voice="alloy",
        cache_model="gpt-4o-mini-tts",
        api_key="sk-test",
    )


@pytest.fixture
def elevenlabs_config():
    return ProviderConfig(
        provider_id="elevenlabs",
        model="eleven_multilingual_v2",
        voice="voice-123",
        cache_model="eleven_multilingual_v2|0.4|0.75",
        api_key="xi-test",
        options={"stability": 0.4, "similarity_boost": 0.75},
    )


@pytest.fixture
def gemini_config():
    return ProviderConfig(
        provider_id="gemini",
        model="gemini-2.5-flash-preview-tts",
        voice="Kore",
        cache_model="gemini-2.5-flash-preview-tts|24000",
        api_key="g-test",
        encoding="PCM",
        sample_rate=24000,
    )


@pytest.fixture
def inworld_config():
    return ProviderConfig(
        provider_id="inworld",
        model="inworld-tts-1",
        voice="Dennis",
        cache_model="inworld-tts-1|LINEAR16|default|22050|default|default",
        api_key="abc123",
        encoding="LINEAR16",
        sample_rate=22050,
        options={
            "audio_config": {"audioEncoding": "LINEAR16", "sampleRateHertz": 22050},
            "temperature": None,
        },
    )


def _mock_response(status_code=200, *, content=b"", json_data=None, text=""):
    response = MagicMock()
    response.status_code = status_code
    response.content = content
    response.text = text
    if json_data is not None:
        response.json.return_value = json_data
    else:
        response.json.side_effect = ValueError("No JSON object could be decoded")
    return response


# =============================================================================
# Credentials
# =============================================================================


class TestMissingCredentials:
    """A missing credential fails before any outbound request."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("provider_class", "setting"),
        [
            (OpenAITTSProvider, "OPENAI_API_KEY"),
            (ElevenLabsTTSProvider, "ELEVENLABS_API_KEY"),
            (GeminiTTSProvider, "GEMINI_API_KEY"),
            (InworldTTSProvider, "INWORLD_BASIC_AUTH"),
        ],
    )
    async def test_missing_credential_makes_no_request(self, provider_class, setting):
        provider = provider_class()
        config = ProviderConfig(
            provider_id=provider.provider_name,
            model="m",
            voice="v",
            cache_model="m",
            api_key="",
            options={"stability": 0.4, "similarity_boost": 0.75},
        )

        with patch("httpx.AsyncClient") as mock_client_class:
            with pytest.raises(TTSMissingCredentialError) as exc_info:
                await provider.synthesize("Hello", config)

        assert exc_info.value.setting == setting
        assert setting in str(exc_info.value)
        mock_client_class.assert_not_called()


# =============================================================================
# OpenAI
# =============================================================================


class TestOpenAITTSProvider:

    @pytest.mark.asyncio
    async def test_synthesize_success(self, openai_config):
        with patch("httpx.AsyncClient") as mock_client_class:
            mock_client = AsyncMock()
            mock_client_class.return_value.__aenter__.return_value = mock_client
            mock_client.post = AsyncMock(return_value=_mock_response(content=b"ID3mp3"))

            result = await OpenAITTSProvider().synthesize("Hello", openai_config)

        assert result.audio_data == b"ID3mp3"
        assert result.encoding == "MP3"
        assert result.model == "gpt-4o-mini-tts"
        assert result.voice == "alloy"

        _, kwargs = mock_client.post.call_args
        assert kwargs["headers"]["Authorization"] == "Bearer sk-test"
        assert kwargs["json"] == {
            "model": "gpt-4o-mini-tts",
            "voice": "alloy",
            "input": "Hello",
            "response_format": "mp3",
        }

    @pytest.mark.asyncio
    async def test_error_status_carries_upstream_body(self, openai_config):
        with patch("httpx.AsyncClient") as mock_client_class:
            mock_client = AsyncMock()
            mock_client_class.return_value.__aenter__.return_value = mock_client
            mock_client.post = AsyncMock(
                return_value=_mock_response(500, text="upstream exploded")
            )

            with pytest.raises(TTSSynthesisError) as exc_info:
                await OpenAITTSProvider().synthesize("Hello", openai_config)

        assert exc_info.value.status_code == 500
        assert "upstream exploded" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_timeout_becomes_connection_error(self, openai_config):
        with patch("httpx.AsyncClient") as mock_client_class:
            mock_client = AsyncMock()
            mock_client_class.return_value.__aenter__.return_value = mock_client
            mock_client.post = AsyncMock(side_effect=httpx.ReadTimeout("too slow"))

            with pytest.raises(TTSConnectionError):
                await OpenAITTSProvider(timeout=1.0).synthesize("Hello", openai_config)

        mock_client_class.assert_called_once_with(timeout=1.0)

    @pytest.mark.asyncio
    async def test_empty_body_is_malformed(self, openai_config):
        with patch("httpx.AsyncClient") as mock_client_class:
            mock_client = AsyncMock()
            mock_client_class.return_value.__aenter__.return_value = mock_client
            mock_client.post = AsyncMock(return_value=_mock_response(content=b""))

            with pytest.raises(TTSMalformedResponseError):
                await OpenAITTSProvider().synthesize("Hello", openai_config)


# =============================================================================
# ElevenLabs
# =============================================================================


class TestElevenLabsTTSProvider:

    @pytest.mark.asyncio
    async def test_voice_in_path_and_settings_in_body(self, elevenlabs_config):
        with patch("httpx.AsyncClient") as mock_client_class:
            mock_client = AsyncMock()
            mock_client_class.return_value.__aenter__.return_value = mock_client
            mock_client.post = AsyncMock(return_value=_mock_response(content=b"mp3-bytes"))

            result = await ElevenLabsTTSProvider().synthesize("Hi", elevenlabs_config)

        assert result.audio_data == b"mp3-bytes"
        args, kwargs = mock_client.post.call_args
        assert args[0] == "https://api.elevenlabs.io/v1/text-to-speech/voice-123"
        assert kwargs["headers"]["xi-api-key"] == "xi-test"
        assert kwargs["headers"]["Accept"] == "audio/mpeg"
        assert kwargs["json"]["model_id"] == "eleven_multilingual_v2"
        assert kwargs["json"]["voice_settings"] == {"stability": 0.4, "similarity_boost": 0.75}

    @pytest.mark.asyncio
    async def test_unauthorized_is_synthesis_error(self, elevenlabs_config):
        with patch("httpx.AsyncClient") as mock_client_class:
            mock_client = AsyncMock()
            mock_client_class.return_value.__aenter__.return_value = mock_client
            mock_client.post = AsyncMock(return_value=_mock_response(401, text="bad key"))

            with pytest.raises(TTSSynthesisError, match=r"\(401\): bad key"):
                await ElevenLabsTTSProvider().synthesize("Hi", elevenlabs_config)


# =============================================================================
# Gemini
# =============================================================================


class TestGeminiTTSProvider:

    @pytest.mark.asyncio
    async def test_returns_pcm_with_sample_rate(self, gemini_config):
        pcm = b"\x01\x00\x02\x00"
        body = {
            "candidates": [
                {"content": {"parts": [{"inlineData": {"data": base64.b64encode(pcm).decode()}}]}}
            ]
        }
        with patch("httpx.AsyncClient") as mock_client_class:
            mock_client = AsyncMock()
            mock_client_class.return_value.__aenter__.return_value = mock_client
            mock_client.post = AsyncMock(return_value=_mock_response(json_data=body))

            result = await GeminiTTSProvider().synthesize("Hi", gemini_config)

        assert result.audio_data == pcm
        assert result.encoding == "PCM"
        assert result.raw_pcm is True
        assert result.sample_rate == 24000
        args, kwargs = mock_client.post.call_args
        assert args[0].endswith("/models/gemini-2.5-flash-preview-tts:generateContent")
        assert kwargs["headers"]["x-goog-api-key"] == "g-test"
        voice_config = kwargs["json"]["generationConfig"]["speechConfig"]["voiceConfig"]
        assert voice_config["prebuiltVoiceConfig"]["voiceName"] == "Kore"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "body",
        [
            {},
            {"candidates": []},
            {"candidates": [{"content": {"parts": [{"text": "no audio"}]}}]},
            {"candidates": {"0": {"content": {}}}},
            {"candidates": [{"content": "blocked"}]},
            {"candidates": ["blocked"]},
            {"candidates": [{"content": {"parts": {"inlineData": {"data": "AAAA"}}}}]},
            {"candidates": [{"content": {"parts": [{"inlineData": "AAAA"}]}}]},
        ],
    )
    async def test_missing_inline_audio_is_malformed(self, gemini_config, body):
        with patch("httpx.AsyncClient") as mock_client_class:
            mock_client = AsyncMock()
            mock_client_class.return_value.__aenter__.return_value = mock_client
            mock_client.post = AsyncMock(return_value=_mock_response(json_data=body))

            with pytest.raises(TTSMalformedResponseError) as exc_info:
                await GeminiTTSProvider().synthesize("Hi", gemini_config)

        assert "inlineData" in exc_info.value.field_name


# =============================================================================
# Inworld
# =============================================================================


class TestInworldTTSProvider:

    def test_auth_header_adds_basic_prefix(self):
        assert InworldTTSProvider._auth_header("abc123") == "Basic abc123"
        assert InworldTTSProvider._auth_header("Basic abc123") == "Basic abc123"

    @pytest.mark.asyncio
    async def test_synthesize_sends_audio_config(self, inworld_config):
        audio = b"RIFF....WAVEfmt "
        with patch("httpx.AsyncClient") as mock_client_class:
            mock_client = AsyncMock()
            mock_client_class.return_value.__aenter__.return_value = mock_client
            mock_client.post = AsyncMock(
                return_value=_mock_response(
                    json_data={"audioContent": base64.b64encode(audio).decode()}
                )
            )

            result = await InworldTTSProvider().synthesize("Hi", inworld_config)

        assert result.audio_data == audio
        assert result.encoding == "LINEAR16"
        _, kwargs = mock_client.post.call_args
        assert kwargs["headers"]["Authorization"] == "Basic abc123"
        assert kwargs["json"]["voiceId"] == "Dennis"
        assert kwargs["json"]["modelId"] == "inworld-tts-1"
        assert kwargs["json"]["audioConfig"] == {
            "audioEncoding": "LINEAR16",
            "sampleRateHertz": 22050,
        }
        assert "temperature" not in kwargs["json"]

    @pytest.mark.asyncio
    async def test_missing_audio_content_is_malformed(self, inworld_config):
        with patch("httpx.AsyncClient") as mock_client_class:
            mock_client = AsyncMock()
            mock_client_class.return_value.__aenter__.return_value = mock_client
            mock_client.post = AsyncMock(return_value=_mock_response(json_data={"result": {}}))

            with pytest.raises(TTSMalformedResponseError, match="audioContent"):
                await InworldTTSProvider().synthesize("Hi", inworld_config)

    @pytest.mark.asyncio
    async def test_non_json_body_is_malformed(self, inworld_config):
        with patch("httpx.AsyncClient") as mock_client_class:
            mock_client = AsyncMock()
            mock_client_class.return_value.__aenter__.return_value = mock_client
            mock_client.post = AsyncMock(return_value=_mock_response(text="<html>"))

            with pytest.raises(TTSProviderError):
                await InworldTTSProvider().synthesize("Hi", inworld_config)
