"""OpenAI TTS provider implementation using REST API."""

from __future__ import annotations

import logging

from tts_bench.services.tts.base import (
    ProviderConfig,
    SynthesisResult,
    TTSMalformedResponseError,
    TTSProvider,
)

logger = logging.getLogger(__name__)


class OpenAITTSProvider(TTSProvider):
    """OpenAI speech endpoint; the response body is the MP3 file itself."""

    provider_name = "openai"
    credential_setting = "OPENAI_API_KEY"
    SPEECH_URL = "https://api.openai.com/v1/audio/speech"

    async def synthesize(self, text: str, config: ProviderConfig) -> SynthesisResult:
        api_key = self.require_credential(config)

        logger.debug(
            f"[OpenAITTS] Synthesizing {len(text)} chars with {config.model}/{config.voice}"
        )

        response = await self._post(
            self.SPEECH_URL,
            headers={
                "Authorization": f"Bearer {api_key}",
                "Content-Type": "application/json",
            },
            payload={
                "model": config.model,
                "voice": config.voice,
                "input": text,
                "response_format": "mp3",
            },
        )

        audio_data = response.content
        if not audio_data:
            raise TTSMalformedResponseError(self.provider_name, "audio body")

        logger.info(f"[OpenAITTS] Synthesized {len(text)} chars, audio size: {len(audio_data)} bytes")

        return SynthesisResult(
            audio_data=audio_data,
            model=config.model,
            voice=config.voice,
            encoding="MP3",
        )
