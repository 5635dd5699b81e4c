"""ElevenLabs TTS provider implementation using REST API."""

from __future__ import annotations

import logging

from tts_bench.services.tts.base import (
    ProviderConfig,
    SynthesisResult,
    TTSMalformedResponseError,
    TTSProvider,
)

logger = logging.getLogger(__name__)


class ElevenLabsTTSProvider(TTSProvider):
    """ElevenLabs text-to-speech endpoint returning MP3 bytes."""

    provider_name = "elevenlabs"
    credential_setting = "ELEVENLABS_API_KEY"
    BASE_URL = "https://api.elevenlabs.io/v1/text-to-speech"

    async def synthesize(self, text: str, config: ProviderConfig) -> SynthesisResult:
        api_key = self.require_credential(config)

        # The voice is part of the path, not the payload
        url = f"{self.BASE_URL}/{config.voice}"
        logger.debug(
            f"[ElevenLabsTTS] Synthesizing {len(text)} chars with {config.model}/{config.voice}"
        )

        response = await self._post(
            url,
            headers={
                "xi-api-key": api_key,
                "Content-Type": "application/json",
                "Accept": "audio/mpeg",
            },
            payload={
                "text": text,
                "model_id": config.model,
                "voice_settings": {
                    "stability": config.options["stability"],
                    "similarity_boost": config.options["similarity_boost"],
                },
            },
        )

        audio_data = response.content
        if not audio_data:
            raise TTSMalformedResponseError(self.provider_name, "audio body")

        logger.info(
            f"[ElevenLabsTTS] Synthesized {len(text)} chars, audio size: {len(audio_data)} bytes"
        )

        return SynthesisResult(
            audio_data=audio_data,
            model=config.model,
            voice=config.voice,
            encoding="MP3",
        )
