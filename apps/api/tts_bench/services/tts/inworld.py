"""Inworld TTS provider implementation."""

from __future__ import annotations

import logging
from typing import Any

from tts_bench.services.tts.base import (
    ProviderConfig,
    SynthesisResult,
    TTSProvider,
)

logger = logging.getLogger(__name__)


class InworldTTSProvider(TTSProvider):
    """Inworld voice endpoint with a configurable output encoding."""

    provider_name = "inworld"
    credential_setting = "INWORLD_BASIC_AUTH"
    VOICE_URL = "https://api.inworld.ai/tts/v1/voice"

    @staticmethod
    def _auth_header(credential: str) -> str:
        """Accept the credential with or without the ``Basic`` scheme prefix."""
        if credential.startswith("Basic "):
            return credential
        return f"Basic {credential}"

    async def synthesize(self, text: str, config: ProviderConfig) -> SynthesisResult:
        credential = self.require_credential(config)

        payload: dict[str, Any] = {
            "text": text,
            "voiceId": config.voice,
            "modelId": config.model,
            "audioConfig": config.options.get("audio_config", {"audioEncoding": config.encoding}),
        }
        temperature = config.options.get("temperature")
        if temperature is not None:
            payload["temperature"] = temperature

        logger.debug(
            f"[InworldTTS] Synthesizing {len(text)} chars with {config.model}/{config.voice} "
            f"as {config.encoding}"
        )

        response = await self._post(
            self.VOICE_URL,
            headers={
                "Authorization": self._auth_header(credential),
                "Content-Type": "application/json",
            },
            payload=payload,
        )

        data = self._json_body(response, "audioContent")
        audio_data = self._decode_audio(data.get("audioContent"), "audioContent")

        logger.info(f"[InworldTTS] Synthesized {len(text)} chars, audio size: {len(audio_data)} bytes")

        return SynthesisResult(
            audio_data=audio_data,
            model=config.model,
            voice=config.voice,
            encoding=config.encoding,
            sample_rate=config.sample_rate,
        )
