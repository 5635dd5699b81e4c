"""Google Gemini TTS provider implementation."""

from __future__ import annotations

import logging
from typing import Any

from tts_bench.services.tts.base import (
    ProviderConfig,
    SynthesisResult,
    TTSProvider,
)
from tts_bench.services.tts.formats import PCM_ENCODING

logger = logging.getLogger(__name__)

AUDIO_FIELD = "candidates[0].content.parts[0].inlineData.data"


def _extract_inline_audio(data: dict[str, Any]) -> Any:
    """Walk the generateContent envelope down to the first inline audio part."""
    candidates = data.get("candidates")
    if not isinstance(candidates, list) or not candidates or not isinstance(candidates[0], dict):
        return None
    content = candidates[0].get("content")
    if not isinstance(content, dict):
        return None
    parts = content.get("parts")
    if not isinstance(parts, list) or not parts or not isinstance(parts[0], dict):
        return None
    inline_data = parts[0].get("inlineData")
    if not isinstance(inline_data, dict):
        return None
    return inline_data.get("data")


class GeminiTTSProvider(TTSProvider):
    """Gemini speech generation; audio arrives as base64 16-bit mono PCM."""

    provider_name = "gemini"
    credential_setting = "GEMINI_API_KEY"
    BASE_URL = "https://generativelanguage.googleapis.com/v1beta"

    async def synthesize(self, text: str, config: ProviderConfig) -> SynthesisResult:
        api_key = self.require_credential(config)

        url = f"{self.BASE_URL}/models/{config.model}:generateContent"
        payload = {
            "contents": [{"parts": [{"text": text}]}],
            "generationConfig": {
                "responseModalities": ["AUDIO"],
                "speechConfig": {
                    "voiceConfig": {
                        "prebuiltVoiceConfig": {"voiceName": config.voice},
                    },
                },
            },
            "model": config.model,
        }

        response = await self._post(
            url,
            headers={
                "x-goog-api-key": api_key,
                "Content-Type": "application/json",
            },
            payload=payload,
        )

        data = self._json_body(response, AUDIO_FIELD)
        pcm = self._decode_audio(_extract_inline_audio(data), AUDIO_FIELD)

        logger.info(f"[GeminiTTS] Synthesized {len(text)} chars, {len(pcm)} PCM bytes")

        return SynthesisResult(
            audio_data=pcm,
            model=config.model,
            voice=config.voice,
            encoding=PCM_ENCODING,
            sample_rate=config.sample_rate,
            raw_pcm=True,
        )
