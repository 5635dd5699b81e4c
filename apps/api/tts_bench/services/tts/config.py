"""Per-request resolution of provider generation parameters."""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from tts_bench.services.tts.base import (
    ProviderConfig,
    TTSProviderType,
    UnsupportedProviderError,
)
from tts_bench.services.tts.formats import PCM_ENCODING

if TYPE_CHECKING:
    from tts_bench.core.config import Settings


def _key_part(value: float | int | str | None) -> str:
    """Render one cache-key component; unset values render as ``default``."""
    if value is None:
        return "default"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def composite_model_key(model: str, *parts: float | int | str | None) -> str:
    """Fold output-affecting parameters into the model component of a cache key."""
    return "|".join([model, *(_key_part(part) for part in parts)])


def _openai_config(settings: Settings) -> ProviderConfig:
    return ProviderConfig(
        provider_id=TTSProviderType.OPENAI.value,
        model=settings.openai_tts_model,
        voice=settings.openai_tts_voice,
        cache_model=settings.openai_tts_model,
        api_key=settings.openai_api_key,
        encoding="MP3",
    )


def _elevenlabs_config(settings: Settings) -> ProviderConfig:
    stability = settings.elevenlabs_voice_stability
    similarity = settings.elevenlabs_voice_similarity
    return ProviderConfig(
        provider_id=TTSProviderType.ELEVENLABS.value,
        model=settings.elevenlabs_model_id,
        voice=settings.elevenlabs_voice_id,
        cache_model=composite_model_key(settings.elevenlabs_model_id, stability, similarity),
        api_key=settings.elevenlabs_api_key,
        encoding="MP3",
        options={"stability": stability, "similarity_boost": similarity},
    )


def _gemini_config(settings: Settings) -> ProviderConfig:
    sample_rate = settings.gemini_tts_sample_rate
    return ProviderConfig(
        provider_id=TTSProviderType.GEMINI.value,
        model=settings.gemini_tts_model,
        voice=settings.gemini_tts_voice,
        cache_model=composite_model_key(settings.gemini_tts_model, sample_rate),
        api_key=settings.gemini_api_key,
        encoding=PCM_ENCODING,
        sample_rate=sample_rate,
    )


def _inworld_config(settings: Settings) -> ProviderConfig:
    model = settings.inworld_tts_model
    encoding = settings.inworld_tts_encoding.strip().upper()
    speaking_rate = settings.inworld_tts_speaking_rate
    sample_rate = settings.inworld_tts_sample_rate
    bit_rate = settings.inworld_tts_bit_rate
    temperature = settings.inworld_tts_temperature

    audio_config: dict[str, float | int | str] = {"audioEncoding": encoding}
    if speaking_rate is not None:
        audio_config["speakingRate"] = speaking_rate
    if sample_rate is not None:
        audio_config["sampleRateHertz"] = sample_rate
    if bit_rate is not None:
        audio_config["bitRate"] = bit_rate

    return ProviderConfig(
        provider_id=TTSProviderType.INWORLD.value,
        model=model,
        voice=settings.inworld_tts_voice,
        cache_model=composite_model_key(
            model, encoding, speaking_rate, sample_rate, bit_rate, temperature
        ),
        api_key=settings.inworld_basic_auth,
        encoding=encoding,
        sample_rate=sample_rate,
        options={"audio_config": audio_config, "temperature": temperature},
    )


_RESOLVERS: dict[str, Callable[[Settings], ProviderConfig]] = {
    TTSProviderType.OPENAI.value: _openai_config,
    TTSProviderType.ELEVENLABS.value: _elevenlabs_config,
    TTSProviderType.GEMINI.value: _gemini_config,
    TTSProviderType.INWORLD.value: _inworld_config,
}


def resolve_provider_config(provider_id: str, settings: Settings) -> ProviderConfig:
    """
    Build the current configuration for a provider.

    Called on every request so that a changed model, voice or encoding
    produces a new cache key without explicit invalidation.

    Raises:
        UnsupportedProviderError: If the provider id has no configuration.
    """
    resolver = _RESOLVERS.get(provider_id)
    if resolver is None:
        raise UnsupportedProviderError(provider_id)
    return resolver(settings)
