"""TTS provider adapters, configuration and format normalization."""

from tts_bench.services.tts.base import (
    CacheKey,
    ProviderConfig,
    SynthesisResult,
    TTSConnectionError,
    TTSMalformedResponseError,
    TTSMissingCredentialError,
    TTSProvider,
    TTSProviderError,
    TTSProviderType,
    TTSSynthesisError,
    UnsupportedProviderError,
)
from tts_bench.services.tts.config import composite_model_key, resolve_provider_config
from tts_bench.services.tts.elevenlabs import ElevenLabsTTSProvider
from tts_bench.services.tts.formats import (
    AudioFormat,
    content_type_for,
    normalize_audio,
    pcm_to_wav,
    resolve_format,
)
from tts_bench.services.tts.gemini import GeminiTTSProvider
from tts_bench.services.tts.inworld import InworldTTSProvider
from tts_bench.services.tts.openai import OpenAITTSProvider
from tts_bench.services.tts.registry import (
    ProviderRegistry,
    build_default_registry,
    get_provider_registry,
)

__all__ = [
    # Registry
    "ProviderRegistry",
    "build_default_registry",
    "get_provider_registry",
    # Providers
    "TTSProvider",
    "TTSProviderType",
    "OpenAITTSProvider",
    "ElevenLabsTTSProvider",
    "GeminiTTSProvider",
    "InworldTTSProvider",
    # Configuration
    "resolve_provider_config",
    "composite_model_key",
    # Formats
    "AudioFormat",
    "content_type_for",
    "normalize_audio",
    "pcm_to_wav",
    "resolve_format",
    # Data models
    "CacheKey",
    "ProviderConfig",
    "SynthesisResult",
    # Exceptions
    "TTSProviderError",
    "TTSMissingCredentialError",
    "TTSSynthesisError",
    "TTSMalformedResponseError",
    "TTSConnectionError",
    "UnsupportedProviderError",
]
