"""Registry mapping provider ids to synthesis adapters."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from tts_bench.core.config import get_settings
from tts_bench.services.tts.base import TTSProvider, TTSProviderType, UnsupportedProviderError
from tts_bench.services.tts.elevenlabs import ElevenLabsTTSProvider
from tts_bench.services.tts.gemini import GeminiTTSProvider
from tts_bench.services.tts.inworld import InworldTTSProvider
from tts_bench.services.tts.openai import OpenAITTSProvider

if TYPE_CHECKING:
    from tts_bench.core.config import Settings

logger = logging.getLogger(__name__)

DEFAULT_PROVIDERS: dict[str, type[TTSProvider]] = {
    TTSProviderType.OPENAI.value: OpenAITTSProvider,
    TTSProviderType.ELEVENLABS.value: ElevenLabsTTSProvider,
    TTSProviderType.GEMINI.value: GeminiTTSProvider,
    TTSProviderType.INWORLD.value: InworldTTSProvider,
}


class ProviderRegistry:
    """Holds one adapter instance per provider id.

    New providers are added with :meth:`register`; the orchestrator only
    ever looks adapters up by id.
    """

    def __init__(self) -> None:
        self._providers: dict[str, TTSProvider] = {}

    def register(self, name: str, provider: TTSProvider) -> None:
        """Register (or replace) the adapter for a provider id."""
        self._providers[name] = provider

    def get(self, name: str) -> TTSProvider:
        """
        Get the adapter for a provider id.

        Raises:
            UnsupportedProviderError: If no adapter is registered under ``name``.
        """
        provider = self._providers.get(name)
        if provider is None:
            logger.error(f"[ProviderRegistry] No adapter registered for: {name}")
            raise UnsupportedProviderError(name)
        return provider

    def names(self) -> list[str]:
        return sorted(self._providers)

    def __contains__(self, name: object) -> bool:
        return name in self._providers


def build_default_registry(settings: Settings | None = None) -> ProviderRegistry:
    """Create a registry with every built-in adapter."""
    settings = settings or get_settings()
    registry = ProviderRegistry()
    for name, provider_class in DEFAULT_PROVIDERS.items():
        registry.register(name, provider_class(timeout=settings.tts_timeout_seconds))
    return registry


# Singleton instance for convenience
_registry: ProviderRegistry | None = None


def get_provider_registry() -> ProviderRegistry:
    """Get or create the global provider registry."""
    global _registry
    if _registry is None:
        _registry = build_default_registry()
    return _registry
