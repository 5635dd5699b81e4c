"""Get-or-create orchestration for benchmark audio."""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING

from tts_bench.core.config import get_settings
from tts_bench.monitoring import record_audio_cache, record_synthesis
from tts_bench.repositories.tts_audio import TTSAudioRepository
from tts_bench.services.audio_cache.models import AudioResult
from tts_bench.services.tts import (
    get_provider_registry,
    normalize_audio,
    resolve_provider_config,
)

if TYPE_CHECKING:
    from sqlalchemy.orm import Session

    from tts_bench.core.config import Settings
    from tts_bench.services.tts import ProviderRegistry

logger = logging.getLogger(__name__)


class AudioCacheService:
    """
    Returns cached audio for a provider/prompt pair, synthesizing on a miss.

    The cache key is always derived from the provider configuration resolved
    for the current call, never from caller-supplied metadata. Concurrent
    misses on one key are not serialized here; each performs its own
    synthesis and the store keeps the first row written.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        registry: ProviderRegistry | None = None,
        repository: TTSAudioRepository | None = None,
    ) -> None:
        """
        Initialize Audio Cache Service.

        Args:
            settings: Application settings. If not provided, will load from environment.
            registry: Override provider registry for testing.
            repository: Override cache repository.
        """
        self.settings = settings or get_settings()
        self._registry = registry
        self.repository = repository or TTSAudioRepository()

    @property
    def registry(self) -> ProviderRegistry:
        """Get the provider registry instance."""
        if self._registry is None:
            self._registry = get_provider_registry()
        return self._registry

    async def get_or_create_audio(
        self,
        session: Session,
        provider_id: str,
        prompt_id: str,
        prompt_text: str,
    ) -> AudioResult:
        """
        Return audio for a prompt spoken by a provider.

        Args:
            session: Database session used for the cache probe and write.
            provider_id: Provider id, e.g. "openai".
            prompt_id: Catalogue prompt id; part of the cache key.
            prompt_text: Text to synthesize on a miss.

        Returns:
            AudioResult; ``cached`` tells whether the store already had it.

        Raises:
            UnsupportedProviderError: If the provider id is unknown.
            TTSProviderError: If synthesis fails on a miss.
        """
        config = resolve_provider_config(provider_id, self.settings)
        key = config.cache_key(prompt_id)

        entry = self.repository.probe(session, key)
        if entry is not None:
            record_audio_cache(provider_id, hit=True)
            logger.info(f"[AudioCache] HIT {provider_id}/{prompt_id} ({config.voice})")
            return AudioResult(
                audio=entry.audio,
                format=entry.format,
                cached=True,
                model=config.model,
                voice=config.voice,
            )

        provider = self.registry.get(provider_id)
        record_audio_cache(provider_id, hit=False)
        logger.info(f"[AudioCache] MISS {provider_id}/{prompt_id}, synthesizing")
        logger.debug(f"[AudioCache] Cache key: {key}")

        started = time.perf_counter()
        try:
            result = await provider.synthesize(prompt_text, config)
        finally:
            record_synthesis(provider_id, time.perf_counter() - started)

        audio, audio_format = normalize_audio(result)

        try:
            inserted = self.repository.insert_if_absent(session, key, audio, audio_format.value)
            session.commit()
        except Exception:
            session.rollback()
            raise

        if not inserted:
            logger.info(f"[AudioCache] Concurrent write won for {provider_id}/{prompt_id}")

        return AudioResult(
            audio=audio,
            format=audio_format.value,
            cached=False,
            model=result.model,
            voice=result.voice,
        )


# Singleton instance for convenience
_audio_cache_service: AudioCacheService | None = None


def get_audio_cache_service() -> AudioCacheService:
    """Get or create the global audio cache service instance."""
    global _audio_cache_service
    if _audio_cache_service is None:
        _audio_cache_service = AudioCacheService()
    return _audio_cache_service
