"""Audio generation-and-cache orchestration."""

from tts_bench.services.audio_cache.models import AudioResult
from tts_bench.services.audio_cache.service import AudioCacheService, get_audio_cache_service

__all__ = ["AudioCacheService", "AudioResult", "get_audio_cache_service"]
