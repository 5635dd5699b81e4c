"""Repository exports."""

from .tts_audio import TTSAudioRepository
from .vote import VoteRepository

__all__ = ["TTSAudioRepository", "VoteRepository"]
