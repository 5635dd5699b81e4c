"""Database models package."""

from .tts_audio import TTSAudio
from .vote import Vote

__all__ = ["TTSAudio", "Vote"]
