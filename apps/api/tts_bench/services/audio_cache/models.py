"""Audio cache result model."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class AudioResult:
    """Playable audio returned to callers of the audio cache."""

    audio: bytes
    format: str  # canonical format tag
    cached: bool
    model: str
    voice: str
