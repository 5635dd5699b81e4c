"""ORM model for cached synthesized audio."""

from __future__ import annotations

import base64
from datetime import datetime

from sqlalchemy import DateTime, Index, String, Text, UniqueConstraint, func
from sqlalchemy.orm import Mapped, mapped_column

from tts_bench.db.base import Base


class TTSAudio(Base):
    """One synthesized clip for a (provider, prompt, model, voice) combination.

    Rows are written once on the first successful synthesis and never
    updated. ``model`` may hold a composite string when encoding parameters
    beyond model and voice affect the generated bytes.
    """

    __tablename__ = "tts_audio"
    __table_args__ = (
        UniqueConstraint(
            "provider_id", "prompt_id", "model", "voice", name="uq_tts_audio_cache_key"
        ),
        Index("idx_audio_provider", "provider_id"),
        Index("idx_audio_prompt", "prompt_id"),
    )

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    provider_id: Mapped[str] = mapped_column(String(64), nullable=False)
    prompt_id: Mapped[str] = mapped_column(String(64), nullable=False)
    model: Mapped[str] = mapped_column(String(255), nullable=False)
    voice: Mapped[str] = mapped_column(String(255), nullable=False)
    format: Mapped[str] = mapped_column(String(16), nullable=False)
    audio_base64: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )

    @property
    def audio(self) -> bytes:
        """Decoded audio payload."""
        return base64.b64decode(self.audio_base64)

    def __repr__(self) -> str:  # pragma: no cover - debug helper only
        return (
            f"TTSAudio(id={self.id!r}, provider_id={self.provider_id!r}, "
            f"prompt_id={self.prompt_id!r}, model={self.model!r}, voice={self.voice!r})"
        )
