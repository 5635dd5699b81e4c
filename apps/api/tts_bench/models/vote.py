"""ORM model for blind-test votes."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import DateTime, Index, String, func
from sqlalchemy.orm import Mapped, mapped_column

from tts_bench.db.base import Base


class Vote(Base):
    """A single head-to-head result between two providers on one prompt."""

    __tablename__ = "votes"
    __table_args__ = (
        Index("idx_votes_winner", "winner_provider"),
        Index("idx_votes_prompt", "prompt_id"),
    )

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    prompt_id: Mapped[str] = mapped_column(String(64), nullable=False)
    winner_provider: Mapped[str] = mapped_column(String(64), nullable=False)
    loser_provider: Mapped[str] = mapped_column(String(64), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
