"""Repository for blind-test votes and their tallies."""

from __future__ import annotations

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from tts_bench.models.vote import Vote
from tts_bench.repositories.base import BaseRepository


class VoteRepository(BaseRepository[Vote]):
    """Manages vote persistence and leaderboard aggregation."""

    def __init__(self):
        super().__init__(Vote)

    def record(self, session: Session, *, prompt_id: str, winner: str, loser: str) -> Vote:
        """Insert a new vote record."""
        vote = Vote(prompt_id=prompt_id, winner_provider=winner, loser_provider=loser)
        return self.add(session, vote)

    def win_counts(self, session: Session) -> dict[str, int]:
        """Return wins per provider id for providers with at least one win."""
        stmt = select(Vote.winner_provider, func.count()).group_by(Vote.winner_provider)
        return {provider: int(wins) for provider, wins in session.execute(stmt).all()}

    def total(self, session: Session) -> int:
        """Return the total number of recorded votes."""
        return self.count(session)
