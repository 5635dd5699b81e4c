"""Vote recording and leaderboard endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from tts_bench.catalog import enabled_providers, get_prompt, get_provider
from tts_bench.db import get_db
from tts_bench.repositories.vote import VoteRepository
from tts_bench.schemas.vote import (
    LeaderboardItem,
    LeaderboardResponse,
    VoteCreate,
    VoteRecorded,
)

router = APIRouter(prefix="/api", tags=["Votes"])
_vote_repository = VoteRepository()
logger = logging.getLogger(__name__)


@router.post("/vote", response_model=VoteRecorded)
def create_vote(payload: VoteCreate, db: Session = Depends(get_db)) -> VoteRecorded:
    """Store the outcome of one blind comparison."""

    if not payload.prompt_id or not payload.winner or not payload.loser:
        raise HTTPException(status.HTTP_400_BAD_REQUEST, detail="Missing fields")

    if get_prompt(payload.prompt_id) is None:
        raise HTTPException(status.HTTP_400_BAD_REQUEST, detail="Unknown prompt")

    if get_provider(payload.winner) is None or get_provider(payload.loser) is None:
        raise HTTPException(status.HTTP_400_BAD_REQUEST, detail="Unknown provider")

    if payload.winner == payload.loser:
        raise HTTPException(status.HTTP_400_BAD_REQUEST, detail="Invalid matchup")

    _vote_repository.record(
        db, prompt_id=payload.prompt_id, winner=payload.winner, loser=payload.loser
    )
    db.commit()
    logger.info(f"[Votes] {payload.winner} beat {payload.loser} on {payload.prompt_id}")
    return VoteRecorded()


@router.get("/leaderboard", response_model=LeaderboardResponse)
def read_leaderboard(db: Session = Depends(get_db)) -> LeaderboardResponse:
    """Enabled providers ordered by number of wins."""

    wins = _vote_repository.win_counts(db)
    items = [
        LeaderboardItem(id=provider.id, name=provider.name, wins=wins.get(provider.id, 0))
        for provider in enabled_providers()
    ]
    items.sort(key=lambda item: item.wins, reverse=True)
    return LeaderboardResponse(items=items, total_votes=_vote_repository.total(db))
