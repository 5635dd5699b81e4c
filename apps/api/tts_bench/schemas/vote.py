"""Pydantic schemas for votes and the leaderboard."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class VoteCreate(BaseModel):
    """Request payload for recording a blind-test vote.

    Fields are optional here so that missing values are reported as a 400
    by the router rather than a schema validation error.
    """

    model_config = ConfigDict(populate_by_name=True)

    prompt_id: str | None = Field(default=None, alias="promptId")
    winner: str | None = None
    loser: str | None = None


class VoteRecorded(BaseModel):
    """Response returned once a vote is stored."""

    ok: bool = True


class LeaderboardItem(BaseModel):
    """Win count for one enabled provider."""

    id: str
    name: str
    wins: int


class LeaderboardResponse(BaseModel):
    """Providers ordered by wins, plus the overall vote count."""

    model_config = ConfigDict(populate_by_name=True)

    items: list[LeaderboardItem]
    total_votes: int = Field(..., alias="totalVotes")
