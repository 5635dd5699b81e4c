"""Pydantic schemas used by the FastAPI application."""

from .catalog import CatalogResponse, MatchupResponse, MatchupSide, PromptRead, ProviderRead
from .vote import LeaderboardItem, LeaderboardResponse, VoteCreate, VoteRecorded

__all__ = [
    "CatalogResponse",
    "LeaderboardItem",
    "LeaderboardResponse",
    "MatchupResponse",
    "MatchupSide",
    "PromptRead",
    "ProviderRead",
    "VoteCreate",
    "VoteRecorded",
]
