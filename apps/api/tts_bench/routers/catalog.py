"""Catalogue and matchup endpoints."""

from __future__ import annotations

import random

from fastapi import APIRouter, HTTPException, status

from tts_bench.catalog import PROMPTS, PROVIDERS, audio_src, enabled_providers, pick_matchup
from tts_bench.schemas.catalog import (
    CatalogResponse,
    MatchupResponse,
    MatchupSide,
    PromptRead,
    ProviderRead,
)

router = APIRouter(prefix="/api", tags=["Catalog"])


@router.get("/catalog", response_model=CatalogResponse)
def read_catalog() -> CatalogResponse:
    return CatalogResponse(
        providers=[ProviderRead.model_validate(provider) for provider in PROVIDERS],
        prompts=[PromptRead.model_validate(prompt) for prompt in PROMPTS],
    )


@router.get("/matchup", response_model=MatchupResponse)
def read_matchup() -> MatchupResponse:
    """Pick a random prompt and two distinct enabled providers to compare."""

    pair = pick_matchup(enabled_providers())
    if pair is None:
        raise HTTPException(
            status.HTTP_400_BAD_REQUEST, detail="At least two enabled providers are required"
        )

    prompt = random.choice(PROMPTS)
    left, right = pair
    return MatchupResponse(
        prompt_id=prompt.id,
        left=MatchupSide(provider_id=left.id, audio_src=audio_src(left.id, prompt.id)),
        right=MatchupSide(provider_id=right.id, audio_src=audio_src(right.id, prompt.id)),
    )
