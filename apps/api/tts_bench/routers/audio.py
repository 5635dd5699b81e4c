"""Audio endpoint serving cached or freshly synthesized benchmark clips."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.orm import Session

from tts_bench.catalog import get_prompt, get_provider
from tts_bench.db import get_db
from tts_bench.services.audio_cache import AudioCacheService, get_audio_cache_service
from tts_bench.services.tts import UnsupportedProviderError, content_type_for

router = APIRouter(prefix="/api", tags=["Audio"])
logger = logging.getLogger(__name__)

CACHE_CONTROL_HIT = "public, max-age=31536000, immutable"
CACHE_CONTROL_MISS = "public, max-age=86400"


@router.get("/audio")
async def read_audio(
    provider: str | None = Query(default=None),
    prompt: str | None = Query(default=None),
    db: Session = Depends(get_db),
    audio_service: AudioCacheService = Depends(get_audio_cache_service),
) -> Response:
    """Return the clip for a provider/prompt pair, generating it on first use."""

    if not provider or not prompt:
        raise HTTPException(status.HTTP_400_BAD_REQUEST, detail="Missing provider or prompt")

    provider_entry = get_provider(provider)
    prompt_entry = get_prompt(prompt)
    if provider_entry is None or prompt_entry is None:
        raise HTTPException(status.HTTP_400_BAD_REQUEST, detail="Unknown provider or prompt")

    try:
        result = await audio_service.get_or_create_audio(
            db, provider_entry.id, prompt_entry.id, prompt_entry.text
        )
    except UnsupportedProviderError as exc:
        logger.warning(f"[Audio] {exc}")
        raise HTTPException(status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except Exception as exc:
        logger.error(f"[Audio] Generation failed for {provider}/{prompt}: {exc}")
        raise HTTPException(
            status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(exc) or "Audio generation failed"
        ) from exc

    return Response(
        content=result.audio,
        media_type=content_type_for(result.format),
        headers={
            "Cache-Control": CACHE_CONTROL_HIT if result.cached else CACHE_CONTROL_MISS,
            "X-Cache": "HIT" if result.cached else "MISS",
            "X-TTS-Provider": provider_entry.id,
            "X-TTS-Voice": result.voice,
        },
    )
