"""CLI utility to pre-generate benchmark audio into the cache."""

from __future__ import annotations

import argparse
import asyncio
import logging
from dataclasses import dataclass, field

from sqlalchemy.orm import Session

from tts_bench.catalog import PROMPTS, Prompt, Provider, enabled_providers, get_prompt, get_provider
from tts_bench.db import SessionLocal, init_db
from tts_bench.services.audio_cache import AudioCacheService, get_audio_cache_service
from tts_bench.services.tts import TTSProviderError

logger = logging.getLogger(__name__)


@dataclass
class WarmupSummary:
    """Outcome counts for one warm-up run."""

    hits: int = 0
    generated: int = 0
    failures: list[str] = field(default_factory=list)


async def warm_cache(
    session: Session,
    service: AudioCacheService,
    providers: list[Provider],
    prompts: list[Prompt],
) -> WarmupSummary:
    """Request every provider/prompt pair once so later plays are cache hits."""

    summary = WarmupSummary()
    for provider in providers:
        for prompt in prompts:
            try:
                result = await service.get_or_create_audio(
                    session, provider.id, prompt.id, prompt.text
                )
            except TTSProviderError as exc:
                logger.error(f"[WarmCache] {provider.id}/{prompt.id} failed: {exc}")
                summary.failures.append(f"{provider.id}/{prompt.id}")
                continue

            if result.cached:
                summary.hits += 1
            else:
                summary.generated += 1
            logger.info(
                f"[WarmCache] {provider.id}/{prompt.id} "
                f"{'HIT' if result.cached else 'MISS'} ({len(result.audio)} bytes)"
            )
    return summary


def _resolve_cli_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Pre-generate benchmark audio")
    parser.add_argument(
        "--provider",
        action="append",
        dest="providers",
        help="Provider id to warm (repeatable; defaults to all enabled providers)",
    )
    parser.add_argument(
        "--prompt",
        action="append",
        dest="prompts",
        help="Prompt id to warm (repeatable; defaults to every prompt)",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _resolve_cli_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.providers:
        providers = [get_provider(provider_id) for provider_id in args.providers]
        if any(provider is None for provider in providers):
            raise SystemExit(f"Unknown provider in {args.providers!r}")
    else:
        providers = enabled_providers()

    if args.prompts:
        prompts = [get_prompt(prompt_id) for prompt_id in args.prompts]
        if any(prompt is None for prompt in prompts):
            raise SystemExit(f"Unknown prompt in {args.prompts!r}")
    else:
        prompts = list(PROMPTS)

    init_db()
    with SessionLocal() as session:
        summary = asyncio.run(
            warm_cache(session, get_audio_cache_service(), providers, prompts)
        )

    print(
        f"Warm-up complete: {summary.generated} generated, {summary.hits} cached, "
        f"{len(summary.failures)} failed"
    )
    return 1 if summary.failures else 0


if __name__ == "__main__":  # pragma: no cover - manual execution only
    raise SystemExit(main())
