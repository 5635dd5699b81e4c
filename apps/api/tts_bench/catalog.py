"""Static benchmark catalogue: providers under test and scripted prompts."""

from __future__ import annotations

import random
from dataclasses import dataclass


@dataclass(frozen=True)
class Provider:
    """A TTS vendor listed in the benchmark."""

    id: str
    name: str
    tagline: str
    price: str
    latency: str
    streaming: str
    url: str
    accent: str
    enabled: bool
    logo: str | None = None
    logo_alt: str | None = None
    logo_width: int | None = None
    logo_height: int | None = None


@dataclass(frozen=True)
class Prompt:
    """A scripted line every provider is asked to speak."""

    id: str
    label: str
    text: str


PROVIDERS: tuple[Provider, ...] = (
    Provider(
        id="elevenlabs",
        name="ElevenLabs",
        logo="/logos/elevenlabs.svg",
        logo_alt="ElevenLabs",
        logo_width=694,
        logo_height=90,
        tagline="Cinematic, expressive voices",
        price="$0.30 to $0.99 / 1k chars",
        latency="TBD",
        streaming="Yes",
        url="https://elevenlabs.io",
        accent="#ff5f2e",
        enabled=True,
    ),
    Provider(
        id="openai",
        name="OpenAI",
        logo="/logos/openai.svg",
        logo_alt="OpenAI",
        logo_width=1180,
        logo_height=320,
        tagline="Clean, balanced delivery",
        price="$0.015 / 1k chars",
        latency="TBD",
        streaming="Yes",
        url="https://platform.openai.com",
        accent="#f59e0b",
        enabled=True,
    ),
    Provider(
        id="gemini",
        name="Gemini",
        logo="/logos/gemini.svg",
        logo_alt="Gemini",
        tagline="Gemini TTS (preview)",
        price="TBD",
        latency="TBD",
        streaming="Yes",
        url="https://ai.google.dev/gemini-api/docs/speech-generation",
        accent="#4285f4",
        enabled=False,
    ),
    Provider(
        id="inworld",
        name="Inworld",
        logo="/logos/inworld.svg",
        logo_alt="Inworld",
        logo_width=94,
        logo_height=18,
        tagline="Character-focused voices",
        price="TBD",
        latency="TBD",
        streaming="Yes",
        url="https://platform.inworld.ai",
        accent="#0f766e",
        enabled=True,
    ),
    Provider(
        id="cartesia",
        name="Cartesia",
        tagline="Real-time, low latency",
        price="TBD",
        latency="TBD",
        streaming="Yes",
        url="https://cartesia.ai",
        accent="#1b9e8a",
        enabled=False,
    ),
)

PROMPTS: tuple[Prompt, ...] = (
    Prompt(
        id="short",
        label="Short",
        text="Clear speech is a craft. Every syllable matters.",
    ),
    Prompt(
        id="emotion",
        label="Emotion",
        text="I waited all week for this call, and now I finally get to say thank you.",
    ),
    Prompt(
        id="numbers",
        label="Numbers",
        text="Order 4821 ships on 02/15/2026 at 7:45 PM. ETA: 3 days.",
    ),
)

_PROVIDERS_BY_ID = {provider.id: provider for provider in PROVIDERS}
_PROMPTS_BY_ID = {prompt.id: prompt for prompt in PROMPTS}


def get_provider(provider_id: str) -> Provider | None:
    return _PROVIDERS_BY_ID.get(provider_id)


def get_prompt(prompt_id: str) -> Prompt | None:
    return _PROMPTS_BY_ID.get(prompt_id)


def enabled_providers() -> list[Provider]:
    """Providers that take part in matchups and the leaderboard."""
    return [provider for provider in PROVIDERS if provider.enabled]


def pick_matchup(
    providers: list[Provider], rng: random.Random | None = None
) -> tuple[Provider, Provider] | None:
    """
    Pick two distinct providers uniformly at random.

    Returns:
        A (left, right) pair, or None when fewer than two providers are given.
    """
    if len(providers) < 2:
        return None

    rng = rng or random.Random()
    first = rng.randrange(len(providers))
    second = rng.randrange(len(providers) - 1)
    if second >= first:
        second += 1
    return providers[first], providers[second]


def audio_src(provider_id: str, prompt_id: str) -> str:
    """Relative URL of the audio endpoint for a provider/prompt pair."""
    return f"/api/audio?provider={provider_id}&prompt={prompt_id}"
