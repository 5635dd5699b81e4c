"""Tests for the static catalogue and the matchup picker."""

from __future__ import annotations

import random

from fastapi.testclient import TestClient

from tts_bench.catalog import (
    PROMPTS,
    PROVIDERS,
    audio_src,
    enabled_providers,
    get_prompt,
    get_provider,
    pick_matchup,
)
from tts_bench.main import app


client = TestClient(app)


def test_lookup_by_id() -> None:
    assert get_provider("openai").name == "OpenAI"
    assert get_prompt("short").text == "Clear speech is a craft. Every syllable matters."
    assert get_provider("acme") is None
    assert get_prompt("long") is None


def test_enabled_providers_skip_disabled_entries() -> None:
    ids = [provider.id for provider in enabled_providers()]

    assert ids == ["elevenlabs", "openai", "inworld"]


def test_pick_matchup_returns_distinct_pair() -> None:
    rng = random.Random(7)
    providers = enabled_providers()

    for _ in range(50):
        left, right = pick_matchup(providers, rng)
        assert left.id != right.id


def test_pick_matchup_needs_two_providers() -> None:
    assert pick_matchup([]) is None
    assert pick_matchup(enabled_providers()[:1]) is None


def test_audio_src() -> None:
    assert audio_src("openai", "short") == "/api/audio?provider=openai&prompt=short"


def test_catalog_endpoint_lists_everything() -> None:
    response = client.get("/api/catalog")

    assert response.status_code == 200
    body = response.json()
    assert [p["id"] for p in body["providers"]] == [p.id for p in PROVIDERS]
    assert [p["id"] for p in body["prompts"]] == [p.id for p in PROMPTS]
    openai = next(p for p in body["providers"] if p["id"] == "openai")
    assert openai["enabled"] is True
    assert openai["logoAlt"] == "OpenAI"


def test_matchup_endpoint_pairs_enabled_providers() -> None:
    enabled = {provider.id for provider in enabled_providers()}

    body = client.get("/api/matchup").json()

    assert body["promptId"] in {prompt.id for prompt in PROMPTS}
    left, right = body["left"], body["right"]
    assert left["providerId"] != right["providerId"]
    assert {left["providerId"], right["providerId"]} <= enabled
    assert left["audioSrc"] == audio_src(left["providerId"], body["promptId"])
