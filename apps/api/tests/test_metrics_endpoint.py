"""Tests for Prometheus metrics exposure."""

from __future__ import annotations

from fastapi.testclient import TestClient

from tts_bench.main import app
from tts_bench.monitoring import record_audio_cache, record_synthesis


client = TestClient(app)


def test_metrics_endpoint_exposes_prometheus_data() -> None:
    client.get("/health")

    response = client.get("/metrics")

    assert response.status_code == 200
    content = response.text
    assert "tts_bench_requests_total" in content
    assert "tts_bench_request_duration_seconds" in content
    assert response.headers["content-type"].startswith("text/plain")


def test_metrics_counts_increment_on_request() -> None:
    client.get("/health")
    content = client.get("/metrics").text

    assert "method=\"GET\",path=\"/health\"" in content


def test_audio_cache_outcomes_are_exposed() -> None:
    record_audio_cache("metrics-test", hit=True)
    record_audio_cache("metrics-test", hit=False)
    record_synthesis("metrics-test", 0.25)

    content = client.get("/metrics").text

    assert 'tts_bench_audio_cache_lookups_total{provider="metrics-test",outcome="hit"}' in content
    assert 'tts_bench_audio_cache_lookups_total{provider="metrics-test",outcome="miss"}' in content
    assert 'tts_bench_synthesis_duration_seconds_count{provider="metrics-test"}' in content
