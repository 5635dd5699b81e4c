"""Prometheus-compatible metrics middleware for FastAPI."""

from __future__ import annotations

import threading
import time
from collections import defaultdict
from dataclasses import dataclass
from typing import Dict, Tuple

MetricKey = Tuple[str, str, str]
PathKey = Tuple[str, str]
CacheKey = Tuple[str, str]

METRIC_PREFIX = "tts_bench"


@dataclass
class LatencyStats:
    """Aggregate latency metrics for a route."""

    count: int = 0
    total_duration: float = 0.0

    def observe(self, duration: float) -> None:
        self.count += 1
        self.total_duration += duration


_request_counts: Dict[MetricKey, int] = defaultdict(int)
_error_counts: Dict[MetricKey, int] = defaultdict(int)
_latency_stats: Dict[PathKey, LatencyStats] = defaultdict(LatencyStats)
_audio_cache_counts: Dict[CacheKey, int] = defaultdict(int)
_synthesis_stats: Dict[str, LatencyStats] = defaultdict(LatencyStats)
_metrics_lock = threading.Lock()


class MetricsMiddleware:
    """ASGI middleware that records request metrics."""

    def __init__(self, app):
        self.app = app

    async def __call__(self, scope, receive, send):  # type: ignore[override]
        if scope.get("type") != "http":
            await self.app(scope, receive, send)
            return

        path = scope.get("path", "")
        if path == "/metrics":
            await self.app(scope, receive, send)
            return

        method = scope.get("method", "UNKNOWN")
        start_time = time.perf_counter()
        status_holder: Dict[str, int] = {}

        async def send_wrapper(message):
            if message["type"] == "http.response.start":
                status_holder["status"] = message["status"]
            await send(message)

        try:
            await self.app(scope, receive, send_wrapper)
        except Exception:
            duration = time.perf_counter() - start_time
            _record_metrics(method, path, 500, duration, failed=True)
            raise
        else:
            duration = time.perf_counter() - start_time
            status_code = status_holder.get("status", 500)
            _record_metrics(method, path, status_code, duration, failed=status_code >= 500)


def _record_metrics(method: str, path: str, status: int, duration: float, *, failed: bool) -> None:
    key: MetricKey = (method, path, str(status))
    path_key: PathKey = (method, path)
    with _metrics_lock:
        _request_counts[key] += 1
        _latency_stats[path_key].observe(duration)
        if failed:
            _error_counts[key] += 1


def record_audio_cache(provider: str, *, hit: bool) -> None:
    """Count an audio cache lookup outcome for a provider."""
    with _metrics_lock:
        _audio_cache_counts[(provider, "hit" if hit else "miss")] += 1


def record_synthesis(provider: str, duration: float) -> None:
    """Record the wall time of one outbound synthesis call."""
    with _metrics_lock:
        _synthesis_stats[provider].observe(duration)


def render_metrics() -> str:
    """Render collected metrics in the Prometheus exposition format."""

    p = METRIC_PREFIX
    lines: list[str] = []

    lines.append(f"# HELP {p}_requests_total Total HTTP requests")
    lines.append(f"# TYPE {p}_requests_total counter")
    with _metrics_lock:
        for (method, path, status), value in sorted(_request_counts.items()):
            lines.append(
                f'{p}_requests_total{{method="{method}",path="{path}",status="{status}"}} {value}'
            )

        lines.append(f"# HELP {p}_request_errors_total HTTP requests that resulted in errors")
        lines.append(f"# TYPE {p}_request_errors_total counter")
        if _error_counts:
            for (method, path, status), value in sorted(_error_counts.items()):
                lines.append(
                    f'{p}_request_errors_total{{method="{method}",path="{path}",status="{status}"}} {value}'
                )
        else:
            lines.append(f'{p}_request_errors_total{{method="",path="",status=""}} 0')

        lines.append(f"# HELP {p}_request_duration_seconds_sum Total time spent handling requests")
        lines.append(f"# TYPE {p}_request_duration_seconds_sum counter")
        for (method, path), stats in sorted(_latency_stats.items()):
            lines.append(
                f'{p}_request_duration_seconds_sum{{method="{method}",path="{path}"}} {stats.total_duration}'
            )

        lines.append(f"# HELP {p}_request_duration_seconds_count Total number of timed requests")
        lines.append(f"# TYPE {p}_request_duration_seconds_count counter")
        for (method, path), stats in sorted(_latency_stats.items()):
            lines.append(
                f'{p}_request_duration_seconds_count{{method="{method}",path="{path}"}} {stats.count}'
            )

        lines.append(f"# HELP {p}_audio_cache_lookups_total Audio cache lookups by outcome")
        lines.append(f"# TYPE {p}_audio_cache_lookups_total counter")
        for (provider, outcome), value in sorted(_audio_cache_counts.items()):
            lines.append(
                f'{p}_audio_cache_lookups_total{{provider="{provider}",outcome="{outcome}"}} {value}'
            )

        lines.append(f"# HELP {p}_synthesis_duration_seconds_sum Time spent in provider synthesis calls")
        lines.append(f"# TYPE {p}_synthesis_duration_seconds_sum counter")
        for provider, stats in sorted(_synthesis_stats.items()):
            lines.append(f'{p}_synthesis_duration_seconds_sum{{provider="{provider}"}} {stats.total_duration}')
        lines.append(f"# HELP {p}_synthesis_duration_seconds_count Number of provider synthesis calls")
        lines.append(f"# TYPE {p}_synthesis_duration_seconds_count counter")
        for provider, stats in sorted(_synthesis_stats.items()):
            lines.append(f'{p}_synthesis_duration_seconds_count{{provider="{provider}"}} {stats.count}')

    return "\n".join(lines) + "\n"
