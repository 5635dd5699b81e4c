"""Monitoring utilities for Prometheus instrumentation."""

from .middleware import MetricsMiddleware, record_audio_cache, record_synthesis, render_metrics

__all__ = ["MetricsMiddleware", "record_audio_cache", "record_synthesis", "render_metrics"]
