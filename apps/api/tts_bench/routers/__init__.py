from . import audio, catalog, health, votes  # noqa: F401

__all__ = ["audio", "catalog", "health", "votes"]
