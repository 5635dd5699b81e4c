"""Service layer for audio generation and caching."""
