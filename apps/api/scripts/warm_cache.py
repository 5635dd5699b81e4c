"""Entry point for pre-generating benchmark audio."""

from __future__ import annotations

from tts_bench.scripts.warm_cache import main


if __name__ == "__main__":  # pragma: no cover - manual execution only
    raise SystemExit(main())
