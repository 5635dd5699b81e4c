from fastapi import APIRouter, Depends, Response
from sqlalchemy import text
from sqlalchemy.orm import Session

from tts_bench.core.config import get_settings
from tts_bench.db import get_db
from tts_bench.monitoring import render_metrics


router = APIRouter(tags=["Health"])


@router.get("/")
@router.get("/health")
def read_health() -> dict[str, str]:
    settings = get_settings()
    return {
        "status": "ok",
        "service": settings.app_name,
        "version": settings.app_version,
    }


@router.get("/health/db")
def read_database_health(db: Session = Depends(get_db)) -> dict[str, str]:
    """Readiness probe that round-trips the cache database."""
    db.execute(text("SELECT 1"))
    return {"status": "ok", "database": "reachable"}


@router.get("/metrics", include_in_schema=False, tags=["Monitoring"])
def metrics() -> Response:
    """Expose collected metrics for Prometheus scraping."""
    return Response(content=render_metrics(), media_type="text/plain; version=0.0.4")
