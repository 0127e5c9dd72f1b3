"""Metrics API endpoints for Prometheus scraping."""

from fastapi import APIRouter, Response
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

router = APIRouter(tags=["metrics"])


@router.get("/metrics")
async def metrics() -> Response:
    """Prometheus metrics endpoint (HTTP, filter fallback and cipher counters)."""
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
