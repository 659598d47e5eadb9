"""Liveness endpoint."""

from fastapi import APIRouter

from matchmaker.features.personas.catalog import default_catalog

root_router = APIRouter(tags=["health"])


@root_router.get("/healthz")
def healthz():
    """Lightweight liveness check (no deps)."""
    return {"status": "ok", "personas": len(default_catalog())}
