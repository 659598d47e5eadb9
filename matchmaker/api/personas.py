"""
Persona Catalog API Routes

Endpoints:
1. GET /v1/personas - All fifteen personas
2. GET /v1/personas/{name} - One persona by exact name
"""

from fastapi import APIRouter

from matchmaker.core.errors import NotFoundError
from matchmaker.features.personas.catalog import default_catalog


router = APIRouter(prefix="/v1/personas")


@router.get("")
def list_personas() -> dict:
    """
    Response:
        { success: true, data: [ { name, traits, trait_summary }, ... ] }
    """
    return {
        "success": True,
        "data": [p.model_dump() for p in default_catalog().get_all()],
    }


@router.get("/{name}")
def get_persona(name: str) -> dict:
    persona = default_catalog().get_by_name(name)
    if persona is None:
        raise NotFoundError(f"Persona not found: {name}")
    return {"success": True, "data": persona.model_dump()}
