"""Backend endpoints."""

from typing import List

from fastapi import APIRouter, HTTPException

from ..models import BackendSpec, BackendSummary
from ..services.backends import BackendNotFoundError, get_registry

router = APIRouter()


@router.get("", response_model=List[BackendSummary])
async def list_backends():
    """List registered backends.

    GET /backends - All backends, sorted by name
    """
    registry = get_registry()
    return registry.summaries()


@router.get("/{name}", response_model=BackendSpec)
async def get_backend(name: str):
    """Get the full description of a backend.

    GET /backends/{name} - Coupling map and native gates
    """
    registry = get_registry()
    try:
        return registry.get(name)
    except BackendNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
