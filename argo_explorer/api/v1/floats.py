"""
Argo Explorer Floats - API Router

Endpoints:
  GET    /floats                      - List all floats
  GET    /floats/{float_id}           - Get one float by its external code
  POST   /floats                      - Register a float
  PATCH  /floats/{float_id}/status    - Change a float's status
"""

from typing import Optional

import structlog
from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import ConfigDict

from argo_explorer.api.deps import get_store
from argo_explorer.api.schemas import CamelModel, FloatResponse
from argo_explorer.store.entity_store import EntityStore
from argo_explorer.store.errors import DuplicateFloatError, NotFoundError, ValidationError
from argo_explorer.store.models import FloatStatus

log = structlog.get_logger(__name__)

router = APIRouter(prefix="/floats", tags=["Floats"])


# ── Request schemas ─────────────────────────────────────────────────────────

class CreateFloatRequest(CamelModel):
    model_config = ConfigDict(allow_inf_nan=False)

    float_id: str
    latitude: float
    longitude: float
    status: FloatStatus = FloatStatus.ACTIVE
    region: Optional[str] = None


class UpdateStatusRequest(CamelModel):
    status: FloatStatus


# ── GET /floats ─────────────────────────────────────────────────────────────

@router.get("", response_model=list[FloatResponse])
def list_floats(store: EntityStore = Depends(get_store)):
    """List all floats."""
    return [FloatResponse.from_record(f) for f in store.list_floats()]


# ── GET /floats/{float_id} ──────────────────────────────────────────────────

@router.get("/{float_id}", response_model=FloatResponse)
def get_float(float_id: str, store: EntityStore = Depends(get_store)):
    """Get a float by its external code."""
    try:
        return FloatResponse.from_record(store.require_float(float_id))
    except NotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))


# ── POST /floats ────────────────────────────────────────────────────────────

@router.post("", response_model=FloatResponse, status_code=status.HTTP_201_CREATED)
def create_float(request: CreateFloatRequest, store: EntityStore = Depends(get_store)):
    """Register a new float.  Float codes must be unique."""
    try:
        created = store.create_float(**request.model_dump())
    except DuplicateFloatError as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc))
    except ValidationError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
    return FloatResponse.from_record(created)


# ── PATCH /floats/{float_id}/status ─────────────────────────────────────────

@router.patch("/{float_id}/status", response_model=FloatResponse)
def update_float_status(
    float_id: str,
    request: UpdateStatusRequest,
    store: EntityStore = Depends(get_store),
):
    """Set a float to active or inactive."""
    updated = store.update_float_status(float_id, request.status)
    if updated is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Float not found: '{float_id}'",
        )
    return FloatResponse.from_record(updated)
