"""
Argo Explorer Measurements - API Router

Endpoints:
  GET    /measurements                       - List measurements (depth range / float / all)
  GET    /measurements/{float_id}/profile    - Depth-sorted profile for one float
  POST   /measurements                       - Record a measurement
"""

from typing import Optional

import structlog
from fastapi import APIRouter, Depends, HTTPException, Query, status
from pydantic import ConfigDict

from argo_explorer.api.deps import get_store
from argo_explorer.api.schemas import CamelModel, MeasurementResponse
from argo_explorer.store.entity_store import EntityStore
from argo_explorer.store.errors import DanglingReferenceError, ValidationError

log = structlog.get_logger(__name__)

router = APIRouter(prefix="/measurements", tags=["Measurements"])


# ── Request / Response schemas ──────────────────────────────────────────────

class CreateMeasurementRequest(CamelModel):
    model_config = ConfigDict(allow_inf_nan=False)

    float_id: str
    depth: float
    temperature: float
    salinity: float
    pressure: Optional[float] = None
    cycle_number: Optional[int] = None


class ProfilePoint(CamelModel):
    depth: float
    temperature: float
    salinity: float
    pressure: Optional[float] = None


# ── GET /measurements ───────────────────────────────────────────────────────

@router.get("", response_model=list[MeasurementResponse])
def list_measurements(
    float_id: Optional[str] = Query(None, alias="floatId", description="Filter by float code"),
    min_depth: Optional[float] = Query(None, alias="minDepth", description="Inclusive lower depth bound (m)"),
    max_depth: Optional[float] = Query(None, alias="maxDepth", description="Inclusive upper depth bound (m)"),
    store: EntityStore = Depends(get_store),
):
    """
    List measurements.

    A depth range takes precedence when both bounds are given; otherwise a
    float filter returns that float's depth-sorted profile; otherwise all
    measurements are returned.
    """
    if min_depth is not None and max_depth is not None:
        rows = store.list_measurements_by_depth_range(min_depth, max_depth)
    elif float_id:
        rows = store.list_measurements_by_float(float_id)
    else:
        rows = store.list_measurements()
    return [MeasurementResponse.from_record(m) for m in rows]


# ── GET /measurements/{float_id}/profile ────────────────────────────────────

@router.get("/{float_id}/profile", response_model=list[ProfilePoint])
def get_profile(float_id: str, store: EntityStore = Depends(get_store)):
    """Depth-sorted profile points for one float, shallowest first."""
    rows = store.list_measurements_by_float(float_id)
    if not rows:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="No measurements found for this float",
        )
    return [
        ProfilePoint(
            depth=m.depth,
            temperature=m.temperature,
            salinity=m.salinity,
            pressure=m.pressure,
        )
        for m in rows
    ]


# ── POST /measurements ──────────────────────────────────────────────────────

@router.post("", response_model=MeasurementResponse, status_code=status.HTTP_201_CREATED)
def create_measurement(
    request: CreateMeasurementRequest,
    store: EntityStore = Depends(get_store),
):
    """Record one measurement for an existing float."""
    try:
        created = store.create_measurement(**request.model_dump())
    except (DanglingReferenceError, ValidationError) as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
    return MeasurementResponse.from_record(created)
