"""
Argo Explorer Export - API Router

Endpoints:
  GET    /export/csv?type=&floatId=   - Download floats or measurements as CSV

``type=floats`` exports every float; anything else exports measurements,
restricted to one float (depth-sorted) when ``floatId`` is given.
"""

from typing import Optional

import structlog
from fastapi import APIRouter, Depends, Query
from fastapi.responses import Response

from argo_explorer.api.deps import get_store
from argo_explorer.export.delimited import ExportKind, export_filename, to_delimited_text
from argo_explorer.store.entity_store import EntityStore

log = structlog.get_logger(__name__)

router = APIRouter(prefix="/export", tags=["Export"])


@router.get("/csv")
def export_csv(
    type: Optional[str] = Query(None, description="'floats' or 'measurements' (default)"),
    float_id: Optional[str] = Query(None, alias="floatId", description="Restrict measurements to one float"),
    store: EntityStore = Depends(get_store),
) -> Response:
    """Download store contents as comma-delimited text."""
    if type == ExportKind.FLOATS.value:
        kind = ExportKind.FLOATS
        rows = store.list_floats()
        float_id = None
    else:
        kind = ExportKind.MEASUREMENTS
        rows = (
            store.list_measurements_by_float(float_id)
            if float_id
            else store.list_measurements()
        )

    filename = export_filename(kind, float_id)
    log.info("csv_export", kind=kind.value, float_id=float_id, rows=len(rows))

    return Response(
        content=to_delimited_text(kind, rows),
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
