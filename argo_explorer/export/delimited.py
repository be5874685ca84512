"""
Argo Explorer Delimited Text Export

Serialises float and measurement records to comma-delimited text:

    - one header line, then one line per record, joined with ``\\n``
    - numbers rendered with ``str()``
    - timestamps rendered as UTC ISO 8601 with milliseconds (``...T12:00:00.000Z``)
    - ``None`` rendered as an empty field

Field values are written as-is.  A region label containing a comma will shift
the columns of its row; values are not quoted or escaped.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Iterable, Optional, Sequence, Union

from argo_explorer.store.models import Float, Measurement

DELIMITER = ","


class ExportKind(str, Enum):
    FLOATS = "floats"
    MEASUREMENTS = "measurements"


FLOAT_HEADER = (
    "Float ID",
    "Latitude",
    "Longitude",
    "Status",
    "Region",
    "Deployment Date",
    "Last Update",
)

MEASUREMENT_HEADER = (
    "Float ID",
    "Depth (m)",
    "Temperature (°C)",
    "Salinity (PSU)",
    "Pressure (dbar)",
    "Cycle Number",
    "Recorded At",
)


def format_timestamp(value: datetime) -> str:
    """Render *value* as ``YYYY-MM-DDTHH:MM:SS.mmmZ`` in UTC."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"


def _field(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, datetime):
        return format_timestamp(value)
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def _float_fields(row: Float) -> Sequence[Any]:
    return (
        row.float_id,
        row.latitude,
        row.longitude,
        row.status,
        row.region,
        row.deployment_date,
        row.last_update,
    )


def _measurement_fields(row: Measurement) -> Sequence[Any]:
    return (
        row.float_id,
        row.depth,
        row.temperature,
        row.salinity,
        row.pressure,
        row.cycle_number,
        row.recorded_at,
    )


_LAYOUTS = {
    ExportKind.FLOATS: (FLOAT_HEADER, _float_fields),
    ExportKind.MEASUREMENTS: (MEASUREMENT_HEADER, _measurement_fields),
}


def to_delimited_text(
    kind: Union[str, ExportKind],
    rows: Iterable[Union[Float, Measurement]],
) -> str:
    """
    Render *rows* as delimited text using the column layout for *kind*.

    Raises ``ValueError`` for an unknown *kind*.
    """
    header, fields_of = _LAYOUTS[ExportKind(kind)]
    lines = [DELIMITER.join(header)]
    lines.extend(
        DELIMITER.join(_field(value) for value in fields_of(row))
        for row in rows
    )
    return "\n".join(lines)


def export_filename(kind: Union[str, ExportKind], float_id: Optional[str] = None) -> str:
    """Suggested download filename for an export."""
    if ExportKind(kind) is ExportKind.FLOATS:
        return "argo_floats.csv"
    if float_id:
        return f"{float_id}_measurements.csv"
    return "all_measurements.csv"
