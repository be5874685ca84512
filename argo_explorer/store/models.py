"""
Argo Explorer Record Types

Plain frozen dataclasses for the three collections held by the store:

    Float        - one record per Argo float (external code ``float_id``)
    Measurement  - one depth-tagged reading belonging to a float
    ChatQuery    - one answered chat query in the history log

Records are immutable.  Mutations (status updates) swap in a new instance
via ``dataclasses.replace`` so callers only ever hold snapshots.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional


class FloatStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"


class Intent(str, Enum):
    """Category of a chat query, as assigned by the classifier."""
    TEMPERATURE = "temperature"
    SALINITY = "salinity"
    LOCATION = "location"
    GENERAL = "general"


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class Float:
    id: str
    float_id: str
    latitude: float
    longitude: float
    status: FloatStatus
    deployment_date: datetime
    last_update: datetime
    region: Optional[str] = None


@dataclass(frozen=True)
class Measurement:
    id: str
    float_id: str
    depth: float
    temperature: float
    salinity: float
    recorded_at: datetime
    pressure: Optional[float] = None
    cycle_number: Optional[int] = None


@dataclass(frozen=True)
class ChatQuery:
    id: str
    user_query: str
    query_type: Intent
    response: str
    created_at: datetime
    result_data: Optional[dict[str, Any]] = field(default=None, compare=False)
