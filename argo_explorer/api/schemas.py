"""
Shared response schemas for the HTTP layer.

JSON payloads use camelCase field names (``floatId``, ``deploymentDate``);
Python attributes stay snake_case.  Conversion from store records happens in
the ``from_record`` classmethods so routers never build dicts by hand.
"""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from argo_explorer.store.models import ChatQuery, Float, Measurement


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class FloatResponse(CamelModel):
    id: str
    float_id: str
    latitude: float
    longitude: float
    status: str
    region: Optional[str] = None
    deployment_date: datetime
    last_update: datetime

    @classmethod
    def from_record(cls, row: Float) -> "FloatResponse":
        return cls(
            id=row.id,
            float_id=row.float_id,
            latitude=row.latitude,
            longitude=row.longitude,
            status=row.status.value,
            region=row.region,
            deployment_date=row.deployment_date,
            last_update=row.last_update,
        )


class MeasurementResponse(CamelModel):
    id: str
    float_id: str
    depth: float
    temperature: float
    salinity: float
    pressure: Optional[float] = None
    cycle_number: Optional[int] = None
    recorded_at: datetime

    @classmethod
    def from_record(cls, row: Measurement) -> "MeasurementResponse":
        return cls(
            id=row.id,
            float_id=row.float_id,
            depth=row.depth,
            temperature=row.temperature,
            salinity=row.salinity,
            pressure=row.pressure,
            cycle_number=row.cycle_number,
            recorded_at=row.recorded_at,
        )


class ChatQueryResponse(CamelModel):
    id: str
    user_query: str
    query_type: str
    response: str
    result_data: Optional[dict[str, Any]] = None
    created_at: datetime

    @classmethod
    def from_record(cls, row: ChatQuery) -> "ChatQueryResponse":
        return cls(
            id=row.id,
            user_query=row.user_query,
            query_type=row.query_type.value,
            response=row.response,
            result_data=row.result_data,
            created_at=row.created_at,
        )
