"""
Argo Explorer Entity Store

The single place where Float and Measurement records live.  No other part of
the application touches the underlying dicts - everything goes through here.

Every public method:
    - Holds the instance lock for its whole duration (one writer at a time).
    - List, lookup and write methods log their name and elapsed time (ms) via structlog.
    - Returns frozen dataclass records, never references to internal state.
    - Raises ``ValidationError`` for invalid input or duplicate float codes.
    - Raises ``DanglingReferenceError`` when a measurement names an unknown float.

Floats are keyed by their generated ``id``; a secondary index maps the
external ``float_id`` code to that ``id`` and is updated on every insert.
"""

from __future__ import annotations

import math
import threading
import time
import uuid
from dataclasses import replace
from datetime import datetime
from typing import Callable, Optional, Union

import structlog

from argo_explorer.store.errors import (
    DanglingReferenceError,
    DuplicateFloatError,
    NotFoundError,
    ValidationError,
)
from argo_explorer.store.models import Float, FloatStatus, Measurement, utcnow

logger = structlog.get_logger(__name__)

Clock = Callable[[], datetime]


# ── Helpers ────────────────────────────────────────────────────────────────

def _timed(fn_name: str, start: float) -> None:
    """Log elapsed time in milliseconds."""
    elapsed_ms = round((time.perf_counter() - start) * 1000, 3)
    logger.debug("store_op", function=fn_name, elapsed_ms=elapsed_ms)


def _parse_status(status: Union[str, FloatStatus]) -> FloatStatus:
    try:
        return FloatStatus(status)
    except ValueError:
        allowed = ", ".join(s.value for s in FloatStatus)
        raise ValidationError(
            f"Unsupported float status: '{status}'. Must be one of: {allowed}"
        ) from None


def _check_position(latitude: float, longitude: float) -> None:
    if not -90.0 <= latitude <= 90.0:
        raise ValidationError(f"Latitude out of range [-90, 90]: {latitude}")
    if not -180.0 <= longitude <= 180.0:
        raise ValidationError(f"Longitude out of range [-180, 180]: {longitude}")


def _check_finite(**values: Optional[float]) -> None:
    for name, value in values.items():
        if value is not None and not math.isfinite(value):
            raise ValidationError(f"{name.capitalize()} must be a finite number, got {value}")


class EntityStore:
    """In-memory store of Argo floats and their measurements."""

    def __init__(self, clock: Optional[Clock] = None):
        self._clock: Clock = clock or utcnow
        self._lock = threading.RLock()
        self._floats: dict[str, Float] = {}
        self._float_index: dict[str, str] = {}  # float_id code -> id
        self._measurements: dict[str, Measurement] = {}

    # ── Floats ─────────────────────────────────────────────────────────────

    def list_floats(self) -> list[Float]:
        """Return every float in insertion order."""
        start = time.perf_counter()
        try:
            with self._lock:
                return list(self._floats.values())
        finally:
            _timed("list_floats", start)

    def get_float_by_id(self, record_id: str) -> Optional[Float]:
        """Look up a float by its generated identifier."""
        with self._lock:
            return self._floats.get(record_id)

    def get_float_by_float_id(self, float_id: str) -> Optional[Float]:
        """Look up a float by its external code (e.g. ``ARGO001``)."""
        start = time.perf_counter()
        try:
            with self._lock:
                record_id = self._float_index.get(float_id)
                return self._floats.get(record_id) if record_id is not None else None
        finally:
            _timed("get_float_by_float_id", start)

    def require_float(self, float_id: str) -> Float:
        """
        Same as ``get_float_by_float_id`` but raises ``NotFoundError`` on a miss.
        """
        found = self.get_float_by_float_id(float_id)
        if found is None:
            raise NotFoundError(f"Float not found: '{float_id}'")
        return found

    def create_float(
        self,
        float_id: str,
        latitude: float,
        longitude: float,
        status: Union[str, FloatStatus] = FloatStatus.ACTIVE,
        region: Optional[str] = None,
    ) -> Float:
        """
        Register a new float.

        Raises ``DuplicateFloatError`` if *float_id* is already registered;
        the store is left untouched in that case.  Deployment and last-update
        timestamps are both stamped with the current time.
        """
        start = time.perf_counter()
        try:
            if not float_id or not float_id.strip():
                raise ValidationError("float_id must be a non-empty string")
            _check_position(latitude, longitude)
            parsed_status = _parse_status(status)

            with self._lock:
                if float_id in self._float_index:
                    raise DuplicateFloatError(float_id)

                now = self._clock()
                record = Float(
                    id=str(uuid.uuid4()),
                    float_id=float_id,
                    latitude=latitude,
                    longitude=longitude,
                    status=parsed_status,
                    region=region or None,
                    deployment_date=now,
                    last_update=now,
                )
                self._floats[record.id] = record
                self._float_index[float_id] = record.id

            logger.info("float_created", float_id=float_id, status=parsed_status.value)
            return record
        finally:
            _timed("create_float", start)

    def update_float_status(
        self,
        float_id: str,
        status: Union[str, FloatStatus],
    ) -> Optional[Float]:
        """
        Set the status of a float and refresh its ``last_update`` timestamp.

        Returns ``None`` if no float with *float_id* exists.
        """
        start = time.perf_counter()
        try:
            parsed_status = _parse_status(status)
            with self._lock:
                record_id = self._float_index.get(float_id)
                if record_id is None:
                    return None
                updated = replace(
                    self._floats[record_id],
                    status=parsed_status,
                    last_update=self._clock(),
                )
                self._floats[record_id] = updated

            logger.info("float_status_updated", float_id=float_id, status=parsed_status.value)
            return updated
        finally:
            _timed("update_float_status", start)

    def count_floats(self, status: Optional[Union[str, FloatStatus]] = None) -> int:
        """Count floats, optionally only those with the given *status*."""
        with self._lock:
            if status is None:
                return len(self._floats)
            wanted = _parse_status(status)
            return sum(1 for f in self._floats.values() if f.status is wanted)

    # ── Measurements ───────────────────────────────────────────────────────

    def list_measurements(self, float_id: Optional[str] = None) -> list[Measurement]:
        """Return all measurements, optionally only those of one float."""
        start = time.perf_counter()
        try:
            with self._lock:
                rows = list(self._measurements.values())
            if float_id:
                rows = [m for m in rows if m.float_id == float_id]
            return rows
        finally:
            _timed("list_measurements", start)

    def list_measurements_by_float(self, float_id: str) -> list[Measurement]:
        """
        Return the measurements of one float sorted by depth, shallowest first.

        Profile charts rely on this ordering.  The sort is stable, so readings
        at the same depth keep their insertion order.
        """
        start = time.perf_counter()
        try:
            with self._lock:
                rows = [m for m in self._measurements.values() if m.float_id == float_id]
            return sorted(rows, key=lambda m: m.depth)
        finally:
            _timed("list_measurements_by_float", start)

    def list_measurements_by_depth_range(
        self,
        min_depth: float,
        max_depth: float,
    ) -> list[Measurement]:
        """Return measurements with ``min_depth <= depth <= max_depth``."""
        start = time.perf_counter()
        try:
            with self._lock:
                return [
                    m for m in self._measurements.values()
                    if min_depth <= m.depth <= max_depth
                ]
        finally:
            _timed("list_measurements_by_depth_range", start)

    def count_measurements(self) -> int:
        with self._lock:
            return len(self._measurements)

    def create_measurement(
        self,
        float_id: str,
        depth: float,
        temperature: float,
        salinity: float,
        pressure: Optional[float] = None,
        cycle_number: Optional[int] = None,
    ) -> Measurement:
        """
        Record one depth-level reading for an existing float.

        Raises ``DanglingReferenceError`` if *float_id* is not registered and
        ``ValidationError`` for a NaN or infinite reading, a negative depth or a
        non-positive cycle number.
        """
        start = time.perf_counter()
        try:
            _check_finite(
                depth=depth, temperature=temperature, salinity=salinity, pressure=pressure
            )
            if depth < 0:
                raise ValidationError(f"Depth must be >= 0, got {depth}")
            if cycle_number is not None and cycle_number < 1:
                raise ValidationError(f"Cycle number must be positive, got {cycle_number}")

            with self._lock:
                if float_id not in self._float_index:
                    raise DanglingReferenceError(float_id)

                record = Measurement(
                    id=str(uuid.uuid4()),
                    float_id=float_id,
                    depth=depth,
                    temperature=temperature,
                    salinity=salinity,
                    pressure=pressure,
                    cycle_number=cycle_number,
                    recorded_at=self._clock(),
                )
                self._measurements[record.id] = record

            logger.debug("measurement_created", float_id=float_id, depth=depth)
            return record
        finally:
            _timed("create_measurement", start)
