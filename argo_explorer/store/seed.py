"""
Seed the store with a small Indian Ocean sample data set.

Four floats (three active) and a five-level profile for ARGO001 and ARGO002.
Seeding is idempotent: floats that already exist are skipped together with
their sample measurements.
"""

from __future__ import annotations

import structlog

from argo_explorer.store.entity_store import EntityStore

logger = structlog.get_logger(__name__)

SAMPLE_FLOATS: list[dict] = [
    {"float_id": "ARGO001", "latitude": -10.5, "longitude": 75.2, "status": "active", "region": "Indian Ocean"},
    {"float_id": "ARGO002", "latitude": -8.3, "longitude": 78.1, "status": "active", "region": "Indian Ocean"},
    {"float_id": "ARGO003", "latitude": -12.1, "longitude": 72.8, "status": "inactive", "region": "Indian Ocean"},
    {"float_id": "ARGO004", "latitude": -15.7, "longitude": 80.5, "status": "active", "region": "Indian Ocean"},
]

# (float_id, depth, temperature, salinity) - pressure tracks depth, cycle 1
_SAMPLE_PROFILES: list[tuple[str, float, float, float]] = [
    ("ARGO001", 0, 28.5, 34.7),
    ("ARGO001", 50, 27.8, 34.8),
    ("ARGO001", 100, 26.2, 34.9),
    ("ARGO001", 150, 24.5, 35.0),
    ("ARGO001", 200, 22.8, 35.1),
    ("ARGO002", 0, 27.8, 34.9),
    ("ARGO002", 50, 27.1, 35.0),
    ("ARGO002", 100, 25.8, 35.1),
    ("ARGO002", 150, 24.2, 35.2),
    ("ARGO002", 200, 22.5, 35.3),
]

SAMPLE_MEASUREMENTS: list[dict] = [
    {
        "float_id": float_id,
        "depth": float(depth),
        "temperature": temperature,
        "salinity": salinity,
        "pressure": float(depth),
        "cycle_number": 1,
    }
    for float_id, depth, temperature, salinity in _SAMPLE_PROFILES
]


def seed_sample_data(store: EntityStore) -> int:
    """Load the sample floats and measurements into *store*.

    Returns the number of floats created.
    """
    created: set[str] = set()
    for data in SAMPLE_FLOATS:
        if store.get_float_by_float_id(data["float_id"]) is not None:
            continue
        store.create_float(**data)
        created.add(data["float_id"])

    measurement_count = 0
    for data in SAMPLE_MEASUREMENTS:
        if data["float_id"] in created:
            store.create_measurement(**data)
            measurement_count += 1

    logger.info("sample_data_seeded", floats=len(created), measurements=measurement_count)
    return len(created)
