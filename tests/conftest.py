"""
Shared pytest fixtures.

Provides:
- A controllable clock for deterministic timestamps
- Fresh EntityStore / HistoryLog / QueryExecutor per test
- A small two-float example store
- FastAPI TestClient over an isolated, unseeded application
"""

from datetime import datetime, timedelta, timezone
from typing import Generator

import pytest
from fastapi.testclient import TestClient

from argo_explorer.query.executor import QueryExecutor
from argo_explorer.store.entity_store import EntityStore
from argo_explorer.store.history import HistoryLog


class FakeClock:
    """Callable clock that only moves when told to."""

    def __init__(self, start: datetime = datetime(2024, 6, 15, 12, 0, 0, tzinfo=timezone.utc)):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now = self.now + timedelta(**kwargs)


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def store(clock) -> EntityStore:
    return EntityStore(clock=clock)


@pytest.fixture()
def history(clock) -> HistoryLog:
    return HistoryLog(clock=clock)


@pytest.fixture()
def executor(store, history) -> QueryExecutor:
    return QueryExecutor(store, history)


@pytest.fixture()
def example_store(store) -> EntityStore:
    """ARGO001 (active) with two readings, ARGO002 (inactive) with none."""
    store.create_float("ARGO001", -10.5, 75.2, status="active", region="Indian Ocean")
    store.create_float("ARGO002", -8.3, 78.1, status="inactive")
    store.create_measurement("ARGO001", depth=0.0, temperature=28.5, salinity=34.7)
    store.create_measurement("ARGO001", depth=100.0, temperature=26.0, salinity=35.0)
    return store


# =============================================================================
# FastAPI TestClient over an isolated application
# =============================================================================
@pytest.fixture()
def client(store, history) -> Generator[TestClient, None, None]:
    """TestClient bound to the per-test store and history (no sample data)."""
    from argo_explorer.main import create_app

    app = create_app(store=store, history=history, seed=False)
    with TestClient(app) as c:
        yield c


@pytest.fixture()
def seeded_client() -> Generator[TestClient, None, None]:
    """TestClient over a fresh application loaded with the sample data set."""
    from argo_explorer.main import create_app

    app = create_app(seed=True)
    with TestClient(app) as c:
        yield c
