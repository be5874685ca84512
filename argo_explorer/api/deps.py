"""
FastAPI dependencies that hand the per-application store objects to routes.

The store, history log and executor are built once in ``create_app`` and kept
on ``app.state``; tests get isolated instances by building their own app.
"""

from fastapi import Request

from argo_explorer.query.executor import QueryExecutor
from argo_explorer.store.entity_store import EntityStore
from argo_explorer.store.history import HistoryLog


def get_store(request: Request) -> EntityStore:
    return request.app.state.store


def get_history(request: Request) -> HistoryLog:
    return request.app.state.history


def get_executor(request: Request) -> QueryExecutor:
    return request.app.state.executor
