"""
In-memory data store module.

Exports:
    EntityStore: Float and Measurement records with filtered retrieval
    HistoryLog: Append-only chat query history
    Float, Measurement, ChatQuery: Frozen record dataclasses
    FloatStatus, Intent: Enumerations used by the records
    StoreError and subclasses: Errors raised by the store
"""

from argo_explorer.store.entity_store import EntityStore
from argo_explorer.store.errors import (
    DanglingReferenceError,
    DuplicateFloatError,
    NotFoundError,
    StoreError,
    ValidationError,
)
from argo_explorer.store.history import HistoryLog
from argo_explorer.store.models import (
    ChatQuery,
    Float,
    FloatStatus,
    Intent,
    Measurement,
)

__all__ = [
    # Stores
    "EntityStore",
    "HistoryLog",
    # Records
    "Float",
    "Measurement",
    "ChatQuery",
    "FloatStatus",
    "Intent",
    # Errors
    "StoreError",
    "ValidationError",
    "DuplicateFloatError",
    "DanglingReferenceError",
    "NotFoundError",
]
