"""
Argo Explorer Chat History Log

Append-only record of answered chat queries.  Entries are never mutated or
deleted; ``list`` returns deep copies of the stored payloads.

Ordering is by ``(created_at, sequence)`` descending, where ``sequence`` is a
per-log insertion counter.  Two entries stamped in the same clock tick still
come back newest-inserted first.
"""

import copy
import itertools
import threading
import uuid
from dataclasses import replace
from datetime import datetime
from typing import Any, Callable, Optional

import structlog

from argo_explorer.store.errors import ValidationError
from argo_explorer.store.models import ChatQuery, Intent, utcnow

log = structlog.get_logger(__name__)

DEFAULT_HISTORY_LIMIT = 50


class HistoryLog:
    """In-memory, append-only log of ``ChatQuery`` records."""

    def __init__(self, clock: Optional[Callable[[], datetime]] = None):
        self._clock = clock or utcnow
        self._lock = threading.Lock()
        self._sequence = itertools.count()
        self._entries: list[tuple[datetime, int, ChatQuery]] = []

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def append(
        self,
        user_query: str,
        query_type: Intent,
        response: str,
        result_data: Optional[dict[str, Any]] = None,
    ) -> ChatQuery:
        """
        Store one answered query, assigning an id and the current timestamp.

        Parameters
        ----------
        user_query : str
            The raw text the user submitted.
        query_type : Intent
            Intent assigned by the classifier.
        response : str
            The natural-language answer returned to the user.
        result_data : dict, optional
            Structured payload behind the answer.

        Returns
        -------
        ChatQuery
        """
        with self._lock:
            entry = ChatQuery(
                id=str(uuid.uuid4()),
                user_query=user_query,
                query_type=Intent(query_type),
                response=response,
                result_data=copy.deepcopy(result_data),
                created_at=self._clock(),
            )
            self._entries.append((entry.created_at, next(self._sequence), entry))

        log.info("chat_query_logged", query_type=entry.query_type.value, query_id=entry.id)
        return _snapshot(entry)

    def list(self, limit: int = DEFAULT_HISTORY_LIMIT) -> list[ChatQuery]:
        """Return up to *limit* entries, newest first."""
        if limit < 0:
            raise ValidationError(f"limit must be >= 0, got {limit}")

        with self._lock:
            ordered = sorted(self._entries, key=lambda e: (e[0], e[1]), reverse=True)
        return [_snapshot(entry) for _, _, entry in ordered[:limit]]


def _snapshot(entry: ChatQuery) -> ChatQuery:
    if entry.result_data is None:
        return entry
    return replace(entry, result_data=copy.deepcopy(entry.result_data))
