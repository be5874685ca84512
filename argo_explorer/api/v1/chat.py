"""
Argo Explorer Chat - API Router

Endpoints:
  POST   /chat/query      - Answer a chat query and log it
  GET    /chat/history    - Most recent answered queries, newest first
"""

from datetime import datetime
from typing import Any, Optional

import structlog
from fastapi import APIRouter, Depends, HTTPException, Query, status

from argo_explorer.api.deps import get_executor, get_history
from argo_explorer.api.schemas import CamelModel, ChatQueryResponse
from argo_explorer.config import get_settings
from argo_explorer.query.executor import QueryExecutor
from argo_explorer.store.errors import ValidationError
from argo_explorer.store.history import HistoryLog

log = structlog.get_logger(__name__)

router = APIRouter(prefix="/chat", tags=["Chat"])


# ── Request / Response schemas ──────────────────────────────────────────────

class ChatQueryRequest(CamelModel):
    user_query: str = ""


class ChatAnswerResponse(CamelModel):
    response: str
    query_type: str
    result_data: Optional[dict[str, Any]] = None
    timestamp: datetime


# ── POST /chat/query ────────────────────────────────────────────────────────

@router.post("/query", response_model=ChatAnswerResponse)
def chat_query(
    request: ChatQueryRequest,
    executor: QueryExecutor = Depends(get_executor),
):
    """Classify and answer a chat query.  Missing or blank queries are rejected with 400."""
    try:
        entry = executor.execute(request.user_query)
    except ValidationError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))

    return ChatAnswerResponse(
        response=entry.response,
        query_type=entry.query_type.value,
        result_data=entry.result_data,
        timestamp=entry.created_at,
    )


# ── GET /chat/history ───────────────────────────────────────────────────────

@router.get("/history", response_model=list[ChatQueryResponse])
def chat_history(
    limit: Optional[int] = Query(None, ge=0, description="Max entries to return"),
    history: HistoryLog = Depends(get_history),
):
    """Return answered queries, newest first."""
    settings = get_settings()
    if limit is None:
        limit = settings.CHAT_HISTORY_DEFAULT_LIMIT
    limit = min(limit, settings.CHAT_HISTORY_MAX_LIMIT)
    return [ChatQueryResponse.from_record(q) for q in history.list(limit)]
