"""
Argo Explorer Query Executor

Answers a chat query in four steps:

    classify → aggregate over the entity store → write history → return record

Each intent has one handler returning an ``ExecutionResult``.  Handlers never
raise for missing data: an empty measurement set yields an explicit
"no data" answer with ``None`` averages instead of a division by zero.
"""

from dataclasses import dataclass
from typing import Any, Callable, Optional

import structlog

from argo_explorer.query.classifier import Classifier, classify
from argo_explorer.store.entity_store import EntityStore
from argo_explorer.store.errors import ValidationError
from argo_explorer.store.history import HistoryLog
from argo_explorer.store.models import ChatQuery, FloatStatus, Intent

log = structlog.get_logger(__name__)

GENERAL_HELP_TEXT = (
    "I can help you explore oceanographic data! Try asking about temperature "
    "profiles, salinity measurements, float locations, or specific depth ranges."
)


@dataclass
class ExecutionResult:
    """Answer produced by an intent handler."""
    response: str
    intent: Intent
    result_data: Optional[dict[str, Any]] = None


def _mean(values: list[float]) -> Optional[float]:
    if not values:
        return None
    return sum(values) / len(values)


class QueryExecutor:
    """Runs classified chat queries against an ``EntityStore``."""

    def __init__(
        self,
        store: EntityStore,
        history: HistoryLog,
        classifier: Classifier = classify,
    ):
        self.store = store
        self.history = history
        self.classifier = classifier
        self._handlers: dict[Intent, Callable[[], ExecutionResult]] = {
            Intent.TEMPERATURE: self._average_temperature,
            Intent.SALINITY: self._average_salinity,
            Intent.LOCATION: self._float_counts,
            Intent.GENERAL: self._general_help,
        }

    def execute(self, user_query: str) -> ChatQuery:
        """
        Classify *user_query*, answer it and record the answer in the history.

        Raises ``ValidationError`` for a blank query.  Returns the stored
        ``ChatQuery`` including its creation timestamp.
        """
        if not user_query or not user_query.strip():
            raise ValidationError("User query is required")

        intent = Intent(self.classifier(user_query))
        result = self.run(intent)

        entry = self.history.append(
            user_query=user_query,
            query_type=result.intent,
            response=result.response,
            result_data=result.result_data,
        )
        log.info(
            "chat_query_answered",
            query_preview=user_query[:80],
            query_type=intent.value,
        )
        return entry

    def run(self, intent: Intent) -> ExecutionResult:
        """Run the handler for *intent* without touching the history log."""
        return self._handlers[intent]()

    # ── Handlers ───────────────────────────────────────────────────────────

    def _average_temperature(self) -> ExecutionResult:
        measurements = self.store.list_measurements()
        avg = _mean([m.temperature for m in measurements])
        if avg is None:
            return ExecutionResult(
                response="No temperature measurements are available yet.",
                intent=Intent.TEMPERATURE,
                result_data={"averageTemperature": None, "measurementCount": 0},
            )
        return ExecutionResult(
            response=(
                f"Based on current data, the average temperature across all "
                f"measurements is {avg:.1f}°C. I found {len(measurements)} "
                f"temperature readings from active floats."
            ),
            intent=Intent.TEMPERATURE,
            result_data={"averageTemperature": avg, "measurementCount": len(measurements)},
        )

    def _average_salinity(self) -> ExecutionResult:
        measurements = self.store.list_measurements()
        avg = _mean([m.salinity for m in measurements])
        if avg is None:
            return ExecutionResult(
                response="No salinity measurements are available yet.",
                intent=Intent.SALINITY,
                result_data={"averageSalinity": None, "measurementCount": 0},
            )
        return ExecutionResult(
            response=(
                f"The average salinity across all measurements is {avg:.1f} PSU. "
                f"Salinity levels appear consistent with typical Indian Ocean values."
            ),
            intent=Intent.SALINITY,
            result_data={"averageSalinity": avg, "measurementCount": len(measurements)},
        )

    def _float_counts(self) -> ExecutionResult:
        floats = self.store.list_floats()
        active = sum(1 for f in floats if f.status is FloatStatus.ACTIVE)
        return ExecutionResult(
            response=(
                f"I found {len(floats)} total floats, with {active} currently "
                f"active in the Indian Ocean region."
            ),
            intent=Intent.LOCATION,
            result_data={"totalFloats": len(floats), "activeFloats": active},
        )

    def _general_help(self) -> ExecutionResult:
        return ExecutionResult(response=GENERAL_HELP_TEXT, intent=Intent.GENERAL)
