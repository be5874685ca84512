"""
Tests for argo_explorer.query.executor - per-intent aggregation.

Runs against a real in-memory store; the classifier is swapped out where a
test needs a specific intent regardless of wording.
"""

import math

import pytest

from argo_explorer.query.executor import GENERAL_HELP_TEXT, QueryExecutor
from argo_explorer.store.errors import ValidationError
from argo_explorer.store.models import Intent


# ═════════════════════════════════════════════════════════════════════════════
# Aggregations
# ═════════════════════════════════════════════════════════════════════════════

class TestTemperature:
    def test_mean_over_all_measurements(self, example_store, history):
        entry = QueryExecutor(example_store, history).execute("average temperature")

        assert entry.query_type is Intent.TEMPERATURE
        assert entry.result_data == {"averageTemperature": 27.25, "measurementCount": 2}
        assert "27.2°C" in entry.response or "27.3°C" in entry.response

    def test_includes_every_float(self, example_store, history):
        example_store.create_measurement("ARGO002", depth=0.0, temperature=30.0, salinity=34.0)
        entry = QueryExecutor(example_store, history).execute("temperature?")

        assert entry.result_data["measurementCount"] == 3
        assert entry.result_data["averageTemperature"] == pytest.approx((28.5 + 26.0 + 30.0) / 3)

    def test_no_measurements(self, executor):
        entry = executor.execute("average temperature")

        assert entry.query_type is Intent.TEMPERATURE
        assert entry.result_data == {"averageTemperature": None, "measurementCount": 0}
        assert "No temperature measurements" in entry.response


class TestSalinity:
    def test_mean_over_all_measurements(self, example_store, history):
        entry = QueryExecutor(example_store, history).execute("salinity please")

        assert entry.query_type is Intent.SALINITY
        assert entry.result_data["averageSalinity"] == pytest.approx(34.85)
        assert entry.result_data["measurementCount"] == 2
        assert "PSU" in entry.response

    def test_no_measurements(self, executor):
        entry = executor.execute("salinity please")

        assert entry.result_data == {"averageSalinity": None, "measurementCount": 0}
        assert "No salinity measurements" in entry.response
        assert "nan" not in entry.response.lower()


class TestLocation:
    def test_counts_total_and_active(self, example_store, history):
        entry = QueryExecutor(example_store, history).execute("where are the floats?")

        assert entry.query_type is Intent.LOCATION
        assert entry.result_data == {"totalFloats": 2, "activeFloats": 1}
        assert "2 total floats" in entry.response

    def test_empty_store(self, executor):
        entry = executor.execute("float locations")
        assert entry.result_data == {"totalFloats": 0, "activeFloats": 0}


class TestGeneral:
    def test_help_text_without_payload(self, executor):
        entry = executor.execute("hello")

        assert entry.query_type is Intent.GENERAL
        assert entry.response == GENERAL_HELP_TEXT
        assert entry.result_data is None


# ═════════════════════════════════════════════════════════════════════════════
# History and plumbing
# ═════════════════════════════════════════════════════════════════════════════

class TestExecute:
    def test_writes_history(self, example_store, history, clock):
        executor = QueryExecutor(example_store, history)
        entry = executor.execute("average temperature")

        logged = history.list(1)
        assert logged == [entry]
        assert logged[0].user_query == "average temperature"
        assert logged[0].created_at == clock.now

    def test_every_query_logged_newest_first(self, executor, clock):
        for text in ("temperature", "salinity", "floats", "hi"):
            executor.execute(text)
            clock.advance(milliseconds=1)

        kinds = [e.query_type for e in executor.history.list()]
        assert kinds == [Intent.GENERAL, Intent.LOCATION, Intent.SALINITY, Intent.TEMPERATURE]

    @pytest.mark.parametrize("text", ["", "   "])
    def test_blank_query_rejected(self, executor, text):
        with pytest.raises(ValidationError):
            executor.execute(text)
        assert len(executor.history) == 0

    def test_custom_classifier(self, example_store, history):
        executor = QueryExecutor(example_store, history, classifier=lambda text: Intent.LOCATION)
        entry = executor.execute("average temperature")

        assert entry.query_type is Intent.LOCATION
        assert entry.result_data == {"totalFloats": 2, "activeFloats": 1}

    def test_run_does_not_log(self, example_store, history):
        result = QueryExecutor(example_store, history).run(Intent.TEMPERATURE)

        assert result.result_data["averageTemperature"] == 27.25
        assert len(history) == 0

    @pytest.mark.parametrize("intent", list(Intent))
    def test_empty_store_never_produces_nan(self, executor, intent):
        result = executor.run(intent)
        for value in (result.result_data or {}).values():
            assert value is None or not math.isnan(value)
