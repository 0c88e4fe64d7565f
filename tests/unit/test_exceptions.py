"""Unit tests for the exception hierarchy and exception handler utilities."""

import json

import pytest

from sales_coach.adapters.common.exception_handler import (
    format_exception_json,
    get_error_code,
    get_http_status_code,
)
from sales_coach.core.domain.exceptions import (
    AnalysisParseError,
    ConfigurationError,
    DataIngestionError,
    DocumentNotFoundError,
    DocumentStoreError,
    EmptyQueryError,
    LLMError,
    LLMRateLimitError,
    MissingAPIKeyError,
    SalesCoachError,
    TrainingError,
    ValidationError,
)

pytestmark = pytest.mark.unit


class TestExceptionHierarchy:
    def test_sales_coach_error_is_base(self):
        for exc_type in (ConfigurationError, DataIngestionError, LLMError, ValidationError, TrainingError):
            assert issubclass(exc_type, SalesCoachError)

    def test_store_error_is_ingestion_error(self):
        assert issubclass(DocumentStoreError, DataIngestionError)

    def test_not_found_is_training_error(self):
        assert issubclass(DocumentNotFoundError, TrainingError)


class TestExceptionCreation:
    def test_basic_exception(self):
        exc = SalesCoachError("Test error message")

        assert str(exc) == "Test error message"
        assert exc.error_code == "SC_ERR_001"

    def test_context_and_cause(self):
        cause = ValueError("bad timestamp")
        exc = DocumentStoreError("Malformed entry", cause=cause, context={"path": "docs.json"})

        data = exc.to_dict()
        assert data["error"]["code"] == "SC_DAT_002"
        assert data["context"] == {"path": "docs.json"}
        assert data["cause"] == {"type": "ValueError", "message": "bad timestamp"}

    def test_location_is_captured(self):
        def raise_it():
            raise MissingAPIKeyError("no key")

        with pytest.raises(MissingAPIKeyError) as exc_info:
            raise_it()

        location = exc_info.value.location.to_dict()
        assert location["method"] == "raise_it"
        assert location["file"] == "test_exceptions.py"

    def test_location_inside_method_names_class(self):
        class Loader:
            def load(self):
                raise DocumentStoreError("unreadable")

        with pytest.raises(DocumentStoreError) as exc_info:
            Loader().load()

        assert exc_info.value.location.class_name == "Loader"
        assert exc_info.value.location.method_name == "load"

    def test_trace_comes_from_cause(self):
        try:
            int("not a number")
        except ValueError as e:
            cause = e

        exc = DocumentStoreError("Malformed entry", cause=cause)

        trace = exc.to_dict(include_trace=True)["stack_trace"]
        assert trace[-1].startswith("ValueError")
        assert "stack_trace" not in exc.to_dict()
        assert "stack_trace" not in SalesCoachError("no cause").to_dict(include_trace=True)

    def test_to_dict_is_json_serializable(self):
        exc = AnalysisParseError("not json", context={"raw": "oops"})

        json.dumps(exc.to_dict(include_trace=True))


class TestExceptionHandler:
    def test_format_standard_exception(self):
        try:
            raise KeyError("id")
        except KeyError as e:
            data = format_exception_json(e, extra_context={"op": "load"})

        assert data["error"]["type"] == "KeyError"
        assert data["error"]["code"] == "PYTHON_ERR"
        assert data["context"] == {"op": "load"}

    def test_format_custom_exception_merges_context(self):
        exc = DocumentNotFoundError("missing", context={"document_id": "x"})

        data = format_exception_json(exc, extra_context={"path": "/api"})

        assert data["context"] == {"document_id": "x", "path": "/api"}

    def test_error_codes(self):
        assert get_error_code(EmptyQueryError("empty")) == "SC_VAL_002"
        assert get_error_code(RuntimeError("boom")) == "PYTHON_ERR"

    @pytest.mark.parametrize(
        ("exc", "status"),
        [
            (EmptyQueryError("empty"), 400),
            (DocumentNotFoundError("missing"), 404),
            (LLMRateLimitError("quota"), 429),
            (DocumentStoreError("unreadable"), 503),
            (MissingAPIKeyError("no key"), 500),
            (LLMError("failed"), 500),
            (ValueError("bad"), 400),
            (ConnectionError("down"), 503),
            (RuntimeError("boom"), 500),
        ],
    )
    def test_http_status_codes(self, exc, status):
        assert get_http_status_code(exc) == status
