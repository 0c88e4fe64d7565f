"""Integration tests for FastAPI endpoints."""

import logging
from unittest.mock import MagicMock, patch

import pytest
from fastapi.testclient import TestClient

from sales_coach.adapters.outbound.json_document_store import JSONDocumentStore
from sales_coach.core.domain import CoachMode, CoachResponse, RelevantDocument, TokenUsage
from sales_coach.core.domain.exceptions import EmptyQueryError, LLMRateLimitError
from sales_coach.core.services import DocumentSelector, TrainingLibraryService
from sales_coach.core.services.coach_service import ContentAnalysis


@pytest.fixture
def mock_coach():
    """Mock the CoachService for testing."""
    mock = MagicMock()
    mock.respond.return_value = CoachResponse(
        text="Acknowledge the concern, then restate the value.",
        mode=CoachMode.CHAT,
        token_usage=TokenUsage(prompt_tokens=120, completion_tokens=12),
        documents=[
            RelevantDocument(
                id="handling_price_objections",
                title="Handling Price Objections",
                category="objection",
                content="When a prospect raises a price objection...",
                relevance_score=20,
            )
        ],
    )
    mock.analyze.return_value = (ContentAnalysis.fallback(), TokenUsage(40, 30))
    return mock


@pytest.fixture
def client(mock_coach, memory_store):
    """Create test client with mocked coach and an in-memory corpus."""
    source = MagicMock()
    source.extract_documents.return_value = []
    library = TrainingLibraryService(memory_store, source)

    with (
        patch("sales_coach.adapters.inbound.api.routers.chat.get_coach") as mock_get_coach,
        patch("sales_coach.adapters.inbound.api.routers.training.get_selector") as mock_selector,
        patch("sales_coach.adapters.inbound.api.routers.training.get_library") as mock_library,
        patch("sales_coach.adapters.inbound.api.routers.health.get_document_store") as mock_store,
    ):
        mock_get_coach.return_value = mock_coach
        mock_selector.return_value = DocumentSelector(memory_store)
        mock_library.return_value = library
        mock_store.return_value = memory_store

        from sales_coach.adapters.inbound.api.main import app

        yield TestClient(app)


class TestHealthEndpoints:
    """Tests for health check endpoints."""

    @pytest.mark.integration
    def test_health_check(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert "version" in data

    @pytest.mark.integration
    def test_readiness_reports_corpus_size(self, client):
        response = client.get("/ready")

        assert response.status_code == 200
        assert response.json()["training_documents"] == "loaded (4 docs)"


class TestChatEndpoints:
    """Tests for chat and analyze endpoints."""

    @pytest.mark.integration
    def test_chat_success(self, client, mock_coach):
        response = client.post(
            "/api/v1/chat",
            json={
                "prompt": "How do I handle price objections?",
                "history": [{"role": "user", "content": "Hi"}],
            },
        )

        assert response.status_code == 200
        data = response.json()
        assert data["response"].startswith("Acknowledge")
        assert data["tokenUsage"] == {"promptTokens": 120, "completionTokens": 12, "totalTokens": 132}
        assert data["documents"][0]["relevanceScore"] == 20

        args, kwargs = mock_coach.respond.call_args
        assert args == ("How do I handle price objections?",)
        assert kwargs["mode"] is CoachMode.CHAT
        assert kwargs["history"][0].content == "Hi"

    @pytest.mark.integration
    def test_practice_mode(self, client, mock_coach):
        client.post("/api/v1/chat", json={"prompt": "Be a tough prospect", "type": "practice"})

        assert mock_coach.respond.call_args.kwargs["mode"] is CoachMode.PRACTICE

    @pytest.mark.integration
    def test_empty_prompt_rejected(self, client):
        response = client.post("/api/v1/chat", json={"prompt": ""})

        assert response.status_code == 422

    @pytest.mark.integration
    def test_blank_prompt_returns_structured_error(self, client, mock_coach):
        mock_coach.respond.side_effect = EmptyQueryError("Prompt cannot be empty")

        response = client.post("/api/v1/chat", json={"prompt": "   "})

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "SC_VAL_002"

    @pytest.mark.integration
    def test_rate_limit_maps_to_429(self, client, mock_coach):
        mock_coach.respond.side_effect = LLMRateLimitError("Rate limit reached")

        response = client.post("/api/v1/chat", json={"prompt": "closing tips"})

        assert response.status_code == 429

    @pytest.mark.integration
    def test_unexpected_error_is_logged(self, client, mock_coach, caplog):
        mock_coach.respond.side_effect = RuntimeError("model exploded")

        with caplog.at_level(logging.ERROR, logger="sales_coach"):
            response = client.post("/api/v1/chat", json={"prompt": "closing tips"})

        assert response.status_code == 500
        [record] = [r for r in caplog.records if r.msg == "Error generating coach response: %s"]
        assert record.getMessage() == "Error generating coach response: model exploded"

    @pytest.mark.integration
    def test_analyze(self, client, mock_coach):
        response = client.post(
            "/api/v1/analyze",
            json={"contentType": "pitch", "content": "Our tool saves time."},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["analysis"]["overallScore"] == 75
        assert data["tokenUsage"]["totalTokens"] == 70
        mock_coach.analyze.assert_called_once_with(
            "pitch", "Our tool saves time.", additional_context=None
        )


class TestTrainingEndpoints:
    """Tests for the training library endpoints."""

    @pytest.mark.integration
    def test_select_ranks_documents(self, client):
        response = client.post(
            "/api/v1/training/select",
            json={"query": "how to handle price objections", "maxDocuments": 2},
        )

        assert response.status_code == 200
        data = response.json()
        assert len(data["documents"]) == 2
        assert data["documents"][0]["id"] == "handling_price_objections"
        assert data["categories"][0] == "objection"

    @pytest.mark.integration
    def test_list_documents_by_category(self, client):
        response = client.get("/api/v1/training/documents", params={"category": "scripts"})

        assert response.status_code == 200
        data = response.json()
        assert data["count"] == 1
        assert data["documents"][0]["id"] == "cold_call_script"
        assert "contentPreview" in data["documents"][0]

    @pytest.mark.integration
    def test_get_document(self, client):
        response = client.get("/api/v1/training/documents/closing_techniques")

        assert response.status_code == 200
        assert response.json()["document"]["title"] == "Closing Techniques"

    @pytest.mark.integration
    def test_missing_document_returns_404(self, client):
        response = client.get("/api/v1/training/documents/does_not_exist")

        assert response.status_code == 404
        data = response.json()
        assert data["error"]["code"] == "SC_TRN_002"
        assert data["context"]["document_id"] == "does_not_exist"

    @pytest.mark.integration
    def test_refresh(self, client, memory_store):
        response = client.post("/api/v1/training/refresh")

        assert response.status_code == 200
        assert response.json()["count"] == 0
        assert memory_store.documents == []

    @pytest.mark.integration
    def test_malformed_corpus_returns_503(self, client, tmp_path):
        path = tmp_path / "training-documents.json"
        path.write_text('["oops"]', encoding="utf-8")

        with patch(
            "sales_coach.adapters.inbound.api.routers.training.get_library",
            return_value=TrainingLibraryService(JSONDocumentStore(path)),
        ):
            response = client.get("/api/v1/training/documents")

        assert response.status_code == 503
        assert response.json()["error"]["code"] == "SC_DAT_002"
