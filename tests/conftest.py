"""
Pytest configuration and shared fixtures.
"""

from datetime import UTC, datetime

import pytest

from sales_coach.core.domain import TrainingDocument
from sales_coach.core.ports.document_store_port import TrainingDocumentStorePort


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests (no external dependencies)")
    config.addinivalue_line("markers", "integration: Integration tests (FastAPI app, mocked services)")


class InMemoryDocumentStore(TrainingDocumentStorePort):
    """Document store backed by a list, counting loads."""

    def __init__(self, documents=None):
        self.documents = list(documents or [])
        self.load_calls = 0

    def load_documents(self):
        self.load_calls += 1
        return list(self.documents)

    def save_documents(self, documents):
        self.documents = list(documents)


def make_document(doc_id, title, content, category="general", source="test.pdf"):
    return TrainingDocument(
        id=doc_id,
        title=title,
        content=content,
        category=category,
        source=source,
        created_at=datetime(2024, 5, 1, tzinfo=UTC),
    )


@pytest.fixture
def objection_document():
    """The single-document corpus from the price objection example."""
    return make_document(
        "handling_price_objections",
        "Handling Price Objections",
        "When a prospect raises a price objection, acknowledge it first.",
        category="objection",
    )


@pytest.fixture
def sales_corpus(objection_document):
    """A small mixed-category training corpus."""
    return [
        objection_document,
        make_document(
            "closing_techniques",
            "Closing Techniques",
            "Ask for the business.\n\nAgree on next steps before the call ends.",
            category="closing",
        ),
        make_document(
            "discovery_questions",
            "Discovery Questions",
            "Tell me about your current process.\n\nWhat is your biggest challenge this quarter?",
            category="discovery",
        ),
        make_document(
            "cold_call_script",
            "Cold Call Script",
            "Hi, this is Sam. I help sales teams shorten their pipeline reviews.",
            category="scripts",
        ),
    ]


@pytest.fixture
def memory_store(sales_corpus):
    return InMemoryDocumentStore(sales_corpus)
