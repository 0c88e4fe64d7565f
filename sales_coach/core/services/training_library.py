"""Training library: browsing, refreshing and topic extraction."""

import logging
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any

from ..domain import TrainingData, TrainingDocument, TrainingExcerpt
from ..domain.exceptions import DocumentNotFoundError, TrainingError
from ..domain.utils import content_preview, summarize_document
from ..ports.document_store_port import TrainingDocumentStorePort, TrainingSourcePort

logger = logging.getLogger(__name__)

PREVIEW_CHARS = 200
SCRIPT_SUMMARY_CHARS = 500

OBJECTION_PATTERNS = [
    "objection",
    "concern",
    "hesitation",
    "pushback",
    "not interested",
    "too expensive",
    "need to think",
    "talk to",
    "competitor",
]

CLOSING_PATTERNS = [
    "closing",
    "close the sale",
    "ask for the business",
    "commitment",
    "next steps",
    "sign up",
    "move forward",
    "decision",
]

DISCOVERY_PATTERNS = [
    "discovery",
    "question",
    "tell me about",
    "how do you",
    "what is your",
    "challenge",
    "pain point",
    "goal",
    "objective",
]

VALUE_PATTERNS = [
    "value",
    "benefit",
    "solution",
    "result",
    "outcome",
    "roi",
    "return on investment",
    "save",
    "improve",
    "increase",
]

MOCK_DOCUMENTS = [
    ("Objection Handling Guide", "objection-handling"),
    ("Closing Techniques", "closing"),
    ("Discovery Questions", "discovery"),
    ("Value Proposition Guide", "value-proposition"),
    ("Sales Script Template", "scripts"),
]


@dataclass
class DocumentSummary:
    """Document metadata with a short content preview."""

    id: str
    title: str
    category: str
    source: str
    created_at: datetime | None
    content_preview: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "category": self.category,
            "source": self.source,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
            "contentPreview": self.content_preview,
        }


def extract_relevant_content(
    documents: list[TrainingDocument],
    patterns: list[str],
    excerpt_type: str,
) -> list[TrainingExcerpt]:
    """Collect every paragraph that mentions one of ``patterns``.

    Paragraphs are separated by blank lines; matching is a
    case-insensitive substring test.
    """
    excerpts: list[TrainingExcerpt] = []

    for doc in documents:
        for paragraph in doc.content.split("\n\n"):
            lower = paragraph.lower()
            if any(pattern in lower for pattern in patterns):
                excerpts.append(
                    TrainingExcerpt(
                        id=f"{doc.id}_{len(excerpts)}",
                        content=paragraph,
                        source=doc.title,
                        type=excerpt_type,
                    )
                )

    return excerpts


def mock_document(title: str, category: str) -> TrainingDocument:
    """Create a placeholder training document."""
    return TrainingDocument(
        id="".join(ch if ch.isascii() and ch.isalnum() else "_" for ch in title).lower(),
        title=title,
        content=f"This is a mock training document for {title} in the {category} category.",
        source="mock",
        category=category,
        created_at=datetime.now(UTC),
    )


class TrainingLibraryService:
    """Read and maintain the training corpus."""

    def __init__(
        self,
        store: TrainingDocumentStorePort,
        source: TrainingSourcePort | None = None,
    ) -> None:
        """Initialize the library.

        Args:
            store: Persistent store for processed documents.
            source: Raw material to re-ingest from on refresh.
        """
        self.store = store
        self.source = source

    def refresh(self) -> int:
        """Reprocess the raw training material and replace the stored corpus.

        Returns:
            Number of documents now stored.

        Raises:
            TrainingError: If no training source is configured.
            DataIngestionError: If the store cannot be written.
        """
        if self.source is None:
            raise TrainingError("No training source configured for refresh")

        logger.info("Refreshing training documents...")
        documents = self.source.extract_documents()
        self.store.save_documents(documents)
        logger.info("Processed %d training documents", len(documents))
        return len(documents)

    def list_documents(
        self,
        category: str | None = None,
        query: str | None = None,
    ) -> list[DocumentSummary]:
        """List document metadata, optionally filtered.

        Args:
            category: Keep only documents with exactly this category.
            query: Keep only documents whose title or content contains it
                (case-insensitive).
        """
        documents = self.store.load_documents()

        if category:
            documents = [doc for doc in documents if doc.category == category]

        if query:
            documents = self._filter_by_query(documents, query)

        return [
            DocumentSummary(
                id=doc.id,
                title=doc.title,
                category=doc.category,
                source=doc.source,
                created_at=doc.created_at,
                content_preview=content_preview(doc.content, PREVIEW_CHARS),
            )
            for doc in documents
        ]

    def get_document(self, document_id: str) -> TrainingDocument:
        """Get a document by id.

        Raises:
            DocumentNotFoundError: If no document has this id.
        """
        for doc in self.store.load_documents():
            if doc.id == document_id:
                return doc
        raise DocumentNotFoundError(
            f"Training document not found: {document_id}",
            context={"document_id": document_id},
        )

    def documents_by_category(self, category: str) -> list[TrainingDocument]:
        return [doc for doc in self.store.load_documents() if doc.category == category]

    def search(self, query: str) -> list[TrainingDocument]:
        return self._filter_by_query(self.store.load_documents(), query)

    @staticmethod
    def _filter_by_query(documents: list[TrainingDocument], query: str) -> list[TrainingDocument]:
        lower_query = query.lower()
        return [
            doc
            for doc in documents
            if lower_query in doc.title.lower() or lower_query in doc.content.lower()
        ]

    def load_training_data(self) -> TrainingData:
        """Group the corpus into coaching topics.

        Returns:
            TrainingData with excerpts per topic. Empty if the corpus
            cannot be loaded.
        """
        try:
            documents = self.store.load_documents()
        except Exception as e:
            logger.error("Error loading training data: %s", e, exc_info=True)
            return TrainingData()

        scripts = [
            doc for doc in documents if doc.category == "scripts" or "script" in doc.title.lower()
        ]

        return TrainingData(
            objection_handling=extract_relevant_content(
                documents, OBJECTION_PATTERNS, "objection handling"
            ),
            closing_techniques=extract_relevant_content(
                documents, CLOSING_PATTERNS, "closing techniques"
            ),
            discovery_questions=extract_relevant_content(
                documents, DISCOVERY_PATTERNS, "discovery questions"
            ),
            value_propositions=extract_relevant_content(
                documents, VALUE_PATTERNS, "value propositions"
            ),
            sales_scripts=[
                TrainingExcerpt(
                    id=doc.id,
                    content=summarize_document(doc.content, SCRIPT_SUMMARY_CHARS),
                    source=doc.source,
                    type="sales script",
                    title=doc.title,
                )
                for doc in scripts
            ],
            documents=[
                {
                    "id": doc.id,
                    "title": doc.title,
                    "category": doc.category,
                    "summary": summarize_document(doc.content),
                }
                for doc in documents
            ],
        )

    def create_mock_documents(self) -> list[TrainingDocument]:
        """Store a small placeholder corpus for local development."""
        documents = [mock_document(title, category) for title, category in MOCK_DOCUMENTS]
        self.store.save_documents(documents)
        logger.info("Saved %d mock training documents", len(documents))
        return documents
