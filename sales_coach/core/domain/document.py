"""Training document and relevance models."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any


@dataclass
class TrainingDocument:
    """A piece of sales training material.

    Attributes:
        id: Unique identifier (derived from the source filename).
        title: Short human-readable name.
        content: Full document body text.
        category: Classification label ("closing", "objection", "scripts", ...).
        source: Where the document came from (file name, "mock", ...).
        created_at: When the document was processed.
    """

    id: str
    title: str
    content: str
    category: str
    source: str = ""
    created_at: datetime | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "TrainingDocument":
        """Build a document from its stored JSON form.

        Accepts both ``createdAt`` and ``created_at`` keys.

        Raises:
            KeyError: If a required field is missing.
            ValueError: If the timestamp is not ISO formatted.
        """
        created = data.get("createdAt", data.get("created_at"))
        return cls(
            id=str(data["id"]),
            title=str(data["title"]),
            content=str(data["content"]),
            category=str(data.get("category") or "general"),
            source=str(data.get("source") or ""),
            created_at=datetime.fromisoformat(created) if created else None,
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the stored JSON form."""
        return {
            "id": self.id,
            "title": self.title,
            "content": self.content,
            "source": self.source,
            "category": self.category,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
        }


@dataclass
class DocumentRelevance:
    """Score of one document against one query.

    Only meaningful within a single scoring pass.

    Attributes:
        document: The scored document.
        score: Non-negative, unbounded relevance score.
        matched_terms: Distinct terms that contributed, in discovery order.
    """

    document: TrainingDocument
    score: int = 0
    matched_terms: list[str] = field(default_factory=list)

    def add_match(self, term: str) -> None:
        """Record a contributing term once."""
        if term not in self.matched_terms:
            self.matched_terms.append(term)


@dataclass
class RelevantDocument:
    """A selected document as returned to prompt builders."""

    id: str
    title: str
    category: str
    content: str
    relevance_score: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "category": self.category,
            "content": self.content,
            "relevanceScore": self.relevance_score,
        }


@dataclass
class SelectionResult:
    """Top documents for a query and their distinct categories.

    An empty result means no reference material is available; it is
    never an error.
    """

    documents: list[RelevantDocument] = field(default_factory=list)
    categories: list[str] = field(default_factory=list)

    @classmethod
    def empty(cls) -> "SelectionResult":
        return cls(documents=[], categories=[])

    def to_dict(self) -> dict[str, Any]:
        return {
            "documents": [doc.to_dict() for doc in self.documents],
            "categories": list(self.categories),
        }
