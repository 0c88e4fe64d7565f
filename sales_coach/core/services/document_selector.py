"""Selection of the training documents most relevant to a query."""

import logging

from ..domain import RelevantDocument, SelectionResult
from ..ports.document_store_port import TrainingDocumentStorePort
from .document_scorer import score_documents
from .key_terms import extract_key_terms

logger = logging.getLogger(__name__)

DEFAULT_MAX_DOCUMENTS = 3


class DocumentSelector:
    """Picks reference material to inject into the coach's prompt.

    The corpus is loaded from the store on every call, so edits to the
    training library are visible immediately and nothing is shared
    between calls.
    """

    def __init__(self, store: TrainingDocumentStorePort) -> None:
        """Initialize the selector.

        Args:
            store: Where the training corpus is loaded from.
        """
        self.store = store

    def select_relevant_documents(
        self,
        query: str,
        max_documents: int = DEFAULT_MAX_DOCUMENTS,
    ) -> SelectionResult:
        """Select the most relevant documents for a user query.

        Documents with equal scores keep their corpus order.

        Args:
            query: The user's question.
            max_documents: Maximum number of documents to return.

        Returns:
            SelectionResult with the top documents and their distinct
            categories. Any failure, including an unreadable corpus,
            yields an empty result instead of an exception.
        """
        try:
            all_documents = self.store.load_documents()

            if not all_documents:
                logger.info("No training documents available")
                return SelectionResult.empty()

            key_terms = extract_key_terms(query)
            logger.debug("Extracted key terms: %s", key_terms)

            scored = score_documents(all_documents, query, key_terms)

            # list.sort is stable, reverse=True keeps ties in corpus order
            scored.sort(key=lambda item: item.score, reverse=True)
            top = scored[: max(max_documents, 0)]

            for item in top:
                logger.debug(
                    "Selected %s (score=%d, matched=%s)",
                    item.document.id,
                    item.score,
                    item.matched_terms,
                )
            logger.info("Selected %d most relevant documents", len(top))

            documents = [
                RelevantDocument(
                    id=item.document.id,
                    title=item.document.title,
                    category=item.document.category,
                    content=item.document.content,
                    relevance_score=item.score,
                )
                for item in top
            ]
            categories = list(dict.fromkeys(doc.category for doc in documents))

            return SelectionResult(documents=documents, categories=categories)

        except Exception as e:
            logger.error("Error selecting relevant documents: %s", e, exc_info=True)
            return SelectionResult.empty()
