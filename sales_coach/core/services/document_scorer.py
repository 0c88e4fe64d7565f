"""Keyword relevance scoring of training documents against a query."""

from __future__ import annotations

import re

from ..domain import DocumentRelevance, TrainingDocument

EXACT_MATCH_WEIGHT = 10
TITLE_MATCH_WEIGHT = 5
CATEGORY_BOOST_WEIGHT = 3
MAX_TERM_OCCURRENCES = 5

# category -> query fragment that earns the category boost
CATEGORY_HINTS = {
    "closing": "clos",
    "objection": "object",
    "discovery": "question",
    "scripts": "script",
}


def count_word_occurrences(term: str, text: str) -> int:
    """Count whole-word, case-insensitive occurrences of ``term`` in ``text``."""
    pattern = re.compile(rf"\b{re.escape(term)}\b", re.IGNORECASE)
    return len(pattern.findall(text))


def category_boost(category: str, query_lower: str) -> int:
    hint = CATEGORY_HINTS.get(category)
    if hint and hint in query_lower:
        return CATEGORY_BOOST_WEIGHT
    return 0


def score_document(document: TrainingDocument, query: str, key_terms: list[str]) -> DocumentRelevance:
    """Score a single document.

    The rules are additive and all of them are applied:

    * the whole query appears in the content: +10
    * each key term found in the title: +5
    * each key term's whole-word count in the content, capped at 5
    * the document's category matches a hint in the query: +3

    Args:
        document: Document to score.
        query: The original user query.
        key_terms: Terms extracted from the query.

    Returns:
        DocumentRelevance holding the score and the terms that matched.
    """
    lower_content = document.content.lower()
    lower_title = document.title.lower()
    lower_query = query.lower()

    relevance = DocumentRelevance(document=document)

    if lower_query in lower_content:
        relevance.score += EXACT_MATCH_WEIGHT
        relevance.add_match(query)

    for term in key_terms:
        if term in lower_title:
            relevance.score += TITLE_MATCH_WEIGHT
            relevance.add_match(term)

    for term in key_terms:
        occurrences = count_word_occurrences(term, lower_content)
        if occurrences:
            relevance.score += min(occurrences, MAX_TERM_OCCURRENCES)
            relevance.add_match(term)

    relevance.score += category_boost(document.category, lower_query)

    return relevance


def score_documents(
    documents: list[TrainingDocument],
    query: str,
    key_terms: list[str],
) -> list[DocumentRelevance]:
    """Score every document; output order matches input order."""
    return [score_document(document, query, key_terms) for document in documents]
