"""Key-term extraction for training-document lookup."""

from __future__ import annotations

import re

STOP_WORDS = frozenset(
    {
        "a", "an", "the", "and", "or", "but", "is", "are", "was", "were",
        "be", "been", "being", "have", "has", "had", "do", "does", "did",
        "to", "from", "in", "out", "on", "off", "over", "under", "again",
        "further", "then", "once", "here", "there", "when", "where", "why",
        "how", "all", "any", "both", "each", "few", "more", "most", "other",
        "some", "such", "no", "nor", "not", "only", "own", "same", "so",
        "than", "too", "very", "can", "will", "just", "should", "now",
    }
)  # fmt: skip

# Matched as substrings of the cleaned query so plurals and compounds count
SALES_TERMS = (
    "sales",
    "selling",
    "pitch",
    "objection",
    "closing",
    "discovery",
    "prospect",
    "customer",
    "client",
    "deal",
    "presentation",
    "negotiation",
    "value",
    "benefit",
    "feature",
    "price",
    "discount",
    "competitor",
    "follow-up",
    "pipeline",
    "lead",
    "opportunity",
    "conversion",
)

MIN_TERM_LENGTH = 3

_NON_WORD = re.compile(r"[^\w\s]")


def extract_key_terms(query: str) -> list[str]:
    """Extract the terms of a query worth matching against documents.

    Tokens are lowercased, stripped of punctuation, filtered against the
    stop-word list and kept only when at least three characters long.
    Sales vocabulary found anywhere in the cleaned query is appended
    afterwards.

    Args:
        query: The user's question.

    Returns:
        Key terms in discovery order. May be empty.
    """
    cleaned = _NON_WORD.sub(" ", query.lower())
    words = [word for word in cleaned.split() if word]

    key_terms = [word for word in words if word not in STOP_WORDS and len(word) >= MIN_TERM_LENGTH]

    for term in SALES_TERMS:
        if term in cleaned and term not in key_terms:
            key_terms.append(term)

    return key_terms
