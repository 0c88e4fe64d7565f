"""Unit tests for document relevance scoring."""

import pytest

from sales_coach.core.services.document_scorer import (
    count_word_occurrences,
    score_document,
    score_documents,
)
from sales_coach.core.services.key_terms import extract_key_terms
from tests.conftest import make_document

pytestmark = pytest.mark.unit


class TestScoreDocument:
    def test_price_objection_example(self, objection_document):
        query = "How do I handle price objections?"

        relevance = score_document(objection_document, query, extract_key_terms(query))

        # title: price, objections, objection (+15); content: price, objection (+2); category (+3)
        assert relevance.score == 20
        assert relevance.matched_terms == ["price", "objections", "objection"]

    def test_exact_query_match(self):
        document = make_document(
            "closing_basics",
            "Closing Basics",
            "Always ask for the business at the end of the call.",
            category="closing",
        )
        query = "Ask for the business"

        relevance = score_document(document, query, extract_key_terms(query))

        assert relevance.score == 10 + 3
        assert relevance.matched_terms == ["Ask for the business", "ask", "for", "business"]

    def test_content_occurrences_are_capped(self):
        document = make_document("notes", "Notes", " ".join(["price"] * 100))

        relevance = score_document(document, "xyz", ["price"])

        assert relevance.score == 5

    def test_content_match_is_whole_word(self):
        assert count_word_occurrences("price", "pricey prices price") == 1
        assert count_word_occurrences("price", "PRICE and Price") == 2

    def test_repeated_key_term_recorded_once(self):
        document = make_document("price_sheet", "Price sheet", "")

        relevance = score_document(document, "zzz", ["price", "price"])

        assert relevance.matched_terms == ["price"]

    @pytest.mark.parametrize(
        ("category", "query", "expected"),
        [
            ("closing", "closing tips", 3),
            ("closing", "enclosure", 3),
            ("objection", "objections please", 3),
            ("discovery", "good questions", 3),
            ("scripts", "cold call script", 3),
            ("closing", "discovery questions", 0),
            ("general", "closing", 0),
        ],
    )
    def test_category_boost(self, category, query, expected):
        document = make_document("doc", "Untitled", "", category=category)

        assert score_document(document, query, []).score == expected

    def test_no_terms_no_match_scores_zero(self):
        document = make_document("doc", "Untitled", "Some unrelated text.")

        relevance = score_document(document, "the a is of", [])

        assert relevance.score == 0
        assert relevance.matched_terms == []


class TestScoreDocuments:
    def test_one_result_per_document_in_order(self, sales_corpus):
        query = "What should I say when closing a deal?"

        results = score_documents(sales_corpus, query, extract_key_terms(query))

        assert len(results) == len(sales_corpus)
        assert [r.document.id for r in results] == [d.id for d in sales_corpus]
        assert all(r.score >= 0 for r in results)

    def test_matched_terms_are_distinct(self, sales_corpus):
        query = "closing closing next steps"

        for result in score_documents(sales_corpus, query, extract_key_terms(query)):
            assert len(result.matched_terms) == len(set(result.matched_terms))

    def test_empty_corpus(self):
        assert score_documents([], "anything", ["anything"]) == []
