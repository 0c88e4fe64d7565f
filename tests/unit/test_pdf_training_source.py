"""Unit tests for PDFTrainingSource."""

from unittest.mock import MagicMock, patch

import pytest

from sales_coach.adapters.outbound.pdf_training_source import (
    PDFTrainingSource,
    categorize_filename,
    document_id_for,
)

pytestmark = pytest.mark.unit


@pytest.mark.parametrize(
    ("filename", "category"),
    [
        ("Cold Call Script.pdf", "scripts"),
        ("Closing Masterclass.pdf", "closing"),
        ("Interview Prep.pdf", "interview"),
        ("Competitive Intelligence.pdf", "intelligence"),
        ("Call Preparation.pdf", "preparation"),
        ("Script for Closing.pdf", "scripts"),
        ("Handbook.pdf", "general"),
    ],
)
def test_categorize_filename(filename, category):
    assert categorize_filename(filename) == category


def test_document_id_for():
    assert document_id_for("Closing Techniques (2024)") == "closing_techniques__2024_"


def _fake_reader(path):
    if "broken" in path.name:
        raise ValueError("EOF marker not found")
    pages = [MagicMock(), MagicMock(), MagicMock()]
    pages[0].extract_text.return_value = "Page one"
    pages[1].extract_text.return_value = ""
    pages[2].extract_text.return_value = "Page two"
    return MagicMock(pages=pages)


def test_extract_documents(tmp_path):
    (tmp_path / "Cold Call Script.pdf").write_bytes(b"%PDF")
    (tmp_path / "broken.pdf").write_bytes(b"junk")
    (tmp_path / "notes.txt").write_text("ignored")

    with patch(
        "sales_coach.adapters.outbound.pdf_training_source.PdfReader", side_effect=_fake_reader
    ):
        documents = PDFTrainingSource(tmp_path).extract_documents()

    assert len(documents) == 1
    document = documents[0]
    assert document.id == "cold_call_script"
    assert document.title == "Cold Call Script"
    assert document.category == "scripts"
    assert document.source == "Cold Call Script.pdf"
    assert document.content == "Page one\n\nPage two"
    assert document.created_at is not None


def test_missing_training_dir(tmp_path):
    assert PDFTrainingSource(tmp_path / "nope").extract_documents() == []
