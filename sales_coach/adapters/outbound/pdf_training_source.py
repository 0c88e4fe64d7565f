"""PDF folder adapter that turns training PDFs into documents."""

import logging
import re
from datetime import UTC, datetime
from pathlib import Path

from pypdf import PdfReader

from ...core.domain import TrainingDocument
from ...core.domain.exceptions import PDFExtractionError
from ...core.domain.utils import normalize_text
from ...core.ports.document_store_port import TrainingSourcePort

logger = logging.getLogger(__name__)

# Checked in order against the lowercased filename; first hit wins
FILENAME_CATEGORIES = [
    ("script", "scripts"),
    ("closing", "closing"),
    ("interview", "interview"),
    ("intelligence", "intelligence"),
    ("preparation", "preparation"),
]

DEFAULT_CATEGORY = "general"


def categorize_filename(filename: str) -> str:
    """Derive a document category from its file name."""
    lower = filename.lower()
    for fragment, category in FILENAME_CATEGORIES:
        if fragment in lower:
            return category
    return DEFAULT_CATEGORY


def document_id_for(stem: str) -> str:
    """Lowercased stem with every non-alphanumeric character replaced by ``_``."""
    return re.sub(r"[^a-zA-Z0-9]", "_", stem).lower()


class PDFTrainingSource(TrainingSourcePort):
    """Reads every PDF in the training directory."""

    def __init__(self, training_dir: str | Path = "training") -> None:
        """Initialize the source.

        Args:
            training_dir: Directory containing training PDFs.
        """
        self.training_dir = Path(training_dir)

    def extract_text(self, pdf_path: Path) -> str:
        """Extract text from all pages, joined by blank lines.

        Raises:
            PDFExtractionError: If the PDF cannot be parsed.
        """
        try:
            reader = PdfReader(pdf_path)
            text_parts = []
            for page in reader.pages:
                text = page.extract_text()
                if text:
                    normalized = normalize_text(text)
                    if normalized:
                        text_parts.append(normalized)
            return "\n\n".join(text_parts)
        except Exception as e:
            raise PDFExtractionError(
                f"Failed to extract text from {pdf_path.name}",
                cause=e,
                context={"path": str(pdf_path)},
            ) from e

    def extract_documents(self) -> list[TrainingDocument]:
        """Process every PDF; unreadable files are logged and skipped."""
        if not self.training_dir.exists():
            logger.warning("Training directory not found: %s", self.training_dir)
            return []

        pdf_files = sorted(
            path for path in self.training_dir.iterdir() if path.suffix.lower() == ".pdf"
        )
        logger.info("Found %d PDF files in %s", len(pdf_files), self.training_dir)

        documents = []
        for pdf_path in pdf_files:
            try:
                content = self.extract_text(pdf_path)
            except PDFExtractionError as e:
                logger.warning("Skipping %s: %s", pdf_path.name, e.message)
                continue

            documents.append(
                TrainingDocument(
                    id=document_id_for(pdf_path.stem),
                    title=pdf_path.stem,
                    content=content,
                    category=categorize_filename(pdf_path.name),
                    source=pdf_path.name,
                    created_at=datetime.now(UTC),
                )
            )
            logger.info("Processed %s (%d characters)", pdf_path.name, len(content))

        return documents
