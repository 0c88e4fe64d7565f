"""JSON file adapter for the processed training corpus."""

import json
import logging
from pathlib import Path

from ...core.domain import TrainingDocument
from ...core.domain.exceptions import DocumentStoreError
from ...core.ports.document_store_port import TrainingDocumentStorePort

logger = logging.getLogger(__name__)


class JSONDocumentStore(TrainingDocumentStorePort):
    """Stores the training corpus as a single JSON array on disk."""

    def __init__(self, file_path: str | Path = "data/training-documents.json") -> None:
        """Initialize the store.

        Args:
            file_path: Path of the JSON file.
        """
        self.file_path = Path(file_path)

    def load_documents(self) -> list[TrainingDocument]:
        """Read the corpus from disk.

        Returns:
            Documents in file order, or an empty list if the file does not exist.

        Raises:
            DocumentStoreError: If the file cannot be read or is malformed.
        """
        if not self.file_path.exists():
            logger.info("Training documents file not found: %s", self.file_path)
            return []

        try:
            raw = json.loads(self.file_path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            raise DocumentStoreError(
                "Failed to read training documents",
                cause=e,
                context={"path": str(self.file_path)},
            ) from e

        if not isinstance(raw, list):
            raise DocumentStoreError(
                "Training documents file must contain a JSON array",
                context={"path": str(self.file_path), "type": type(raw).__name__},
            )

        for index, item in enumerate(raw):
            if not isinstance(item, dict):
                raise DocumentStoreError(
                    "Malformed training document entry",
                    context={"path": str(self.file_path), "index": index, "type": type(item).__name__},
                )

        try:
            documents = [TrainingDocument.from_dict(item) for item in raw]
        except (KeyError, TypeError, ValueError) as e:
            raise DocumentStoreError(
                "Malformed training document entry",
                cause=e,
                context={"path": str(self.file_path)},
            ) from e

        logger.debug("Loaded %d training documents from %s", len(documents), self.file_path)
        return documents

    def save_documents(self, documents: list[TrainingDocument]) -> None:
        """Write the corpus to disk, replacing any existing file.

        Raises:
            DocumentStoreError: If the file cannot be written.
        """
        try:
            self.file_path.parent.mkdir(parents=True, exist_ok=True)
            payload = json.dumps([doc.to_dict() for doc in documents], indent=2, ensure_ascii=False)
            self.file_path.write_text(payload, encoding="utf-8")
        except OSError as e:
            raise DocumentStoreError(
                "Failed to save training documents",
                cause=e,
                context={"path": str(self.file_path)},
            ) from e

        logger.info("Saved %d training documents to %s", len(documents), self.file_path)
