"""Training Document Store Port Interface."""

from abc import ABC, abstractmethod

from ..domain import TrainingDocument


class TrainingDocumentStorePort(ABC):
    """Abstract interface for wherever the training corpus is persisted."""

    @abstractmethod
    def load_documents(self) -> list[TrainingDocument]:
        """Load the full corpus."""
        ...

    @abstractmethod
    def save_documents(self, documents: list[TrainingDocument]) -> None:
        """Replace the stored corpus."""
        ...


class TrainingSourcePort(ABC):
    """Abstract interface for raw training material (PDF folders, etc.)."""

    @abstractmethod
    def extract_documents(self) -> list[TrainingDocument]:
        """Process every available source file into a document."""
        ...
