"""LLM Port Interface."""

from abc import ABC, abstractmethod

from ..domain import ChatMessage


class LLMPort(ABC):
    """Abstract interface for LLM providers."""

    @abstractmethod
    def generate(
        self,
        prompt: str,
        system_prompt: str | None = None,
        history: list[ChatMessage] | None = None,
    ) -> str:
        """Generate a response from the LLM."""
        ...
