"""Google Gemini adapter implementing the LLM port via the google-genai SDK."""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING

from ...core.domain import ChatMessage
from ...core.domain.exceptions import LLMGenerationError, LLMRateLimitError, MissingAPIKeyError
from ...core.domain.utils import normalize_text
from ...core.ports.llm_port import LLMPort

if TYPE_CHECKING:
    from google import genai

logger = logging.getLogger(__name__)

SAFETY_FALLBACK = "I apologize, but I cannot provide a response to that query."


def _is_rate_limit(error: Exception) -> bool:
    message = str(error).lower()
    return "quota" in message or "rate" in message or "429" in message


class GeminiLLMAdapter(LLMPort):
    """Gemini chat completion with retry on quota errors."""

    def __init__(
        self,
        api_key: str,
        model: str = "gemini-2.0-flash",
        temperature: float = 0.7,
        max_output_tokens: int = 512,
        max_retries: int = 3,
    ) -> None:
        """Initialize the adapter.

        Args:
            api_key: Google AI API key.
            model: Gemini model name.
            temperature: Sampling temperature.
            max_output_tokens: Reply length limit; coaching replies are short.
            max_retries: Attempts before giving up on rate-limit errors.
        """
        self.api_key = api_key
        self.model_name = model
        self.temperature = temperature
        self.max_output_tokens = max_output_tokens
        self.max_retries = max_retries
        self._client: genai.Client | None = None

    def _get_client(self) -> genai.Client:
        """Lazy load the Gemini client."""
        if self._client is None:
            if not self.api_key:
                raise MissingAPIKeyError(
                    "Google API key not set. Get one at https://aistudio.google.com/ "
                    "and set GOOGLE_API_KEY in your .env file."
                )

            from google import genai

            self._client = genai.Client(api_key=self.api_key)
            logger.info("Gemini client initialized for model: %s", self.model_name)

        return self._client

    @staticmethod
    def _build_contents(prompt: str, history: list[ChatMessage]) -> list:
        from google.genai import types

        contents = []
        for message in history:
            role = "model" if message.role in ("assistant", "model", "agent") else "user"
            contents.append(
                types.Content(role=role, parts=[types.Part(text=normalize_text(message.content))])
            )
        contents.append(types.Content(role="user", parts=[types.Part(text=normalize_text(prompt))]))
        return contents

    def generate(
        self,
        prompt: str,
        system_prompt: str | None = None,
        history: list[ChatMessage] | None = None,
    ) -> str:
        """Generate a reply.

        Raises:
            MissingAPIKeyError: If no API key is configured.
            LLMRateLimitError: If quota errors persist after all retries.
            LLMGenerationError: For any other model failure.
        """
        from google.genai.types import GenerateContentConfig

        client = self._get_client()
        contents = self._build_contents(prompt, history or [])
        config = GenerateContentConfig(
            system_instruction=normalize_text(system_prompt) if system_prompt else None,
            temperature=self.temperature,
            max_output_tokens=self.max_output_tokens,
        )

        for attempt in range(self.max_retries):
            try:
                response = client.models.generate_content(
                    model=self.model_name,
                    contents=contents,
                    config=config,
                )
            except Exception as e:
                if not _is_rate_limit(e):
                    raise LLMGenerationError(
                        "Gemini generation failed",
                        cause=e,
                        context={"model": self.model_name},
                    ) from e
                if attempt == self.max_retries - 1:
                    raise LLMRateLimitError(
                        "Rate limit reached. Please wait a moment and try again.",
                        cause=e,
                        context={"model": self.model_name, "attempts": self.max_retries},
                    ) from e
                wait_time = 2**attempt
                logger.warning("Rate limit hit, retrying in %ss...", wait_time)
                time.sleep(wait_time)
                continue

            # Safety filters leave no candidates
            if not response.candidates:
                return SAFETY_FALLBACK

            return normalize_text(response.text or "")

        raise LLMGenerationError("Failed to generate response after retries")
