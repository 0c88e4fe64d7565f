"""Configuration management for Sales Coach."""

from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def _sanitize_secret(value: str) -> str:
    """Remove BOM characters and whitespace from secrets.

    Secrets copied from dashboards or injected by the hosting platform may
    carry a BOM that breaks HTTP headers.
    """
    if not value:
        return value
    return value.lstrip("\ufeff").strip()


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Google AI API
    google_api_key: str = ""

    @field_validator("google_api_key", mode="after")
    @classmethod
    def sanitize_secrets(cls, value: str) -> str:
        """Remove BOM and whitespace from secret values."""
        return _sanitize_secret(value)

    # Data directories
    data_dir: Path = Path("./data")
    training_dir: Path = Path("./training")

    # Model settings
    llm_model: str = "gemini-2.0-flash"
    llm_temperature: float = 0.7
    llm_max_output_tokens: int = 512

    # Relevance selection
    max_relevant_documents: int = 3
    relevant_preview_chars: int = 500

    # Logging
    log_level: str = "INFO"
    log_json: bool = False

    @property
    def training_documents_file(self) -> Path:
        """JSON file holding the processed training documents."""
        return self.data_dir / "training-documents.json"

    def ensure_directories(self) -> None:
        """Create all required directories if they don't exist."""
        self.data_dir.mkdir(parents=True, exist_ok=True)
        self.training_dir.mkdir(parents=True, exist_ok=True)


# Global settings instance
settings = Settings()
