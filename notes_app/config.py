"""Notes app configuration loaded from environment variables."""

from __future__ import annotations

from pathlib import Path

from pydantic_settings import BaseSettings

PROJECT_ROOT = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    """Application settings loaded from .env file."""

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_prefix": "NOTES_APP_",
    }

    # Local key-value storage
    storage_path: Path = PROJECT_ROOT / "notes_storage.json"
    notes_storage_key: str = "notesApp_notes"
    theme_storage_key: str = "notesApp_theme"
    storage_quota_bytes: int | None = 5 * 1024 * 1024

    # UI behaviour
    debounce_delay_ms: int = 300
    prefers_dark_scheme: bool = False

    # Export
    export_dir: Path = Path.cwd()

    log_level: str = "INFO"

    @property
    def debounce_delay(self) -> float:
        """Search debounce window in seconds."""
        return self.debounce_delay_ms / 1000


settings = Settings()
