from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

DATA_DIR = Path(__file__).resolve().parent.parent / "data"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Application
    app_name: str = "Classical Cipher Toolkit"
    app_env: Literal["development", "staging", "production"] = "development"
    debug: bool = False
    api_v1_prefix: str = "/api/v1"
    log_level: str = "INFO"

    # Input limits
    max_message_length: int = 100_000

    # Common-word list used by the scorer
    wordlist_path: Path = DATA_DIR / "1000_most_common.txt"

    # Password dictionary used by keyed-cipher sweeps
    dictionary_path: Path = Path("data/rockyou.txt")
    dictionary_size: int = 14_344_392

    # Brute-force settings
    chunk_size: int = 1000
    max_workers: int = 4
    top_results: int = 50
    results_path: Path = Path("bruteForceResults.txt")
    bruteforce_timeout_seconds: float | None = None

    @property
    def is_development(self) -> bool:
        return self.app_env == "development"

    @property
    def is_production(self) -> bool:
        return self.app_env == "production"

    def limit_from_percentage(self, percentage: float) -> int:
        """Convert a percentage of the password dictionary into a line limit."""
        percentage = max(0.0, min(100.0, percentage))
        return int(percentage / 100 * self.dictionary_size)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
