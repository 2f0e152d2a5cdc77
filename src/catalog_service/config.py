import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

load_dotenv()


def _split_origins(raw: str) -> tuple[str, ...]:
    return tuple(origin.strip() for origin in raw.split(",") if origin.strip())


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment variables."""

    # API
    api_host: str = os.getenv("API_HOST", "0.0.0.0")
    api_port: int = int(os.getenv("API_PORT", "3000"))
    api_reload: bool = os.getenv("API_RELOAD", "false").lower() == "true"
    api_prefix: str = os.getenv("API_PREFIX", "/api")
    docs_url: str = os.getenv("DOCS_URL", "/api-docs")

    # CORS (the front-end dev server)
    cors_origins: tuple[str, ...] = _split_origins(
        os.getenv("CORS_ORIGINS", "http://localhost:3001")
    )

    # Data
    seed_data: bool = os.getenv("SEED_DATA", "true").lower() == "true"

    # Logging
    log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()
    log_request_bodies: bool = os.getenv("LOG_REQUEST_BODIES", "true").lower() == "true"

    def __post_init__(self) -> None:
        """Validate settings after initialization."""
        if not 1 <= self.api_port <= 65535:
            raise ValueError(f"API_PORT must be between 1 and 65535, got {self.api_port}")

        if not self.api_prefix.startswith("/") or self.api_prefix.endswith("/"):
            raise ValueError(
                f"API_PREFIX must start with '/' and must not end with '/', got {self.api_prefix!r}"
            )

        if self.log_level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"LOG_LEVEL must be a standard logging level, got {self.log_level!r}")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()
