import logging
import os
from dataclasses import dataclass, field
from enum import Enum
from functools import lru_cache

from dotenv import load_dotenv

load_dotenv()


class Environment(str, Enum):
    """Deployment environment controlling where error records are sent."""

    DEVELOPMENT = "development"
    PRODUCTION = "production"
    OTHER = "other"

    @classmethod
    def parse(cls, value: str | None) -> "Environment":
        """Map a raw ENVIRONMENT value to a member, unknown values become OTHER."""
        if not value:
            return cls.OTHER
        try:
            return cls(value.strip().lower())
        except ValueError:
            return cls.OTHER


def _env(name: str, default: str) -> str:
    return os.getenv(name, default)


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment variables."""

    # Runtime
    environment: Environment = field(
        default_factory=lambda: Environment.parse(os.getenv("ENVIRONMENT"))
    )
    log_level: str = field(default_factory=lambda: _env("LOG_LEVEL", "INFO").upper())

    # Monitoring
    monitoring_base_url: str = field(
        default_factory=lambda: _env("MONITORING_BASE_URL", "http://localhost:8000")
    )
    monitoring_timeout: float = field(
        default_factory=lambda: float(_env("MONITORING_TIMEOUT", "5.0"))
    )

    # Cache
    cache_max_size: int = field(default_factory=lambda: int(_env("CACHE_MAX_SIZE", "100")))

    # Error log
    error_log_max_size: int = field(
        default_factory=lambda: int(_env("ERROR_LOG_MAX_SIZE", "1000"))  # 0 = unbounded
    )
    error_recent_window_hours: float = field(
        default_factory=lambda: float(_env("ERROR_RECENT_WINDOW_HOURS", "24"))
    )

    # API
    api_host: str = field(default_factory=lambda: _env("API_HOST", "0.0.0.0"))
    api_port: int = field(default_factory=lambda: int(_env("API_PORT", "8000")))
    api_reload: bool = field(
        default_factory=lambda: _env("API_RELOAD", "true").lower() == "true"
    )

    @property
    def error_log_limit(self) -> int | None:
        """Retention bound for the error log, or None when unbounded."""
        return self.error_log_max_size or None

    def __post_init__(self) -> None:
        """Validate settings after initialization."""
        if self.cache_max_size < 1:
            raise ValueError(f"CACHE_MAX_SIZE must be at least 1, got {self.cache_max_size}")

        if self.error_log_max_size < 0:
            raise ValueError(
                f"ERROR_LOG_MAX_SIZE must be 0 (unbounded) or positive, "
                f"got {self.error_log_max_size}"
            )

        if self.error_recent_window_hours <= 0:
            raise ValueError("ERROR_RECENT_WINDOW_HOURS must be positive")

        if self.monitoring_timeout <= 0:
            raise ValueError("MONITORING_TIMEOUT must be positive")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def configure_logging(level: str | None = None) -> None:
    """Configure root logging once for the service."""
    logging.basicConfig(
        level=level or get_settings().log_level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
