from functools import lru_cache

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="LANTERN_",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Lantern"
    debug: bool = False
    log_level: str = "INFO"

    # URL parsing
    allowed_schemes: tuple[str, ...] = ("http", "https")

    # Static lookup tables
    blocked_urls: tuple[str, ...] = (
        "https://blockedexample.com",
        "https://malicioussite.com",
        "https://phishingsite.com",
        "https://youtube.com",
        "https://www.instagram.com/",
    )
    suspicious_tlds: tuple[str, ...] = (".tk", ".ml", ".ga", ".cf")

    # Overall score weights (total = 1.0)
    score_weights: dict[str, float] = {
        "security": 0.30,
        "performance": 0.25,
        "seo": 0.20,
        "accessibility": 0.15,
        "best_practices": 0.10,
    }

    # Presentation timing
    latency_min_ms: int = 0
    latency_max_ms: int = 0
    debounce_ms: int = 300

    # Bulk analysis
    bulk_max_urls: int = 50

    @field_validator("allowed_schemes", mode="after")
    @classmethod
    def _normalize_schemes(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        schemes = tuple(s.strip().lower().rstrip(":") for s in value if s.strip())
        if not schemes:
            raise ValueError("allowed_schemes must not be empty")
        return schemes

    @field_validator("score_weights", mode="after")
    @classmethod
    def _check_weights(cls, value: dict[str, float]) -> dict[str, float]:
        expected = {"security", "performance", "seo", "accessibility", "best_practices"}
        if set(value) != expected:
            raise ValueError(f"score_weights must define exactly: {', '.join(sorted(expected))}")
        if abs(sum(value.values()) - 1.0) > 1e-6:
            raise ValueError("score_weights must sum to 1.0")
        return value

    @model_validator(mode="after")
    def _check_latency(self) -> "Settings":
        if self.latency_min_ms < 0 or self.latency_max_ms < self.latency_min_ms:
            raise ValueError("latency range must satisfy 0 <= latency_min_ms <= latency_max_ms")
        return self


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
