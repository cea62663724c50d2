import os

from pydantic import BaseModel, model_validator
from pydantic_settings import BaseSettings


def _parse_cors_origins() -> list[str] | None:
    """Parse CORS_ORIGINS env var as comma-separated string or JSON list."""
    raw = os.environ.get("CORS_ORIGINS")
    if not raw:
        return None
    if raw.startswith("["):
        import json
        return json.loads(raw)
    return [o.strip() for o in raw.split(",") if o.strip()]


class ScoringWeights(BaseModel):
    """Blend between text similarity and skill-match ratio.

    Skill coverage dominates by default (0.3 / 0.7). The earlier
    similarity-dominant blend was 0.6 / 0.4.
    """
    similarity: float = 0.3
    skill: float = 0.7

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def _check_sum(self) -> "ScoringWeights":
        if self.similarity < 0 or self.skill < 0:
            raise ValueError("scoring weights must be non-negative")
        if abs(self.similarity + self.skill - 1.0) > 1e-9:
            raise ValueError(
                f"scoring weights must sum to 1.0 (got {self.similarity} + {self.skill})"
            )
        return self


class RetryPolicy(BaseModel):
    """Exponential backoff with jitter for calls to external services."""
    max_attempts: int = 3
    base_delay: float = 1.0
    multiplier: float = 2.0
    max_delay: float = 16.0
    jitter: float = 0.5  # fraction of the computed delay

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def _check_bounds(self) -> "RetryPolicy":
        if self.max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        if self.base_delay < 0 or self.max_delay < 0 or self.jitter < 0:
            raise ValueError("delays and jitter must be non-negative")
        if self.multiplier < 1:
            raise ValueError("multiplier must be >= 1")
        return self


class AnalyzerConfig(BaseModel):
    weights: ScoringWeights = ScoringWeights()
    provider_timeout_seconds: float = 30.0

    model_config = {"frozen": True}


class Settings(BaseSettings):
    gemini_api_key: str = ""
    gemini_model: str = "gemini-2.5-flash"
    gemini_temperature: float = 0.3
    max_upload_size_mb: int = 5
    max_job_description_chars: int = 10000
    cors_origins: list[str] = [
        "http://localhost:5173",
        "http://localhost:3000",
        "http://localhost:8080",
    ]
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = 8000
    rate_limit: str = "10/minute"
    rate_limit_enabled: bool = True

    # Fit score blend
    similarity_weight: float = 0.3
    skill_weight: float = 0.7

    # Insight provider calls
    provider_timeout_seconds: float = 30.0
    retry_max_attempts: int = 3
    retry_base_delay: float = 1.0
    retry_multiplier: float = 2.0
    retry_max_delay: float = 16.0
    retry_jitter: float = 0.5

    # Job board search templates, "{query}" is replaced with the URL-encoded keywords
    job_board_urls: dict[str, str] = {
        "LinkedIn": "https://www.linkedin.com/jobs/search/?keywords={query}",
        "Indeed": "https://www.indeed.com/jobs?q={query}",
    }

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    def analyzer_config(self) -> AnalyzerConfig:
        return AnalyzerConfig(
            weights=ScoringWeights(
                similarity=self.similarity_weight,
                skill=self.skill_weight,
            ),
            provider_timeout_seconds=self.provider_timeout_seconds,
        )

    def retry_policy(self) -> RetryPolicy:
        return RetryPolicy(
            max_attempts=self.retry_max_attempts,
            base_delay=self.retry_base_delay,
            multiplier=self.retry_multiplier,
            max_delay=self.retry_max_delay,
            jitter=self.retry_jitter,
        )


_cors_override = _parse_cors_origins()
settings = Settings(**{"cors_origins": _cors_override} if _cors_override else {})
