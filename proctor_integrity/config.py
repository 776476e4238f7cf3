"""
Integrity Engine Configuration

Two layers:
- ScoringConfig: immutable value object with every threshold and weight.
  Passed explicitly to the analyses; never looked up implicitly.
- Settings: environment-derived service settings (logging, window overrides).
"""
from functools import lru_cache
from types import MappingProxyType
from typing import Dict, Mapping, Optional

from pydantic import BaseModel, Field, field_serializer, field_validator, model_validator
from pydantic_settings import BaseSettings


# Default per-kind weights. COPY and PASTE are scored only through pair bonuses.
DEFAULT_EVENT_WEIGHTS: Dict[str, int] = {
    "FOCUS_LOST": 1,
    "TAB_SWITCH": 2,
    "FULLSCREEN_EXIT": 2,
    "COPY": 0,
    "PASTE": 0,
}


class ScoringConfig(BaseModel):
    """Thresholds and weights for focus-loss correlation and scoring."""

    # Focus-loss correlation
    window_seconds: float = Field(30, ge=0, description="Look-back window before an answer save")
    grace_ms: float = Field(5000, ge=0, description="Allowed focus regain after an answer save")
    suspicious_threshold: float = Field(0.5, ge=0.0, le=1.0)
    highly_suspicious_threshold: float = Field(0.75, ge=0.0, le=1.0)

    # Composite score
    event_weights: Mapping[str, int] = Field(
        default_factory=lambda: dict(DEFAULT_EVENT_WEIGHTS),
        validate_default=True,
    )
    suspicious_pair_weight: int = Field(2, ge=0)
    strong_pair_weight: int = Field(5, ge=0)
    suspicious_pattern_bonus: int = Field(15, ge=0)
    highly_suspicious_pattern_bonus: int = Field(30, ge=0)
    external_paste_penalty: int = Field(5, ge=0)

    # Band ceilings (inclusive)
    low_band_max: int = Field(3, ge=1)
    medium_band_max: int = Field(8, ge=1)

    model_config = {"frozen": True}

    @field_validator("event_weights")
    @classmethod
    def validate_event_weights(cls, v: Mapping[str, int]) -> Mapping[str, int]:
        negative = [kind for kind, weight in v.items() if weight < 0]
        if negative:
            raise ValueError(f"Event weights must be non-negative: {', '.join(sorted(negative))}")
        # Read-only view; the default instance is shared across callers
        return MappingProxyType(dict(v))

    @field_serializer("event_weights")
    def serialize_event_weights(self, v: Mapping[str, int]) -> Dict[str, int]:
        return dict(v)

    @model_validator(mode="after")
    def validate_ordering(self) -> "ScoringConfig":
        if self.highly_suspicious_threshold < self.suspicious_threshold:
            raise ValueError("highly_suspicious_threshold must not be below suspicious_threshold")
        if self.medium_band_max <= self.low_band_max:
            raise ValueError("medium_band_max must exceed low_band_max")
        return self

    def weight_for(self, kind: str) -> int:
        return self.event_weights.get(kind, 0)


DEFAULT_SCORING_CONFIG = ScoringConfig()


class Settings(BaseSettings):
    """Service settings for the integrity engine."""

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_TO_FILE: bool = False
    LOG_DIR: str = "logs"

    # Focus-loss window overrides
    FOCUS_WINDOW_SECONDS: Optional[float] = None
    FOCUS_GRACE_MS: Optional[float] = None

    class Config:
        env_prefix = "INTEGRITY_"
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"

    def scoring_config(self) -> ScoringConfig:
        """Build a ScoringConfig, applying any window overrides."""
        overrides = {}
        if self.FOCUS_WINDOW_SECONDS is not None:
            overrides["window_seconds"] = self.FOCUS_WINDOW_SECONDS
        if self.FOCUS_GRACE_MS is not None:
            overrides["grace_ms"] = self.FOCUS_GRACE_MS
        return ScoringConfig(**overrides)


@lru_cache()
def get_settings() -> Settings:
    return Settings()
