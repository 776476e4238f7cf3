"""
Pydantic Schemas for Proctoring Integrity Analysis

Input records (events, answer saves) come from the proctor-event and answer
stores. Output records are serialized by the web layer with camelCase keys.
"""
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Sequence

from pydantic import AliasChoices, BaseModel, Field, field_serializer, field_validator
from pydantic.alias_generators import to_camel


RECORD_CONFIG = {
    "frozen": True,
    "populate_by_name": True,
    "alias_generator": to_camel,
}


# ============================================================================
# Enums
# ============================================================================

class EventKind(str, Enum):
    """Client-observed proctoring event types."""
    FOCUS_LOST = "FOCUS_LOST"
    FOCUS_GAINED = "FOCUS_GAINED"
    TAB_SWITCH = "TAB_SWITCH"
    FULLSCREEN_EXIT = "FULLSCREEN_EXIT"
    COPY = "COPY"
    PASTE = "PASTE"


class FocusLossFlag(str, Enum):
    """Focus-loss correlation level."""
    NONE = "NONE"
    SUSPICIOUS = "SUSPICIOUS"
    HIGHLY_SUSPICIOUS = "HIGHLY_SUSPICIOUS"


class IntegrityBand(str, Enum):
    """Review band for a composite integrity score."""
    NONE = "NONE"
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"


# ============================================================================
# Input Records
# ============================================================================

class ProctorEvent(BaseModel):
    """
    A single recorded proctoring event. Immutable once recorded.

    The metadata mapping is read-only at the top level; nested values
    are kept as supplied by the monitor.
    """

    kind: EventKind = Field(
        ...,
        validation_alias=AliasChoices("kind", "type"),
        description="Event type",
    )
    timestamp: datetime
    metadata: Optional[Mapping[str, Any]] = Field(None, description="Monitor-supplied details")

    model_config = RECORD_CONFIG

    @field_validator("metadata")
    @classmethod
    def freeze_metadata(cls, v: Optional[Mapping[str, Any]]) -> Optional[Mapping[str, Any]]:
        if v is None:
            return None
        return MappingProxyType(dict(v))

    @field_serializer("metadata")
    def serialize_metadata(self, v: Optional[Mapping[str, Any]]) -> Optional[Dict[str, Any]]:
        return None if v is None else dict(v)

    def get_metadata(self, key: str, default: Any = None) -> Any:
        if not self.metadata:
            return default
        return self.metadata.get(key, default)


class AnswerTimestamp(BaseModel):
    """Time at which an answer was saved during the attempt."""

    question_id: str
    saved_at: datetime

    model_config = RECORD_CONFIG


class SegmentRecord(BaseModel):
    """Answer segment as handed over by the answer store."""

    autosaved_at: Optional[datetime] = None

    model_config = RECORD_CONFIG


class AnswerRecord(BaseModel):
    """Answer with its segments as handed over by the answer store."""

    question_id: str
    segments: List[SegmentRecord] = Field(default_factory=list)

    model_config = RECORD_CONFIG


# ============================================================================
# Analysis Results
# ============================================================================

class FocusLossPattern(BaseModel):
    """Correlation between focus losses and answer saves."""

    suspicious_pairs: int = 0
    total_answers: int = 0
    ratio: float = Field(0.0, ge=0.0, le=1.0)
    flag: FocusLossFlag = FocusLossFlag.NONE

    model_config = RECORD_CONFIG


@dataclass(frozen=True)
class CopyPastePair:
    """A COPY matched with the PASTE that consumed it. Never persisted."""
    copy_at: datetime
    paste_at: datetime
    length_mismatch: bool
    has_intervening_away_event: bool

    @property
    def is_strong(self) -> bool:
        return self.length_mismatch and self.has_intervening_away_event

    @property
    def is_suspicious(self) -> bool:
        return self.length_mismatch and not self.has_intervening_away_event


class CopyPasteAnalysis(BaseModel):
    """Copy/paste pair counts. suspicious_pairs and strong_pairs are disjoint."""

    total_pairs: int = 0
    suspicious_pairs: int = 0
    strong_pairs: int = 0

    model_config = RECORD_CONFIG


class ExternalPasteAnalysis(BaseModel):
    """Paste events split by provenance."""

    external_pastes: int = 0
    internal_pastes: int = 0

    model_config = RECORD_CONFIG


class IntegrityScore(BaseModel):
    """Composite suspicion score (0 or higher) with its review band."""

    score: int = Field(0, ge=0)
    band: IntegrityBand = IntegrityBand.NONE

    model_config = RECORD_CONFIG


class ScoreBreakdown(BaseModel):
    """Every intermediate of the composite score."""

    raw_score: int = 0
    pair_bonus: int = 0
    base_score: int = 0
    pattern_bonus: int = 0
    external_bonus: int = 0
    score: int = Field(0, ge=0)
    band: IntegrityBand = IntegrityBand.NONE

    model_config = RECORD_CONFIG

    def to_score(self) -> IntegrityScore:
        return IntegrityScore(score=self.score, band=self.band)


class AttemptIntegrityReport(BaseModel):
    """All integrity signals for a single attempt."""

    attempt_id: Optional[str] = None
    event_counts: Dict[str, int] = Field(default_factory=dict)
    total_events: int = 0
    focus_loss: FocusLossPattern = Field(default_factory=FocusLossPattern)
    external_pastes: ExternalPasteAnalysis = Field(default_factory=ExternalPasteAnalysis)
    copy_paste: CopyPasteAnalysis = Field(default_factory=CopyPasteAnalysis)
    integrity: IntegrityScore = Field(default_factory=IntegrityScore)

    model_config = RECORD_CONFIG


class HistorySummary(BaseModel):
    """Roll-up of one candidate's attempts."""

    attempts: int = 0
    max_score: int = 0
    band_counts: Dict[str, int] = Field(default_factory=dict)
    flagged_focus_patterns: int = 0

    model_config = RECORD_CONFIG


# ============================================================================
# Preconditions
# ============================================================================

def assert_chronological(events: Sequence[ProctorEvent]) -> None:
    """Debug check that events arrive sorted ascending by timestamp."""
    assert all(
        earlier.timestamp <= later.timestamp
        for earlier, later in zip(events, events[1:])
    ), "proctor events must be sorted by timestamp"
