"""
Proctoring Integrity Engine

Analyzes a recorded exam attempt for integrity signals:
- Focus losses bracketing answer saves
- Copy/paste pairs with mismatched content length
- Pastes sourced from outside the exam page

Produces an Integrity Score with a NONE/LOW/MEDIUM/HIGH band for reviewers.
"""

from .analysis import analyze_copy_paste, analyze_external_pastes, analyze_focus_loss
from .config import DEFAULT_SCORING_CONFIG, ScoringConfig
from .models import (
    AnswerTimestamp,
    AttemptIntegrityReport,
    CopyPasteAnalysis,
    EventKind,
    ExternalPasteAnalysis,
    FocusLossFlag,
    FocusLossPattern,
    IntegrityBand,
    IntegrityScore,
    ProctorEvent,
)
from .scoring import analyze_attempt, compute_integrity_score, rank_attempts

__all__ = [
    "AnswerTimestamp",
    "AttemptIntegrityReport",
    "CopyPasteAnalysis",
    "DEFAULT_SCORING_CONFIG",
    "EventKind",
    "ExternalPasteAnalysis",
    "FocusLossFlag",
    "FocusLossPattern",
    "IntegrityBand",
    "IntegrityScore",
    "ProctorEvent",
    "ScoringConfig",
    "analyze_attempt",
    "analyze_copy_paste",
    "analyze_external_pastes",
    "analyze_focus_loss",
    "compute_integrity_score",
    "rank_attempts",
]
