"""
Attempt Report - Runs every analysis for an attempt and ranks attempts for review
"""

import logging
from typing import Iterable, List, Optional, Sequence

from ..analysis import analyze_copy_paste, analyze_external_pastes, analyze_focus_loss
from ..config import DEFAULT_SCORING_CONFIG, ScoringConfig
from ..metrics import count_events
from ..models import (
    AnswerTimestamp,
    AttemptIntegrityReport,
    FocusLossFlag,
    HistorySummary,
    IntegrityBand,
    ProctorEvent,
)
from ..utils.logging import log_attempt_scored, log_focus_pattern_flagged
from .integrity_scorer import compute_integrity_score

logger = logging.getLogger(__name__)


def analyze_attempt(
    events: Sequence[ProctorEvent],
    answers: Sequence[AnswerTimestamp],
    attempt_id: Optional[str] = None,
    config: Optional[ScoringConfig] = None,
) -> AttemptIntegrityReport:
    """
    Produce the full integrity report for one attempt.

    Args:
        events: Proctor events sorted by timestamp
        answers: Answer save timestamps for the attempt
        attempt_id: Optional attempt ID carried into the report and logs
        config: Thresholds and weights (defaults when omitted)

    Returns:
        AttemptIntegrityReport with counts, the three analyses and the score
    """
    config = config or DEFAULT_SCORING_CONFIG

    event_counts = count_events(events)
    focus_loss = analyze_focus_loss(
        events,
        answers,
        window_seconds=config.window_seconds,
        grace_ms=config.grace_ms,
        suspicious_threshold=config.suspicious_threshold,
        highly_suspicious_threshold=config.highly_suspicious_threshold,
    )
    external_pastes = analyze_external_pastes(events)
    copy_paste = analyze_copy_paste(events)

    integrity = compute_integrity_score(
        event_counts, focus_loss, external_pastes, copy_paste, config
    )

    label = attempt_id or "-"
    if focus_loss.flag != FocusLossFlag.NONE:
        log_focus_pattern_flagged(label, focus_loss.flag.value, focus_loss.ratio)
    log_attempt_scored(label, integrity.score, integrity.band.value, len(events))

    return AttemptIntegrityReport(
        attempt_id=attempt_id,
        event_counts=event_counts,
        total_events=len(events),
        focus_loss=focus_loss,
        external_pastes=external_pastes,
        copy_paste=copy_paste,
        integrity=integrity,
    )


def rank_attempts(reports: Iterable[AttemptIntegrityReport]) -> List[AttemptIntegrityReport]:
    """Order reports for review, highest score first. Ties keep input order."""
    ranked = sorted(reports, key=lambda report: report.integrity.score, reverse=True)
    logger.debug(f"Ranked {len(ranked)} attempts")
    return ranked


def summarize_history(reports: Iterable[AttemptIntegrityReport]) -> HistorySummary:
    """
    Roll up one candidate's attempts.

    Returns:
        HistorySummary with attempt count, highest score, per-band counts
        and the number of attempts with a flagged focus-loss pattern
    """
    band_counts = {band.value: 0 for band in IntegrityBand}
    attempts = 0
    max_score = 0
    flagged = 0

    for report in reports:
        attempts += 1
        max_score = max(max_score, report.integrity.score)
        band_counts[report.integrity.band.value] += 1
        if report.focus_loss.flag != FocusLossFlag.NONE:
            flagged += 1

    return HistorySummary(
        attempts=attempts,
        max_score=max_score,
        band_counts=band_counts,
        flagged_focus_patterns=flagged,
    )
