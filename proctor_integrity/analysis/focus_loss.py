"""
Focus-Loss Correlator - Detects focus losses that bracket answer saves
"""

import logging
from datetime import timedelta
from typing import Optional, Sequence

from ..models import (
    AnswerTimestamp,
    EventKind,
    FocusLossFlag,
    FocusLossPattern,
    ProctorEvent,
    assert_chronological,
)

logger = logging.getLogger(__name__)

DEFAULT_WINDOW_SECONDS = 30
DEFAULT_GRACE_MS = 5000
SUSPICIOUS_THRESHOLD = 0.5
HIGHLY_SUSPICIOUS_THRESHOLD = 0.75


def find_bracketing_pair(
    events: Sequence[ProctorEvent],
    answer: AnswerTimestamp,
    window_seconds: float = DEFAULT_WINDOW_SECONDS,
    grace_ms: float = DEFAULT_GRACE_MS,
) -> Optional[int]:
    """
    Find the first adjacent FOCUS_LOST -> FOCUS_GAINED pair around an answer save.

    The pair must be adjacent in the event list; any event between the two
    (a TAB_SWITCH, for example) breaks it.

    Args:
        events: Proctor events sorted by timestamp
        answer: The answer save to correlate
        window_seconds: How far before the save the focus loss may start
        grace_ms: How long after the save focus may be regained

    Returns:
        Index of the FOCUS_LOST event, or None if no pair brackets the save
    """
    window_start = answer.saved_at - timedelta(seconds=window_seconds)
    regain_deadline = answer.saved_at + timedelta(milliseconds=grace_ms)

    for i in range(len(events) - 1):
        lost, gained = events[i], events[i + 1]
        if lost.kind != EventKind.FOCUS_LOST or gained.kind != EventKind.FOCUS_GAINED:
            continue

        if window_start <= lost.timestamp <= answer.saved_at and gained.timestamp <= regain_deadline:
            return i

    return None


def classify_ratio(
    ratio: float,
    suspicious_threshold: float = SUSPICIOUS_THRESHOLD,
    highly_suspicious_threshold: float = HIGHLY_SUSPICIOUS_THRESHOLD,
) -> FocusLossFlag:
    """Map a suspicious-pair ratio to a flag. Both thresholds are strict."""
    if ratio > highly_suspicious_threshold:
        return FocusLossFlag.HIGHLY_SUSPICIOUS
    elif ratio > suspicious_threshold:
        return FocusLossFlag.SUSPICIOUS
    return FocusLossFlag.NONE


def analyze_focus_loss(
    events: Sequence[ProctorEvent],
    answers: Sequence[AnswerTimestamp],
    window_seconds: float = DEFAULT_WINDOW_SECONDS,
    grace_ms: float = DEFAULT_GRACE_MS,
    suspicious_threshold: float = SUSPICIOUS_THRESHOLD,
    highly_suspicious_threshold: float = HIGHLY_SUSPICIOUS_THRESHOLD,
) -> FocusLossPattern:
    """
    Correlate focus-loss episodes with answer saves.

    An answer is suspicious when an adjacent FOCUS_LOST/FOCUS_GAINED pair
    starts within `window_seconds` before the save and ends no later than
    `grace_ms` after it.

    Returns:
        FocusLossPattern with suspicious pair count, total answers, ratio and flag
    """
    assert_chronological(events)

    if not answers:
        return FocusLossPattern()

    suspicious_pairs = 0
    for answer in answers:
        index = find_bracketing_pair(events, answer, window_seconds, grace_ms)
        if index is not None:
            suspicious_pairs += 1
            logger.debug(
                f"Answer {answer.question_id} bracketed by focus loss at {events[index].timestamp.isoformat()}"
            )

    ratio = suspicious_pairs / len(answers)
    flag = classify_ratio(ratio, suspicious_threshold, highly_suspicious_threshold)

    return FocusLossPattern(
        suspicious_pairs=suspicious_pairs,
        total_answers=len(answers),
        ratio=ratio,
        flag=flag,
    )
