"""
Integrity Scorer - Combines event counts and pattern analyses into one score
"""

import logging
from enum import Enum
from typing import Mapping, Optional, Union

from ..config import DEFAULT_SCORING_CONFIG, ScoringConfig
from ..models import (
    CopyPasteAnalysis,
    ExternalPasteAnalysis,
    FocusLossFlag,
    FocusLossPattern,
    IntegrityBand,
    IntegrityScore,
    ScoreBreakdown,
)

logger = logging.getLogger(__name__)


def _kind_key(kind: Union[str, Enum]) -> str:
    return kind.value if isinstance(kind, Enum) else str(kind)


def get_band(score: int, config: Optional[ScoringConfig] = None) -> IntegrityBand:
    """
    Convert score to review band.

    Args:
        score: Integrity score (0 or higher)

    Returns:
        'NONE' (0), 'LOW' (1-3), 'MEDIUM' (4-8) or 'HIGH' (above 8)
    """
    config = config or DEFAULT_SCORING_CONFIG

    if score <= 0:
        return IntegrityBand.NONE
    elif score <= config.low_band_max:
        return IntegrityBand.LOW
    elif score <= config.medium_band_max:
        return IntegrityBand.MEDIUM
    else:
        return IntegrityBand.HIGH


def compute_score_breakdown(
    event_counts: Mapping[Union[str, Enum], int],
    focus_pattern: FocusLossPattern,
    external_pastes: ExternalPasteAnalysis,
    copy_paste: CopyPasteAnalysis,
    config: Optional[ScoringConfig] = None,
) -> ScoreBreakdown:
    """
    Compute the integrity score with every intermediate term.

    Formula:
        raw_score      = 1 * FOCUS_LOST + 2 * TAB_SWITCH + 2 * FULLSCREEN_EXIT
        pair_bonus     = 2 * suspicious_pairs + 5 * strong_pairs
        base_score     = raw_score + pair_bonus
        pattern_bonus  = 30 (HIGHLY_SUSPICIOUS) or 15 (SUSPICIOUS)
        external_bonus = 5 * external_pastes
        score          = base_score + pattern_bonus + external_bonus

    COPY and PASTE counts weigh nothing; copy/paste risk enters only
    through the pair bonus.
    """
    config = config or DEFAULT_SCORING_CONFIG

    raw_score = 0
    for kind, count in event_counts.items():
        raw_score += config.weight_for(_kind_key(kind)) * count

    pair_bonus = (
        config.suspicious_pair_weight * copy_paste.suspicious_pairs
        + config.strong_pair_weight * copy_paste.strong_pairs
    )
    base_score = raw_score + pair_bonus

    if focus_pattern.flag == FocusLossFlag.HIGHLY_SUSPICIOUS:
        pattern_bonus = config.highly_suspicious_pattern_bonus
    elif focus_pattern.flag == FocusLossFlag.SUSPICIOUS:
        pattern_bonus = config.suspicious_pattern_bonus
    else:
        pattern_bonus = 0

    external_bonus = config.external_paste_penalty * external_pastes.external_pastes

    score = base_score + pattern_bonus + external_bonus

    logger.debug(
        f"raw={raw_score} pairs={pair_bonus} pattern={pattern_bonus} external={external_bonus} total={score}"
    )

    return ScoreBreakdown(
        raw_score=raw_score,
        pair_bonus=pair_bonus,
        base_score=base_score,
        pattern_bonus=pattern_bonus,
        external_bonus=external_bonus,
        score=score,
        band=get_band(score, config),
    )


def compute_integrity_score(
    event_counts: Mapping[Union[str, Enum], int],
    focus_pattern: FocusLossPattern,
    external_pastes: ExternalPasteAnalysis,
    copy_paste: CopyPasteAnalysis,
    config: Optional[ScoringConfig] = None,
) -> IntegrityScore:
    """
    Compute the composite integrity score and its band.

    Returns:
        IntegrityScore (0 or higher, higher is more suspicious)
    """
    return compute_score_breakdown(
        event_counts, focus_pattern, external_pastes, copy_paste, config
    ).to_score()
