"""
Integrity Logger - Logs analysis results for reviewer audit trails
"""

import logging
from typing import Dict, Any, Optional

logger = logging.getLogger(__name__)


def log_analysis_event(
    attempt_id: str,
    event_type: str,
    details: Optional[Dict[str, Any]] = None,
    level: str = "info"
):
    """
    Log an integrity analysis event.

    Args:
        attempt_id: Attempt being analyzed
        event_type: Type of event (scored, pattern_flagged, etc.)
        details: Optional event details
        level: Log level (debug, info, warning, error)
    """
    message = f"[INTEGRITY] attempt={attempt_id} event={event_type}"

    if details:
        detail_str = " ".join(f"{k}={v}" for k, v in details.items())
        message += f" {detail_str}"

    if level == "debug":
        logger.debug(message)
    elif level == "warning":
        logger.warning(message)
    elif level == "error":
        logger.error(message)
    else:
        logger.info(message)


def log_attempt_scored(attempt_id: str, score: int, band: str, total_events: int):
    """Log the final score of an attempt"""
    log_analysis_event(
        attempt_id=attempt_id,
        event_type="scored",
        details={
            "score": score,
            "band": band,
            "total_events": total_events
        }
    )


def log_focus_pattern_flagged(attempt_id: str, flag: str, ratio: float):
    """Log when the focus-loss correlation crosses a threshold"""
    log_analysis_event(
        attempt_id=attempt_id,
        event_type="pattern_flagged",
        details={
            "flag": flag,
            "ratio": round(ratio, 2)
        },
        level="warning"
    )
