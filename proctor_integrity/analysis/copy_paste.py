"""
Copy/Paste Pair Classifier - Pairs COPY events with the PASTE that consumes them

Classification:
- STRONG: length mismatch WITH a tab switch or focus loss in between
- SUSPICIOUS: length mismatch WITHOUT an away-event
- OK: lengths match (counted only in total_pairs)
"""

import logging
from typing import Any, List, Optional, Sequence

from ..models import (
    CopyPasteAnalysis,
    CopyPastePair,
    EventKind,
    ProctorEvent,
    assert_chronological,
)

logger = logging.getLogger(__name__)

COPY_LENGTH_KEY = "selectionLength"
PASTE_LENGTH_KEY = "pasteLength"

AWAY_EVENTS = (EventKind.TAB_SWITCH, EventKind.FOCUS_LOST)


def _read_length(value: Any) -> Optional[int]:
    """Return a usable content length, or None for missing/malformed values."""
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    if value < 0:
        return None
    return value


def _has_away_event(events: Sequence[ProctorEvent], copy_index: int, paste_index: int) -> bool:
    copy_at = events[copy_index].timestamp
    paste_at = events[paste_index].timestamp

    return any(
        event.kind in AWAY_EVENTS and copy_at < event.timestamp < paste_at
        for event in events[copy_index + 1:paste_index]
    )


def pair_copy_paste_events(events: Sequence[ProctorEvent]) -> List[CopyPastePair]:
    """
    Pair each PASTE with the most recent unconsumed COPY.

    A newer COPY replaces a pending one, so the older copy is discarded.
    A PASTE with no pending COPY is not paired.

    Args:
        events: Proctor events sorted by timestamp

    Returns:
        Pairs in chronological order of their PASTE
    """
    assert_chronological(events)

    pairs: List[CopyPastePair] = []
    pending_copy: Optional[int] = None

    for index, event in enumerate(events):
        if event.kind == EventKind.COPY:
            pending_copy = index
        elif event.kind == EventKind.PASTE and pending_copy is not None:
            copy_event = events[pending_copy]
            copy_length = _read_length(copy_event.get_metadata(COPY_LENGTH_KEY))
            paste_length = _read_length(event.get_metadata(PASTE_LENGTH_KEY))

            length_mismatch = (
                copy_length is not None
                and paste_length is not None
                and copy_length != paste_length
            )
            # The away check only matters for mismatched pairs
            away = length_mismatch and _has_away_event(events, pending_copy, index)

            pairs.append(CopyPastePair(
                copy_at=copy_event.timestamp,
                paste_at=event.timestamp,
                length_mismatch=length_mismatch,
                has_intervening_away_event=away,
            ))
            pending_copy = None

    return pairs


def analyze_copy_paste(events: Sequence[ProctorEvent]) -> CopyPasteAnalysis:
    """
    Count copy/paste pairs by classification.

    Returns:
        CopyPasteAnalysis with total, suspicious and strong pair counts
    """
    pairs = pair_copy_paste_events(events)

    suspicious_pairs = sum(1 for pair in pairs if pair.is_suspicious)
    strong_pairs = sum(1 for pair in pairs if pair.is_strong)

    logger.debug(
        f"Copy/paste pairs: total={len(pairs)} suspicious={suspicious_pairs} strong={strong_pairs}"
    )

    return CopyPasteAnalysis(
        total_pairs=len(pairs),
        suspicious_pairs=suspicious_pairs,
        strong_pairs=strong_pairs,
    )
