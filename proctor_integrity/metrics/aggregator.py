"""
Event Aggregator - Tallies proctor events and flattens answer save times
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List

from ..models import AnswerRecord, AnswerTimestamp, EventKind, ProctorEvent

logger = logging.getLogger(__name__)


@dataclass
class EventTally:
    """
    Per-kind event counts for one attempt.

    Every EventKind is present in the counts, zero when never seen.
    """

    counts: Dict[str, int] = field(
        default_factory=lambda: {kind.value: 0 for kind in EventKind}
    )
    total: int = 0

    def update(self, event: ProctorEvent):
        """Record one event"""
        self.counts[event.kind.value] = self.counts.get(event.kind.value, 0) + 1
        self.total += 1

    def get_counts(self) -> Dict[str, int]:
        return dict(self.counts)


def count_events(events: Iterable[ProctorEvent]) -> Dict[str, int]:
    """
    Count events by kind.

    Returns:
        Dict keyed by kind value, e.g. {"FOCUS_LOST": 2, "TAB_SWITCH": 1, ...}
    """
    tally = EventTally()
    for event in events:
        tally.update(event)
    return tally.get_counts()


def collect_answer_timestamps(answers: Iterable[AnswerRecord]) -> List[AnswerTimestamp]:
    """
    Flatten answers into one save timestamp per autosaved segment.

    Segments that were never saved are skipped. Input order is preserved.
    """
    timestamps = []

    for answer in answers:
        for segment in answer.segments:
            if segment.autosaved_at is None:
                continue
            timestamps.append(AnswerTimestamp(
                question_id=answer.question_id,
                saved_at=segment.autosaved_at,
            ))

    logger.debug(f"Collected {len(timestamps)} answer save timestamps")
    return timestamps
