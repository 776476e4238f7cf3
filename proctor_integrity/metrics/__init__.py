"""Event aggregation"""

from .aggregator import EventTally, collect_answer_timestamps, count_events

__all__ = ["EventTally", "collect_answer_timestamps", "count_events"]
