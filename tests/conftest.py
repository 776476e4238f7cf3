"""
Pytest Configuration for Integrity Engine Tests
"""
import os
import sys
from datetime import datetime, timedelta, timezone

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from proctor_integrity.models import AnswerTimestamp, EventKind, ProctorEvent


BASE_TIME = datetime(2024, 1, 1, 10, 0, 0, tzinfo=timezone.utc)


def at(seconds: float) -> datetime:
    """Timestamp `seconds` after the attempt started"""
    return BASE_TIME + timedelta(seconds=seconds)


@pytest.fixture
def make_event():
    """Factory for proctor events at an offset from BASE_TIME"""
    def _make(kind, seconds, **metadata):
        return ProctorEvent(
            kind=EventKind(kind),
            timestamp=at(seconds),
            metadata=metadata or None,
        )
    return _make


@pytest.fixture
def make_answer():
    """Factory for answer save timestamps"""
    def _make(question_id, seconds):
        return AnswerTimestamp(question_id=question_id, saved_at=at(seconds))
    return _make


@pytest.fixture
def focus_episode(make_event):
    """Adjacent FOCUS_LOST/FOCUS_GAINED pair"""
    def _make(lost_at, gained_at):
        return [make_event("FOCUS_LOST", lost_at), make_event("FOCUS_GAINED", gained_at)]
    return _make
