"""
Tests for the Copy/Paste Pair Classifier
"""
import pytest

from proctor_integrity.analysis import analyze_copy_paste, pair_copy_paste_events
from proctor_integrity.models import CopyPasteAnalysis


class TestPairing:
    """Pairing rule: one pending COPY, replaced by newer copies"""

    def test_empty(self):
        assert analyze_copy_paste([]) == CopyPasteAnalysis(
            total_pairs=0, suspicious_pairs=0, strong_pairs=0
        )

    def test_single_pair(self, make_event):
        events = [
            make_event("COPY", 0, selectionLength=10),
            make_event("PASTE", 5, pasteLength=10),
        ]

        result = analyze_copy_paste(events)

        assert result.total_pairs == 1
        assert result.suspicious_pairs == 0
        assert result.strong_pairs == 0

    def test_older_copy_discarded(self, make_event):
        events = [
            make_event("COPY", 0, selectionLength=10),
            make_event("COPY", 2, selectionLength=20),
            make_event("PASTE", 5, pasteLength=20),
        ]

        pairs = pair_copy_paste_events(events)

        assert len(pairs) == 1
        assert pairs[0].copy_at == events[1].timestamp
        assert pairs[0].length_mismatch is False

    def test_paste_without_copy_not_paired(self, make_event):
        events = [make_event("PASTE", 0, pasteLength=5)]

        assert analyze_copy_paste(events).total_pairs == 0

    def test_copy_consumed_by_first_paste(self, make_event):
        events = [
            make_event("COPY", 0, selectionLength=10),
            make_event("PASTE", 5, pasteLength=10),
            make_event("PASTE", 6, pasteLength=10),
        ]

        assert analyze_copy_paste(events).total_pairs == 1

    def test_multiple_pairs(self, make_event):
        events = [
            make_event("COPY", 0, selectionLength=10),
            make_event("PASTE", 5, pasteLength=10),
            make_event("COPY", 10, selectionLength=3),
            make_event("PASTE", 15, pasteLength=3),
        ]

        assert analyze_copy_paste(events).total_pairs == 2


class TestClassification:
    """Mismatched pairs are strong with an away-event, suspicious without"""

    def test_mismatch_without_away_event_is_suspicious(self, make_event):
        events = [
            make_event("COPY", 0, selectionLength=10),
            make_event("PASTE", 5, pasteLength=12),
        ]

        result = analyze_copy_paste(events)

        assert result.suspicious_pairs == 1
        assert result.strong_pairs == 0

    @pytest.mark.parametrize("away_kind", ["TAB_SWITCH", "FOCUS_LOST"])
    def test_mismatch_with_away_event_is_strong(self, make_event, away_kind):
        events = [
            make_event("COPY", 0, selectionLength=10),
            make_event(away_kind, 2),
            make_event("PASTE", 5, pasteLength=500),
        ]

        result = analyze_copy_paste(events)

        assert result.total_pairs == 1
        assert result.strong_pairs == 1
        assert result.suspicious_pairs == 0

    def test_other_events_are_not_away_events(self, make_event):
        events = [
            make_event("COPY", 0, selectionLength=10),
            make_event("FULLSCREEN_EXIT", 2),
            make_event("FOCUS_GAINED", 3),
            make_event("PASTE", 5, pasteLength=11),
        ]

        result = analyze_copy_paste(events)

        assert result.suspicious_pairs == 1
        assert result.strong_pairs == 0

    def test_away_event_at_copy_time_is_not_between(self, make_event):
        events = [
            make_event("COPY", 0, selectionLength=10),
            make_event("TAB_SWITCH", 0),
            make_event("PASTE", 5, pasteLength=11),
        ]

        pairs = pair_copy_paste_events(events)

        assert pairs[0].has_intervening_away_event is False
        assert pairs[0].is_suspicious

    def test_away_event_with_matching_lengths_is_benign(self, make_event):
        events = [
            make_event("COPY", 0, selectionLength=10),
            make_event("TAB_SWITCH", 2),
            make_event("PASTE", 5, pasteLength=10),
        ]

        result = analyze_copy_paste(events)

        assert result.total_pairs == 1
        assert result.suspicious_pairs == 0
        assert result.strong_pairs == 0

    def test_away_event_before_discarded_copy_ignored(self, make_event):
        events = [
            make_event("COPY", 0, selectionLength=10),
            make_event("TAB_SWITCH", 1),
            make_event("COPY", 2, selectionLength=10),
            make_event("PASTE", 5, pasteLength=11),
        ]

        result = analyze_copy_paste(events)

        assert result.suspicious_pairs == 1
        assert result.strong_pairs == 0


class TestMalformedMetadata:
    """Missing or malformed lengths never produce a mismatch"""

    @pytest.mark.parametrize("copy_meta,paste_meta", [
        ({}, {"pasteLength": 5}),
        ({"selectionLength": 5}, {}),
        ({"selectionLength": "5"}, {"pasteLength": 6}),
        ({"selectionLength": True}, {"pasteLength": 6}),
        ({"selectionLength": -1}, {"pasteLength": 6}),
        ({"selectionLength": 5}, {"pasteLength": None}),
    ])
    def test_no_mismatch(self, make_event, copy_meta, paste_meta):
        events = [
            make_event("COPY", 0, **copy_meta),
            make_event("TAB_SWITCH", 1),
            make_event("PASTE", 5, **paste_meta),
        ]

        result = analyze_copy_paste(events)

        assert result.total_pairs == 1
        assert result.suspicious_pairs == 0
        assert result.strong_pairs == 0

    def test_idempotent(self, make_event):
        events = [
            make_event("COPY", 0, selectionLength=10),
            make_event("TAB_SWITCH", 1),
            make_event("PASTE", 5, pasteLength=11),
        ]

        assert analyze_copy_paste(events) == analyze_copy_paste(events)
