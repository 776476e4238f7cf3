"""
Tests for the External-Paste Tally
"""
import pytest

from proctor_integrity.analysis import analyze_external_pastes
from proctor_integrity.models import ExternalPasteAnalysis


class TestExternalPastes:
    """Only a literal True marks a paste as external"""

    def test_empty(self):
        assert analyze_external_pastes([]) == ExternalPasteAnalysis(
            external_pastes=0, internal_pastes=0
        )

    def test_external_and_internal(self, make_event):
        events = [
            make_event("PASTE", 0, isExternal=True),
            make_event("PASTE", 1, isExternal=False),
            make_event("PASTE", 2, isExternal=True),
        ]

        result = analyze_external_pastes(events)

        assert result.external_pastes == 2
        assert result.internal_pastes == 1

    def test_missing_flag_counts_as_internal(self, make_event):
        result = analyze_external_pastes([make_event("PASTE", 0)])

        assert result.external_pastes == 0
        assert result.internal_pastes == 1

    @pytest.mark.parametrize("value", ["true", 1, "yes", None])
    def test_non_boolean_counts_as_internal(self, make_event, value):
        result = analyze_external_pastes([make_event("PASTE", 0, isExternal=value)])

        assert result.external_pastes == 0
        assert result.internal_pastes == 1

    def test_non_paste_events_ignored(self, make_event):
        events = [
            make_event("COPY", 0, isExternal=True),
            make_event("TAB_SWITCH", 1, isExternal=True),
        ]

        result = analyze_external_pastes(events)

        assert result.external_pastes == 0
        assert result.internal_pastes == 0
