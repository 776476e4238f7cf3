"""
External-Paste Tally - Splits paste events by upstream-flagged provenance
"""

from typing import Iterable

from ..models import EventKind, ExternalPasteAnalysis, ProctorEvent

EXTERNAL_FLAG_KEY = "isExternal"


def analyze_external_pastes(events: Iterable[ProctorEvent]) -> ExternalPasteAnalysis:
    """
    Count external vs internal pastes.

    Only a literal boolean True marks a paste as external. False, missing
    and non-boolean values all count as internal.
    """
    external_pastes = 0
    internal_pastes = 0

    for event in events:
        if event.kind != EventKind.PASTE:
            continue

        if event.get_metadata(EXTERNAL_FLAG_KEY) is True:
            external_pastes += 1
        else:
            internal_pastes += 1

    return ExternalPasteAnalysis(
        external_pastes=external_pastes,
        internal_pastes=internal_pastes,
    )
