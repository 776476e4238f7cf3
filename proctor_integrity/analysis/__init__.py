"""Event-log analyses"""

from .focus_loss import analyze_focus_loss, classify_ratio, find_bracketing_pair
from .copy_paste import analyze_copy_paste, pair_copy_paste_events
from .external_paste import analyze_external_pastes

__all__ = [
    "analyze_focus_loss",
    "classify_ratio",
    "find_bracketing_pair",
    "analyze_copy_paste",
    "pair_copy_paste_events",
    "analyze_external_pastes",
]
