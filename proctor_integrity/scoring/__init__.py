"""Scoring modules"""

from .integrity_scorer import compute_integrity_score, compute_score_breakdown, get_band
from .report import analyze_attempt, rank_attempts, summarize_history

__all__ = [
    "compute_integrity_score",
    "compute_score_breakdown",
    "get_band",
    "analyze_attempt",
    "rank_attempts",
    "summarize_history",
]
