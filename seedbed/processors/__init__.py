"""Scoring and keyword processing.

The reality check pipeline lives in ``seedbed.processors.pipeline`` and is
imported from there, since it depends on the reasoning module which in turn
uses the keyword extractor here.
"""

from .saturation import (
    log_scale,
    round_half_up,
    calculate_raw_saturation,
    calculate_score,
    derive_saturation,
    compute_score,
    rank_top_artifacts
)
from .keywords import extract_keywords, fallback_queries

__all__ = [
    "log_scale", "round_half_up",
    "calculate_raw_saturation", "calculate_score",
    "derive_saturation", "compute_score", "rank_top_artifacts",
    "extract_keywords", "fallback_queries"
]
