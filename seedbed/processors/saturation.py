"""Market saturation scoring."""

from typing import List, Sequence, Tuple
import math

from ..database import Evidence, GitHubRepo, SaturationLevel
from ..utils import SATURATION_SIGNALS, SATURATION_THRESHOLDS, TOP_PROJECTS_LIMIT


def log_scale(value: float, ceiling: float) -> float:
    """
    Normalize a raw count to [0, 1] on a log scale.

    0 maps to 0 and ``ceiling`` maps to 1. Counts span several orders of
    magnitude, so anything above the ceiling is clamped rather than
    stretching the scale.
    """
    return min(math.log10(value + 1) / math.log10(ceiling + 1), 1.0)


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def calculate_raw_saturation(evidence: Evidence) -> float:
    """Weighted sum of the scaled signals, in [0, 100]."""
    values = {
        "github_count": evidence.github.total_count,
        "github_stars": evidence.github.max_stars,
        "hacker_news_hits": evidence.hacker_news.total_hits,
        "npm_count": evidence.npm.total_count,
    }
    return sum(
        log_scale(values[key], signal["ceiling"]) * signal["weight"]
        for key, signal in SATURATION_SIGNALS.items()
    )


def calculate_score(evidence: Evidence) -> int:
    """
    Opportunity score between 0 and 100.

    Inverted saturation: 100 means nothing similar was found,
    0 means every signal is at or above its ceiling.
    """
    score = round_half_up(100 - calculate_raw_saturation(evidence))
    return max(0, min(100, score))


def derive_saturation(score: int) -> SaturationLevel:
    """Bucket a score: >=70 low, >=40 medium, otherwise high."""
    for threshold, level in SATURATION_THRESHOLDS:
        if score >= threshold:
            return SaturationLevel(level)
    return SaturationLevel.HIGH


def compute_score(evidence: Evidence) -> Tuple[int, SaturationLevel]:
    """Score evidence and derive its saturation label."""
    score = calculate_score(evidence)
    return score, derive_saturation(score)


def rank_top_artifacts(
    repos: Sequence[GitHubRepo],
    limit: int = TOP_PROJECTS_LIMIT
) -> List[GitHubRepo]:
    """Most starred repositories first. Ties keep the provider's order."""
    return sorted(repos, key=lambda r: r.stars, reverse=True)[:limit]
