import math

import pytest

from seedbed.database import (
    Evidence, GitHubEvidence, GitHubRepo, HackerNewsEvidence, NpmEvidence,
    SaturationLevel
)
from seedbed.processors import (
    log_scale,
    calculate_raw_saturation,
    calculate_score,
    compute_score,
    derive_saturation,
    rank_top_artifacts
)


def evidence(gh_count=0, gh_stars=0, hn_hits=0, npm_count=0) -> Evidence:
    return Evidence(
        github=GitHubEvidence(total_count=gh_count, max_stars=gh_stars),
        hacker_news=HackerNewsEvidence(total_hits=hn_hits),
        npm=NpmEvidence(total_count=npm_count)
    )


def repo(name: str, stars: int) -> GitHubRepo:
    return GitHubRepo(name=name, url=f"https://github.com/x/{name}", stars=stars)


def test_log_scale_endpoints():
    """
    WHY: The normalization must map 0 to 0 and the ceiling to exactly 1.
    """
    assert log_scale(0, 10_000) == 0
    assert log_scale(10_000, 10_000) == 1
    assert log_scale(10_000_000, 10_000) == 1
    assert 0 < log_scale(99, 10_000) < 1


def test_empty_market_scores_100_low():
    """
    WHY: Every provider failing yields all-zero evidence; the formula reads that
    as a wide-open market.
    """
    assert compute_score(Evidence()) == (100, SaturationLevel.LOW)
    assert compute_score(evidence()) == (100, SaturationLevel.LOW)


def test_everything_at_ceiling_scores_0_high():
    score, saturation = compute_score(evidence(10_000, 50_000, 5_000, 500))
    assert score == 0
    assert saturation == SaturationLevel.HIGH


def test_overshoot_is_clamped():
    """
    WHY: A signal far above its ceiling must not contribute more than its weight.
    """
    huge = evidence(10**9, 10**9, 10**9, 10**9)
    assert calculate_raw_saturation(huge) == pytest.approx(100)
    assert calculate_score(huge) == 0

    only_npm = evidence(npm_count=10**7)
    assert calculate_raw_saturation(only_npm) == pytest.approx(30)
    assert calculate_score(only_npm) == 70


def test_zero_count_contributes_nothing():
    assert calculate_raw_saturation(evidence(hn_hits=5_000)) == pytest.approx(20)
    assert calculate_score(evidence(hn_hits=5_000)) == 80


def test_github_count_scenario():
    """
    HOW: 99 repositories, nothing else.
    EXPECTED: log10(100)/log10(10001) is just under 0.5, contributing ~15 of 30,
    so the score is 85 and the space reads as open.
    """
    ev = evidence(gh_count=99)
    assert calculate_raw_saturation(ev) == pytest.approx(15, abs=0.01)
    assert compute_score(ev) == (85, SaturationLevel.LOW)


def test_score_is_deterministic():
    ev = evidence(1234, 567, 89, 10)
    assert compute_score(ev) == compute_score(ev)


@pytest.mark.parametrize("field", ["gh_count", "gh_stars", "hn_hits", "npm_count"])
def test_score_never_increases_with_more_evidence(field):
    base = {"gh_count": 40, "gh_stars": 300, "hn_hits": 12, "npm_count": 3}
    previous = calculate_score(evidence(**base))
    for value in [0, 1, 5, 50, 500, 5_000, 50_000, 500_000]:
        score = calculate_score(evidence(**{**base, field: value}))
        if value >= base[field]:
            assert score <= previous
            previous = score


@pytest.mark.parametrize("values", [
    (0, 0, 0, 0),
    (1, 1, 1, 1),
    (7, 0, 3, 999),
    (123456, 98765, 4321, 12),
    (10**12, 0, 0, 0),
])
def test_score_is_int_in_range(values):
    score = calculate_score(evidence(*values))
    assert isinstance(score, int)
    assert 0 <= score <= 100


@pytest.mark.parametrize("score,expected", [
    (100, SaturationLevel.LOW),
    (70, SaturationLevel.LOW),
    (69, SaturationLevel.MEDIUM),
    (40, SaturationLevel.MEDIUM),
    (39, SaturationLevel.HIGH),
    (0, SaturationLevel.HIGH),
])
def test_saturation_boundaries(score, expected):
    assert derive_saturation(score) == expected


def test_rounding_is_half_up():
    from seedbed.processors import round_half_up

    assert round_half_up(84.5) == 85
    assert round_half_up(85.5) == 86
    assert round_half_up(0.49) == 0

    ev = evidence(gh_count=3, hn_hits=2)
    raw = calculate_raw_saturation(ev)
    assert calculate_score(ev) == math.floor(100 - raw + 0.5)


def test_rank_top_artifacts_sorts_by_stars_and_caps_at_three():
    repos = [repo("a", 5), repo("b", 500), repo("c", 50), repo("d", 5000), repo("e", 1)]
    ranked = rank_top_artifacts(repos)
    assert [r.name for r in ranked] == ["d", "b", "c"]


def test_rank_top_artifacts_keeps_provider_order_on_ties():
    repos = [repo("first", 10), repo("second", 10), repo("third", 10), repo("fourth", 10)]
    assert [r.name for r in rank_top_artifacts(repos)] == ["first", "second", "third"]


def test_rank_top_artifacts_empty():
    assert rank_top_artifacts([]) == []
