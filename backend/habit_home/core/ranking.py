"""
Ranking Selection

Picks the best and second-best scored surfaces.
"""

from typing import List, Sequence

from habit_home.models.recommendation import RecommendationResult, ScoredCandidate


def rank_candidates(scored: Sequence[ScoredCandidate]) -> List[ScoredCandidate]:
    """Order by ascending score; equal scores keep ascending object index."""
    return sorted(scored, key=lambda s: (s.score, s.source_object_index))


def result_from_ranked(ranked: Sequence[ScoredCandidate]) -> RecommendationResult:
    """Take the first two entries of an already ranked list."""
    if not ranked:
        return RecommendationResult()
    return RecommendationResult(
        best=ranked[0],
        second_best=ranked[1] if len(ranked) > 1 else None,
    )


def select_best(scored: Sequence[ScoredCandidate]) -> RecommendationResult:
    """
    Build the best / second-best result.

    Returns:
        RecommendationResult with ``best`` and ``second_best`` set when
        at least one (resp. two) candidates exist, otherwise None.
    """
    return result_from_ranked(rank_candidates(scored))
