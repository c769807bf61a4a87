"""
Similar-decision ranking.

The scorer is a plain callable so a different strategy (a learned model, for
instance) can be passed to rank_similar without touching its callers.
"""
from dataclasses import dataclass
from typing import Callable, Iterable

from domain.entities import Decision

CATEGORY_WEIGHT = 0.7
IMPACT_WEIGHT = 0.3
IMPACT_SPAN = 10
SIMILARITY_THRESHOLD = 0.5
SIMILAR_LIMIT = 5

SimilarityScorer = Callable[[Decision, Decision], float]


@dataclass
class ScoredDecision:
    decision: Decision
    similarity: float


def category_impact_similarity(
    reference: Decision,
    candidate: Decision,
    category_weight: float = CATEGORY_WEIGHT,
    impact_weight: float = IMPACT_WEIGHT,
) -> float:
    """Weighted category match plus impact-score closeness, in [0, 1]."""
    category_match = 1 if candidate.category == reference.category else 0
    impact_diff = abs(candidate.impact_score - reference.impact_score)
    return category_weight * category_match + impact_weight * (1 - impact_diff / IMPACT_SPAN)


def rank_similar(
    reference: Decision,
    pool: Iterable[Decision],
    scorer: SimilarityScorer = category_impact_similarity,
    threshold: float = SIMILARITY_THRESHOLD,
    limit: int = SIMILAR_LIMIT,
) -> list[ScoredDecision]:
    """
    Rank ``pool`` by similarity to ``reference``.

    The reference itself (matched by id) is skipped, scores at or below
    ``threshold`` are dropped, and ties keep their pool order.
    """
    scored = [
        ScoredDecision(decision=candidate, similarity=scorer(reference, candidate))
        for candidate in pool
        if candidate.id != reference.id
    ]
    kept = [s for s in scored if s.similarity > threshold]
    kept.sort(key=lambda s: s.similarity, reverse=True)
    return kept[:limit]
