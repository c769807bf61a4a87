from functools import partial
from typing import Optional
from domain.config import get_similarity_config
from domain.exceptions import NotFound
from domain.interfaces import DecisionRepository
from domain.services.similarity import ScoredDecision, SimilarityScorer, category_impact_similarity, rank_similar
from application.service.base import StoreService


class SimilarDecisionsService(StoreService):
    def __init__(
        self,
        decision_repo: DecisionRepository,
        scorer: Optional[SimilarityScorer] = None,
        metrics_port=None,
        logging_port=None,
    ):
        """
        Args:
            decision_repo: Repository providing the reference and the candidate pool
            scorer: Similarity strategy; defaults to the weighted category/impact
                heuristic with weights from SimilarityConfig
        """
        super().__init__(metrics_port=metrics_port, logging_port=logging_port)
        self.decision_repo = decision_repo
        self.scorer = scorer

    async def execute(self, decision_id: str) -> list[ScoredDecision]:
        decision_id = self._require_id(decision_id)
        reference = await self.decision_repo.get_decision(decision_id)
        if reference is None:
            raise NotFound("Decision", decision_id)

        config = get_similarity_config()
        scorer = self.scorer or partial(
            category_impact_similarity,
            category_weight=config.category_weight,
            impact_weight=config.impact_weight,
        )
        pool = await self.decision_repo.get_all_decisions()
        return rank_similar(reference, pool, scorer=scorer, threshold=config.threshold, limit=config.limit)
