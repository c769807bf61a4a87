from typing import Optional
from domain.config import get_pagination_config
from domain.entities import Decision, Page
from domain.exceptions import ValidationFailed, Violation, ViolationCode
from domain.interfaces import DecisionRepository
from application.service.base import StoreService


class ListDecisionsService(StoreService):
    def __init__(self, decision_repo: DecisionRepository, metrics_port=None, logging_port=None):
        super().__init__(metrics_port=metrics_port, logging_port=logging_port)
        self.decision_repo = decision_repo

    async def execute(
        self,
        page: int = 1,
        page_size: Optional[int] = None,
        search: Optional[str] = None,
        category: Optional[str] = None,
        status: Optional[str] = None,
    ) -> Page[Decision]:
        """
        List decisions newest first.

        Pages are 1-based. A page past the last one comes back empty with the
        real total, it is not an error.
        """
        config = get_pagination_config()
        page_size = config.default_page_size if page_size is None else page_size

        violations = []
        if page < 1:
            violations.append(Violation("page", ViolationCode.OUT_OF_RANGE, "Page must be at least 1"))
        if not 1 <= page_size <= config.max_page_size:
            violations.append(Violation(
                "limit", ViolationCode.OUT_OF_RANGE, f"Limit must be between 1 and {config.max_page_size}"
            ))
        if violations:
            error = ValidationFailed(violations)
            self._rejected("list", error, self._log(step="decision_list"))
            raise error

        result = await self.decision_repo.list_decisions(
            page=page,
            page_size=page_size,
            search=(search or "").strip() or None,
            category=category or None,
            status=status or None,
        )
        self._count("list", "success")
        return result
