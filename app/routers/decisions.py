from typing import Optional
from fastapi import APIRouter, Depends, Query, Response, status

from application.service import (
    CreateDecisionService,
    DeleteDecisionService,
    GetDecisionService,
    ListDecisionsService,
    SimilarDecisionsService,
    UpdateDecisionService,
)
from domain.interfaces import DecisionRepository, LoggingPort, MetricsPort
from app.dependencies import get_decision_repo, get_logging_port, get_metrics_port
from app.schemas.common import ErrorResponse
from app.schemas.decision_schema import (
    DecisionListResponse,
    DecisionOut,
    DecisionPayload,
    DecisionResponse,
    SimilarDecisionOut,
    SimilarDecisionsResponse,
)

router = APIRouter(prefix="/api", tags=["Decisions"])

_errors = {
    400: {"model": ErrorResponse, "description": "Validation failed or malformed id"},
    404: {"model": ErrorResponse, "description": "Decision not found"},
    500: {"model": ErrorResponse, "description": "Storage failure"},
}


@router.get("/decisions", responses=_errors)
async def list_decisions(
    page: int = Query(1, description="1-based page number"),
    limit: Optional[int] = Query(None, description="Page size"),
    search: Optional[str] = Query(None, description="Case-insensitive match on title or description"),
    category: Optional[str] = Query(None),
    status: Optional[str] = Query(None),
    decision_repo: DecisionRepository = Depends(get_decision_repo),
    metrics_port: MetricsPort = Depends(get_metrics_port),
    logging_port: LoggingPort = Depends(get_logging_port),
) -> DecisionListResponse:
    """
    List decisions newest first.

    Requesting a page past the last one returns an empty list with the real total.
    """
    srv = ListDecisionsService(decision_repo, metrics_port=metrics_port, logging_port=logging_port)
    result = await srv.execute(page=page, page_size=limit, search=search, category=category, status=status)
    return DecisionListResponse(
        decisions=[DecisionOut.from_domain(d) for d in result.items],
        total=result.total,
        pages=result.pages,
        current_page=result.page,
    )


@router.get("/decisions/{decision_id}", responses=_errors)
async def get_decision(
    decision_id: str,
    decision_repo: DecisionRepository = Depends(get_decision_repo),
    metrics_port: MetricsPort = Depends(get_metrics_port),
) -> DecisionResponse:
    srv = GetDecisionService(decision_repo, metrics_port=metrics_port)
    decision = await srv.execute(decision_id)
    return DecisionResponse(decision=DecisionOut.from_domain(decision))


@router.post("/decisions", status_code=status.HTTP_201_CREATED, responses=_errors)
async def create_decision(
    payload: DecisionPayload,
    decision_repo: DecisionRepository = Depends(get_decision_repo),
    metrics_port: MetricsPort = Depends(get_metrics_port),
    logging_port: LoggingPort = Depends(get_logging_port),
) -> DecisionResponse:
    """
    Create a decision.

    All violations are reported together as ``{"message", "errors"}`` with a 400.
    """
    srv = CreateDecisionService(decision_repo, metrics_port=metrics_port, logging_port=logging_port)
    decision = await srv.execute(payload.to_payload())
    return DecisionResponse(decision=DecisionOut.from_domain(decision))


@router.patch("/decisions/{decision_id}", responses=_errors)
async def update_decision(
    decision_id: str,
    payload: DecisionPayload,
    decision_repo: DecisionRepository = Depends(get_decision_repo),
    metrics_port: MetricsPort = Depends(get_metrics_port),
    logging_port: LoggingPort = Depends(get_logging_port),
) -> DecisionResponse:
    """
    Partially update a decision.

    Omitted fields keep their value; stakeholders and outcomes merge sub-field by
    sub-field. The merged record must still be a valid decision.
    """
    srv = UpdateDecisionService(decision_repo, metrics_port=metrics_port, logging_port=logging_port)
    decision = await srv.execute(decision_id, payload.to_payload())
    return DecisionResponse(decision=DecisionOut.from_domain(decision))


@router.delete("/decisions/{decision_id}", status_code=status.HTTP_204_NO_CONTENT, responses=_errors)
async def delete_decision(
    decision_id: str,
    decision_repo: DecisionRepository = Depends(get_decision_repo),
    metrics_port: MetricsPort = Depends(get_metrics_port),
    logging_port: LoggingPort = Depends(get_logging_port),
) -> Response:
    srv = DeleteDecisionService(decision_repo, metrics_port=metrics_port, logging_port=logging_port)
    await srv.execute(decision_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/decisions/{decision_id}/similar", responses=_errors)
async def similar_decisions(
    decision_id: str,
    decision_repo: DecisionRepository = Depends(get_decision_repo),
) -> SimilarDecisionsResponse:
    """Up to five decisions most similar to this one, each with its similarity score."""
    srv = SimilarDecisionsService(decision_repo)
    ranked = await srv.execute(decision_id)
    return SimilarDecisionsResponse(decisions=[SimilarDecisionOut.from_scored(s) for s in ranked])
