from fastapi import APIRouter, Depends, Response, status

from application.service import GoalService
from domain.interfaces import GoalRepository, LoggingPort, MetricsPort
from app.dependencies import get_goal_repo, get_logging_port, get_metrics_port
from app.schemas.common import ErrorResponse
from app.schemas.goal_schema import GoalListResponse, GoalOut, GoalPayload, GoalResponse

router = APIRouter(prefix="/api", tags=["Goals"])

_errors = {
    400: {"model": ErrorResponse, "description": "Validation failed or malformed id"},
    404: {"model": ErrorResponse, "description": "Goal not found"},
    500: {"model": ErrorResponse, "description": "Storage failure"},
}


def get_goal_service(
    goal_repo: GoalRepository = Depends(get_goal_repo),
    metrics_port: MetricsPort = Depends(get_metrics_port),
    logging_port: LoggingPort = Depends(get_logging_port),
) -> GoalService:
    return GoalService(goal_repo, metrics_port=metrics_port, logging_port=logging_port)


@router.get("/goals", responses=_errors)
async def list_goals(srv: GoalService = Depends(get_goal_service)) -> GoalListResponse:
    goals = await srv.list_all()
    return GoalListResponse(goals=[GoalOut.from_domain(x) for x in goals])


@router.post("/goals", status_code=status.HTTP_201_CREATED, responses=_errors)
async def create_goal(
    payload: GoalPayload,
    srv: GoalService = Depends(get_goal_service),
) -> GoalResponse:
    goal = await srv.create(payload.to_payload())
    return GoalResponse(goal=GoalOut.from_domain(goal))


@router.get("/goals/{goal_id}", responses=_errors)
async def get_goal(goal_id: str, srv: GoalService = Depends(get_goal_service)) -> GoalResponse:
    return GoalResponse(goal=GoalOut.from_domain(await srv.get(goal_id)))


@router.patch("/goals/{goal_id}", responses=_errors)
async def update_goal(
    goal_id: str,
    payload: GoalPayload,
    srv: GoalService = Depends(get_goal_service),
) -> GoalResponse:
    goal = await srv.update(goal_id, payload.to_payload())
    return GoalResponse(goal=GoalOut.from_domain(goal))


@router.delete("/goals/{goal_id}", status_code=status.HTTP_204_NO_CONTENT, responses=_errors)
async def delete_goal(goal_id: str, srv: GoalService = Depends(get_goal_service)) -> Response:
    await srv.delete(goal_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
