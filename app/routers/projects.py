from fastapi import APIRouter, Depends, Response, status

from application.service import ProjectService
from domain.interfaces import ProjectRepository, LoggingPort, MetricsPort
from app.dependencies import get_project_repo, get_logging_port, get_metrics_port
from app.schemas.common import ErrorResponse
from app.schemas.project_schema import ProjectListResponse, ProjectOut, ProjectPayload, ProjectResponse

router = APIRouter(prefix="/api", tags=["Projects"])

_errors = {
    400: {"model": ErrorResponse, "description": "Validation failed or malformed id"},
    404: {"model": ErrorResponse, "description": "Project not found"},
    500: {"model": ErrorResponse, "description": "Storage failure"},
}


def get_project_service(
    project_repo: ProjectRepository = Depends(get_project_repo),
    metrics_port: MetricsPort = Depends(get_metrics_port),
    logging_port: LoggingPort = Depends(get_logging_port),
) -> ProjectService:
    return ProjectService(project_repo, metrics_port=metrics_port, logging_port=logging_port)


@router.get("/projects", responses=_errors)
async def list_projects(srv: ProjectService = Depends(get_project_service)) -> ProjectListResponse:
    projects = await srv.list_all()
    return ProjectListResponse(projects=[ProjectOut.from_domain(x) for x in projects])


@router.post("/projects", status_code=status.HTTP_201_CREATED, responses=_errors)
async def create_project(
    payload: ProjectPayload,
    srv: ProjectService = Depends(get_project_service),
) -> ProjectResponse:
    project = await srv.create(payload.to_payload())
    return ProjectResponse(project=ProjectOut.from_domain(project))


@router.get("/projects/{project_id}", responses=_errors)
async def get_project(project_id: str, srv: ProjectService = Depends(get_project_service)) -> ProjectResponse:
    return ProjectResponse(project=ProjectOut.from_domain(await srv.get(project_id)))


@router.patch("/projects/{project_id}", responses=_errors)
async def update_project(
    project_id: str,
    payload: ProjectPayload,
    srv: ProjectService = Depends(get_project_service),
) -> ProjectResponse:
    project = await srv.update(project_id, payload.to_payload())
    return ProjectResponse(project=ProjectOut.from_domain(project))


@router.delete("/projects/{project_id}", status_code=status.HTTP_204_NO_CONTENT, responses=_errors)
async def delete_project(project_id: str, srv: ProjectService = Depends(get_project_service)) -> Response:
    await srv.delete(project_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
