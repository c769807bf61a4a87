# use cases test

import pytest

from application.service import (
    CreateDecisionService,
    DashboardService,
    DecisionMetricsService,
    DeleteDecisionService,
    GetDecisionService,
    GoalService,
    ListDecisionsService,
    ProjectService,
    SimilarDecisionsService,
    UpdateDecisionService,
)
from domain.entities import Page
from domain.exceptions import InvalidIdentifier, NotFound, ServerFault, ValidationFailed
from domain.interfaces import DecisionRepository, GoalRepository, MetricsPort, ProjectRepository
from factories import decision_payload, make_decision, utc

MISSING_ID = "6f1e3b0a-5c4d-4e2f-8a9b-0c1d2e3f4a5b"


@pytest.fixture
def mock_decision_repo(mocker):
    """Fixture to create a mock of the repository using pytest-mock"""
    mock_repo = mocker.AsyncMock(spec=DecisionRepository)
    mock_repo.get_decision.return_value = None
    mock_repo.delete_decision.return_value = False
    mock_repo.get_all_decisions.return_value = []
    return mock_repo


@pytest.fixture
def mock_metrics(mocker):
    return mocker.Mock(spec=MetricsPort)


@pytest.mark.asyncio
async def test_create_decision_saves_and_counts(mock_decision_repo, mock_metrics):
    service = CreateDecisionService(mock_decision_repo, metrics_port=mock_metrics)
    decision = await service.execute(decision_payload())

    mock_decision_repo.save_decision.assert_awaited_once_with(decision)
    assert decision.status == "active"
    assert decision.created_at == decision.updated_at
    mock_metrics.increment_operation.assert_called_once_with(entity="decision", operation="create", outcome="success")


@pytest.mark.asyncio
async def test_create_decision_invalid_never_writes(mock_decision_repo, mock_metrics):
    service = CreateDecisionService(mock_decision_repo, metrics_port=mock_metrics)
    with pytest.raises(ValidationFailed) as exc_info:
        await service.execute(decision_payload(title="", impact_score=0))

    assert exc_info.value.fields() == {"title", "impact_score"}
    mock_decision_repo.save_decision.assert_not_awaited()
    mock_metrics.increment_operation.assert_called_once_with(entity="decision", operation="create", outcome="invalid")
    codes = sorted(c.kwargs["code"] for c in mock_metrics.increment_validation_failure.call_args_list)
    assert codes == ["OutOfRange", "RequiredFieldMissing"]


@pytest.mark.asyncio
async def test_create_decision_store_failure_propagates(mock_decision_repo, mock_metrics):
    mock_decision_repo.save_decision.side_effect = ServerFault("Database error while trying to save decision")
    service = CreateDecisionService(mock_decision_repo, metrics_port=mock_metrics)
    with pytest.raises(ServerFault):
        await service.execute(decision_payload())
    mock_metrics.increment_operation.assert_called_once_with(entity="decision", operation="create", outcome="error")


@pytest.mark.asyncio
async def test_get_decision(mock_decision_repo):
    stored = make_decision()
    mock_decision_repo.get_decision.return_value = stored
    assert await GetDecisionService(mock_decision_repo).execute(stored.id.upper()) is stored
    mock_decision_repo.get_decision.assert_awaited_once_with(stored.id)


@pytest.mark.asyncio
async def test_get_decision_malformed_id_skips_store(mock_decision_repo):
    with pytest.raises(InvalidIdentifier):
        await GetDecisionService(mock_decision_repo).execute("42")
    mock_decision_repo.get_decision.assert_not_awaited()


@pytest.mark.asyncio
async def test_get_decision_not_found(mock_decision_repo):
    with pytest.raises(NotFound) as exc_info:
        await GetDecisionService(mock_decision_repo).execute(MISSING_ID)
    assert exc_info.value.message == "Decision not found"


@pytest.mark.asyncio
async def test_update_merges_and_refreshes_updated_at(mock_decision_repo):
    stored = make_decision(created_at=utc(2024, 1, 1))
    mock_decision_repo.get_decision.return_value = stored

    updated = await UpdateDecisionService(mock_decision_repo).execute(
        stored.id, {"title": "Switch teams in Q3", "stakeholders": {"impact_analysis": "Two sprints of handover"}}
    )

    assert updated.title == "Switch teams in Q3"
    assert updated.description == stored.description
    assert updated.stakeholders.impact_analysis == "Two sprints of handover"
    assert updated.stakeholders.key_stakeholders == stored.stakeholders.key_stakeholders
    assert updated.created_at == stored.created_at
    assert updated.updated_at > stored.updated_at
    mock_decision_repo.update_decision.assert_awaited_once_with(updated)


@pytest.mark.asyncio
async def test_update_rejects_invalid_merge(mock_decision_repo):
    mock_decision_repo.get_decision.return_value = make_decision()
    with pytest.raises(ValidationFailed) as exc_info:
        await UpdateDecisionService(mock_decision_repo).execute(MISSING_ID, {"urgency_level": 9})
    assert exc_info.value.fields() == {"urgency_level"}
    mock_decision_repo.update_decision.assert_not_awaited()


@pytest.mark.asyncio
async def test_update_missing_decision(mock_decision_repo):
    with pytest.raises(NotFound):
        await UpdateDecisionService(mock_decision_repo).execute(MISSING_ID, {"title": "x"})


@pytest.mark.asyncio
async def test_delete_twice_is_not_found(mock_decision_repo):
    mock_decision_repo.delete_decision.side_effect = [True, False]
    service = DeleteDecisionService(mock_decision_repo)
    await service.execute(MISSING_ID)
    with pytest.raises(NotFound):
        await service.execute(MISSING_ID)


@pytest.mark.asyncio
async def test_list_defaults_and_filters(mock_decision_repo):
    mock_decision_repo.list_decisions.return_value = Page(items=[], total=0, page=1, page_size=10)
    await ListDecisionsService(mock_decision_repo).execute(search="  team ", category="", status="active")
    mock_decision_repo.list_decisions.assert_awaited_once_with(
        page=1, page_size=10, search="team", category=None, status="active"
    )


@pytest.mark.asyncio
@pytest.mark.parametrize("page,limit,fields", [
    (0, None, {"page"}),
    (1, 0, {"limit"}),
    (1, 1001, {"limit"}),
    (-1, -5, {"page", "limit"}),
])
async def test_list_rejects_bad_paging(mock_decision_repo, page, limit, fields):
    with pytest.raises(ValidationFailed) as exc_info:
        await ListDecisionsService(mock_decision_repo).execute(page=page, page_size=limit)
    assert exc_info.value.fields() == fields
    mock_decision_repo.list_decisions.assert_not_awaited()


@pytest.mark.asyncio
async def test_similar_decisions(mock_decision_repo):
    reference = make_decision(category="career", impact_score=7)
    twin = make_decision(category="career", impact_score=7)
    unrelated = make_decision(category="financial", impact_score=1, affected_areas=["financial"])
    mock_decision_repo.get_decision.return_value = reference
    mock_decision_repo.get_all_decisions.return_value = [reference, unrelated, twin]

    ranked = await SimilarDecisionsService(mock_decision_repo).execute(reference.id)

    assert [s.decision.id for s in ranked] == [twin.id]
    assert ranked[0].similarity == pytest.approx(1.0)


@pytest.mark.asyncio
async def test_similar_decisions_unknown_reference(mock_decision_repo):
    with pytest.raises(NotFound):
        await SimilarDecisionsService(mock_decision_repo).execute(MISSING_ID)


@pytest.mark.asyncio
async def test_metrics_and_dashboard_services(mocker, mock_decision_repo):
    mock_decision_repo.get_all_decisions.return_value = [
        make_decision(created_at=utc(2024, 6, 1), impact_score=9),
        make_decision(created_at=utc(2024, 5, 1), impact_score=4),
    ]
    goal_repo = mocker.AsyncMock(spec=GoalRepository)
    goal_repo.count_goals.return_value = 3
    project_repo = mocker.AsyncMock(spec=ProjectRepository)
    project_repo.count_projects.return_value = 0

    metrics = await DecisionMetricsService(mock_decision_repo).execute(now=utc(2024, 6, 15))
    assert metrics["average_impact_score"] == 6.5
    assert metrics["risk_analysis"] == {"high_risk": 1, "medium_risk": 0, "low_risk": 1}

    summary = await DashboardService(mock_decision_repo, goal_repo, project_repo).execute(now=utc(2024, 6, 15))
    assert (summary["decisions"], summary["goals"], summary["projects"]) == (2, 3, 0)
    assert summary["high_impact_decisions"] == 1


@pytest.mark.asyncio
async def test_goal_service_round_trip(mocker):
    goal_repo = mocker.AsyncMock(spec=GoalRepository)
    goal_repo.save_goal.side_effect = lambda goal: goal
    goal_repo.update_goal.side_effect = lambda goal: goal
    service = GoalService(goal_repo)

    goal = await service.create({"title": "Emergency fund", "progress": 10})
    goal_repo.get_goal.return_value = goal
    updated = await service.update(goal.id, {"progress": 55})

    assert updated.title == "Emergency fund"
    assert updated.progress == 55

    with pytest.raises(ValidationFailed):
        await service.update(goal.id, {"progress": 101})


@pytest.mark.asyncio
async def test_project_service_rejects_and_deletes(mocker):
    project_repo = mocker.AsyncMock(spec=ProjectRepository)
    project_repo.delete_project.return_value = False
    service = ProjectService(project_repo)

    with pytest.raises(ValidationFailed) as exc_info:
        await service.create({"team": -1})
    assert exc_info.value.fields() == {"name", "team"}
    project_repo.save_project.assert_not_awaited()

    with pytest.raises(NotFound):
        await service.delete(MISSING_ID)
