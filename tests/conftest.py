"""
Shared fixtures: in-memory repositories for the API tests and an aiosqlite
session for the SQLAlchemy repository tests.
"""
import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from app.dependencies import get_decision_repo, get_goal_repo, get_project_repo
from app.main import app
from domain.config import reload_config
from infrastructure.db.database import init_models
from factories import InMemoryDecisionRepo, InMemoryGoalRepo, InMemoryProjectRepo


@pytest.fixture(autouse=True)
def fresh_config():
    """Config is cached per process; re-read it around every test."""
    reload_config()
    yield
    reload_config()


@pytest.fixture
def decision_repo():
    return InMemoryDecisionRepo()


@pytest.fixture
def goal_repo():
    return InMemoryGoalRepo()


@pytest.fixture
def project_repo():
    return InMemoryProjectRepo()


@pytest.fixture
def client(decision_repo, goal_repo, project_repo):
    """
    Test client for the FastAPI app backed by in-memory repositories.

    Not used as a context manager so the lifespan (table creation) never runs.
    """
    app.dependency_overrides[get_decision_repo] = lambda: decision_repo
    app.dependency_overrides[get_goal_repo] = lambda: goal_repo
    app.dependency_overrides[get_project_repo] = lambda: project_repo
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def db_session():
    """A fresh in-memory SQLite database per test."""
    engine = create_async_engine("sqlite+aiosqlite:///:memory:", poolclass=StaticPool)
    await init_models(bind=engine)
    session_factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with session_factory() as session:
        yield session
    await engine.dispose()
