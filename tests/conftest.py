from datetime import date

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, Session

from goal_tracker.database import create_db_and_tables, get_session, make_engine
from goal_tracker.main import app
from goal_tracker.models.goal import GoalCategory
from goal_tracker.schemas.goal import GoalRecord


@pytest.fixture
def engine():
    engine = make_engine("sqlite://", poolclass=StaticPool)
    create_db_and_tables(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)


@pytest.fixture
def client(engine):
    def override_get_session():
        with Session(engine) as session:
            yield session

    app.dependency_overrides[get_session] = override_get_session
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def make_goal():
    def _make_goal(id, completed=0, end_date="2024-01-01", category=GoalCategory.CAREER, **kwargs):
        return GoalRecord(
            id=id,
            title=kwargs.pop("title", f"Goal {id}"),
            category=category,
            completed=completed,
            end_date=date.fromisoformat(end_date),
            **kwargs,
        )
    return _make_goal
