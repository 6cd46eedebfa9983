"""Tests for table creation on a given engine."""

from sqlalchemy import inspect
from sqlalchemy.pool import StaticPool

from goal_tracker.database import create_db_and_tables, make_engine


def test_create_db_and_tables_on_given_engine():
    engine = make_engine("sqlite://", poolclass=StaticPool)

    create_db_and_tables(engine)

    columns = {column["name"] for column in inspect(engine).get_columns("goal")}
    assert {"id", "user_id", "title", "category", "completed", "end_date", "steps"} <= columns
