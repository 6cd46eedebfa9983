"""Tests for the Streamlit goal page."""

import json
from pathlib import Path
from unittest.mock import Mock, patch

import pytest
from streamlit.testing.v1 import AppTest

from goal_tracker.config import settings
from goal_tracker.services.goal_client import GoalClient
from goal_tracker.services.goal_view import GoalViewController

APP_PATH = str(Path(__file__).resolve().parent.parent / "goal_tracker" / "frontend" / "main.py")


@pytest.fixture
def app():
    return AppTest.from_file(APP_PATH, default_timeout=30)


@pytest.fixture
def signed_in_app(app, make_goal):
    client = Mock(spec=GoalClient)
    client.fetch_goals.return_value = [
        make_goal(1, completed=0, end_date="2024-03-01"),
        make_goal(2, completed=50, end_date="2024-06-01"),
        make_goal(3, completed=100, end_date="2024-01-01"),
    ]
    app.session_state["user"] = json.dumps({"user": {"id": 7}})
    app.session_state["goal_controller"] = GoalViewController(client)
    return app


def test_no_session_goes_to_entry_page(app):
    app.run()

    assert not app.exception
    assert app.session_state["current_page"] == settings.ENTRY_PAGE
    assert any(button.label == "Sign in" for button in app.button)


def test_sign_in_stores_session_and_loads_goals(app):
    app.run()

    app.number_input[0].set_value(7)
    with patch.object(GoalClient, "fetch_goals", return_value=[]) as fetch_goals:
        next(button for button in app.button if button.label == "Sign in").click().run()

    assert not app.exception
    assert json.loads(app.session_state["user"]) == {"user": {"id": 7}}
    assert app.session_state["current_page"] == "Goal Tracker"
    fetch_goals.assert_called_once_with(7)


def test_tabs_show_counts(signed_in_app):
    signed_in_app.run()

    assert not signed_in_app.exception
    assert [tab.label for tab in signed_in_app.tabs] == [
        "All (3)",
        "Not Started (1)",
        "In Progress (1)",
        "Completed (1)",
    ]
    signed_in_app.session_state["goal_controller"].client.fetch_goals.assert_called_once_with(7)


def test_signed_in_sidebar_has_no_entry_button(signed_in_app):
    signed_in_app.run()

    labels = [button.label for button in signed_in_app.sidebar.button]
    assert "🏠 Home" not in labels
    assert "🚪 Sign out" in labels
