"""Goal view: bucket classification, display order, category filter and the
page state with its mutation operations against the Goal Service.

Local state only changes after the service acknowledges a call. Failures are
logged and leave the goal list as it was.
"""
from functools import cmp_to_key
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union
import json
import logging

import pandas as pd
from pydantic import BaseModel, Field

from goal_tracker.models.goal import ALL_CATEGORIES, GoalCategory, GoalStatus, GoalTab
from goal_tracker.schemas.goal import GoalDraft, GoalRecord
from goal_tracker.services.exceptions import GoalServiceError
from goal_tracker.services.goal_client import GoalClient

logger = logging.getLogger(__name__)

CategoryFilter = Union[GoalCategory, str]


def classify(goal) -> GoalStatus:
    if goal.completed == 0:
        return GoalStatus.NOT_STARTED
    if goal.completed == 100:
        return GoalStatus.COMPLETED
    return GoalStatus.IN_PROGRESS


def compare_goals(first, second) -> int:
    """Finished goals go last whatever their end date; otherwise the earlier
    end date comes first."""
    first_done = first.completed == 100
    second_done = second.completed == 100
    if first_done and second_done:
        return 0
    if first_done:
        return 1
    if second_done:
        return -1

    if first.end_date > second.end_date:
        return 1
    if first.end_date < second.end_date:
        return -1
    return 0


def sort_goals(goals: Sequence) -> list:
    return sorted(goals, key=cmp_to_key(compare_goals))


class GoalBuckets(BaseModel):
    not_started: List[Any] = Field(default_factory=list)
    in_progress: List[Any] = Field(default_factory=list)
    completed: List[Any] = Field(default_factory=list)

    def get(self, status: GoalStatus) -> list:
        return {
            GoalStatus.NOT_STARTED: self.not_started,
            GoalStatus.IN_PROGRESS: self.in_progress,
            GoalStatus.COMPLETED: self.completed,
        }[status]


def partition_goals(goals: Sequence) -> GoalBuckets:
    buckets = GoalBuckets()
    for goal in goals:
        buckets.get(classify(goal)).append(goal)
    return buckets


def filter_by_category(goals: Sequence, category: CategoryFilter = ALL_CATEGORIES) -> list:
    if category == ALL_CATEGORIES:
        return list(goals)
    return [goal for goal in goals if goal.category == category]


def goal_tabs(goals: Sequence, category: CategoryFilter = ALL_CATEGORIES) -> Dict[GoalTab, list]:
    """Goals shown under each tab, in display order and filtered by category."""
    ordered = sort_goals(goals)
    buckets = partition_goals(ordered)
    tabs = {
        GoalTab.ALL: ordered,
        GoalTab.NOT_STARTED: buckets.not_started,
        GoalTab.IN_PROGRESS: buckets.in_progress,
        GoalTab.COMPLETED: buckets.completed,
    }
    return {tab: filter_by_category(items, category) for tab, items in tabs.items()}


def tab_counts(goals: Sequence) -> Dict[GoalTab, int]:
    return {tab: len(items) for tab, items in goal_tabs(goals).items()}


def summarize_by_category(goals: Sequence) -> pd.DataFrame:
    """Per category: number of goals in each bucket and the mean completion."""
    statuses = [status.value for status in GoalStatus]
    if not goals:
        return pd.DataFrame(columns=["category"] + statuses + ["average_completed"])

    df = pd.DataFrame([
        {
            "category": GoalCategory(goal.category).value,
            "status": classify(goal).value,
            "completed": goal.completed,
        }
        for goal in goals
    ])
    summary = pd.crosstab(df["category"], df["status"]).reindex(columns=statuses, fill_value=0)
    summary["average_completed"] = df.groupby("category")["completed"].mean()

    # Keep the category select's order
    order = [c.value for c in GoalCategory if c.value in summary.index]
    summary = summary.reindex(index=order)
    summary.index.name = "category"
    summary.columns.name = None
    return summary.reset_index()


class GoalViewState(BaseModel):
    user_id: int = -1
    goals: List[GoalRecord] = Field(default_factory=list)
    selected_category: CategoryFilter = ALL_CATEGORIES


def read_session_user_id(storage: Mapping[str, Any]) -> Optional[int]:
    """User id from the stored session record, or None when there is no usable one.

    The record lives under ``"user"`` either as JSON text or as a dict shaped
    ``{"user": {"id": ...}}``.
    """
    record = storage.get("user")
    if not record:
        return None
    try:
        if isinstance(record, str):
            record = json.loads(record)
        return int(record["user"]["id"])
    except (ValueError, KeyError, TypeError) as e:
        logger.warning(f"Ignoring unreadable session record: {e}")
        return None


class GoalViewController:
    """Owns the goal page state and applies Goal Service results to it."""

    def __init__(self, client: Optional[GoalClient] = None, state: Optional[GoalViewState] = None):
        self.client = client or GoalClient()
        self.state = state or GoalViewState()
        self._bootstrapped = False

    def bootstrap(self, storage: Mapping[str, Any]) -> bool:
        """Load the session's goals once. False means there is no session and
        the caller should send the visitor to the entry page."""
        if self._bootstrapped:
            return True

        user_id = read_session_user_id(storage)
        if user_id is None:
            return False

        self.state.user_id = user_id
        self._bootstrapped = True
        self.refresh()
        return True

    def refresh(self) -> bool:
        try:
            goals = self.client.fetch_goals(self.state.user_id)
        except GoalServiceError as e:
            logger.error(f"Error fetching goals for user {self.state.user_id}: {e}")
            return False
        self.state.goals = goals
        return True

    def add_goal(self, draft: GoalDraft) -> Optional[GoalRecord]:
        try:
            goal = self.client.add_goal(draft, self.state.user_id)
        except GoalServiceError as e:
            logger.error(f"Error adding goal {draft.title!r}: {e}")
            return None
        self.state.goals = self.state.goals + [goal]
        return goal

    def edit_goal(self, goal: GoalRecord) -> Optional[GoalRecord]:
        try:
            echoed = self.client.edit_goal(goal)
            updated = GoalRecord.model_validate({**goal.model_dump(by_alias=True), **echoed})
        except GoalServiceError as e:
            logger.error(f"Error updating goal {goal.id}: {e}")
            return None
        except ValueError as e:
            logger.error(f"Error updating goal {goal.id}: invalid echoed values: {e}")
            return None

        others = [g for g in self.state.goals if g.id != goal.id]
        self.state.goals = sort_goals(others + [updated])
        return updated

    def delete_goal(self, goal_id: int) -> bool:
        try:
            self.client.delete_goal(goal_id)
        except GoalServiceError as e:
            logger.error(f"Error deleting goal {goal_id}: {e}")
            return False
        self.state.goals = [g for g in self.state.goals if g.id != goal_id]
        return True

    def select_category(self, category: CategoryFilter) -> None:
        self.state.selected_category = category

    def tabs(self) -> Dict[GoalTab, list]:
        return goal_tabs(self.state.goals, self.state.selected_category)

    def counts(self) -> Dict[GoalTab, int]:
        return tab_counts(self.state.goals)
