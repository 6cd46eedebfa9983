from typing import Any, Dict, List, Optional
import logging

import requests
from pydantic import ValidationError

from goal_tracker.config import build_path, settings
from goal_tracker.schemas.goal import GoalDraft, GoalRecord, parse_steps
from goal_tracker.services.exceptions import (
    GoalParseError,
    GoalRequestError,
)

logger = logging.getLogger(__name__)


class GoalClient:
    """REST+JSON client for the Goal Service (``/api/goals``)."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
    ):
        self.base_url = base_url.rstrip("/") if base_url else None
        self.session = session or requests.Session()
        self.timeout = timeout if timeout is not None else settings.REQUEST_TIMEOUT
        self.headers = {"Content-Type": "application/json"}

    def _url(self, route: str) -> str:
        if self.base_url:
            return f"{self.base_url}/{route.lstrip('/')}"
        return build_path(route)

    def _request(self, method: str, route: str, body: Optional[Dict[str, Any]] = None) -> Any:
        url = self._url(route)
        try:
            response = self.session.request(
                method,
                url,
                json=body,
                headers=self.headers,
                timeout=self.timeout,
            )
            response.raise_for_status()
        except requests.HTTPError as e:
            status_code = e.response.status_code if e.response is not None else None
            raise GoalRequestError(f"{method} {url} returned {status_code}", status_code) from e
        except requests.RequestException as e:
            raise GoalRequestError(f"{method} {url} failed: {e}") from e

        try:
            return response.json()
        except ValueError as e:
            raise GoalParseError(f"{method} {url} did not return JSON: {e}") from e

    def fetch_goals(self, user_id: int) -> List[GoalRecord]:
        """Get every goal of a user"""
        logger.info(f"Fetching goals for user {user_id}")
        data = self._request("GET", f"api/goals/{user_id}")
        if not isinstance(data, list):
            raise GoalParseError(f"expected a list of goals, got {type(data).__name__}")
        return [_to_record(item) for item in data]

    def add_goal(self, draft: GoalDraft, user_id: int) -> GoalRecord:
        """Create a goal; returns the record with its server assigned id"""
        body = {**draft.to_wire(), "userId": user_id}
        data = self._request("POST", "api/goals", body)
        if not isinstance(data, dict) or "goal" not in data:
            raise GoalParseError("create response has no 'goal'")
        return _to_record(data["goal"])

    def edit_goal(self, goal: GoalRecord) -> Dict[str, Any]:
        """Replace a goal; returns the fields the service echoed back.

        The steps field, when echoed, is decoded from its text form. A steps
        value that does not decode raises ``StepsParseError``.
        """
        data = self._request("PUT", "api/goals", goal.to_wire())
        if not isinstance(data, dict):
            raise GoalParseError(f"expected an object, got {type(data).__name__}")
        if "steps" in data:
            data["steps"] = parse_steps(data["steps"])
        return data

    def delete_goal(self, goal_id: int) -> Dict[str, Any]:
        """Delete a goal"""
        data = self._request("DELETE", f"api/goals/{goal_id}")
        return data if isinstance(data, dict) else {"result": data}


def _to_record(payload: Any) -> GoalRecord:
    if not isinstance(payload, dict):
        raise GoalParseError(f"expected a goal object, got {type(payload).__name__}")
    try:
        return GoalRecord.model_validate(payload)
    except ValidationError as e:
        raise GoalParseError(f"invalid goal payload: {e}") from e
