from typing import Optional


class GoalServiceError(Exception):
    """Base error for calls to the Goal Service."""


class GoalRequestError(GoalServiceError):
    """The request failed in transport or came back with an error status."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class GoalParseError(GoalServiceError):
    """The response body was not JSON or did not have the expected shape."""


class StepsParseError(GoalParseError):
    """A goal's steps text could not be decoded into a step list."""
