import json
from datetime import date
from typing import Any, List, Union

from pydantic import BaseModel, Field, ValidationError, field_validator

from goal_tracker.models.goal import GoalCategory
from goal_tracker.services.exceptions import StepsParseError

class BaseSchema(BaseModel):
    class Config:
        from_attributes = True
        populate_by_name = True

class GoalStep(BaseModel):
    title: str
    done: bool = False

    class Config:
        extra = "allow"

def parse_steps(text: Union[str, List[Any]]) -> List[GoalStep]:
    """Decode the steps text stored by the Goal Service into structured steps.

    Plain strings inside the list are accepted as step titles. Anything that
    is not a JSON array of steps raises ``StepsParseError``.
    """
    if isinstance(text, str):
        try:
            raw = json.loads(text) if text.strip() else []
        except json.JSONDecodeError as e:
            raise StepsParseError(f"steps is not valid JSON: {e}") from e
    else:
        raw = text

    if not isinstance(raw, list):
        raise StepsParseError(f"steps must be a JSON array, got {type(raw).__name__}")

    steps = []
    for item in raw:
        if isinstance(item, GoalStep):
            steps.append(item)
            continue
        if isinstance(item, str):
            item = {"title": item}
        try:
            steps.append(GoalStep.model_validate(item))
        except ValidationError as e:
            raise StepsParseError(f"invalid step {item!r}: {e}") from e
    return steps

def serialize_steps(steps: List[Any]) -> str:
    return json.dumps([
        step.model_dump() if isinstance(step, GoalStep) else step
        for step in steps
    ])

# Client side goals: steps already decoded

class GoalDraft(BaseSchema):
    title: str
    category: GoalCategory = GoalCategory.MISCELLANEOUS
    completed: int = Field(default=0, ge=0, le=100)  # percentage
    end_date: date = Field(default_factory=date.today, alias="endDate")
    steps: List[GoalStep] = Field(default_factory=list)

    @field_validator("steps", mode="before")
    @classmethod
    def decode_steps(cls, value):
        return parse_steps(value)

    def to_wire(self) -> dict:
        """JSON body for the Goal Service, steps sent as text."""
        body = self.model_dump(by_alias=True, mode="json")
        body["steps"] = serialize_steps(self.steps)
        return body

class GoalRecord(GoalDraft):
    id: int

# Goal Service bodies: steps travel as JSON text

class GoalWireBase(BaseSchema):
    title: str
    category: GoalCategory = GoalCategory.MISCELLANEOUS
    completed: int = Field(default=0, ge=0, le=100)
    end_date: date = Field(alias="endDate")
    steps: str = "[]"

    @field_validator("steps", mode="before")
    @classmethod
    def encode_steps(cls, value):
        if value is None:
            return "[]"
        if isinstance(value, str):
            return value
        return serialize_steps(value)

class GoalCreate(GoalWireBase):
    user_id: int = Field(alias="userId")

class GoalUpdate(GoalWireBase):
    id: int

class GoalRead(GoalWireBase):
    id: int
    user_id: int = Field(alias="userId")

class GoalCreateResponse(BaseModel):
    goal: GoalRead

class GoalDeleteResponse(BaseModel):
    message: str
