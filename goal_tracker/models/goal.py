from sqlmodel import SQLModel, Field
from typing import Optional
from datetime import date
from enum import Enum as PyEnum

class GoalCategory(str, PyEnum):
    PERSONAL_DEVELOPMENT = "Personal Development"
    HEALTH_FITNESS = "Health & Fitness"
    CAREER = "Career"
    FINANCE = "Finance"
    EDUCATION = "Education"
    RELATIONSHIP = "Relationship"
    FUN_ENTERTAINMENT = "Fun & Entertainment"
    MISCELLANEOUS = "Miscellaneous"

# "No filter" entry of the category select
ALL_CATEGORIES = "--Sort by category--"

class GoalStatus(str, PyEnum):
    NOT_STARTED = "Not Started"
    IN_PROGRESS = "In Progress"
    COMPLETED = "Completed"

class GoalTab(str, PyEnum):
    ALL = "All"
    NOT_STARTED = "Not Started"
    IN_PROGRESS = "In Progress"
    COMPLETED = "Completed"

class Goal(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(index=True)

    # Goal details
    title: str
    category: GoalCategory = Field(default=GoalCategory.MISCELLANEOUS)
    end_date: date

    # Progress tracking
    completed: int = Field(default=0, ge=0, le=100)  # percentage
    steps: str = Field(default="[]")  # JSON string of the step list
