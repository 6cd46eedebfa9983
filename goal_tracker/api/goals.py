from typing import List
import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from goal_tracker.database import get_session
from goal_tracker.crud import goals as crud
from goal_tracker.schemas.goal import (
    GoalCreate,
    GoalUpdate,
    GoalRead,
    GoalCreateResponse,
    GoalDeleteResponse,
)

router = APIRouter(prefix="/goals", tags=["goals"])
logger = logging.getLogger(__name__)


@router.get("/{user_id}", response_model=List[GoalRead])
async def read_user_goals(
    user_id: int,
    session: Session = Depends(get_session)
) -> List[GoalRead]:
    """Get all goals for a user"""
    try:
        goals = crud.get_goals_for_user(session, user_id)
    except SQLAlchemyError as e:
        logger.error(f"Failed to fetch goals for user {user_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve goals")
    return [GoalRead.model_validate(goal) for goal in goals]


@router.post("", response_model=GoalCreateResponse)
async def create_goal(
    goal: GoalCreate,
    session: Session = Depends(get_session)
) -> GoalCreateResponse:
    """Create a goal; the response wraps the stored record"""
    try:
        db_goal = crud.create_goal(session, goal)
    except SQLAlchemyError as e:
        logger.error(f"Failed to create goal for user {goal.user_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to create goal")
    return GoalCreateResponse(goal=GoalRead.model_validate(db_goal))


@router.put("", response_model=GoalRead)
async def update_goal(
    goal: GoalUpdate,
    session: Session = Depends(get_session)
) -> GoalRead:
    """Replace a goal by id"""
    try:
        db_goal = crud.update_goal(session, goal)
    except SQLAlchemyError as e:
        logger.error(f"Failed to update goal {goal.id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to update goal")

    if db_goal is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Goal not found")
    return GoalRead.model_validate(db_goal)


@router.delete("/{goal_id}", response_model=GoalDeleteResponse)
async def delete_goal(
    goal_id: int,
    session: Session = Depends(get_session)
) -> GoalDeleteResponse:
    """Delete a goal by id"""
    try:
        deleted = crud.delete_goal(session, goal_id)
    except SQLAlchemyError as e:
        logger.error(f"Failed to delete goal {goal_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to delete goal")

    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Goal not found")
    return GoalDeleteResponse(message=f"Goal {goal_id} deleted successfully")
