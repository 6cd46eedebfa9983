from sqlmodel import Session, select
from typing import List, Optional

from goal_tracker.models.goal import Goal
from goal_tracker.schemas.goal import GoalCreate, GoalUpdate

def get_goal(session: Session, goal_id: int) -> Optional[Goal]:
    """Get a goal by ID"""
    return session.get(Goal, goal_id)

def get_goals_for_user(session: Session, user_id: int) -> List[Goal]:
    """Get all goals owned by a user, in creation order"""
    query = select(Goal).where(Goal.user_id == user_id).order_by(Goal.id)
    return list(session.exec(query).all())

def create_goal(session: Session, goal: GoalCreate) -> Goal:
    """Create a new goal; the database assigns the id"""
    db_goal = Goal(**goal.model_dump())
    session.add(db_goal)
    session.commit()
    session.refresh(db_goal)
    return db_goal

def update_goal(session: Session, goal: GoalUpdate) -> Optional[Goal]:
    """Replace every field of an existing goal"""
    db_goal = session.get(Goal, goal.id)
    if not db_goal:
        return None

    for key, value in goal.model_dump(exclude={"id"}).items():
        setattr(db_goal, key, value)

    session.add(db_goal)
    session.commit()
    session.refresh(db_goal)
    return db_goal

def delete_goal(session: Session, goal_id: int) -> bool:
    """Delete a goal"""
    db_goal = session.get(Goal, goal_id)
    if not db_goal:
        return False

    session.delete(db_goal)
    session.commit()
    return True
