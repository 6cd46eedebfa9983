from fastapi import APIRouter
from goal_tracker.api import goals

api_router = APIRouter()

# Include all routers
api_router.include_router(goals.router)
