import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from goal_tracker.api import api_router
from goal_tracker.config import settings, setup_logging
from goal_tracker.database import create_db_and_tables

setup_logging()

app = FastAPI(
    title="Goal Tracker",
    description="Goal Service: stores goals and their steps per user",
    version="1.0.0",
)

# CORS middleware configuration
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router, prefix=settings.API_PREFIX)

@app.on_event("startup")
async def on_startup():
    create_db_and_tables()

@app.get("/")
async def root():
    return {"message": "Welcome to the Goal Tracker API"}

if __name__ == "__main__":
    uvicorn.run("goal_tracker.main:app", host=settings.HOST, port=settings.PORT, reload=settings.DEBUG)
