from typing import Optional

from sqlalchemy.engine import Engine
from sqlmodel import SQLModel, create_engine, Session
from goal_tracker.config import settings

def make_engine(database_url: str, echo: bool = False, **kwargs) -> Engine:
    return create_engine(
        database_url,
        echo=echo,
        connect_args={"check_same_thread": False} if database_url.startswith("sqlite") else {},
        **kwargs
    )

engine = make_engine(settings.DATABASE_URL, echo=settings.DEBUG)

def create_db_and_tables(bind: Optional[Engine] = None):
    """Create the goals table on the given engine (the configured one by default)"""
    # Register the table models on the metadata
    import goal_tracker.models  # noqa: F401
    SQLModel.metadata.create_all(bind or engine)

def get_session():
    with Session(engine) as session:
        yield session
