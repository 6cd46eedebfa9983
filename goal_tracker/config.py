from pydantic_settings import BaseSettings
from functools import lru_cache
from typing import Optional
import logging
from dotenv import load_dotenv

load_dotenv()

class Settings(BaseSettings):
    API_PREFIX: str = "/api"
    DATABASE_URL: str = "sqlite:///./goals.db"
    ENVIRONMENT: str = "development"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Goal Service location
    PROD_API_ENVIRONMENT: str = ""
    LOCAL_API_URL: str = "http://localhost:3001"
    REQUEST_TIMEOUT: float = 10.0

    # Where the Goal Service listens when run directly
    HOST: str = "127.0.0.1"
    PORT: int = 3001

    # Page the goal view sends visitors to when there is no session
    ENTRY_PAGE: str = "Home"

    class Config:
        env_file = ".env"

@lru_cache()
def get_settings():
    return Settings()

settings = get_settings()

def build_path(route: str, config: Optional[Settings] = None) -> str:
    """Absolute URL of a Goal Service route for the current environment."""
    config = config or settings
    route = route.lstrip("/")
    if config.ENVIRONMENT == "production":
        return f"https://{config.PROD_API_ENVIRONMENT}/{route}"
    return f"{config.LOCAL_API_URL.rstrip('/')}/{route}"

def setup_logging(level: Optional[str] = None) -> None:
    logging.basicConfig(
        level=(level or settings.LOG_LEVEL).upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
