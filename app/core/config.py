from pydantic_settings import BaseSettings
from typing import Optional, List

class Settings(BaseSettings):
    PROJECT_NAME: str = "Course Catalog API"
    VERSION: str = "1.0.0"

    # CORS
    ALLOWED_ORIGINS: List[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
        "http://localhost:8000",
    ]

    # Database Configuration
    DATABASE_HOST: Optional[str] = None
    DATABASE_PORT: str = "5432"
    DATABASE_USER: str = "postgres"
    DATABASE_PASSWORD: str = "postgres"
    DATABASE_NAME: str = "course_catalog"

    DATABASE_URL: str = ""
    TEST_DATABASE_URL: Optional[str] = None

    # Rating statistics cache
    CACHE_ENABLED: bool = True
    RATING_STATS_CACHE_TTL: int = 300

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_DIR: str = "logs"

    # Create missing tables on startup; schema migrations are managed elsewhere.
    AUTO_CREATE_TABLES: bool = True

    def __init__(self, **data):
        super().__init__(**data)
        if not self.DATABASE_URL:
            if self.DATABASE_HOST:
                self.DATABASE_URL = (
                    f'postgresql://{self.DATABASE_USER}:{self.DATABASE_PASSWORD}'
                    f'@{self.DATABASE_HOST}:{self.DATABASE_PORT}/{self.DATABASE_NAME}'
                )
            else:
                self.DATABASE_URL = "sqlite:///./course_catalog.db"

    class Config:
        env_file = ".env"

settings = Settings()
