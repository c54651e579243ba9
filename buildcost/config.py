from typing import List

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite:///./projects.db"
    STORE_BACKEND: str = "sql"  # 'sql' | 'memory'
    CORS_ORIGINS: List[str] = ["*"]
    LOG_LEVEL: str = "INFO"
    COMPANY_NAME: str = "Building Cost Estimator"

    class Config:
        env_file = ".env"


settings = Settings()
