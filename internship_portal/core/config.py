from pydantic_settings import BaseSettings
from typing import List, Union
from pydantic import Field, field_validator
import json

class Settings(BaseSettings):

    # Database
    database_url: str = Field(default="sqlite:///./internship_applications.db", alias="DATABASE_URL")

    # Connection pool (ignored for SQLite)
    db_pool_size: int = Field(default=10, alias="DB_POOL_SIZE")
    db_max_overflow: int = Field(default=10, alias="DB_MAX_OVERFLOW")
    db_pool_timeout: int = Field(default=30, alias="DB_POOL_TIMEOUT")
    db_pool_recycle: int = Field(default=300, alias="DB_POOL_RECYCLE")  # 5 minutes

    # CORS (the form and admin pages are served by the front-end)
    cors_origins: Union[List[str], str] = Field(default=[
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ], alias="CORS_ORIGINS")

    # Logging
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # Server
    host: str = Field(default="0.0.0.0", alias="HOST")
    port: int = Field(default=8000, alias="PORT")

    @field_validator("cors_origins", mode="before")
    @classmethod
    def _normalize_cors_origins(cls, origins):
        """CORS_ORIGINS may arrive as a JSON list or a comma-separated string"""
        if not isinstance(origins, str):
            return origins
        try:
            parsed = json.loads(origins)
        except ValueError:
            parsed = None
        if isinstance(parsed, list):
            return [str(o) for o in parsed]
        return [o.strip() for o in origins.split(",") if o.strip()]

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")

    # pydantic v2 model configuration: load `.env` and ignore extra env vars
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
        "populate_by_name": True,
    }

settings = Settings()
