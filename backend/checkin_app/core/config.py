from typing import List, Literal
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, field_validator

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

class Settings(BaseSettings):
    DATABASE_URL: str = Field(..., description="Database connection string")
    ALLOWED_ORIGINS: List[str] = Field(
        default=["http://localhost:3000", "http://localhost:5173"],
        description="Origins allowed by CORS and echoed back on error responses"
    )
    LOG_LEVEL: LogLevel = Field(default="INFO", description="Level for the checkin_app logger")
    SQL_ECHO: bool = Field(default=False, description="Echo SQL statements (query debugging)")
    DEFAULT_SEARCH_RADIUS_KM: float = Field(default=10.0, description="Venue search radius when the client omits one")
    MAX_SEARCH_RADIUS_KM: float = Field(default=50.0, description="Largest venue search radius accepted from clients")
    FEED_DEFAULT_LIMIT: int = Field(default=20, description="Feed items returned when the client omits a limit")
    FEED_MAX_LIMIT: int = Field(default=100, description="Largest feed/check-in list limit accepted from clients")

    model_config = SettingsConfigDict(env_file=".env")

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def normalize_log_level(cls, v):
        if isinstance(v, str):
            return v.strip().upper()
        return v

settings = Settings()
