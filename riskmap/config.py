from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite:///./riskmap.db"

    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"

    PROJECTION_MODE: Literal["constant", "temporal"] = "constant"
    WEIGHT_TOLERANCE: float = 0.01

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

settings = Settings()
