from functools import lru_cache
from typing import Literal, Optional
import os
from pydantic_settings import BaseSettings, SettingsConfigDict

EnvName = Literal["development", "production"]

def _env_file_for(app_env: EnvName) -> str:
    return ".env.development" if app_env == "development" else ".env.production"

class Settings(BaseSettings):

    # Core
    APP_ENV: EnvName = "development"
    APP_NAME: str = "ProductsCRUD"
    DEBUG: bool = False

    # HTTP listener
    HTTP_HOST: str = "0.0.0.0"
    HTTP_PORT: int = 9191

    # Cassandra (no auth configured)
    CASSANDRA_CONTACT_POINTS: str = "127.0.0.1"   # CSV, e.g. "10.0.0.1,10.0.0.2"
    CASSANDRA_PORT: int = 9042
    CASSANDRA_KEYSPACE: str = "my_company"
    CASSANDRA_LOCAL_DC: Optional[str] = None
    CASSANDRA_CREATE_SCHEMA: bool = False

    # CORS
    cors_allowed_headers: list[str] = [
        "x-requested-with",
        "Access-Control-Allow-Origin",
        "origin",
        "Content-Type",
        "accept",
    ]
    cors_allowed_methods: list[str] = ["GET", "POST", "PUT", "DELETE", "OPTIONS"]

    # pydantic-settings config will be set dynamically in the factory below
    model_config = SettingsConfigDict(env_file=None, case_sensitive=True)

    @property
    def contact_points(self) -> list[str]:
        return [h.strip() for h in self.CASSANDRA_CONTACT_POINTS.split(",") if h.strip()]

@lru_cache
def get_settings() -> Settings:
    """
    Factory that chooses the right .env file based on APP_ENV.
    Cache makes it cheap to inject via FastAPI dependencies.
    """
    app_env: EnvName = os.getenv("APP_ENV", "development")  # earliest switch
    env_file = _env_file_for(app_env)
    return Settings(
                _env_file=env_file,  # load .env.development or .env.production
                _env_file_encoding="utf-8"
    )
