from functools import lru_cache
from typing import List

from pydantic_settings import BaseSettings

from app.core.security import HMAC_ALGORITHMS


class Settings(BaseSettings):
    JWT_SECRET: str
    # env: JWT_ALGORITHMS='["HS256"]' to narrow
    JWT_ALGORITHMS: List[str] = list(HMAC_ALGORITHMS)

    TOKEN_COOKIE_NAME: str = "token"
    LOGIN_PATH: str = "/auth/login"

    ENV: str = "local"
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"


@lru_cache
def get_settings() -> Settings:
    return Settings()
