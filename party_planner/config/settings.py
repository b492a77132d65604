from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # App
    debug: bool = False
    page_title: str = "Party Planner"
    mount_id: str = "app"

    # Remote API
    api_base_url: str = "https://fsa-crud-2aa9294fe819.herokuapp.com/api"
    cohort: str = "2503-ftb-et-web-pt"

    # Off reproduces "last response wins" across concurrent actions
    reject_stale_responses: bool = False

    ENVIRONMENT: str = "Production"

    SENTRY_DSN: str = ""
    SENTRY_TRACES_SAMPLE_RATE: float = 0.0
    SENTRY_PROFILES_SAMPLE_RATE: float = 0.0

    @property
    def api_url(self) -> str:
        base = self.api_base_url.rstrip("/")
        cohort = self.cohort.strip("/")
        return f"{base}/{cohort}" if cohort else base

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
