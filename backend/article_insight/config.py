"""Application settings loaded from environment variables."""
from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings"""

    # LLM API
    llm_api_key: str = ""
    llm_api_base_url: str = ""
    llm_model: str = "gpt-4o-mini"
    # Used in URL mode, where the model is allowed to search the web
    llm_search_model: str = "gpt-4o-mini-search-preview"
    llm_timeout_seconds: float = 60.0
    llm_temperature: float = 0.4
    llm_max_tokens: int = 2000

    # Analysis
    history_capacity: int = 10
    max_content_chars: int = 50000
    max_url_chars: int = 2048
    max_sessions: int = 1000
    source_name: str = "Mpelembe Network"
    source_domain: str = "mpelembe.net"

    # App Config
    debug: bool = False
    log_level: str = "INFO"
    log_dir: str = "logs"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls,
        init_settings,
        env_settings,
        dotenv_settings,
        file_secret_settings,
    ):
        return (
            env_settings,
            dotenv_settings,
            init_settings,
            file_secret_settings,
        )


@lru_cache
def get_settings() -> Settings:
    """Return the cached settings instance"""
    return Settings()
