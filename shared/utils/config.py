from pydantic_settings import BaseSettings
from functools import lru_cache
from typing import Optional

class Settings(BaseSettings):
    # Congress.gov (federal bills)
    congress_api_key: Optional[str] = None
    congress_base_url: str = "https://api.congress.gov/v3"
    current_congress: int = 119

    # LegiScan (state bills)
    legiscan_api_key: Optional[str] = None
    legiscan_base_url: str = "https://api.legiscan.com"

    # Legistar (city councils, no key required)
    legistar_base_url: str = "https://webapi.legistar.com/v1"

    # Anthropic (optional plain-language bill summaries)
    anthropic_api_key: Optional[str] = None
    anthropic_base_url: str = "https://api.anthropic.com/v1"
    summary_model: str = "claude-sonnet-4-20250514"

    # Outbound HTTP
    http_timeout: float = 15.0

    # Server
    host: str = "0.0.0.0"
    port: int = 8000

    # Environment
    environment: str = "development"
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        case_sensitive = False
        extra = "ignore"

@lru_cache()
def get_settings() -> Settings:
    return Settings()
