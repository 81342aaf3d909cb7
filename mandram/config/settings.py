from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Literal, Optional, List


class Settings(BaseSettings):
    # Supabase (the NEXT_PUBLIC_* names are accepted so the frontend .env can be shared)
    supabase_url: str = Field(
        default="",
        validation_alias=AliasChoices("supabase_url", "next_public_supabase_url"),
    )
    supabase_key: str = Field(
        default="",
        validation_alias=AliasChoices("supabase_key", "supabase_anon_key", "next_public_supabase_anon_key"),
    )
    supabase_service_role_key: Optional[str] = None  # Preferred for keepalive writes

    # App
    app_name: str = "mandram-site"
    debug: bool = False
    environment: str = "development"  # development | staging | production
    log_level: str = "INFO"
    cors_origins: str = "http://localhost:3000,http://127.0.0.1:3000"
    rate_limit: str = "100/minute"  # slowapi format, e.g. "100/minute"
    rate_limit_enabled: bool = True

    # Site content
    past_events_limit: int = 10
    team_years: str = "2026,2025,2024"  # newest first
    gallery_preview_count: int = 6
    carousel_interval_seconds: float = 5.0
    carousel_idle_resume_seconds: float = 10.0

    # Keepalive
    keepalive_interval_seconds: int = 0  # 0 disables the in-process scheduler
    keepalive_mode: Literal["write", "read"] = "write"

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    def get_cors_origins_list(self) -> List[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]

    def get_team_years(self) -> List[int]:
        """Configured team years, newest first."""
        years = {int(y.strip()) for y in self.team_years.split(",") if y.strip()}
        return sorted(years, reverse=True)

    def has_supabase_credentials(self) -> bool:
        return bool(self.supabase_url and (self.supabase_service_role_key or self.supabase_key))

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        env_prefix="",
        extra="ignore",
        populate_by_name=True,
    )


settings = Settings()
