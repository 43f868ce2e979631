from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    base_url: str | None = None
    public_key: str | None = None
    secret_key: str | None = None
    svix_signing_secret: str | None = None
    request_timeout: float = 10.0
    webhook_tolerance: int = 300  # seconds
    webhook_path: str = "/webhooks/recurrente"
    max_body_size: int = 1_048_576  # 1 MiB

    model_config = SettingsConfigDict(
        env_prefix="RECURRENTE_", env_file=".env", extra="ignore"
    )

    @property
    def api_url(self) -> str:
        return f"{(self.base_url or '').rstrip('/')}/api"


@lru_cache
def get_settings() -> Settings:
    return Settings()
