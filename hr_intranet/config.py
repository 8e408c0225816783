import secrets

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Random per process unless configured; restarts invalidate every cookie
    secret_key: str = Field(default_factory=lambda: secrets.token_urlsafe(32))

    # Session cookie settings
    session_algorithm: str = "HS256"
    session_cookie_name: str = "hr_session"
    session_cookie_secure: bool = False
    session_ttl_minutes: int = 60 * 24  # 24 hours, 0 disables expiry

    # Single admin account
    admin_username: str = "admin"
    admin_password: str = ""

    search_max_length: int = 20
    search_max_results: int = 3

    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 3000

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


settings = Settings()
