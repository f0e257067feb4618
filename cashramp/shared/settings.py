from pydantic_settings import BaseSettings, SettingsConfigDict


class CashrampSettings(BaseSettings):
    """Fallbacks read from ``CASHRAMP_ENV`` / ``CASHRAMP_SECRET_KEY`` or ``.env``."""

    model_config = SettingsConfigDict(
        env_prefix="CASHRAMP_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    env: str = ""
    secret_key: str = ""
