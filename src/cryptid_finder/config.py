"""Runtime configuration for Cryptid Finder."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Environment-driven runtime settings."""

    model_config = SettingsConfigDict(env_prefix="CRYPTID_FINDER_", env_file=".env", extra="ignore")

    app_name: str = "cryptid-finder"
    log_level: str = "WARNING"
    with_inverted_clues: bool = Field(
        default=False,
        description="Include inverted clues when a snapshot does not say otherwise.",
    )
    snapshot_path: str | None = Field(
        default=None,
        description="Default game snapshot file for CLI commands.",
    )


settings = Settings()
