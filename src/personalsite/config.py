"""Application configuration."""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    content_dir: Path = Path("Content")
    output_dir: Path = Path("Output")
    public_dir: Path = Path("Public")

    site_url: str = "https://christianelies.de"
    site_name: str = "Meet crelies"
    site_description: str = "My personal website including my blog posts"
    language: str = "en"

    deploy_remote: str | None = None
    deploy_branch: str = "master"

    debug: bool = False
    app_title: str = "Welcome"
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="PERSONALSITE_",
        env_file=".env",
        env_file_encoding="utf-8",
    )


settings = Settings()
