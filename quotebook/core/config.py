# Application settings, read from the environment and an optional .env file.

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

BASE_DIR = Path(__file__).resolve().parent.parent.parent


class Settings(BaseSettings):
    PROJECT_NAME: str = "Quotebook"
    VERSION: str = "0.1.0"
    BRIEF_DESCRIPTION: str = "A small searchable, multi-language collection of quotations."

    ENV: str = Field("development", description="Application environment (e.g., production, development)")
    LOG_LEVEL: str = Field("INFO", description="Root log level")

    # --- Languages & search ---
    DEFAULT_LANG: str = Field("en", description="Language used when the request names none or an unknown one")
    MAX_QUERY_LEN: int = Field(200, description="Search keywords longer than this are truncated")

    # --- Static sources ---
    STATIC_DIR: Path = BASE_DIR / "static"
    TEMPLATES_DIR: Path = BASE_DIR / "templates"
    TRANSLATIONS_PATH: Path = BASE_DIR / "static" / "locales" / "translations.json"
    QUOTES_PATH: Path = BASE_DIR / "static" / "data" / "quotes.json"
    FRAGMENTS_DIR: Path = BASE_DIR / "static" / "common"

    # --- Navigation targets written into the shared header ---
    HOME_URL: str = "/"
    ABOUT_URL: str = "/about"
    SPONSORS_URL: str = "/static/sponsors/index.html"

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore"
    )

settings = Settings()
