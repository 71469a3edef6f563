# moviedialogue/settings.py
import os
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # core
    APP_NAME: str = Field(default="Movie Dialogue Generator")
    ENV: str = Field(default=os.getenv("APP_ENV", "dev"))
    DEBUG: bool = Field(default=True)
    PORT: int = 8080
    LOG_LEVEL: str = "INFO"

    # LLM providers; LLM_PROVIDER overrides the key-based selection
    LLM_PROVIDER: Optional[str] = None
    OPENAI_API_KEY: Optional[str] = None
    OPENAI_MODEL: str = "gpt-4o-mini"
    OPENAI_BASE_URL: Optional[str] = None
    HUGGINGFACE_API_KEY: Optional[str] = None
    HUGGINGFACE_MODEL_ID: Optional[str] = None
    HUGGINGFACE_API_URL: str = "https://api-inference.huggingface.co"

    # voice synthesis
    ELEVENLABS_API_KEY: Optional[str] = None
    ELEVENLABS_API_URL: str = "https://api.elevenlabs.io/v1"

    REQUEST_TIMEOUT: float = 30.0

    # storage + generation defaults
    DB_PATH: str = "data/dialogues.db"
    GENERATE_CONFIG: Optional[str] = None

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )


settings = Settings()
