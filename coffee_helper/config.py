from typing import Literal
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    # Security: Read from .env, never hardcode defaults here.
    # Optional so the troubleshooting tree works without the assistant.
    OPENAI_API_KEY: str | None = None

    # Model Configuration
    OPENAI_MODEL: str = "gpt-4o"

    # Generation Parameters
    LLM_TEMPERATURE: float = 0.0

    # Troubleshooting tree
    # Every walkthrough session starts here
    ENTRY_POINT_ID: str = "symptom-start"

    # Guide Assistant
    ASSISTANT_MAX_SUGGESTED_GUIDES: int = 3
    GUIDE_SUMMARY_SNIPPET_LENGTH: int = 100

    # Smart plug polling interval advertised to clients
    SMART_PLUG_POLL_INTERVAL_SECONDS: int = 30

    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    # Loads from a .env file in the root directory
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

# Singleton instance
settings = Settings()
