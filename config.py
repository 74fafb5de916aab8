from pydantic_settings import BaseSettings
from typing import List


class Settings(BaseSettings):
    gemini_api_key: str = ""  # blank means "not configured"; checked on every call
    cors_origins: List[str] = [
        "http://localhost:3000",
        "http://localhost:5173",
        "http://localhost:8001",
    ]

    # Gemini settings
    gemini_model: str = "gemini-3-flash-preview"

    # Branding used in prompts and the outreach sign-off
    brand_name: str = "Cehpoint"

    log_level: str = "INFO"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
