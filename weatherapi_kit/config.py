# ABOUTME: Environment-driven settings for the weather client.
# ABOUTME: Reads WEATHERAPI_* variables, loading a .env file first via python-dotenv.

import os

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field

from weatherapi_kit.weather_service import BASE_URL


class Settings(BaseModel):
    """Client settings: API key, service base URL and HTTP timeout in seconds."""

    model_config = ConfigDict(frozen=True)

    api_key: str | None = None
    base_url: str = BASE_URL
    timeout: float = Field(default=10.0, gt=0)

    @classmethod
    def from_env(cls) -> "Settings":
        load_dotenv()
        values = {
            "api_key": os.environ.get("WEATHERAPI_KEY") or None,
            "base_url": os.environ.get("WEATHERAPI_BASE_URL"),
            "timeout": os.environ.get("WEATHERAPI_TIMEOUT"),
        }
        return cls(**{k: v for k, v in values.items() if v is not None})
