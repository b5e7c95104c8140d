"""Configuration management for the flood risk simulator.

Settings are read from environment variables and the ``.env`` file at the
repository root via Pydantic Settings. Model calibration constants live with
the model code and are intentionally absent here.
"""

from datetime import date, datetime
from typing import ClassVar, Optional
import os

import pytz
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables and .env file.

    Attributes
    ----------
    APP_NAME : str
        Application name identifier.
    API_TOKEN : str, optional
        Bearer token for API authentication.
    LOG_LEVEL : str
        Logging level name for the ``flood_simulator`` loggers.
    TIMEZONE : str
        Olson timezone used to pick the default start date.
    """
    APP_NAME: str = "flood-risk-simulator"
    API_TOKEN: Optional[str] = None
    LOG_LEVEL: str = "INFO"
    TIMEZONE: str = "Asia/Kolkata"

    env_path: ClassVar[str] = os.path.join(os.path.dirname(
        os.path.dirname(os.path.dirname(os.path.abspath(__file__)))), ".env")
    model_config = SettingsConfigDict(env_file=env_path, extra="ignore")


def local_today(tz_name: str) -> date:
    """Current calendar date in ``tz_name``."""
    return datetime.now(pytz.timezone(tz_name)).date()


settings = Settings()
