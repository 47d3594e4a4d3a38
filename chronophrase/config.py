"""Configuration for chronophrase."""

import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, Field

from chronophrase.constants import DEFAULT_FIRST_WEEKDAY, DEFAULT_LOCALE


class HumanizeConfig(BaseModel):
    """Humanizer configuration with Pydantic validation."""

    # Phrase tables
    locale: str = Field(default=DEFAULT_LOCALE)
    phrase_dir: Path | None = None

    # Calendar rules
    first_weekday: int = Field(default=DEFAULT_FIRST_WEEKDAY, ge=0, le=6)

    # Logging
    log_dir: Path | None = None
    log_filename: str = Field(default="chronophrase.log")

    @classmethod
    def from_env(cls) -> "HumanizeConfig":
        """Load configuration from environment variables and .env file."""
        load_dotenv()

        config_dict = {}

        # Phrase tables
        if "CHRONOPHRASE_LOCALE" in os.environ:
            config_dict["locale"] = os.environ["CHRONOPHRASE_LOCALE"]
        if "PHRASE_DIR" in os.environ:
            config_dict["phrase_dir"] = Path(os.environ["PHRASE_DIR"])

        # Calendar rules
        if "FIRST_WEEKDAY" in os.environ:
            try:
                first_weekday = int(os.environ["FIRST_WEEKDAY"])
            except ValueError:
                first_weekday = None
            if first_weekday is not None and 0 <= first_weekday <= 6:
                config_dict["first_weekday"] = first_weekday

        # Logging
        if "LOG_DIR" in os.environ:
            config_dict["log_dir"] = Path(os.environ["LOG_DIR"])
        if "LOG_FILENAME" in os.environ:
            config_dict["log_filename"] = os.environ["LOG_FILENAME"]

        return cls(**config_dict)
