"""Configuration for calendar generation."""

import os
from pathlib import Path

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, Field


class IcsConfig(BaseModel):
    """Generator configuration with Pydantic validation."""

    # Document defaults
    prod_id: str = Field(default="-//icsgen//EN", min_length=1)
    default_timezone: str | None = None

    # Logging
    log_dir: Path = Field(default=Path("logs"))
    log_filename: str = Field(default="icsgen.log")

    @classmethod
    def from_env(cls) -> "IcsConfig":
        """Load configuration from environment variables and .env file."""
        load_dotenv(find_dotenv(usecwd=True))

        config_dict = {}

        if os.environ.get("ICSGEN_PROD_ID"):
            config_dict["prod_id"] = os.environ["ICSGEN_PROD_ID"]
        if os.environ.get("ICSGEN_DEFAULT_TIMEZONE"):
            config_dict["default_timezone"] = os.environ["ICSGEN_DEFAULT_TIMEZONE"]

        if "ICSGEN_LOG_DIR" in os.environ:
            config_dict["log_dir"] = Path(os.environ["ICSGEN_LOG_DIR"])
        if "ICSGEN_LOG_FILENAME" in os.environ:
            config_dict["log_filename"] = os.environ["ICSGEN_LOG_FILENAME"]

        return cls(**config_dict)
