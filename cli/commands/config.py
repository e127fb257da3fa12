"""Show the effective generator configuration."""

import os
from pathlib import Path

from dotenv import find_dotenv

from cli.context import get_context
from cli.display import print_settings


def _env_file() -> Path | None:
    """The .env file that IcsConfig.from_env would load, if any."""
    found = find_dotenv(usecwd=True)
    return Path(found).resolve() if found else None


def _source(env_key: str) -> str:
    # empty variables are ignored by IcsConfig.from_env
    return "env" if os.environ.get(env_key) else "default"


def config_command() -> None:
    """Display the .env file in use and each setting with its source."""
    cfg = get_context().config

    print_settings(
        "Configuration",
        _env_file(),
        [
            (
                "Document Defaults",
                [
                    ("prod_id", cfg.prod_id, _source("ICSGEN_PROD_ID")),
                    (
                        "default_timezone",
                        cfg.default_timezone or "[dim]None[/dim]",
                        _source("ICSGEN_DEFAULT_TIMEZONE"),
                    ),
                ],
            ),
            (
                "Logging",
                [
                    ("log_dir", str(cfg.log_dir.resolve()), _source("ICSGEN_LOG_DIR")),
                    ("log_filename", cfg.log_filename, _source("ICSGEN_LOG_FILENAME")),
                ],
            ),
        ],
    )
