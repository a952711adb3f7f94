"""Service configuration from the environment (and a local .env file, if present)."""

import os
from dataclasses import dataclass

from dotenv import load_dotenv


@dataclass(frozen=True)
class Settings:
    default_method: str  # method name accepted by ezan.methods.method_from_name
    default_madhab: str  # "Shafi" or "Hanafi"
    log_level: str


def load_settings() -> Settings:
    """Read EZAN_* variables. Values already in the environment win over .env."""
    load_dotenv()
    return Settings(
        default_method=os.environ.get("EZAN_DEFAULT_METHOD", "Turkey"),
        default_madhab=os.environ.get("EZAN_DEFAULT_MADHAB", "Shafi"),
        log_level=os.environ.get("EZAN_LOG_LEVEL", "INFO").upper(),
    )
