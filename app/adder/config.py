"""
Configuration Module

Loads settings from environment variables and an optional .env file.
With nothing set, the defaults give the plain prompt/read/print run.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

from .calculator import OVERFLOW_POLICIES

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class Config:
    """
    Application configuration.

    All settings can be overridden through ADDER_* environment variables.
    """

    # === Arithmetic ===
    overflow_policy: str = "reject"     # "reject" or "wrap"

    # === Logging ===
    log_level: str = "WARNING"
    log_json: bool = False
    log_file: Optional[str] = None

    @classmethod
    def from_env(cls, env_file: Optional[Path] = None) -> "Config":
        """
        Load configuration from environment variables.

        Values from env_file (default: ./.env) never override variables
        already present in the environment.
        """
        load_dotenv(dotenv_path=env_file or Path.cwd() / ".env")

        def get_bool(key: str, default: bool) -> bool:
            """Helper to parse boolean env vars."""
            value = os.getenv(key, str(default)).lower()
            return value in ("true", "1", "yes")

        return cls(
            overflow_policy=os.getenv("ADDER_OVERFLOW_POLICY", "reject").lower(),
            log_level=os.getenv("ADDER_LOG_LEVEL", "WARNING").upper(),
            log_json=get_bool("ADDER_LOG_JSON", False),
            log_file=os.getenv("ADDER_LOG_FILE") or None,
        )

    def validate(self) -> List[str]:
        """
        Validate the configuration.

        Returns:
            List of error messages (empty if valid)
        """
        errors = []

        if self.overflow_policy not in OVERFLOW_POLICIES:
            errors.append(
                f"ADDER_OVERFLOW_POLICY must be one of: {', '.join(OVERFLOW_POLICIES)}"
            )

        if self.log_level.upper() not in VALID_LOG_LEVELS:
            errors.append(f"ADDER_LOG_LEVEL must be one of: {', '.join(VALID_LOG_LEVELS)}")

        return errors

    def __post_init__(self):
        errors = self.validate()
        if errors:
            raise ValueError(f"Configuration errors: {errors}")


def load_config() -> Config:
    """
    Load configuration from environment.

    Usage:
        from adder.config import load_config
        config = load_config()
    """
    return Config.from_env()
