import logging
import os
import sys
from dataclasses import dataclass

from vehicle_rental.utils.constants import DEFAULT_DATA_FILE


@dataclass
class Config:
    """Configuration for the rental desk, read from the environment."""

    data_file: str = DEFAULT_DATA_FILE
    log_level: str = "WARNING"
    app_env: str = "production"

    @classmethod
    def from_env(cls) -> "Config":
        return cls(
            data_file=os.getenv("RENTAL_DATA_FILE") or DEFAULT_DATA_FILE,
            log_level=(os.getenv("RENTAL_LOG_LEVEL") or "WARNING").upper(),
            app_env=os.getenv("APP_ENV") or "production",
        )

    @property
    def testing(self) -> bool:
        return self.app_env == "test"


def setup_logging(level="WARNING"):
    """Send log records to stderr so they never mix with the menu output."""
    root = logging.getLogger()
    root.setLevel(level)
    # Remove existing handlers to avoid duplication
    for h in list(root.handlers):
        root.removeHandler(h)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s"))
    root.addHandler(handler)
