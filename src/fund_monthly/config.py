"""Configuration helpers and Settings container.

`get_settings` reads the environment (after loading the project ``.env``)
into a frozen `Settings` object. MongoDB values are optional; only the
``load`` command needs them.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
import os

from dotenv import load_dotenv

DEFAULT_SOURCE = "Daily Nation and M-PESA APP"

# Explicitly load .env from project root
PROJECT_ROOT = Path(__file__).resolve().parents[2]
load_dotenv(PROJECT_ROOT / ".env")


@dataclass(frozen=True)
class Settings:
    """Container for configuration read from the environment.

    Attributes:
        data_path: Daily input JSON file.
        monthly_path: Monthly output JSON file.
        source_label: Value written to each month's ``metadata.source``.
        log_path: Log file, or None to log to stdout only.
        mongo_uri: MongoDB connection URI, if configured.
        mongo_db: Target MongoDB database name.
        mongo_collection: Target collection for monthly documents.
    """
    data_path: Path
    monthly_path: Path
    source_label: str
    log_path: Path | None
    mongo_uri: str | None
    mongo_db: str
    mongo_collection: str


def get_settings() -> Settings:
    """Read environment variables and return a frozen `Settings` object.

    Raises:
        RuntimeError: if `FUND_SOURCE_LABEL` is set but blank.
    """
    source_label = os.getenv("FUND_SOURCE_LABEL", DEFAULT_SOURCE).strip()
    if not source_label:
        raise RuntimeError("FUND_SOURCE_LABEL must not be blank (unset it to use the default).")

    log_path = os.getenv("FUND_LOG_PATH", "logs/fund_monthly.log").strip()
    mongo_uri = os.getenv("MONGO_URI", "").strip()

    return Settings(
        data_path=Path(os.getenv("FUND_DATA_PATH", "data.json")),
        monthly_path=Path(os.getenv("FUND_MONTHLY_PATH", "monthly.json")),
        source_label=source_label,
        log_path=Path(log_path) if log_path else None,
        mongo_uri=mongo_uri or None,
        mongo_db=os.getenv("MONGO_DB", "funds"),
        mongo_collection=os.getenv("MONGO_COLLECTION", "monthly_funds"),
    )
